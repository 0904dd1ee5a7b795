"""
TSX Analyzer Error Hierarchy
============================

This module defines the exception hierarchy for the whole analyzer.
All exceptions inherit from AnalyzerError, allowing callers to catch all
analyzer-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
AnalyzerError (base)
├── LexerError - lexical scan failures
│   ├── InvalidCharacterError - character that cannot start any token
│   └── UnterminatedLiteralError - string, template, regex or comment left open
├── ValidatorError - the external parser could not be run
├── OptimizerError - debug-call pattern could not be compiled
└── ConfigError - invalid configuration value

Lexer errors never escape the tokenizer's public entry point: the scan
stops at the first unscannable point and returns what it has collected.
They still carry full location information so the stop point can be
logged and shown by the command-line tools.

Error Message Format
--------------------
    filename:line:column: error: description
        source_line_text
            ^ (pointer to error location)
    hint: suggestion for fixing (when available)

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for request bodies)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Base Exception Class
# =============================================================================

class AnalyzerError(Exception):
    """
    Base exception for all analyzer errors.

    Provides common formatting with source location, source line context
    and an optional hint:

        snippet.tsx:3:9: error: unterminated string literal
            let s = "hello
                    ^
        hint: add a closing quote to complete the string

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexer Errors
# =============================================================================

class LexerError(AnalyzerError):
    """
    Lexical error raised by the fine-grained scanner.

    Examples:
        - Character that cannot begin any token (e.g. U+0000)
        - Unterminated string, template, regex or block comment
    """
    pass


class InvalidCharacterError(LexerError):
    """
    Invalid character in source code.

    Raised when the scanner meets a character that cannot start any
    JavaScript or TypeScript token.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character '{char}' (U+{ord(char):04X})",
            location=location,
            source_line=source_line,
        )


class UnterminatedLiteralError(LexerError):
    """
    A literal or comment that runs off the end of its line or the input.

    The ``kind`` attribute names what was left open ("string",
    "template", "regular expression", "comment").
    """

    CLOSERS = {
        "string": "a closing quote",
        "template": "a closing '`'",
        "regular expression": "a closing '/'",
        "comment": "a closing '*/'",
    }

    def __init__(
        self,
        kind: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.kind = kind
        closer = self.CLOSERS.get(kind, "a terminator")
        super().__init__(
            f"unterminated {kind} literal" if kind != "comment" else "unterminated comment",
            location=location,
            hint=f"add {closer} to complete the {kind}",
            source_line=source_line,
        )


# =============================================================================
# Validator, Optimizer and Configuration Errors
# =============================================================================

class ValidatorError(AnalyzerError):
    """
    The external parser failed to run at all.

    This is distinct from the parser *rejecting* the code, which is a
    normal outcome reported through ValidationOutcome.
    """
    pass


class OptimizerError(AnalyzerError):
    """
    The debug-call removal pattern could not be built.

    Raised when a configured callee produces an invalid regular
    expression. The optimizer catches it and degrades to a no-op.
    """
    pass


class ConfigError(AnalyzerError):
    """Invalid configuration value (unknown tokenizer, dialect, etc.)."""
    pass
