"""
Public Token Taxonomy
=====================

The closed set of token kinds either tokenizer may emit, and the Token
record handed to callers. Internal scanner categories (see
``tsx_analyzer.lexer.scanner.JSTokenType``) never leave the lexer; they
are mapped onto these names first.

Pure formatting (whitespace, line terminators, comments) has no kind
here at all, so it cannot be emitted.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass
from enum import Enum


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(str, Enum):
    """
    Display kinds for tokens.

    The value is the string shown to users and serialized on the wire.
    """

    # === Coarse classifier kinds (Design A) ===
    KEYWORD = "KEYWORD"
    PUNCTUATION = "PUNCTUATION"
    LITERAL = "LITERAL"
    ARROW = "ARROW"                         # => (shared with the lexer)

    # === Names and literals ===
    IDENTIFIER = "IDENTIFIER"
    PRIVATE_IDENTIFIER = "PRIVATE_IDENTIFIER"   # #field
    NUMERIC_LITERAL = "NUMERIC_LITERAL"
    BIGINT_LITERAL = "BIGINT_LITERAL"
    STRING_LITERAL = "STRING_LITERAL"
    REGEX_LITERAL = "REGEX_LITERAL"
    TEMPLATE_LITERAL = "TEMPLATE_LITERAL"   # `text` without substitutions
    TEMPLATE_HEAD = "TEMPLATE_HEAD"         # `text${
    TEMPLATE_MIDDLE = "TEMPLATE_MIDDLE"     # }text${
    TEMPLATE_TAIL = "TEMPLATE_TAIL"         # }text`

    # === Reserved words ===
    BREAK_KEYWORD = "BREAK_KEYWORD"
    CASE_KEYWORD = "CASE_KEYWORD"
    CATCH_KEYWORD = "CATCH_KEYWORD"
    CLASS_KEYWORD = "CLASS_KEYWORD"
    CONST_KEYWORD = "CONST_KEYWORD"
    CONTINUE_KEYWORD = "CONTINUE_KEYWORD"
    DEBUGGER_KEYWORD = "DEBUGGER_KEYWORD"
    DEFAULT_KEYWORD = "DEFAULT_KEYWORD"
    DELETE_KEYWORD = "DELETE_KEYWORD"
    DO_KEYWORD = "DO_KEYWORD"
    ELSE_KEYWORD = "ELSE_KEYWORD"
    ENUM_KEYWORD = "ENUM_KEYWORD"
    EXPORT_KEYWORD = "EXPORT_KEYWORD"
    EXTENDS_KEYWORD = "EXTENDS_KEYWORD"
    FALSE_KEYWORD = "FALSE_KEYWORD"
    FINALLY_KEYWORD = "FINALLY_KEYWORD"
    FOR_KEYWORD = "FOR_KEYWORD"
    FUNCTION_KEYWORD = "FUNCTION_KEYWORD"
    IF_KEYWORD = "IF_KEYWORD"
    IMPORT_KEYWORD = "IMPORT_KEYWORD"
    IN_KEYWORD = "IN_KEYWORD"
    INSTANCEOF_KEYWORD = "INSTANCEOF_KEYWORD"
    INTERFACE_KEYWORD = "INTERFACE_KEYWORD"
    LET_KEYWORD = "LET_KEYWORD"
    NEW_KEYWORD = "NEW_KEYWORD"
    NULL_KEYWORD = "NULL_KEYWORD"
    PACKAGE_KEYWORD = "PACKAGE_KEYWORD"
    PRIVATE_KEYWORD = "PRIVATE_KEYWORD"
    PROTECTED_KEYWORD = "PROTECTED_KEYWORD"
    PUBLIC_KEYWORD = "PUBLIC_KEYWORD"
    RETURN_KEYWORD = "RETURN_KEYWORD"
    STATIC_KEYWORD = "STATIC_KEYWORD"
    SUPER_KEYWORD = "SUPER_KEYWORD"
    SWITCH_KEYWORD = "SWITCH_KEYWORD"
    THIS_KEYWORD = "THIS_KEYWORD"
    THROW_KEYWORD = "THROW_KEYWORD"
    TRUE_KEYWORD = "TRUE_KEYWORD"
    TRY_KEYWORD = "TRY_KEYWORD"
    TYPEOF_KEYWORD = "TYPEOF_KEYWORD"
    VAR_KEYWORD = "VAR_KEYWORD"
    VOID_KEYWORD = "VOID_KEYWORD"
    WHILE_KEYWORD = "WHILE_KEYWORD"
    WITH_KEYWORD = "WITH_KEYWORD"
    YIELD_KEYWORD = "YIELD_KEYWORD"

    # === Structural punctuation ===
    OPEN_PAREN = "OPEN_PAREN"
    CLOSE_PAREN = "CLOSE_PAREN"
    OPEN_BRACE = "OPEN_BRACE"
    CLOSE_BRACE = "CLOSE_BRACE"
    OPEN_BRACKET = "OPEN_BRACKET"
    CLOSE_BRACKET = "CLOSE_BRACKET"
    SEMICOLON = "SEMICOLON"
    COMMA = "COMMA"
    DOT = "DOT"
    COLON = "COLON"

    # === Logical and bitwise operators ===
    LOGICAL_OR = "LOGICAL_OR"               # ||
    LOGICAL_AND = "LOGICAL_AND"             # &&
    BITWISE_OR = "BITWISE_OR"               # |
    BITWISE_XOR = "BITWISE_XOR"             # ^
    BITWISE_AND = "BITWISE_AND"             # &
    LOGICAL_NOT = "LOGICAL_NOT"             # !
    BITWISE_NOT = "BITWISE_NOT"             # ~

    # === Comparison operators ===
    EQUALITY = "EQUALITY"                   # ==
    INEQUALITY = "INEQUALITY"               # !=
    STRICT_EQUALITY = "STRICT_EQUALITY"     # ===
    STRICT_INEQUALITY = "STRICT_INEQUALITY" # !==
    LESS_THAN = "LESS_THAN"
    GREATER_THAN = "GREATER_THAN"
    LESS_THAN_OR_EQUAL = "LESS_THAN_OR_EQUAL"
    GREATER_THAN_OR_EQUAL = "GREATER_THAN_OR_EQUAL"

    # === Arithmetic operators ===
    PLUS = "PLUS"
    MINUS = "MINUS"
    ASTERISK = "ASTERISK"
    SLASH = "SLASH"
    PERCENT = "PERCENT"
    EXPONENT = "EXPONENT"                   # **
    INCREMENT = "INCREMENT"                 # ++
    DECREMENT = "DECREMENT"                 # --

    # === Other operators ===
    ELLIPSIS = "ELLIPSIS"                   # ...
    EQUALS = "EQUALS"                       # =

    # === Catch-all buckets ===
    ASSIGNMENT_OPERATOR = "ASSIGNMENT_OPERATOR"  # any other symbol containing '='
    UNKNOWN = "UNKNOWN"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        line: Line on which the lexeme starts (1-indexed)
        kind: Display kind from the closed TokenKind taxonomy
        text: The raw lexeme exactly as it appears in the source
    """
    line: int
    kind: TokenKind
    text: str

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, line {self.line})"

    def to_dict(self) -> dict:
        """Wire form: ``{"line", "type", "value"}``."""
        return {"line": self.line, "type": self.kind.value, "value": self.text}
