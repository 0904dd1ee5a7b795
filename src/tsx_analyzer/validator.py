"""
Source Validation
=================

The analyzer does not implement a JavaScript grammar. It asks an
external parser whether a snippet is valid through a small interface:

    Validator.parse(code) -> ValidationOutcome

Any conformant parser can sit behind it. The shipped implementation,
TreeSitterValidator, uses tree-sitter with the TypeScript grammar. The
TSX dialect (the default) accepts plain JavaScript, TypeScript and JSX.

Diagnostics
-----------
tree-sitter recovers from errors by inserting ``ERROR`` and ``MISSING``
nodes into the tree. Each becomes one diagnostic:

| Node                                   | Message                   |
|----------------------------------------|---------------------------|
| MISSING ``)``                          | Expected ")"              |
| MISSING name (``type_identifier``)     | Expected "identifier"     |
| ERROR at an illegal char               | Invalid character "§"     |
| other ERROR                            | Unexpected "<token>"      |

For an ERROR node the quoted token is the one the parser gave up at: the
innermost nested ERROR, or else the node's last token.

The grammar also accepts almost any non-ASCII character inside a name,
so ``const x = ¤;`` parses cleanly. Every identifier leaf is therefore
checked against the ECMAScript identifier classes, and the first bad
character becomes ``Invalid character "¤"``.

Diagnostics are sorted by position; callers only use the first.

Thread Safety
-------------
Language objects are shared; a new Parser is created for every call.
"""

import logging
import re
import unicodedata
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, Optional

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from tsx_analyzer.errors import ConfigError, ValidatorError


logger = logging.getLogger(__name__)


# =============================================================================
# Validation Outcome
# =============================================================================

@dataclass(frozen=True)
class ValidationIssue:
    """
    One problem reported by a validator.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        message: Human-readable description
    """
    line: int
    column: int
    message: str


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of validating a snippet.

    Attributes:
        valid: True if the parser accepted the code
        issues: Problems found, in document order (empty when valid)
    """
    valid: bool
    issues: tuple[ValidationIssue, ...] = field(default_factory=tuple)

    @property
    def first_issue(self) -> Optional[ValidationIssue]:
        """The authoritative issue, or None when valid."""
        return self.issues[0] if self.issues else None

    @classmethod
    def success(cls) -> "ValidationOutcome":
        return cls(valid=True)

    @classmethod
    def failure(cls, *issues: ValidationIssue) -> "ValidationOutcome":
        return cls(valid=False, issues=tuple(issues))


# =============================================================================
# Validator Interface
# =============================================================================

class Validator(ABC):
    """
    Abstract syntax validator.

    Implementations must not raise for invalid *code*; that is a normal
    failing outcome. ValidatorError is reserved for the parser itself
    being unable to run.
    """

    @abstractmethod
    def parse(self, code: str) -> ValidationOutcome:
        """
        Validate source text.

        Raises:
            ValidatorError: If the underlying parser cannot run
        """
        pass


# =============================================================================
# tree-sitter Implementation
# =============================================================================

DIALECTS = {
    "tsx": tree_sitter_typescript.language_tsx,
    "typescript": tree_sitter_typescript.language_typescript,
}

DEFAULT_DIALECT = "tsx"

# Characters that may begin some JavaScript/TypeScript token.
_TOKEN_START_SYMBOLS = frozenset("{}()[];,.<>+-*/%&|^!~?:=@#\"'`\\")

# Longest lexeme quoted in an "Unexpected" message
MAX_QUOTED_LENGTH = 32

# Leaf nodes whose text is a name. tree-sitter's grammar lets almost any
# non-ASCII character into these, so they are checked separately.
IDENTIFIER_NODES = frozenset({
    "identifier",
    "property_identifier",
    "private_property_identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
    "statement_identifier",
    "type_identifier",
})

# Unicode categories of ID_Start and ID_Continue characters
IDENTIFIER_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Nl", "Mn", "Mc", "Nd", "Pc"})

# $, _, ZWNJ and ZWJ are legal outside those categories
IDENTIFIER_EXTRAS = frozenset("$_\u200c\u200d")

UNICODE_ESCAPE = re.compile(r"\\u(?:\{[0-9a-fA-F]+\}|[0-9a-fA-F]{4})")


def _is_legal_start(char: str) -> bool:
    return char.isalnum() or char in "$_" or char.isspace() or char in _TOKEN_START_SYMBOLS


def _is_identifier_char(char: str) -> bool:
    return char in IDENTIFIER_EXTRAS or unicodedata.category(char) in IDENTIFIER_CATEGORIES


def _expected_name(node: Node) -> str:
    """Readable name for a token tree-sitter inserted to recover."""
    if not node.is_named:
        return node.type
    if node.type.endswith("identifier"):
        return "identifier"
    return "expression"


class TreeSitterValidator(Validator):
    """
    Validator backed by tree-sitter's TypeScript/TSX grammar.

    Usage:
        validator = TreeSitterValidator()
        outcome = validator.parse("function f( {")
        outcome.valid           # False
        outcome.first_issue     # ValidationIssue(line=1, ...)

    Attributes:
        dialect: "tsx" (default) or "typescript"
    """

    def __init__(self, dialect: str = DEFAULT_DIALECT):
        if dialect not in DIALECTS:
            raise ConfigError(
                f"unknown dialect '{dialect}'",
                hint=f"choose from: {', '.join(DIALECTS)}",
            )
        self.dialect = dialect
        self.language = Language(DIALECTS[dialect]())

    def parse(self, code: str) -> ValidationOutcome:
        source = code.encode("utf-8")
        try:
            tree = Parser(self.language).parse(source)
        except Exception as e:
            raise ValidatorError(f"tree-sitter failed to parse input: {e}") from e

        root = tree.root_node
        issues = [self._describe(node, source) for node in self._error_nodes(root)]
        if root.has_error and not issues:
            # has_error with no reachable node; report at the root
            issues.append(ValidationIssue(1, 1, "Unexpected end of input"))
        issues.extend(self._illegal_characters(root, source))

        if not issues:
            logger.debug(f"Validated {len(code)} chars: no errors")
            return ValidationOutcome.success()

        issues.sort(key=lambda issue: (issue.line, issue.column))
        logger.debug(f"Validation failed with {len(issues)} issue(s); first: {issues[0]}")
        return ValidationOutcome.failure(*issues)

    def _error_nodes(self, node: Node) -> Iterator[Node]:
        """Yield ERROR and MISSING nodes in document order."""
        if node.is_missing or node.type == "ERROR":
            yield node
            return
        for child in node.children:
            if child.has_error or child.is_missing:
                yield from self._error_nodes(child)

    def _illegal_characters(self, root: Node, source: bytes) -> Iterator[ValidationIssue]:
        """Yield one issue per name containing a character no identifier may hold."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type in IDENTIFIER_NODES:
                issue = self._check_identifier(node, source)
                if issue is not None:
                    yield issue
                continue
            stack.extend(reversed(node.children))

    def _check_identifier(self, node: Node, source: bytes) -> Optional[ValidationIssue]:
        text = self._text(node, source)
        position = 1 if text.startswith("#") else 0
        while position < len(text):
            escape = UNICODE_ESCAPE.match(text, position)
            if escape:
                position = escape.end()
                continue
            char = text[position]
            if not _is_identifier_char(char):
                line, column = self._position(node, source)
                return ValidationIssue(line, column + position, f'Invalid character "{char}"')
            position += 1
        return None

    def _describe(self, node: Node, source: bytes) -> ValidationIssue:
        line, column = self._position(node, source)

        if node.is_missing:
            return ValidationIssue(line, column, f'Expected "{_expected_name(node)}"')

        offender = self._offending_leaf(node)
        text = self._text(offender, source).strip()
        if not text:
            return ValidationIssue(line, column, "Unexpected end of input")

        line, column = self._position(offender, source)
        first = text[0]
        if not _is_legal_start(first):
            return ValidationIssue(line, column, f'Invalid character "{first}"')

        lexeme = text.split()[0][:MAX_QUOTED_LENGTH]
        return ValidationIssue(line, column, f'Unexpected "{lexeme}"')

    def _offending_leaf(self, node: Node) -> Node:
        """
        The token an ERROR node could not fit.

        A nested ERROR is closer to the fault than its parent. Otherwise
        the parser gave up at the node's last token; everything before it
        is the statement it was building.
        """
        while node.children:
            nested = [child for child in node.children if child.type == "ERROR"]
            tokens = [
                child for child in node.children
                if child.type != "comment" and child.end_byte > child.start_byte
            ]
            node = nested[0] if nested else (tokens or node.children)[-1]
        return node

    @staticmethod
    def _text(node: Node, source: bytes) -> str:
        return source[node.start_byte:node.end_byte].decode("utf-8", "replace")

    @staticmethod
    def _position(node: Node, source: bytes) -> tuple[int, int]:
        """1-based line and character column of a node's start."""
        row, byte_column = node.start_point[0], node.start_point[1]
        line_start = source.rfind(b"\n", 0, node.start_byte) + 1
        column = len(source[line_start:line_start + byte_column].decode("utf-8", "replace")) + 1
        return row + 1, column
