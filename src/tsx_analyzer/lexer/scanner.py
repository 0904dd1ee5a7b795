"""
JavaScript / TypeScript Lexer
=============================

This module implements a full lexical scanner for JavaScript, TypeScript
and JSX snippets. It converts source text into a stream of raw tokens
and then maps them onto the public display taxonomy.

Token Categories
----------------
- Reserved words: break, case, catch, class, const, ... yield
- Identifiers: ``name``, ``$el``, ``_private``, ``#field``
- Numbers: decimal, ``.5``, exponents, ``0x``/``0o``/``0b``, ``1_000``, ``10n``
- Strings: 'single' and "double" quoted, with escapes and line continuations
- Templates: `plain`, `head ${ ... } middle ${ ... } tail`, nested freely
- Regular expressions: ``/ab+c/gi`` (where an expression may start)
- JSX text: ``Hello, world`` between ``<p>`` and ``</p>``
- Punctuation and operators: ( ) { } [ ] ; , . : ?. ?? => ... and friends
- Formatting: whitespace, line terminators, comments, ``#!`` hashbang

Formatting tokens are scanned like any other lexeme so that line
tracking sees every character, but they are filtered out before tokens
reach the caller.

Line Tracking
-------------
The line counter starts at 1 and, after every raw lexeme, advances by
the number of line terminators inside it (``\\n``, ``\\r\\n``, a lone
``\\r``, U+2028, U+2029). A template literal or a block comment that spans
three lines therefore moves every later token three lines down.

Regex vs. Division
------------------
``/`` begins a regular expression unless the previous significant token
ends an expression (identifier, literal, ``)``, ``]``, ``}``, ``this``,
...). After ``<`` it is always a slash, so JSX closing tags like
``</div>`` scan as ``<`` ``/`` ``div`` ``>``.

JSX
---
A ``<`` where an expression may start, followed by a name or ``>``,
opens a tag. Tags and element bodies are pushed on the same stack as
braces and template substitutions. Inside a body, text up to the next
``<`` or ``{`` is one JSX_TEXT lexeme (shown as STRING_LITERAL), so
``<p>Don't stop</p>`` does not open a string at the apostrophe.

Error Handling
--------------
The scanner raises LexerError subclasses with exact locations. The public
``tokenize()`` catches them: the scan stops at the first unscannable
point and returns the tokens collected so far.

Example Usage
-------------
>>> from tsx_analyzer.lexer.scanner import JSLexer
>>> for token in JSLexer("let n = 42;").tokenize():
...     print(token)
Token(LET_KEYWORD, 'let', line 1)
Token(IDENTIFIER, 'n', line 1)
Token(EQUALS, '=', line 1)
Token(NUMERIC_LITERAL, '42', line 1)
Token(SEMICOLON, ';', line 1)

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
import re
import string
import unicodedata
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional

from tsx_analyzer.errors import (
    SourceLocation,
    LexerError,
    InvalidCharacterError,
    UnterminatedLiteralError,
)
from tsx_analyzer.lexer.tokens import Token, TokenKind


logger = logging.getLogger(__name__)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class JSTokenType(Enum):
    """
    Internal lexical categories produced by the scanner.

    These never leave the lexer package; DISPLAY_KINDS maps them onto the
    public TokenKind names.
    """

    # === Formatting (filtered from output) ===
    WHITESPACE = auto()
    NEWLINE = auto()
    SINGLE_LINE_COMMENT = auto()
    MULTI_LINE_COMMENT = auto()
    HASHBANG = auto()               # #!/usr/bin/env node

    # === Names and Literals ===
    IDENTIFIER = auto()
    PRIVATE_IDENTIFIER = auto()     # #name
    NUMBER = auto()
    BIGINT = auto()                 # 10n
    STRING = auto()
    REGEX = auto()
    NO_SUBSTITUTION_TEMPLATE = auto()   # `text`
    TEMPLATE_HEAD = auto()              # `text${
    TEMPLATE_MIDDLE = auto()            # }text${
    TEMPLATE_TAIL = auto()              # }text`
    JSX_TEXT = auto()                   # text between JSX tags

    # === Reserved Words ===
    BREAK = auto()
    CASE = auto()
    CATCH = auto()
    CLASS = auto()
    CONST = auto()
    CONTINUE = auto()
    DEBUGGER = auto()
    DEFAULT = auto()
    DELETE = auto()
    DO = auto()
    ELSE = auto()
    ENUM = auto()
    EXPORT = auto()
    EXTENDS = auto()
    FALSE = auto()
    FINALLY = auto()
    FOR = auto()
    FUNCTION = auto()
    IF = auto()
    IMPORT = auto()
    IN = auto()
    INSTANCEOF = auto()
    INTERFACE = auto()
    LET = auto()
    NEW = auto()
    NULL = auto()
    PACKAGE = auto()
    PRIVATE = auto()
    PROTECTED = auto()
    PUBLIC = auto()
    RETURN = auto()
    STATIC = auto()
    SUPER = auto()
    SWITCH = auto()
    THIS = auto()
    THROW = auto()
    TRUE = auto()
    TRY = auto()
    TYPEOF = auto()
    VAR = auto()
    VOID = auto()
    WHILE = auto()
    WITH = auto()
    YIELD = auto()

    # === Delimiters ===
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    LBRACKET = auto()       # [
    RBRACKET = auto()       # ]
    SEMICOLON = auto()      # ;
    COMMA = auto()          # ,
    DOT = auto()            # .
    COLON = auto()          # :
    QUESTION = auto()       # ?
    QUESTION_DOT = auto()   # ?.
    AT = auto()             # @ (decorators)
    ELLIPSIS = auto()       # ...
    ARROW = auto()          # =>

    # === Arithmetic ===
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # *
    SLASH = auto()          # /
    PERCENT = auto()        # %
    STAR_STAR = auto()      # **
    PLUS_PLUS = auto()      # ++
    MINUS_MINUS = auto()    # --

    # === Comparison ===
    LT = auto()             # <
    GT = auto()             # >
    LE = auto()             # <=
    GE = auto()             # >=
    EQ = auto()             # ==
    NE = auto()             # !=
    EQ_STRICT = auto()      # ===
    NE_STRICT = auto()      # !==

    # === Logical / Bitwise ===
    AND = auto()            # &&
    OR = auto()             # ||
    NULLISH = auto()        # ??
    NOT = auto()            # !
    AMPERSAND = auto()      # &
    PIPE = auto()           # |
    CARET = auto()          # ^
    TILDE = auto()          # ~
    LSHIFT = auto()         # <<
    RSHIFT = auto()         # >>
    URSHIFT = auto()        # >>>

    # === Assignment ===
    ASSIGN = auto()             # =
    PLUS_ASSIGN = auto()        # +=
    MINUS_ASSIGN = auto()       # -=
    STAR_ASSIGN = auto()        # *=
    SLASH_ASSIGN = auto()       # /=
    PERCENT_ASSIGN = auto()     # %=
    STAR_STAR_ASSIGN = auto()   # **=
    LSHIFT_ASSIGN = auto()      # <<=
    RSHIFT_ASSIGN = auto()      # >>=
    URSHIFT_ASSIGN = auto()     # >>>=
    AND_ASSIGN = auto()         # &=
    OR_ASSIGN = auto()          # |=
    XOR_ASSIGN = auto()         # ^=
    LOGICAL_AND_ASSIGN = auto() # &&=
    LOGICAL_OR_ASSIGN = auto()  # ||=
    NULLISH_ASSIGN = auto()     # ??=


# =============================================================================
# Lookup Tables
# =============================================================================

RESERVED_WORDS = (
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof",
    "interface", "let", "new", "null", "package", "private", "protected",
    "public", "return", "static", "super", "switch", "this", "throw", "true",
    "try", "typeof", "var", "void", "while", "with", "yield",
)

KEYWORDS: dict[str, JSTokenType] = {
    word: JSTokenType[word.upper()] for word in RESERVED_WORDS
}

# Looked up by slice: the scanner tries 4, 3, 2 then 1 characters.
PUNCTUATORS: dict[str, JSTokenType] = {
    "(": JSTokenType.LPAREN,
    ")": JSTokenType.RPAREN,
    "{": JSTokenType.LBRACE,
    "}": JSTokenType.RBRACE,
    "[": JSTokenType.LBRACKET,
    "]": JSTokenType.RBRACKET,
    ";": JSTokenType.SEMICOLON,
    ",": JSTokenType.COMMA,
    ".": JSTokenType.DOT,
    ":": JSTokenType.COLON,
    "?": JSTokenType.QUESTION,
    "?.": JSTokenType.QUESTION_DOT,
    "@": JSTokenType.AT,
    "...": JSTokenType.ELLIPSIS,
    "=>": JSTokenType.ARROW,
    "+": JSTokenType.PLUS,
    "-": JSTokenType.MINUS,
    "*": JSTokenType.STAR,
    "/": JSTokenType.SLASH,
    "%": JSTokenType.PERCENT,
    "**": JSTokenType.STAR_STAR,
    "++": JSTokenType.PLUS_PLUS,
    "--": JSTokenType.MINUS_MINUS,
    "<": JSTokenType.LT,
    ">": JSTokenType.GT,
    "<=": JSTokenType.LE,
    ">=": JSTokenType.GE,
    "==": JSTokenType.EQ,
    "!=": JSTokenType.NE,
    "===": JSTokenType.EQ_STRICT,
    "!==": JSTokenType.NE_STRICT,
    "&&": JSTokenType.AND,
    "||": JSTokenType.OR,
    "??": JSTokenType.NULLISH,
    "!": JSTokenType.NOT,
    "&": JSTokenType.AMPERSAND,
    "|": JSTokenType.PIPE,
    "^": JSTokenType.CARET,
    "~": JSTokenType.TILDE,
    "<<": JSTokenType.LSHIFT,
    ">>": JSTokenType.RSHIFT,
    ">>>": JSTokenType.URSHIFT,
    "=": JSTokenType.ASSIGN,
    "+=": JSTokenType.PLUS_ASSIGN,
    "-=": JSTokenType.MINUS_ASSIGN,
    "*=": JSTokenType.STAR_ASSIGN,
    "/=": JSTokenType.SLASH_ASSIGN,
    "%=": JSTokenType.PERCENT_ASSIGN,
    "**=": JSTokenType.STAR_STAR_ASSIGN,
    "<<=": JSTokenType.LSHIFT_ASSIGN,
    ">>=": JSTokenType.RSHIFT_ASSIGN,
    ">>>=": JSTokenType.URSHIFT_ASSIGN,
    "&=": JSTokenType.AND_ASSIGN,
    "|=": JSTokenType.OR_ASSIGN,
    "^=": JSTokenType.XOR_ASSIGN,
    "&&=": JSTokenType.LOGICAL_AND_ASSIGN,
    "||=": JSTokenType.LOGICAL_OR_ASSIGN,
    "??=": JSTokenType.NULLISH_ASSIGN,
}

TRIVIA = frozenset({
    JSTokenType.WHITESPACE,
    JSTokenType.NEWLINE,
    JSTokenType.SINGLE_LINE_COMMENT,
    JSTokenType.MULTI_LINE_COMMENT,
    JSTokenType.HASHBANG,
})

# Internal category -> public display kind. Categories missing here fall
# back to ASSIGNMENT_OPERATOR (symbol contains '=') or UNKNOWN.
DISPLAY_KINDS: dict[JSTokenType, TokenKind] = {
    JSTokenType.IDENTIFIER: TokenKind.IDENTIFIER,
    JSTokenType.PRIVATE_IDENTIFIER: TokenKind.PRIVATE_IDENTIFIER,
    JSTokenType.NUMBER: TokenKind.NUMERIC_LITERAL,
    JSTokenType.BIGINT: TokenKind.BIGINT_LITERAL,
    JSTokenType.STRING: TokenKind.STRING_LITERAL,
    JSTokenType.REGEX: TokenKind.REGEX_LITERAL,
    JSTokenType.NO_SUBSTITUTION_TEMPLATE: TokenKind.TEMPLATE_LITERAL,
    JSTokenType.TEMPLATE_HEAD: TokenKind.TEMPLATE_HEAD,
    JSTokenType.TEMPLATE_MIDDLE: TokenKind.TEMPLATE_MIDDLE,
    JSTokenType.TEMPLATE_TAIL: TokenKind.TEMPLATE_TAIL,
    JSTokenType.JSX_TEXT: TokenKind.STRING_LITERAL,

    JSTokenType.LPAREN: TokenKind.OPEN_PAREN,
    JSTokenType.RPAREN: TokenKind.CLOSE_PAREN,
    JSTokenType.LBRACE: TokenKind.OPEN_BRACE,
    JSTokenType.RBRACE: TokenKind.CLOSE_BRACE,
    JSTokenType.LBRACKET: TokenKind.OPEN_BRACKET,
    JSTokenType.RBRACKET: TokenKind.CLOSE_BRACKET,
    JSTokenType.SEMICOLON: TokenKind.SEMICOLON,
    JSTokenType.COMMA: TokenKind.COMMA,
    JSTokenType.DOT: TokenKind.DOT,
    JSTokenType.COLON: TokenKind.COLON,

    JSTokenType.OR: TokenKind.LOGICAL_OR,
    JSTokenType.AND: TokenKind.LOGICAL_AND,
    JSTokenType.PIPE: TokenKind.BITWISE_OR,
    JSTokenType.CARET: TokenKind.BITWISE_XOR,
    JSTokenType.AMPERSAND: TokenKind.BITWISE_AND,
    JSTokenType.NOT: TokenKind.LOGICAL_NOT,
    JSTokenType.TILDE: TokenKind.BITWISE_NOT,

    JSTokenType.EQ: TokenKind.EQUALITY,
    JSTokenType.NE: TokenKind.INEQUALITY,
    JSTokenType.EQ_STRICT: TokenKind.STRICT_EQUALITY,
    JSTokenType.NE_STRICT: TokenKind.STRICT_INEQUALITY,
    JSTokenType.LT: TokenKind.LESS_THAN,
    JSTokenType.GT: TokenKind.GREATER_THAN,
    JSTokenType.LE: TokenKind.LESS_THAN_OR_EQUAL,
    JSTokenType.GE: TokenKind.GREATER_THAN_OR_EQUAL,

    JSTokenType.PLUS: TokenKind.PLUS,
    JSTokenType.MINUS: TokenKind.MINUS,
    JSTokenType.STAR: TokenKind.ASTERISK,
    JSTokenType.SLASH: TokenKind.SLASH,
    JSTokenType.PERCENT: TokenKind.PERCENT,
    JSTokenType.STAR_STAR: TokenKind.EXPONENT,
    JSTokenType.PLUS_PLUS: TokenKind.INCREMENT,
    JSTokenType.MINUS_MINUS: TokenKind.DECREMENT,

    JSTokenType.ARROW: TokenKind.ARROW,
    JSTokenType.ELLIPSIS: TokenKind.ELLIPSIS,
    JSTokenType.ASSIGN: TokenKind.EQUALS,

    # Every reserved word has a kind of the same name
    **{
        KEYWORDS[word]: TokenKind[f"{word.upper()}_KEYWORD"]
        for word in RESERVED_WORDS
    },
}

# After these a '/' is division (or a JSX closing slash), not a regex.
DIVISION_PRECEDERS = frozenset({
    JSTokenType.IDENTIFIER,
    JSTokenType.PRIVATE_IDENTIFIER,
    JSTokenType.NUMBER,
    JSTokenType.BIGINT,
    JSTokenType.STRING,
    JSTokenType.REGEX,
    JSTokenType.NO_SUBSTITUTION_TEMPLATE,
    JSTokenType.TEMPLATE_TAIL,
    JSTokenType.RPAREN,
    JSTokenType.RBRACKET,
    JSTokenType.RBRACE,
    JSTokenType.PLUS_PLUS,
    JSTokenType.MINUS_MINUS,
    JSTokenType.THIS,
    JSTokenType.SUPER,
    JSTokenType.TRUE,
    JSTokenType.FALSE,
    JSTokenType.NULL,
    JSTokenType.LT,
})


def display_kind(token_type: JSTokenType, text: str) -> TokenKind:
    """
    Map an internal category onto the public taxonomy.

    Unmapped categories land in one of two buckets: assignment-like
    operators (the raw symbol contains '=') and UNKNOWN for the rest.
    """
    kind = DISPLAY_KINDS.get(token_type)
    if kind is not None:
        return kind
    if "=" in text:
        return TokenKind.ASSIGNMENT_OPERATOR
    return TokenKind.UNKNOWN


# =============================================================================
# Character Classes
# =============================================================================

LINE_TERMINATORS = frozenset("\n\r\u2028\u2029")
LINE_BREAK = re.compile("\r\n|[\n\r\u2028\u2029]")
WHITESPACE_CHARS = frozenset(" \t\v\f\u00a0\ufeff")
DECIMAL_DIGITS = frozenset(string.digits)
HEX_DIGITS = frozenset(string.hexdigits)
OCTAL_DIGITS = frozenset("01234567")
BINARY_DIGITS = frozenset("01")
RADIX_DIGITS = {"x": HEX_DIGITS, "o": OCTAL_DIGITS, "b": BINARY_DIGITS}

# Context markers. "${" lets the matching "}" resume the template; the
# JSX markers track open tags and element bodies.
TEMPLATE_SUBSTITUTION = "${"
BRACE = "{"
JSX_OPEN_TAG = "<"
JSX_CLOSE_TAG = "</"
JSX_CHILDREN = "<>"


def _is_whitespace(char: str) -> bool:
    if not char or char in LINE_TERMINATORS:
        return False
    return char in WHITESPACE_CHARS or unicodedata.category(char) == "Zs"


def _is_identifier_start(char: str) -> bool:
    if not char:
        return False
    return char.isalpha() or char in "$_"


def _is_identifier_part(char: str) -> bool:
    if not char:
        return False
    if _is_identifier_start(char) or char in DECIMAL_DIGITS:
        return True
    if char in "\u200c\u200d":
        return True
    return unicodedata.category(char) in ("Mn", "Mc", "Nd", "Pc")


# =============================================================================
# Raw Token Data Class
# =============================================================================

@dataclass(frozen=True)
class RawToken:
    """
    A lexeme with its internal category, before display mapping.

    Attributes:
        type: The JSTokenType classification
        text: Raw lexeme text
        line: Line the lexeme starts on (1-indexed)
        column: Column the lexeme starts at (1-indexed)
        filename: Name of the source (for error reporting)
    """
    type: JSTokenType
    text: str
    line: int
    column: int
    filename: str

    def __repr__(self) -> str:
        return f"RawToken({self.type.name}, {self.text!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    @property
    def is_trivia(self) -> bool:
        """True for whitespace, line terminators and comments."""
        return self.type in TRIVIA


# =============================================================================
# Lexer Implementation
# =============================================================================

class JSLexer:
    """
    Tokenizes JavaScript, TypeScript and JSX source.

    Usage:
        lexer = JSLexer(source_text)
        tokens = lexer.tokenize()          # public tokens, never raises
        raw = list(JSLexer(source).scan()) # raw tokens, raises LexerError

    A lexer instance is single-use: create a new one per source text.

    Attributes:
        source: The source code being tokenized
        filename: Name of the source (for error reporting)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

        self._pos = 0
        self._line = 1
        self._line_start_pos = 0

        # Open "{", "${", JSX tags and JSX element bodies, innermost last
        self._brace_stack: list[str] = []

        # Last non-trivia token, for the regex/division decision
        self._last_significant: Optional[RawToken] = None

    def scan(self) -> Iterator[RawToken]:
        """
        Generate raw tokens, formatting included.

        Yields:
            RawToken objects in source order

        Raises:
            LexerError: At the first point that cannot be scanned
        """
        while not self._at_end():
            token = self._scan_token()
            if not token.is_trivia:
                self._last_significant = token
            yield token

    def tokenize(self) -> list[Token]:
        """
        Scan the whole source into public tokens.

        Formatting tokens are dropped. If the scan hits an unscannable
        point it stops there and the tokens collected so far are returned.

        Returns:
            Tokens in source order
        """
        tokens: list[Token] = []
        try:
            for raw in self.scan():
                if raw.is_trivia:
                    continue
                tokens.append(
                    Token(line=raw.line, kind=display_kind(raw.type, raw.text), text=raw.text)
                )
        except LexerError as e:
            logger.warning(
                f"Scan stopped after {len(tokens)} tokens: {e.message}"
                f" at {e.location}"
            )
        return tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """Character at current position + offset, or '' past the end."""
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _match(self, expected: str) -> bool:
        if self.source.startswith(expected, self._pos):
            self._pos += len(expected)
            return True
        return False

    # =========================================================================
    # Position Tracking
    # =========================================================================

    def _track_lines(self, text: str, start: int) -> None:
        """Advance the line counter past the terminators inside a lexeme."""
        count = 0
        last = None
        for last in LINE_BREAK.finditer(text):
            count += 1
        if count:
            self._line += count
            self._line_start_pos = start + last.end()

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        match = LINE_BREAK.search(self.source, self._line_start_pos)
        line_end = match.start() if match else len(self.source)
        return self.source[self._line_start_pos:line_end]

    def _location(self, line: int, column: int) -> SourceLocation:
        return SourceLocation(self.filename, line, column)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> RawToken:
        start = self._pos
        line = self._line
        column = start - self._line_start_pos + 1

        token_type = self._scan_lexeme(line, column)

        if token_type in (JSTokenType.COMMA, JSTokenType.EXTENDS) and self._context() == JSX_OPEN_TAG:
            # '<T,>' and '<T extends U>' open type parameters, not a tag
            self._brace_stack.pop()

        text = self.source[start:self._pos]
        self._track_lines(text, start)
        return RawToken(token_type, text, line, column, self.filename)

    def _scan_lexeme(self, line: int, column: int) -> JSTokenType:
        """Consume one lexeme and return its category."""
        char = self._peek()

        if char in LINE_TERMINATORS:
            if not self._match("\r\n"):
                self._pos += 1
            return JSTokenType.NEWLINE

        if _is_whitespace(char):
            while _is_whitespace(self._peek()):
                self._pos += 1
            return JSTokenType.WHITESPACE

        if self._context() == JSX_CHILDREN and char not in "<{":
            return self._scan_jsx_text()

        if char == "<" and self._jsx_tag_starts():
            self._pos += 1
            self._brace_stack.append(JSX_CLOSE_TAG if self._peek() == "/" else JSX_OPEN_TAG)
            return JSTokenType.LT

        if char == ">" and self._context() in (JSX_OPEN_TAG, JSX_CLOSE_TAG):
            self._pos += 1
            self._end_jsx_tag()
            return JSTokenType.GT

        if char == "/":
            if self._peek(1) == "/":
                return self._scan_line_comment(JSTokenType.SINGLE_LINE_COMMENT)
            if self._peek(1) == "*":
                return self._scan_block_comment(line, column)
            if self._regex_allowed():
                return self._scan_regex(line, column)

        if char == "#":
            if self._pos == 0 and self._peek(1) == "!":
                return self._scan_line_comment(JSTokenType.HASHBANG)
            if _is_identifier_start(self._peek(1)):
                self._pos += 1
                self._consume_identifier()
                return JSTokenType.PRIVATE_IDENTIFIER

        if _is_identifier_start(char):
            name = self._consume_identifier()
            return KEYWORDS.get(name, JSTokenType.IDENTIFIER)

        if char in DECIMAL_DIGITS or (char == "." and self._peek(1) in DECIMAL_DIGITS):
            return self._scan_number()

        if char in ("'", '"'):
            return self._scan_string(line, column)

        if char == "`":
            self._pos += 1
            return self._scan_template_span(True, line, column)

        if char == "}" and self._brace_stack and self._brace_stack[-1] == TEMPLATE_SUBSTITUTION:
            self._brace_stack.pop()
            self._pos += 1
            return self._scan_template_span(False, line, column)

        return self._scan_punctuator(line, column)

    def _consume_identifier(self) -> str:
        start = self._pos
        while _is_identifier_part(self._peek()):
            self._pos += 1
        return self.source[start:self._pos]

    def _scan_line_comment(self, token_type: JSTokenType) -> JSTokenType:
        """Consume up to (not including) the next line terminator."""
        while self._peek() and self._peek() not in LINE_TERMINATORS:
            self._pos += 1
        return token_type

    def _scan_block_comment(self, line: int, column: int) -> JSTokenType:
        end = self.source.find("*/", self._pos + 2)
        if end == -1:
            raise UnterminatedLiteralError(
                "comment", self._location(line, column), self._get_current_line()
            )
        self._pos = end + 2
        return JSTokenType.MULTI_LINE_COMMENT

    def _consume_digits(self, digits: frozenset) -> None:
        """Consume digits, allowing single '_' separators between them."""
        while True:
            char = self._peek()
            if char in digits or (char == "_" and self._peek(1) in digits):
                self._pos += 1
            else:
                break

    def _scan_number(self) -> JSTokenType:
        """
        Scan a numeric literal.

        Handles:
        - Decimal: 123, 1_000, 1.5, .5, 1e10, 2.5E-3
        - Radix prefixes: 0xFF, 0o17, 0b1010
        - BigInt suffix on integers: 10n, 0xFFn
        """
        if self._peek() == "0" and self._peek(1).lower() in RADIX_DIGITS:
            digits = RADIX_DIGITS[self._peek(1).lower()]
            self._pos += 2
            self._consume_digits(digits)
            return self._bigint_suffix()

        self._consume_digits(DECIMAL_DIGITS)
        is_integer = True

        if self._peek() == ".":
            is_integer = False
            self._pos += 1
            self._consume_digits(DECIMAL_DIGITS)

        if self._peek() in ("e", "E"):
            offset = 2 if self._peek(1) in ("+", "-") else 1
            if self._peek(offset) in DECIMAL_DIGITS:
                is_integer = False
                self._pos += offset
                self._consume_digits(DECIMAL_DIGITS)

        if is_integer:
            return self._bigint_suffix()
        return JSTokenType.NUMBER

    def _bigint_suffix(self) -> JSTokenType:
        if self._match("n"):
            return JSTokenType.BIGINT
        return JSTokenType.NUMBER

    def _scan_string(self, line: int, column: int) -> JSTokenType:
        """
        Scan a quoted string literal.

        A backslash escapes the next character, including a line
        terminator (line continuation). An unescaped line feed or
        carriage return ends the line without closing the string.
        """
        quote = self._peek()
        self._pos += 1

        while True:
            char = self._peek()
            if not char or char in ("\n", "\r"):
                raise UnterminatedLiteralError(
                    "string", self._location(line, column), self._get_current_line()
                )
            self._pos += 1

            if char == quote:
                return JSTokenType.STRING

            if char == "\\":
                # Escaped character or line continuation
                if not self._match("\r\n") and self._peek():
                    self._pos += 1

    def _scan_template_span(self, head: bool, line: int, column: int) -> JSTokenType:
        """
        Scan template text up to the closing backtick or the next '${'.

        Args:
            head: True when the span starts at a backtick, False when it
                  resumes after the '}' closing a substitution
        """
        while not self._at_end():
            char = self._peek()

            if char == "\\":
                self._pos += 2
                continue

            if char == "`":
                self._pos += 1
                if head:
                    return JSTokenType.NO_SUBSTITUTION_TEMPLATE
                return JSTokenType.TEMPLATE_TAIL

            if self._match("${"):
                self._brace_stack.append(TEMPLATE_SUBSTITUTION)
                if head:
                    return JSTokenType.TEMPLATE_HEAD
                return JSTokenType.TEMPLATE_MIDDLE

            self._pos += 1

        raise UnterminatedLiteralError(
            "template", self._location(line, column), self._get_current_line()
        )

    def _regex_allowed(self) -> bool:
        """True if a '/' at this point starts a regular expression."""
        previous = self._last_significant
        return previous is None or previous.type not in DIVISION_PRECEDERS

    def _scan_regex(self, line: int, column: int) -> JSTokenType:
        """Scan /body/flags, honouring escapes and [...] classes."""
        self._pos += 1  # consume opening /
        in_class = False

        while True:
            char = self._peek()
            if not char or char in LINE_TERMINATORS:
                raise UnterminatedLiteralError(
                    "regular expression",
                    self._location(line, column),
                    self._get_current_line(),
                )
            self._pos += 1

            if char == "\\":
                escaped = self._peek()
                if not escaped or escaped in LINE_TERMINATORS:
                    continue
                self._pos += 1
            elif char == "[":
                in_class = True
            elif char == "]":
                in_class = False
            elif char == "/" and not in_class:
                break

        # Flags
        while _is_identifier_part(self._peek()):
            self._pos += 1
        return JSTokenType.REGEX

    # =========================================================================
    # JSX Scanning
    # =========================================================================

    def _context(self) -> Optional[str]:
        """Innermost open brace, template or JSX marker."""
        return self._brace_stack[-1] if self._brace_stack else None

    def _jsx_tag_starts(self) -> bool:
        """
        True if a '<' at this point opens a JSX tag.

        Inside an element body every '<' does. Elsewhere it must sit where
        an expression may start and be followed by a name or '>' (fragment).
        """
        if self._context() == JSX_CHILDREN:
            return True
        following = self._peek(1)
        return self._regex_allowed() and (following == ">" or _is_identifier_start(following))

    def _end_jsx_tag(self) -> None:
        """Close the innermost tag at its '>'."""
        tag = self._brace_stack.pop()
        if tag == JSX_CLOSE_TAG:
            if self._context() == JSX_CHILDREN:
                self._brace_stack.pop()
        elif self._last_significant is None or self._last_significant.type != JSTokenType.SLASH:
            self._brace_stack.append(JSX_CHILDREN)

    def _scan_jsx_text(self) -> JSTokenType:
        """
        Consume element text up to the next '<' or '{'.

        Quotes, '#' and '@' are plain text here. Trailing whitespace is
        left for the whitespace scanner.
        """
        end = self._pos
        while end < len(self.source) and self.source[end] not in "<{":
            end += 1
        self._pos += len(self.source[self._pos:end].rstrip())
        return JSTokenType.JSX_TEXT

    def _scan_punctuator(self, line: int, column: int) -> JSTokenType:
        """
        Scan an operator or delimiter, longest symbol first.

        ``?.`` followed by a digit is ``?`` then a number (``a ?.5 : 1``).
        """
        for length in (4, 3, 2, 1):
            symbol = self.source[self._pos:self._pos + length]
            if len(symbol) != length or symbol not in PUNCTUATORS:
                continue
            if symbol == "?." and self._peek(2) in DECIMAL_DIGITS:
                continue

            self._pos += length
            token_type = PUNCTUATORS[symbol]
            if token_type == JSTokenType.LBRACE:
                self._brace_stack.append(BRACE)
            elif token_type == JSTokenType.RBRACE and self._context() == BRACE:
                self._brace_stack.pop()
            return token_type

        raise InvalidCharacterError(
            self._peek(),
            self._location(line, column),
            self._get_current_line(),
        )


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(code: str, filename: str = "<input>") -> list[Token]:
    """Tokenize code with a fresh JSLexer; never raises."""
    return JSLexer(code, filename).tokenize()
