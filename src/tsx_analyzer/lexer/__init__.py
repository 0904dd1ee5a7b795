"""
Tokenizers
==========

Two interchangeable tokenizers share one public contract,
``tokenize(code) -> list[Token]``:

- **lexer** (default): ``JSLexer``, a full JavaScript/TypeScript/JSX scanner
  with a fine-grained taxonomy (keywords by name, literal kinds, every
  operator).
- **coarse**: a single-regex classifier that sorts text into KEYWORD,
  ARROW, PUNCTUATION and LITERAL.

Both emit tokens in source order, never emit formatting, and never raise.

Usage
-----
>>> from tsx_analyzer.lexer import tokenize
>>> [t.text for t in tokenize("a => b", design="coarse")]
['a', '=>', 'b']
"""

from typing import Callable

from tsx_analyzer.errors import ConfigError
from tsx_analyzer.lexer.tokens import Token, TokenKind
from tsx_analyzer.lexer.coarse import tokenize_coarse
from tsx_analyzer.lexer.scanner import JSLexer, JSTokenType, RawToken, DISPLAY_KINDS
from tsx_analyzer.lexer.scanner import tokenize as tokenize_fine


TOKENIZERS: dict[str, Callable[[str], list[Token]]] = {
    "lexer": tokenize_fine,
    "coarse": tokenize_coarse,
}

DEFAULT_TOKENIZER = "lexer"


def tokenize(code: str, design: str = DEFAULT_TOKENIZER) -> list[Token]:
    """
    Tokenize code with the selected design.

    Args:
        code: Source text
        design: "lexer" or "coarse"

    Raises:
        ConfigError: If the design name is unknown
    """
    try:
        tokenizer = TOKENIZERS[design]
    except KeyError:
        raise ConfigError(
            f"unknown tokenizer '{design}'",
            hint=f"choose from: {', '.join(TOKENIZERS)}",
        ) from None
    return tokenizer(code)


__all__ = [
    "Token",
    "TokenKind",
    "JSLexer",
    "JSTokenType",
    "RawToken",
    "DISPLAY_KINDS",
    "TOKENIZERS",
    "DEFAULT_TOKENIZER",
    "tokenize",
    "tokenize_coarse",
    "tokenize_fine",
]
