"""
Coarse Token Classifier
=======================

A single-pattern tokenizer that sorts source text into four broad kinds.
It is cheap, never fails, and is good enough for a quick visual overview
of a snippet.

Recognition Order
-----------------
The pattern tries, at each position:

1. Module and declaration keywords (whole words only):
   import, from, export, default, const, let, var, function, return
2. The arrow symbol ``=>``
3. Single-character punctuation: ``{ } ( ) [ ] ; , . :``
4. Any maximal run of non-whitespace characters

| Match                 | Kind        |
|-----------------------|-------------|
| keyword               | KEYWORD     |
| ``=>``                | ARROW       |
| punctuation           | PUNCTUATION |
| anything else         | LITERAL     |

Note that rule 4 is greedy: ``x;`` at the start of a run is one LITERAL,
because punctuation only wins where a run *begins* with it.

Line Attribution
----------------
Lines are attributed by walking an absolute cursor through the original
text and counting line feeds between consecutive matches, so a lexeme
that repeats earlier on the same line is never misattributed.

Example
-------
>>> [t.kind.value for t in tokenize_coarse("const f = () => 1")]
['KEYWORD', 'LITERAL', 'LITERAL', 'PUNCTUATION', 'PUNCTUATION', 'ARROW', 'LITERAL']
"""

import re

from tsx_analyzer.lexer.tokens import Token, TokenKind


KEYWORDS = frozenset({
    "import", "from", "export", "default",
    "const", "let", "var", "function", "return",
})

PUNCTUATION = frozenset("{}()[];,.:")

ARROW = "=>"

_KEYWORD_ALTERNATION = "|".join(sorted(KEYWORDS, key=len, reverse=True))

COARSE_PATTERN = re.compile(
    rf"(?<![\w$])(?:{_KEYWORD_ALTERNATION})(?![\w$])"
    r"|=>"
    r"|[{}()\[\];,.:]"
    r"|\S+"
)


def classify_lexeme(text: str) -> TokenKind:
    """Return the coarse kind for one matched lexeme."""
    if text in KEYWORDS:
        return TokenKind.KEYWORD
    if text == ARROW:
        return TokenKind.ARROW
    if text in PUNCTUATION:
        return TokenKind.PUNCTUATION
    return TokenKind.LITERAL


def tokenize_coarse(code: str) -> list[Token]:
    """
    Split code into coarse tokens.

    Args:
        code: Source text

    Returns:
        Tokens in source order, each with the 1-based line it starts on
    """
    tokens: list[Token] = []
    line = 1
    cursor = 0

    for match in COARSE_PATTERN.finditer(code):
        start = match.start()
        line += code.count("\n", cursor, start)
        cursor = start

        text = match.group()
        tokens.append(Token(line=line, kind=classify_lexeme(text), text=text))

    return tokens
