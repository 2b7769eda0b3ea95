"""
Tokenization that preserves every character of the input.

Text is split into alternating word and separator tokens. Separators
are whitespace runs and single punctuation characters; joining all
token texts reproduces the input exactly.
"""

from __future__ import annotations

import re

from autotypo.models import Token, TokenKind

# Whitespace runs, punctuation, and apostrophes that are not inside a
# word ("don't" stays whole, quotes in 'this' are split off)
SEPARATOR_PATTERN = re.compile(r"""\s+|[.,!?;:"()\[\]{}]|'(?!\w)|(?<!\w)'""")


def tokenize(text: str) -> list[Token]:
    """
    Split text into word and separator tokens with character offsets.

    Example:
        >>> [t.text for t in tokenize("Hi, there!")]
        ['Hi', ',', ' ', 'there', '!']
    """
    tokens: list[Token] = []
    cursor = 0
    for match in SEPARATOR_PATTERN.finditer(text):
        if match.start() > cursor:
            tokens.append(Token(text[cursor : match.start()], TokenKind.WORD, cursor))
        tokens.append(Token(match.group(), TokenKind.SEPARATOR, match.start()))
        cursor = match.end()
    if cursor < len(text):
        tokens.append(Token(text[cursor:], TokenKind.WORD, cursor))
    return tokens


def reconstruct(tokens: list[Token]) -> str:
    """Join tokens back into text."""
    return "".join(token.text for token in tokens)


def context_window(tokens: list[Token], index: int, size: int) -> tuple[list[str], list[str]]:
    """
    Collect up to ``size`` neighbouring words on each side of a token.

    Separator tokens are skipped. The preceding list is in text order,
    so its last element is the word right before the token.

    Returns:
        Tuple of (preceding_words, following_words).
    """
    preceding: list[str] = []
    i = index - 1
    while i >= 0 and len(preceding) < size:
        if tokens[i].is_word:
            preceding.insert(0, tokens[i].text)
        i -= 1

    following: list[str] = []
    i = index + 1
    while i < len(tokens) and len(following) < size:
        if tokens[i].is_word:
            following.append(tokens[i].text)
        i += 1

    return preceding, following
