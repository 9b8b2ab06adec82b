"""Assigns formats to finished tokens."""

from __future__ import annotations

from .errors import InvariantError
from .fencing import ContextKind, is_code_region
from .formats import (
    BODY,
    IDENTIFIER,
    KEYWORD,
    MARKDOWN,
    NUMBER,
    PUNCTUATION,
    Format,
)
from .tokenizer import BACKTICK_STATES, OPEN_BRACKETS, CLOSE_BRACKETS, TokenState

PYTHON_KEYWORDS = frozenset(
    {
        "and", "as", "assert",
        "break",
        "class",
        "def",
        "for",
        "if", "import", "in", "is",
        "lambda",
        "not",
        "or",
        "return",
        "while",
    }
)

KEYWORDS_BY_LANGUAGE: dict[str, frozenset[str]] = {
    "python": PYTHON_KEYWORDS,
}


def classify_word(text: str, context: ContextKind) -> Format:
    if not is_code_region(context):
        return BODY
    keywords = KEYWORDS_BY_LANGUAGE.get(context.language or "")
    if keywords is not None and text in keywords:
        return KEYWORD
    return IDENTIFIER


def classify(text: str, state: TokenState, context: ContextKind) -> Format:
    """Return the format of a token that ended in *state*."""
    if state is TokenState.TRIVIA:
        return BODY
    if state is TokenState.WORD:
        return classify_word(text, context)
    if state is TokenState.NUMBER:
        return NUMBER
    if state in BACKTICK_STATES:
        return MARKDOWN
    raise InvariantError(f"Cannot classify a token in state {state!r}")


def classify_symbol(ch: str, depth: int) -> Format:
    """Return the format of a punctuation or bracket character.

    *depth* is the bracket depth at the moment of emission: already
    incremented for an opening bracket, not yet decremented for a closing one.
    """
    if ch in OPEN_BRACKETS or ch in CLOSE_BRACKETS:
        return Format.bracket(depth)
    return PUNCTUATION
