"""Per-character token state machine.

``step`` is a pure function: it takes the current state, the text accumulated
so far and one character, and returns what happened. A character that ends
the current token is *not* consumed; the caller offers it again once the
state has been reset to ``NONE``. That retry is the one-character lookahead
the tokenizer relies on.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import InvariantError

PUNCTUATION = frozenset(".,;:!?")
OPEN_BRACKETS = frozenset("([{")
CLOSE_BRACKETS = frozenset(")]}")
BACKTICK = "`"


class TokenState(enum.Enum):
    """What kind of token is being accumulated."""

    NONE = "none"
    TRIVIA = "trivia"
    WORD = "word"
    NUMBER = "number"
    ONE_TICK = "one_tick"
    TWO_TICK = "two_tick"
    THREE_TICK = "three_tick"
    FINISHED = "finished"


BACKTICK_STATES = frozenset(
    {TokenState.ONE_TICK, TokenState.TWO_TICK, TokenState.THREE_TICK}
)


@dataclass(frozen=True)
class Token:
    """A finished token and the state it was accumulated in."""

    text: str
    state: TokenState


@dataclass(frozen=True)
class Step:
    """Result of feeding one character to the state machine.

    Attributes:
        state: State after the character.
        token: Text accumulated for the token in progress.
        consumed: False if the character must be offered again.
        ended: Token that just ended, if any.
        symbol: Punctuation or bracket character to emit immediately.
    """

    state: TokenState
    token: str
    consumed: bool
    ended: Token | None = None
    symbol: str | None = None


def _is_word_char(ch: str) -> bool:
    return ch.isalpha() or ch.isdecimal() or ch == "_"


def _end(state: TokenState, token: str) -> Step:
    return Step(TokenState.NONE, "", consumed=False, ended=Token(token, state))


def _start(ch: str) -> Step:
    if ch.isspace():
        return Step(TokenState.TRIVIA, ch, consumed=True)
    if ch.isdecimal():
        return Step(TokenState.NUMBER, ch, consumed=True)
    if ch in PUNCTUATION or ch in OPEN_BRACKETS or ch in CLOSE_BRACKETS:
        return Step(TokenState.NONE, "", consumed=True, symbol=ch)
    if ch == BACKTICK:
        return Step(TokenState.ONE_TICK, ch, consumed=True)
    return Step(TokenState.WORD, ch, consumed=True)


def step(state: TokenState, token: str, ch: str) -> Step:
    """Advance the state machine by one character."""
    if state is TokenState.FINISHED:
        return Step(state, token, consumed=True)

    if state is TokenState.NONE:
        return _start(ch)

    if state is TokenState.TRIVIA:
        if ch.isspace():
            return Step(state, token + ch, consumed=True)
        return _end(state, token)

    if state is TokenState.WORD:
        if _is_word_char(ch):
            return Step(state, token + ch, consumed=True)
        return _end(state, token)

    if state is TokenState.NUMBER:
        if ch.isdecimal():
            return Step(state, token + ch, consumed=True)
        return _end(state, token)

    if state is TokenState.ONE_TICK:
        if ch == BACKTICK:
            return Step(TokenState.TWO_TICK, token + ch, consumed=True)
        return _end(state, token)

    if state is TokenState.TWO_TICK:
        if ch == BACKTICK:
            return Step(TokenState.THREE_TICK, token + ch, consumed=True)
        return _end(state, token)

    if state is TokenState.THREE_TICK:
        # A fence runs to the end of its line, newline included.
        token += ch
        if ch == "\n":
            return Step(
                TokenState.NONE, "", consumed=True, ended=Token(token, state)
            )
        return Step(state, token, consumed=True)

    raise InvariantError(f"Unknown token state {state!r}")


def end_token(state: TokenState, token: str) -> Token | None:
    """Force the token in progress to end, as at end of input."""
    if state in (TokenState.NONE, TokenState.FINISHED):
        return None
    if not isinstance(state, TokenState):
        raise InvariantError(f"Cannot end state {state!r}")
    return Token(token, state)
