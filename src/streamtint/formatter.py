"""Incremental markdown/code formatter for streaming text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .classifier import classify, classify_symbol
from .fencing import ContextKind, ContextStack, context_for_fence, is_code_region
from .tokenizer import OPEN_BRACKETS, CLOSE_BRACKETS, Token, TokenState, end_token, step
from .write_buffer import DeferredWriteBuffer

if TYPE_CHECKING:
    from .sinks import RenderSink

logger = logging.getLogger(__name__)


class StreamFormatter:
    """Tokenizes streaming markdown and sends classified tokens to a sink.

    Text may arrive in chunks of any size; the tokens rendered are the same
    as if the whole text had been appended at once. Call ``finish()`` at the
    end of the stream to flush the token in progress. After that the
    formatter ignores further input.

    Usage:
        formatter = StreamFormatter(ConsoleSink())
        for chunk in response:
            formatter.append(chunk)
        formatter.finish()
    """

    def __init__(self, sink: RenderSink) -> None:
        self._state = TokenState.NONE
        self._token = ""
        self._contexts = ContextStack()
        self._bracket_depth = 0
        self._writer = DeferredWriteBuffer(sink)

    @property
    def context(self) -> ContextKind:
        """The innermost markdown context."""
        return self._contexts.current

    @property
    def bracket_depth(self) -> int:
        return self._bracket_depth

    @property
    def finished(self) -> bool:
        return self._state is TokenState.FINISHED

    def append(self, text: str) -> None:
        """Feed a chunk of text."""
        for ch in text:
            while not self.advance(ch):
                pass

    def advance(self, ch: str) -> bool:
        """Feed one character. Returns False if it must be offered again."""
        result = step(self._state, self._token, ch)
        self._state = result.state
        self._token = result.token

        if result.symbol is not None:
            self._write_symbol(result.symbol)

        if result.ended is not None:
            self._write_token(result.ended)
            if result.ended.state is TokenState.THREE_TICK:
                self._toggle_fence(result.ended.text.strip())

        return result.consumed

    def finish(self) -> None:
        """Flush the pending token and buffered writes. Idempotent."""
        if self._state is TokenState.FINISHED:
            return
        token = end_token(self._state, self._token)
        if token is not None:
            self._write_token(token)
        self._writer.flush()
        self._token = ""
        self._state = TokenState.FINISHED
        logger.debug(
            "Stream finished (context=%s, bracket depth=%d)",
            self.context.value,
            self._bracket_depth,
        )

    def _write_token(self, token: Token) -> None:
        self._writer.submit(token.text, classify(token.text, token.state, self.context))

    def _write_symbol(self, ch: str) -> None:
        if ch in OPEN_BRACKETS:
            self._bracket_depth += 1
            self._writer.submit(ch, classify_symbol(ch, self._bracket_depth))
        elif ch in CLOSE_BRACKETS:
            self._writer.submit(ch, classify_symbol(ch, self._bracket_depth))
            self._bracket_depth -= 1
        else:
            self._writer.submit(ch, classify_symbol(ch, self._bracket_depth))

    def _toggle_fence(self, fence: str) -> None:
        """Close the current code region, or open the one *fence* names."""
        if is_code_region(self.context):
            closed = self._contexts.exit()
            logger.debug("Closed %s fence", closed.value)
        else:
            kind = context_for_fence(fence)
            self._contexts.enter(kind)
            logger.debug("Opened %s fence: %r", kind.value, fence)
