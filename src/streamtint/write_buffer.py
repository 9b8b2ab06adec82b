"""Deferred writes for function-call detection.

A word is only known to be a function name once the following ``(`` shows
up, so identifiers (and the dots between them, as in ``os.path.join``) are
held back until a token arrives that settles them.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from .formats import FUNCTION, IDENTIFIER, Format

if TYPE_CHECKING:
    from .sinks import RenderSink


class BufferState(enum.Enum):
    EMPTY = "empty"
    HOLDING = "holding"


class DeferredWriteBuffer:
    """Holds a trailing run of identifier and ``.`` tokens before a sink."""

    def __init__(self, sink: RenderSink) -> None:
        self._sink = sink
        self._pending: list[tuple[str, Format]] = []

    @property
    def state(self) -> BufferState:
        return BufferState.HOLDING if self._pending else BufferState.EMPTY

    @property
    def pending(self) -> list[tuple[str, Format]]:
        """A copy of the entries not yet written."""
        return list(self._pending)

    def submit(self, text: str, fmt: Format) -> None:
        if fmt == IDENTIFIER or text == ".":
            self._pending.append((text, fmt))
            return

        if text == "(" and self._pending and self._pending[-1][1] == IDENTIFIER:
            name, _ = self._pending[-1]
            self._pending[-1] = (name, FUNCTION)

        self.flush()
        self._sink.render(text, fmt)

    def flush(self) -> None:
        """Write every held entry to the sink, in arrival order."""
        pending, self._pending = self._pending, []
        for text, fmt in pending:
            self._sink.render(text, fmt)
