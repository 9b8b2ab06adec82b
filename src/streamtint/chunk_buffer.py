"""Frame-rate-limited batching of streamed chunks."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable


class ChunkBuffer:
    """Collects incoming chunks and drains them as one string.

    A streaming response can deliver many tiny chunks per frame. Batching
    them means the formatter and the display are updated at most
    ``max_fps`` times per second.

    Args:
        schedule: Callable that defers a callback to the next event-loop tick
                  (e.g. ``widget.call_later``).
        drain: Called with the concatenated text of all pending chunks.
        max_fps: Maximum drains per second.
    """

    def __init__(
        self,
        schedule: Callable[[Callable[[], None]], object],
        drain: Callable[[str], None],
        max_fps: float = 30.0,
    ) -> None:
        self._schedule = schedule
        self._drain = drain
        self._chunks: list[str] = []
        self._scheduled = False
        self._min_interval = 1.0 / max_fps if max_fps > 0 else 0.0
        self._last_drain_time = 0.0

    def append(self, text: str) -> None:
        """Queue *text* and schedule a drain if none is pending."""
        if not text:
            return
        self._chunks.append(text)
        if self._scheduled:
            return
        self._scheduled = True
        elapsed = time.monotonic() - self._last_drain_time
        if elapsed >= self._min_interval:
            self._schedule(self._flush)
        else:
            delay = self._min_interval - elapsed
            self._schedule(lambda: self._schedule_delayed_flush(delay))

    def _schedule_delayed_flush(self, delay: float) -> None:
        asyncio.get_running_loop().call_later(delay, self._flush)

    def _flush(self) -> None:
        self._scheduled = False
        if self._chunks:
            text = "".join(self._chunks)
            self._chunks.clear()
            self._last_drain_time = time.monotonic()
            self._drain(text)

    def flush_sync(self) -> None:
        """Drain any pending text immediately."""
        self._flush()

    @property
    def pending(self) -> bool:
        """True if there is text that has not been drained."""
        return bool(self._chunks)
