"""Inline textual viewer for a streamed document."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding

from .config import StreamTintConfig
from .theme import build_palette
from .widget import StreamView

logger = logging.getLogger(__name__)


class StreamTintApp(App):
    TITLE = "streamtint"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("q", "quit", "Quit", show=False),
    ]

    def __init__(self, chunks: Iterable[str], config: StreamTintConfig | None = None):
        self.config = config or StreamTintConfig()
        self._chunks = chunks
        super().__init__()

    def compose(self) -> ComposeResult:
        yield StreamView(
            palette=build_palette(self.config),
            max_fps=self.config.max_fps,
            id="stream",
        )

    def on_mount(self) -> None:
        self.stream_chunks(self.view)

    @property
    def view(self) -> StreamView:
        return self.query_one(StreamView)

    @work(thread=True, exclusive=True)
    def stream_chunks(self, view: StreamView) -> None:
        """Feed the chunks to *view* from a worker thread."""
        count = 0
        for chunk in self._chunks:
            count += 1
            self.call_from_thread(view.append, chunk)
        self.call_from_thread(view.finish)
        logger.debug("Streamed %d chunks", count)
