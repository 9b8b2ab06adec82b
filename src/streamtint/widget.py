"""Textual widget that colorizes a live stream."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from .chunk_buffer import ChunkBuffer
from .formatter import StreamFormatter
from .sinks import RichTextSink
from .theme import Palette


class StreamView(Static):
    """Displays streamed markdown as it arrives.

    Chunks passed to ``append`` are batched and fed to a StreamFormatter at
    most ``max_fps`` times per second; ``finish`` drains whatever is left
    and flushes the formatter.
    """

    def __init__(
        self, palette: Palette | None = None, max_fps: float = 30.0, **kwargs
    ) -> None:
        super().__init__("", **kwargs)
        self._sink = RichTextSink(palette)
        self._formatter = StreamFormatter(self._sink)
        self._buffer = ChunkBuffer(self.call_later, self._drain, max_fps=max_fps)

    @property
    def text(self) -> Text:
        """Everything rendered so far."""
        return self._sink.text

    @property
    def formatter(self) -> StreamFormatter:
        return self._formatter

    def append(self, text: str) -> None:
        self._buffer.append(text)

    def finish(self) -> None:
        self._buffer.flush_sync()
        self._formatter.finish()
        self._refresh_text()

    def _drain(self, text: str) -> None:
        self._formatter.append(text)
        self._refresh_text()

    def _refresh_text(self) -> None:
        self.update(self._sink.text.copy())
