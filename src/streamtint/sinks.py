"""Rendering sinks that receive formatted tokens."""

from __future__ import annotations

from typing import Protocol

from rich.console import COLOR_SYSTEMS, Console
from rich.text import Text

from .formats import Format
from .theme import Palette


class RenderSink(Protocol):
    """Anything a StreamFormatter can write tokens to."""

    def render(self, text: str, fmt: Format) -> None: ...


class RecordingSink:
    """Keeps every rendered token in order."""

    def __init__(self) -> None:
        self.tokens: list[tuple[str, Format]] = []

    def render(self, text: str, fmt: Format) -> None:
        self.tokens.append((text, fmt))

    @property
    def text(self) -> str:
        return "".join(text for text, _ in self.tokens)

    def clear(self) -> None:
        self.tokens.clear()


class RichTextSink:
    """Builds a rich ``Text`` with one styled span per token.

    ``Text`` drops control characters such as ``\r``, so ``text`` is for
    display only. ``source`` keeps every token exactly as it arrived.
    """

    def __init__(self, palette: Palette | None = None) -> None:
        self._palette = palette or Palette()
        self._source: list[str] = []
        self.text = Text()

    @property
    def source(self) -> str:
        return "".join(self._source)

    def render(self, text: str, fmt: Format) -> None:
        self._source.append(text)
        self.text.append(text, style=self._palette.style_for(fmt))


class ConsoleSink:
    """Writes tokens straight to a terminal as they arrive."""

    def __init__(
        self, console: Console | None = None, palette: Palette | None = None
    ) -> None:
        self._console = console or Console(highlight=False)
        self._palette = palette or Palette()

    @property
    def console(self) -> Console:
        return self._console

    def render(self, text: str, fmt: Format) -> None:
        # Bypass Console.print: it expands tabs per token and strips \r.
        style = self._palette.style_for(fmt)
        if self._console.no_color:
            style = style.without_color
        name = self._console.color_system
        color_system = COLOR_SYSTEMS[name] if name else None
        self._console.file.write(style.render(text, color_system=color_system))
        self._console.file.flush()
