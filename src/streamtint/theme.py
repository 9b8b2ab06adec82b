"""Color palette for formatted tokens."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rich.errors import StyleSyntaxError
from rich.style import Style

from .formats import Format, TokenFormat

if TYPE_CHECKING:
    from .config import StreamTintConfig

logger = logging.getLogger(__name__)

DEFAULT_STYLES: dict[TokenFormat, str] = {
    TokenFormat.MARKDOWN: "bright_black",
    TokenFormat.BODY: "",
    TokenFormat.NUMBER: "bright_yellow",
    TokenFormat.IDENTIFIER: "bright_cyan",
    TokenFormat.KEYWORD: "bright_magenta",
    TokenFormat.FUNCTION: "bright_green",
    TokenFormat.PUNCTUATION: "white",
}

DEFAULT_BRACKET_STYLES: list[str] = ["yellow", "magenta", "cyan"]


@dataclass
class Palette:
    """Maps token formats to rich styles.

    Brackets cycle through ``bracket_styles`` by nesting depth. The lookup
    uses Python's modulo so zero and negative depths, which unbalanced
    closing brackets produce, still pick a color.
    """

    styles: dict[TokenFormat, str] = field(default_factory=lambda: dict(DEFAULT_STYLES))
    bracket_styles: list[str] = field(default_factory=lambda: list(DEFAULT_BRACKET_STYLES))

    def __post_init__(self) -> None:
        self._cache: dict[str, Style] = {}

    @classmethod
    def plain(cls) -> Palette:
        """A palette that renders every token unstyled."""
        return cls(styles={kind: "" for kind in TokenFormat}, bracket_styles=[])

    def style_name(self, fmt: Format) -> str:
        if fmt.is_bracket:
            if not self.bracket_styles:
                return ""
            return self.bracket_styles[fmt.depth % len(self.bracket_styles)]
        return self.styles.get(fmt.kind, "")

    def style_for(self, fmt: Format) -> Style:
        name = self.style_name(fmt)
        style = self._cache.get(name)
        if style is None:
            style = Style.parse(name) if name else Style.null()
            self._cache[name] = style
        return style


def _valid_style(name: str) -> bool:
    try:
        Style.parse(name)
    except StyleSyntaxError:
        return False
    return True


def build_palette(config: StreamTintConfig | None = None) -> Palette:
    """Create the palette, applying any overrides from *config*.

    Style names that rich cannot parse are skipped with a warning. With
    ``config.color`` off every token is unstyled.
    """
    if config is None:
        return Palette()
    if not config.color:
        return Palette.plain()

    palette = Palette()

    for key, name in config.styles.items():
        try:
            kind = TokenFormat(key)
        except ValueError:
            logger.warning("Unknown token format in config styles: %r", key)
            continue
        if kind is TokenFormat.BRACKET:
            logger.warning("Use config.bracket_styles to color brackets")
            continue
        if not _valid_style(name):
            logger.warning("Invalid style for %s: %r", key, name)
            continue
        palette.styles[kind] = name

    if config.bracket_styles:
        valid = [name for name in config.bracket_styles if _valid_style(name)]
        if len(valid) != len(config.bracket_styles):
            logger.warning("Ignoring invalid bracket styles in config")
        if valid:
            palette.bracket_styles = valid

    return palette
