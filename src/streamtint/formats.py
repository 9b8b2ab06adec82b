"""Token formats handed to rendering sinks."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TokenFormat(enum.Enum):
    """Semantic classification of an emitted token."""

    MARKDOWN = "markdown"
    BODY = "body"
    NUMBER = "number"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    FUNCTION = "function"
    PUNCTUATION = "punctuation"
    BRACKET = "bracket"


@dataclass(frozen=True)
class Format:
    """A token format, plus the nesting depth for brackets.

    Brackets form an unbounded family distinguished by depth. The depth is
    passed through unclamped, so unbalanced input can produce zero or
    negative values.
    """

    kind: TokenFormat
    depth: int = 0

    @classmethod
    def bracket(cls, depth: int) -> Format:
        return cls(TokenFormat.BRACKET, depth)

    @property
    def is_bracket(self) -> bool:
        return self.kind is TokenFormat.BRACKET

    def __str__(self) -> str:
        if self.is_bracket:
            return f"bracket[{self.depth}]"
        return self.kind.value


MARKDOWN = Format(TokenFormat.MARKDOWN)
BODY = Format(TokenFormat.BODY)
NUMBER = Format(TokenFormat.NUMBER)
IDENTIFIER = Format(TokenFormat.IDENTIFIER)
KEYWORD = Format(TokenFormat.KEYWORD)
FUNCTION = Format(TokenFormat.FUNCTION)
PUNCTUATION = Format(TokenFormat.PUNCTUATION)
