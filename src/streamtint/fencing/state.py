"""Contexts entered and left by markdown code fences."""

from __future__ import annotations

import enum


class ContextKind(enum.Enum):
    """How text inside the current region is interpreted."""

    TEXT = "text"
    CODE = "code"
    PYTHON_CODE = "python"

    @property
    def language(self) -> str | None:
        """Name of the recognized language for this region, if any."""
        if self is ContextKind.PYTHON_CODE:
            return "python"
        return None


_CODE_REGIONS = frozenset({ContextKind.CODE, ContextKind.PYTHON_CODE})


def is_code_region(kind: ContextKind) -> bool:
    """True for any fenced code context, whatever its language."""
    return kind in _CODE_REGIONS
