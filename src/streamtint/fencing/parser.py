"""Interpretation of fence lines."""

from __future__ import annotations

from streamtint.fencing.state import ContextKind

FENCE = "```"

# Exact fence-opening lines that select the Python keyword table.
_PYTHON_FENCES = frozenset(
    {
        f"{FENCE}python",
        f"{FENCE} python",
        f"{FENCE}py",
        f"{FENCE} py",
    }
)


def context_for_fence(text: str) -> ContextKind:
    """Return the context opened by the fence line *text*.

    Only the exact spellings in ``_PYTHON_FENCES`` open a Python region; any
    other fence, including unknown languages and a bare fence, opens a
    generic code region.
    """
    if text.strip() in _PYTHON_FENCES:
        return ContextKind.PYTHON_CODE
    return ContextKind.CODE
