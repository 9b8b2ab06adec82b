"""Markdown code fence contexts."""

from __future__ import annotations

from streamtint.fencing.parser import FENCE, context_for_fence
from streamtint.fencing.stack import ContextStack
from streamtint.fencing.state import ContextKind, is_code_region

__all__ = [
    "ContextKind",
    "ContextStack",
    "context_for_fence",
    "is_code_region",
    "FENCE",
]
