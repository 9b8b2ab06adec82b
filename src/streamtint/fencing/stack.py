"""Stack of nested fence contexts."""

from __future__ import annotations

from streamtint.errors import InvariantError
from streamtint.fencing.state import ContextKind


class ContextStack:
    """Tracks nested markdown regions.

    The stack is never empty: TEXT is pushed on construction and is never
    popped.
    """

    def __init__(self) -> None:
        self._stack: list[ContextKind] = [ContextKind.TEXT]

    def enter(self, kind: ContextKind) -> None:
        self._stack.append(kind)

    def exit(self) -> ContextKind:
        """Leave the innermost region and return its kind."""
        if len(self._stack) == 1:
            raise InvariantError("Cannot exit the root text context")
        return self._stack.pop()

    @property
    def current(self) -> ContextKind:
        return self._stack[-1]

    def __len__(self) -> int:
        return len(self._stack)
