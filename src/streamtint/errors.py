"""Exceptions raised by streamtint."""

from __future__ import annotations


class StreamTintError(Exception):
    """Base class for streamtint errors."""


class InvariantError(StreamTintError):
    """An internal invariant was violated.

    Only an implementation defect can raise this, never user input, so it is
    not meant to be caught and retried.
    """
