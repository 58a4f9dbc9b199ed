"""Exception types for tagcheck."""

from __future__ import annotations


class TagCheckError(Exception):
    """Base class for errors raised at the tagcheck configuration boundary."""


class InvalidOptionsError(TagCheckError, ValueError):
    """Rule options failed schema validation.

    The per-tag pass never raises this; it is raised while options are loaded
    so that a malformed configuration is rejected before any comment is checked.
    """

    def __init__(self, message: str, *, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class NeverRaise(RuntimeError):
    """Sentinel exception that should be statically unreachable."""

    def __init__(self, message: str, *, env: dict[str, object] | None = None):
        super().__init__(message)
        self.env = dict(env or {})


class NeverThrown(NeverRaise):
    """Alias for NeverRaise used by the explicit never() marker."""
