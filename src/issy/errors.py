"""Error taxonomy shared by the store, the roadmap, and the CLI."""

from __future__ import annotations


class IssyError(Exception):
    """Base class for every error issy raises on purpose."""


class ValidationError(IssyError, ValueError):
    """Invalid input to create/update: empty title, out-of-vocabulary enum value."""


class NotFoundError(IssyError, LookupError):
    """An id that resolves to no file, or a roadmap target that is not open."""
