"""Exception hierarchy for dessert_pusher.

Input validation errors are plain ``pydantic.ValidationError``; the classes
here cover the failures that happen around the models (files, host hooks).
"""

from __future__ import annotations


class DessertPusherError(Exception):
    """Base class for all dessert_pusher errors."""


class CatalogLoadError(DessertPusherError):
    """A catalog or settings YAML file could not be read or validated."""

    def __init__(self, path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load {path}: {reason}")


class LifecycleError(DessertPusherError):
    """A lifecycle event was dispatched to a destroyed screen."""


class ShareUnavailableError(DessertPusherError):
    """Raised by a share handler when nothing can receive the share text."""
