"""Custom exception types raised while converting components into templates."""

from __future__ import annotations


class TemplatizeError(RuntimeError):
    """Base class for conversion failures that carry a user facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidSourceError(TemplatizeError):
    """Raised when the source path is missing or is not a directory."""


class NoCanonicalFileError(TemplatizeError):
    """Raised when no PascalCase component file exists in the source tree."""
