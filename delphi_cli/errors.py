"""Fatal error kinds raised by the lookup pipeline."""

from __future__ import annotations


class DelphiError(Exception):
    """Base class for errors that abort a lookup run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(DelphiError):
    """Missing CLI arguments, an empty query or an unreadable source file."""


class ManifestError(DelphiError):
    """The project's elm.json is missing or malformed."""


class DocLoadError(DelphiError):
    """A dependency's documentation index is missing or malformed."""
