"""Exceptions and warning categories raised while resolving keys."""

from __future__ import annotations

from typing import Optional


class CryptKeyError(Exception):
    """Base class for key resolution errors."""


class PatternEngineError(CryptKeyError):
    """The regular expression engine failed while classifying a key value.

    This is not the same as "does not look like a key": it means the
    classification itself could not be carried out.
    """

    def __init__(self, code: str, position: Optional[int] = None) -> None:
        self.code = code
        self.position = position
        detail = f" at position {position}" if position is not None else ""
        super().__init__(
            f"Pattern engine error [{code}]{detail} encountered during key match attempt"
        )


class KeyPathUnavailable(CryptKeyError):
    """A file-backed key does not exist or cannot be read."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f'Key path "{path}" does not exist or is not readable')


class KeyMaterialError(CryptKeyError):
    """Resolved key material could not be loaded as a PEM key."""


class PermissionAdvisory(UserWarning):
    """Warning category for key files with overly broad permissions."""

    def __init__(self, path: str, observed_mode: int, message: str) -> None:
        self.path = path
        self.observed_mode = observed_mode
        super().__init__(message)


__all__ = [
    "CryptKeyError",
    "KeyMaterialError",
    "KeyPathUnavailable",
    "PatternEngineError",
    "PermissionAdvisory",
]
