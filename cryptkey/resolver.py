"""Resolve a configured key value into a :class:`KeyHandle`."""

from __future__ import annotations

import logging
import os
import warnings
from typing import Callable, Optional, Union

from pydantic import BaseModel, ConfigDict

from .classifier import RSA_KEY_PATTERN, is_literal_key
from .errors import KeyPathUnavailable, PermissionAdvisory
from .handle import FileKeyReference, InMemoryKey, KeyHandle
from .permissions import FILE_SCHEME, PermissionAudit, audit, strip_scheme

logger = logging.getLogger(__name__)

AdvisoryHandler = Callable[[PermissionAudit], None]


class Resolution(BaseModel):
    """A resolved handle together with the optional permission finding."""

    model_config = ConfigDict(frozen=True)

    handle: KeyHandle
    advisory: Optional[PermissionAudit] = None


def normalize_key_path(path: str) -> str:
    """Return an absolute path carrying the ``file://`` prefix exactly once."""
    fs_path = os.path.abspath(strip_scheme(path))
    return f"{FILE_SCHEME}{fs_path}"


def _is_readable_file(path: str) -> bool:
    fs_path = strip_scheme(path)
    return os.path.isfile(fs_path) and os.access(fs_path, os.R_OK)


def resolve_key(
    key: str,
    pass_phrase: Optional[str] = None,
    check_permissions: bool = True,
    pattern: str = RSA_KEY_PATTERN,
) -> Resolution:
    """Resolve ``key`` without reporting anything.

    ``key`` is either literal PEM text or a path to a PEM file. Literal keys
    never touch the filesystem and drop ``pass_phrase``. Paths are
    normalized, checked for existence and readability and, when
    ``check_permissions`` is set, audited. The audit finding is returned
    rather than reported so the caller can pick where it goes.

    Raises:
        PatternEngineError: if classification itself fails.
        KeyPathUnavailable: if the key file is missing or unreadable.
    """
    if is_literal_key(key, pattern):
        handle = KeyHandle(source=InMemoryKey(contents=key.encode("utf-8")))
        return Resolution(handle=handle)

    key_path = normalize_key_path(key)
    if not _is_readable_file(key_path):
        raise KeyPathUnavailable(key_path)

    advisory = audit(key_path) if check_permissions else None
    handle = KeyHandle(
        source=FileKeyReference(path=key_path), pass_phrase=pass_phrase
    )
    return Resolution(handle=handle, advisory=advisory)


def log_advisory(finding: PermissionAudit) -> None:
    logger.warning(finding.message)


def warn_advisory(finding: PermissionAudit) -> None:
    warnings.warn(
        PermissionAdvisory(finding.path, finding.observed_mode, finding.message),
        # Attribute the warning to whoever called KeyResolver.resolve.
        stacklevel=3,
    )


def ignore_advisory(finding: PermissionAudit) -> None:
    pass


ADVISORY_HANDLERS = {
    "log": log_advisory,
    "warn": warn_advisory,
    "ignore": ignore_advisory,
}


def get_advisory_handler(name: str) -> AdvisoryHandler:
    """Return the built-in advisory handler called ``name``."""
    try:
        return ADVISORY_HANDLERS[name.lower()]
    except KeyError:
        raise ValueError(f"Unsupported advisory handler: {name}") from None


class KeyResolver:
    """Resolves key values and reports permission findings to a handler."""

    def __init__(
        self,
        pattern: str = RSA_KEY_PATTERN,
        advisory_handler: Union[str, AdvisoryHandler] = "log",
    ) -> None:
        self.pattern = pattern
        if isinstance(advisory_handler, str):
            advisory_handler = get_advisory_handler(advisory_handler)
        self.advisory_handler = advisory_handler

    def resolve(
        self,
        key: str,
        pass_phrase: Optional[str] = None,
        check_permissions: bool = True,
    ) -> KeyHandle:
        resolution = resolve_key(
            key,
            pass_phrase=pass_phrase,
            check_permissions=check_permissions,
            pattern=self.pattern,
        )
        if resolution.advisory is not None:
            self.advisory_handler(resolution.advisory)

        handle = resolution.handle
        if handle.is_file_backed:
            logger.debug(f"Resolved file-backed key {handle.key_path}")
        else:
            logger.debug("Resolved in-memory key")
        return handle


def resolve(
    key: str,
    pass_phrase: Optional[str] = None,
    check_permissions: bool = True,
) -> KeyHandle:
    """Resolve ``key`` into a handle, logging any permission advisory."""
    return KeyResolver().resolve(
        key, pass_phrase=pass_phrase, check_permissions=check_permissions
    )
