"""Permission hygiene checks for key files."""

from __future__ import annotations

import logging
import os
import stat
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

FILE_SCHEME = "file://"

# Owner/group read or read-write, nothing for others, never execute.
SAFE_MODES: FrozenSet[int] = frozenset({0o400, 0o440, 0o600, 0o640, 0o660})


class PermissionAudit(BaseModel):
    """Finding for a key file whose permissions are broader than recommended."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Filesystem path of the key file")
    observed_mode: int = Field(..., description="Permission triplet, e.g. 0o644")
    recommended_modes: FrozenSet[int] = Field(default=SAFE_MODES)

    @property
    def observed_octal(self) -> str:
        return format(self.observed_mode, "o")

    @property
    def message(self) -> str:
        return (
            f'Key file "{self.path}" permissions are not correct, '
            f"recommend changing to 600 or 660 instead of {self.observed_octal}"
        )


def strip_scheme(path: str) -> str:
    """Return ``path`` without a leading ``file://`` prefix."""
    if path.startswith(FILE_SCHEME):
        return path[len(FILE_SCHEME) :]
    return path


def permission_bits(mode: int) -> int:
    """Reduce a raw ``st_mode`` to the user/group/other triplet."""
    return stat.S_IMODE(mode) & 0o777


def audit(path: str) -> Optional[PermissionAudit]:
    """Check the permissions of the key file at ``path``.

    Returns a :class:`PermissionAudit` when the permission triplet is not in
    :data:`SAFE_MODES`, otherwise ``None``. This function never raises: if
    the mode cannot be read there is nothing to report.
    """
    fs_path = strip_scheme(path)
    try:
        mode = permission_bits(os.stat(fs_path).st_mode)
    except OSError as exc:
        logger.debug(f"Unable to verify permissions of key file {fs_path}: {exc}")
        return None

    if mode in SAFE_MODES:
        return None
    return PermissionAudit(path=fs_path, observed_mode=mode)
