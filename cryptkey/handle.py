"""Immutable key handles produced by the resolver."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .permissions import strip_scheme


class InMemoryKey(BaseModel):
    """PEM key material held directly in memory."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["memory"] = "memory"
    contents: bytes = Field(..., description="PEM encoded key material")


class FileKeyReference(BaseModel):
    """Reference to a PEM key stored on the local filesystem."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    path: str = Field(..., description="Absolute path with a file:// prefix")


KeySource = Annotated[Union[InMemoryKey, FileKeyReference], Field(discriminator="kind")]


class KeyHandle(BaseModel):
    """Resolved key ready to be consumed by a signer or verifier.

    A handle either wraps in-memory PEM bytes or references a key file on
    disk. Pass phrases only ever accompany file-backed keys: ``None`` means
    no pass phrase was configured, which is different from an empty one.
    """

    model_config = ConfigDict(frozen=True)

    source: KeySource
    pass_phrase: Optional[str] = None

    @property
    def is_in_memory(self) -> bool:
        return isinstance(self.source, InMemoryKey)

    @property
    def is_file_backed(self) -> bool:
        return isinstance(self.source, FileKeyReference)

    @property
    def key_path(self) -> Optional[str]:
        """The ``file://`` path of a file-backed key, ``None`` otherwise."""
        if isinstance(self.source, FileKeyReference):
            return self.source.path
        return None

    @property
    def filesystem_path(self) -> Optional[Path]:
        if isinstance(self.source, FileKeyReference):
            return Path(strip_scheme(self.source.path))
        return None

    def contents(self) -> bytes:
        """Return the key bytes.

        File-backed keys are read from disk on every call.
        """
        if isinstance(self.source, InMemoryKey):
            return self.source.contents
        return self.filesystem_path.read_bytes()
