"""Helpers for handing resolved keys to ``cryptography`` and PyJWT."""

from __future__ import annotations

from typing import Any, Mapping, Optional

import jwt
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.serialization import (
    load_pem_private_key,
    load_pem_public_key,
)

from .errors import KeyMaterialError
from .handle import KeyHandle


def _describe(handle: KeyHandle) -> str:
    return handle.key_path or "in-memory key"


def load_private_key(handle: KeyHandle) -> Any:
    """Load the private key referenced by ``handle``.

    A non-empty pass phrase is used to decrypt encrypted key files.
    """
    password = handle.pass_phrase.encode("utf-8") if handle.pass_phrase else None
    try:
        return load_pem_private_key(handle.contents(), password=password)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise KeyMaterialError(
            f"Unable to load private key from {_describe(handle)}"
        ) from exc


def load_public_key(handle: KeyHandle) -> Any:
    """Load a public key, deriving it when ``handle`` holds a private key."""
    data = handle.contents()
    if b"PRIVATE KEY-----" in data:
        return load_private_key(handle).public_key()
    try:
        return load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise KeyMaterialError(
            f"Unable to load public key from {_describe(handle)}"
        ) from exc


class JwtSigner:
    """Issues and checks JWTs with a resolved key."""

    def __init__(
        self, handle: KeyHandle, algorithm: str = "RS256", key_id: Optional[str] = None
    ) -> None:
        self.handle = handle
        self.algorithm = algorithm
        self.key_id = key_id

    def sign(self, claims: Mapping[str, Any], headers: Optional[dict] = None) -> str:
        headers = dict(headers or {})
        if self.key_id:
            headers.setdefault("kid", self.key_id)
        return jwt.encode(
            dict(claims),
            load_private_key(self.handle),
            algorithm=self.algorithm,
            headers=headers or None,
        )

    def verify(
        self,
        token: str,
        audience: Optional[str] = None,
        issuer: Optional[str] = None,
        leeway: int = 0,
    ) -> Mapping:
        """Validate ``token`` against the handle's public key."""
        return jwt.decode(
            token,
            load_public_key(self.handle),
            algorithms=[self.algorithm],
            audience=audience,
            issuer=issuer,
            leeway=leeway,
        )
