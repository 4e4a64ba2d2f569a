"""cryptkey: resolve PEM key configuration into immutable key handles."""

from .classifier import RSA_KEY_PATTERN, KeyClassification, classify
from .config import CryptKeyConfig, load_config, resolve_from_config
from .errors import (
    CryptKeyError,
    KeyMaterialError,
    KeyPathUnavailable,
    PatternEngineError,
    PermissionAdvisory,
)
from .handle import FileKeyReference, InMemoryKey, KeyHandle
from .permissions import SAFE_MODES, PermissionAudit, audit
from .resolver import KeyResolver, Resolution, resolve, resolve_key

__version__ = "0.1.0"
__all__ = [
    "RSA_KEY_PATTERN",
    "SAFE_MODES",
    "CryptKeyConfig",
    "CryptKeyError",
    "FileKeyReference",
    "InMemoryKey",
    "KeyClassification",
    "KeyHandle",
    "KeyMaterialError",
    "KeyPathUnavailable",
    "KeyResolver",
    "PatternEngineError",
    "PermissionAdvisory",
    "PermissionAudit",
    "Resolution",
    "audit",
    "classify",
    "load_config",
    "resolve",
    "resolve_from_config",
    "resolve_key",
]
