from __future__ import annotations

import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel

from .classifier import RSA_KEY_PATTERN
from .handle import KeyHandle
from .resolver import KeyResolver

_FALSE_VALUES = {"0", "false", "no", "off"}


class CryptKeyConfig(BaseModel):
    """Top-level configuration model."""

    key: Optional[str] = None
    pass_phrase: Optional[str] = None
    check_permissions: bool = True
    advisory: Literal["log", "warn", "ignore"] = "log"
    key_pattern: str = RSA_KEY_PATTERN


def load_config(path: Optional[str] = None) -> CryptKeyConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to CRYPTKEY_CONFIG env
            variable or 'cryptkey.yaml' in the current directory.
    """

    config_path = path or os.getenv("CRYPTKEY_CONFIG", "cryptkey.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        config = CryptKeyConfig(**data)
    else:
        config = CryptKeyConfig()

    env_key = os.getenv("CRYPTKEY_KEY")
    if env_key:
        config.key = env_key
    env_pass_phrase = os.getenv("CRYPTKEY_PASS_PHRASE")
    if env_pass_phrase is not None:
        config.pass_phrase = env_pass_phrase
    env_check = os.getenv("CRYPTKEY_CHECK_PERMISSIONS")
    if env_check:
        config.check_permissions = env_check.strip().lower() not in _FALSE_VALUES
    return config


def resolve_from_config(config: Optional[CryptKeyConfig] = None) -> KeyHandle:
    """Resolve the key described by ``config`` (loaded when omitted)."""

    config = config or load_config()
    if not config.key:
        raise ValueError("No key configured; set 'key' or CRYPTKEY_KEY")

    resolver = KeyResolver(
        pattern=config.key_pattern, advisory_handler=config.advisory
    )
    return resolver.resolve(
        config.key,
        pass_phrase=config.pass_phrase,
        check_permissions=config.check_permissions,
    )
