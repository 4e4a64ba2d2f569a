"""Decide whether a configured key value is PEM text or a path."""

from __future__ import annotations

import re
from enum import Enum

from .errors import PatternEngineError

# Any Unicode line break sequence.
_LINE_BREAK = r"(?:\r\n|[\n\x0b\x0c\r\x85\u2028\u2029])"

RSA_KEY_PATTERN = (
    r"-----BEGIN (?P<label>(?:RSA )?(?:PUBLIC|PRIVATE) KEY)-----"
    + _LINE_BREAK
    + r".*"
    + r"-----END (?P=label)-----"
    + _LINE_BREAK
    + r"?"
)


class KeyClassification(str, Enum):
    """Shape of a configured key value."""

    LITERAL_KEY = "literal"
    PATH_REFERENCE = "path"


def classify(value: str, pattern: str = RSA_KEY_PATTERN) -> KeyClassification:
    """Classify ``value`` by matching ``pattern`` against the whole string.

    Raises:
        TypeError: if ``value`` is not a string.
        PatternEngineError: if the pattern cannot be compiled or the engine
            fails while matching.
    """
    if not isinstance(value, str):
        raise TypeError(f"Key value must be a string, got {type(value).__name__}")

    try:
        matched = re.fullmatch(pattern, value, flags=re.DOTALL)
    except re.error as exc:
        raise PatternEngineError(exc.msg, exc.pos) from exc
    except RecursionError as exc:
        raise PatternEngineError("recursion limit exceeded") from exc

    if matched:
        return KeyClassification.LITERAL_KEY
    return KeyClassification.PATH_REFERENCE


def is_literal_key(value: str, pattern: str = RSA_KEY_PATTERN) -> bool:
    return classify(value, pattern) is KeyClassification.LITERAL_KEY
