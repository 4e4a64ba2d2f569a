"""Tests for the immutable key handle."""

import pytest
from pydantic import ValidationError

from cryptkey.handle import FileKeyReference, InMemoryKey, KeyHandle


def test_in_memory_handle_accessors():
    handle = KeyHandle(source=InMemoryKey(contents=b"pem"))

    assert handle.is_in_memory
    assert not handle.is_file_backed
    assert handle.key_path is None
    assert handle.filesystem_path is None
    assert handle.pass_phrase is None
    assert handle.contents() == b"pem"


def test_file_handle_reads_contents_on_every_call(key_file):
    handle = KeyHandle(
        source=FileKeyReference(path=f"file://{key_file}"), pass_phrase="pw"
    )

    assert handle.is_file_backed
    assert handle.key_path == f"file://{key_file}"
    assert handle.filesystem_path == key_file
    assert handle.pass_phrase == "pw"
    assert handle.contents() == key_file.read_bytes()

    key_file.write_text("replaced")
    assert handle.contents() == b"replaced"


def test_handles_compare_by_value():
    first = KeyHandle(source=FileKeyReference(path="file:///k.pem"), pass_phrase="")
    second = KeyHandle(source=FileKeyReference(path="file:///k.pem"), pass_phrase="")
    no_phrase = KeyHandle(source=FileKeyReference(path="file:///k.pem"))

    assert first == second
    assert hash(first) == hash(second)
    assert first != no_phrase


def test_handle_is_immutable():
    handle = KeyHandle(source=InMemoryKey(contents=b"pem"))

    with pytest.raises(ValidationError):
        handle.pass_phrase = "changed"
    with pytest.raises(ValidationError):
        handle.source.contents = b"other"


def test_source_variant_is_discriminated():
    handle = KeyHandle.model_validate(
        {"source": {"kind": "file", "path": "file:///k.pem"}}
    )
    assert isinstance(handle.source, FileKeyReference)

    with pytest.raises(ValidationError):
        KeyHandle.model_validate({"source": {"kind": "other", "path": "x"}})
