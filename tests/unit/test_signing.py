"""Tests for handing resolved keys to JWT signers."""

import jwt
import pytest

from cryptkey.errors import KeyMaterialError
from cryptkey.resolver import resolve
from cryptkey.signing import JwtSigner, load_private_key, load_public_key


def test_sign_and_verify_with_file_key(key_file):
    signer = JwtSigner(resolve(str(key_file)), key_id="test")

    token = signer.sign({"sub": "alice", "aud": "worker", "iss": "https://idp/"})

    assert jwt.get_unverified_header(token)["kid"] == "test"
    claims = signer.verify(token, audience="worker", issuer="https://idp/")
    assert claims["sub"] == "alice"


def test_public_literal_verifies_file_signature(key_file, public_pem):
    token = JwtSigner(resolve(str(key_file))).sign({"sub": "bob"})

    verifier = JwtSigner(resolve(public_pem))
    assert verifier.verify(token)["sub"] == "bob"


def test_encrypted_file_uses_pass_phrase(encrypted_key_file, rsa_key):
    handle = resolve(str(encrypted_key_file), pass_phrase="s3cret")

    private_key = load_private_key(handle)
    assert private_key.private_numbers() == rsa_key.private_numbers()


@pytest.mark.parametrize("pass_phrase", [None, "", "wrong"])
def test_encrypted_file_without_correct_pass_phrase(encrypted_key_file, pass_phrase):
    handle = resolve(str(encrypted_key_file), pass_phrase=pass_phrase)

    with pytest.raises(KeyMaterialError):
        load_private_key(handle)


def test_public_key_derived_from_private_handle(key_file, rsa_key):
    public_key = load_public_key(resolve(str(key_file)))
    assert public_key.public_numbers() == rsa_key.public_key().public_numbers()


def test_garbage_file_is_key_material_error(tmp_path):
    path = tmp_path / "garbage.pem"
    path.write_text("not a key")
    path.chmod(0o600)
    handle = resolve(str(path))

    with pytest.raises(KeyMaterialError):
        load_public_key(handle)
    with pytest.raises(KeyMaterialError):
        load_private_key(handle)


def test_token_for_other_audience_rejected_without_expected_audience(key_file):
    signer = JwtSigner(resolve(str(key_file)))
    token = signer.sign({"sub": "alice", "aud": "other-service"})

    with pytest.raises(jwt.InvalidAudienceError):
        signer.verify(token)
    with pytest.raises(jwt.InvalidAudienceError):
        signer.verify(token, audience="worker")
