"""Example showing how configured keys are resolved and used for signing."""

import logging
import sys
from typing import Optional

from cryptkey import KeyPathUnavailable, resolve
from cryptkey.signing import JwtSigner


def main(key: str, pass_phrase: Optional[str] = None) -> int:
    """Resolve ``key`` and issue a short-lived token with it."""
    logging.basicConfig(level=logging.INFO)

    try:
        handle = resolve(key, pass_phrase=pass_phrase)
    except KeyPathUnavailable as exc:
        print(f"❌ {exc}")
        return 1

    if handle.is_file_backed:
        print(f"🔑 Key file: {handle.key_path}")
    else:
        print("🔑 Key supplied inline")

    signer = JwtSigner(handle, key_id="example")
    token = signer.sign({"sub": "example-client", "scope": "basic"})
    print(f"✅ Issued token: {token[:32]}...")
    return 0


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: resolve_key_example.py KEY [PASS_PHRASE]")
        sys.exit(2)
    sys.exit(main(*sys.argv[1:3]))
