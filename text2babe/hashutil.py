from __future__ import annotations

import hashlib


def derive_key(password: str) -> bytes:
    """Derive the 32-byte cipher key from ``password``.

    Single unsalted SHA-256 pass over the UTF-8 bytes; existing ciphertexts
    depend on this exact derivation.
    """
    return hashlib.sha256(password.encode("utf-8")).digest()


def key_fingerprint(key: bytes) -> str:
    # Short display form; never enough to recover the key.
    if len(key) >= 4:
        return key[:4].hex() + "..."
    return "unknown"
