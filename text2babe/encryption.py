"""AES-256-GCM sealing backed by PyCryptodomex.

Sealed payloads are laid out as ``nonce (12) || ciphertext || tag (16)`` with
no associated data. A fresh nonce is drawn from the OS CSPRNG for every seal;
if the random source fails the call fails rather than reusing a nonce.
"""

from __future__ import annotations

from Cryptodome.Cipher import AES
from Cryptodome.Random import get_random_bytes

from .constants import KEY_SIZE, NONCE_SIZE, TAG_SIZE
from .errors import AuthenticationFailed, CipherInitError, RngError, TooShort


def _new_nonce() -> bytes:
    try:
        nonce = get_random_bytes(NONCE_SIZE)
    except (OSError, NotImplementedError) as exc:
        raise RngError(f"failed to generate nonce: {exc}") from exc
    if len(nonce) != NONCE_SIZE:
        raise RngError("failed to generate nonce: short read from random source")
    return nonce


class CipherContext:
    def __init__(self, key: bytes):
        if len(key) != KEY_SIZE:
            raise CipherInitError(f"failed to create cipher: key must be {KEY_SIZE} bytes, got {len(key)}")
        self._key = bytes(key)

    def _gcm(self, nonce: bytes):
        try:
            return AES.new(self._key, AES.MODE_GCM, nonce=nonce, mac_len=TAG_SIZE)
        except ValueError as exc:
            raise CipherInitError(f"failed to create GCM: {exc}") from exc

    def seal(self, plaintext: bytes) -> bytes:
        """Encrypt and authenticate ``plaintext`` under a fresh random nonce."""
        nonce = _new_nonce()
        ciphertext, tag = self._gcm(nonce).encrypt_and_digest(plaintext)
        return nonce + ciphertext + tag

    def open(self, payload: bytes) -> bytes:
        """Verify and decrypt a payload produced by :meth:`seal`."""
        if len(payload) < NONCE_SIZE:
            raise TooShort("ciphertext too short")
        nonce = payload[:NONCE_SIZE]
        sealed = payload[NONCE_SIZE:]
        if len(sealed) < TAG_SIZE:
            raise AuthenticationFailed("failed to decrypt data: message authentication failed")
        ciphertext, tag = sealed[:-TAG_SIZE], sealed[-TAG_SIZE:]
        try:
            return self._gcm(nonce).decrypt_and_verify(ciphertext, tag)
        except ValueError as exc:
            raise AuthenticationFailed("failed to decrypt data: message authentication failed") from exc


__all__ = [
    "CipherContext",
]
