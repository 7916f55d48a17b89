from __future__ import annotations

import base64
import binascii
import logging
from typing import Optional

from .config import CipherConfig
from .constants import BITS_PER_BYTE, OutputFormat
from .encryption import CipherContext
from .errors import DecryptError

logger = logging.getLogger(__name__)

_BINARY_DIGITS = frozenset("01")
_BINARY_STRIP = str.maketrans("", "", " \n\r\t")


class Codec:
    """Strict text <-> bytes conversion for one declared output format."""

    def __init__(self, output_format: OutputFormat):
        self.output_format = output_format

    def encode(self, data: bytes) -> str:
        if self.output_format == OutputFormat.BASE64:
            return base64.b64encode(data).decode("ascii")
        if self.output_format == OutputFormat.BINARY:
            return "".join(f"{b:08b}" for b in data)
        # hex, and anything unrecognised
        return data.hex()

    def decode(self, text: str) -> bytes:
        """Decode ``text`` in this codec's format; raises ValueError if malformed."""
        if self.output_format == OutputFormat.BASE64:
            return _decode_base64(text)
        if self.output_format == OutputFormat.BINARY:
            return _decode_binary_digits(text)
        return _decode_hex(text)


def _decode_hex(text: str) -> bytes:
    # binascii rejects odd lengths and whitespace, unlike bytes.fromhex
    return binascii.unhexlify(text)


def _decode_base64(text: str) -> bytes:
    # Line breaks are tolerated; everything else must be in the standard alphabet.
    cleaned = text.replace("\r", "").replace("\n", "")
    return base64.b64decode(cleaned, validate=True)


def _decode_binary_digits(text: str) -> bytes:
    digits = text.translate(_BINARY_STRIP)
    if not digits:
        raise ValueError("empty binary string")
    for pos, ch in enumerate(digits):
        if ch not in _BINARY_DIGITS:
            raise ValueError(f"invalid binary character: {ch!r} at position {pos}")
    if len(digits) % BITS_PER_BYTE:
        raise ValueError(f"binary string length ({len(digits)}) must be divisible by {BITS_PER_BYTE}")
    return bytes(int(digits[i : i + BITS_PER_BYTE], 2) for i in range(0, len(digits), BITS_PER_BYTE))


def looks_like_binary_digits(text: str) -> bool:
    return (
        len(text) > BITS_PER_BYTE
        and len(text) % BITS_PER_BYTE == 0
        and all(ch in _BINARY_DIGITS for ch in text)
    )


def _try_decode(text: str, output_format: OutputFormat) -> Optional[bytes]:
    try:
        return Codec(output_format).decode(text)
    except ValueError:
        return None


def decode_to_bytes(text: str) -> bytes:
    """Turn an unlabelled blob back into bytes.

    Binary digits are tried first when the text has that shape, because every
    binary-digit string is also valid hex (and often valid base64). Otherwise
    hex, then base64. If nothing matches, the raw UTF-8 bytes of ``text`` are
    returned, so this never fails; malformed ciphertext is only caught later
    by authentication.
    """
    order = [OutputFormat.HEX, OutputFormat.BASE64]
    if looks_like_binary_digits(text):
        order.insert(0, OutputFormat.BINARY)
    for output_format in order:
        data = _try_decode(text, output_format)
        if data is not None:
            logger.debug("input detected as %s (%d bytes)", output_format.value, len(data))
            return data
    logger.debug("input not hex/base64/binary; using raw text bytes")
    return text.encode("utf-8", errors="surrogatepass")


def encode_bytes(data: bytes, output_format: OutputFormat) -> str:
    return Codec(output_format).encode(data)


def encrypt(plaintext: str, config: CipherConfig) -> str:
    """Encrypt (or just encode, when encryption is off) ``plaintext``.

    Raises CipherInitError for a malformed key and RngError when no nonce can
    be drawn.
    """
    data = plaintext.encode("utf-8")
    if config.use_encryption:
        data = CipherContext(config.key).seal(data)
    return encode_bytes(data, config.output_format)


def decrypt(text: str, config: CipherConfig) -> str:
    """Inverse of :func:`encrypt`; the input encoding is auto-detected.

    Raises TooShort or AuthenticationFailed when encryption is on.
    """
    data = decode_to_bytes(text)
    if config.use_encryption:
        data = CipherContext(config.key).open(data)
    return data.decode("utf-8", errors="replace")


def decrypt_auto(text: str, config: CipherConfig) -> str:
    """Decrypt ``text`` without knowing whether it was encrypted or only encoded.

    The configured mode is tried first; if an encrypted decode fails
    authentication the blob is treated as plainly encoded.
    """
    try:
        return decrypt(text, config)
    except DecryptError as exc:
        if not config.use_encryption:
            raise
        logger.debug("encrypted decode failed (%s); retrying as plain encoding", exc)
        return decrypt(text, config.with_encryption(False))
