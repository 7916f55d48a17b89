from __future__ import annotations

from enum import Enum


# AES-256-GCM parameters
KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16

DEFAULT_PASSWORD = "default-password"
MIN_PASSWORD_LENGTH = 8

# Binary-digit encoding: one byte per 8 characters, MSB first
BITS_PER_BYTE = 8


class OutputFormat(str, Enum):
    HEX = "hex"
    BASE64 = "base64"
    BINARY = "binary"

    @classmethod
    def parse(cls, name: str) -> "OutputFormat":
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown output format: {name!r} (expected hex, base64 or binary)") from None

    def next(self) -> "OutputFormat":
        order = list(OutputFormat)
        return order[(order.index(self) + 1) % len(order)]


DEFAULT_OUTPUT_FORMAT = OutputFormat.HEX


class Mode(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @classmethod
    def parse(cls, name: str) -> "Mode":
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown mode: {name!r} (expected encrypt or decrypt)") from None


# Envelope template
ENVELOPE_LABEL = "Text2Babe"
ENVELOPE_FENCE = "```"
MARKER_ENCRYPT = "\U0001F512"  # locked padlock
MARKER_DECRYPT = "\U0001F513"  # open padlock

MODE_MARKERS = {
    Mode.ENCRYPT: MARKER_ENCRYPT,
    Mode.DECRYPT: MARKER_DECRYPT,
}
