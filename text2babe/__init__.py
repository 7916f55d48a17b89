"""
text2babe — text encryption that survives copy/paste through chat clients.

Features:

- AES-256-GCM authenticated encryption keyed from a password (PyCryptodomex).
- Output as hex, base64 or a string of binary digits; input encoding is
  auto-detected on the way back, so blobs never need to be labelled.
- Plain (unencrypted) encode/decode mode sharing the same textual formats.
- A fixed chat envelope (``🔒 **Text2Babe encrypt**`` + fenced block) with a
  strict parser that rejects anything this package did not produce.

The programmatic API lives in text2babe.codec (encrypt/decrypt),
text2babe.envelope (wrap/unwrap) and text2babe.channel (transport glue).
"""

__version__ = "0.1"

__all__ = [
    "constants",
    "config",
    "codec",
    "envelope",
    "channel",
    "errors",
]
