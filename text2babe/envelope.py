"""Chat envelope used to recognise text2babe payloads on a shared channel.

Layout::

    🔒 **Text2Babe encrypt**
    ```
    <payload>
    ```

The parser is deliberately strict: a message that does not match the template
exactly is not ours, and its contents must never reach the decrypt path.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from .constants import ENVELOPE_FENCE, ENVELOPE_LABEL, MARKER_DECRYPT, MARKER_ENCRYPT, MODE_MARKERS, Mode
from .errors import NotAnEnvelope

_FENCE = re.escape(ENVELOPE_FENCE)

_ENVELOPE_RE = re.compile(
    r"\A(?P<marker>" + re.escape(MARKER_ENCRYPT) + "|" + re.escape(MARKER_DECRYPT) + r")"
    r"\s\*\*" + re.escape(ENVELOPE_LABEL) + r"\s(?P<mode>\w+)\*\*[ \t]*\n"
    + _FENCE + r"[ \t]*\n?"
    r"(?P<payload>(?:(?!" + _FENCE + r").)*?)"
    r"\s*\n" + _FENCE + r"\Z",
    re.DOTALL,
)


class Envelope(NamedTuple):
    payload: str
    mode: Mode


def wrap(payload: str, mode: Mode) -> str:
    mode = Mode(mode)
    return f"{MODE_MARKERS[mode]} **{ENVELOPE_LABEL} {mode.value}**\n{ENVELOPE_FENCE}\n{payload}\n{ENVELOPE_FENCE}"


def unwrap(message_text: str) -> Envelope:
    """Extract ``(payload, mode)`` from an envelope.

    Raises NotAnEnvelope if the text does not follow the template, names a
    mode other than encrypt/decrypt, or carries an empty payload.
    """
    m = _ENVELOPE_RE.match(message_text.replace("\r\n", "\n").strip())
    if m is None:
        raise NotAnEnvelope("message is not from text2babe (invalid format)")
    try:
        mode = Mode(m.group("mode"))
    except ValueError:
        raise NotAnEnvelope(f"message is not from text2babe (unsupported mode {m.group('mode')!r})") from None
    payload = m.group("payload").strip()
    if not payload:
        raise NotAnEnvelope("no encrypted data found in message")
    return Envelope(payload, mode)


def is_envelope(text: str) -> bool:
    try:
        unwrap(text)
    except NotAnEnvelope:
        return False
    return True
