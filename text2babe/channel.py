from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from .codec import decrypt_auto, encrypt
from .config import CipherConfig
from .constants import Mode
from .envelope import Envelope, unwrap, wrap
from .errors import ForeignMessage, NotAnEnvelope

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChannelMessage:
    content: str
    author_id: Optional[str] = None


class Transport(Protocol):
    """Message channel the envelope travels over (a chat DM, for example).

    Implementations raise TransportError when the channel cannot be reached
    or holds no messages.
    """

    def fetch_last_message(self) -> ChannelMessage:
        ...

    def send_message(self, content: str) -> None:
        ...


class EnvelopeChannel:
    """Sends and receives enveloped payloads over an injected transport.

    When ``self_id`` is given, only messages authored by that id are accepted
    on fetch; anything else raises ForeignMessage before it is parsed.
    """

    def __init__(self, transport: Transport, *, self_id: Optional[str] = None):
        self.transport = transport
        self.self_id = self_id

    def send(self, payload: str, mode: Mode = Mode.ENCRYPT) -> str:
        message = wrap(payload, mode)
        self.transport.send_message(message)
        logger.info("sent %s envelope (%d chars)", Mode(mode).value, len(payload))
        return message

    def publish(self, plaintext: str, config: CipherConfig) -> str:
        payload = encrypt(plaintext, config)
        self.send(payload, Mode.ENCRYPT)
        return payload

    def fetch_last(self) -> Envelope:
        message = self.transport.fetch_last_message()
        if self.self_id is not None and message.author_id != self.self_id:
            logger.warning("ignoring last message: author %s is not %s", message.author_id, self.self_id)
            raise ForeignMessage("last message is not from your account")
        try:
            envelope = unwrap(message.content)
        except NotAnEnvelope:
            logger.warning("ignoring last message: not a text2babe envelope")
            raise
        logger.info("found text2babe message (%s mode)", envelope.mode.value)
        return envelope

    def receive(self, config: CipherConfig) -> Tuple[str, Mode]:
        envelope = self.fetch_last()
        return decrypt_auto(envelope.payload, config), envelope.mode
