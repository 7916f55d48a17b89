class Text2BabeError(Exception):
    """Base class for text2babe errors."""


# Cipher
class CipherError(Text2BabeError):
    pass


class CipherInitError(CipherError):
    """Key material could not be turned into a cipher (wrong key length)."""


class RngError(CipherError):
    """The secure random source could not supply a nonce."""


class DecryptError(CipherError):
    pass


class TooShort(DecryptError):
    pass


class AuthenticationFailed(DecryptError):
    pass


# Envelope
class NotAnEnvelope(Text2BabeError):
    pass


# Channel
class ChannelError(Text2BabeError):
    pass


class TransportError(ChannelError):
    pass


class ForeignMessage(ChannelError):
    pass
