from __future__ import annotations

from dataclasses import dataclass, field, replace

from .constants import DEFAULT_OUTPUT_FORMAT, DEFAULT_PASSWORD, OutputFormat
from .hashutil import derive_key, key_fingerprint


@dataclass(frozen=True)
class CipherConfig:
    """Settings for one encrypt/decrypt call.

    Instances are immutable; the ``with_*`` helpers return a new value, so a
    config can be shared between threads without coordination. ``key_source``
    is kept only so callers can warn while the default password is in use.
    """

    key: bytes = field(repr=False)
    key_source: str = field(repr=False)
    use_encryption: bool = False
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT

    @classmethod
    def from_password(
        cls,
        password: str,
        *,
        use_encryption: bool = False,
        output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT,
    ) -> "CipherConfig":
        return cls(
            key=derive_key(password),
            key_source=password,
            use_encryption=use_encryption,
            output_format=OutputFormat(output_format),
        )

    @classmethod
    def default(cls) -> "CipherConfig":
        return cls.from_password(DEFAULT_PASSWORD)

    def with_password(self, password: str) -> "CipherConfig":
        return replace(self, key=derive_key(password), key_source=password)

    def with_encryption(self, enabled: bool) -> "CipherConfig":
        return replace(self, use_encryption=bool(enabled))

    def with_output_format(self, output_format: OutputFormat) -> "CipherConfig":
        return replace(self, output_format=OutputFormat(output_format))

    def toggled_encryption(self) -> "CipherConfig":
        return self.with_encryption(not self.use_encryption)

    def cycled_output_format(self) -> "CipherConfig":
        return self.with_output_format(self.output_format.next())

    @property
    def key_fingerprint(self) -> str:
        return key_fingerprint(self.key)

    @property
    def is_default_key(self) -> bool:
        return self.key_source == DEFAULT_PASSWORD
