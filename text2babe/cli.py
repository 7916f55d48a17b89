from __future__ import annotations

import sys
import logging
import argparse

from typing import List

from text2babe.codec import decrypt, decrypt_auto, encrypt
from text2babe.config import CipherConfig
from text2babe.constants import DEFAULT_PASSWORD, MIN_PASSWORD_LENGTH, Mode, OutputFormat
from text2babe.envelope import unwrap, wrap
from text2babe.errors import NotAnEnvelope, Text2BabeError


def _read_text(words: List[str]) -> str:
    """Join positional words with spaces, or read stdin when none were given."""
    if words:
        return " ".join(words)
    return sys.stdin.read().strip()


def _build_config(password: str, *, use_encryption: bool, output_format: str = "hex") -> CipherConfig:
    return CipherConfig.from_password(
        password,
        use_encryption=use_encryption,
        output_format=OutputFormat.parse(output_format),
    )


def _warn_default_key(config: CipherConfig) -> None:
    if config.use_encryption and config.is_default_key:
        print("Warning: using the default password; pass --password to set your own key.", file=sys.stderr)


def cmd_encrypt(text: str, config: CipherConfig, *, envelope: bool = False) -> str:
    """Encrypt (or encode) text and print the result.

    Args:
        text: Plaintext to transform.
        config: Cipher settings (key, encryption toggle, output format).
        envelope: When True, print the chat envelope instead of the bare payload.
    """
    _warn_default_key(config)
    result = encrypt(text, config)
    if envelope:
        result = wrap(result, Mode.ENCRYPT)
    print(result)
    return result


def cmd_decrypt(text: str, config: CipherConfig, *, auto: bool = False) -> str:
    """Decrypt (or decode) a blob, accepting a chat envelope as input.

    Args:
        text: Encoded blob or full envelope text.
        config: Cipher settings; the output format is ignored (auto-detected).
        auto: Retry as plain decoding when authentication fails (only for
            blobs of unknown origin; disables tamper detection).
    """
    try:
        text = unwrap(text).payload
    except NotAnEnvelope:
        pass  # bare blob
    result = decrypt_auto(text, config) if auto else decrypt(text, config)
    print(result)
    return result


def cmd_key(config: CipherConfig) -> None:
    print(f"Key fingerprint: {config.key_fingerprint}")
    if len(config.key_source) < MIN_PASSWORD_LENGTH:
        print("Warning: consider using a longer password for better security.", file=sys.stderr)
    if config.is_default_key:
        print("Key source: default password (change it with --password)")
    else:
        print("Key source: custom password")


def _add_password(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--password", default=DEFAULT_PASSWORD, help="Password the key is derived from")


def _add_cipher_toggle(ap: argparse.ArgumentParser) -> None:
    group = ap.add_mutually_exclusive_group()
    group.add_argument("--encrypt", dest="use_encryption", action="store_true", help="AES-GCM encrypt/decrypt")
    group.add_argument("--plain", dest="use_encryption", action="store_false", help="Plain encode/decode only (default)")
    ap.set_defaults(use_encryption=False)


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(
        prog="text2babe",
        description="Encrypt or encode text for pasting into chats; decoding auto-detects the format.",
        epilog="Input is taken from the arguments, or from stdin when none are given.",
    )
    ap.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_encrypt = sub.add_parser("encrypt", help="Encrypt or encode text")
    ap_encrypt.add_argument("text", nargs="*", help="Text to encrypt")
    _add_password(ap_encrypt)
    _add_cipher_toggle(ap_encrypt)
    ap_encrypt.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.HEX.value,
        help="Output format (default: hex)",
    )
    ap_encrypt.add_argument("--envelope", action="store_true", help="Wrap the output in a chat envelope")

    ap_decrypt = sub.add_parser("decrypt", help="Decrypt or decode a blob (format auto-detected)")
    ap_decrypt.add_argument("text", nargs="*", help="Blob or envelope to decrypt")
    _add_password(ap_decrypt)
    _add_cipher_toggle(ap_decrypt)
    ap_decrypt.add_argument("--auto", action="store_true", help="Fall back to plain decoding if decryption fails")

    ap_wrap = sub.add_parser("wrap", help="Wrap a payload in a chat envelope")
    ap_wrap.add_argument("text", nargs="*", help="Payload")
    ap_wrap.add_argument("--mode", choices=[m.value for m in Mode], default=Mode.ENCRYPT.value)

    ap_unwrap = sub.add_parser("unwrap", help="Extract the payload from a chat envelope")
    ap_unwrap.add_argument("text", nargs="*", help="Envelope text")

    ap_key = sub.add_parser("key", help="Show the key fingerprint")
    _add_password(ap_key)

    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    try:
        if args.cmd == "encrypt":
            config = _build_config(args.password, use_encryption=args.use_encryption, output_format=args.format)
            cmd_encrypt(_read_text(args.text), config, envelope=args.envelope)
        elif args.cmd == "decrypt":
            config = _build_config(args.password, use_encryption=args.use_encryption)
            cmd_decrypt(_read_text(args.text), config, auto=args.auto)
        elif args.cmd == "wrap":
            print(wrap(_read_text(args.text), Mode.parse(args.mode)))
        elif args.cmd == "unwrap":
            envelope = unwrap(_read_text(args.text))
            print(f"{envelope.mode.value}\t{envelope.payload}")
        elif args.cmd == "key":
            cmd_key(CipherConfig.from_password(args.password))
        else:
            raise RuntimeError("Unknown command")
    except (Text2BabeError, ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
