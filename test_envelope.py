from __future__ import annotations

import unittest

from text2babe.codec import decrypt, encrypt
from text2babe.config import CipherConfig
from text2babe.constants import Mode, OutputFormat
from text2babe.envelope import Envelope, is_envelope, unwrap, wrap
from text2babe.errors import NotAnEnvelope


class WrapTests(unittest.TestCase):
    def test_template(self):
        self.assertEqual(
            wrap("abcd", Mode.ENCRYPT),
            "\U0001F512 **Text2Babe encrypt**\n```\nabcd\n```",
        )
        self.assertEqual(
            wrap("abcd", "decrypt"),
            "\U0001F513 **Text2Babe decrypt**\n```\nabcd\n```",
        )

    def test_unknown_mode_string(self):
        with self.assertRaises(ValueError):
            wrap("abcd", "encode")


class UnwrapTests(unittest.TestCase):
    def test_roundtrip(self):
        payloads = [
            "68656c6c6f",
            "aGVsbG8gd29ybGQ=",
            "0100100001101001",
            "line one\nline two",
            "contains ` and `` but no fence",
        ]
        for payload in payloads:
            for mode in (Mode.ENCRYPT, Mode.DECRYPT):
                with self.subTest(payload=payload, mode=mode.value):
                    self.assertEqual(unwrap(wrap(payload, mode)), (payload, mode.value))

    def test_returns_named_tuple(self):
        env = unwrap(wrap("abcd", Mode.DECRYPT))
        self.assertIsInstance(env, Envelope)
        self.assertIs(env.mode, Mode.DECRYPT)
        self.assertEqual(env.payload, "abcd")

    def test_surrounding_whitespace_trimmed(self):
        text = "\n\n  " + wrap("abcd", Mode.ENCRYPT) + "  \n"
        self.assertEqual(unwrap(text), ("abcd", "encrypt"))
        padded = "\U0001F512 **Text2Babe encrypt**\n```\n   abcd   \n```"
        self.assertEqual(unwrap(padded).payload, "abcd")

    def test_crlf_line_endings(self):
        text = "\U0001F512 **Text2Babe encrypt**\r\n```\r\nabcd\r\n```\r\n"
        self.assertEqual(unwrap(text), ("abcd", "encrypt"))
        self.assertEqual(unwrap(wrap("abcd", Mode.DECRYPT).replace("\n", "\r\n")), ("abcd", "decrypt"))

    def test_marker_not_bound_to_mode(self):
        text = "\U0001F513 **Text2Babe encrypt**\n```\nabcd\n```"
        self.assertEqual(unwrap(text), ("abcd", "encrypt"))

    def test_rejects_unrelated_text(self):
        for text in [
            "",
            "hello there",
            "68656c6c6f",
            "```\nabcd\n```",
            "**Text2Babe encrypt**\n```\nabcd\n```",
            "\U0001F512 **Text2Babe encrypt**\nabcd",
            "\U0001F512 **Text2Babe encrypt** ```abcd```",
            "\U0001F512 **Text2Babe encrypt**\n```\nabcd\n```\ntrailing words",
            "prefix \U0001F512 **Text2Babe encrypt**\n```\nabcd\n```",
            "\U0001F512 **OtherApp encrypt**\n```\nabcd\n```",
            "✅ **Text2Babe encrypt**\n```\nabcd\n```",
        ]:
            with self.subTest(text=text):
                with self.assertRaises(NotAnEnvelope):
                    unwrap(text)
                self.assertFalse(is_envelope(text))

    def test_rejects_unsupported_mode(self):
        for word in ("encode", "decode", "Encrypt", "sign"):
            text = f"\U0001F512 **Text2Babe {word}**\n```\nabcd\n```"
            with self.subTest(word=word):
                with self.assertRaises(NotAnEnvelope):
                    unwrap(text)

    def test_rejects_empty_payload(self):
        for text in [
            "\U0001F512 **Text2Babe encrypt**\n```\n\n```",
            "\U0001F512 **Text2Babe encrypt**\n```\n   \n```",
            "\U0001F512 **Text2Babe encrypt**\n```\n```",
        ]:
            with self.subTest(text=text):
                with self.assertRaises(NotAnEnvelope):
                    unwrap(text)

    def test_rejects_embedded_fence(self):
        text = "\U0001F512 **Text2Babe encrypt**\n```\nabcd\n```\nmore\n```"
        with self.assertRaises(NotAnEnvelope):
            unwrap(text)


class EnvelopeCipherTests(unittest.TestCase):
    def test_encrypted_payload_through_envelope(self):
        for fmt in OutputFormat:
            config = CipherConfig.from_password("pw", use_encryption=True, output_format=fmt)
            message = wrap(encrypt("meet at noon", config), Mode.ENCRYPT)
            payload, mode = unwrap(message)
            self.assertEqual(mode, "encrypt")
            self.assertEqual(decrypt(payload, config), "meet at noon")


if __name__ == "__main__":
    unittest.main()
