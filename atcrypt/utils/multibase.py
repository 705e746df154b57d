"""
Multibase — a one-character tag in front of an encoded string naming
the encoding that follows.

Usage:
    text = Multibase.bytes_to_multibase(b"hi", MultibaseEncoding.BASE58BTC)
    data = Multibase.multibase_to_bytes(text)
"""

import base64
import binascii
from enum import Enum

from atcrypt.crypto_engine.errors import ATCryptError, UnsupportedMultibase
from atcrypt.utils.base16    import Base16
from atcrypt.utils.base32    import Base32
from atcrypt.utils.base58btc import Base58
from atcrypt.utils.base64url import Base64URL


class MultibaseEncoding(Enum):
    BASE16       = "base16"
    BASE16UPPER  = "base16upper"
    BASE32       = "base32"
    BASE32UPPER  = "base32upper"
    BASE58BTC    = "base58btc"
    BASE64       = "base64"
    BASE64URL    = "base64url"
    BASE64URLPAD = "base64urlpad"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]

    @classmethod
    def from_prefix(cls, prefix: str) -> "MultibaseEncoding":
        for encoding, tag in _PREFIXES.items():
            if tag == prefix:
                return encoding
        raise UnsupportedMultibase(prefix)


_PREFIXES = {
    MultibaseEncoding.BASE16:       "f",
    MultibaseEncoding.BASE16UPPER:  "F",
    MultibaseEncoding.BASE32:       "b",
    MultibaseEncoding.BASE32UPPER:  "B",
    MultibaseEncoding.BASE58BTC:    "z",
    MultibaseEncoding.BASE64:       "m",
    MultibaseEncoding.BASE64URL:    "u",
    MultibaseEncoding.BASE64URLPAD: "U",
}


def _b64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def _b64_decode(text: str) -> bytes | None:
    body = text.rstrip("=")
    try:
        return base64.b64decode(body + "=" * (-len(body) % 4), validate=True)
    except (binascii.Error, ValueError):
        return None


class Multibase:

    _ENCODERS = {
        MultibaseEncoding.BASE16:       Base16.encode,
        MultibaseEncoding.BASE16UPPER:  Base16.encode_upper,
        MultibaseEncoding.BASE32:       Base32.encode,
        MultibaseEncoding.BASE32UPPER:  Base32.encode_upper,
        MultibaseEncoding.BASE58BTC:    Base58.encode,
        MultibaseEncoding.BASE64:       _b64_encode,
        MultibaseEncoding.BASE64URL:    Base64URL.encode,
        MultibaseEncoding.BASE64URLPAD: Base64URL.encode_pad,
    }

    _DECODERS = {
        MultibaseEncoding.BASE16:       Base16.decode,
        MultibaseEncoding.BASE16UPPER:  Base16.decode,
        MultibaseEncoding.BASE32:       Base32.decode,
        MultibaseEncoding.BASE32UPPER:  Base32.decode,
        MultibaseEncoding.BASE58BTC:    Base58.decode,
        MultibaseEncoding.BASE64:       _b64_decode,
        MultibaseEncoding.BASE64URL:    Base64URL.decode,
        MultibaseEncoding.BASE64URLPAD: Base64URL.decode_pad,
    }

    @classmethod
    def encode(cls, data: bytes, encoding: MultibaseEncoding | str) -> str:
        """Encode without the multibase tag."""
        return cls._ENCODERS[MultibaseEncoding(encoding)](bytes(data))

    @classmethod
    def bytes_to_multibase(cls, data: bytes,
                           encoding: MultibaseEncoding | str) -> str:
        encoding = MultibaseEncoding(encoding)
        return encoding.prefix + cls.encode(data, encoding)

    @classmethod
    def multibase_to_bytes(cls, text: str) -> bytes:
        """
        Decode a multibase string.

        Raises UnsupportedMultibase for an empty string, an unknown
        tag, or a body the tagged codec cannot decode.
        """
        if not text:
            raise UnsupportedMultibase(text)
        encoding = MultibaseEncoding.from_prefix(text[0])
        try:
            data = cls._DECODERS[encoding](text[1:])
        except ATCryptError:
            raise UnsupportedMultibase(text) from None
        if data is None:
            raise UnsupportedMultibase(text)
        return data
