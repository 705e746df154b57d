"""
Base16 (hex) codec.
"""

import string

from atcrypt.crypto_engine.errors import OddLength, InvalidCharacter

_HEX_DIGITS = frozenset(string.hexdigits)


class Base16:

    @staticmethod
    def encode(data: bytes) -> str:
        return bytes(data).hex()

    @staticmethod
    def encode_upper(data: bytes) -> str:
        return bytes(data).hex().upper()

    @staticmethod
    def decode(text: str) -> bytes:
        """
        Decode a hex string of either case.

        Raises OddLength for an odd number of digits and
        InvalidCharacter for anything outside ``0-9a-fA-F``.
        """
        if len(text) % 2:
            raise OddLength(len(text))
        for ch in text:
            if ch not in _HEX_DIGITS:
                raise InvalidCharacter(ch)
        return bytes.fromhex(text)
