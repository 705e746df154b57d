"""
Base32 codec (RFC 4648 alphabet, lowercase by default).

Decoding is lenient about case and trailing padding but returns None
on anything it cannot read, including an empty result.
"""

import base64

_ALPHABET = "abcdefghijklmnopqrstuvwxyz234567"
_LOOKUP   = {ch: i for i, ch in enumerate(_ALPHABET)}
_LOOKUP.update({ch.upper(): i for ch, i in list(_LOOKUP.items())})


class Base32:

    @staticmethod
    def encode(data: bytes) -> str:
        return base64.b32encode(bytes(data)).decode("ascii").lower()

    @staticmethod
    def encode_upper(data: bytes) -> str:
        return base64.b32encode(bytes(data)).decode("ascii")

    @staticmethod
    def decode(text: str) -> bytes | None:
        body = text.rstrip("=")

        out    = bytearray()
        buffer = 0
        bits   = 0
        for ch in body:
            value = _LOOKUP.get(ch)
            if value is None:
                return None
            buffer = (buffer << 5) | value
            bits  += 5
            if bits >= 8:
                bits -= 8
                out.append((buffer >> bits) & 0xFF)
                buffer &= (1 << bits) - 1

        if not out:
            return None
        return bytes(out)
