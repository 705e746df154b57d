"""
Base58 (bitcoin alphabet) codec and Base58Check, backed by the
``base58`` package.
"""

import base58

from atcrypt.crypto_engine.errors import InvalidCharacter, InvalidChecksum

ALPHABET  = base58.BITCOIN_ALPHABET.decode("ascii")
_ALPHABET = frozenset(ALPHABET)


class Base58:

    @staticmethod
    def encode(data: bytes) -> str:
        """Encode; each leading zero byte becomes a leading ``1``."""
        return base58.b58encode(bytes(data)).decode("ascii")

    @staticmethod
    def decode(text: str) -> bytes:
        Base58._check_alphabet(text)
        return base58.b58decode(text)

    # ── Base58Check ──────────────────────────────────────────────
    @staticmethod
    def encode_check(data: bytes, version: int = 0) -> str:
        """
        Prepend *version* and append a 4-byte double-SHA-256 checksum.
        """
        if not 0 <= version <= 0xFF:
            raise ValueError(f"Version must fit in one byte, got {version}")
        payload = bytes([version]) + bytes(data)
        return base58.b58encode_check(payload).decode("ascii")

    @staticmethod
    def decode_check(text: str) -> tuple[int, bytes]:
        """Return *(version, payload)*; raise InvalidChecksum on mismatch."""
        Base58._check_alphabet(text)
        try:
            raw = base58.b58decode_check(text)
        except ValueError:
            raise InvalidChecksum() from None
        if not raw:
            raise InvalidChecksum("Base58Check data too short")
        return raw[0], raw[1:]

    @staticmethod
    def _check_alphabet(text: str):
        for ch in text:
            if ch not in _ALPHABET:
                raise InvalidCharacter(ch)
