"""
Cryptographically-secure random value generators.
"""

import os

from atcrypt.crypto_engine.errors      import InvalidRange
from atcrypt.crypto_engine.hash_crypto import HashCrypto
from atcrypt.utils.multibase           import Multibase, MultibaseEncoding


class SecureRandom:

    @staticmethod
    def random_bytes(length: int) -> bytes:
        if length <= 0:
            return b""
        return os.urandom(length)

    @staticmethod
    def random_string(byte_count: int,
                      encoding: MultibaseEncoding | str) -> str:
        """Random bytes rendered as a multibase string (tag included)."""
        return Multibase.bytes_to_multibase(
            SecureRandom.random_bytes(byte_count), encoding)

    @staticmethod
    def random_int(seed: bytes | str, high: int, low: int = 0) -> int:
        """
        Deterministic integer in ``[low, high)`` derived from *seed*.

        The first 6 bytes of SHA-256(seed), read big-endian, are reduced
        modulo the range width. Same seed, same result.
        """
        if low >= high:
            raise InvalidRange(low, high)
        digest = HashCrypto.sha256(seed)
        return int.from_bytes(digest[:6], "big") % (high - low) + low

    @staticmethod
    def random_scalar(order: int) -> int:
        """Uniform scalar in ``[1, order - 1]`` by rejection sampling."""
        size = (order.bit_length() + 7) // 8
        while True:
            candidate = int.from_bytes(SecureRandom.random_bytes(size), "big")
            if 0 < candidate < order:
                return candidate
