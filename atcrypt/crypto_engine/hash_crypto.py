"""
SHA-256 hashing helpers.
"""

from cryptography.hazmat.primitives import hashes

from atcrypt.crypto_engine.worker_pool import run_in_worker


class HashCrypto:
    """Static helpers for SHA-256, with worker-pool async variants."""

    # ── sync ─────────────────────────────────────────────────────
    @staticmethod
    def sha256(data: bytes | str) -> bytes:
        if isinstance(data, str):
            data = data.encode("utf-8")
        d = hashes.Hash(hashes.SHA256())
        d.update(data)
        return d.finalize()

    @staticmethod
    def sha256_hex(data: bytes | str) -> str:
        return HashCrypto.sha256(data).hex()

    # ── async ────────────────────────────────────────────────────
    @staticmethod
    async def sha256_async(data: bytes | str) -> bytes:
        return await run_in_worker(HashCrypto.sha256, data)

    @staticmethod
    async def sha256_hex_async(data: bytes | str) -> str:
        return await run_in_worker(HashCrypto.sha256_hex, data)
