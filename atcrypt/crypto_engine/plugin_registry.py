"""
PluginRegistry — the closed set of did:key curve plugins.

Usage:
    plugin = PluginRegistry.for_algorithm("ES256K")
    compressed = plugin.operations.compress_public_key(uncompressed)

    for alg in PluginRegistry.list_algorithms():
        print(PluginRegistry.get_info(alg))
"""

import logging
from dataclasses import dataclass

from atcrypt.crypto_engine.curve_base  import EllipticCurveOperations
from atcrypt.crypto_engine.errors      import UnsupportedKeyType
from atcrypt.crypto_engine.k256_crypto import K256Operations
from atcrypt.crypto_engine.p256_crypto import P256Operations
from atcrypt.crypto_engine.types       import KeyAlgorithm

logger = logging.getLogger("ATCrypt.PluginRegistry")


@dataclass(frozen=True)
class DIDKeyPlugin:
    algorithm:  KeyAlgorithm
    prefix:     bytes
    operations: EllipticCurveOperations

    @property
    def jwt_algorithm(self) -> str:
        return self.algorithm.value

    def compress(self, public_key: bytes) -> bytes:
        return self.operations.compress_public_key(public_key)

    def decompress(self, public_key: bytes) -> bytes:
        return self.operations.decompress_public_key(public_key)


_P256 = P256Operations()
_K256 = K256Operations()

P256_PLUGIN = DIDKeyPlugin(KeyAlgorithm.P256, _P256.did_prefix, _P256)
K256_PLUGIN = DIDKeyPlugin(KeyAlgorithm.K256, _K256.did_prefix, _K256)


def plugin_for(algorithm: KeyAlgorithm) -> DIDKeyPlugin:
    """Exhaustive dispatch from key algorithm to its plugin."""
    match algorithm:
        case KeyAlgorithm.P256:
            return P256_PLUGIN
        case KeyAlgorithm.K256:
            return K256_PLUGIN


class PluginRegistry:
    """Static lookup over the registered curve plugins."""

    # ── Registry ─────────────────────────────────────────────────
    # Ordered; read-only after import.
    _REGISTRY: tuple[DIDKeyPlugin, ...] = (P256_PLUGIN, K256_PLUGIN)

    # ── Lookup ───────────────────────────────────────────────────

    @classmethod
    def plugins(cls) -> tuple[DIDKeyPlugin, ...]:
        return cls._REGISTRY

    @classmethod
    def for_algorithm(cls, algorithm: KeyAlgorithm | str) -> DIDKeyPlugin:
        """
        Resolve a plugin by ``KeyAlgorithm`` or JWT tag string.

        Raises UnsupportedKeyType for anything else.
        """
        try:
            algorithm = KeyAlgorithm(algorithm)
        except ValueError:
            raise UnsupportedKeyType(
                f"Unsupported key type: {algorithm}. "
                f"Available: {cls.list_algorithms()}"
            ) from None
        return plugin_for(algorithm)

    @classmethod
    def for_prefixed_bytes(cls, data: bytes) -> DIDKeyPlugin:
        """Resolve the plugin whose prefix is the longest match for *data*."""
        matches = [p for p in cls._REGISTRY if data.startswith(p.prefix)]
        if not matches:
            raise UnsupportedKeyType(
                f"No plugin for multicodec prefix {data[:2].hex()}"
            )
        plugin = max(matches, key=lambda p: len(p.prefix))
        logger.debug("Resolved prefix %s → %s",
                     plugin.prefix.hex(), plugin.jwt_algorithm)
        return plugin

    # ── Discovery ────────────────────────────────────────────────

    @classmethod
    def list_algorithms(cls) -> list[str]:
        """Return JWT tags of every plugin, in registry order."""
        return [p.jwt_algorithm for p in cls._REGISTRY]

    @classmethod
    def get_info(cls, algorithm: KeyAlgorithm | str) -> dict:
        """Return curve metadata for a plugin."""
        return cls.for_algorithm(algorithm).operations.info()

    @classmethod
    def get_all_info(cls) -> list[dict]:
        return [cls.get_info(alg) for alg in cls.list_algorithms()]

    @classmethod
    def is_supported(cls, algorithm: KeyAlgorithm | str) -> bool:
        return algorithm in cls.list_algorithms()
