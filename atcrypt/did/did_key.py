"""
did:key and multikey encoding.

    multikey  →  "z" + base58btc(prefix ‖ compressed public key)
    did:key   →  "did:key:" + multikey

The two-byte multicodec prefix names the curve; the registry maps it
to the plugin that compresses and decompresses the key.
"""

import logging

from atcrypt.config.settings               import Settings
from atcrypt.crypto_engine.errors          import (
    InvalidDIDPrefix, InvalidMultikeyPrefix, InvalidKeyLength,
)
from atcrypt.crypto_engine.plugin_registry import PluginRegistry
from atcrypt.crypto_engine.types           import KeyAlgorithm, ParsedMultikey
from atcrypt.utils.base58btc               import Base58

logger = logging.getLogger("ATCrypt.DIDKey")


class DIDKey:
    """Static helpers for formatting and parsing did:key identifiers."""

    # ── prefix handling ──────────────────────────────────────────

    @staticmethod
    def has_prefix(data: bytes, prefix: bytes) -> bool:
        return bytes(data[:len(prefix)]) == prefix

    @staticmethod
    def extract_multikey(did: str) -> str:
        """Strip ``did:key:``; raise InvalidDIDPrefix if absent."""
        if not did.startswith(Settings.DID_KEY_PREFIX):
            raise InvalidDIDPrefix(did)
        return did[len(Settings.DID_KEY_PREFIX):]

    @staticmethod
    def extract_prefixed_bytes(multikey: str) -> bytes:
        """Strip the ``z`` tag and base58-decode the rest."""
        if not multikey.startswith(Settings.BASE58_MULTIBASE_PREFIX):
            raise InvalidMultikeyPrefix(multikey)
        return Base58.decode(multikey[len(Settings.BASE58_MULTIBASE_PREFIX):])

    # ── multikey ─────────────────────────────────────────────────

    @staticmethod
    def parse_multikey(multikey: str) -> ParsedMultikey:
        """
        Decode a multikey into its JWT tag and 65-byte public key.

        Raises InvalidMultikeyPrefix, InvalidCharacter,
        UnsupportedKeyType or a key decoding error.
        """
        prefixed = DIDKey.extract_prefixed_bytes(multikey)
        plugin   = PluginRegistry.for_prefixed_bytes(prefixed)
        key      = plugin.decompress(prefixed[len(plugin.prefix):])
        return ParsedMultikey(plugin.jwt_algorithm, key)

    @staticmethod
    def format_multikey(jwt_algorithm: KeyAlgorithm | str,
                        key_bytes: bytes) -> str:
        """
        Encode a 33- or 65-byte SEC1 key as ``z...``.

        The key is always stored compressed, so parsing the result
        yields the 65-byte uncompressed form whichever was given.
        """
        plugin     = PluginRegistry.for_algorithm(jwt_algorithm)
        compressed = DIDKey._compress(plugin, key_bytes)
        return (Settings.BASE58_MULTIBASE_PREFIX
                + Base58.encode(plugin.prefix + compressed))

    # ── did:key ──────────────────────────────────────────────────

    @staticmethod
    def parse_did_key(did: str) -> ParsedMultikey:
        parsed = DIDKey.parse_multikey(DIDKey.extract_multikey(did))
        logger.debug("Parsed did:key (%s)", parsed.jwt_algorithm)
        return parsed

    @staticmethod
    def format_did_key(jwt_algorithm: KeyAlgorithm | str,
                       key_bytes: bytes) -> str:
        """Same input rules as ``format_multikey``."""
        return Settings.DID_KEY_PREFIX + DIDKey.format_multikey(
            jwt_algorithm, key_bytes)

    @staticmethod
    def _compress(plugin, key_bytes: bytes) -> bytes:
        key_bytes = bytes(key_bytes)
        if len(key_bytes) == Settings.COMPRESSED_PUBKEY_SIZE:
            # validates the point before accepting it as-is
            plugin.decompress(key_bytes)
            return key_bytes
        if len(key_bytes) == Settings.UNCOMPRESSED_PUBKEY_SIZE:
            return plugin.compress(key_bytes)
        raise InvalidKeyLength(
            f"{Settings.COMPRESSED_PUBKEY_SIZE} or "
            f"{Settings.UNCOMPRESSED_PUBKEY_SIZE}",
            len(key_bytes),
        )
