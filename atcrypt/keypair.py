"""
In-memory signing keypairs for P-256 and secp256k1.

A keypair is created either fresh (``generate``) or from a raw 32-byte
scalar (``import_private_key``). Whether the scalar may be exported is
fixed at creation. Nothing is persisted.
"""

import logging
from abc import ABC, abstractmethod

from cryptography.hazmat.primitives.asymmetric import ec

from atcrypt.config.settings               import Settings
from atcrypt.crypto_engine.errors          import (
    InvalidPrivateKey, PrivateKeyNotExportable,
)
from atcrypt.crypto_engine.hash_crypto     import HashCrypto
from atcrypt.crypto_engine.plugin_registry import plugin_for
from atcrypt.crypto_engine.signature       import ECDSASignature
from atcrypt.crypto_engine.types           import KeyAlgorithm
from atcrypt.crypto_engine.worker_pool     import run_in_worker
from atcrypt.did.did_key                   import DIDKey
from atcrypt.utils.base16                  import Base16
from atcrypt.utils.multibase               import Multibase, MultibaseEncoding
from atcrypt.utils.random_gen              import SecureRandom

logger = logging.getLogger("ATCrypt.Keypair")


class Keypair(ABC):
    """Capabilities every keypair offers."""

    @property
    @abstractmethod
    def jwt_algorithm(self) -> str:
        """JWT ``alg`` tag, e.g. 'ES256K'."""

    @abstractmethod
    def sign(self, message: bytes) -> bytes:
        """SHA-256 *message* and sign it → DER, low-S."""

    @abstractmethod
    def did(self) -> str:
        """did:key identifier of the public key."""

    @abstractmethod
    def export(self) -> bytes:
        """Raw 32-byte private scalar, if exportable."""


class ECKeypair(Keypair):
    """Keypair over one of the registered curves."""

    ALGORITHM: KeyAlgorithm

    def __init__(self, private_key: ec.EllipticCurvePrivateKey,
                 exportable: bool = False):
        self._private_key = private_key
        self._exportable  = bool(exportable)
        self._operations  = plugin_for(self.ALGORITHM).operations
        self._public_key  = self._operations.public_key_bytes(
            private_key.public_key())

    # ── construction ─────────────────────────────────────────────

    @classmethod
    def generate(cls, exportable: bool = False) -> "ECKeypair":
        operations = plugin_for(cls.ALGORITHM).operations
        scalar     = SecureRandom.random_scalar(operations.order)
        keypair    = cls(ec.derive_private_key(scalar, operations.curve),
                         exportable)
        logger.debug("Generated %s keypair (exportable=%s)",
                     cls.ALGORITHM.name, keypair._exportable)
        return keypair

    @classmethod
    def import_private_key(cls, private_key: bytes | str,
                           exportable: bool = False) -> "ECKeypair":
        """
        Build a keypair from a raw scalar, as bytes or a hex string.

        The scalar must be 32 bytes and lie in ``[1, N-1]``.
        """
        if isinstance(private_key, str):
            try:
                private_key = Base16.decode(private_key)
            except ValueError:
                raise InvalidPrivateKey("Private key is not valid hex") from None

        if len(private_key) != Settings.PRIVATE_KEY_SIZE:
            raise InvalidPrivateKey(
                f"Private key must be {Settings.PRIVATE_KEY_SIZE} bytes, "
                f"got {len(private_key)}"
            )

        operations = plugin_for(cls.ALGORITHM).operations
        scalar     = int.from_bytes(private_key, "big")
        if not 0 < scalar < operations.order:
            raise InvalidPrivateKey("Private key is outside the curve order")

        logger.debug("Imported %s keypair (exportable=%s)",
                     cls.ALGORITHM.name, bool(exportable))
        return cls(ec.derive_private_key(scalar, operations.curve), exportable)

    # ── identity ─────────────────────────────────────────────────

    @property
    def jwt_algorithm(self) -> str:
        return self.ALGORITHM.value

    @property
    def exportable(self) -> bool:
        return self._exportable

    def public_key_bytes(self) -> bytes:
        """65-byte uncompressed SEC1 public key."""
        return self._public_key

    def public_key_string(self, encoding: MultibaseEncoding | str =
                          Settings.DEFAULT_PUBLIC_KEY_ENCODING) -> str:
        return Multibase.encode(self._public_key, encoding)

    def did(self) -> str:
        return DIDKey.format_did_key(self.ALGORITHM, self._public_key)

    # ── signing ──────────────────────────────────────────────────

    def sign(self, message: bytes) -> bytes:
        return self._operations.sign(self._private_key,
                                     HashCrypto.sha256(message))

    def sign_compact(self, message: bytes) -> bytes:
        """64-byte ``r ‖ s``, low-S."""
        return ECDSASignature.der_to_compact(self.sign(message),
                                             self._operations.order)

    async def sign_async(self, message: bytes) -> bytes:
        return await run_in_worker(self.sign, message)

    # ── export ───────────────────────────────────────────────────

    def export(self) -> bytes:
        if not self._exportable:
            raise PrivateKeyNotExportable()
        scalar = self._private_key.private_numbers().private_value
        return scalar.to_bytes(Settings.PRIVATE_KEY_SIZE, "big")

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(did={self.did()!r}, "
                f"exportable={self._exportable})")


class P256Keypair(ECKeypair):
    ALGORITHM = KeyAlgorithm.P256


class K256Keypair(ECKeypair):
    ALGORITHM = KeyAlgorithm.K256
