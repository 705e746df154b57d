"""
Abstract base class for the elliptic curves supported by ATCrypt.

Each curve (P-256, secp256k1) supplies its domain parameters, its
did:key multicodec prefix and its JWT tag; the point encoding,
signing and verification logic is shared here.
"""

import logging
from abc import ABC, abstractmethod

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed

from atcrypt.config.settings           import Settings
from atcrypt.crypto_engine.errors      import (
    InvalidKeyLength, PointNotOnCurve, InvalidPublicKey,
    InvalidSignatureFormat, InvalidCurveDID,
)
from atcrypt.crypto_engine.hash_crypto import HashCrypto
from atcrypt.crypto_engine.signature   import ECDSASignature
from atcrypt.crypto_engine.types       import (
    KeyAlgorithm, SignatureFormat, VerifyOptions, DEFAULT_VERIFY_OPTIONS,
)

_PREHASHED_SHA256 = ec.ECDSA(Prehashed(hashes.SHA256()))


class EllipticCurveOperations(ABC):
    """
    Uniform interface over one elliptic curve.

    Public keys travel as SEC1 bytes:
        compressed    → 0x02|0x03 ‖ X          (33 bytes)
        uncompressed  → 0x04 ‖ X ‖ Y           (65 bytes)

    Signatures are produced as DER with low-S and verified per
    ``VerifyOptions``.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"ATCrypt.{self.name}")

    # ── curve parameters ─────────────────────────────────────────

    @property
    @abstractmethod
    def name(self) -> str:
        """Short curve name, e.g. 'P256'."""

    @property
    @abstractmethod
    def algorithm(self) -> KeyAlgorithm:
        """Key algorithm served by this curve."""

    @property
    @abstractmethod
    def curve(self) -> ec.EllipticCurve:
        """``cryptography`` curve instance."""

    @property
    @abstractmethod
    def did_prefix(self) -> bytes:
        """Two-byte multicodec prefix used in did:key."""

    @property
    @abstractmethod
    def p(self) -> int:
        """Field prime."""

    @property
    @abstractmethod
    def a(self) -> int:
        """Weierstrass coefficient a."""

    @property
    @abstractmethod
    def b(self) -> int:
        """Weierstrass coefficient b."""

    @property
    @abstractmethod
    def order(self) -> int:
        """Group order N."""

    @property
    def jwt_algorithm(self) -> str:
        return self.algorithm.value

    def info(self) -> dict:
        """Return curve metadata."""
        return {
            "name":           self.name,
            "curve":          self.curve.name,
            "jwt_algorithm":  self.jwt_algorithm,
            "did_prefix":     self.did_prefix.hex(),
            "key_bits":       self.curve.key_size,
            "compressed":     Settings.COMPRESSED_PUBKEY_SIZE,
            "uncompressed":   Settings.UNCOMPRESSED_PUBKEY_SIZE,
        }

    # ── point compression ────────────────────────────────────────

    def compress_public_key(self, public_key: bytes) -> bytes:
        """
        65-byte ``04‖X‖Y`` → 33-byte ``02|03‖X``.

        The point is validated first; an off-curve key raises
        InvalidPublicKey.
        """
        if len(public_key) != Settings.UNCOMPRESSED_PUBKEY_SIZE:
            raise InvalidKeyLength(Settings.UNCOMPRESSED_PUBKEY_SIZE,
                                   len(public_key))
        if public_key[0] != 0x04:
            raise InvalidKeyLength(
                Settings.UNCOMPRESSED_PUBKEY_SIZE, len(public_key),
                f"Uncompressed key must start with 0x04, "
                f"got 0x{public_key[0]:02x}",
            )
        self.load_public_key(public_key)

        x = public_key[1:33]
        y = int.from_bytes(public_key[33:], "big")
        return bytes([0x03 if y & 1 else 0x02]) + x

    def decompress_public_key(self, public_key: bytes) -> bytes:
        """
        33-byte ``02|03‖X`` → 65-byte ``04‖X‖Y``.

        Solves ``y² = x³ + ax + b (mod p)``. Both supported primes are
        ≡ 3 (mod 4), so a root is ``(y²)^((p+1)/4)``; the prefix byte
        picks its parity.
        """
        if len(public_key) != Settings.COMPRESSED_PUBKEY_SIZE:
            raise InvalidKeyLength(Settings.COMPRESSED_PUBKEY_SIZE,
                                   len(public_key))
        if public_key[0] not in (0x02, 0x03):
            raise InvalidKeyLength(
                Settings.COMPRESSED_PUBKEY_SIZE, len(public_key),
                f"Compressed key must start with 0x02 or 0x03, "
                f"got 0x{public_key[0]:02x}",
            )

        p = self.p
        x = int.from_bytes(public_key[1:], "big")
        if x >= p:
            raise PointNotOnCurve("X coordinate exceeds field prime")

        y2 = (pow(x, 3, p) + self.a * x + self.b) % p
        y  = pow(y2, (p + 1) // 4, p)
        if y * y % p != y2:
            raise PointNotOnCurve()

        odd = public_key[0] == 0x03
        if bool(y & 1) != odd:
            y = p - y

        return b"\x04" + x.to_bytes(32, "big") + y.to_bytes(32, "big")

    def load_public_key(self, public_key: bytes) -> ec.EllipticCurvePublicKey:
        """Parse 33- or 65-byte SEC1 bytes into a verifier key."""
        if len(public_key) not in (Settings.COMPRESSED_PUBKEY_SIZE,
                                   Settings.UNCOMPRESSED_PUBKEY_SIZE):
            raise InvalidKeyLength(
                f"{Settings.COMPRESSED_PUBKEY_SIZE} or "
                f"{Settings.UNCOMPRESSED_PUBKEY_SIZE}",
                len(public_key),
            )
        try:
            return ec.EllipticCurvePublicKey.from_encoded_point(
                self.curve, bytes(public_key))
        except ValueError:
            raise InvalidPublicKey(
                f"Bytes are not a valid {self.name} point"
            ) from None

    def public_key_bytes(self, key: ec.EllipticCurvePublicKey,
                         compressed: bool = False) -> bytes:
        fmt = (serialization.PublicFormat.CompressedPoint if compressed
               else serialization.PublicFormat.UncompressedPoint)
        return key.public_bytes(serialization.Encoding.X962, fmt)

    # ── signing ──────────────────────────────────────────────────

    def sign(self, private_key: ec.EllipticCurvePrivateKey,
             message_hash: bytes) -> bytes:
        """Sign a 32-byte SHA-256 digest → DER, low-S."""
        der = private_key.sign(message_hash, _PREHASHED_SHA256)
        return ECDSASignature.normalize(der, self.order, SignatureFormat.DER)

    # ── verification ─────────────────────────────────────────────

    def is_compact_format(self, signature: bytes) -> bool:
        return ECDSASignature.is_compact(signature)

    def is_valid_signature(self, public_key: bytes, signature: bytes,
                           message_hash: bytes) -> bool:
        """
        Raw ECDSA check. Compact or DER accepted as given, no
        canonicality test. A signature that does not parse is False.
        """
        key = self.load_public_key(public_key)
        try:
            r, s = ECDSASignature.decode(signature, self.order)
        except InvalidSignatureFormat:
            return False
        try:
            key.verify(ECDSASignature.encode_der(r, s), message_hash,
                       _PREHASHED_SHA256)
            return True
        except InvalidSignature:
            return False

    def verify_signature(self, public_key: bytes, message_hash: bytes,
                         signature: bytes,
                         options: VerifyOptions | None = None) -> bool:
        """
        Verify under the strictness policy.

        Strict (default): the signature must be 64-byte compact, else
        InvalidSignatureFormat. It must also already be low-S; a
        high-S signature is non-canonical and returns False rather
        than being folded to low-S and then checked. AT Protocol
        verifiers reject high-S signatures in strict mode, and
        accepting the folded form would let ``(r, N - s)`` through.

        Malleable: compact or DER, verified as given.
        """
        options = options or DEFAULT_VERIFY_OPTIONS

        if options.allow_malleable_signatures:
            return self.is_valid_signature(public_key, signature, message_hash)

        if not self.is_compact_format(signature):
            raise InvalidSignatureFormat(
                "Signature must be 64-byte compact form unless "
                "malleable signatures are allowed"
            )

        try:
            canonical = ECDSASignature.normalize(signature, self.order)
        except InvalidSignatureFormat:
            return False
        if canonical != bytes(signature):
            self.logger.warning("Rejected high-S signature")
            return False

        return self.is_valid_signature(public_key, canonical, message_hash)

    def verify_did_signature(self, did: str, data: bytes, signature: bytes,
                             options: VerifyOptions | None = None) -> bool:
        """Verify *signature* over *data* for a did:key on this curve."""
        public_key = self._public_key_from_did(did)
        return self.verify_signature(public_key, HashCrypto.sha256(data),
                                     signature, options)

    def _public_key_from_did(self, did: str) -> bytes:
        # did_key imports the registry, which imports this module
        from atcrypt.did.did_key import DIDKey

        prefixed = DIDKey.extract_prefixed_bytes(DIDKey.extract_multikey(did))
        if not DIDKey.has_prefix(prefixed, self.did_prefix):
            raise InvalidCurveDID(did)
        return prefixed[len(self.did_prefix):]
