"""
ECDSA signature encodings and low-S canonicalisation.

Two wire forms exist for an ECDSA ``(r, s)`` pair:

    compact  →  r (32 bytes, big-endian) ‖ s (32 bytes, big-endian)
    DER      →  ASN.1 SEQUENCE { INTEGER r, INTEGER s }

For any valid ``(r, s)`` the pair ``(r, N - s)`` also verifies, so a
signature is canonical only when ``s <= N // 2``.
"""

from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature, encode_dss_signature,
)

from atcrypt.config.settings           import Settings
from atcrypt.crypto_engine.errors      import InvalidSignatureFormat
from atcrypt.crypto_engine.types       import SignatureFormat

_HALF = Settings.COMPACT_SIGNATURE_SIZE // 2


class ECDSASignature:
    """Static helpers for compact / DER conversion and low-S."""

    # ── compact ──────────────────────────────────────────────────
    @staticmethod
    def decode_compact(signature: bytes, order: int) -> tuple[int, int]:
        if len(signature) != Settings.COMPACT_SIGNATURE_SIZE:
            raise InvalidSignatureFormat(
                f"Compact signature must be "
                f"{Settings.COMPACT_SIGNATURE_SIZE} bytes, "
                f"got {len(signature)}"
            )
        r = int.from_bytes(signature[:_HALF], "big")
        s = int.from_bytes(signature[_HALF:], "big")
        ECDSASignature._check_range(r, s, order)
        return r, s

    @staticmethod
    def encode_compact(r: int, s: int) -> bytes:
        return r.to_bytes(_HALF, "big") + s.to_bytes(_HALF, "big")

    # ── DER ──────────────────────────────────────────────────────
    @staticmethod
    def decode_der(signature: bytes, order: int) -> tuple[int, int]:
        try:
            r, s = decode_dss_signature(bytes(signature))
        except ValueError:
            raise InvalidSignatureFormat("Malformed DER signature") from None
        ECDSASignature._check_range(r, s, order)
        return r, s

    @staticmethod
    def encode_der(r: int, s: int) -> bytes:
        return encode_dss_signature(r, s)

    # ── either ───────────────────────────────────────────────────
    @staticmethod
    def is_compact(signature: bytes) -> bool:
        return len(signature) == Settings.COMPACT_SIGNATURE_SIZE

    @staticmethod
    def detect_format(signature: bytes) -> SignatureFormat:
        if ECDSASignature.is_compact(signature):
            return SignatureFormat.COMPACT
        return SignatureFormat.DER

    @staticmethod
    def decode(signature: bytes, order: int) -> tuple[int, int]:
        if ECDSASignature.is_compact(signature):
            return ECDSASignature.decode_compact(signature, order)
        return ECDSASignature.decode_der(signature, order)

    @staticmethod
    def encode(r: int, s: int, fmt: SignatureFormat) -> bytes:
        match fmt:
            case SignatureFormat.COMPACT:
                return ECDSASignature.encode_compact(r, s)
            case SignatureFormat.DER:
                return ECDSASignature.encode_der(r, s)

    @staticmethod
    def compact_to_der(signature: bytes, order: int) -> bytes:
        r, s = ECDSASignature.decode_compact(signature, order)
        return ECDSASignature.encode_der(r, s)

    @staticmethod
    def der_to_compact(signature: bytes, order: int) -> bytes:
        r, s = ECDSASignature.decode_der(signature, order)
        return ECDSASignature.encode_compact(r, s)

    # ── low-S ────────────────────────────────────────────────────
    @staticmethod
    def is_low_s(signature: bytes, order: int) -> bool:
        _, s = ECDSASignature.decode(signature, order)
        return s <= order // 2

    @staticmethod
    def normalize(signature: bytes, order: int,
                  output: SignatureFormat | None = None) -> bytes:
        """
        Return *signature* with ``s`` folded into the lower half of the
        group order, encoded as *output* (defaults to the input form).

        Raises InvalidSignatureFormat if the input does not parse.
        """
        r, s = ECDSASignature.decode(signature, order)
        if s > order // 2:
            s = order - s
        if output is None:
            output = ECDSASignature.detect_format(signature)
        return ECDSASignature.encode(r, s, output)

    @staticmethod
    def _check_range(r: int, s: int, order: int):
        if not 0 < r < order or not 0 < s < order:
            raise InvalidSignatureFormat(
                "Signature component out of range for curve order"
            )
