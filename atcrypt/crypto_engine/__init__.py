"""
ATCrypt Crypto Engine — curve operations, signature encodings and the
did:key plugin registry.
"""

from .errors          import (
    ATCryptError,
    EllipticCurveEncodingError, InvalidKeyLength, KeyDecodingFailed,
    PointNotOnCurve,
    EllipticCurveOperationsError, InvalidSignatureFormat, InvalidPublicKey,
    InvalidCurveDID,
    DIDKeyError, UnsupportedKeyType, InvalidDIDPrefix, InvalidMultikeyPrefix,
    SignatureVerificationError, MismatchedAlgorithm, UnsupportedAlgorithm,
    InvalidEncoding,
    CodecError, OddLength, InvalidCharacter, InvalidChecksum,
    UnsupportedMultibase,
    KeypairError, PrivateKeyNotExportable, InvalidPrivateKey,
    SecureRandomError, InvalidRange,
)
from .types           import (
    KeyAlgorithm, SignatureFormat, VerifyOptions, ParsedMultikey,
)
from .hash_crypto     import HashCrypto
from .signature       import ECDSASignature

# ── Curves ───────────────────────────────────────────────────────
from .curve_base      import EllipticCurveOperations
from .p256_crypto     import P256Operations
from .k256_crypto     import K256Operations
from .plugin_registry import PluginRegistry, DIDKeyPlugin

__all__ = [
    "KeyAlgorithm", "SignatureFormat", "VerifyOptions", "ParsedMultikey",
    "HashCrypto", "ECDSASignature",
    "EllipticCurveOperations", "P256Operations", "K256Operations",
    "PluginRegistry", "DIDKeyPlugin",
    # Errors
    "ATCryptError",
    "EllipticCurveEncodingError", "InvalidKeyLength", "KeyDecodingFailed",
    "PointNotOnCurve",
    "EllipticCurveOperationsError", "InvalidSignatureFormat",
    "InvalidPublicKey", "InvalidCurveDID",
    "DIDKeyError", "UnsupportedKeyType", "InvalidDIDPrefix",
    "InvalidMultikeyPrefix",
    "SignatureVerificationError", "MismatchedAlgorithm",
    "UnsupportedAlgorithm", "InvalidEncoding",
    "CodecError", "OddLength", "InvalidCharacter", "InvalidChecksum",
    "UnsupportedMultibase",
    "KeypairError", "PrivateKeyNotExportable", "InvalidPrivateKey",
    "SecureRandomError", "InvalidRange",
]
