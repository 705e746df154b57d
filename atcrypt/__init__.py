"""
ATCrypt — key, signature and did:key primitives for the AT Protocol.

    from atcrypt import K256Keypair, SignatureVerifier

    keypair = K256Keypair.generate()
    sig     = keypair.sign_compact(b"hello")
    assert SignatureVerifier.verify_signature(keypair.did(), b"hello", sig)
"""

import logging

from .config        import Settings, configure_logging
from .crypto_engine import (
    errors, ATCryptError,
    KeyAlgorithm, SignatureFormat, VerifyOptions, ParsedMultikey,
    HashCrypto, ECDSASignature,
    EllipticCurveOperations, P256Operations, K256Operations,
    PluginRegistry, DIDKeyPlugin,
)
from .utils         import (
    Base16, Base32, Base58, Base64URL, Multibase, MultibaseEncoding,
    SecureRandom,
)
from .did           import DIDKey, SignatureVerifier
from .keypair       import Keypair, ECKeypair, P256Keypair, K256Keypair

logging.getLogger(Settings.APP_NAME).addHandler(logging.NullHandler())

__version__ = Settings.APP_VERSION

__all__ = [
    "Settings", "configure_logging",
    "errors", "ATCryptError",
    "KeyAlgorithm", "SignatureFormat", "VerifyOptions", "ParsedMultikey",
    "HashCrypto", "ECDSASignature",
    "EllipticCurveOperations", "P256Operations", "K256Operations",
    "PluginRegistry", "DIDKeyPlugin",
    "Base16", "Base32", "Base58", "Base64URL", "Multibase",
    "MultibaseEncoding", "SecureRandom",
    "DIDKey", "SignatureVerifier",
    "Keypair", "ECKeypair", "P256Keypair", "K256Keypair",
]
