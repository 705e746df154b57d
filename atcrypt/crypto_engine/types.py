"""
Shared value types: key algorithms, signature encodings, verification
options.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from atcrypt.config.settings import Settings


class KeyAlgorithm(str, Enum):
    """Supported key algorithms, valued by their JWT ``alg`` tag."""

    P256 = Settings.P256_JWT_ALG
    K256 = Settings.K256_JWT_ALG


class SignatureFormat(Enum):
    COMPACT = "compact"
    DER     = "der"


@dataclass(frozen=True)
class VerifyOptions:
    """
    Verification policy.

    allow_malleable_signatures
        When False (the default) only 64-byte compact low-S signatures
        are accepted. When True, DER and high-S signatures are verified
        as given.
    """

    allow_malleable_signatures: bool = False


DEFAULT_VERIFY_OPTIONS = VerifyOptions()


class ParsedMultikey(NamedTuple):
    jwt_algorithm: str
    key_bytes:     bytes
