"""
secp256k1 — JWT ``ES256K``, multicodec ``secp256k1-pub``.
"""

from cryptography.hazmat.primitives.asymmetric import ec

from atcrypt.config.settings          import Settings
from atcrypt.crypto_engine.curve_base import EllipticCurveOperations
from atcrypt.crypto_engine.types      import KeyAlgorithm


class K256Operations(EllipticCurveOperations):

    P = int("FFFFFFFF" "FFFFFFFF" "FFFFFFFF" "FFFFFFFF"
            "FFFFFFFF" "FFFFFFFF" "FFFFFFFE" "FFFFFC2F", 16)
    A = 0
    B = 7
    N = int("FFFFFFFF" "FFFFFFFF" "FFFFFFFF" "FFFFFFFE"
            "BAAEDCE6" "AF48A03B" "BFD25E8C" "D0364141", 16)

    @property
    def name(self) -> str:
        return "K256"

    @property
    def algorithm(self) -> KeyAlgorithm:
        return KeyAlgorithm.K256

    @property
    def curve(self) -> ec.EllipticCurve:
        return ec.SECP256K1()

    @property
    def did_prefix(self) -> bytes:
        return Settings.K256_DID_PREFIX

    @property
    def p(self) -> int:
        return self.P

    @property
    def a(self) -> int:
        return self.A

    @property
    def b(self) -> int:
        return self.B

    @property
    def order(self) -> int:
        return self.N
