"""
NIST P-256 (secp256r1) — JWT ``ES256``, multicodec ``p256-pub``.
"""

from cryptography.hazmat.primitives.asymmetric import ec

from atcrypt.config.settings          import Settings
from atcrypt.crypto_engine.curve_base import EllipticCurveOperations
from atcrypt.crypto_engine.types      import KeyAlgorithm


class P256Operations(EllipticCurveOperations):

    P = int("FFFFFFFF" "00000001" "00000000" "00000000"
            "00000000" "FFFFFFFF" "FFFFFFFF" "FFFFFFFF", 16)
    A = P - 3
    B = int("5AC635D8" "AA3A93E7" "B3EBBD55" "769886BC"
            "651D06B0" "CC53B0F6" "3BCE3C3E" "27D2604B", 16)
    N = int("FFFFFFFF" "00000000" "FFFFFFFF" "FFFFFFFF"
            "BCE6FAAD" "A7179E84" "F3B9CAC2" "FC632551", 16)

    @property
    def name(self) -> str:
        return "P256"

    @property
    def algorithm(self) -> KeyAlgorithm:
        return KeyAlgorithm.P256

    @property
    def curve(self) -> ec.EllipticCurve:
        return ec.SECP256R1()

    @property
    def did_prefix(self) -> bytes:
        return Settings.P256_DID_PREFIX

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
