"""Published and interop test vectors shared across the suite."""

import base64
from typing import NamedTuple


def b64(text: str) -> bytes:
    """Standard base64 with padding optional."""
    return base64.b64decode(text + "=" * (-len(text) % 4))


# ── fixed keys ───────────────────────────────────────────────────

P256_PRIVATE = "82ebbd63ebbd9ff60141a69bd4c9be282f2415e8eafa9d42c0ed396daccca979"
P256_PUBLIC  = bytes.fromhex(
    "0430e4d86041888fcce87bc49a07f35e25612425a2545aafa08b649c981cfa8104"
    "2879a18fb7de8adf7cac8b6c5225ebbccd018046d2c783a91ac8a49c3cd6ed9a"
)
P256_DID     = "did:key:zDnaeTiq1PdzvZXUaMdezchcMJQpBdH2VN4pgrrEhMCCbmwSb"

K256_PRIVATE = "9085d2bef69286a6cbb51623c8fa258629945cd55ca705cc4e66700396894e0c"
K256_PUBLIC  = bytes.fromhex(
    "04874c15c7fda20e539c6e5ba573c139884c351188799f5458b4b41f7924f235cd"
    "3b61004c819bbba0decca169b63e6c7002119ed81f79c6a754d5f16add6b9f01"
)
K256_DID     = "did:key:zQ3shokFTS3brHcDQrn82RUDfCZESWL1ZdCEJwekUDPQiYBme"

W3C_K256_VECTORS = [
    (K256_PRIVATE, K256_DID),
    ("f0f4df55a2b3ff13051ea814a8f24ad00f2e469af73c363ac7e9fb999a9072ed",
     "did:key:zQ3shtxV1FrJfhqE1dvxYRcCknWNjHc3c5X1y3ZSoPDi2aur2"),
    ("6b0b91287ae3348f8c2f2552d766f30e3604867e34adc37ccbb74a8e6b893e02",
     "did:key:zQ3shZc2QzApp2oymGvQbzP8eKheVshBHbU4ZYjeXqwSKEn6N"),
    ("c0a6a7c560d37d7ba81ecee9543721ff48fea3e0fb827d42c1868226540fac15",
     "did:key:zQ3shadCps5JLAHcZiuX5YUtWHHL8ysBJqFLWvjZDKAWUBGzy"),
    ("175a232d440be1e0788f25488a73d9416c04b6f924bea6354bf05dd2f1a75133",
     "did:key:zQ3shptjE6JwdkeKN4fcpnYQY3m9Cet3NiHdAfpvSUZBFoKBj"),
]


# ── AT Protocol signature interop ────────────────────────────────

class InteropVector(NamedTuple):
    name:             str
    algorithm:        str
    did:              str
    public_multibase: str
    signature:        bytes
    strict_valid:     bool | None   # None → strict mode raises
    malleable_valid:  bool


INTEROP_MESSAGE = b64("oWVoZWxsb2V3b3JsZA")

_P256_DID = "did:key:zDnaembgSGUhZULN2Caob4HLJPaxBh92N7rtH21TErzqf8HQo"
_P256_MB  = "zxdM8dSstjrpZaRUwBmDvjGXweKuEMVN95A9oJBFjkWMh"
_K256_DID = "did:key:zQ3shqwJEJyMBsBXCWyCBpUBMqxcon9oHB7mCvx4sSpMdLJwc"
_K256_MB  = "z25z9DTpsiYYJKGsWmSPJK2NFN8PcJtZig12K59UgW7q5t"

INTEROP_VECTORS = [
    InteropVector(
        "p256-valid", "ES256", _P256_DID, _P256_MB,
        b64("2vZNsG3UKvvO/CDlrdvyZRISOFylinBh0Jupc6KcWoJWExHptCfduPleDbG3rko3YZnn9Lw0IjpixVmexJDegg"),
        True, True,
    ),
    InteropVector(
        "k256-valid", "ES256K", _K256_DID, _K256_MB,
        b64("5WpdIuEUUfVUYaozsi8G0B3cWO09cgZbIIwg1t2YKdUn/FEznOndsz/qgiYb89zwxYCbB71f7yQK5Lr7NasfoA"),
        True, True,
    ),
    InteropVector(
        "p256-high-s", "ES256", _P256_DID, _P256_MB,
        b64("2vZNsG3UKvvO/CDlrdvyZRISOFylinBh0Jupc6KcWoKp7O4VS9giSAah8k5IUbXIW00SuOrjfEqQ9HEkN9JGzw"),
        False, True,
    ),
    InteropVector(
        "k256-high-s", "ES256K", _K256_DID, _K256_MB,
        b64("5WpdIuEUUfVUYaozsi8G0B3cWO09cgZbIIwg1t2YKdXYA67MYxYiTMAVfdnkDCMN9S5B3vHosRe07aORmoshoQ"),
        False, True,
    ),
    InteropVector(
        "p256-der", "ES256",
        "did:key:zDnaeT6hL2RnTdUhAPLij1QBkhYZnmuKyM7puQLW1tkF4Zkt8",
        "ze8N2PPxnu19hmBQ58t5P3E9Yj6CqakJmTVCaKvf9Byq2",
        b64("MEQCIFxYelWJ9lNcAVt+jK0y/T+DC/X4ohFZ+m8f9SEItkY1AiACX7eXz5sgtaRrz/SdPR8kprnbHMQVde0T2R8yOTBweA"),
        None, True,
    ),
    InteropVector(
        "k256-der", "ES256K",
        "did:key:zQ3shnriYMXc8wvkbJqfNWh5GXn2bVAeqTC92YuNbek4npqGF",
        "z22uZXWP8fdHXi4jyx8cCDiBf9qQTsAe6VcycoMQPfcMQX",
        b64("MEUCIQCWumUqJqOCqInXF7AzhIRg2MhwRz2rWZcOEsOjPmNItgIgXJH7RnqfYY6M0eg33wU0sFYDlprwdOcpRn78Sz5ePgk"),
        None, True,
    ),
]
