"""
Exception taxonomy for ATCrypt.

Every error raised for bad input derives from both ``ATCryptError``
and ``ValueError`` so callers can catch at whichever level suits them.
"""


class ATCryptError(Exception):
    """Root of every error raised by this library."""


# ── key encoding ─────────────────────────────────────────────────

class EllipticCurveEncodingError(ATCryptError, ValueError):
    pass


class InvalidKeyLength(EllipticCurveEncodingError):
    def __init__(self, expected: int | str, actual: int,
                 message: str | None = None):
        self.expected = expected
        self.actual   = actual
        super().__init__(
            message or
            f"Invalid key length: expected {expected} bytes, got {actual}"
        )


class KeyDecodingFailed(EllipticCurveEncodingError):
    def __init__(self, message: str = "Key decoding failed"):
        super().__init__(message)


class PointNotOnCurve(KeyDecodingFailed):
    def __init__(self, message: str = "Point is not on the curve"):
        super().__init__(message)


# ── curve operations ─────────────────────────────────────────────

class EllipticCurveOperationsError(ATCryptError, ValueError):
    pass


class InvalidSignatureFormat(EllipticCurveOperationsError):
    def __init__(self, message: str = "Invalid signature format"):
        super().__init__(message)


class InvalidPublicKey(EllipticCurveOperationsError):
    def __init__(self, message: str = "Invalid public key"):
        super().__init__(message)


class InvalidCurveDID(EllipticCurveOperationsError):
    def __init__(self, did: str):
        self.did = did
        super().__init__(f"DID does not belong to this curve: {did}")


# ── did:key ──────────────────────────────────────────────────────

class DIDKeyError(ATCryptError, ValueError):
    pass


class UnsupportedKeyType(DIDKeyError):
    def __init__(self, message: str = "Unsupported key type"):
        super().__init__(message)


class InvalidDIDPrefix(DIDKeyError):
    def __init__(self, did: str):
        self.did = did
        super().__init__(f"Incorrect prefix for did:key: {did}")


class InvalidMultikeyPrefix(DIDKeyError):
    def __init__(self, multikey: str):
        self.multikey = multikey
        super().__init__(f"Incorrect prefix for multikey: {multikey}")


# ── verification ─────────────────────────────────────────────────

class SignatureVerificationError(ATCryptError, ValueError):
    pass


class MismatchedAlgorithm(SignatureVerificationError):
    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual   = actual
        super().__init__(
            f"Expected key algorithm {expected}, got {actual}"
        )


class UnsupportedAlgorithm(SignatureVerificationError):
    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(f"Unsupported signature algorithm: {algorithm}")


class InvalidEncoding(SignatureVerificationError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid encoding: {reason}")


# ── codecs ───────────────────────────────────────────────────────

class CodecError(ATCryptError, ValueError):
    pass


class OddLength(CodecError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Hex string has odd length {length}")


class InvalidCharacter(CodecError):
    def __init__(self, character: str):
        self.character = character
        super().__init__(f"Invalid character: {character!r}")


class InvalidChecksum(CodecError):
    def __init__(self, message: str = "Base58Check checksum mismatch"):
        super().__init__(message)


class UnsupportedMultibase(CodecError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unsupported multibase: {value[:16]!r}")


# ── keypairs ─────────────────────────────────────────────────────

class KeypairError(ATCryptError):
    pass


class PrivateKeyNotExportable(KeypairError, RuntimeError):
    def __init__(self, message: str = "Private key is not exportable"):
        super().__init__(message)


class InvalidPrivateKey(KeypairError, ValueError):
    def __init__(self, message: str = "Invalid private key"):
        super().__init__(message)


# ── random ───────────────────────────────────────────────────────

class SecureRandomError(ATCryptError, ValueError):
    pass


class InvalidRange(SecureRandomError):
    def __init__(self, low: int, high: int):
        self.low  = low
        self.high = high
        super().__init__(f"Invalid range: low ({low}) must be < high ({high})")
