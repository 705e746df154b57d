from .did_key  import DIDKey
from .verifier import SignatureVerifier

__all__ = ["DIDKey", "SignatureVerifier"]
