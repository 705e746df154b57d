"""
SignatureVerifier — verify a signature against a did:key.

Usage:
    ok = SignatureVerifier.verify_signature(did, data, sig)
    ok = SignatureVerifier.verify_signature(
        did, data, der_sig,
        options=VerifyOptions(allow_malleable_signatures=True),
    )
"""

import logging

from atcrypt.crypto_engine.errors          import (
    MismatchedAlgorithm, UnsupportedAlgorithm, UnsupportedKeyType,
    InvalidEncoding,
)
from atcrypt.crypto_engine.hash_crypto     import HashCrypto
from atcrypt.crypto_engine.plugin_registry import PluginRegistry
from atcrypt.crypto_engine.types           import KeyAlgorithm, VerifyOptions
from atcrypt.crypto_engine.worker_pool     import run_in_worker
from atcrypt.did.did_key                   import DIDKey
from atcrypt.utils.base64url               import Base64URL

logger = logging.getLogger("ATCrypt.Verifier")


class SignatureVerifier:

    @staticmethod
    def verify_signature(did_key: str, data: bytes, signature: bytes,
                         options: VerifyOptions | None = None,
                         jwt_algorithm: KeyAlgorithm | str | None = None
                         ) -> bool:
        """
        Verify *signature* over *data* for the key encoded in *did_key*.

        Parameters
        ----------
        did_key : str
            ``did:key:z…`` identifier of the signer.
        data : bytes
            The signed message; hashed here with SHA-256.
        signature : bytes
            Compact (or, with malleable options, DER) signature.
        options : VerifyOptions, optional
            Strictness policy; strict by default.
        jwt_algorithm : str, optional
            Expected ``alg``; must match the DID's curve if given.

        Returns
        -------
        bool
            False when the signature does not verify or does not parse.
        """
        parsed = DIDKey.parse_did_key(did_key)

        if jwt_algorithm is not None:
            expected = getattr(jwt_algorithm, "value", jwt_algorithm)
            if expected != parsed.jwt_algorithm:
                raise MismatchedAlgorithm(expected, parsed.jwt_algorithm)

        try:
            plugin = PluginRegistry.for_algorithm(parsed.jwt_algorithm)
        except UnsupportedKeyType:
            raise UnsupportedAlgorithm(parsed.jwt_algorithm) from None

        valid = plugin.operations.verify_signature(
            parsed.key_bytes, HashCrypto.sha256(data), signature, options,
        )
        logger.debug("Signature check for %s key: %s",
                     parsed.jwt_algorithm, "valid" if valid else "invalid")
        return valid

    @staticmethod
    def verify_signature_utf8(did_key: str, data: str, signature: str,
                              options: VerifyOptions | None = None,
                              jwt_algorithm: KeyAlgorithm | str | None = None
                              ) -> bool:
        """*data* as UTF-8 text, *signature* as unpadded Base64URL."""
        try:
            data_bytes = data.encode("utf-8")
        except UnicodeEncodeError:
            raise InvalidEncoding("data is not valid UTF-8") from None

        sig_bytes = Base64URL.decode(signature)
        if sig_bytes is None:
            raise InvalidEncoding("signature is not valid Base64URL")

        return SignatureVerifier.verify_signature(
            did_key, data_bytes, sig_bytes, options, jwt_algorithm)

    @staticmethod
    def verify_did_signature(did: str, data: bytes, signature: bytes,
                             options: VerifyOptions | None = None) -> bool:
        return SignatureVerifier.verify_signature(did, data, signature, options)

    @staticmethod
    async def verify_signature_async(did_key: str, data: bytes,
                                     signature: bytes,
                                     options: VerifyOptions | None = None,
                                     jwt_algorithm: KeyAlgorithm | str | None = None
                                     ) -> bool:
        return await run_in_worker(
            SignatureVerifier.verify_signature,
            did_key, data, signature, options, jwt_algorithm,
        )
