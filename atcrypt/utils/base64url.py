"""
Base64URL codec, unpadded and padded variants.
"""

import base64
import binascii


class Base64URL:

    # ── unpadded ─────────────────────────────────────────────────
    @staticmethod
    def encode(data: bytes) -> str:
        return base64.urlsafe_b64encode(bytes(data)).decode("ascii").rstrip("=")

    @staticmethod
    def decode(text: str) -> bytes | None:
        """Decode unpadded Base64URL; any ``=`` is rejected."""
        if "=" in text:
            return None
        return Base64URL._decode(text + "=" * (-len(text) % 4))

    # ── padded ───────────────────────────────────────────────────
    @staticmethod
    def encode_pad(data: bytes) -> str:
        return base64.urlsafe_b64encode(bytes(data)).decode("ascii")

    @staticmethod
    def decode_pad(text: str) -> bytes | None:
        """Decode Base64URL with or without trailing ``=`` padding."""
        body = text.rstrip("=")
        if "=" in body:
            return None
        return Base64URL._decode(body + "=" * (-len(body) % 4))

    @staticmethod
    def _decode(padded: str) -> bytes | None:
        if not padded:
            return b""
        # b64decode would take the standard alphabet alongside altchars
        if "+" in padded or "/" in padded:
            return None
        try:
            return base64.b64decode(padded, altchars=b"-_", validate=True)
        except (binascii.Error, ValueError):
            return None
