import logging


class Settings:
    """Centralised library configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "ATCrypt"
    APP_VERSION = "1.0.0"

    # ── did:key ──────────────────────────────────────────────────
    DID_KEY_PREFIX          = "did:key:"
    BASE58_MULTIBASE_PREFIX = "z"

    # multicodec prefixes (varint of 0x1200 / 0xe7)
    P256_DID_PREFIX = b"\x80\x24"
    K256_DID_PREFIX = b"\xe7\x01"

    # ── JWT algorithm tags ───────────────────────────────────────
    P256_JWT_ALG = "ES256"
    K256_JWT_ALG = "ES256K"

    # ── sizes (bytes) ────────────────────────────────────────────
    PRIVATE_KEY_SIZE          = 32
    COMPRESSED_PUBKEY_SIZE    = 33
    UNCOMPRESSED_PUBKEY_SIZE  = 65
    COMPACT_SIGNATURE_SIZE    = 64

    # ── defaults ─────────────────────────────────────────────────
    DEFAULT_PUBLIC_KEY_ENCODING = "base64urlpad"
    WORKER_THREADS              = 4

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL       = "WARNING"
    LOG_FORMAT      = "[%(asctime)s] [%(levelname)-8s] %(name)-28s — %(message)s"
    LOG_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Attach a console handler to the ``ATCrypt`` logger tree.

    Safe to call more than once: an existing console handler is reused
    and only the level is updated.
    """
    root_logger = logging.getLogger(Settings.APP_NAME)
    root_logger.setLevel(level if level is not None else Settings.LOG_LEVEL)

    for handler in root_logger.handlers:
        if getattr(handler, "_atcrypt_console", False):
            return root_logger

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(
        Settings.LOG_FORMAT, datefmt=Settings.LOG_DATE_FORMAT,
    ))
    console._atcrypt_console = True
    root_logger.addHandler(console)
    return root_logger
