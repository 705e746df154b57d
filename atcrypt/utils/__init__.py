from .base16     import Base16
from .base32     import Base32
from .base58btc  import Base58
from .base64url  import Base64URL
from .multibase  import Multibase, MultibaseEncoding
from .random_gen import SecureRandom

__all__ = ["Base16", "Base32", "Base58", "Base64URL",
           "Multibase", "MultibaseEncoding", "SecureRandom"]
