"""
Pure-Python Keccak sponge: Keccak-224/256/384/512 (original padding, as
used by Ethereum) and SHA3-224/256/384/512 (FIPS 202 padding).
"""

from .errors import BufferTooSmallError, ConfigurationError, KeccakError
from .permutation import keccak_f
from .sponge import SpongeContext
from .variants import VARIANTS, Variant, get_variant
from .digest import (
    KeccakHash,
    finalize,
    hash_bytes,
    init,
    keccak256,
    keccak256_hex,
    keccak_224,
    keccak_256,
    keccak_384,
    keccak_512,
    new,
    sha3_224,
    sha3_256,
    sha3_384,
    sha3_512,
    update,
)

__version__ = "0.1.0"

__all__ = [
    "BufferTooSmallError",
    "ConfigurationError",
    "KeccakError",
    "KeccakHash",
    "SpongeContext",
    "VARIANTS",
    "Variant",
    "finalize",
    "get_variant",
    "hash_bytes",
    "init",
    "keccak256",
    "keccak256_hex",
    "keccak_224",
    "keccak_256",
    "keccak_384",
    "keccak_512",
    "keccak_f",
    "new",
    "sha3_224",
    "sha3_256",
    "sha3_384",
    "sha3_512",
    "update",
]
