"""
Streaming digest API over the Keccak sponge.

Functional form::

    ctx = init("keccak-256")
    update(ctx, b"ab")
    update(ctx, b"c")
    digest = finalize(ctx)

Object form, shaped like ``hashlib``::

    h = new("sha3-256", b"abc")
    h.hexdigest()
"""

from .sponge import SpongeContext
from .variants import get_variant

# --------------------------------------------------------------------
#                          Functional API
# --------------------------------------------------------------------

def init(variant):
    v = get_variant(variant)
    return SpongeContext(v.rate, v.digest_size, v.domain)


def update(ctx, data):
    ctx.update(data)


def finalize(ctx, out=None):
    return ctx.finalize(out)


def hash_bytes(variant, data):
    """One-shot digest of ``data`` under ``variant``."""
    ctx = init(variant)
    ctx.update(data)
    return ctx.finalize()

# --------------------------------------------------------------------
#                          Hash Object
# --------------------------------------------------------------------

class KeccakHash:
    def __init__(self, variant="keccak-256", data=None):
        self.variant = get_variant(variant)
        self.sponge = init(self.variant)
        if data is not None:
            self.update(data)

    @property
    def name(self) -> str:
        return self.variant.name

    @property
    def digest_size(self) -> int:
        return self.variant.digest_size

    @property
    def block_size(self) -> int:
        return self.variant.rate

    def copy(self) -> "KeccakHash":
        other = self.__class__.__new__(self.__class__)
        other.variant = self.variant
        other.sponge = self.sponge.copy()
        return other

    def update(self, data: bytes):
        self.sponge.update(data)

    def digest(self) -> bytes:
        final = self.sponge.copy()
        return final.finalize()

    def hexdigest(self) -> str:
        return self.digest().hex()

    def __repr__(self):
        return f"<{self.name} {self.__class__.__name__} object @ {id(self):#x}>"


def new(variant, data=b""):
    return KeccakHash(variant, data)

# --------------------------------------------------------------------
#                          Named One-shots
# --------------------------------------------------------------------

def keccak_224(data: bytes) -> bytes:
    return hash_bytes("keccak-224", data)


def keccak_256(data: bytes) -> bytes:
    return hash_bytes("keccak-256", data)


def keccak_384(data: bytes) -> bytes:
    return hash_bytes("keccak-384", data)


def keccak_512(data: bytes) -> bytes:
    return hash_bytes("keccak-512", data)


def sha3_224(data: bytes) -> bytes:
    return hash_bytes("sha3-224", data)


def sha3_256(data: bytes) -> bytes:
    return hash_bytes("sha3-256", data)


def sha3_384(data: bytes) -> bytes:
    return hash_bytes("sha3-384", data)


def sha3_512(data: bytes) -> bytes:
    return hash_bytes("sha3-512", data)


keccak256 = keccak_256


def keccak256_hex(data: bytes) -> str:
    return keccak256(data).hex()
