"""
The named digest variants.

Each variant fixes an output size and a domain-separation byte. Keccak as
submitted to NIST (and used by Ethereum) pads with 0x01; FIPS 202 SHA-3
pads with 0x06. That byte is the only difference between the two families.
"""

from dataclasses import dataclass

from .byteorder import STATE_BYTES
from .errors import ConfigurationError

KECCAK_PADDING = 0x01
SHA3_PADDING = 0x06

OUTPUT_SIZES = (224, 256, 384, 512)


def bits2bytes(x):
    return (x + 7) // 8


@dataclass(frozen=True)
class Variant:
    name: str
    output_bits: int
    domain: int

    @property
    def digest_size(self) -> int:
        return bits2bytes(self.output_bits)

    @property
    def rate(self) -> int:
        # capacity is twice the output size
        return STATE_BYTES - 2 * self.digest_size

    @property
    def capacity(self) -> int:
        return STATE_BYTES - self.rate


VARIANTS = {}
for _family, _domain in (("keccak", KECCAK_PADDING), ("sha3", SHA3_PADDING)):
    for _bits in OUTPUT_SIZES:
        _v = Variant(f"{_family}-{_bits}", _bits, _domain)
        VARIANTS[_v.name] = _v
del _family, _domain, _bits, _v


def get_variant(variant):
    """Resolve a variant name (or a ``Variant``) to a registered ``Variant``.

    Names are case-insensitive and accept ``_`` in place of ``-``,
    so ``"SHA3_256"`` and ``"sha3-256"`` are the same variant.
    """
    if isinstance(variant, Variant):
        if VARIANTS.get(variant.name) != variant:
            raise ConfigurationError(f"unregistered variant: {variant!r}")
        return variant
    if not isinstance(variant, str):
        raise ConfigurationError(f"variant must be a name, got {type(variant).__name__}")
    key = variant.strip().lower().replace("_", "-")
    try:
        return VARIANTS[key]
    except KeyError:
        raise ConfigurationError(
            f"unknown variant {variant!r}; expected one of: {', '.join(VARIANTS)}"
        ) from None
