"""
Keccak sponge context: absorb, pad, squeeze.

A context starts active and becomes finalized on the first call to
``finalize``. After that, ``update`` silently drops its input and
``finalize`` hands back the digest it already computed.
"""

from copy import deepcopy

from .byteorder import STATE_BYTES, absorb_block, state_bytes
from .errors import BufferTooSmallError, ConfigurationError
from .permutation import keccak_f, zero_state

END_OF_BLOCK = 0x80


def _as_view(data):
    if isinstance(data, str):
        raise TypeError("Strings must be encoded before hashing")
    view = memoryview(data)
    if view.format != "B" or view.itemsize != 1:
        view = view.cast("B")
    return view


class SpongeContext:
    def __init__(self, rate, digest_size, domain):
        if not 0 < rate < STATE_BYTES:
            raise ConfigurationError(f"rate must be between 1 and {STATE_BYTES - 1} bytes, got {rate}")
        if digest_size <= 0:
            raise ConfigurationError(f"digest size must be positive, got {digest_size}")
        if not 0 < domain < END_OF_BLOCK:
            raise ConfigurationError(f"domain byte must be in 0x01..0x7f, got {domain:#x}")
        self.rate = rate
        self.digest_size = digest_size
        self.domain = domain
        self.state = zero_state()
        self.staging = bytearray(rate)
        self.buffered = 0
        self.finalized = False
        self._digest = None

    def copy(self):
        return deepcopy(self)

    def absorb_block(self, buf, offset=0):
        absorb_block(self.state, buf, offset, self.rate)
        keccak_f(self.state)

    def update(self, data):
        """Absorb ``data``; every completed block is permuted immediately."""
        view = _as_view(data)
        if self.finalized:
            return
        size = len(view)
        pos = 0

        if self.buffered:
            left = self.rate - self.buffered
            take = min(size, left)
            self.staging[self.buffered : self.buffered + take] = view[:take]
            self.buffered += take
            if self.buffered < self.rate:
                return
            self.absorb_block(self.staging)
            self.buffered = 0
            pos = take

        while size - pos >= self.rate:
            self.absorb_block(view, pos)
            pos += self.rate

        if pos < size:
            rest = size - pos
            self.staging[:rest] = view[pos:]
            self.buffered = rest

    def pad(self):
        """Turn the staging buffer into the final padded block.

        Both marks are ORed in, so with a one-byte tail (or a rate of one)
        they share the last byte, e.g. 0x81 for Keccak.
        """
        self.staging[self.buffered :] = bytes(self.rate - self.buffered)
        self.staging[self.buffered] |= self.domain
        self.staging[self.rate - 1] |= END_OF_BLOCK

    def squeeze(self, length):
        out = bytearray()
        while True:
            out += state_bytes(self.state, min(self.rate, length - len(out)))
            if len(out) >= length:
                return bytes(out)
            keccak_f(self.state)

    def finalize(self, out=None):
        """Pad, permute and squeeze the digest, once.

        When ``out`` is given, the digest is also written into its first
        ``digest_size`` bytes. The size check runs before anything changes.
        """
        if out is not None:
            target = _as_view(out)
            if target.readonly:
                raise TypeError("output buffer must be writable")
            if len(target) < self.digest_size:
                raise BufferTooSmallError(self.digest_size, len(target))
        if not self.finalized:
            self.pad()
            self.absorb_block(self.staging)
            self.buffered = 0
            self.finalized = True
            self._digest = self.squeeze(self.digest_size)
        if out is not None:
            target[: self.digest_size] = self._digest
        return self._digest

    def __repr__(self):
        status = "finalized" if self.finalized else "active"
        return (
            f"<{self.__class__.__name__} rate={self.rate} digest_size={self.digest_size} "
            f"domain={self.domain:#04x} {status}>"
        )
