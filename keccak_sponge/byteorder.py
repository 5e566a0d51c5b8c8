"""
Conversion between raw bytes and the permutation's 64-bit lanes.

Lanes are always little-endian. Decoding has two paths:

* slow path: byte by byte with explicit index arithmetic, valid for any
  offset and any length;
* fast path: a ``memoryview`` cast to native 64-bit words, taken only when
  the buffer is contiguous and the read starts on an 8-byte boundary.
  On a big-endian host every word is byte-swapped after the cast.
"""

import sys

from .permutation import LANES

LANE_BYTES = 8
STATE_BYTES = LANES * LANE_BYTES

BIG_ENDIAN_HOST = sys.byteorder == "big"


def bswap64(x):
    return int.from_bytes(x.to_bytes(LANE_BYTES, "little"), "big")


def bytes2lane(bb):
    r = 0
    for b in reversed(bb):
        r = (r << 8) | b
    return r


def lane2bytes(s, w=LANE_BYTES):
    out = bytearray(w)
    for i in range(w):
        out[i] = (s >> (8 * i)) & 0xFF
    return out


def is_aligned(view, offset):
    return view.c_contiguous and offset % LANE_BYTES == 0


def read_lanes_slow(buf, offset, count):
    out = []
    for i in range(offset, offset + count * LANE_BYTES, LANE_BYTES):
        out.append(bytes2lane(buf[i : i + LANE_BYTES]))
    return out


def read_lanes_fast(view, offset, count):
    words = view[offset : offset + count * LANE_BYTES].cast("Q")
    if BIG_ENDIAN_HOST:
        return [bswap64(w) for w in words]
    return words.tolist()


def read_lanes(buf, offset, count):
    """Decode ``count`` little-endian lanes from ``buf`` starting at ``offset``."""
    view = memoryview(buf)
    if view.format != "B" or view.itemsize != 1:
        view = view.cast("B")
    if len(view) - offset < count * LANE_BYTES:
        raise ValueError(
            f"need {count * LANE_BYTES} bytes at offset {offset}, "
            f"buffer has {len(view) - offset}"
        )
    if not count:
        return []
    if is_aligned(view, offset):
        return read_lanes_fast(view, offset, count)
    return read_lanes_slow(view, offset, count)


def absorb_block(state, buf, offset, rate):
    """XOR ``rate`` bytes of ``buf`` at ``offset`` into the leading lanes of ``state``.

    Lanes past the rate are left alone. A rate that is not a multiple of
    eight bytes fills the low-order bytes of one last, partial lane.
    """
    full, tail = divmod(rate, LANE_BYTES)
    for i, lane in enumerate(read_lanes(buf, offset, full)):
        state[i] ^= lane
    if tail:
        start = offset + full * LANE_BYTES
        state[full] ^= bytes2lane(buf[start : start + tail])


def state_bytes(state, length=STATE_BYTES):
    """Return the first ``length`` bytes of the little-endian view of ``state``."""
    out = bytearray()
    for lane in state:
        if len(out) >= length:
            break
        out += lane2bytes(lane)
    return bytes(out[:length])
