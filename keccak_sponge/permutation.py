"""
Keccak-f[1600] permutation.

The state is a flat list of 25 lanes, lane (x, y) at index x + 5 * y,
each lane an unsigned 64-bit int.
"""

from operator import xor
from functools import reduce
from math import log

# --------------------------------------------------------------------
#                          Constants & Helpers
# --------------------------------------------------------------------

W = 5
H = 5
LANES = W * H
LANE_BITS = 64
NUM_ROUNDS = 12 + 2 * int(log(LANE_BITS, 2))

RoundConstants = [
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001, 0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
]

# RotationConstants[y][x] is the rho offset of lane (x, y).
RotationConstants = [
    [0, 1, 62, 28, 27],
    [36, 44, 6, 55, 20],
    [3, 10, 43, 25, 39],
    [41, 45, 15, 21, 8],
    [18, 2, 61, 56, 14],
]

RhoOffsets = [RotationConstants[i // W][i % W] for i in range(LANES)]

# Lane i moves to PiLanes[i]: (x, y) -> (y, 2x + 3y).
PiLanes = [(i // W) + W * ((2 * (i % W) + 3 * (i // W)) % H) for i in range(LANES)]

Masks = [(1 << i) - 1 for i in range(LANE_BITS + 1)]


def rol(value, left, bits=LANE_BITS):
    top = value >> (bits - left)
    bot = (value & Masks[bits - left]) << left
    return bot | top


def zero_state():
    return [0] * LANES

# --------------------------------------------------------------------
#                          Round Steps
# --------------------------------------------------------------------

def theta(a):
    c = [reduce(xor, a[x::W]) for x in range(W)]
    for x in range(W):
        d = c[(x - 1) % W] ^ rol(c[(x + 1) % W], 1)
        for y in range(0, LANES, W):
            a[x + y] ^= d


def rho(a):
    for i in range(1, LANES):
        a[i] = rol(a[i], RhoOffsets[i])


def pi(a):
    b = a[:]
    for i in range(LANES):
        a[PiLanes[i]] = b[i]


def chi(a):
    for y in range(0, LANES, W):
        row = a[y : y + W]
        for x in range(W):
            a[y + x] = row[x] ^ ((~row[(x + 1) % W]) & row[(x + 2) % W])


def iota(a, rc):
    a[0] ^= rc

# --------------------------------------------------------------------
#                          Keccak Permutation
# --------------------------------------------------------------------

def keccak_round(a, rc):
    theta(a)
    rho(a)
    pi(a)
    chi(a)
    iota(a, rc)


def keccak_f(state):
    """Apply all 24 rounds of Keccak-f[1600] to ``state`` in place."""
    if len(state) != LANES:
        raise ValueError(f"state must have {LANES} lanes, got {len(state)}")
    for ir in range(NUM_ROUNDS):
        keccak_round(state, RoundConstants[ir])
    return state
