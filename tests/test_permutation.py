"""Tests for the Keccak-f[1600] permutation and its fixed tables."""

import unittest

from keccak_sponge.byteorder import state_bytes
from keccak_sponge.permutation import (
    LANES,
    NUM_ROUNDS,
    PiLanes,
    RhoOffsets,
    RoundConstants,
    chi,
    iota,
    keccak_f,
    pi,
    rho,
    rol,
    theta,
    zero_state,
)

MASK64 = (1 << 64) - 1


class TestTables(unittest.TestCase):

    def test_round_count(self):
        self.assertEqual(NUM_ROUNDS, 24)
        self.assertEqual(len(RoundConstants), 24)

    def test_round_constants_endpoints(self):
        self.assertEqual(RoundConstants[0], 0x0000000000000001)
        self.assertEqual(RoundConstants[23], 0x8000000080008008)

    def test_rho_offsets(self):
        self.assertEqual(RhoOffsets[0], 0)
        self.assertEqual(RhoOffsets[1:5], [1, 62, 28, 27])
        self.assertEqual(RhoOffsets[20:], [18, 2, 61, 56, 14])
        # the 24 non-zero lanes all rotate by distinct amounts
        self.assertEqual(len(set(RhoOffsets[1:])), 24)

    def test_pi_is_a_permutation_fixing_lane_zero(self):
        self.assertEqual(sorted(PiLanes), list(range(LANES)))
        self.assertEqual(PiLanes[0], 0)

    def test_pi_relocation_cycle(self):
        # lane 1 -> 10 -> 7 -> 11 -> 17 -> ... -> 6 -> 1, a single 24-cycle
        seen = []
        i = 1
        while True:
            seen.append(i)
            i = PiLanes[i]
            if i == 1:
                break
        self.assertEqual(len(seen), 24)
        self.assertEqual(seen[:5], [1, 10, 7, 11, 17])


class TestSteps(unittest.TestCase):

    def test_rol(self):
        self.assertEqual(rol(1, 1), 2)
        self.assertEqual(rol(1 << 63, 1), 1)
        self.assertEqual(rol(0x0123456789ABCDEF, 8), 0x23456789ABCDEF01)

    def test_theta_zero_is_zero(self):
        a = zero_state()
        theta(a)
        self.assertEqual(a, zero_state())

    def test_theta_single_bit(self):
        a = zero_state()
        a[0] = 1
        theta(a)
        # column 0 keeps its bit, columns 1 and 4 get the diffused parity
        self.assertEqual(a[0], 1)
        self.assertEqual(a[5], 0)
        for y in range(0, LANES, 5):
            self.assertEqual(a[1 + y], 1)
            self.assertEqual(a[4 + y], 2)

    def test_rho_leaves_lane_zero(self):
        a = [1] * LANES
        rho(a)
        self.assertEqual(a[0], 1)
        self.assertEqual(a[1], 2)
        self.assertEqual(a[2], 1 << 62)

    def test_pi_moves_lanes(self):
        a = list(range(LANES))
        pi(a)
        self.assertEqual(a[1], 6)
        self.assertEqual(a[10], 1)
        self.assertEqual(a[0], 0)

    def test_chi_row(self):
        a = zero_state()
        a[1] = MASK64
        chi(a)
        # lane 0 = 0 ^ (~a1 & a2) = 0; lane 4 = 0 ^ (~a0 & a1) = a1
        self.assertEqual(a[0], 0)
        self.assertEqual(a[1], MASK64)
        self.assertEqual(a[4], MASK64)
        for lane in a:
            self.assertTrue(0 <= lane <= MASK64)

    def test_iota(self):
        a = zero_state()
        iota(a, RoundConstants[1])
        self.assertEqual(a[0], 0x8082)
        self.assertEqual(a[1:], [0] * 24)


class TestKeccakF(unittest.TestCase):

    def test_zero_state_first_lane(self):
        a = keccak_f(zero_state())
        self.assertEqual(a[0], 0xF1258F7940E1DDE7)

    def test_lanes_stay_64_bit(self):
        a = keccak_f([MASK64] * LANES)
        for lane in a:
            self.assertTrue(0 <= lane <= MASK64)

    def test_padded_empty_block_gives_keccak256_empty(self):
        a = zero_state()
        a[0] = 0x01
        a[16] = 0x80 << 56  # byte 135, last byte of the 136-byte rate
        keccak_f(a)
        self.assertEqual(
            state_bytes(a, 32).hex(),
            "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470",
        )

    def test_wrong_lane_count(self):
        with self.assertRaises(ValueError):
            keccak_f([0] * 24)


if __name__ == "__main__":
    unittest.main()
