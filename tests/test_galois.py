# -*- coding: utf-8 -*-
from unittest import TestCase

from qrsymbol import galois


class GaloisTableTests(TestCase):
    def setUp(self):
        self.exp = galois.exp_table()
        self.log = galois.log_table()

    def test_exp_table_starts_with_powers_of_two(self):
        self.assertEqual(self.exp[:8], [1, 2, 4, 8, 16, 32, 64, 128])
        # 2^8 reduced by 0x11D
        self.assertEqual(self.exp[8], 0x1D)
        self.assertEqual(self.exp[9], 0x3A)

    def test_exp_table_is_duplicated(self):
        self.assertEqual(len(self.exp), 512)
        self.assertEqual(self.exp[255:510], self.exp[:255])

    def test_log_inverts_exp(self):
        for value in range(1, 256):
            self.assertEqual(self.exp[self.log[value]], value)

    def test_exp_covers_every_nonzero_element_once(self):
        self.assertEqual(sorted(self.exp[:255]), list(range(1, 256)))

    def test_initialize_tables_is_idempotent(self):
        galois.initialize_tables()
        galois.initialize_tables()
        self.assertEqual(galois.exp_table(), self.exp)
        self.assertEqual(galois.log_table(), self.log)

    def test_tables_are_returned_as_copies(self):
        self.exp[0] = 99
        self.assertEqual(galois.exp_table()[0], 1)


class GaloisArithmeticTests(TestCase):
    def test_multiply_by_zero(self):
        self.assertEqual(galois.multiply(0, 77), 0)
        self.assertEqual(galois.multiply(77, 0), 0)

    def test_multiply_known_products(self):
        self.assertEqual(galois.multiply(2, 128), 0x1D)
        self.assertEqual(galois.multiply(1, 200), 200)
        self.assertEqual(galois.multiply(3, 7), 9)

    def test_multiply_is_commutative(self):
        for a in (1, 2, 53, 140, 255):
            for b in (1, 3, 99, 254):
                self.assertEqual(galois.multiply(a, b), galois.multiply(b, a))

    def test_power_of_two_wraps_at_255(self):
        self.assertEqual(galois.power_of_two(0), 1)
        self.assertEqual(galois.power_of_two(255), 1)
        self.assertEqual(galois.power_of_two(256), 2)
        self.assertEqual(galois.power_of_two(8), 0x1D)
