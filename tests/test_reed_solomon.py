# -*- coding: utf-8 -*-
from unittest import TestCase

from qrsymbol import InvalidArgument
from qrsymbol.galois import multiply, power_of_two
from qrsymbol.reed_solomon import compute_generator_polynomial, compute_reed_solomon

REFERENCE_DATA = [0x10, 0x20, 0x0C, 0x56, 0x61, 0x80, 0xEC, 0x11,
                  0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11]
REFERENCE_PARITY = [0xA5, 0x24, 0xD4, 0xC1, 0xED, 0x36, 0xC7, 0x87, 0x2C, 0x55]


def evaluate(polynomial, x):
    """Horner evaluation over GF(256), highest coefficient first."""
    value = 0
    for coefficient in polynomial:
        value = multiply(value, x) ^ coefficient
    return value


class GeneratorPolynomialTests(TestCase):
    def test_degree_7(self):
        self.assertEqual(compute_generator_polynomial(7), (1, 127, 122, 154, 164, 11, 68, 117))

    def test_roots_are_consecutive_powers_of_alpha(self):
        generator = compute_generator_polynomial(10)
        self.assertEqual(len(generator), 11)
        self.assertEqual(generator[0], 1)
        for i in range(10):
            self.assertEqual(evaluate(generator, power_of_two(i)), 0)

    def test_degree_out_of_range(self):
        for degree in (0, 256):
            with self.subTest(degree=degree):
                with self.assertRaises(InvalidArgument):
                    compute_generator_polynomial(degree)


class ReedSolomonTests(TestCase):
    def test_reference_parity_vector(self):
        self.assertEqual(compute_reed_solomon(REFERENCE_DATA, 10), REFERENCE_PARITY)

    def test_codeword_is_divisible_by_generator(self):
        data = list(b"machine inventory")
        codeword = data + compute_reed_solomon(data, 13)
        for i in range(13):
            self.assertEqual(evaluate(codeword, power_of_two(i)), 0)

    def test_all_zero_data_gives_zero_parity(self):
        self.assertEqual(compute_reed_solomon([0] * 20, 7), [0] * 7)
