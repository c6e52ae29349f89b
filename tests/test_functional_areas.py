# -*- coding: utf-8 -*-
from unittest import TestCase

from qrsymbol.functional_areas import (
    build_function_mask,
    build_function_patterns,
    build_zone_map,
    calculate_format_bits,
    calculate_version_bits,
    draw_format_bits,
)
from qrsymbol.versions import MAX_VERSION, get_raw_data_modules

FINDER = [
    [1, 1, 1, 1, 1, 1, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 1, 1, 1, 0, 1],
    [1, 0, 0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1],
]

ALIGNMENT = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 1, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]


def block(grid, top, left, height, width):
    return [[int(grid[r][c]) for c in range(left, left + width)] for r in range(top, top + height)]


class FunctionPatternTests(TestCase):
    def test_finder_patterns_and_separators(self):
        for version in (1, 2, 7, 40):
            with self.subTest(version=version):
                modules, is_function = build_function_patterns(version)
                size = len(modules)
                for top, left in ((0, 0), (0, size - 7), (size - 7, 0)):
                    self.assertEqual(block(modules, top, left, 7, 7), FINDER)
                # Separator row below the top-left finder, column left of the top-right one
                self.assertFalse(any(modules[7][c] for c in range(8)))
                self.assertFalse(any(modules[r][size - 8] for r in range(8)))
                self.assertTrue(all(is_function[7][c] for c in range(8)))

    def test_timing_patterns_alternate(self):
        modules, is_function = build_function_patterns(3)
        size = len(modules)
        for i in range(8, size - 8):
            self.assertEqual(modules[6][i], i % 2 == 0)
            self.assertEqual(modules[i][6], i % 2 == 0)
            self.assertTrue(is_function[6][i] and is_function[i][6])

    def test_alignment_pattern_version_2(self):
        modules, is_function = build_function_patterns(2)
        self.assertEqual(block(modules, 16, 16, 5, 5), ALIGNMENT)
        self.assertTrue(all(is_function[r][c] for r in range(16, 21) for c in range(16, 21)))

    def test_version_7_has_six_alignment_patterns(self):
        modules, _ = build_function_patterns(7)
        centers = [6, 22, 38]
        drawn = [(cy, cx) for cy in centers for cx in centers
                 if block(modules, cy - 2, cx - 2, 5, 5) == ALIGNMENT]
        self.assertEqual(sorted(drawn), [(6, 22), (22, 6), (22, 22), (22, 38), (38, 22), (38, 38)])

    def test_dark_module(self):
        for version in (1, 10):
            modules, is_function = build_function_patterns(version)
            size = len(modules)
            self.assertTrue(modules[size - 8][8])
            self.assertTrue(is_function[size - 8][8])

    def test_data_module_count_matches_raw_formula(self):
        for version in range(1, MAX_VERSION + 1):
            _, is_function = build_function_patterns(version)
            free = sum(1 for row in is_function for f in row if not f)
            self.assertEqual(free, get_raw_data_modules(version), version)


class FormatAndVersionInfoTests(TestCase):
    def test_format_bits(self):
        cases = [
            ('L', 0, '111011111000100'),
            ('L', 4, '110011000101111'),
            ('L', 7, '110100101110110'),
            ('M', 0, '101010000010010'),
        ]
        for ecc, mask, bits in cases:
            with self.subTest(ecc=ecc, mask=mask):
                self.assertEqual(calculate_format_bits(ecc, mask), int(bits, 2))

    def test_format_bits_both_copies(self):
        modules, is_function = build_function_patterns(1)
        draw_format_bits(modules, is_function, 'L', 4)
        size = len(modules)
        bits = calculate_format_bits('L', 4)
        first = [modules[i][8] for i in range(6)] + [modules[7][8], modules[8][8], modules[8][7]]
        first += [modules[8][14 - i] for i in range(9, 15)]
        second = [modules[8][size - 1 - i] for i in range(8)]
        second += [modules[size - 15 + i][8] for i in range(8, 15)]
        expected = [(bits >> i) & 1 == 1 for i in range(15)]
        self.assertEqual(first, expected)
        self.assertEqual(second, expected)

    def test_version_bits(self):
        self.assertEqual(calculate_version_bits(7), 0x07C94)

    def test_version_info_drawn_for_version_7(self):
        modules, _ = build_function_patterns(7)
        size = len(modules)
        bits = calculate_version_bits(7)
        for i in range(18):
            expected = (bits >> i) & 1 == 1
            self.assertEqual(modules[i // 3][size - 11 + i % 3], expected)
            self.assertEqual(modules[size - 11 + i % 3][i // 3], expected)

    def test_no_version_info_below_version_7(self):
        _, is_function = build_function_patterns(6)
        size = len(is_function)
        self.assertFalse(any(is_function[r][c] for r in range(6) for c in range(size - 11, size - 8)))


class ZoneMapTests(TestCase):
    def test_function_mask_and_separators(self):
        func_mask, sep_mask = build_function_mask(1)
        self.assertTrue(func_mask[0][0] and func_mask[6][10] and func_mask[8][20])
        self.assertFalse(func_mask[10][10])
        self.assertTrue(sep_mask[7][0] and sep_mask[0][7] and sep_mask[13][7])
        self.assertFalse(sep_mask[0][0])

    def test_zone_map_version_7(self):
        zones = build_zone_map(7)
        self.assertEqual(zones[0][0], 'finder')
        self.assertEqual(zones[7][3], 'separator')
        self.assertEqual(zones[6][10], 'timing')
        self.assertEqual(zones[6][22], 'alignment')
        self.assertEqual(zones[22][22], 'alignment')
        self.assertEqual(zones[8][0], 'format')
        self.assertEqual(zones[0][34], 'version')
        self.assertEqual(zones[37][8], 'dark')
        self.assertIsNone(zones[30][30])
