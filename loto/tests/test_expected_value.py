"""
기대값 계산 테스트 모듈
"""

import unittest
from pathlib import Path
import sys

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)

from loto.src.prediction.expected_value import (
    TICKET_PRICE,
    combination,
    loto6_expected_value,
    numbers3_expected_value,
    numbers4_expected_value,
)


class TestCombination(unittest.TestCase):
    def test_known_values(self):
        self.assertEqual(combination(43, 6), 6_096_454)
        self.assertEqual(combination(5, 2), 10)
        self.assertEqual(combination(10, 0), 1)
        self.assertEqual(combination(10, 10), 1)

    def test_r_greater_than_n(self):
        self.assertEqual(combination(5, 6), 0)


class TestExpectedValue(unittest.TestCase):
    def test_loto6(self):
        """로또6 기대값은 음수이고 구매 가격보다 작음"""
        ev = loto6_expected_value()

        self.assertEqual(ev.total_combinations, 6_096_454)
        self.assertAlmostEqual(ev.probability, 1 / 6_096_454)
        self.assertAlmostEqual(ev.expected_value, 653_300_000 / 6_096_454 - 200)
        self.assertLess(ev.expected_value, 0)
        self.assertEqual(ev.prize['1等'], 200_000_000)
        self.assertEqual(ev.prize['5等'], 1_000)

    def test_numbers3(self):
        for draw_type in ('straight', 'box', 'set-straight', 'set-box', 'mini'):
            ev = numbers3_expected_value(draw_type)
            self.assertEqual(ev.total_combinations, 1000)
            self.assertLess(ev.expected_value, 0)
            self.assertLess(ev.expected_value, TICKET_PRICE)

        self.assertAlmostEqual(numbers3_expected_value('straight').expected_value, -110)
        self.assertAlmostEqual(numbers3_expected_value('box').probability, 0.006)
        self.assertAlmostEqual(numbers3_expected_value('mini').expected_value, -110)

    def test_numbers4(self):
        for draw_type in ('straight', 'box', 'set'):
            ev = numbers4_expected_value(draw_type)
            self.assertEqual(ev.total_combinations, 10000)
            self.assertLess(ev.expected_value, 0)

        # 세트는 스트레이트 상금 기준
        self.assertAlmostEqual(numbers4_expected_value('set').expected_value, -155)
        self.assertEqual(numbers4_expected_value('set').prize, {'straight': 450_000, 'box': 18_750})

    def test_unknown_draw_type(self):
        with self.assertRaises(ValueError):
            numbers3_expected_value('set')
        with self.assertRaises(ValueError):
            numbers4_expected_value('mini')


if __name__ == '__main__':
    unittest.main()
