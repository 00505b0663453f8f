"""
조합 생성기 테스트 모듈
"""

import unittest
from pathlib import Path
import sys

import numpy as np

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)

from loto.src.analysis.draw_history import DrawHistory
from loto.src.analysis.strength import PredictionStrength
from loto.src.prediction.combination_generator import (
    CombinationGenerator,
    PredictionMethod,
    generate_numbers_digits,
)

HOT = [1, 2, 3, 4, 5, 6, 7]
COLD = [41, 42, 31, 32, 33, 34, 35]


class TestCombinationGenerator(unittest.TestCase):
    def setUp(self):
        self.generator = CombinationGenerator(rng=np.random.default_rng(42))
        self.strength = PredictionStrength(hot=HOT, warm=HOT, cold=COLD, overdue=COLD)

    def assertValidCombination(self, numbers):
        self.assertEqual(len(numbers), 6)
        self.assertEqual(len(set(numbers)), 6)
        self.assertEqual(numbers, sorted(numbers))
        self.assertTrue(all(1 <= n <= 43 for n in numbers))
        self.assertTrue(all(isinstance(n, int) for n in numbers))

    def test_random(self):
        """무작위 조합은 항상 유효"""
        combinations = self.generator.generate('random', count=100)
        self.assertEqual(len(combinations), 100)
        for numbers in combinations:
            self.assertValidCombination(numbers)

    def test_default_method_is_random(self):
        combinations = self.generator.generate(count=3)
        self.assertEqual(len(combinations), 3)
        for numbers in combinations:
            self.assertValidCombination(numbers)

    def test_frequency(self):
        """HOT 번호를 최소 3개 포함"""
        for numbers in self.generator.generate(PredictionMethod.FREQUENCY, count=50, strength=self.strength):
            self.assertValidCombination(numbers)
            self.assertGreaterEqual(len(set(numbers) & set(HOT)), 3)

    def test_hot_cold(self):
        """HOT 4개 + COLD 2개"""
        for numbers in self.generator.generate('hot-cold', count=50, strength=self.strength):
            self.assertValidCombination(numbers)
            self.assertEqual(len(set(numbers) & set(HOT)), 4)
            self.assertEqual(len(set(numbers) & set(COLD)), 2)

    def test_hot_cold_without_cold_numbers(self):
        """COLD 집합이 비어 있으면 무작위로 채움"""
        strength = PredictionStrength(hot=HOT, warm=HOT, cold=[], overdue=[])
        for numbers in self.generator.generate('hot-cold', count=20, strength=strength):
            self.assertValidCombination(numbers)
            self.assertGreaterEqual(len(set(numbers) & set(HOT)), 4)

    def test_fallback_strength_when_missing(self):
        for numbers in self.generator.generate('frequency', count=10):
            self.assertValidCombination(numbers)

    def test_statistical_uses_only_drawn_numbers(self):
        """가중치 0인 번호는 양수 가중치 번호가 충분하면 선택되지 않음"""
        history = DrawHistory.from_numbers([
            [1, 2, 3, 10, 20, 30],
            [1, 5, 9, 22, 33, 43],
            [2, 3, 15, 16, 40, 41],
        ])
        drawn = {n for record in history for n in record.numbers}

        for numbers in self.generator.generate('statistical', count=50, history=history):
            self.assertValidCombination(numbers)
            self.assertTrue(set(numbers) <= drawn)

    def test_statistical_without_history(self):
        for numbers in self.generator.generate('statistical', count=10):
            self.assertValidCombination(numbers)

    def test_weighted_zero_weights_fall_back_to_uniform(self):
        """양수 가중치 번호를 모두 고른 뒤에는 균등 추출"""
        weights = [(n, 0.0) for n in range(1, 44)]
        weights[9] = (10, 1.0)
        weights[19] = (20, 1.0)
        weights[29] = (30, 1.0)

        for _ in range(20):
            numbers = self.generator.generate_weighted(weights)
            self.assertValidCombination(numbers)
            self.assertTrue({10, 20, 30} <= set(numbers))

    def test_weighted_prefers_heavy_number(self):
        weights = [(n, 1.0) for n in range(1, 44)]
        weights[0] = (1, 1000.0)

        hits = sum(1 for _ in range(100) if 1 in self.generator.generate_weighted(weights))
        self.assertGreaterEqual(hits, 95)

    def test_seed_reproducibility(self):
        """같은 시드면 같은 결과"""
        first = CombinationGenerator(rng=np.random.default_rng(7)).generate('random', count=5)
        second = CombinationGenerator(rng=np.random.default_rng(7)).generate('random', count=5)
        self.assertEqual(first, second)

    def test_unknown_method(self):
        with self.assertRaises(ValueError):
            self.generator.generate('lucky', count=1)

    def test_numbers_digits(self):
        rng = np.random.default_rng(0)
        for _ in range(50):
            value = generate_numbers_digits(rng, 3)
            self.assertEqual(len(value), 3)
            self.assertTrue(value.isdigit())
        self.assertEqual(len(generate_numbers_digits(rng, 4)), 4)


if __name__ == '__main__':
    unittest.main()
