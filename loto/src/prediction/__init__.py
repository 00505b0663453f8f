"""
번호 생성 및 기대값 모듈

이 패키지는 후보 조합 생성, 복권 종류별 예측, 기대값 계산 기능을 제공합니다.
"""

from .combination_generator import CombinationGenerator, PredictionMethod
from .expected_value import (
    ExpectedValue,
    combination,
    loto6_expected_value,
    numbers3_expected_value,
    numbers4_expected_value,
)
from .predictor import DigitsPrediction, Loto6Prediction, LotteryPredictor

__all__ = [
    'CombinationGenerator', 'PredictionMethod',
    'ExpectedValue', 'combination', 'loto6_expected_value',
    'numbers3_expected_value', 'numbers4_expected_value',
    'DigitsPrediction', 'Loto6Prediction', 'LotteryPredictor',
]
