"""
복권 종류별 번호 예측

로또6는 과거 이력 분석을 바탕으로 조합을 생성하고, 넘버스3 / 넘버스4는
무작위 숫자 문자열을 생성합니다. 모든 결과에는 기대값 통계가 함께 붙습니다.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np

from shared.error_handler import get_logger, log_performance
from ..analysis.draw_history import DrawRecord
from ..analysis.patterns import count_consecutive_pairs
from ..analysis.strength import classify_prediction_strength
from ..utils.config import Config
from ..utils.helpers import round_half_up
from .combination_generator import CombinationGenerator, generate_numbers_digits
from .expected_value import (
    ExpectedValue,
    loto6_expected_value,
    numbers3_expected_value,
    numbers4_expected_value,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class Loto6Analysis:
    hot_numbers: List[int]
    cold_numbers: List[int]
    consecutive_numbers: int
    is_fallback: bool = False


@dataclass(frozen=True)
class Loto6Prediction:
    """로또6 예측 결과"""
    predictions: List[List[int]]
    statistics: ExpectedValue
    analysis: Loto6Analysis
    method: str = 'random'


@dataclass(frozen=True)
class DigitsPrediction:
    """넘버스3 / 넘버스4 예측 결과"""
    lottery_type: str
    predictions: List[str]
    draw_type: str
    statistics: ExpectedValue


class LotteryPredictor:
    """복권 번호 예측기"""

    def __init__(self, config: Optional[Config] = None, rng: Optional[np.random.Generator] = None):
        """
        Args:
            config: 설정 객체
            rng: 난수 생성기 (없으면 설정의 seed로 생성)
        """
        self.config = config or Config()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.prediction.seed)
        self.generator = CombinationGenerator(
            rng=self.rng,
            max_number=self.config.analysis.max_number,
            pick=self.config.analysis.numbers_per_draw
        )

    @log_performance
    def predict(
        self,
        lottery_type: str,
        method: Optional[str] = None,
        count: Optional[int] = None,
        history: Optional[Sequence[DrawRecord]] = None,
        draw_type: Optional[str] = None
    ) -> Union[Loto6Prediction, DigitsPrediction]:
        """
        복권 종류에 따라 예측 수행

        Args:
            lottery_type: loto6 / numbers3 / numbers4
            method: 로또6 생성 전략
            count: 생성할 예측 수 (기본 5)
            history: 로또6 과거 이력 (최신 순)
            draw_type: 넘버스 추첨 방식 (기본 straight)

        Raises:
            ValueError: 알 수 없는 복권 종류
        """
        count = count or self.config.prediction.default_count
        logger.info(f"{lottery_type} 예측 시작: method={method or self.config.prediction.default_method}, count={count}")

        if lottery_type == 'loto6':
            return self.predict_loto6(method, count, history or [])
        if lottery_type == 'numbers3':
            return self.predict_numbers(3, count, draw_type or 'straight')
        if lottery_type == 'numbers4':
            return self.predict_numbers(4, count, draw_type or 'straight')

        raise ValueError(f"알 수 없는 복권 종류입니다: {lottery_type}")

    def predict_loto6(
        self,
        method: Optional[str],
        count: int,
        history: Sequence[DrawRecord]
    ) -> Loto6Prediction:
        """로또6 예측 (1~43 중 6개)"""
        method = method or self.config.prediction.default_method
        strength = classify_prediction_strength(history, self.config.analysis)

        predictions = self.generator.generate(method, count, strength=strength, history=history)

        return Loto6Prediction(
            predictions=predictions,
            statistics=loto6_expected_value(),
            analysis=Loto6Analysis(
                hot_numbers=list(strength.hot),
                cold_numbers=list(strength.cold),
                consecutive_numbers=self._average_consecutive(history),
                is_fallback=strength.is_fallback,
            ),
            method=method,
        )

    def predict_numbers(self, digits: int, count: int, draw_type: str) -> DigitsPrediction:
        """넘버스3 (000~999) / 넘버스4 (0000~9999) 예측"""
        if digits == 3:
            statistics = numbers3_expected_value(draw_type)
        else:
            statistics = numbers4_expected_value(draw_type)

        predictions = [generate_numbers_digits(self.rng, digits) for _ in range(count)]

        return DigitsPrediction(
            lottery_type=f'numbers{digits}',
            predictions=predictions,
            draw_type=draw_type,
            statistics=statistics,
        )

    @staticmethod
    def _average_consecutive(history: Sequence[DrawRecord]) -> int:
        # 회차당 평균 연속 번호 쌍 개수
        if not history:
            return 1
        total = sum(count_consecutive_pairs(draw.numbers) for draw in history)
        return round_half_up(total / len(history))
