"""
로또6 후보 조합 생성

전략:
- random: 균등 무작위 비복원 추출
- frequency: HOT 번호 3개 + 나머지 무작위
- hot-cold: HOT 4개 + COLD 2개 + 부족분 무작위
- statistical: 과거 출현 빈도에 비례하는 가중 추출

난수 생성기는 주입할 수 있으므로 시드를 고정하면 결과를 재현할 수 있습니다.
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

from shared.error_handler import get_logger
from ..analysis.draw_history import DrawRecord
from ..analysis.frequency import analyze_frequency, frequency_map
from ..analysis.strength import PredictionStrength, fallback_strength

logger = get_logger(__name__)


class PredictionMethod(str, Enum):
    RANDOM = 'random'
    FREQUENCY = 'frequency'
    HOT_COLD = 'hot-cold'
    STATISTICAL = 'statistical'


class CombinationGenerator:
    """후보 번호 조합 생성기"""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        max_number: int = 43,
        pick: int = 6
    ):
        """
        Args:
            rng: 난수 생성기 (없으면 시드 없는 기본 생성기)
            max_number: 최대 번호
            pick: 한 조합의 번호 개수
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_number = max_number
        self.pick = pick

    def generate(
        self,
        method: Optional[str] = None,
        count: int = 5,
        strength: Optional[PredictionStrength] = None,
        history: Optional[Sequence[DrawRecord]] = None
    ) -> List[List[int]]:
        """
        조합 여러 개 생성

        Args:
            method: 생성 전략 (기본 random)
            count: 생성할 조합 수
            strength: HOT / COLD 분류 (frequency, hot-cold 전략에서 사용)
            history: 추첨 이력 (statistical 전략에서 사용)

        Returns:
            오름차순으로 정렬된 조합 목록
        """
        method = PredictionMethod(method or PredictionMethod.RANDOM)
        strength = strength or fallback_strength()

        logger.debug(f"{method.value} 전략으로 {count}개 조합 생성")

        weights = self._frequency_weights(history) if method is PredictionMethod.STATISTICAL else None

        combinations = []
        for _ in range(count):
            if method is PredictionMethod.FREQUENCY:
                numbers = self.generate_by_frequency(strength.hot)
            elif method is PredictionMethod.HOT_COLD:
                numbers = self.generate_by_hot_cold(strength.hot, strength.cold)
            elif method is PredictionMethod.STATISTICAL:
                numbers = self.generate_weighted(weights)
            else:
                numbers = self.generate_random()
            combinations.append(numbers)

        return combinations

    def generate_random(self) -> List[int]:
        """균등 무작위 조합"""
        chosen = self.rng.choice(np.arange(1, self.max_number + 1), size=self.pick, replace=False)
        return sorted(int(n) for n in chosen)

    def generate_by_frequency(self, hot_numbers: Sequence[int]) -> List[int]:
        """HOT 번호에서 3개를 고르고 나머지는 무작위"""
        chosen = set(self._shuffled(hot_numbers)[:3])
        return self._fill_random(chosen)

    def generate_by_hot_cold(self, hot_numbers: Sequence[int], cold_numbers: Sequence[int]) -> List[int]:
        """HOT 4개, COLD 2개를 고르고 부족하면 무작위로 채움"""
        chosen = set(self._shuffled(hot_numbers)[:4])
        chosen.update(self._shuffled(cold_numbers)[:2])
        return self._fill_random(chosen)

    def generate_weighted(self, weights: Sequence[Tuple[int, float]]) -> List[int]:
        """
        가중치 비례 비복원 추출

        [0, 총 가중치) 구간의 균등 난수에서 번호 오름차순으로 가중치를 빼 나가며
        번호를 고릅니다. 이미 고른 번호는 후보에서 제외한 뒤 다시 추출합니다.

        Args:
            weights: (번호, 가중치) 목록
        """
        remaining = sorted((int(num), float(weight)) for num, weight in weights)
        chosen: List[int] = []

        while len(chosen) < self.pick and remaining:
            total_weight = sum(weight for _, weight in remaining)
            if total_weight <= 0:
                # 남은 후보의 가중치가 모두 0이면 균등 추출
                index = int(self.rng.integers(len(remaining)))
            else:
                index = self._weighted_index(remaining, self.rng.random() * total_weight)
            chosen.append(remaining.pop(index)[0])

        return sorted(chosen)

    def _frequency_weights(self, history: Optional[Sequence[DrawRecord]]) -> List[Tuple[int, float]]:
        if not history:
            logger.info("추첨 이력이 없어 균등 가중치를 사용합니다")
            return [(num, 1.0) for num in range(1, self.max_number + 1)]

        counts = frequency_map(analyze_frequency(history, self.max_number))
        return [(num, float(freq)) for num, freq in counts.items()]

    @staticmethod
    def _weighted_index(candidates: Sequence[Tuple[int, float]], target: float) -> int:
        for index, (_, weight) in enumerate(candidates):
            if target < weight:
                return index
            target -= weight
        # 부동소수점 오차로 끝까지 간 경우 마지막 양수 가중치 후보
        return max(i for i, (_, weight) in enumerate(candidates) if weight > 0)

    def _shuffled(self, numbers: Sequence[int]) -> List[int]:
        return [int(n) for n in self.rng.permutation(list(numbers))] if len(numbers) else []

    def _fill_random(self, chosen: set) -> List[int]:
        pool = [n for n in range(1, self.max_number + 1) if n not in chosen]
        needed = self.pick - len(chosen)
        if needed > 0:
            chosen.update(int(n) for n in self.rng.choice(pool, size=needed, replace=False))
        return sorted(chosen)


def generate_numbers_digits(rng: np.random.Generator, digits: int) -> str:
    """넘버스용 0으로 채운 n자리 숫자 문자열"""
    return f"{int(rng.integers(0, 10 ** digits)):0{digits}d}"
