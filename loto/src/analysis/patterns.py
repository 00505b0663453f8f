"""
당첨 번호 구조 패턴 분석

- 연속 번호 쌍
- 홀짝 / 저고 비율 (번호 단위 집계)
- 번호 합계의 평균과 표준편차
- 모든 번호 쌍의 동시 출현 빈도
"""

from dataclasses import dataclass
from itertools import combinations
from typing import Dict, List, Sequence, Tuple

import numpy as np

from shared.error_handler import get_logger
from ..utils.helpers import round_half_up
from .draw_history import DrawRecord

logger = get_logger(__name__)

LOW_HIGH_SPLIT = 21


@dataclass(frozen=True)
class PairFrequency:
    """번호 쌍과 출현 횟수"""
    pair: Tuple[int, int]
    frequency: int


@dataclass(frozen=True)
class PatternSummary:
    """패턴 분석 결과"""
    consecutive_pairs: List[PairFrequency]
    odd_even_ratio: Dict[str, int]
    low_high_ratio: Dict[str, int]
    sum_average: int
    sum_std_dev: int


def _top_pairs(counts: Dict[Tuple[int, int], int], limit: int) -> List[PairFrequency]:
    # 안정 정렬: 동률이면 처음 발견된 순서 유지
    ordered = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [PairFrequency(pair=pair, frequency=freq) for pair, freq in ordered[:limit]]


def analyze_patterns(
    draws: Sequence[DrawRecord],
    top: int = 10,
    low_high_split: int = LOW_HIGH_SPLIT
) -> PatternSummary:
    """
    이력 전체를 한 번 순회하며 패턴 통계 계산

    Args:
        draws: 추첨 이력
        top: 연속 번호 쌍 상위 개수
        low_high_split: 이 값 이하면 낮은 번호

    Returns:
        PatternSummary
    """
    consecutive_counts: Dict[Tuple[int, int], int] = {}
    total_odd = total_even = 0
    total_low = total_high = 0
    sums = []

    for draw in draws:
        ordered = draw.sorted_numbers()

        for current, following in zip(ordered, ordered[1:]):
            if following - current == 1:
                key = (current, following)
                consecutive_counts[key] = consecutive_counts.get(key, 0) + 1

        for num in draw.numbers:
            if num % 2 == 0:
                total_even += 1
            else:
                total_odd += 1

            if num <= low_high_split:
                total_low += 1
            else:
                total_high += 1

        sums.append(sum(draw.numbers))

    if sums:
        sum_array = np.array(sums, dtype=float)
        # 모표준편차 (ddof=0)
        sum_average = round_half_up(float(np.mean(sum_array)))
        sum_std_dev = round_half_up(float(np.std(sum_array)))
    else:
        logger.warning("추첨 이력이 없어 합계 통계를 0으로 반환합니다")
        sum_average = sum_std_dev = 0

    return PatternSummary(
        consecutive_pairs=_top_pairs(consecutive_counts, top),
        odd_even_ratio={'odd': total_odd, 'even': total_even},
        low_high_ratio={'low': total_low, 'high': total_high},
        sum_average=sum_average,
        sum_std_dev=sum_std_dev,
    )


def analyze_pair_frequency(draws: Sequence[DrawRecord], top: int = 20) -> List[PairFrequency]:
    """
    모든 번호 쌍(회차당 15쌍)의 동시 출현 빈도

    Args:
        draws: 추첨 이력
        top: 반환할 상위 개수

    Returns:
        빈도 내림차순 번호 쌍 목록
    """
    pair_counts: Dict[Tuple[int, int], int] = {}

    for draw in draws:
        for pair in combinations(draw.sorted_numbers(), 2):
            pair_counts[pair] = pair_counts.get(pair, 0) + 1

    return _top_pairs(pair_counts, top)


def count_consecutive_pairs(numbers: Sequence[int]) -> int:
    """한 회차의 인접 연속 번호 쌍 개수"""
    ordered = sorted(numbers)
    return sum(1 for current, following in zip(ordered, ordered[1:]) if following - current == 1)
