"""
번호별 출현 빈도 분석

- 번호별 출현 횟수와 비율
- 마지막 출현 시점 (0 = 최신 회차, 한 번도 안 나왔으면 전체 회차 수)
- 균등 분포 카이제곱 검정
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from scipy import stats

from shared.error_handler import get_logger
from .draw_history import DEFAULT_MAX_NUMBER, DrawRecord

logger = get_logger(__name__)


@dataclass(frozen=True)
class FrequencyEntry:
    """번호 하나의 빈도 통계"""
    number: int
    frequency: int
    percentage: float
    last_drawn: int


def analyze_frequency(
    draws: Sequence[DrawRecord],
    max_number: int = DEFAULT_MAX_NUMBER
) -> List[FrequencyEntry]:
    """
    각 번호의 출현 빈도 분석

    Args:
        draws: 최신 순으로 정렬된 추첨 이력
        max_number: 최대 번호

    Returns:
        빈도 내림차순 목록 (빈도가 같으면 번호 오름차순)
    """
    total_draws = len(draws)
    frequency = {num: 0 for num in range(1, max_number + 1)}
    last_drawn = {num: total_draws for num in range(1, max_number + 1)}

    for draw_index, draw in enumerate(draws):
        for num in draw.numbers:
            # 범위 밖 번호는 집계하지 않음
            if num not in frequency:
                continue
            frequency[num] += 1
            # 가장 최근 출현만 기록
            if last_drawn[num] == total_draws:
                last_drawn[num] = draw_index

    results = [
        FrequencyEntry(
            number=num,
            frequency=frequency[num],
            percentage=(frequency[num] / total_draws) * 100 if total_draws > 0 else 0.0,
            last_drawn=last_drawn[num],
        )
        for num in range(1, max_number + 1)
    ]

    # sorted는 안정 정렬이므로 동률이면 번호 순서가 유지됨
    return sorted(results, key=lambda entry: entry.frequency, reverse=True)


def frequency_map(entries: Sequence[FrequencyEntry]) -> Dict[int, int]:
    """번호 오름차순 {번호: 빈도} 딕셔너리"""
    return {entry.number: entry.frequency for entry in sorted(entries, key=lambda e: e.number)}


def analyze_uniformity(
    draws: Sequence[DrawRecord],
    max_number: int = DEFAULT_MAX_NUMBER
) -> Dict[str, Optional[float]]:
    """
    번호 빈도가 균등 분포를 따르는지 카이제곱 검정

    Args:
        draws: 추첨 이력
        max_number: 최대 번호

    Returns:
        chi2_stat, p_value (이력이 비어 있으면 None)
    """
    if len(draws) == 0:
        logger.warning("추첨 이력이 없어 균등성 검정을 건너뜁니다")
        return {'chi2_stat': None, 'p_value': None}

    observed = list(frequency_map(analyze_frequency(draws, max_number)).values())
    chi2_stat, p_value = stats.chisquare(observed)

    return {
        'chi2_stat': float(chi2_stat),
        'p_value': float(p_value)
    }
