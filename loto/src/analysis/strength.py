"""
예측 강도 분류 (HOT / WARM / COLD / OVERDUE)

서로 다른 이력 구간의 빈도 분석 결과로 번호를 분류합니다. 각 집합은
서로 겹칠 수 있으며 순수한 기술 통계일 뿐 예측을 보장하지 않습니다.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from shared.error_handler import get_logger
from ..utils.config import AnalysisConfig
from .draw_history import DrawRecord
from .frequency import analyze_frequency

logger = get_logger(__name__)

# 이력이 없을 때 사용하는 기본 분류
DEFAULT_HOT = [7, 12, 19, 23, 31, 37, 41]
DEFAULT_COLD = [2, 5, 11, 17, 29, 35, 42]


@dataclass(frozen=True)
class PredictionStrength:
    """번호 분류 결과"""
    hot: List[int]
    warm: List[int]
    cold: List[int]
    overdue: List[int]

    @property
    def is_fallback(self) -> bool:
        return False


@dataclass(frozen=True)
class FallbackPredictionStrength(PredictionStrength):
    """이력이 없어 기본 집합으로 채운 분류 결과"""
    reason: str = '추첨 이력이 없어 기본 번호 집합을 사용합니다'

    @property
    def is_fallback(self) -> bool:
        return True


def fallback_strength() -> FallbackPredictionStrength:
    return FallbackPredictionStrength(
        hot=list(DEFAULT_HOT),
        warm=list(DEFAULT_HOT),
        cold=list(DEFAULT_COLD),
        overdue=list(DEFAULT_COLD),
    )


def classify_prediction_strength(
    draws: Sequence[DrawRecord],
    config: Optional[AnalysisConfig] = None
) -> PredictionStrength:
    """
    예측 강도 분류

    Args:
        draws: 최신 순 추첨 이력
        config: 분석 설정 (구간 크기, 상한 개수, 임계값)

    Returns:
        PredictionStrength. 이력이 비어 있으면 FallbackPredictionStrength
    """
    config = config or AnalysisConfig()

    if len(draws) == 0:
        logger.warning("추첨 이력이 없어 기본 예측 강도 분류를 반환합니다")
        return fallback_strength()

    # 단기 / 중기 구간 빈도
    recent_freq = analyze_frequency(draws[:config.hot_window], config.max_number)
    hot = [entry.number for entry in recent_freq[:config.hot_count]]

    medium_freq = analyze_frequency(draws[:config.warm_window], config.max_number)
    warm = [entry.number for entry in medium_freq[:config.warm_count]]

    # 전체 이력 기준
    all_freq = analyze_frequency(draws, config.max_number)
    cold = [
        entry.number for entry in all_freq
        if entry.last_drawn > config.cold_threshold
    ][:config.cold_count]

    avg_frequency = sum(entry.frequency for entry in all_freq) / len(all_freq)
    overdue = [
        entry.number for entry in all_freq
        if entry.frequency < avg_frequency * config.overdue_ratio
    ][:config.overdue_count]

    logger.debug(f"예측 강도 분류 완료: hot={hot}, cold={cold}")
    return PredictionStrength(hot=hot, warm=warm, cold=cold, overdue=overdue)
