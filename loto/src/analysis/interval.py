"""특정 번호의 출현 간격 분석"""

from dataclasses import dataclass, field
from typing import List, Sequence

from shared.error_handler import get_logger
from ..utils.helpers import round_half_up
from .draw_history import DrawRecord

logger = get_logger(__name__)

PREDICTION_RECENT = '최근에 나왔으므로 당분간 나오지 않을 가능성이 높음'
PREDICTION_OVERDUE = '평균보다 오래 나오지 않았으므로 곧 나올 가능성이 있음'
PREDICTION_AVERAGE = '평균적인 출현 페이스'
PREDICTION_INSUFFICIENT = '데이터가 충분하지 않음'


@dataclass(frozen=True)
class IntervalAnalysis:
    """출현 간격 분석 결과"""
    number: int
    intervals: List[int] = field(default_factory=list)
    average: float = 0.0
    min: int = 0
    max: int = 0
    since_last_drawn: int = 0
    prediction: str = PREDICTION_INSUFFICIENT

    @property
    def is_sufficient(self) -> bool:
        return len(self.intervals) > 0


def analyze_draw_interval(draws: Sequence[DrawRecord], target_number: int) -> IntervalAnalysis:
    """
    번호의 연속된 출현 사이 간격(회차 수) 분석

    Args:
        draws: 최신 순 추첨 이력
        target_number: 분석할 번호

    Returns:
        간격 목록과 평균/최소/최대, 예측 문구.
        출현이 2회 미만이면 빈 결과와 '데이터 부족' 문구
    """
    appearances = [index for index, draw in enumerate(draws) if target_number in draw.numbers]
    since_last_drawn = appearances[0] if appearances else len(draws)

    if len(appearances) < 2:
        logger.warning(f"{target_number}번은 출현이 {len(appearances)}회뿐이라 간격을 계산할 수 없습니다")
        return IntervalAnalysis(number=target_number, since_last_drawn=since_last_drawn)

    intervals = [later - earlier for earlier, later in zip(appearances, appearances[1:])]
    average = sum(intervals) / len(intervals)

    if since_last_drawn < average * 0.5:
        prediction = PREDICTION_RECENT
    elif since_last_drawn > average * 1.5:
        prediction = PREDICTION_OVERDUE
    else:
        prediction = PREDICTION_AVERAGE

    return IntervalAnalysis(
        number=target_number,
        intervals=intervals,
        average=round_half_up(average, 1),
        min=min(intervals),
        max=max(intervals),
        since_last_drawn=since_last_drawn,
        prediction=prediction,
    )
