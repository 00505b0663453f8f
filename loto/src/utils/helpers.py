"""공통 수치 유틸리티"""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """
    사사오입 반올림 (파이썬 기본 round의 은행가 반올림과 다름)

    Args:
        value: 반올림할 값
        digits: 소수점 자릿수

    Returns:
        반올림된 값 (digits == 0이면 int)
    """
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if digits == 0 else rounded
