"""
당첨 확률과 기대값 계산

로또6(43개 중 6개), 넘버스3, 넘버스4의 조합 수, 당첨 확률, 기대값을
고정된 상금표로 계산합니다. 추첨 이력과는 무관한 순수 함수입니다.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

TICKET_PRICE = 200

LOTO6_MAX_NUMBER = 43
LOTO6_PICK = 6

# (등수, 당첨 조합 수, 상금)
LOTO6_PRIZE_TABLE: List[Tuple[str, int, int]] = [
    ('1等', 1, 200_000_000),
    ('2等', 6, 15_000_000),
    ('3等', 216, 500_000),
    ('4等', 9_990, 10_000),
    ('5等', 155_400, 1_000),
]

# 추첨 방식별 (당첨 조합 수, 상금 맵)
NUMBERS3_PRIZE_TABLE: Dict[str, Tuple[int, Dict[str, int]]] = {
    'straight': (1, {'straight': 90_000}),
    'box': (6, {'box': 15_000}),
    'set-straight': (1, {'straight': 45_000}),
    'set-box': (6, {'box': 7_500}),
    'mini': (10, {'mini': 9_000}),
}

NUMBERS4_PRIZE_TABLE: Dict[str, Tuple[int, Dict[str, int]]] = {
    'straight': (1, {'straight': 900_000}),
    'box': (24, {'box': 37_500}),
    'set': (1, {'straight': 450_000, 'box': 18_750}),
}


@dataclass(frozen=True)
class ExpectedValue:
    """기대값 계산 결과"""
    total_combinations: int
    probability: float
    expected_value: float
    prize: Dict[str, int] = field(default_factory=dict)


def combination(n: int, r: int) -> int:
    """
    조합의 수 nCr

    Args:
        n: 전체 개수
        r: 선택 개수

    Returns:
        조합의 수 (r > n이면 0)
    """
    if r > n:
        return 0
    if r == 0 or r == n:
        return 1

    # 곱셈과 나눗셈을 번갈아 수행해 중간값이 커지지 않도록 함
    result = 1.0
    for i in range(r):
        result *= (n - i) / (i + 1)
    return int(round(result))


def loto6_expected_value(ticket_price: int = TICKET_PRICE) -> ExpectedValue:
    """
    로또6 기대값

    기대값 = Σ(등수별 확률 × 상금) - 구매 가격
    """
    total_combinations = combination(LOTO6_MAX_NUMBER, LOTO6_PICK)

    expected_prize = sum(
        (winners / total_combinations) * prize
        for _, winners, prize in LOTO6_PRIZE_TABLE
    )

    return ExpectedValue(
        total_combinations=total_combinations,
        probability=1 / total_combinations,
        expected_value=expected_prize - ticket_price,
        prize={rank: prize for rank, _, prize in LOTO6_PRIZE_TABLE},
    )


def _digits_expected_value(
    table: Dict[str, Tuple[int, Dict[str, int]]],
    draw_type: str,
    digits: int,
    ticket_price: int
) -> ExpectedValue:
    if draw_type not in table:
        raise ValueError(f"지원하지 않는 추첨 방식입니다: {draw_type} (가능: {list(table)})")

    total_combinations = 10 ** digits
    winners, prize = table[draw_type]
    probability = winners / total_combinations

    # 세트는 스트레이트 상금 기준으로 계산
    main_prize = prize.get('straight') or prize.get('box') or prize.get('mini') or 0
    expected_value = probability * main_prize - ticket_price

    return ExpectedValue(
        total_combinations=total_combinations,
        probability=probability,
        expected_value=expected_value,
        prize=dict(prize),
    )


def numbers3_expected_value(draw_type: str = 'straight', ticket_price: int = TICKET_PRICE) -> ExpectedValue:
    """넘버스3 기대값 (straight / box / set-straight / set-box / mini)"""
    return _digits_expected_value(NUMBERS3_PRIZE_TABLE, draw_type, 3, ticket_price)


def numbers4_expected_value(draw_type: str = 'straight', ticket_price: int = TICKET_PRICE) -> ExpectedValue:
    """넘버스4 기대값 (straight / box / set)"""
    return _digits_expected_value(NUMBERS4_PRIZE_TABLE, draw_type, 4, ticket_price)
