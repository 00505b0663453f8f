"""구매 티켓과 추첨 결과 데이터 모델"""

from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Optional, Tuple, Union

DEFAULT_TICKET_COST = 200


@dataclass(frozen=True)
class Loto6Ticket:
    """로또6 티켓 (6개 번호)"""
    id: str
    numbers: Tuple[int, ...]
    purchase_date: Optional[date] = None
    cost: int = DEFAULT_TICKET_COST

    lottery_type: ClassVar[str] = 'loto6'

    def __post_init__(self):
        object.__setattr__(self, 'numbers', tuple(int(n) for n in self.numbers))


@dataclass(frozen=True)
class Numbers3Ticket:
    """넘버스3 티켓 (3자리 문자열)"""
    id: str
    numbers: str
    draw_type: str = 'straight'
    purchase_date: Optional[date] = None
    cost: int = DEFAULT_TICKET_COST

    lottery_type: ClassVar[str] = 'numbers3'


@dataclass(frozen=True)
class Numbers4Ticket:
    """넘버스4 티켓 (4자리 문자열)"""
    id: str
    numbers: str
    draw_type: str = 'straight'
    purchase_date: Optional[date] = None
    cost: int = DEFAULT_TICKET_COST

    lottery_type: ClassVar[str] = 'numbers4'


Ticket = Union[Loto6Ticket, Numbers3Ticket, Numbers4Ticket]


@dataclass(frozen=True)
class DrawResult:
    """한 회차의 당첨 결과 (로또6는 번호 목록, 넘버스는 숫자 문자열)"""
    draw_number: int
    draw_date: date
    winning_numbers: Union[Tuple[int, ...], str]
    bonus_number: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.winning_numbers, (list, tuple)):
            object.__setattr__(self, 'winning_numbers', tuple(int(n) for n in self.winning_numbers))
        if isinstance(self.draw_date, str):
            object.__setattr__(self, 'draw_date', date.fromisoformat(self.draw_date))

    @property
    def is_digits(self) -> bool:
        return isinstance(self.winning_numbers, str)
