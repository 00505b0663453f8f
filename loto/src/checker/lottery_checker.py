"""
당첨 확인과 결과 요약

로또6는 일치 개수와 보너스 번호로 등수를 정하고, 넘버스3 / 넘버스4는
스트레이트(순서까지 일치), 박스(순서 무관), 미니(끝 두 자리), 세트 방식으로
확인합니다. 여러 티켓을 한꺼번에 확인할 때 잘못된 티켓은 예외 대신
'불일치' 결과로 기록합니다.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from marshmallow import ValidationError

from shared.error_handler import get_logger
from ..prediction.expected_value import LOTO6_PRIZE_TABLE, NUMBERS3_PRIZE_TABLE, NUMBERS4_PRIZE_TABLE
from ..utils import schemas
from .tickets import DrawResult, Loto6Ticket, Numbers3Ticket, Numbers4Ticket, Ticket

logger = get_logger(__name__)

LOTO6_PRIZES = {rank: prize for rank, _, prize in LOTO6_PRIZE_TABLE}

DRAW_TYPE_LABELS = {
    'straight': '스트레이트',
    'box': '박스',
    'mini': '미니',
    'set-straight': '세트 스트레이트',
    'set-box': '세트 박스',
}


@dataclass(frozen=True)
class CheckResult:
    """티켓 한 장의 당첨 확인 결과"""
    ticket_id: str
    matched: bool
    prize: int
    details: str
    prize_rank: Optional[str] = None
    match_count: Optional[int] = None
    ticket: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class CheckSummary:
    """당첨 결과 요약"""
    total_tickets: int
    winning_tickets: int
    total_cost: int
    total_prize: int
    net_result: int
    roi: float
    breakdown: Dict[str, int]


def _digit_prizes(lottery_type: str) -> Dict[str, int]:
    table = NUMBERS3_PRIZE_TABLE if lottery_type == 'numbers3' else NUMBERS4_PRIZE_TABLE
    prizes = {draw_type: prize for draw_type, (_, prize) in table.items()}

    flat = {
        'straight': prizes['straight']['straight'],
        'box': prizes['box']['box'],
    }
    if 'mini' in prizes:
        flat['mini'] = prizes['mini']['mini']
    if 'set' in prizes:
        flat['set-straight'] = prizes['set']['straight']
        flat['set-box'] = prizes['set']['box']
    else:
        flat['set-straight'] = prizes['set-straight']['straight']
        flat['set-box'] = prizes['set-box']['box']
    return flat


def _is_box_match(ticket: str, winning: str) -> bool:
    return sorted(ticket) == sorted(winning)


class LotteryChecker:
    """당첨 번호 확인기"""

    def check_loto6(
        self,
        ticket: Sequence[int],
        winning_numbers: Sequence[int],
        bonus_number: Optional[int] = None
    ) -> CheckResult:
        """
        로또6 당첨 확인

        Args:
            ticket: 구매 번호 6개
            winning_numbers: 당첨 번호 6개
            bonus_number: 보너스 번호

        Returns:
            등수가 정해진 CheckResult (3개 미만 일치는 낙첨)
        """
        match_count = len(set(ticket) & set(winning_numbers))
        has_bonus = bonus_number is not None and bonus_number in ticket

        # 높은 등수부터 확인
        if match_count == 6:
            prize_rank = '1等'
        elif match_count == 5 and has_bonus:
            prize_rank = '2等'
        elif match_count == 5:
            prize_rank = '3等'
        elif match_count == 4:
            prize_rank = '4等'
        elif match_count == 3:
            prize_rank = '5等'
        else:
            prize_rank = None

        prize = LOTO6_PRIZES[prize_rank] if prize_rank else 0

        if prize > 0:
            bonus_text = ' + 보너스' if has_bonus else ''
            details = f"🎉 {prize_rank} 당첨! {match_count}개 일치{bonus_text} - {prize:,}엔"
        else:
            details = f"❌ 낙첨 {match_count}개 일치"

        return CheckResult(
            ticket_id='',
            matched=prize > 0,
            prize=prize,
            details=details,
            prize_rank=prize_rank,
            match_count=match_count,
        )

    def check_numbers3(self, ticket: str, winning_number: str, draw_type: str = 'straight') -> CheckResult:
        """넘버스3 당첨 확인 (straight / box / mini / set)"""
        if draw_type not in ('straight', 'box', 'mini', 'set'):
            raise ValueError(f"지원하지 않는 넘버스3 추첨 방식입니다: {draw_type}")
        return self._check_digits('numbers3', ticket, winning_number, draw_type)

    def check_numbers4(self, ticket: str, winning_number: str, draw_type: str = 'straight') -> CheckResult:
        """넘버스4 당첨 확인 (straight / box / set)"""
        if draw_type not in ('straight', 'box', 'set'):
            raise ValueError(f"지원하지 않는 넘버스4 추첨 방식입니다: {draw_type}")
        return self._check_digits('numbers4', ticket, winning_number, draw_type)

    def _check_digits(self, lottery_type: str, ticket: str, winning: str, draw_type: str) -> CheckResult:
        prizes = _digit_prizes(lottery_type)

        if draw_type == 'straight':
            won = 'straight' if ticket == winning else None
        elif draw_type == 'box':
            won = 'box' if _is_box_match(ticket, winning) else None
        elif draw_type == 'mini':
            won = 'mini' if ticket[-2:] == winning[-2:] else None
        elif ticket == winning:
            won = 'set-straight'
        elif _is_box_match(ticket, winning):
            won = 'set-box'
        else:
            won = None

        if won:
            prize = prizes[won]
            details = f"🎉 {DRAW_TYPE_LABELS[won]} 당첨! {prize:,}엔"
        else:
            prize = 0
            details = f"❌ {DRAW_TYPE_LABELS.get(draw_type, '세트')} 낙첨"

        return CheckResult(
            ticket_id='',
            matched=won is not None,
            prize=prize,
            details=details,
            prize_rank=won,
        )

    def check_ticket(self, ticket: Ticket, draw_result: DrawResult) -> CheckResult:
        """
        티켓 종류에 맞는 확인 함수로 분기

        티켓과 추첨 결과의 형식이 맞지 않거나 추첨 방식이 잘못되면 불일치 결과를 반환합니다.
        """
        draw_type = getattr(ticket, 'draw_type', None)
        if draw_type is not None and draw_type not in schemas.DRAW_TYPES[ticket.lottery_type]:
            logger.warning(f"지원하지 않는 추첨 방식입니다: {ticket.id} ({draw_type})")
            return self._invalid_result(ticket.id, ticket, f'오류: 지원하지 않는 추첨 방식입니다 ({draw_type})')

        if isinstance(ticket, Loto6Ticket) and not draw_result.is_digits:
            result = self.check_loto6(ticket.numbers, draw_result.winning_numbers, draw_result.bonus_number)
        elif isinstance(ticket, Numbers3Ticket) and draw_result.is_digits and len(draw_result.winning_numbers) == 3:
            result = self.check_numbers3(ticket.numbers, draw_result.winning_numbers, ticket.draw_type)
        elif isinstance(ticket, Numbers4Ticket) and draw_result.is_digits and len(draw_result.winning_numbers) == 4:
            result = self.check_numbers4(ticket.numbers, draw_result.winning_numbers, ticket.draw_type)
        else:
            logger.warning(f"티켓 형식이 추첨 결과와 맞지 않습니다: {ticket.id}")
            return self._invalid_result(ticket.id, ticket, '오류: 티켓 형식이 추첨 결과와 맞지 않습니다')

        return CheckResult(
            ticket_id=ticket.id,
            matched=result.matched,
            prize=result.prize,
            details=result.details,
            prize_rank=result.prize_rank,
            match_count=result.match_count,
            ticket=ticket,
        )

    def check_multiple_tickets(
        self,
        tickets: Iterable[Union[Ticket, Mapping[str, Any]]],
        draw_result: Union[DrawResult, Mapping[str, Any]]
    ) -> List[CheckResult]:
        """
        여러 티켓 일괄 확인

        Args:
            tickets: 티켓 객체 또는 티켓 딕셔너리 목록
            draw_result: 추첨 결과 (딕셔너리면 스키마로 검증)

        Returns:
            티켓 순서대로의 CheckResult 목록. 잘못된 티켓은 불일치로 표시
        """
        if isinstance(draw_result, Mapping):
            draw_result = schemas.DrawResultSchema().load(draw_result)

        results = []
        for ticket in tickets:
            if isinstance(ticket, Mapping):
                raw = ticket
                try:
                    ticket = schemas.TicketSchema().load(raw)
                except ValidationError as e:
                    logger.warning(f"잘못된 티켓 형식: {raw.get('id', '')} {e.messages}")
                    results.append(self._invalid_result(
                        str(raw.get('id', '')), raw, f'오류: 잘못된 티켓 형식 {e.messages}'
                    ))
                    continue
            results.append(self.check_ticket(ticket, draw_result))

        return results

    @staticmethod
    def _invalid_result(ticket_id: str, ticket: Any, details: str) -> CheckResult:
        return CheckResult(ticket_id=ticket_id, matched=False, prize=0, details=details, ticket=ticket)

    def generate_summary(self, results: Sequence[CheckResult]) -> CheckSummary:
        """
        당첨 결과 요약

        Args:
            results: check_multiple_tickets 결과

        Returns:
            총 비용, 총 상금, 손익, ROI, 등수별 당첨 수
        """
        total_cost = sum(_ticket_cost(r.ticket) for r in results)
        total_prize = sum(r.prize for r in results)
        net_result = total_prize - total_cost
        roi = (net_result / total_cost) * 100 if total_cost > 0 else 0.0

        breakdown: Dict[str, int] = {}
        for r in results:
            if r.matched and r.prize_rank:
                breakdown[r.prize_rank] = breakdown.get(r.prize_rank, 0) + 1

        return CheckSummary(
            total_tickets=len(results),
            winning_tickets=sum(1 for r in results if r.matched),
            total_cost=total_cost,
            total_prize=total_prize,
            net_result=net_result,
            roi=roi,
            breakdown=breakdown,
        )


def _ticket_cost(ticket: Any) -> int:
    if ticket is None:
        return 0
    if isinstance(ticket, Mapping):
        cost = ticket.get('cost', 0)
        return cost if isinstance(cost, (int, float)) else 0
    return ticket.cost
