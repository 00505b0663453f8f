"""
구매 예산 관리

구매 기록은 추가만 가능하며, 일 / 주 / 월 단위 지출을 집계해 설정된 한도를
넘는 구매를 막습니다. 한도 초과는 예외가 아니라 구조화된 판정 결과로
반환됩니다.
"""

import time
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from shared.error_handler import get_logger
from ..utils.config import BudgetConfig
from ..utils.schemas import BudgetConfigSchema, PurchaseSchema

logger = get_logger(__name__)

# 주의 시작 요일 (일요일)
WEEK_START = 6


@dataclass(frozen=True)
class Purchase:
    """구매 기록"""
    id: str
    date: date
    lottery_type: str
    amount: float
    ticket_count: int
    numbers: Any = None


@dataclass(frozen=True)
class BudgetStatus:
    """기간별 예산 상태"""
    period: str
    budget: float
    spent: float
    remaining: float
    usage_percentage: float
    is_over_budget: bool
    alert: bool


@dataclass(frozen=True)
class PurchaseDecision:
    """구매 가능 여부 판정"""
    allowed: bool
    reason: Optional[str] = None
    suggestion: Optional[str] = None


@dataclass(frozen=True)
class PurchaseStatistics:
    total_purchases: int
    total_spent: float
    average_purchase: float
    most_frequent_type: str
    purchases_by_type: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class RealExpectedValue:
    """실적 기반 기대값"""
    total_investment: float
    total_winnings: float
    net_result: float
    roi: float
    expected_value_per_ticket: float
    break_even_tickets: int


def _to_date(value: Union[date, datetime, str]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


class BudgetManager:
    """구매 예산 관리자"""

    def __init__(
        self,
        config: Union[BudgetConfig, Mapping[str, Any]],
        clock: Optional[Callable[[], date]] = None
    ):
        """
        Args:
            config: 예산 설정 (딕셔너리면 스키마로 검증)
            clock: 오늘 날짜를 반환하는 함수 (기본 date.today)
        """
        if isinstance(config, Mapping):
            config = BudgetConfigSchema().load(config)
        self.config = config
        self._clock = clock or date.today
        self._purchases: List[Purchase] = []

    @property
    def purchases(self) -> Tuple[Purchase, ...]:
        return tuple(self._purchases)

    def record_purchase(self, entry: Mapping[str, Any]) -> Purchase:
        """
        구매 기록 추가

        Args:
            entry: date, lottery_type, amount, ticket_count, numbers

        Returns:
            id가 부여된 Purchase
        """
        payload = dict(entry)
        if isinstance(payload.get('date'), date):
            payload['date'] = _to_date(payload['date']).isoformat()
        data = PurchaseSchema().load(payload)

        purchase = Purchase(
            id=f"purchase-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}",
            **data
        )
        self._purchases.append(purchase)

        logger.info(f"구매 기록: {purchase.lottery_type} {purchase.amount:,.0f}엔 ({purchase.date})")
        return purchase

    def _spent_between(self, start: date, end: date) -> float:
        # [start, end) 구간
        return float(sum(p.amount for p in self._purchases if start <= p.date < end))

    def _period_bounds(self, period: str) -> Tuple[date, date]:
        today = self._clock()
        if period == 'daily':
            return today, today + timedelta(days=1)
        if period == 'weekly':
            offset = (today.weekday() - WEEK_START) % 7
            start = today - timedelta(days=offset)
            return start, start + timedelta(days=7)
        start = today.replace(day=1)
        if start.month == 12:
            end = start.replace(year=start.year + 1, month=1)
        else:
            end = start.replace(month=start.month + 1)
        return start, end

    def get_daily_spent(self) -> float:
        """오늘 지출"""
        return self._spent_between(*self._period_bounds('daily'))

    def get_weekly_spent(self) -> float:
        """이번 주 지출 (일요일 시작)"""
        return self._spent_between(*self._period_bounds('weekly'))

    def get_monthly_spent(self) -> float:
        """이번 달 지출"""
        return self._spent_between(*self._period_bounds('monthly'))

    def _status(self, period: str, budget: float, spent: float) -> BudgetStatus:
        usage_percentage = (spent / budget) * 100
        return BudgetStatus(
            period=period,
            budget=budget,
            spent=spent,
            remaining=budget - spent,
            usage_percentage=usage_percentage,
            is_over_budget=spent > budget,
            alert=usage_percentage >= self.config.alert_threshold,
        )

    def get_daily_status(self) -> BudgetStatus:
        budget = self.config.daily_limit or self.config.monthly_budget / 30
        return self._status('daily', budget, self.get_daily_spent())

    def get_weekly_status(self) -> BudgetStatus:
        budget = self.config.weekly_limit or self.config.monthly_budget / 4
        return self._status('weekly', budget, self.get_weekly_spent())

    def get_monthly_status(self) -> BudgetStatus:
        return self._status('monthly', self.config.monthly_budget, self.get_monthly_spent())

    def can_purchase(self, amount: float) -> PurchaseDecision:
        """
        구매 가능 여부 확인

        월 → 주 → 일 한도 순서로 확인하고, 한도 안이지만 경고 수준에
        도달하면 경고와 함께 허용합니다.
        """
        monthly = self.get_monthly_status()
        weekly = self.get_weekly_status()
        daily = self.get_daily_status()

        if monthly.spent + amount > monthly.budget:
            decision = PurchaseDecision(
                allowed=False,
                reason='월 예산을 초과합니다',
                suggestion=f'이번 달 남은 예산: {monthly.remaining:,.0f}엔',
            )
        elif self.config.weekly_limit and weekly.spent + amount > weekly.budget:
            decision = PurchaseDecision(
                allowed=False,
                reason='주 예산을 초과합니다',
                suggestion=f'이번 주 남은 예산: {weekly.remaining:,.0f}엔',
            )
        elif self.config.daily_limit and daily.spent + amount > daily.budget:
            decision = PurchaseDecision(
                allowed=False,
                reason='일 예산을 초과합니다',
                suggestion=f'오늘 남은 예산: {daily.remaining:,.0f}엔',
            )
        elif (monthly.spent + amount) / monthly.budget * 100 >= self.config.alert_threshold:
            return PurchaseDecision(
                allowed=True,
                reason='예산 경고 수준에 도달했습니다',
                suggestion='계획적인 구매를 권장합니다',
            )
        else:
            return PurchaseDecision(allowed=True)

        logger.warning(f"구매 거부 ({amount:,.0f}엔): {decision.reason}")
        return decision

    def get_purchase_history(self, limit: Optional[int] = None) -> List[Purchase]:
        """최신 순 구매 이력"""
        ordered = sorted(self._purchases, key=lambda p: p.date, reverse=True)
        return ordered[:limit] if limit else ordered

    def get_statistics(self) -> PurchaseStatistics:
        """구매 통계"""
        total_purchases = len(self._purchases)
        total_spent = float(sum(p.amount for p in self._purchases))
        average_purchase = total_spent / total_purchases if total_purchases > 0 else 0.0

        purchases_by_type: Dict[str, float] = {}
        for p in self._purchases:
            purchases_by_type[p.lottery_type] = purchases_by_type.get(p.lottery_type, 0.0) + p.amount

        if purchases_by_type:
            most_frequent_type = max(purchases_by_type.items(), key=lambda kv: kv[1])[0]
        else:
            most_frequent_type = '없음'

        return PurchaseStatistics(
            total_purchases=total_purchases,
            total_spent=total_spent,
            average_purchase=average_purchase,
            most_frequent_type=most_frequent_type,
            purchases_by_type=purchases_by_type,
        )

    def calculate_real_expected_value(self, winnings: Sequence[float]) -> RealExpectedValue:
        """
        실적 기반 기대값 계산

        당첨금은 호출자가 제공한 값을 그대로 사용하며 추첨 결과와 대조하지 않습니다.

        Args:
            winnings: 당첨금 목록

        Returns:
            RealExpectedValue
        """
        total_investment = float(sum(p.amount for p in self._purchases))
        total_winnings = float(np.sum(winnings)) if len(winnings) else 0.0
        net_result = total_winnings - total_investment
        roi = (net_result / total_investment) * 100 if total_investment > 0 else 0.0

        total_tickets = sum(p.ticket_count for p in self._purchases)
        expected_value_per_ticket = net_result / total_tickets if total_tickets > 0 else 0.0

        # 손익분기 티켓 수
        if expected_value_per_ticket < 0:
            break_even_tickets = int(np.ceil(abs(net_result) / abs(expected_value_per_ticket)))
        else:
            break_even_tickets = 0

        return RealExpectedValue(
            total_investment=total_investment,
            total_winnings=total_winnings,
            net_result=net_result,
            roi=roi,
            expected_value_per_ticket=expected_value_per_ticket,
            break_even_tickets=break_even_tickets,
        )

    def generate_report(self) -> str:
        """예산 관리 리포트"""
        stats = self.get_statistics()

        lines = ['=== 구매 예산 관리 리포트 ===', '', '📊 기간별 예산 현황:']
        for label, status in (
            ('오늘', self.get_daily_status()),
            ('이번 주', self.get_weekly_status()),
            ('이번 달', self.get_monthly_status()),
        ):
            over = ' ⚠️ 초과' if status.is_over_budget else ''
            lines.append(
                f"  {label}: {status.spent:,.0f}엔 / {status.budget:,.0f}엔 "
                f"({status.usage_percentage:.1f}%){over}"
            )

        lines.extend([
            '',
            '📈 통계:',
            f"  총 구매 횟수: {stats.total_purchases}회",
            f"  총 지출: {stats.total_spent:,.0f}엔",
            f"  평균 구매액: {stats.average_purchase:,.0f}엔",
            f"  가장 많이 구매한 종류: {stats.most_frequent_type}",
            '',
            '💰 종류별 지출:',
        ])
        for lottery_type, amount in stats.purchases_by_type.items():
            lines.append(f"  {lottery_type}: {amount:,.0f}엔")

        return '\n'.join(lines) + '\n'
