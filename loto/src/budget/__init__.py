"""
구매 예산 관리 모듈

이 패키지는 구매 기록, 기간별 지출 집계, 한도 확인 기능을 제공합니다.
"""

from .budget_manager import (
    BudgetManager,
    BudgetStatus,
    Purchase,
    PurchaseDecision,
    PurchaseStatistics,
    RealExpectedValue,
)

__all__ = [
    'BudgetManager', 'BudgetStatus', 'Purchase',
    'PurchaseDecision', 'PurchaseStatistics', 'RealExpectedValue',
]
