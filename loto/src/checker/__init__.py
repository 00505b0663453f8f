"""
당첨 확인 모듈

이 패키지는 구매 티켓의 당첨 여부 확인과 결과 요약 기능을 제공합니다.
"""

from .lottery_checker import CheckResult, CheckSummary, LotteryChecker
from .tickets import DrawResult, Loto6Ticket, Numbers3Ticket, Numbers4Ticket

__all__ = [
    'CheckResult', 'CheckSummary', 'LotteryChecker',
    'DrawResult', 'Loto6Ticket', 'Numbers3Ticket', 'Numbers4Ticket',
]
