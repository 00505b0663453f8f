"""
로또 통계 분석 시스템 - 소스 코드

이 패키지는 추첨 이력 분석, 번호 생성, 당첨 확인, 예산 관리의 핵심 기능을 구현합니다.
"""

from .analysis.pattern_analyzer import PatternAnalyzer
from .analysis.draw_history import DrawHistory, DrawRecord
from .budget.budget_manager import BudgetManager
from .checker.lottery_checker import LotteryChecker
from .prediction.predictor import LotteryPredictor
from .utils.data_loader import DataManager

__all__ = [
    'PatternAnalyzer', 'DrawHistory', 'DrawRecord', 'BudgetManager',
    'LotteryChecker', 'LotteryPredictor', 'DataManager',
]
