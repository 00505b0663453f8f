"""
로또 통계 분석 시스템

이 패키지는 로또6 / 넘버스 과거 데이터의 통계 분석, 후보 번호 생성,
기대값 계산, 당첨 확인, 구매 예산 관리 기능을 제공합니다.
"""

from pathlib import Path
from .src.utils.config import Config, BudgetConfig
from .src.analysis.pattern_analyzer import PatternAnalyzer
from .src.analysis.draw_history import DrawHistory, DrawRecord
from .src.budget.budget_manager import BudgetManager
from .src.checker.lottery_checker import LotteryChecker
from .src.prediction.predictor import LotteryPredictor
from .src.utils.data_loader import DataManager

# 프로젝트 루트 디렉토리
ROOT_DIR = Path(__file__).parent

# 버전
__version__ = "1.0.0"

__all__ = [
    'Config', 'BudgetConfig', 'PatternAnalyzer', 'DrawHistory', 'DrawRecord',
    'BudgetManager', 'LotteryChecker', 'LotteryPredictor', 'DataManager',
]
