"""
로또 번호 분석 모듈

이 패키지는 과거 당첨 번호의 빈도, 패턴, 간격을 분석하는 기능을 제공합니다.
"""

from .draw_history import DrawHistory, DrawRecord
from .frequency import FrequencyEntry, analyze_frequency, analyze_uniformity
from .interval import IntervalAnalysis, analyze_draw_interval
from .pattern_analyzer import PatternAnalyzer
from .patterns import PairFrequency, PatternSummary, analyze_pair_frequency, analyze_patterns
from .strength import FallbackPredictionStrength, PredictionStrength, classify_prediction_strength

__all__ = [
    'DrawHistory', 'DrawRecord',
    'FrequencyEntry', 'analyze_frequency', 'analyze_uniformity',
    'IntervalAnalysis', 'analyze_draw_interval',
    'PatternAnalyzer',
    'PairFrequency', 'PatternSummary', 'analyze_pair_frequency', 'analyze_patterns',
    'FallbackPredictionStrength', 'PredictionStrength', 'classify_prediction_strength',
]
