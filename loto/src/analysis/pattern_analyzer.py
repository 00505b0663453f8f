"""
로또 번호의 패턴을 분석하는 모듈

이 모듈은 과거 당첨 번호를 분석하여 다음과 같은 정보를 제공합니다:
- 번호별 출현 빈도와 마지막 출현 시점
- 연속 번호 쌍, 홀짝 / 저고 비율, 합계 통계
- 번호 쌍 동시 출현 빈도
- 번호별 출현 간격
- HOT / WARM / COLD / OVERDUE 분류
- 통계 리포트와 CSV 내보내기
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import seaborn as sns

from shared.error_handler import get_logger, log_performance, safe_execute
from ..utils.config import AnalysisConfig, Config
from .draw_history import DrawHistory, DrawRecord
from .frequency import FrequencyEntry, analyze_frequency, analyze_uniformity, frequency_map
from .interval import IntervalAnalysis, analyze_draw_interval
from .patterns import PairFrequency, PatternSummary, analyze_pair_frequency, analyze_patterns
from .strength import PredictionStrength, classify_prediction_strength

logger = get_logger(__name__)


class PatternAnalyzer:
    """로또 번호 패턴 분석"""

    def __init__(
        self,
        history: Union[DrawHistory, Iterable[DrawRecord]],
        config: Optional[Config] = None
    ):
        """
        패턴 분석기 초기화

        Args:
            history: 분석할 추첨 이력
            config: 설정 객체
        """
        self.config = config or Config()
        self.analysis_config: AnalysisConfig = self.config.analysis

        if not isinstance(history, DrawHistory):
            history = DrawHistory(history, max_number=self.analysis_config.max_number)
        self.history = history

        logger.info(f"패턴 분석기 초기화 완료: {len(self.history)}회차")

    @property
    def max_number(self) -> int:
        return self.analysis_config.max_number

    @log_performance
    def analyze(self) -> Dict[str, Any]:
        """전체 분석 수행"""
        return {
            'frequency': self.analyze_frequency(),
            'patterns': self.analyze_patterns(),
            'pairs': self.analyze_pair_frequency(),
            'strength': self.analyze_prediction_strength(),
            'uniformity': self.analyze_uniformity(),
        }

    @log_performance
    def analyze_frequency(self, max_number: Optional[int] = None) -> List[FrequencyEntry]:
        """각 번호의 출현 빈도 분석"""
        return analyze_frequency(self.history, max_number or self.max_number)

    @log_performance
    def analyze_patterns(self) -> PatternSummary:
        """연속 번호, 홀짝, 저고, 합계 패턴 분석"""
        return analyze_patterns(
            self.history,
            top=self.analysis_config.consecutive_top,
            low_high_split=self.analysis_config.low_high_split
        )

    @log_performance
    def analyze_pair_frequency(self) -> List[PairFrequency]:
        """번호 쌍 동시 출현 빈도"""
        return analyze_pair_frequency(self.history, top=self.analysis_config.pair_top)

    def analyze_draw_interval(self, target_number: int) -> IntervalAnalysis:
        """번호의 출현 간격 분석"""
        return analyze_draw_interval(self.history, target_number)

    @log_performance
    def analyze_prediction_strength(self) -> PredictionStrength:
        """예측 강도 분류"""
        return classify_prediction_strength(self.history, self.analysis_config)

    def analyze_uniformity(self) -> Dict[str, Optional[float]]:
        """빈도 균등성 카이제곱 검정"""
        return analyze_uniformity(self.history, self.max_number)

    def generate_report(self) -> str:
        """
        통계 리포트 생성

        Returns:
            사람이 읽는 형식의 리포트 문자열
        """
        frequency = self.analyze_frequency()
        patterns = self.analyze_patterns()
        strength = self.analyze_prediction_strength()

        lines = ['=== 통계 분석 리포트 ===', '']
        lines.append(f"📊 분석 대상: 최근 {len(self.history)}회 추첨")
        lines.append('')

        lines.append('🔥 출현 빈도 TOP 10:')
        for rank, entry in enumerate(frequency[:10], start=1):
            lines.append(f"  {rank}위: {entry.number}번 ({entry.frequency}회, {entry.percentage:.1f}%)")

        lines.append('')
        lines.append(f"❄️  오래 나오지 않은 번호 ({self.analysis_config.cold_threshold}회 이상):")
        for entry in [e for e in frequency if e.last_drawn >= self.analysis_config.cold_threshold][:10]:
            lines.append(f"  {entry.number}번 ({entry.last_drawn}회 전 출현)")

        lines.append('')
        lines.append('📈 패턴 분석:')
        lines.append(f"  홀수/짝수 비: {patterns.odd_even_ratio['odd']}:{patterns.odd_even_ratio['even']}")
        lines.append(f"  낮은 번호/높은 번호 비: {patterns.low_high_ratio['low']}:{patterns.low_high_ratio['high']}")
        lines.append(f"  합계 평균: {patterns.sum_average} ± {patterns.sum_std_dev}")

        if patterns.consecutive_pairs:
            lines.append('')
            lines.append('🔗 자주 나오는 연속 번호:')
            for item in patterns.consecutive_pairs[:5]:
                lines.append(f"  {item.pair[0]}-{item.pair[1]} ({item.frequency}회)")

        lines.append('')
        lines.append('🎯 예측 번호:')
        if strength.is_fallback:
            lines.append(f"  ⚠️ {strength.reason}")
        lines.append(f"  HOT (최근 {self.analysis_config.hot_window}회 빈출): {', '.join(map(str, strength.hot))}")
        lines.append(f"  WARM (최근 {self.analysis_config.warm_window}회 빈출): {', '.join(map(str, strength.warm))}")
        lines.append(f"  COLD (장기 미출현): {', '.join(map(str, strength.cold))}")
        lines.append(f"  OVERDUE (평균 이하): {', '.join(map(str, strength.overdue[:7]))}")

        return '\n'.join(lines) + '\n'

    def export_to_csv(self, filepath: Optional[str] = None) -> str:
        """
        이력을 CSV로 내보내기

        Args:
            filepath: 저장할 파일 경로 (없으면 문자열만 반환)

        Returns:
            CSV 문자열
        """
        csv_text = self.history.to_csv()
        if filepath:
            save_path = Path(filepath)
            save_path.parent.mkdir(parents=True, exist_ok=True)
            save_path.write_text(csv_text, encoding='utf-8')
            logger.info(f"CSV 내보내기 완료: {save_path}")
        return csv_text

    @safe_execute(default_return=None)
    def plot_frequency(self, save_path: str) -> Optional[str]:
        """
        번호별 출현 빈도 막대 그래프 저장

        Args:
            save_path: 이미지 저장 경로

        Returns:
            저장된 경로 (실패 시 None)
        """
        counts = frequency_map(self.analyze_frequency())

        sns.set_theme(style="whitegrid")
        fig, ax = plt.subplots(figsize=(14, 5))
        try:
            sns.barplot(x=list(counts.keys()), y=list(counts.values()), color='steelblue', ax=ax)
            ax.set_title(f'Number frequency ({len(self.history)} draws)')
            ax.set_xlabel('Number')
            ax.set_ylabel('Frequency')

            Path(save_path).parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(save_path, bbox_inches='tight')
        finally:
            plt.close(fig)

        logger.info(f"빈도 그래프 저장 완료: {save_path}")
        return save_path
