"""
설정 관리 모듈

이 모듈은 프로젝트의 설정을 관리하는 Config 클래스를 제공합니다.
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass, asdict
from pathlib import Path
import logging
import yaml

logger = logging.getLogger(__name__)

@dataclass
class DataConfig:
    """데이터 설정"""
    historical_data_path: str = 'loto/data/raw/loto6.csv'
    export_path: str = 'loto/data/processed/loto6_export.csv'

@dataclass
class AnalysisConfig:
    """통계 분석 설정"""
    max_number: int = 43
    numbers_per_draw: int = 6
    hot_window: int = 10
    hot_count: int = 7
    warm_window: int = 20
    warm_count: int = 10
    cold_threshold: int = 15
    cold_count: int = 7
    overdue_ratio: float = 0.8
    overdue_count: int = 10
    consecutive_top: int = 10
    pair_top: int = 20
    low_high_split: int = 21

@dataclass
class PredictionConfig:
    """번호 생성 설정"""
    default_method: str = 'random'
    default_count: int = 5
    seed: Optional[int] = None

@dataclass(frozen=True)
class BudgetConfig:
    """구매 예산 설정 (원장 수명 동안 변경 불가)"""
    monthly_budget: float
    weekly_limit: Optional[float] = None
    daily_limit: Optional[float] = None
    alert_threshold: float = 80

    def __post_init__(self):
        if self.monthly_budget <= 0:
            raise ValueError(f'월 예산은 0보다 커야 합니다: {self.monthly_budget}')
        # 0 또는 None이면 기본값 80%
        if not self.alert_threshold:
            object.__setattr__(self, 'alert_threshold', 80)


class Config:
    """설정 관리 클래스"""

    def __init__(self, config_dict: Dict[str, Any] = None):
        """
        설정 객체 초기화

        Args:
            config_dict: 설정 딕셔너리
        """
        self._config = config_dict or {}

        self.data = DataConfig(**self._config.get('data', {}))
        self.analysis = AnalysisConfig(**self._config.get('analysis', {}))
        self.prediction = PredictionConfig(**self._config.get('prediction', {}))

        # 예산 설정은 선택 사항
        if 'budget' in self._config:
            self.budget = BudgetConfig(**self._config['budget'])
        else:
            self.budget = None

    def get(self, key: str, default: Any = None) -> Any:
        """
        설정값 조회

        Args:
            key: 설정 키
            default: 기본값

        Returns:
            설정값
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        설정값 설정

        Args:
            key: 설정 키
            value: 설정값
        """
        self._config[key] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """
        설정 업데이트 후 섹션 재구성

        Args:
            config_dict: 업데이트할 설정 딕셔너리
        """
        self._config.update(config_dict)
        self.__init__(self._config)

    def save(self, filepath: str) -> None:
        """
        설정 저장

        Args:
            filepath: 저장할 파일 경로
        """
        try:
            save_dir = Path(filepath).parent
            save_dir.mkdir(parents=True, exist_ok=True)

            # YAML 형식으로 저장
            with open(filepath, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self.to_dict(), f, allow_unicode=True, default_flow_style=False, sort_keys=False)
            logger.info(f'설정 저장 완료: {filepath}')
        except Exception as e:
            logger.error(f'설정 저장 실패: {str(e)}')
            raise

    def load(self, filepath: str) -> None:
        """
        설정 로드

        Args:
            filepath: 로드할 파일 경로
        """
        try:
            if not Path(filepath).exists():
                raise FileNotFoundError(f'설정 파일을 찾을 수 없습니다: {filepath}')

            # YAML 형식으로 로드
            with open(filepath, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
            logger.info(f'설정 로드 완료: {filepath}')

            # 설정 객체 재초기화
            self.__init__(loaded)
        except Exception as e:
            logger.error(f'설정 로드 실패: {str(e)}')
            raise

    @classmethod
    def from_file(cls, filepath: str) -> 'Config':
        """YAML 파일에서 설정 객체 생성"""
        config = cls()
        config.load(filepath)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """
        설정을 딕셔너리로 변환

        Returns:
            설정 딕셔너리
        """
        result = {
            'data': asdict(self.data),
            'analysis': asdict(self.analysis),
            'prediction': asdict(self.prediction),
        }
        if self.budget is not None:
            result['budget'] = asdict(self.budget)
        return result

    def __str__(self) -> str:
        """문자열 표현"""
        return str(self.to_dict())

    def __repr__(self) -> str:
        """표현식 문자열"""
        return f'Config({self.to_dict()})'
