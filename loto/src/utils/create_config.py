"""
YAML 설정 파일 생성 스크립트
"""

import copy
from pathlib import Path
from typing import Optional

from .config import Config

# 기본 설정 딕셔너리
DEFAULT_CONFIG = {
    'data': {
        'historical_data_path': 'loto/data/raw/loto6.csv',
        'export_path': 'loto/data/processed/loto6_export.csv'
    },
    'analysis': {
        'max_number': 43,
        'numbers_per_draw': 6,
        'hot_window': 10,
        'hot_count': 7,
        'warm_window': 20,
        'warm_count': 10,
        'cold_threshold': 15,
        'cold_count': 7,
        'overdue_ratio': 0.8,
        'overdue_count': 10,
        'consecutive_top': 10,
        'pair_top': 20,
        'low_high_split': 21
    },
    'prediction': {
        'default_method': 'random',
        'default_count': 5,
        'seed': None
    },
    'budget': {
        'monthly_budget': 10000,
        'weekly_limit': 3000,
        'daily_limit': 1000,
        'alert_threshold': 80
    }
}

# 설정 파일 경로
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / 'config' / 'loto_config.yaml'


def write_default_config(config_path: Optional[Path] = None) -> Path:
    """기본 설정을 YAML 파일로 저장"""
    config_path = Path(config_path or DEFAULT_CONFIG_PATH)
    Config(copy.deepcopy(DEFAULT_CONFIG)).save(str(config_path))
    return config_path


if __name__ == '__main__':
    path = write_default_config()
    print(f"설정 파일이 생성되었습니다: {path}")
