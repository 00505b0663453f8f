"""
로또6 추첨 이력 데이터 로더

이 모듈은 추첨 이력 CSV를 로드하고 검증해 DrawHistory로 변환하는 기능을 제공합니다.
"""

import pandas as pd
from typing import List, Optional
from pathlib import Path
import logging

from .config import Config
from ..analysis.draw_history import CSV_HEADER, DrawHistory, DrawRecord

# 로거 설정
logger = logging.getLogger(__name__)

NUMBER_COLUMNS = ['num1', 'num2', 'num3', 'num4', 'num5', 'num6']
REQUIRED_COLUMNS = ['drawNumber', 'date'] + NUMBER_COLUMNS


class DataManager:
    """데이터 관리자"""

    def __init__(self, config: Optional[Config] = None):
        """
        데이터 관리자 초기화

        Args:
            config: 설정 객체
        """
        self.config = config or Config()
        self.data_config = self.config.data
        self.max_number = self.config.analysis.max_number
        self.data: Optional[pd.DataFrame] = None
        self.history: Optional[DrawHistory] = None

    def load_data(self, filepath: Optional[str] = None) -> DrawHistory:
        """
        추첨 이력 CSV 로드

        Args:
            filepath: CSV 경로 (없으면 설정의 historical_data_path)

        Returns:
            최신 순으로 정렬된 DrawHistory
        """
        try:
            data_path = Path(filepath or self.data_config.historical_data_path)
            if not data_path.exists():
                raise FileNotFoundError(f"데이터 파일을 찾을 수 없습니다: {data_path}")

            df = pd.read_csv(data_path)
            self._validate_data(df)
            self.data = df
            self.history = self._to_history(df)
            logger.info(f"데이터 로드 완료: {len(self.history)} 행")
            return self.history
        except Exception as e:
            logger.error(f"데이터 로드 실패: {str(e)}")
            raise

    def _validate_data(self, df: pd.DataFrame) -> None:
        """
        데이터 유효성 검사

        Args:
            df: 검사할 데이터프레임
        """
        missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing_columns:
            raise ValueError(f"필수 컬럼이 없습니다: {missing_columns}")

        if df[NUMBER_COLUMNS].isna().any().any():
            raise ValueError("당첨 번호에 빈 값이 있습니다")

        # 숫자 범위 검사
        for col in NUMBER_COLUMNS:
            if not df[col].between(1, self.max_number).all():
                raise ValueError(f"숫자 범위가 잘못되었습니다: {col}")

        # 중복 번호 검사
        duplicated = df[NUMBER_COLUMNS].nunique(axis=1) != len(NUMBER_COLUMNS)
        if duplicated.any():
            draw_number = df.loc[duplicated, 'drawNumber'].iloc[0]
            raise ValueError(f"중복된 번호가 있습니다 (회차: {draw_number})")

    def _to_history(self, df: pd.DataFrame) -> DrawHistory:
        records = []
        for row in df.itertuples(index=False):
            row_dict = row._asdict()
            bonus = row_dict.get('bonus')
            records.append(DrawRecord(
                draw_number=int(row_dict['drawNumber']),
                draw_date=str(row_dict['date']),
                numbers=tuple(int(row_dict[col]) for col in NUMBER_COLUMNS),
                bonus_number=None if bonus is None or pd.isna(bonus) else int(bonus),
            ))
        return DrawHistory(records, max_number=self.max_number)

    def get_latest_numbers(self) -> List[int]:
        """
        최신 당첨 번호 반환

        Returns:
            최신 당첨 번호 리스트
        """
        if not self.history:
            raise ValueError("로드된 추첨 이력이 없습니다.")

        return list(self.history[0].numbers)

    def save_history(self, history: DrawHistory, filepath: Optional[str] = None) -> Path:
        """
        추첨 이력을 CSV로 저장

        Args:
            history: 저장할 이력
            filepath: 저장 경로 (없으면 설정의 export_path)

        Returns:
            저장된 경로
        """
        save_path = Path(filepath or self.data_config.export_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        save_path.write_text(history.to_csv(), encoding='utf-8')
        logger.info(f"추첨 이력 저장 완료: {save_path} ({len(history)}회차, 헤더: {CSV_HEADER})")
        return save_path
