"""
과거 추첨 이력 데이터 모델

DrawRecord는 한 회차의 당첨 번호, DrawHistory는 최신 회차가 앞에 오도록
정렬된 회차 목록입니다. 모든 분석은 이 정렬 순서(인덱스 0 = 최신 회차)를
기준으로 수행됩니다.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import pandas as pd

NUMBERS_PER_DRAW = 6
DEFAULT_MAX_NUMBER = 43

CSV_HEADER = 'drawNumber,date,num1,num2,num3,num4,num5,num6,bonus'


@dataclass(frozen=True)
class DrawRecord:
    """한 회차의 추첨 결과"""
    draw_number: int
    draw_date: date
    numbers: Tuple[int, ...]
    bonus_number: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, 'numbers', tuple(int(n) for n in self.numbers))
        if isinstance(self.draw_date, str):
            object.__setattr__(self, 'draw_date', date.fromisoformat(self.draw_date))

    def validate(self, max_number: int = DEFAULT_MAX_NUMBER) -> None:
        """
        번호 유효성 검사

        Args:
            max_number: 최대 번호

        Raises:
            ValueError: 번호 개수, 중복, 범위가 잘못된 경우
        """
        if len(self.numbers) != NUMBERS_PER_DRAW:
            raise ValueError(
                f"번호는 {NUMBERS_PER_DRAW}개여야 합니다: {list(self.numbers)} (회차: {self.draw_number})"
            )
        if len(set(self.numbers)) != len(self.numbers):
            raise ValueError(f"중복된 번호가 있습니다: {list(self.numbers)} (회차: {self.draw_number})")
        for num in self.numbers:
            if not 1 <= num <= max_number:
                raise ValueError(f"숫자 범위가 잘못되었습니다: {num} (회차: {self.draw_number})")
        if self.bonus_number is not None and not 1 <= self.bonus_number <= max_number:
            raise ValueError(f"보너스 번호 범위가 잘못되었습니다: {self.bonus_number} (회차: {self.draw_number})")

    def sorted_numbers(self) -> List[int]:
        return sorted(self.numbers)

    def to_csv_line(self) -> str:
        numbers = ','.join(str(n) for n in self.numbers)
        bonus = '' if self.bonus_number is None else str(self.bonus_number)
        return f"{self.draw_number},{self.draw_date.isoformat()},{numbers},{bonus}"


class DrawHistory:
    """회차 번호 내림차순(최신 순)으로 정렬된 추첨 이력"""

    def __init__(self, records: Iterable[DrawRecord], max_number: int = DEFAULT_MAX_NUMBER):
        """
        추첨 이력 초기화

        Args:
            records: 추첨 결과 목록 (순서 무관)
            max_number: 최대 번호
        """
        self.max_number = max_number
        ordered = sorted(records, key=lambda r: r.draw_number, reverse=True)

        seen = set()
        for record in ordered:
            record.validate(max_number)
            if record.draw_number in seen:
                raise ValueError(f"중복된 회차 번호가 있습니다: {record.draw_number}")
            seen.add(record.draw_number)

        self._records: Tuple[DrawRecord, ...] = tuple(ordered)

    @classmethod
    def from_numbers(
        cls,
        draws: Sequence[Sequence[int]],
        max_number: int = DEFAULT_MAX_NUMBER,
        start_date: date = date(2000, 1, 6)
    ) -> 'DrawHistory':
        """
        번호 목록만으로 이력 생성 (첫 번째 원소가 가장 최신 회차)

        Args:
            draws: 최신 순 당첨 번호 목록
            max_number: 최대 번호
            start_date: 가장 오래된 회차의 날짜
        """
        total = len(draws)
        records = [
            DrawRecord(
                draw_number=total - i,
                draw_date=start_date + timedelta(days=7 * (total - i - 1)),
                numbers=tuple(numbers)
            )
            for i, numbers in enumerate(draws)
        ]
        return cls(records, max_number=max_number)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return DrawHistory(self._records[index], max_number=self.max_number)
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[DrawRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f'DrawHistory(draws={len(self)}, max_number={self.max_number})'

    def to_dataframe(self) -> pd.DataFrame:
        """
        이력을 데이터프레임으로 변환

        Returns:
            회차별 한 행의 데이터프레임 (최신 순)
        """
        rows = []
        for record in self._records:
            row = {'drawNumber': record.draw_number, 'date': record.draw_date.isoformat()}
            for i, num in enumerate(record.numbers, start=1):
                row[f'num{i}'] = num
            row['bonus'] = record.bonus_number
            rows.append(row)

        columns = CSV_HEADER.split(',')
        df = pd.DataFrame(rows, columns=columns)
        df['bonus'] = df['bonus'].astype('Int64')
        return df

    def to_csv(self) -> str:
        """
        CSV 문자열로 내보내기

        헤더 한 줄 다음에 회차당 한 줄이 오며, 보너스 번호가 없으면 빈 칸입니다.
        """
        lines = [CSV_HEADER]
        lines.extend(record.to_csv_line() for record in self._records)
        return '\n'.join(lines) + '\n'
