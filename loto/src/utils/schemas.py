"""
입력 데이터 검증 스키마

추첨 기록, 추첨 결과, 티켓, 구매 기록, 예산 설정 딕셔너리를 검증하고
해당 데이터 모델 객체로 변환합니다.
"""

from marshmallow import Schema, ValidationError, fields, post_load, validate, validates_schema

from ..analysis.draw_history import DEFAULT_MAX_NUMBER, NUMBERS_PER_DRAW, DrawRecord
from ..checker.tickets import DrawResult, Loto6Ticket, Numbers3Ticket, Numbers4Ticket
from .config import BudgetConfig

LOTTERY_TYPES = ['loto6', 'numbers3', 'numbers4']

# 복권 종류별 허용 추첨 방식
DRAW_TYPES = {
    'numbers3': ['straight', 'box', 'mini', 'set'],
    'numbers4': ['straight', 'box', 'set'],
}

DIGITS = {'numbers3': 3, 'numbers4': 4}


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_loto6_numbers(numbers, max_number: int = DEFAULT_MAX_NUMBER) -> None:
    """
    로또6 번호 검증

    Args:
        numbers: 번호 목록
        max_number: 최대 번호

    Raises:
        ValidationError: 정수 목록이 아니거나 개수, 중복, 범위가 잘못된 경우
    """
    if not isinstance(numbers, (list, tuple)) or not all(_is_int(n) for n in numbers):
        raise ValidationError('로또6 번호는 정수 목록이어야 합니다')
    if len(numbers) != NUMBERS_PER_DRAW or len(set(numbers)) != NUMBERS_PER_DRAW:
        raise ValidationError(f'로또6 번호는 서로 다른 {NUMBERS_PER_DRAW}개여야 합니다')
    if not all(1 <= n <= max_number for n in numbers):
        raise ValidationError(f'로또6 번호는 1~{max_number} 범위여야 합니다')


def validate_digit_string(numbers, digits: int) -> None:
    """넘버스 번호가 n자리 숫자 문자열인지 검증"""
    if not isinstance(numbers, str) or len(numbers) != digits or not numbers.isdigit():
        raise ValidationError(f'번호는 {digits}자리 숫자 문자열이어야 합니다')


class DrawRecordSchema(Schema):
    draw_number = fields.Integer(required=True, validate=validate.Range(min=1))
    draw_date = fields.Date(required=True)
    numbers = fields.List(fields.Integer(), required=True)
    bonus_number = fields.Integer(required=False, allow_none=True, load_default=None)

    def __init__(self, *args, max_number: int = DEFAULT_MAX_NUMBER, **kwargs):
        super().__init__(*args, **kwargs)
        self.max_number = max_number

    @validates_schema
    def _validate_numbers(self, data, **kwargs):
        try:
            validate_loto6_numbers(data.get('numbers'), self.max_number)
        except ValidationError as e:
            raise ValidationError({'numbers': e.messages})

    @post_load
    def _make_record(self, data, **kwargs):
        return DrawRecord(**data)


class DrawResultSchema(Schema):
    draw_number = fields.Integer(required=True, validate=validate.Range(min=1))
    draw_date = fields.Date(required=True)
    winning_numbers = fields.Raw(required=True)
    bonus_number = fields.Integer(required=False, allow_none=True, load_default=None)

    @validates_schema
    def _validate_winning(self, data, **kwargs):
        winning = data.get('winning_numbers')
        if isinstance(winning, str):
            if not winning.isdigit() or len(winning) not in (3, 4):
                raise ValidationError({'winning_numbers': ['넘버스 당첨 번호는 3자리 또는 4자리 숫자 문자열이어야 합니다']})
            return
        try:
            validate_loto6_numbers(winning)
        except ValidationError as e:
            raise ValidationError({'winning_numbers': e.messages})

    @post_load
    def _make_result(self, data, **kwargs):
        return DrawResult(**data)


class TicketSchema(Schema):
    """복권 종류에 따라 Loto6Ticket / Numbers3Ticket / Numbers4Ticket으로 변환"""
    id = fields.String(required=True, validate=validate.Length(min=1))
    lottery_type = fields.String(required=True, validate=validate.OneOf(LOTTERY_TYPES))
    numbers = fields.Raw(required=True)
    draw_type = fields.String(required=False, load_default='straight')
    purchase_date = fields.Date(required=False, allow_none=True, load_default=None)
    cost = fields.Integer(required=False, load_default=200, validate=validate.Range(min=0))

    @validates_schema
    def _validate_combination(self, data, **kwargs):
        lottery_type = data.get('lottery_type')
        numbers = data.get('numbers')

        if lottery_type == 'loto6':
            try:
                validate_loto6_numbers(numbers)
            except ValidationError as e:
                raise ValidationError({'numbers': e.messages})
            return

        if lottery_type in DIGITS:
            try:
                validate_digit_string(numbers, DIGITS[lottery_type])
            except ValidationError as e:
                raise ValidationError({'numbers': e.messages})
            if data.get('draw_type') not in DRAW_TYPES[lottery_type]:
                raise ValidationError({'draw_type': [f'추첨 방식은 {DRAW_TYPES[lottery_type]} 중 하나여야 합니다']})

    @post_load
    def _make_ticket(self, data, **kwargs):
        lottery_type = data.pop('lottery_type')
        if lottery_type == 'loto6':
            data.pop('draw_type', None)
            return Loto6Ticket(**data)
        if lottery_type == 'numbers3':
            return Numbers3Ticket(**data)
        return Numbers4Ticket(**data)


class PurchaseSchema(Schema):
    date = fields.Date(required=True)
    lottery_type = fields.String(required=True, validate=validate.Length(min=1))
    amount = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    ticket_count = fields.Integer(required=False, load_default=1, validate=validate.Range(min=1))
    numbers = fields.Raw(required=False, allow_none=True, load_default=None)


class BudgetConfigSchema(Schema):
    monthly_budget = fields.Float(required=True, validate=validate.Range(min=0, min_inclusive=False))
    weekly_limit = fields.Float(required=False, allow_none=True, load_default=None,
                                validate=validate.Range(min=0, min_inclusive=False))
    daily_limit = fields.Float(required=False, allow_none=True, load_default=None,
                               validate=validate.Range(min=0, min_inclusive=False))
    alert_threshold = fields.Float(required=False, load_default=80,
                                   validate=validate.Range(min=0, max=100, min_inclusive=False))

    @post_load
    def _make_config(self, data, **kwargs):
        return BudgetConfig(**data)
