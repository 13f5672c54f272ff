"""
Command 파서

채팅 메시지를 명령어/인자로 분리하고 금액을 검증.
금액 파싱은 예외 대신 결과 객체(AmountParseResult)로 반환.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from core.ledger.errors import ValidationError

# 천 단위 구분자 (예: 1,000)
THOUSANDS_SEPARATOR = ","

# 1회 거래 금액 상한 (1천조)
MAX_AMOUNT = Decimal("1000000000000000")

# 소수점 이하 허용 자리수
MAX_DECIMAL_PLACES = 4
_AMOUNT_QUANTUM = Decimal(1).scaleb(-MAX_DECIMAL_PLACES)


@dataclass(frozen=True)
class ParsedMessage:
    """파싱된 메시지

    Attributes:
        name: 명령어 이름 (소문자)
        args: 공백으로 분리된 인자
    """

    name: str
    args: tuple[str, ...]


@dataclass(frozen=True)
class AmountParseResult:
    """금액 파싱 결과

    amount와 error 중 정확히 하나만 채워짐.
    """

    amount: Decimal | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, amount: Decimal) -> "AmountParseResult":
        return cls(amount=amount)

    @classmethod
    def failure(cls, message: str) -> "AmountParseResult":
        return cls(error=ValidationError(message))


def parse_message(content: str, prefix: str) -> ParsedMessage | None:
    """메시지 → 명령어 + 인자

    Args:
        content: 원본 메시지 (예: "!입금 1,000 점심 식대")
        prefix: 명령어 접두사 (예: "!")

    Returns:
        ParsedMessage 또는 None (접두사 없음 / 명령어 없음)
    """
    if not content.startswith(prefix):
        return None

    tokens = content[len(prefix):].split()
    if not tokens:
        return None

    name, *args = tokens
    return ParsedMessage(name=name.lower(), args=tuple(args))


def parse_amount(text: str | None) -> AmountParseResult:
    """금액 문자열 검증

    천 단위 구분자를 제거한 뒤 Decimal로 변환.
    NaN, 무한대, 0 이하 값, MAX_AMOUNT 초과 값,
    소수점 이하 MAX_DECIMAL_PLACES자리를 넘는 값은 거부.
    """
    if text is None or not text.strip():
        return AmountParseResult.failure("금액이 없습니다")

    normalized = text.strip().replace(THOUSANDS_SEPARATOR, "")

    try:
        amount = Decimal(normalized)
    except InvalidOperation:
        return AmountParseResult.failure(f"숫자가 아닌 금액: {text}")

    if not amount.is_finite():
        return AmountParseResult.failure(f"유한한 숫자가 아닌 금액: {text}")

    if amount <= 0:
        return AmountParseResult.failure(f"0보다 커야 하는 금액: {text}")

    if amount > MAX_AMOUNT:
        return AmountParseResult.failure(f"최대 금액을 넘는 금액: {text}")

    if amount != amount.quantize(_AMOUNT_QUANTUM):
        return AmountParseResult.failure(
            f"소수점 이하 {MAX_DECIMAL_PLACES}자리를 넘는 금액: {text}"
        )

    # 1e3 같은 지수 표기는 정수 표기로 저장
    if amount.as_tuple().exponent > 0:
        amount = amount.quantize(Decimal(1))

    return AmountParseResult.success(amount)
