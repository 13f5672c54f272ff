"""
Ledger 데이터 모델

Transaction은 생성 후 불변. 삭제만 가능 (최신 1건).
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal, Inexact, localcontext
from typing import Any

from core.ledger.errors import ValidationError
from core.types import TransactionKind


@dataclass(frozen=True)
class Transaction:
    """거래 기록 (불변)

    Attributes:
        amount: 금액 (항상 양수, 부호는 kind로 표현)
        description: 설명 (빈 문자열 허용)
        kind: 입금/출금
        balance: 이 거래 적용 후 잔액 (생성 시 1회 계산)
        created_at: 생성 시각 (UTC)
        id: 저장소가 부여한 식별자 (저장 전에는 None)
    """

    amount: Decimal
    description: str
    kind: TransactionKind
    balance: Decimal
    created_at: datetime
    id: str | None = None

    @property
    def signed_amount(self) -> Decimal:
        """부호가 적용된 금액 (입금 +, 출금 -)"""
        if self.kind == TransactionKind.DEPOSIT:
            return self.amount
        return -self.amount

    def with_id(self, transaction_id: str) -> "Transaction":
        """식별자가 부여된 사본 반환"""
        return replace(self, id=transaction_id)

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용 딕셔너리 (Decimal은 문자열)"""
        return {
            "id": self.id,
            "amount": str(self.amount),
            "description": self.description,
            "kind": self.kind.value,
            "balance": str(self.balance),
            "created_at": self.created_at.isoformat(),
        }


def next_balance(
    previous: Decimal,
    amount: Decimal,
    kind: TransactionKind,
) -> Decimal:
    """직전 잔액에 거래를 적용한 새 잔액

    DEPOSIT: previous + amount
    WITHDRAWAL: previous - amount

    Raises:
        ValidationError: 결과가 Decimal 정밀도를 넘어 반올림이 필요한 경우
    """
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            if kind == TransactionKind.DEPOSIT:
                return previous + amount
            return previous - amount
        except Inexact as e:
            raise ValidationError(
                f"balance exceeds decimal precision: {previous} {kind.value} {amount}"
            ) from e
