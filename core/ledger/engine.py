"""
Ledger 엔진

길드별 거래 기록(append-only)으로부터 잔액을 계산하고 관리.

- append: 직전 잔액 + 거래 → 새 잔액 계산 후 저장
- list_all: 최신순 전체 조회
- current_balance: 최신 거래의 잔액 (없으면 0)
- delete_latest: 최신 1건 삭제 (잔액 재계산 없음)

쓰기 연산(append / delete_latest)은 테넌트별 asyncio.Lock으로 직렬화.
조회 연산은 잠금 없이 수행.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, TypeVar

from core.constants import Defaults
from core.ledger.errors import PersistenceError, ValidationError
from core.ledger.models import Transaction, next_balance
from core.types import TransactionKind
from core.utils.timezone import now_utc

if TYPE_CHECKING:
    from adapters.interfaces import ITransactionStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

ZERO = Decimal("0")


class LedgerEngine:
    """Ledger 엔진

    Args:
        store: 거래 저장소 (ITransactionStore)
        timeout: 저장소 호출 타임아웃 (초)
        clock: 현재 시각 함수 (테스트에서 교체)

    사용 예시:
    ```python
    engine = LedgerEngine(store)

    tx = await engine.append(Decimal("1000"), "점심", TransactionKind.DEPOSIT, "g1")
    balance = await engine.current_balance("g1")
    deleted = await engine.delete_latest("g1")
    ```
    """

    def __init__(
        self,
        store: ITransactionStore,
        timeout: float = Defaults.STORE_TIMEOUT_SEC,
        clock: Callable[[], datetime] = now_utc,
    ):
        self.store = store
        self.timeout = timeout
        self._clock = clock
        self._locks: dict[str, asyncio.Lock] = {}

    # -------------------------------------------------------------------------
    # 쓰기
    # -------------------------------------------------------------------------

    async def append(
        self,
        amount: Decimal,
        description: str,
        kind: TransactionKind,
        tenant: str,
    ) -> Transaction:
        """거래 추가

        Args:
            amount: 금액 (양수, 호출자가 사전 검증)
            description: 설명
            kind: 입금/출금
            tenant: 테넌트 ID

        Returns:
            저장소 식별자가 부여된 Transaction

        Raises:
            ValidationError: NaN/무한대 금액, 정밀도를 넘는 잔액
            PersistenceError: 저장소 실패 또는 타임아웃
        """
        if not amount.is_finite():
            raise ValidationError(f"amount must be finite: {amount}")

        async with self._lock_for(tenant):
            latest = await self._call("latest", self.store.latest(tenant))
            previous = latest.balance if latest else ZERO

            created_at = self._clock()
            # 시계가 뒤로 가더라도 최신 거래가 마지막이 되도록 고정
            if latest is not None and created_at < latest.created_at:
                created_at = latest.created_at

            transaction = Transaction(
                amount=amount,
                description=description,
                kind=kind,
                balance=next_balance(previous, amount, kind),
                created_at=created_at,
            )
            transaction_id = await self._call(
                "add", self.store.add(tenant, transaction)
            )

        logger.info(
            f"Transaction appended: {kind.value}",
            extra={
                "tenant": tenant,
                "transaction_id": transaction_id,
                "amount": str(amount),
                "balance": str(transaction.balance),
            },
        )
        return transaction.with_id(transaction_id)

    async def delete_latest(self, tenant: str) -> bool:
        """최신 거래 1건 삭제

        남은 거래들의 balance는 재계산하지 않음.
        삭제 후 현재 잔액은 직전 거래에 기록된 값.

        Returns:
            True: 삭제됨
            False: 삭제할 거래 없음
        """
        async with self._lock_for(tenant):
            handle = await self._call(
                "latest_handle", self.store.latest_handle(tenant)
            )
            if handle is None:
                return False

            removed = await self._call("remove", self.store.remove(handle))

        if removed:
            logger.info(
                "Latest transaction deleted",
                extra={"tenant": tenant, "transaction_id": handle},
            )
        else:
            logger.warning(
                "Latest transaction vanished before delete",
                extra={"tenant": tenant, "transaction_id": handle},
            )
        return removed

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    async def list_all(self, tenant: str) -> list[Transaction]:
        """전체 거래 조회 (최신순)

        호출마다 저장소를 다시 조회 (캐시 없음).
        """
        return await self._call("all", self.store.all(tenant))

    async def current_balance(self, tenant: str) -> Decimal:
        """현재 잔액 (거래 없으면 0)"""
        latest = await self._call("latest", self.store.latest(tenant))
        return latest.balance if latest else ZERO

    # -------------------------------------------------------------------------
    # 내부
    # -------------------------------------------------------------------------

    def _lock_for(self, tenant: str) -> asyncio.Lock:
        """테넌트별 쓰기 잠금 반환 (없으면 생성)"""
        lock = self._locks.get(tenant)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[tenant] = lock
        return lock

    async def _call(self, operation: str, awaitable: Awaitable[T]) -> T:
        """저장소 호출에 타임아웃 적용

        Raises:
            PersistenceError: 타임아웃
        """
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(
                f"Store call timed out: {operation}",
                extra={"operation": operation, "timeout": self.timeout},
            )
            raise PersistenceError(
                f"store.{operation} timed out after {self.timeout}s"
            ) from e
