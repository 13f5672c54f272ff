"""
Mock 거래 저장소

테스트용 인메모리 저장소.
ITransactionStore Protocol 준수.
"""

import asyncio
import itertools

from core.ledger.errors import PersistenceError
from core.ledger.models import Transaction


class InMemoryTransactionStore:
    """인메모리 거래 저장소

    테넌트별 리스트에 저장 순서대로 보관.
    식별자는 전역 증가 번호.

    사용 예시:
    ```python
    store = InMemoryTransactionStore()
    engine = LedgerEngine(store)

    # 장애 시나리오
    store.should_fail = True

    # 타임아웃 시나리오 (각 호출마다 지연)
    store.delay_sec = 1.0
    ```
    """

    def __init__(self, should_fail: bool = False, delay_sec: float = 0.0):
        """
        Args:
            should_fail: True면 모든 호출이 PersistenceError
            delay_sec: 각 호출 전 대기 시간 (타임아웃 테스트용)
        """
        self.should_fail = should_fail
        self.delay_sec = delay_sec
        self._records: dict[str, list[Transaction]] = {}
        self._owners: dict[str, str] = {}
        self._ids = itertools.count(1)
        self.call_log: list[tuple[str, str]] = []

    async def add(self, tenant: str, transaction: Transaction) -> str:
        await self._before("add", tenant)
        transaction_id = str(next(self._ids))
        self._records.setdefault(tenant, []).append(transaction.with_id(transaction_id))
        self._owners[transaction_id] = tenant
        return transaction_id

    async def latest(self, tenant: str) -> Transaction | None:
        await self._before("latest", tenant)
        ordered = self._newest_first(tenant)
        return ordered[0] if ordered else None

    async def all(self, tenant: str) -> list[Transaction]:
        await self._before("all", tenant)
        return self._newest_first(tenant)

    async def latest_handle(self, tenant: str) -> str | None:
        await self._before("latest_handle", tenant)
        ordered = self._newest_first(tenant)
        return ordered[0].id if ordered else None

    async def remove(self, handle: str) -> bool:
        await self._before("remove", self._owners.get(handle, ""))
        tenant = self._owners.pop(handle, None)
        if tenant is None:
            return False
        records = self._records[tenant]
        self._records[tenant] = [tx for tx in records if tx.id != handle]
        return True

    # -------------------------------------------------------------------------
    # 테스트 헬퍼 메서드
    # -------------------------------------------------------------------------

    def tenants(self) -> list[str]:
        """기록이 있는 테넌트 목록"""
        return [tenant for tenant, records in self._records.items() if records]

    def count(self, tenant: str) -> int:
        """테넌트의 기록 수"""
        return len(self._records.get(tenant, []))

    # -------------------------------------------------------------------------
    # 내부
    # -------------------------------------------------------------------------

    def _newest_first(self, tenant: str) -> list[Transaction]:
        # 저장 순서를 뒤집은 뒤 안정 정렬 → 동률이면 나중 저장이 앞
        records = list(reversed(self._records.get(tenant, [])))
        return sorted(records, key=lambda tx: tx.created_at, reverse=True)

    async def _before(self, operation: str, tenant: str) -> None:
        self.call_log.append((operation, tenant))
        if self.delay_sec:
            await asyncio.sleep(self.delay_sec)
        if self.should_fail:
            raise PersistenceError(f"mock store failure: {operation}")
