"""
Mock 거래 저장소 테스트

InMemoryTransactionStore 테스트.
"""

from dataclasses import replace
from datetime import timedelta

import pytest

from adapters.interfaces import ITransactionStore
from adapters.mock.transaction_store import InMemoryTransactionStore
from core.ledger.errors import PersistenceError
from core.ledger.models import Transaction


class TestInMemoryTransactionStore:
    """InMemoryTransactionStore 테스트"""

    @pytest.fixture
    def store(self) -> InMemoryTransactionStore:
        return InMemoryTransactionStore()

    def test_implements_protocol(self, store: InMemoryTransactionStore) -> None:
        assert isinstance(store, ITransactionStore)

    @pytest.mark.asyncio
    async def test_add_assigns_id(
        self,
        store: InMemoryTransactionStore,
        sample_transaction: Transaction,
    ) -> None:
        first = await store.add("g1", sample_transaction)
        second = await store.add("g1", sample_transaction)

        assert first != second
        assert (await store.latest("g1")).id == second
        assert store.count("g1") == 2
        assert store.tenants() == ["g1"]

    @pytest.mark.asyncio
    async def test_newest_first_by_created_at(
        self,
        store: InMemoryTransactionStore,
        sample_transaction: Transaction,
    ) -> None:
        later = replace(
            sample_transaction,
            description="later",
            created_at=sample_transaction.created_at + timedelta(minutes=1),
        )
        await store.add("g1", later)
        await store.add("g1", sample_transaction)

        assert [tx.description for tx in await store.all("g1")] == ["later", "점심"]

    @pytest.mark.asyncio
    async def test_remove(
        self,
        store: InMemoryTransactionStore,
        sample_transaction: Transaction,
    ) -> None:
        handle = await store.add("g1", sample_transaction)

        assert await store.latest_handle("g1") == handle
        assert await store.remove(handle) is True
        assert await store.remove(handle) is False
        assert await store.latest_handle("g1") is None
        assert store.tenants() == []

    @pytest.mark.asyncio
    async def test_should_fail(self, sample_transaction: Transaction) -> None:
        """실패 모드는 PersistenceError, 기록 없음"""
        store = InMemoryTransactionStore(should_fail=True)

        with pytest.raises(PersistenceError):
            await store.add("g1", sample_transaction)

        assert store.count("g1") == 0
        assert store.call_log == [("add", "g1")]
