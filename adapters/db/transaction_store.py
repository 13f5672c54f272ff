"""
SQLite 거래 저장소

ITransactionStore 구현.
테넌트 격리는 tenant_id 컬럼으로, 식별자는 seq(AUTOINCREMENT)로 관리.
"""

import logging
from decimal import Decimal
from typing import Any

import aiosqlite

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.errors import PersistenceError
from core.ledger.models import Transaction
from core.ledger.schema import TRANSACTION_TABLE
from core.types import TransactionKind
from core.utils.timezone import from_storage, to_storage

logger = logging.getLogger(__name__)


_COLUMNS = "seq, amount, description, kind, balance, created_at"

# 최신순: created_at 내림차순, 동률이면 나중에 저장된 기록 우선
_ORDER_NEWEST_FIRST = "ORDER BY created_at DESC, seq DESC"


def _row_to_transaction(row: tuple[Any, ...]) -> Transaction:
    """DB 행 → Transaction"""
    return Transaction(
        id=str(row[0]),
        amount=Decimal(row[1]),
        description=row[2],
        kind=TransactionKind(row[3]),
        balance=Decimal(row[4]),
        created_at=from_storage(row[5]),
    )


class SQLiteTransactionStore:
    """SQLite 거래 저장소

    Args:
        db: 연결된 SQLiteAdapter (스키마 초기화 완료 상태)
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def add(self, tenant: str, transaction: Transaction) -> str:
        """거래 1건 저장 (단일 INSERT, 원자적)"""
        try:
            async with self.db.transaction():
                cursor = await self.db.execute(
                    f"""
                    INSERT INTO {TRANSACTION_TABLE} (
                        tenant_id, amount, description, kind, balance, created_at
                    ) VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        tenant,
                        str(transaction.amount),
                        transaction.description,
                        transaction.kind.value,
                        str(transaction.balance),
                        to_storage(transaction.created_at),
                    ),
                )
        except aiosqlite.Error as e:
            raise PersistenceError(f"거래 저장 실패: {e}") from e

        transaction_id = str(cursor.lastrowid)
        logger.debug(
            f"Saved transaction: {transaction_id}",
            extra={"tenant": tenant},
        )
        return transaction_id

    async def latest(self, tenant: str) -> Transaction | None:
        row = await self._fetchone(
            f"""
            SELECT {_COLUMNS} FROM {TRANSACTION_TABLE}
            WHERE tenant_id = ?
            {_ORDER_NEWEST_FIRST}
            LIMIT 1
            """,
            (tenant,),
        )
        return _row_to_transaction(row) if row else None

    async def all(self, tenant: str) -> list[Transaction]:
        try:
            rows = await self.db.fetchall(
                f"""
                SELECT {_COLUMNS} FROM {TRANSACTION_TABLE}
                WHERE tenant_id = ?
                {_ORDER_NEWEST_FIRST}
                """,
                (tenant,),
            )
        except aiosqlite.Error as e:
            raise PersistenceError(f"거래 목록 조회 실패: {e}") from e

        return [_row_to_transaction(row) for row in rows]

    async def latest_handle(self, tenant: str) -> str | None:
        row = await self._fetchone(
            f"""
            SELECT seq FROM {TRANSACTION_TABLE}
            WHERE tenant_id = ?
            {_ORDER_NEWEST_FIRST}
            LIMIT 1
            """,
            (tenant,),
        )
        return str(row[0]) if row else None

    async def remove(self, handle: str) -> bool:
        try:
            async with self.db.transaction():
                cursor = await self.db.execute(
                    f"DELETE FROM {TRANSACTION_TABLE} WHERE seq = ?",
                    (int(handle),),
                )
        except aiosqlite.Error as e:
            raise PersistenceError(f"거래 삭제 실패: {e}") from e

        return cursor.rowcount > 0

    async def _fetchone(
        self,
        sql: str,
        parameters: tuple[Any, ...],
    ) -> tuple[Any, ...] | None:
        try:
            return await self.db.fetchone(sql, parameters)
        except aiosqlite.Error as e:
            raise PersistenceError(f"거래 조회 실패: {e}") from e
