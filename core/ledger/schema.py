"""
Ledger 스키마 초기화

Bot/Web 시작 시 자동으로 거래 테이블과 인덱스 생성.
CREATE IF NOT EXISTS 패턴으로 안전하게 동작.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


TRANSACTION_TABLE = "ledger_transaction"


async def init_ledger_schema(db: "SQLiteAdapter") -> None:
    """Ledger 스키마 초기화

    이미 존재하는 경우 안전하게 건너뜀 (IF NOT EXISTS).

    Args:
        db: SQLiteAdapter 인스턴스
    """
    # seq가 저장소 식별자 (동일 created_at일 때 저장 순서)
    await db.execute(f"""
        CREATE TABLE IF NOT EXISTS {TRANSACTION_TABLE} (
            seq              INTEGER PRIMARY KEY AUTOINCREMENT,
            tenant_id        TEXT NOT NULL,

            amount           TEXT NOT NULL,
            description      TEXT NOT NULL DEFAULT '',
            kind             TEXT NOT NULL,
            balance          TEXT NOT NULL,

            created_at       TEXT NOT NULL
        )
    """)

    await db.execute(f"""
        CREATE INDEX IF NOT EXISTS ix_{TRANSACTION_TABLE}_tenant_created
        ON {TRANSACTION_TABLE}(tenant_id, created_at DESC, seq DESC)
    """)

    await db.commit()

    logger.info("Ledger 스키마 초기화 완료")
