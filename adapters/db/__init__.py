"""
데이터베이스 어댑터

SQLite WAL 모드 연결 관리 및 거래 저장소.
"""

from adapters.db.sqlite_adapter import (
    SQLiteAdapter,
    create_connection,
    init_schema,
)
from adapters.db.transaction_store import SQLiteTransactionStore

__all__ = [
    "SQLiteAdapter",
    "SQLiteTransactionStore",
    "create_connection",
    "init_schema",
]
