"""
길드 Ledger 시스템

길드별 입출금 거래를 append-only로 기록하고 잔액을 관리.

사용 예시:
```python
from core.ledger import LedgerEngine
from core.types import TransactionKind

engine = LedgerEngine(store)

# 거래 추가
tx = await engine.append(Decimal("1000"), "점심", TransactionKind.DEPOSIT, guild_id)

# 잔액 조회
balance = await engine.current_balance(guild_id)

# 최신 거래 삭제
deleted = await engine.delete_latest(guild_id)
```
"""

from core.ledger.engine import LedgerEngine
from core.ledger.errors import LedgerError, PersistenceError, ValidationError
from core.ledger.export import ExportRow, export_filename, to_csv, to_rows
from core.ledger.models import Transaction, next_balance
from core.ledger.schema import TRANSACTION_TABLE, init_ledger_schema

__all__ = [
    # 핵심 클래스
    "LedgerEngine",
    "Transaction",
    "next_balance",
    # 예외
    "LedgerError",
    "PersistenceError",
    "ValidationError",
    # 내보내기
    "ExportRow",
    "to_rows",
    "to_csv",
    "export_filename",
    # 스키마
    "TRANSACTION_TABLE",
    "init_ledger_schema",
]
