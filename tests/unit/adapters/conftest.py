"""
어댑터 테스트 픽스처

공통 테스트 설정 및 픽스처 제공.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from adapters.mock.notifier import MockNotifier
from core.ledger.models import Transaction
from core.types import TransactionKind


@pytest.fixture
def sample_transaction() -> Transaction:
    """샘플 거래 (저장 전, id 없음)"""
    return Transaction(
        amount=Decimal("1000"),
        description="점심",
        kind=TransactionKind.DEPOSIT,
        balance=Decimal("1000"),
        created_at=datetime(2026, 2, 20, 3, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def mock_notifier() -> MockNotifier:
    """Mock Notifier"""
    return MockNotifier()
