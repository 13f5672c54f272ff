"""거래 내역 내보내기 테스트"""

from datetime import date, datetime, timezone
from decimal import Decimal

from core.ledger.export import (
    CSV_HEADER,
    ExportRow,
    export_filename,
    to_csv,
    to_rows,
)
from core.ledger.models import Transaction
from core.types import TransactionKind


def _transactions() -> list[Transaction]:
    """최신순 거래 2건"""
    return [
        Transaction(
            id="2",
            amount=Decimal("300"),
            description="coffee",
            kind=TransactionKind.WITHDRAWAL,
            balance=Decimal("700"),
            created_at=datetime(2026, 2, 20, 16, 5, tzinfo=timezone.utc),
        ),
        Transaction(
            id="1",
            amount=Decimal("1000"),
            description="lunch, team",
            kind=TransactionKind.DEPOSIT,
            balance=Decimal("1000"),
            created_at=datetime(2026, 2, 20, 3, 0, tzinfo=timezone.utc),
        ),
    ]


class TestToRows:
    """to_rows 테스트"""

    def test_preserves_order_and_formats(self) -> None:
        rows = to_rows(_transactions())

        assert rows == [
            ExportRow("2026.02.21 01:05", "coffee", "출금", "300", "700"),
            ExportRow("2026.02.20 12:00", "lunch, team", "입금", "1000", "1000"),
        ]

    def test_empty(self) -> None:
        assert to_rows([]) == []


class TestToCsv:
    """to_csv 테스트"""

    def test_starts_with_bom_and_header(self) -> None:
        content = to_csv(_transactions())

        assert content.startswith(b"\xef\xbb\xbf")
        text = content.decode("utf-8-sig")
        assert text.splitlines()[0] == ",".join(CSV_HEADER)
        assert text.splitlines()[0] == "날짜,설명,유형,금액,잔액"

    def test_rows_follow_header(self) -> None:
        lines = to_csv(_transactions()).decode("utf-8-sig").splitlines()

        assert lines[1] == "2026.02.21 01:05,coffee,출금,300,700"
        # 쉼표가 있는 설명은 따옴표로 감쌈
        assert lines[2] == '2026.02.20 12:00,"lunch, team",입금,1000,1000'
        assert len(lines) == 3

    def test_empty_ledger_has_header_only(self) -> None:
        lines = to_csv([]).decode("utf-8-sig").splitlines()

        assert lines == ["날짜,설명,유형,금액,잔액"]


class TestExportFilename:
    """export_filename 테스트"""

    def test_format(self) -> None:
        assert export_filename(date(2026, 2, 21)) == "2026.02.21_정리된 csv.csv"
