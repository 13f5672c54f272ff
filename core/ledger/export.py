"""
거래 내역 내보내기

list_all 결과를 표 형태(날짜, 설명, 유형, 금액, 잔액)로 변환.
입력 순서(최신순)를 그대로 유지하는 순수 변환.
"""

import csv
import io
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from core.ledger.models import Transaction
from core.utils.timezone import DISPLAY_DATE_FORMAT, format_kst

CSV_HEADER = ("날짜", "설명", "유형", "금액", "잔액")

# 엑셀에서 한글이 깨지지 않도록 BOM 포함
CSV_ENCODING = "utf-8-sig"


@dataclass(frozen=True)
class ExportRow:
    """내보내기 행"""

    date: str
    description: str
    kind: str
    amount: str
    balance: str

    def as_tuple(self) -> tuple[str, str, str, str, str]:
        return (self.date, self.description, self.kind, self.amount, self.balance)


def to_rows(transactions: Iterable[Transaction]) -> list[ExportRow]:
    """거래 목록을 내보내기 행으로 변환"""
    return [
        ExportRow(
            date=format_kst(tx.created_at),
            description=tx.description,
            kind=tx.kind.label,
            amount=str(tx.amount),
            balance=str(tx.balance),
        )
        for tx in transactions
    ]


def to_csv(transactions: Iterable[Transaction]) -> bytes:
    """거래 목록을 CSV 바이트로 변환 (UTF-8 BOM)"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for row in to_rows(transactions):
        writer.writerow(row.as_tuple())
    return buffer.getvalue().encode(CSV_ENCODING)


def export_filename(today: date) -> str:
    """내보내기 파일명 (예: 2026.02.21_정리된 csv.csv)"""
    return f"{today.strftime(DISPLAY_DATE_FORMAT)}_정리된 csv.csv"
