"""
응답 포맷팅

ko-KR 형식의 금액/날짜 표시와 거래 목록 메시지 구성.
"""

from collections.abc import Sequence
from decimal import Decimal

from core.ledger.models import Transaction
from core.utils.timezone import DISPLAY_DATE_FORMAT, format_kst

EMPTY_LEDGER_MESSAGE = "아직까지 쓴 내역이 없다."


def format_amount(value: Decimal) -> str:
    """천 단위 구분 금액 (예: 1234567.50 → 1,234,567.5)

    소수부 끝의 0은 표시하지 않음.
    고정소수점 표기라 자리수가 커도 반올림이나 예외 없음.
    """
    text = f"{value:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_transaction_line(tx: Transaction) -> str:
    """거래 1건 표시"""
    return (
        f"🔹 [{format_kst(tx.created_at)}] 설명: {tx.description}, "
        f"{tx.kind.label}: {format_amount(tx.amount)}, "
        f"총 금액: {format_amount(tx.balance)}"
    )


def format_transaction_list(transactions: Sequence[Transaction]) -> str:
    """거래 목록 메시지 (최신순)

    헤더 날짜는 최신 거래의 날짜.
    """
    if not transactions:
        return EMPTY_LEDGER_MESSAGE

    header_date = format_kst(transactions[0].created_at, DISPLAY_DATE_FORMAT)
    lines = [f"📋 현재까지 쓴 목록({header_date}) :"]
    lines.extend(format_transaction_line(tx) for tx in transactions)
    return "\n".join(lines)


def format_applied(label: str, tx: Transaction, balance: Decimal) -> str:
    """입금/사용 완료 메시지"""
    return (
        f"{label} 완료: {tx.description}, \n"
        f"금액: {format_amount(tx.amount)}\n"
        f"총 금액 : {format_amount(balance)}"
    )
