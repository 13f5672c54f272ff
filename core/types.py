"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class TransactionKind(str, Enum):
    """거래 유형 (입금 / 출금)

    금액의 부호는 저장하지 않고 유형으로 구분
    """

    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"

    @property
    def label(self) -> str:
        """사용자 표시용 한글 라벨"""
        return "입금" if self is TransactionKind.DEPOSIT else "출금"
