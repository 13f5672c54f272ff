"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화
금액은 정밀도 보존을 위해 문자열로 전달
"""

from datetime import datetime

from pydantic import BaseModel, Field

from core.ledger.models import Transaction


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    version: str = Field(..., description="서비스 버전")
    timestamp: datetime = Field(..., description="응답 시간 (UTC)")


class AttachmentResponse(BaseModel):
    """첨부파일 응답"""

    filename: str = Field(..., description="파일명")
    media_type: str = Field(..., description="MIME 타입")
    content_base64: str = Field(..., description="파일 내용 (base64)")


class MessageResponse(BaseModel):
    """채팅 메시지 처리 응답"""

    handled: bool = Field(..., description="명령어로 처리되었는지 여부")
    reply: str | None = Field(default=None, description="채널에 보낼 응답")
    attachment: AttachmentResponse | None = Field(default=None, description="첨부파일")


class TransactionResponse(BaseModel):
    """거래 응답"""

    id: str | None = Field(default=None, description="거래 ID")
    amount: str = Field(..., description="금액")
    description: str = Field(..., description="설명")
    kind: str = Field(..., description="유형 (DEPOSIT/WITHDRAWAL)")
    balance: str = Field(..., description="거래 후 잔액")
    created_at: datetime = Field(..., description="생성 시간 (UTC)")

    @classmethod
    def from_transaction(cls, tx: Transaction) -> "TransactionResponse":
        return cls(
            id=tx.id,
            amount=str(tx.amount),
            description=tx.description,
            kind=tx.kind.value,
            balance=str(tx.balance),
            created_at=tx.created_at,
        )


class TransactionListResponse(BaseModel):
    """거래 목록 응답 (최신순)"""

    guild_id: str = Field(..., description="길드 ID")
    items: list[TransactionResponse] = Field(default_factory=list, description="거래 목록")
    total: int = Field(..., description="전체 개수")


class LedgerBalanceResponse(BaseModel):
    """현재 잔액 응답"""

    guild_id: str = Field(..., description="길드 ID")
    balance: str = Field(..., description="현재 잔액")
