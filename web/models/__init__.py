"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import MessageRequest
from web.models.responses import (
    AttachmentResponse,
    HealthResponse,
    LedgerBalanceResponse,
    MessageResponse,
    TransactionListResponse,
    TransactionResponse,
)

__all__ = [
    # Requests
    "MessageRequest",
    # Responses
    "AttachmentResponse",
    "HealthResponse",
    "LedgerBalanceResponse",
    "MessageResponse",
    "TransactionListResponse",
    "TransactionResponse",
]
