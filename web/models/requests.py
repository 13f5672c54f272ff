"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증
"""

from pydantic import BaseModel, Field


class MessageRequest(BaseModel):
    """채팅 메시지 수신 요청

    채팅 플랫폼 연동부가 길드 메시지를 그대로 전달할 때 사용.
    """

    content: str = Field(..., max_length=2000, description="메시지 원문 (예: !입금 1000 점심)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"content": "!입금 1,000 점심"},
                {"content": "!조회"},
            ]
        }
    }
