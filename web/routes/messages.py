"""
채팅 메시지 라우트

POST /api/guilds/{guild_id}/messages - 길드 채널 메시지를 Command로 처리
"""

import base64

from fastapi import APIRouter, Depends

from bot.command.router import CommandRouter
from web.dependencies import get_router
from web.models.requests import MessageRequest
from web.models.responses import AttachmentResponse, MessageResponse

router = APIRouter(prefix="/api", tags=["Messages"])


@router.post("/guilds/{guild_id}/messages", response_model=MessageResponse)
async def post_message(
    guild_id: str,
    request: MessageRequest,
    command_router: CommandRouter = Depends(get_router),
) -> MessageResponse:
    """메시지 처리

    명령어가 아니거나 등록되지 않은 명령어면 handled=false.
    처리 실패도 사용자용 응답 문구로 반환 (HTTP 200).
    """
    reply = await command_router.handle(guild_id, request.content)
    if reply is None:
        return MessageResponse(handled=False)

    attachment = None
    if reply.attachment is not None:
        attachment = AttachmentResponse(
            filename=reply.attachment.filename,
            media_type=reply.attachment.media_type,
            content_base64=base64.b64encode(reply.attachment.content).decode("ascii"),
        )

    return MessageResponse(handled=True, reply=reply.text, attachment=attachment)
