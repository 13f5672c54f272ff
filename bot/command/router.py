"""
Command Router

채팅 메시지를 파싱하여 등록된 Command 핸들러에 전달.
핸들러 예외는 메시지 단위로 격리하여 일반 오류 응답으로 변환.
"""

import logging
from typing import Any

from bot.command.parser import parse_message
from bot.command.registry import CommandContext, CommandRegistry, CommandReply

logger = logging.getLogger(__name__)


GENERIC_ERROR_MESSAGE = "커맨드 실행 중 오류가 발생했습니다."


class CommandRouter:
    """Command 라우터

    Args:
        registry: Command 등록 테이블

    사용 예시:
    ```python
    router = CommandRouter(build_default_registry(engine))

    reply = await router.handle(guild_id, "!입금 1000 점심")
    if reply is not None:
        await channel.send(reply.text)
    ```
    """

    def __init__(self, registry: CommandRegistry):
        self.registry = registry

        # 통계
        self._handled_count = 0
        self._failed_count = 0

    @property
    def prefix(self) -> str:
        return self.registry.prefix

    async def handle(self, tenant: str, content: str) -> CommandReply | None:
        """메시지 처리

        Args:
            tenant: 테넌트 ID (길드 ID)
            content: 원본 메시지

        Returns:
            CommandReply 또는 None (명령어가 아니거나 등록되지 않은 경우)
        """
        parsed = parse_message(content, self.registry.prefix)
        if parsed is None:
            return None

        command = self.registry.get(parsed.name)
        if command is None:
            logger.debug(f"Unknown command: {parsed.name}", extra={"tenant": tenant})
            return None

        self._handled_count += 1
        ctx = CommandContext(tenant=tenant, args=parsed.args, registry=self.registry)

        try:
            reply = await command.handler(ctx)
        except Exception as e:
            self._failed_count += 1
            logger.exception(
                f"Command processing error: {command.name}",
                extra={"tenant": tenant, "error": str(e)},
            )
            return CommandReply(GENERIC_ERROR_MESSAGE)

        logger.info(
            f"Command handled: {command.name}",
            extra={"tenant": tenant, "args": len(parsed.args)},
        )
        return reply

    def get_stats(self) -> dict[str, Any]:
        """통계 반환"""
        return {
            "handled_count": self._handled_count,
            "failed_count": self._failed_count,
            "registered_commands": len(self.registry),
        }
