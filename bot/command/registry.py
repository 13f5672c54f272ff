"""
Command 등록 테이블

명령어 이름 → Command 매핑.
시작 시 채워져 CommandRouter에 명시적으로 전달됨.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

HELP_HEADER = "📋 사용 가능한 명령어:"


@dataclass(frozen=True)
class Attachment:
    """응답 첨부파일"""

    filename: str
    content: bytes
    media_type: str = "text/csv"


@dataclass(frozen=True)
class CommandReply:
    """명령 처리 결과"""

    text: str
    attachment: Attachment | None = None


@dataclass(frozen=True)
class CommandContext:
    """핸들러 실행 컨텍스트

    Attributes:
        tenant: 테넌트 ID (길드 ID)
        args: 명령어 뒤 인자
        registry: 도움말 생성을 위한 등록 테이블
    """

    tenant: str
    args: tuple[str, ...]
    registry: "CommandRegistry"


CommandHandler = Callable[[CommandContext], Awaitable[CommandReply]]


@dataclass(frozen=True)
class Command:
    """등록 가능한 명령어

    Attributes:
        name: 명령어 이름 (접두사 제외)
        usage: 도움말에 표시될 사용법
        handler: 비동기 처리 함수
    """

    name: str
    usage: str
    handler: CommandHandler


@dataclass
class CommandRegistry:
    """Command 등록 테이블

    등록 순서를 유지하여 도움말 순서로 사용.
    """

    prefix: str = "!"
    _commands: dict[str, Command] = field(default_factory=dict)

    def register(self, command: Command) -> None:
        """Command 등록 (같은 이름이면 교체)"""
        self._commands[command.name.lower()] = command

    def get(self, name: str) -> Command | None:
        return self._commands.get(name.lower())

    @property
    def commands(self) -> list[Command]:
        """등록된 Command 목록 (등록 순서)"""
        return list(self._commands.values())

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def help_text(self) -> str:
        """등록된 Command로 도움말 생성"""
        lines = [HELP_HEADER]
        lines.extend(f"• {self.prefix}{cmd.usage}" for cmd in self.commands)
        return "\n".join(lines)
