"""
기본 Command 핸들러

입금 / 사용 / 조회 / 도움말 / 다운로드 / 삭제.
각 핸들러는 LedgerEngine을 호출하고 사용자 응답 문구를 구성.
PersistenceError는 핸들러에서 사용자 메시지로 변환.
"""

import logging
from collections.abc import Callable
from datetime import date

from bot.command.parser import parse_amount
from bot.command.registry import (
    Attachment,
    Command,
    CommandContext,
    CommandRegistry,
    CommandReply,
)
from bot.formatting import (
    EMPTY_LEDGER_MESSAGE,
    format_applied,
    format_transaction_list,
)
from core.constants import Defaults
from core.ledger.engine import LedgerEngine
from core.ledger.errors import PersistenceError, ValidationError
from core.ledger.export import export_filename, to_csv
from core.types import TransactionKind
from core.utils.timezone import now_kst

logger = logging.getLogger(__name__)


INVALID_AMOUNT_MESSAGE = "가격은 숫자로 입력해주세요."
LIST_ERROR_MESSAGE = "트랜잭션 목록 조회 중 오류가 발생했습니다."
CSV_READY_MESSAGE = "여기 요청하신 CSV 파일입니다!"


class LedgerCommands:
    """Ledger 명령어 모음

    Args:
        engine: LedgerEngine
        today: 오늘 날짜 함수 (CSV 파일명용, 테스트에서 교체)
    """

    def __init__(
        self,
        engine: LedgerEngine,
        today: Callable[[], date] = lambda: now_kst().date(),
    ):
        self.engine = engine
        self._today = today

    def commands(self) -> list[Command]:
        """도움말 표시 순서대로 Command 목록 반환"""
        return [
            Command("입금", "입금 <가격> <설명> - 입금", self.deposit),
            Command("사용", "사용 <가격> <설명> - 사용처리", self.withdraw),
            Command("조회", "조회 - 최신순으로 얼마 썼는지 알려준다.", self.list_transactions),
            Command("도움말", "도움말 - 도움말 보기", self.help),
            Command("다운로드", "다운로드 - .csv로 다운", self.download),
            Command("삭제", "삭제 - 제일 최신 항목을 삭제한다.", self.delete_latest),
        ]

    # -------------------------------------------------------------------------
    # 입금 / 사용
    # -------------------------------------------------------------------------

    async def deposit(self, ctx: CommandContext) -> CommandReply:
        return await self._apply(ctx, TransactionKind.DEPOSIT, "입금", "입금")

    async def withdraw(self, ctx: CommandContext) -> CommandReply:
        return await self._apply(ctx, TransactionKind.WITHDRAWAL, "사용", "사용")

    async def _apply(
        self,
        ctx: CommandContext,
        kind: TransactionKind,
        name: str,
        label: str,
    ) -> CommandReply:
        if len(ctx.args) < 2:
            command = ctx.registry.get(name)
            usage = command.usage if command else name
            return CommandReply(f"사용법: {ctx.registry.prefix}{usage} 이다 \n알겠나?")

        amount_text, *description_parts = ctx.args
        parsed = parse_amount(amount_text)
        amount = parsed.amount
        if amount is None:
            logger.info(
                "Invalid amount",
                extra={"tenant": ctx.tenant, "error": str(parsed.error)},
            )
            return CommandReply(INVALID_AMOUNT_MESSAGE)

        description = " ".join(description_parts)

        try:
            tx = await self.engine.append(amount, description, kind, ctx.tenant)
        except ValidationError as e:
            logger.info(
                "Amount rejected by ledger",
                extra={"tenant": ctx.tenant, "error": str(e)},
            )
            return CommandReply(INVALID_AMOUNT_MESSAGE)
        except PersistenceError as e:
            logger.error(
                f"{label} 처리 실패",
                extra={"tenant": ctx.tenant, "error": str(e)},
            )
            return CommandReply(f"{label} 처리 중 오류가 발생했습니다.")

        return CommandReply(format_applied(label, tx, tx.balance))

    # -------------------------------------------------------------------------
    # 조회 / 삭제
    # -------------------------------------------------------------------------

    async def list_transactions(self, ctx: CommandContext) -> CommandReply:
        try:
            transactions = await self.engine.list_all(ctx.tenant)
        except PersistenceError as e:
            logger.error("목록 조회 실패", extra={"tenant": ctx.tenant, "error": str(e)})
            return CommandReply(LIST_ERROR_MESSAGE)

        return CommandReply(format_transaction_list(transactions))

    async def delete_latest(self, ctx: CommandContext) -> CommandReply:
        try:
            deleted = await self.engine.delete_latest(ctx.tenant)
            if not deleted:
                return CommandReply(EMPTY_LEDGER_MESSAGE)
            transactions = await self.engine.list_all(ctx.tenant)
        except PersistenceError as e:
            logger.error("삭제 처리 실패", extra={"tenant": ctx.tenant, "error": str(e)})
            return CommandReply(LIST_ERROR_MESSAGE)

        return CommandReply(format_transaction_list(transactions))

    # -------------------------------------------------------------------------
    # 도움말 / 다운로드
    # -------------------------------------------------------------------------

    async def help(self, ctx: CommandContext) -> CommandReply:
        return CommandReply(ctx.registry.help_text())

    async def download(self, ctx: CommandContext) -> CommandReply:
        try:
            transactions = await self.engine.list_all(ctx.tenant)
        except PersistenceError as e:
            logger.error("CSV 생성 실패", extra={"tenant": ctx.tenant, "error": str(e)})
            return CommandReply(LIST_ERROR_MESSAGE)

        if not transactions:
            return CommandReply(EMPTY_LEDGER_MESSAGE)

        attachment = Attachment(
            filename=export_filename(self._today()),
            content=to_csv(transactions),
        )
        return CommandReply(CSV_READY_MESSAGE, attachment=attachment)


def build_default_registry(
    engine: LedgerEngine,
    prefix: str = Defaults.COMMAND_PREFIX,
    today: Callable[[], date] | None = None,
) -> CommandRegistry:
    """기본 Command가 등록된 테이블 생성

    Args:
        engine: LedgerEngine
        prefix: 명령어 접두사
        today: 오늘 날짜 함수 (None이면 KST 기준 오늘)

    Returns:
        CommandRegistry
    """
    handlers = LedgerCommands(engine) if today is None else LedgerCommands(engine, today)

    registry = CommandRegistry(prefix=prefix)
    for command in handlers.commands():
        registry.register(command)
    return registry
