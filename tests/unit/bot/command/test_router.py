"""
Command Router 테스트

기본 Command 핸들러를 라우터를 통해 검증.
"""

from datetime import date
from decimal import Decimal

import pytest

from adapters.mock.transaction_store import InMemoryTransactionStore
from bot.command.handlers import (
    CSV_READY_MESSAGE,
    INVALID_AMOUNT_MESSAGE,
    LIST_ERROR_MESSAGE,
    build_default_registry,
)
from bot.command.registry import (
    HELP_HEADER,
    Command,
    CommandContext,
    CommandRegistry,
    CommandReply,
)
from bot.command.router import GENERIC_ERROR_MESSAGE, CommandRouter
from bot.formatting import EMPTY_LEDGER_MESSAGE
from core.ledger.engine import LedgerEngine
from core.types import TransactionKind

TODAY = date(2026, 2, 21)


@pytest.fixture
def router(engine: LedgerEngine) -> CommandRouter:
    """기본 Command가 등록된 라우터"""
    return CommandRouter(build_default_registry(engine, prefix="!", today=lambda: TODAY))


class TestRegistry:
    """CommandRegistry 테스트"""

    def test_default_commands_in_help_order(self, router: CommandRouter) -> None:
        names = [command.name for command in router.registry.commands]

        assert names == ["입금", "사용", "조회", "도움말", "다운로드", "삭제"]
        assert len(router.registry) == 6
        assert "조회" in router.registry

    def test_help_text(self, router: CommandRouter) -> None:
        lines = router.registry.help_text().split("\n")

        assert lines[0] == HELP_HEADER
        assert lines[1] == "• !입금 <가격> <설명> - 입금"
        assert lines[-1] == "• !삭제 - 제일 최신 항목을 삭제한다."
        assert len(lines) == 7

    def test_register_replaces_same_name(self) -> None:
        async def handler(ctx: CommandContext) -> CommandReply:
            return CommandReply("x")

        registry = CommandRegistry()
        registry.register(Command("ping", "ping - a", handler))
        registry.register(Command("PING", "ping - b", handler))

        assert len(registry) == 1
        assert registry.get("Ping").usage == "ping - b"


class TestRouting:
    """메시지 라우팅 테스트"""

    @pytest.mark.asyncio
    async def test_non_command_ignored(self, router: CommandRouter) -> None:
        assert await router.handle("g1", "안녕하세요") is None

    @pytest.mark.asyncio
    async def test_unknown_command_ignored(self, router: CommandRouter) -> None:
        assert await router.handle("g1", "!환불 100") is None
        assert router.get_stats()["handled_count"] == 0

    @pytest.mark.asyncio
    async def test_custom_prefix(self, engine: LedgerEngine) -> None:
        router = CommandRouter(build_default_registry(engine, prefix="$"))

        assert await router.handle("g1", "!조회") is None
        reply = await router.handle("g1", "$조회")
        assert reply.text == EMPTY_LEDGER_MESSAGE

    @pytest.mark.asyncio
    async def test_handler_exception_isolated(self) -> None:
        """핸들러 예외는 일반 오류 응답으로"""

        async def broken(ctx: CommandContext) -> CommandReply:
            raise RuntimeError("boom")

        registry = CommandRegistry()
        registry.register(Command("broken", "broken - 실패", broken))
        router = CommandRouter(registry)

        reply = await router.handle("g1", "!broken")

        assert reply == CommandReply(GENERIC_ERROR_MESSAGE)
        assert router.get_stats() == {
            "handled_count": 1,
            "failed_count": 1,
            "registered_commands": 1,
        }


class TestDepositAndWithdraw:
    """입금/사용 명령 테스트"""

    @pytest.mark.asyncio
    async def test_deposit(self, router: CommandRouter, engine: LedgerEngine) -> None:
        reply = await router.handle("g1", "!입금 1,000 점심 식대")

        assert reply.text == "입금 완료: 점심 식대, \n금액: 1,000\n총 금액 : 1,000"
        transactions = await engine.list_all("g1")
        assert transactions[0].kind == TransactionKind.DEPOSIT
        assert transactions[0].description == "점심 식대"

    @pytest.mark.asyncio
    async def test_withdraw(self, router: CommandRouter, engine: LedgerEngine) -> None:
        await router.handle("g1", "!입금 1000 lunch")
        reply = await router.handle("g1", "!사용 300 coffee")

        assert reply.text == "사용 완료: coffee, \n금액: 300\n총 금액 : 700"
        assert await engine.current_balance("g1") == Decimal("700")

    @pytest.mark.asyncio
    async def test_missing_description_shows_usage(
        self,
        router: CommandRouter,
        memory_store: InMemoryTransactionStore,
    ) -> None:
        """인자가 부족하면 사용법 안내, 원장 변화 없음"""
        reply = await router.handle("g1", "!입금 1000")

        assert reply.text == "사용법: !입금 <가격> <설명> - 입금 이다 \n알겠나?"
        assert memory_store.count("g1") == 0

    @pytest.mark.asyncio
    async def test_invalid_amount(
        self,
        router: CommandRouter,
        memory_store: InMemoryTransactionStore,
    ) -> None:
        """숫자가 아닌 금액"""
        reply = await router.handle("g1", "!사용 abc coffee")

        assert reply.text == INVALID_AMOUNT_MESSAGE
        assert memory_store.count("g1") == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["0", "-100", "NaN", "Infinity"])
    async def test_non_positive_or_non_finite_amount(
        self,
        router: CommandRouter,
        memory_store: InMemoryTransactionStore,
        amount: str,
    ) -> None:
        reply = await router.handle("g1", f"!입금 {amount} bad")

        assert reply.text == INVALID_AMOUNT_MESSAGE
        assert memory_store.count("g1") == 0

    @pytest.mark.asyncio
    async def test_store_failure_reply(
        self,
        router: CommandRouter,
        memory_store: InMemoryTransactionStore,
    ) -> None:
        memory_store.should_fail = True

        reply = await router.handle("g1", "!사용 100 coffee")

        assert reply.text == "사용 처리 중 오류가 발생했습니다."


class TestListAndDelete:
    """조회/삭제 명령 테스트"""

    @pytest.mark.asyncio
    async def test_list_empty(self, router: CommandRouter) -> None:
        reply = await router.handle("g1", "!조회")

        assert reply.text == EMPTY_LEDGER_MESSAGE

    @pytest.mark.asyncio
    async def test_list_newest_first(self, router: CommandRouter) -> None:
        await router.handle("g1", "!입금 1000 lunch")
        await router.handle("g1", "!사용 300 coffee")

        lines = (await router.handle("g1", "!조회")).text.split("\n")

        assert lines[0].startswith("📋 현재까지 쓴 목록(")
        assert "설명: coffee, 출금: 300, 총 금액: 700" in lines[1]
        assert "설명: lunch, 입금: 1,000, 총 금액: 1,000" in lines[2]

    @pytest.mark.asyncio
    async def test_list_failure(
        self,
        router: CommandRouter,
        memory_store: InMemoryTransactionStore,
    ) -> None:
        memory_store.should_fail = True

        reply = await router.handle("g1", "!조회")

        assert reply.text == LIST_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_delete_empty(self, router: CommandRouter) -> None:
        reply = await router.handle("g1", "!삭제")

        assert reply.text == EMPTY_LEDGER_MESSAGE

    @pytest.mark.asyncio
    async def test_delete_shows_remaining(self, router: CommandRouter) -> None:
        await router.handle("g1", "!입금 1000 lunch")
        await router.handle("g1", "!사용 300 coffee")

        reply = await router.handle("g1", "!삭제")

        lines = reply.text.split("\n")
        assert len(lines) == 2
        assert "설명: lunch" in lines[1]

    @pytest.mark.asyncio
    async def test_delete_last_shows_empty(self, router: CommandRouter) -> None:
        await router.handle("g1", "!입금 1000 lunch")

        reply = await router.handle("g1", "!삭제")

        assert reply.text == EMPTY_LEDGER_MESSAGE

    @pytest.mark.asyncio
    async def test_guilds_isolated(self, router: CommandRouter) -> None:
        await router.handle("guild-x", "!입금 1000 x")

        assert (await router.handle("guild-y", "!조회")).text == EMPTY_LEDGER_MESSAGE
        assert (await router.handle("guild-y", "!삭제")).text == EMPTY_LEDGER_MESSAGE
        assert "설명: x" in (await router.handle("guild-x", "!조회")).text


class TestHelpAndDownload:
    """도움말/다운로드 명령 테스트"""

    @pytest.mark.asyncio
    async def test_help(self, router: CommandRouter) -> None:
        reply = await router.handle("g1", "!도움말")

        assert reply.text == router.registry.help_text()
        assert reply.attachment is None

    @pytest.mark.asyncio
    async def test_download_empty(self, router: CommandRouter) -> None:
        reply = await router.handle("g1", "!다운로드")

        assert reply.text == EMPTY_LEDGER_MESSAGE
        assert reply.attachment is None

    @pytest.mark.asyncio
    async def test_download_csv(self, router: CommandRouter) -> None:
        await router.handle("g1", "!입금 1000 lunch")
        await router.handle("g1", "!사용 300 coffee")

        reply = await router.handle("g1", "!다운로드")

        assert reply.text == CSV_READY_MESSAGE
        assert reply.attachment.filename == "2026.02.21_정리된 csv.csv"
        assert reply.attachment.media_type == "text/csv"

        lines = reply.attachment.content.decode("utf-8-sig").splitlines()
        assert lines[0] == "날짜,설명,유형,금액,잔액"
        assert lines[1].endswith(",coffee,출금,300,700")
        assert lines[2].endswith(",lunch,입금,1000,1000")


class TestOversizedAmounts:
    """자리수가 큰 금액 테스트"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["1e40", "12345678901234567890123456789"])
    async def test_rejected_without_saving(
        self,
        router: CommandRouter,
        memory_store: InMemoryTransactionStore,
        amount: str,
    ) -> None:
        """거부된 금액은 저장되지 않고 조회도 정상"""
        reply = await router.handle("g1", f"!입금 {amount} 점심")

        assert reply.text == INVALID_AMOUNT_MESSAGE
        assert memory_store.count("g1") == 0
        assert (await router.handle("g1", "!조회")).text == EMPTY_LEDGER_MESSAGE

    @pytest.mark.asyncio
    async def test_inexact_balance_is_invalid_amount(
        self,
        router: CommandRouter,
        engine: LedgerEngine,
        memory_store: InMemoryTransactionStore,
    ) -> None:
        """정밀도를 넘는 잔액은 금액 오류 응답, 목록 조회 정상"""
        await engine.append(
            Decimal("1234567890123456789012345678"), "big", TransactionKind.DEPOSIT, "g1"
        )

        reply = await router.handle("g1", "!입금 0.5 half")

        assert reply.text == INVALID_AMOUNT_MESSAGE
        assert memory_store.count("g1") == 1
        listing = (await router.handle("g1", "!조회")).text
        assert "총 금액: 1,234,567,890,123,456,789,012,345,678" in listing

    @pytest.mark.asyncio
    async def test_max_amount_listed(self, router: CommandRouter) -> None:
        await router.handle("g1", "!입금 1,000,000,000,000,000 max")

        listing = (await router.handle("g1", "!조회")).text

        assert "입금: 1,000,000,000,000,000, 총 금액: 1,000,000,000,000,000" in listing
