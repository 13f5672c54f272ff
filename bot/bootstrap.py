"""
Bot Bootstrap

설정 로드, 의존성 주입, 생명주기 관리.

설정 → DB 연결/스키마 → 저장소 → LedgerEngine → Command 등록 테이블 → Router
순서로 조립하여 BotContext 하나로 묶음.
"""

import logging
from dataclasses import dataclass

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from adapters.db.transaction_store import SQLiteTransactionStore
from adapters.interfaces import INotifier, ITransactionStore
from adapters.slack.notifier import SlackNotifier
from bot.command.handlers import build_default_registry
from bot.command.registry import CommandRegistry
from bot.command.router import CommandRouter
from core.config.loader import AppConfig, SlackConfig
from core.ledger.engine import LedgerEngine

logger = logging.getLogger("bot")


@dataclass
class BotContext:
    """조립된 Bot 구성요소

    Attributes:
        config: 애플리케이션 설정
        store: 거래 저장소
        engine: LedgerEngine
        registry: Command 등록 테이블
        router: Command 라우터
        notifier: 알림 서비스 (설정이 없으면 None)
        db: SQLite 어댑터 (인메모리 저장소 사용 시 None)
    """

    config: AppConfig
    store: ITransactionStore
    engine: LedgerEngine
    registry: CommandRegistry
    router: CommandRouter
    notifier: INotifier | None = None
    db: SQLiteAdapter | None = None

    async def close(self) -> None:
        """리소스 정리"""
        if self.notifier is not None:
            await self.notifier.close()
        if self.db is not None:
            await self.db.close()
        logger.info("Bot 리소스 정리 완료")


def create_notifier(slack: SlackConfig) -> SlackNotifier | None:
    """Slack Notifier 생성 (설정이 있는 경우에만)"""
    if not slack.enabled:
        logger.info("Slack webhook_url이 설정되지 않아 알림 비활성화")
        return None

    notifier = SlackNotifier(
        webhook_url=slack.webhook_url,
        channel=slack.channel,
        username=slack.username,
    )
    logger.info(f"SlackNotifier 생성 완료 (channel: {slack.channel or 'default'})")
    return notifier


def build_context(
    config: AppConfig,
    store: ITransactionStore,
    notifier: INotifier | None = None,
    db: SQLiteAdapter | None = None,
) -> BotContext:
    """저장소로부터 나머지 구성요소 조립"""
    engine = LedgerEngine(store, timeout=config.store_timeout_sec)
    registry = build_default_registry(engine, prefix=config.command_prefix)

    return BotContext(
        config=config,
        store=store,
        engine=engine,
        registry=registry,
        router=CommandRouter(registry),
        notifier=notifier,
        db=db,
    )


async def create_context(config: AppConfig) -> BotContext:
    """SQLite 저장소 기반 BotContext 생성

    Args:
        config: 애플리케이션 설정

    Returns:
        BotContext (종료 시 close() 호출 필요)
    """
    logger.info(f"DB: {config.db_path}")

    db = SQLiteAdapter(config.db_path)
    await db.connect()
    try:
        await init_schema(db)
    except Exception:
        logger.exception("스키마 초기화 실패, DB 연결 종료")
        await db.close()
        raise

    return build_context(
        config,
        store=SQLiteTransactionStore(db),
        notifier=create_notifier(config.slack),
        db=db,
    )


async def announce_help(context: BotContext) -> bool:
    """도움말 안내 전송 (notifier가 있는 경우에만)

    Returns:
        전송 성공 여부 (notifier 없으면 False)
    """
    if context.notifier is None:
        return False

    sent = await context.notifier.send(context.registry.help_text(), level="INFO")
    if sent:
        logger.info("도움말 안내 전송 완료")
    else:
        logger.warning("도움말 안내 전송 실패")
    return sent
