"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from bot.bootstrap import BotContext, announce_help, create_context
from core.config.loader import get_settings
from web.routes import health, ledger, messages
from web.routes.health import VERSION

logger = logging.getLogger(__name__)


def create_app(context: BotContext | None = None) -> FastAPI:
    """FastAPI 앱 생성

    Args:
        context: 미리 조립된 BotContext (테스트용).
            None이면 시작 시 settings.yaml 기준으로 생성하고 종료 시 정리.

    Returns:
        FastAPI 앱
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """앱 생명주기 관리"""
        if context is not None:
            app.state.context = context
            yield
            return

        settings = get_settings()
        owned = await create_context(settings.config)
        app.state.context = owned
        await announce_help(owned)
        logger.info("Web: BotContext 초기화 완료")

        try:
            yield
        finally:
            await owned.close()
            app.state.context = None

    app = FastAPI(
        title="GuildLedger API",
        description="길드별 입출금 장부 채팅 명령 API",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # =====================================================================
    # API 라우터 등록
    # =====================================================================

    app.include_router(health.router)
    app.include_router(messages.router)
    app.include_router(ledger.router)

    return app


app = create_app()
