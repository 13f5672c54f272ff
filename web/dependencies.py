"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
BotContext는 lifespan에서 생성되어 app.state에 보관됨.
"""

from fastapi import HTTPException, Request

from bot.bootstrap import BotContext
from bot.command.router import CommandRouter
from core.ledger.engine import LedgerEngine


def get_context(request: Request) -> BotContext:
    """BotContext 반환"""
    context: BotContext | None = getattr(request.app.state, "context", None)
    if context is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return context


def get_engine(request: Request) -> LedgerEngine:
    """LedgerEngine 반환"""
    return get_context(request).engine


def get_router(request: Request) -> CommandRouter:
    """CommandRouter 반환"""
    return get_context(request).router
