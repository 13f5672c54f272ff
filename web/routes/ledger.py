"""
Ledger 조회 라우트

GET /api/guilds/{guild_id}/transactions      - 거래 목록 (최신순)
GET /api/guilds/{guild_id}/balance           - 현재 잔액
GET /api/guilds/{guild_id}/transactions.csv  - CSV 다운로드
"""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from core.ledger.engine import LedgerEngine
from core.ledger.errors import PersistenceError
from core.ledger.export import export_filename, to_csv
from core.utils.timezone import now_kst
from web.dependencies import get_engine
from web.models.responses import (
    LedgerBalanceResponse,
    TransactionListResponse,
    TransactionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Ledger"])


def _unavailable(guild_id: str, e: PersistenceError) -> HTTPException:
    logger.error("Ledger 조회 실패", extra={"tenant": guild_id, "error": str(e)})
    return HTTPException(status_code=503, detail="Ledger storage unavailable")


@router.get("/guilds/{guild_id}/transactions", response_model=TransactionListResponse)
async def get_transactions(
    guild_id: str,
    engine: LedgerEngine = Depends(get_engine),
) -> TransactionListResponse:
    """거래 목록 조회 (최신순)"""
    try:
        transactions = await engine.list_all(guild_id)
    except PersistenceError as e:
        raise _unavailable(guild_id, e) from e

    return TransactionListResponse(
        guild_id=guild_id,
        items=[TransactionResponse.from_transaction(tx) for tx in transactions],
        total=len(transactions),
    )


@router.get("/guilds/{guild_id}/balance", response_model=LedgerBalanceResponse)
async def get_balance(
    guild_id: str,
    engine: LedgerEngine = Depends(get_engine),
) -> LedgerBalanceResponse:
    """현재 잔액 조회 (거래 없으면 0)"""
    try:
        balance = await engine.current_balance(guild_id)
    except PersistenceError as e:
        raise _unavailable(guild_id, e) from e

    return LedgerBalanceResponse(guild_id=guild_id, balance=str(balance))


@router.get("/guilds/{guild_id}/transactions.csv")
async def download_csv(
    guild_id: str,
    engine: LedgerEngine = Depends(get_engine),
) -> Response:
    """거래 목록 CSV 다운로드 (빈 원장은 헤더만)"""
    try:
        transactions = await engine.list_all(guild_id)
    except PersistenceError as e:
        raise _unavailable(guild_id, e) from e

    filename = export_filename(now_kst().date())
    return Response(
        content=to_csv(transactions),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}",
        },
    )
