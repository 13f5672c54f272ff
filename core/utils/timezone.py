"""
타임존 유틸리티

내부 저장: UTC | 외부 표시: KST 원칙 준수를 위한 헬퍼 함수
"""

from datetime import datetime, timezone, timedelta

# KST 타임존 (UTC+9)
KST = timezone(timedelta(hours=9))

# 사용자 표시용 포맷 (예: 2026.02.21 13:05)
DISPLAY_FORMAT = "%Y.%m.%d %H:%M"
DISPLAY_DATE_FORMAT = "%Y.%m.%d"


def to_kst(dt: datetime) -> datetime:
    """UTC datetime을 KST로 변환

    Args:
        dt: datetime 객체 (UTC 권장, naive면 UTC로 간주)

    Returns:
        KST 타임존의 datetime

    Example:
        >>> utc_dt = datetime(2026, 2, 20, 16, 0, 0, tzinfo=timezone.utc)
        >>> to_kst(utc_dt).hour
        1  # 다음날 01:00
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(KST)


def format_kst(dt: datetime, fmt: str = DISPLAY_FORMAT) -> str:
    """UTC datetime을 KST 문자열로 포맷

    Args:
        dt: datetime 객체 (UTC 권장)
        fmt: strftime 포맷 문자열

    Returns:
        KST 시간의 포맷된 문자열

    Example:
        >>> format_kst(datetime(2026, 2, 20, 16, 0, tzinfo=timezone.utc))
        '2026.02.21 01:00'
    """
    return to_kst(dt).strftime(fmt)


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)"""
    return datetime.now(timezone.utc)


def now_kst() -> datetime:
    """현재 KST 시간 반환"""
    return datetime.now(KST)


def to_storage(dt: datetime) -> str:
    """저장용 ISO 문자열 변환

    항상 UTC + 마이크로초 포함 형식으로 고정하여
    문자열 정렬이 시간 정렬과 일치하도록 함.

    Args:
        dt: datetime 객체 (naive면 UTC로 간주)

    Returns:
        예: '2026-02-20T16:00:00.000000+00:00'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="microseconds")


def from_storage(value: str) -> datetime:
    """저장된 ISO 문자열을 UTC datetime으로 복원"""
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
