"""
유틸리티 패키지

타임존 처리 등 공통 유틸리티
"""

from core.utils.timezone import (
    KST,
    DISPLAY_FORMAT,
    DISPLAY_DATE_FORMAT,
    to_kst,
    format_kst,
    now_utc,
    now_kst,
    to_storage,
    from_storage,
)

__all__ = [
    "KST",
    "DISPLAY_FORMAT",
    "DISPLAY_DATE_FORMAT",
    "to_kst",
    "format_kst",
    "now_utc",
    "now_kst",
    "to_storage",
    "from_storage",
]
