"""
어댑터 레이어

외부 서비스(DB, 알림 등)와의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import INotifier, ITransactionStore

__all__ = [
    "INotifier",
    "ITransactionStore",
]
