"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from typing import Any, Protocol, runtime_checkable

from core.ledger.models import Transaction


@runtime_checkable
class ITransactionStore(Protocol):
    """거래 저장소 인터페이스

    테넌트(길드)별로 격리된 불변 거래 기록 저장소.
    백엔드 오류는 반드시 PersistenceError로 변환하여 전달.
    """

    async def add(self, tenant: str, transaction: Transaction) -> str:
        """거래 1건 저장

        Args:
            tenant: 테넌트 ID (길드 ID)
            transaction: 저장할 거래 (id 없음)

        Returns:
            저장소가 부여한 식별자
        """
        ...

    async def latest(self, tenant: str) -> Transaction | None:
        """created_at이 가장 큰 거래 1건 (없으면 None)"""
        ...

    async def all(self, tenant: str) -> list[Transaction]:
        """테넌트의 전체 거래 (created_at 내림차순, 동률이면 나중 저장 우선)"""
        ...

    async def latest_handle(self, tenant: str) -> str | None:
        """최신 거래의 삭제 핸들 조회

        삭제 대상을 "방금 최신으로 확인한 기록"으로 고정하기 위한
        2단계 삭제의 첫 단계.
        """
        ...

    async def remove(self, handle: str) -> bool:
        """핸들이 가리키는 기록 삭제

        Returns:
            True: 삭제됨
            False: 이미 없는 기록
        """
        ...


@runtime_checkable
class INotifier(Protocol):
    """알림 서비스 인터페이스

    도움말 안내, 에러 알림 등을 외부 채팅 서비스로 전송.
    """

    async def send(
        self,
        message: str,
        level: str = "INFO",
        extra: dict[str, Any] | None = None,
    ) -> bool:
        """알림 전송

        Args:
            message: 알림 메시지
            level: 알림 레벨 (INFO, WARNING, ERROR, CRITICAL)
            extra: 추가 데이터 (선택)

        Returns:
            전송 성공 여부
        """
        ...

    async def close(self) -> None:
        """리소스 정리"""
        ...
