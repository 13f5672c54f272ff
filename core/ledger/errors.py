"""
Ledger 예외 정의
"""


class LedgerError(Exception):
    """Ledger 예외 기본 클래스"""

    pass


class ValidationError(LedgerError, ValueError):
    """입력값 검증 실패 (숫자가 아닌 금액, 누락된 인자 등)

    Command 파싱 단계에서는 결과 객체에 담겨 반환됨.
    엔진은 무한대/NaN 금액이나 정밀도를 넘는 잔액에만 raise.
    """

    pass


class PersistenceError(LedgerError):
    """저장소 실패 (연결 불가, 쓰기/읽기 실패, 타임아웃)

    엔진은 재시도하지 않고 호출자에게 그대로 전파.
    """

    pass
