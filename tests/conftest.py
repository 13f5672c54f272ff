"""
pytest 공통 fixture 정의

Ledger 엔진/저장소/라우터 테스트용 fixture
"""

import tempfile
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from adapters.mock.transaction_store import InMemoryTransactionStore
from core.config.loader import Settings
from core.ledger.engine import LedgerEngine


BASE_TIME = datetime(2026, 2, 20, 3, 0, 0, tzinfo=timezone.utc)


class StepClock:
    """호출마다 step만큼 증가하는 테스트용 시계"""

    def __init__(self, start: datetime = BASE_TIME, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    """Settings 싱글턴 초기화"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def clock() -> StepClock:
    """1초씩 증가하는 시계"""
    return StepClock()


@pytest.fixture
def frozen_clock() -> Callable[[], datetime]:
    """항상 같은 시각을 반환하는 시계 (타임스탬프 충돌 시나리오)"""
    return lambda: BASE_TIME


@pytest.fixture
def memory_store() -> InMemoryTransactionStore:
    """인메모리 저장소"""
    return InMemoryTransactionStore()


@pytest.fixture
def engine(memory_store: InMemoryTransactionStore, clock: StepClock) -> LedgerEngine:
    """인메모리 저장소 기반 LedgerEngine"""
    return LedgerEngine(memory_store, timeout=1.0, clock=clock)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성"""
    content = f"""# 테스트용 settings.yaml
db_path: "{(temp_dir / 'ledger.db').as_posix()}"
command_prefix: "!"
store_timeout_sec: 3

web:
  host: 0.0.0.0
  port: 9000

slack:
  webhook_url: "https://hooks.slack.com/services/test"
  channel: "#ledger"
"""
    path = temp_dir / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    return path
