"""
설정 로더

settings.yaml 로드 및 애플리케이션 설정 생성
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.constants import PROJECT_ROOT, Defaults, Paths


@dataclass(frozen=True)
class WebConfig:
    """Web 서버 설정"""

    host: str = Defaults.WEB_HOST
    port: int = Defaults.WEB_PORT


@dataclass(frozen=True)
class SlackConfig:
    """Slack 알림 설정

    webhook_url이 비어 있으면 알림 비활성화
    """

    webhook_url: str = ""
    channel: str | None = None
    username: str = Defaults.SLACK_USERNAME

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    db_path: Path = Paths.DEFAULT_DB
    command_prefix: str = Defaults.COMMAND_PREFIX
    store_timeout_sec: float = Defaults.STORE_TIMEOUT_SEC
    web: WebConfig = WebConfig()
    slack: SlackConfig = SlackConfig()


class SettingsLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    """하위 섹션 조회 (없으면 빈 딕셔너리)"""
    value = data.get(key) or {}
    if not isinstance(value, dict):
        raise SettingsLoadError(f"settings.yaml의 '{key}' 섹션은 매핑이어야 합니다")
    return value


def load_config(path: Path | None = None) -> AppConfig:
    """settings.yaml 파일 로드

    파일이 없으면 기본값 사용.

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        AppConfig 인스턴스

    Raises:
        SettingsLoadError: 형식이 잘못되었거나 값이 유효하지 않은 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        return AppConfig()

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        return AppConfig()

    if not isinstance(data, dict):
        raise SettingsLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    # DB 경로 (상대 경로는 프로젝트 루트 기준)
    db_path = Paths.DEFAULT_DB
    if data.get("db_path"):
        db_path = Path(data["db_path"])
        if not db_path.is_absolute():
            db_path = PROJECT_ROOT / db_path

    prefix = data.get("command_prefix", Defaults.COMMAND_PREFIX)
    if not isinstance(prefix, str) or not prefix.strip():
        raise SettingsLoadError("command_prefix는 비어 있지 않은 문자열이어야 합니다")

    try:
        timeout = float(data.get("store_timeout_sec", Defaults.STORE_TIMEOUT_SEC))
    except (TypeError, ValueError) as e:
        raise SettingsLoadError(f"store_timeout_sec 값이 잘못되었습니다: {e}") from e
    if timeout <= 0:
        raise SettingsLoadError("store_timeout_sec는 0보다 커야 합니다")

    web_data = _section(data, "web")
    slack_data = _section(data, "slack")

    try:
        port = int(web_data.get("port", Defaults.WEB_PORT))
    except (TypeError, ValueError) as e:
        raise SettingsLoadError(f"web.port 값이 잘못되었습니다: {e}") from e

    return AppConfig(
        db_path=db_path,
        command_prefix=prefix.strip(),
        store_timeout_sec=timeout,
        web=WebConfig(
            host=web_data.get("host", Defaults.WEB_HOST),
            port=port,
        ),
        slack=SlackConfig(
            webhook_url=slack_data.get("webhook_url") or "",
            channel=slack_data.get("channel"),
            username=slack_data.get("username", Defaults.SLACK_USERNAME),
        ),
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._config is None:
            type(self)._config = load_config(settings_path)

    @property
    def config(self) -> AppConfig:
        """로드된 설정 원본"""
        assert self._config is not None
        return self._config

    @property
    def db_path(self) -> Path:
        """DB 경로"""
        return self.config.db_path

    @property
    def command_prefix(self) -> str:
        """Command 접두사"""
        return self.config.command_prefix

    @property
    def store_timeout_sec(self) -> float:
        """저장소 호출 타임아웃 (초)"""
        return self.config.store_timeout_sec

    @property
    def web(self) -> WebConfig:
        return self.config.web

    @property
    def slack(self) -> SlackConfig:
        return self.config.slack

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
