"""환경 변수 기반 설정

프로세스 시작 시 한 번만 로드합니다. 코어는 이 값을 직접 보지 않고
조립이 끝난 collaborator만 전달받습니다.
"""
import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import logging

from pydantic import BaseModel

from .config import (
    SUMMARY_PROVIDER,
    SUMMARY_MODEL_NAME,
    SINK_TYPE,
    SUPABASE_TABLE,
    DEFAULT_PORT,
)
from .business_config import TRIGGER_PHRASE, DIGEST_TIMEZONE, BUFFER_MAX_ENTRIES
from ..core.errors import ConfigError

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """런타임 설정 (검증 완료)"""
    trigger_phrase: str = TRIGGER_PHRASE
    timezone: str = DIGEST_TIMEZONE
    buffer_max_entries: int = BUFFER_MAX_ENTRIES

    summary_provider: str = SUMMARY_PROVIDER
    summary_model_name: str = SUMMARY_MODEL_NAME
    openai_api_key: Optional[str] = None

    sink_type: str = SINK_TYPE
    google_doc_id: Optional[str] = None
    google_service_account_json: Optional[str] = None
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None
    supabase_table: str = SUPABASE_TABLE

    channel_access_token: Optional[str] = None
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    def validate_required(self) -> None:
        """선택한 provider의 설정 값이 없거나 잘못되면 ConfigError"""
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"알 수 없는 DIGEST_TIMEZONE: {self.timezone}") from e

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigError(f"알 수 없는 LOG_LEVEL: {self.log_level}")

        if self.summary_provider not in ("openai", "vertexai"):
            raise ConfigError(f"지원하지 않는 SUMMARY_PROVIDER: {self.summary_provider}")
        if self.summary_provider == "openai" and not self.openai_api_key:
            raise ConfigError("OPENAI_API_KEY가 설정되지 않았습니다.")

        if self.sink_type == "google_docs":
            if not self.google_doc_id or not self.google_service_account_json:
                raise ConfigError("GOOGLE_DOC_ID / GOOGLE_SERVICE_ACCOUNT_JSON이 필요합니다.")
        elif self.sink_type == "supabase":
            if not self.supabase_url or not self.supabase_anon_key:
                raise ConfigError("SUPABASE_URL / SUPABASE_ANON_KEY가 필요합니다.")
        else:
            raise ConfigError(f"지원하지 않는 SINK_TYPE: {self.sink_type}")


def load_settings(environ=None) -> Settings:
    """환경 변수에서 Settings 생성

    Args:
        environ: 환경 변수 매핑 (기본값: os.environ)

    Returns:
        Settings: 검증이 끝난 설정
    """
    env = os.environ if environ is None else environ

    values = {
        "trigger_phrase": env.get("TRIGGER_PHRASE"),
        "timezone": env.get("DIGEST_TIMEZONE"),
        "buffer_max_entries": env.get("BUFFER_MAX_ENTRIES"),
        "summary_provider": env.get("SUMMARY_PROVIDER"),
        "summary_model_name": env.get("SUMMARY_MODEL_NAME"),
        "openai_api_key": env.get("OPENAI_API_KEY"),
        "sink_type": env.get("SINK_TYPE"),
        "google_doc_id": env.get("GOOGLE_DOC_ID"),
        "google_service_account_json": env.get("GOOGLE_SERVICE_ACCOUNT_JSON"),
        "supabase_url": env.get("SUPABASE_URL"),
        "supabase_anon_key": env.get("SUPABASE_ANON_KEY"),
        "supabase_table": env.get("SUPABASE_TABLE"),
        "channel_access_token": env.get("CHANNEL_ACCESS_TOKEN"),
        "port": env.get("PORT"),
        "log_level": env.get("LOG_LEVEL"),
    }
    # 빈 값은 기본값 사용
    values = {key: value for key, value in values.items() if value not in (None, "")}

    try:
        settings = Settings(**values)
    except ValueError as e:
        raise ConfigError(f"설정 값 파싱 실패: {e}") from e

    settings.validate_required()
    logger.info(
        f"[Settings] provider={settings.summary_provider}, sink={settings.sink_type}, "
        f"timezone={settings.timezone}, reply_delivery={bool(settings.channel_access_token)}"
    )
    return settings
