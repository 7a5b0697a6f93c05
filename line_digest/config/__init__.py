"""Configuration module

애플리케이션 설정 값을 중앙에서 관리합니다.
"""

from .business_config import (
    TRIGGER_PHRASE,
    DIGEST_TIMEZONE,
    BUFFER_MAX_ENTRIES,
)
from .settings import Settings, load_settings

__all__ = [
    "TRIGGER_PHRASE",
    "DIGEST_TIMEZONE",
    "BUFFER_MAX_ENTRIES",
    "Settings",
    "load_settings",
]
