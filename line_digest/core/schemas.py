"""Core Schemas

인바운드 LINE 이벤트, 버퍼 엔트리, Sink 레코드, 분류 결과를 정의합니다.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, date, tzinfo
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ============================================
# 인바운드 이벤트 스키마 (LINE webhook)
# ============================================

class LineMessage(BaseModel):
    """event.message (text 이외의 타입은 text 없음)"""
    model_config = ConfigDict(extra="allow")

    type: str
    id: Optional[str] = None
    text: Optional[str] = None


class LineEvent(BaseModel):
    """LINE webhook event

    Attributes:
        type: 이벤트 타입 ("message", "follow", "join", ...)
        timestamp: 전송 시각 (epoch milliseconds, 일부 이벤트 타입은 없음)
        reply_token: 응답용 토큰 (replyToken)
        message: message 이벤트일 때만 존재
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    type: str
    timestamp: Optional[int] = None
    reply_token: Optional[str] = Field(default=None, alias="replyToken")
    message: Optional[LineMessage] = None


class WebhookBody(BaseModel):
    model_config = ConfigDict(extra="allow")

    destination: Optional[str] = None
    events: list = Field(default_factory=list)


# ============================================
# 버퍼 / Sink 스키마
# ============================================

@dataclass(frozen=True)
class Entry:
    """버퍼에 쌓이는 대화 한 줄 (생성 후 불변)"""
    timestamp: str
    text: str


@dataclass(frozen=True)
class SummaryRecord:
    """Sink에 전달되는 요약 레코드"""
    timestamp: str
    summary: str

    @property
    def day(self) -> str:
        return self.timestamp.split("T")[0]


# ============================================
# 분류 결과
# ============================================

@dataclass(frozen=True)
class Ignorable:
    pass


@dataclass(frozen=True)
class PlainText:
    text: str
    timestamp: str


@dataclass(frozen=True)
class Trigger:
    timestamp: str


Classification = Union[Ignorable, PlainText, Trigger]


# ============================================
# 시각 변환 헬퍼
# ============================================

def epoch_ms_to_iso(epoch_ms: int) -> str:
    """epoch milliseconds → ISO-8601 UTC 문자열

    밀리초가 0이면 초 단위까지만 표기합니다.

    Examples:
        >>> epoch_ms_to_iso(1704103200000)
        '2024-01-01T10:00:00Z'
        >>> epoch_ms_to_iso(1704103200123)
        '2024-01-01T10:00:00.123Z'
    """
    moment = datetime.fromtimestamp(epoch_ms // 1000, tz=timezone.utc)
    moment += timedelta(milliseconds=epoch_ms % 1000)
    timespec = "milliseconds" if epoch_ms % 1000 else "seconds"
    return moment.isoformat(timespec=timespec).replace("+00:00", "Z")


def iso_to_day(timestamp: str, tz: tzinfo = timezone.utc) -> date:
    """ISO-8601 문자열에서 tz 기준 날짜 추출"""
    moment = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    return moment.astimezone(tz).date()
