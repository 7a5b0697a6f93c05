"""공용 fixture: 합성 LINE 이벤트와 인메모리 collaborator"""
from datetime import date, datetime

import pytest

from line_digest.core import DailyBuffer, EventClassifier, EventPipeline, ProviderError

TRIGGER = "整理"


def to_epoch_ms(iso: str) -> int:
    return int(datetime.fromisoformat(iso.replace("Z", "+00:00")).timestamp() * 1000)


def text_event(text: str, iso: str, reply_token: str = "reply-token") -> dict:
    return {
        "type": "message",
        "timestamp": to_epoch_ms(iso),
        "replyToken": reply_token,
        "source": {"type": "user", "userId": "U123"},
        "message": {"type": "text", "id": "1", "text": text},
    }


class FakeSummarizer:
    def __init__(self, summary: str = "mocked summary", fail: bool = False):
        self.summary = summary
        self.fail = fail
        self.calls = []

    async def summarize(self, text: str) -> str:
        self.calls.append(text)
        if self.fail:
            raise ProviderError("fake-llm", "rate limited")
        return self.summary


class FakeSink:
    display_name = "Fake Docs"

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.records = []

    async def write(self, record) -> None:
        if self.fail:
            raise ProviderError("fake-sink", "500 Internal Server Error")
        self.records.append(record)


@pytest.fixture
def summarizer():
    return FakeSummarizer()


@pytest.fixture
def sink():
    return FakeSink()


@pytest.fixture
def buffer():
    return DailyBuffer(day=date(2024, 1, 1))


@pytest.fixture
def pipeline(buffer, summarizer, sink):
    return EventPipeline(
        buffer=buffer,
        classifier=EventClassifier(TRIGGER),
        summarizer=summarizer,
        sink=sink,
    )
