"""
EventClassifier: message/text 이외 무시, 트리거는 정확히 일치할 때만
"""
import pytest

from line_digest.core import EventClassifier, Ignorable, PlainText, Trigger
from line_digest.core.schemas import LineEvent

from conftest import TRIGGER, text_event


classifier = EventClassifier(TRIGGER)


def classify(raw: dict):
    return classifier.classify(LineEvent.model_validate(raw))


def test_plain_text_carries_text_and_iso_timestamp():
    result = classify(text_event("hello", "2024-01-01T09:00:00Z"))
    assert result == PlainText(text="hello", timestamp="2024-01-01T09:00:00Z")


def test_milliseconds_are_preserved():
    raw = text_event("hello", "2024-01-01T09:00:00Z")
    raw["timestamp"] += 123
    assert classify(raw).timestamp == "2024-01-01T09:00:00.123Z"


def test_exact_trigger_phrase():
    result = classify(text_event(TRIGGER, "2024-01-01T10:00:00Z"))
    assert result == Trigger(timestamp="2024-01-01T10:00:00Z")


def test_trigger_is_not_trimmed():
    result = classify(text_event(f" {TRIGGER} ", "2024-01-01T10:00:00Z"))
    assert isinstance(result, PlainText)
    assert result.text == f" {TRIGGER} "


def test_trigger_is_case_sensitive():
    upper = EventClassifier("Summarize")
    raw = text_event("summarize", "2024-01-01T10:00:00Z")
    assert isinstance(upper.classify(LineEvent.model_validate(raw)), PlainText)


def test_non_message_event_is_ignorable():
    raw = {"type": "follow", "timestamp": 1704099600000, "replyToken": "r"}
    assert classify(raw) == Ignorable()


def test_non_text_message_is_ignorable():
    raw = text_event("ignored", "2024-01-01T09:00:00Z")
    raw["message"] = {"type": "sticker", "id": "2", "packageId": "1", "stickerId": "1"}
    assert classify(raw) == Ignorable()


def test_non_message_event_without_timestamp_is_ignorable():
    assert classify({"type": "unsend", "mode": "active"}) == Ignorable()


def test_text_message_without_timestamp_raises():
    raw = text_event("hello", "2024-01-01T09:00:00Z")
    del raw["timestamp"]
    with pytest.raises(ValueError):
        classify(raw)
