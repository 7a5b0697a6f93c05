"""버퍼 / 트리거 코어"""
from .classifier import EventClassifier
from .daily_buffer import DailyBuffer
from .errors import (
    DigestError,
    ConfigError,
    ProviderError,
    SummarizationFailed,
    SinkWriteFailed,
)
from .pipeline import EventPipeline
from .schemas import Entry, SummaryRecord, LineEvent, Ignorable, PlainText, Trigger

__all__ = [
    "EventClassifier",
    "DailyBuffer",
    "DigestError",
    "ConfigError",
    "ProviderError",
    "SummarizationFailed",
    "SinkWriteFailed",
    "EventPipeline",
    "Entry",
    "SummaryRecord",
    "LineEvent",
    "Ignorable",
    "PlainText",
    "Trigger",
]
