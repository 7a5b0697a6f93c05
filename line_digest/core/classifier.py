"""인바운드 이벤트 분류 (순수 함수, 부작용 없음)"""
from .schemas import (
    LineEvent,
    Classification,
    Ignorable,
    PlainText,
    Trigger,
    epoch_ms_to_iso,
)


class EventClassifier:
    """LINE 이벤트를 Ignorable / PlainText / Trigger로 분류"""

    def __init__(self, trigger_phrase: str):
        self.trigger_phrase = trigger_phrase

    def classify(self, event: LineEvent) -> Classification:
        if event.type != "message" or event.message is None or event.message.type != "text":
            return Ignorable()

        # timestamp는 텍스트 메시지에서만 필요
        if event.timestamp is None:
            raise ValueError("text message event without timestamp")

        text = event.message.text or ""
        timestamp = epoch_ms_to_iso(event.timestamp)

        # 정확히 일치할 때만 트리거 (trim / case folding 없음)
        if text == self.trigger_phrase:
            return Trigger(timestamp=timestamp)

        return PlainText(text=text, timestamp=timestamp)
