"""이벤트 처리 파이프라인

classify → buffer-or-trigger → (트리거 시) drain → summarize → write → reply

버퍼 변경(rollover/append/drain)은 모두 외부 호출 전에 critical section 안에서
끝납니다. Summarizer / Sink 호출은 drain된 스냅샷 위에서 락 없이 진행되므로
그동안 다음 윈도우의 메시지가 계속 쌓일 수 있습니다.
"""
from datetime import timezone, tzinfo
from typing import Any, Dict, Optional, Sequence, Union
import logging

from .classifier import EventClassifier
from .daily_buffer import DailyBuffer
from .errors import ProviderError, SummarizationFailed, SinkWriteFailed
from .schemas import (
    Entry,
    LineEvent,
    Ignorable,
    PlainText,
    Trigger,
    SummaryRecord,
    iso_to_day,
)
from ..config.business_config import (
    REPLY_NOTHING_TO_SUMMARIZE,
    REPLY_COMPLETED,
    REPLY_SUMMARIZATION_FAILED,
    REPLY_SINK_WRITE_FAILED,
)
from ..helpers.response_formatter import text_message

logger = logging.getLogger(__name__)


class EventPipeline:
    """단일 DailyBuffer를 소유하는 이벤트 처리기

    Args:
        buffer: 공유 DailyBuffer (startup에서 생성, shutdown에서 close)
        classifier: EventClassifier
        summarizer: `async summarize(text) -> str`, 실패 시 ProviderError
        sink: `async write(record) -> None`, 실패 시 ProviderError
        tz: 날짜 키 계산에 쓰는 시간대
    """

    def __init__(
        self,
        buffer: DailyBuffer,
        classifier: EventClassifier,
        summarizer,
        sink,
        tz: tzinfo = timezone.utc,
    ):
        self.buffer = buffer
        self.classifier = classifier
        self.summarizer = summarizer
        self.sink = sink
        self.tz = tz

    async def handle(self, raw_event: Union[LineEvent, Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """이벤트 하나 처리

        Returns:
            LINE 텍스트 메시지 dict, 응답이 없으면 None
        """
        event = raw_event if isinstance(raw_event, LineEvent) else LineEvent.model_validate(raw_event)
        classification = self.classifier.classify(event)

        if isinstance(classification, Ignorable):
            logger.debug(f"[Pipeline] 무시된 이벤트: type={event.type}")
            return None

        event_day = iso_to_day(classification.timestamp, self.tz)

        if isinstance(classification, PlainText):
            with self.buffer.exclusive():
                self.buffer.rollover_if_needed(event_day)
                self.buffer.append(Entry(timestamp=classification.timestamp, text=classification.text))
            return None

        return await self._handle_trigger(classification, event_day)

    async def _handle_trigger(self, trigger: Trigger, event_day) -> Dict[str, Any]:
        with self.buffer.exclusive():
            self.buffer.rollover_if_needed(event_day)
            if self.buffer.is_empty():
                logger.info(f"[Pipeline] 트리거 수신, 정리할 내용 없음 ({event_day.isoformat()})")
                return text_message(REPLY_NOTHING_TO_SUMMARIZE)
            entries = self.buffer.drain()

        logger.info(f"[Pipeline] 트리거 수신, {len(entries)}개 엔트리 drain ({event_day.isoformat()})")

        try:
            await self.flush(trigger.timestamp, entries)
        except SummarizationFailed as e:
            logger.error(f"[Pipeline] 요약 실패: {e}")
            return text_message(REPLY_SUMMARIZATION_FAILED.format(count=e.lost_entries))
        except SinkWriteFailed as e:
            logger.error(f"[Pipeline] 저장 실패: {e}")
            return text_message(REPLY_SINK_WRITE_FAILED.format(count=e.lost_entries))

        destination = getattr(self.sink, "display_name", "文件")
        return text_message(REPLY_COMPLETED.format(destination=destination))

    async def flush(self, timestamp: str, entries: Sequence[Entry]) -> SummaryRecord:
        """drain된 엔트리를 요약해 Sink에 기록 (요약 1회, 기록 1회, 재시도 없음)

        Raises:
            SummarizationFailed: Summarizer가 ProviderError를 던진 경우 (Sink 호출 안 함)
            SinkWriteFailed: Sink가 ProviderError를 던진 경우
        """
        joined_text = "\n".join(entry.text for entry in entries)

        try:
            summary = await self.summarizer.summarize(joined_text)
        except ProviderError as e:
            raise SummarizationFailed(len(entries), e) from e

        record = SummaryRecord(timestamp=timestamp, summary=summary)

        try:
            await self.sink.write(record)
        except ProviderError as e:
            raise SinkWriteFailed(len(entries), e) from e

        logger.info(f"[Pipeline] 요약 저장 완료: {record.day} ({len(summary)}자)")
        return record
