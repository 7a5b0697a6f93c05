"""하루 단위 대화 버퍼

프로세스 메모리에만 존재하며, 재시작 시 flush되지 않은 엔트리는 사라집니다.
날짜 경계는 타이머가 아니라 이벤트 timestamp로만 판단합니다.
"""
import threading
from contextlib import contextmanager
from datetime import date
from typing import Iterator, List, Tuple
import logging

from .schemas import Entry

logger = logging.getLogger(__name__)


class DailyBuffer:
    """당일 엔트리의 순서 보장 로그

    rollover+append 와 rollover+drain은 각각 read-modify-write 이므로
    exclusive() 안에서 한 번에 실행해야 합니다. 락은 동기 구간에서만 잡히며
    await 경계를 넘어가지 않습니다.

    Attributes:
        max_entries: 0이면 무제한, 그 외에는 초과 시 가장 오래된 엔트리 삭제
    """

    def __init__(self, day: date, max_entries: int = 0):
        self._day = day
        self._entries: List[Entry] = []
        self._lock = threading.RLock()
        self.max_entries = max_entries
        self.dropped_count = 0

    @contextmanager
    def exclusive(self) -> Iterator["DailyBuffer"]:
        """이벤트 하나당 하나의 critical section"""
        with self._lock:
            yield self

    def current_day(self) -> date:
        return self._day

    def rollover_if_needed(self, event_date: date) -> bool:
        """이벤트 날짜가 버퍼 날짜와 다르면 빈 버퍼로 교체

        Returns:
            bool: rollover 발생 여부
        """
        with self._lock:
            if event_date == self._day:
                return False

            discarded = len(self._entries)
            logger.info(
                f"[DailyBuffer] 날짜 변경 {self._day.isoformat()} → {event_date.isoformat()} "
                f"(버려진 엔트리 {discarded}개)"
            )
            self._entries = []
            self._day = event_date
            self.dropped_count = 0
            return True

    def append(self, entry: Entry) -> None:
        with self._lock:
            self._entries.append(entry)
            if self.max_entries and len(self._entries) > self.max_entries:
                self._entries.pop(0)
                self.dropped_count += 1
                logger.warning(
                    f"[DailyBuffer] max_entries={self.max_entries} 초과, 가장 오래된 엔트리 삭제 "
                    f"(오늘 누적 삭제 {self.dropped_count}개)"
                )

    def drain(self) -> Tuple[Entry, ...]:
        """모든 엔트리를 순서대로 꺼내고 버퍼를 비움"""
        with self._lock:
            drained = tuple(self._entries)
            self._entries = []
            return drained

    def is_empty(self) -> bool:
        with self._lock:
            return not self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def snapshot(self) -> Tuple[Entry, ...]:
        """현재 엔트리 복사본 (버퍼는 변경하지 않음)"""
        with self._lock:
            return tuple(self._entries)

    def close(self) -> int:
        """종료 시 정리. flush되지 않고 사라지는 엔트리 수를 반환"""
        with self._lock:
            lost = len(self._entries)
            self._entries = []
        if lost:
            logger.warning(f"[DailyBuffer] 종료: flush되지 않은 엔트리 {lost}개 유실")
        else:
            logger.info("[DailyBuffer] 종료: 유실된 엔트리 없음")
        return lost
