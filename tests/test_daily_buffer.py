"""
DailyBuffer: rollover / append / drain
"""
import threading
from datetime import date

from line_digest.core import DailyBuffer, Entry


def entry(text: str, ts: str = "2024-01-01T09:00:00Z") -> Entry:
    return Entry(timestamp=ts, text=text)


def test_starts_empty_on_given_day():
    buffer = DailyBuffer(day=date(2024, 1, 1))
    assert buffer.is_empty()
    assert buffer.current_day() == date(2024, 1, 1)


def test_drain_returns_entries_in_order_and_clears():
    buffer = DailyBuffer(day=date(2024, 1, 1))
    entries = [entry(f"m{i}") for i in range(5)]
    for e in entries:
        buffer.append(e)

    assert list(buffer.drain()) == entries
    assert buffer.is_empty()
    assert buffer.drain() == ()


def test_entries_appended_after_drain_are_not_returned():
    buffer = DailyBuffer(day=date(2024, 1, 1))
    buffer.append(entry("before"))
    drained = buffer.drain()
    buffer.append(entry("after"))

    assert [e.text for e in drained] == ["before"]
    assert [e.text for e in buffer.snapshot()] == ["after"]


def test_rollover_discards_previous_day():
    buffer = DailyBuffer(day=date(2024, 1, 1))
    buffer.append(entry("old"))

    assert buffer.rollover_if_needed(date(2024, 1, 2)) is True
    assert buffer.is_empty()
    assert buffer.current_day() == date(2024, 1, 2)


def test_rollover_same_day_is_noop():
    buffer = DailyBuffer(day=date(2024, 1, 1))
    buffer.append(entry("keep"))

    assert buffer.rollover_if_needed(date(2024, 1, 1)) is False
    assert buffer.rollover_if_needed(date(2024, 1, 1)) is False
    assert [e.text for e in buffer.snapshot()] == ["keep"]


def test_max_entries_drops_oldest():
    buffer = DailyBuffer(day=date(2024, 1, 1), max_entries=2)
    for text in ("a", "b", "c"):
        buffer.append(entry(text))

    assert [e.text for e in buffer.drain()] == ["b", "c"]
    assert buffer.dropped_count == 1


def test_unbounded_by_default():
    buffer = DailyBuffer(day=date(2024, 1, 1))
    for i in range(1000):
        buffer.append(entry(str(i)))
    assert len(buffer) == 1000


def test_close_reports_lost_entries():
    buffer = DailyBuffer(day=date(2024, 1, 1))
    buffer.append(entry("unflushed"))
    assert buffer.close() == 1
    assert buffer.is_empty()


def test_concurrent_append_and_drain_lose_nothing():
    buffer = DailyBuffer(day=date(2024, 1, 1))
    drained = []

    def writer(prefix):
        for i in range(200):
            with buffer.exclusive():
                buffer.rollover_if_needed(date(2024, 1, 1))
                buffer.append(entry(f"{prefix}-{i}"))

    def reader():
        for _ in range(50):
            drained.extend(buffer.drain())

    threads = [threading.Thread(target=writer, args=(p,)) for p in "abcd"]
    threads.append(threading.Thread(target=reader))
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    drained.extend(buffer.drain())

    texts = [e.text for e in drained]
    assert len(texts) == 800
    assert len(set(texts)) == 800
