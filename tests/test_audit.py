"""Tests for the history event sinks."""

from __future__ import annotations

import logging
from datetime import datetime

import pytest

from furfolio.services.audit import HistoryEvent, InMemoryEventSink, LoggingEventSink, NullEventSink


def _event(operation: str = "undo", **kwargs) -> HistoryEvent:
    defaults = dict(undo_depth=1, redo_depth=0, timestamp=datetime(2025, 3, 13, 9, 30))
    defaults.update(kwargs)
    return HistoryEvent(operation=operation, **defaults)


def test_summary_includes_description_and_detail():
    event = _event(change_description="Add [Bath Only, $25.00]", detail="Undo performed")

    assert event.summary == (
        "[undo] undo: 1, redo: 0 (Add [Bath Only, $25.00]) : Undo performed at 2025-03-13 09:30"
    )


def test_in_memory_sink_evicts_oldest():
    sink = InMemoryEventSink(capacity=3)
    for idx in range(5):
        sink.record(_event(f"op{idx}"))

    assert [e.operation for e in sink.events] == ["op2", "op3", "op4"]
    assert sink.capacity == 3
    assert len(sink.recent(limit=2)) == 2
    assert sink.recent(limit=0) == []


def test_in_memory_sink_last_summary():
    sink = InMemoryEventSink()
    assert sink.last_summary == "No undo/redo events recorded."

    sink.record(_event("clear", undo_depth=0))
    assert sink.last_summary.startswith("[clear]")

    sink.clear()
    assert len(sink) == 0


def test_in_memory_sink_rejects_bad_capacity():
    with pytest.raises(ValueError):
        InMemoryEventSink(capacity=0)


def test_logging_sink_emits_structured_record(caplog):
    sink = LoggingEventSink()

    with caplog.at_level(logging.INFO, logger="furfolio"):
        sink.record(_event("redo", change_description="Delete [Bath Only, $25.00]"))

    record = caplog.records[-1]
    assert record.name == "furfolio.audit"
    assert record.getMessage() == "Charge history redo"
    assert record.change == "Delete [Bath Only, $25.00]"
    assert record.undo_depth == 1


def test_null_sink_accepts_events():
    assert NullEventSink().record(_event()) is None
