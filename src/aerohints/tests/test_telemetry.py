# ---------------------------------------------------------------------------
# File: test_telemetry.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for aerohints.core.telemetry.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#	- Uses MemorySink for deterministic assertions.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from aerohints.core.config import AppConfig
from aerohints.core.telemetry import (
	LogSink,
	MemorySink,
	NullSink,
	Telemetry,
	_reset_telemetry_for_tests,
	get_telemetry,
	init_telemetry,
)


@pytest.fixture(autouse=True)
def _fresh_global():
	_reset_telemetry_for_tests()
	yield
	_reset_telemetry_for_tests()


def test_disabled_telemetry_is_noop():
	sink = MemorySink()
	t = Telemetry(enabled=False, sink=sink)

	t.event("modes.fetch_failed", {"mode": "main"})
	t.counter("modes.loaded", 3)
	with t.timer("modes.reload_ms"):
		pass

	assert sink.events == []
	assert sink.metrics == []


def test_event_reaches_sink():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.event("overlay.shown", {"mode": "resize"})

	assert sink.event_names() == ["overlay.shown"]
	ev = sink.events[0]
	assert ev.attrs == {"mode": "resize"}
	assert isinstance(ev.timestamp, float)
	assert ev.timestamp > 0.0


def test_counter_is_float():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	t.counter("modes.loaded", 4)

	assert sink.metrics[0].value == 4.0
	assert isinstance(sink.metrics[0].value, float)


def test_timer_records_elapsed_ms():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)

	with t.timer("modes.reload_ms", {"source": "static"}) as timer:
		pass

	m = sink.metrics[0]
	assert m.name == "modes.reload_ms"
	assert m.value == timer.elapsed_ms
	assert m.value >= 0.0
	assert m.attrs == {"source": "static"}


def test_memory_sink_clear():
	sink = MemorySink()
	t = Telemetry(enabled=True, sink=sink)
	t.event("x")
	t.counter("y")

	sink.clear()

	assert sink.events == []
	assert sink.metrics == []


def test_log_sink_writes_debug(caplog):
	logger = logging.getLogger("aerohints.app.telemetry")
	t = Telemetry(enabled=True, sink=LogSink(logger))

	with caplog.at_level(logging.DEBUG, logger="aerohints.app.telemetry"):
		t.event("overlay.reloaded", {"modes": 4})
		t.counter("modes.loaded", 4)

	assert "telemetry.event name=overlay.reloaded" in caplog.text
	assert "telemetry.metric name=modes.loaded value=4.0" in caplog.text


def test_global_defaults_to_disabled():
	t = get_telemetry()

	assert t.enabled is False
	assert get_telemetry() is t


def test_init_telemetry_from_config():
	logger = logging.getLogger("aerohints.app.telemetry")

	disabled = init_telemetry(AppConfig())
	assert disabled.enabled is False
	assert isinstance(disabled._sink, NullSink)

	logged = init_telemetry(AppConfig({"telemetry_enabled": True, "telemetry_sink": "log"}), logger=logger)
	assert logged.enabled is True
	assert isinstance(logged._sink, LogSink)
	assert get_telemetry() is logged

	# "log" without a logger degrades to an enabled NullSink.
	silent = init_telemetry({"telemetry_enabled": True, "telemetry_sink": "log"})
	assert silent.enabled is True
	assert isinstance(silent._sink, NullSink)
