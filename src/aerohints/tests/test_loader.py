# ---------------------------------------------------------------------------
# File: test_loader.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ModeLoader (source -> parsed, collapsed, sorted modes).
#
# Notes:
#	- Telemetry is injected with a MemorySink so metrics can be asserted.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial tests
# ---------------------------------------------------------------------------

import pytest

from aerohints.core.errors import ModeSourceError
from aerohints.core.telemetry import MemorySink, Telemetry
from aerohints.model.binding import Category
from aerohints.services.loader import ModeLoader
from aerohints.services.source import StaticModeSource


MAIN = {
	**{f"alt-{n}": f"workspace {n}" for n in range(10)},
	"alt-h": "focus left",
	"alt-j": "focus down",
	"alt-k": "focus up",
	"alt-l": "focus right",
	"alt-enter": "exec-and-forget open -a Terminal",
	"alt-r": "mode resize; exec-and-forget aerohints --notify mode-enter resize",
	"alt-esc": "mode main",
}

RESIZE = {
	"minus": "resize smart -50",
	"equal": "resize smart +50",
	"esc": "mode main; exec-and-forget aerohints --notify mode-exit",
}


class _BrokenSource:
	"""
	Source that fails on demand.
	"""
	def __init__(self, fail_names: bool = False, fail_modes: tuple[str, ...] = ()) -> None:
		self.fail_names = fail_names
		self.fail_modes = fail_modes

	def mode_names(self) -> list[str]:
		if self.fail_names:
			raise ModeSourceError("server not running")
		return ["main", "resize"]

	def bindings(self, mode: str) -> dict[str, str]:
		if mode in self.fail_modes:
			raise ModeSourceError(f"no bindings for {mode}")
		return {"alt-f": "fullscreen"}


@pytest.fixture
def sink() -> MemorySink:
	return MemorySink()


@pytest.fixture
def telemetry(sink) -> Telemetry:
	return Telemetry(True, sink)


def test_load_modes_builds_every_mode(telemetry):
	loader = ModeLoader(StaticModeSource({"main": MAIN, "resize": RESIZE}), telemetry=telemetry)

	modes = loader.load_modes()

	assert [m.id for m in modes] == ["main", "resize"]
	assert [m.name for m in modes] == ["Main", "Resize"]


def test_load_mode_collapses_and_sorts(telemetry):
	loader = ModeLoader(StaticModeSource({"main": MAIN}), telemetry=telemetry)

	mode = loader.load_mode("main")

	assert mode is not None
	labels = {b.display_label for b in mode.bindings}
	assert labels == {"Workspace 0-9", "Focus H/J/K/L", "Terminal", "Resize Mode"}

	keys = [b.display_key for b in mode.bindings]
	assert keys == sorted(keys)


def test_back_to_main_only_in_sub_modes(telemetry):
	loader = ModeLoader(StaticModeSource({"main": MAIN, "resize": RESIZE}), telemetry=telemetry)

	main = loader.load_mode("main")
	resize = loader.load_mode("resize")

	assert all(b.display_label != "Back to Main" for b in main.bindings)
	back = [b for b in resize.bindings if b.display_label == "Back to Main"]
	assert len(back) == 1
	assert back[0].category is Category.MODES


def test_mode_names_fall_back_to_main_on_error(telemetry, sink):
	loader = ModeLoader(_BrokenSource(fail_names=True), telemetry=telemetry)

	assert loader.mode_names() == ["main"]
	assert "modes.fetch_failed" in sink.event_names()


def test_mode_names_fall_back_to_main_when_empty(telemetry):
	loader = ModeLoader(StaticModeSource({}), telemetry=telemetry)

	assert loader.mode_names() == ["main"]


def test_failing_mode_is_skipped(telemetry, sink):
	loader = ModeLoader(_BrokenSource(fail_modes=("resize",)), telemetry=telemetry)

	modes = loader.load_modes()

	assert [m.id for m in modes] == ["main"]
	failed = [e for e in sink.events if e.name == "modes.fetch_failed"]
	assert failed[0].attrs == {"mode": "resize"}


def test_load_modes_records_metrics(telemetry, sink):
	loader = ModeLoader(StaticModeSource({"main": MAIN, "resize": RESIZE}), telemetry=telemetry)

	loader.load_modes()

	metrics = {m.name: m.value for m in sink.metrics}
	assert metrics["modes.loaded"] == 2.0
	assert metrics["modes.reload_ms"] >= 0.0


def test_load_modes_returns_fresh_list_each_time(telemetry):
	loader = ModeLoader(StaticModeSource({"main": MAIN}), telemetry=telemetry)

	first = loader.load_modes()
	second = loader.load_modes()

	assert first == second
	assert first is not second
