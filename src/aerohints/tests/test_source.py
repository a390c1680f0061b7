# ---------------------------------------------------------------------------
# File: test_source.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for mode sources and aerospace binary discovery.
#
# Notes:
#	- AerospaceSource runs against a fake runner; no aerospace install needed.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial tests
# ---------------------------------------------------------------------------

import json
import subprocess

import pytest

from aerohints.core.errors import ModeSourceError
from aerohints.services.source import (
	AerospaceSource,
	FileModeSource,
	ModeSource,
	StaticModeSource,
	find_binary,
)


class _FakeRunner:
	"""
	Stands in for subprocess.run; answers by argv[1:].
	"""
	def __init__(self, replies: dict[tuple[str, ...], subprocess.CompletedProcess]) -> None:
		self.replies = replies
		self.calls: list[tuple[list[str], dict]] = []

	def __call__(self, cmd, **kwargs):
		self.calls.append((cmd, kwargs))
		return self.replies[tuple(cmd[1:])]


def _ok(payload) -> subprocess.CompletedProcess:
	return subprocess.CompletedProcess(args=[], returncode=0, stdout=json.dumps(payload), stderr="")


LIST_MODES = ("list-modes", "--json")
MAIN_BINDINGS = ("config", "--get", "mode.main.binding", "--json")


def test_find_binary_returns_first_executable_candidate():
	found = find_binary(
		candidates=["/nope/aerospace", "/opt/homebrew/bin/aerospace", "/usr/local/bin/aerospace"],
		is_executable=lambda p: p != "/nope/aerospace",
	)

	assert found == "/opt/homebrew/bin/aerospace"


def test_find_binary_falls_back_to_path_lookup(monkeypatch):
	monkeypatch.setattr("aerohints.services.source.shutil.which", lambda name: None)

	assert find_binary(candidates=["/nope"], is_executable=lambda p: False) == "aerospace"


def test_aerospace_source_mode_names():
	runner = _FakeRunner({LIST_MODES: _ok([{"mode-id": "main"}, {"mode-id": "resize"}, {"other": 1}])})
	source = AerospaceSource(binary="/bin/aerospace", timeout=2.0, runner=runner)

	assert source.mode_names() == ["main", "resize"]

	cmd, kwargs = runner.calls[0]
	assert cmd == ["/bin/aerospace", "list-modes", "--json"]
	assert kwargs["timeout"] == 2.0
	assert kwargs["capture_output"] is True


def test_aerospace_source_bindings():
	runner = _FakeRunner({MAIN_BINDINGS: _ok({"alt-h": "focus left", "alt-1": "workspace 1"})})
	source = AerospaceSource(binary="aerospace", runner=runner)

	assert source.bindings("main") == {"alt-h": "focus left", "alt-1": "workspace 1"}


def test_aerospace_source_nonzero_exit_raises_with_stderr():
	failed = subprocess.CompletedProcess(args=[], returncode=1, stdout="", stderr="Can't connect to server\n")
	source = AerospaceSource(binary="aerospace", runner=_FakeRunner({LIST_MODES: failed}))

	with pytest.raises(ModeSourceError, match="Can't connect to server"):
		source.mode_names()


def test_aerospace_source_timeout_raises():
	def runner(cmd, **kwargs):
		raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

	source = AerospaceSource(binary="aerospace", timeout=1.0, runner=runner)

	with pytest.raises(ModeSourceError, match="timed out"):
		source.bindings("main")


def test_aerospace_source_missing_binary_raises():
	def runner(cmd, **kwargs):
		raise FileNotFoundError(cmd[0])

	source = AerospaceSource(binary="/missing/aerospace", runner=runner)

	with pytest.raises(ModeSourceError):
		source.mode_names()


def test_aerospace_source_invalid_json_raises():
	garbage = subprocess.CompletedProcess(args=[], returncode=0, stdout="not json", stderr="")
	source = AerospaceSource(binary="aerospace", runner=_FakeRunner({MAIN_BINDINGS: garbage}))

	with pytest.raises(ModeSourceError, match="invalid JSON"):
		source.bindings("main")


def test_aerospace_source_wrong_shape_raises():
	runner = _FakeRunner({LIST_MODES: _ok({"mode-id": "main"}), MAIN_BINDINGS: _ok(["focus left"])})
	source = AerospaceSource(binary="aerospace", runner=runner)

	with pytest.raises(ModeSourceError):
		source.mode_names()
	with pytest.raises(ModeSourceError):
		source.bindings("main")


def test_static_source():
	source = StaticModeSource({"main": {"alt-h": "focus left"}, "resize": {}})

	assert isinstance(source, ModeSource)
	assert source.mode_names() == ["main", "resize"]
	assert source.bindings("main") == {"alt-h": "focus left"}

	with pytest.raises(ModeSourceError):
		source.bindings("missing")


def test_file_source_rereads_on_every_call(tmp_path):
	path = tmp_path / "modes.json"
	path.write_text(json.dumps({"main": {"alt-h": "focus left"}}), encoding="utf-8")
	source = FileModeSource(path)

	assert source.mode_names() == ["main"]

	path.write_text(json.dumps({"main": {}, "resize": {"h": "resize width -50"}}), encoding="utf-8")

	assert source.mode_names() == ["main", "resize"]
	assert source.bindings("resize") == {"h": "resize width -50"}


def test_file_source_errors(tmp_path):
	missing = FileModeSource(tmp_path / "missing.json")
	with pytest.raises(ModeSourceError):
		missing.mode_names()

	bad = tmp_path / "bad.json"
	bad.write_text("{", encoding="utf-8")
	with pytest.raises(ModeSourceError):
		FileModeSource(bad).mode_names()

	listed = tmp_path / "list.json"
	listed.write_text("[]", encoding="utf-8")
	with pytest.raises(ModeSourceError):
		FileModeSource(listed).mode_names()

	ok = tmp_path / "ok.json"
	ok.write_text(json.dumps({"main": {}}), encoding="utf-8")
	with pytest.raises(ModeSourceError):
		FileModeSource(ok).bindings("resize")
