# ---------------------------------------------------------------------------
# File: source.py
# ---------------------------------------------------------------------------
# Description:
#	Mode sources: where raw mode names and {key: command} mappings come from.
#
# Notes:
#	- ModeSource is the only contract ModeLoader depends on.
#	- AerospaceSource shells out to the aerospace CLI with a timeout.
#	- Binary discovery is a separate function so the loader never probes
#	  the filesystem itself.
#	- Every failure surfaces as ModeSourceError.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

import getpass
import json
import os
import shutil
import subprocess
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence, runtime_checkable

from aerohints.core.errors import ModeSourceError
from aerohints.core.logging import get_app_logger


log = get_app_logger("source")

DEFAULT_BINARY = "aerospace"
DEFAULT_TIMEOUT = 5.0

Runner = Callable[..., subprocess.CompletedProcess]
ExecutableCheck = Callable[[str], bool]


@runtime_checkable
class ModeSource(Protocol):
	def mode_names(self) -> list[str]:
		...

	def bindings(self, mode: str) -> dict[str, str]:
		...


# ---------------------------------------------------------------------------
# Binary discovery
# ---------------------------------------------------------------------------

def default_candidates() -> list[str]:
	try:
		user = getpass.getuser()
	except Exception:
		user = os.environ.get("USER", "")

	return [
		f"/etc/profiles/per-user/{user}/bin/aerospace",
		"/usr/local/bin/aerospace",
		"/opt/homebrew/bin/aerospace",
	]


def _is_executable(path: str) -> bool:
	return os.path.isfile(path) and os.access(path, os.X_OK)


def find_binary(
	candidates: Optional[Sequence[str]] = None,
	is_executable: Optional[ExecutableCheck] = None,
) -> str:
	"""
	First executable candidate, else whatever "aerospace" resolves to on PATH.
	"""
	check = is_executable or _is_executable
	for path in candidates if candidates is not None else default_candidates():
		if check(path):
			return path
	return shutil.which(DEFAULT_BINARY) or DEFAULT_BINARY


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

class AerospaceSource:
	"""
	Reads modes from the running aerospace instance.

		aerospace list-modes --json
		aerospace config --get mode.<name>.binding --json
	"""

	def __init__(
		self,
		binary: Optional[str] = None,
		timeout: float = DEFAULT_TIMEOUT,
		runner: Optional[Runner] = None,
	) -> None:
		self.binary = binary or find_binary()
		self.timeout = timeout
		self._run = runner or subprocess.run

	def mode_names(self) -> list[str]:
		data = self._query_json(["list-modes", "--json"])
		if not isinstance(data, list):
			raise ModeSourceError("list-modes returned unexpected JSON (expected a list)")

		names: list[str] = []
		for item in data:
			if isinstance(item, dict) and isinstance(item.get("mode-id"), str):
				names.append(item["mode-id"])
		return names

	def bindings(self, mode: str) -> dict[str, str]:
		data = self._query_json(["config", "--get", f"mode.{mode}.binding", "--json"])
		return _as_binding_map(data, f"mode {mode!r}")

	def _query_json(self, args: list[str]) -> Any:
		output = self._invoke(args)
		try:
			return json.loads(output)
		except json.JSONDecodeError as ex:
			raise ModeSourceError(f"aerospace {' '.join(args)} returned invalid JSON: {ex}") from ex

	def _invoke(self, args: list[str]) -> str:
		cmd = [self.binary, *args]
		log.debug("Running %s", " ".join(cmd))

		try:
			proc = self._run(cmd, capture_output=True, text=True, timeout=self.timeout)
		except subprocess.TimeoutExpired as ex:
			raise ModeSourceError(
				f"aerospace {' '.join(args)} timed out after {self.timeout:.0f}s"
			) from ex
		except OSError as ex:
			raise ModeSourceError(f"Failed to run {self.binary}: {ex}") from ex

		if proc.returncode != 0:
			stderr = (proc.stderr or "").strip()
			raise ModeSourceError(
				f"aerospace {' '.join(args)} exited with status {proc.returncode}: {stderr}"
			)

		return proc.stdout or ""

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} binary={self.binary!r} timeout={self.timeout}>"


class StaticModeSource:
	"""
	In-memory source: {mode: {key: command}}.
	"""

	def __init__(self, data: Mapping[str, Mapping[str, str]]) -> None:
		self._data = {mode: dict(raw) for mode, raw in data.items()}

	def mode_names(self) -> list[str]:
		return list(self._data)

	def bindings(self, mode: str) -> dict[str, str]:
		try:
			return dict(self._data[mode])
		except KeyError as ex:
			raise ModeSourceError(f"Unknown mode {mode!r}") from ex


class FileModeSource:
	"""
	JSON snapshot on disk: {"main": {"alt-h": "focus left", ...}, ...}.

	Re-read on every call so a reload picks up edits.
	"""

	def __init__(self, path: str | Path) -> None:
		self.path = Path(path)

	def mode_names(self) -> list[str]:
		return list(self._load())

	def bindings(self, mode: str) -> dict[str, str]:
		data = self._load()
		if mode not in data:
			raise ModeSourceError(f"Mode {mode!r} not found in {self.path}")
		return _as_binding_map(data[mode], f"mode {mode!r} in {self.path}")

	def _load(self) -> dict[str, Any]:
		try:
			data = json.loads(self.path.read_text(encoding="utf-8"))
		except OSError as ex:
			raise ModeSourceError(f"Cannot read {self.path}: {ex}") from ex
		except json.JSONDecodeError as ex:
			raise ModeSourceError(f"Invalid JSON in {self.path}: {ex}") from ex

		if not isinstance(data, dict):
			raise ModeSourceError(f"{self.path} must contain a JSON object of modes")
		return data


def _as_binding_map(data: Any, where: str) -> dict[str, str]:
	if not isinstance(data, dict):
		raise ModeSourceError(f"Bindings for {where} are not a JSON object")
	return {str(k): str(v) for k, v in data.items()}
