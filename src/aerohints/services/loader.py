# ---------------------------------------------------------------------------
# File: loader.py
# ---------------------------------------------------------------------------
# Description:
#	ModeLoader: ModeSource -> list[Mode].
#
# Notes:
#	- For each mode: parse, collapse, sort by display_key.
#	- Fetch failures never abort a reload:
#		- mode names unavailable (or empty) -> ["main"]
#		- bindings unavailable for a mode -> that mode is skipped
#	- Always builds a fresh list; callers swap it in whole.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Optional

from aerohints.bindings.collapse import collapse_bindings
from aerohints.bindings.parser import parse_bindings
from aerohints.core.errors import ModeSourceError
from aerohints.core.logging import get_app_logger
from aerohints.core.telemetry import Telemetry, get_telemetry
from aerohints.model.mode import MAIN_MODE, Mode, display_name
from aerohints.services.source import ModeSource


log = get_app_logger("loader")


class ModeLoader:
	def __init__(self, source: ModeSource, telemetry: Optional[Telemetry] = None) -> None:
		self.source = source
		self._telemetry = telemetry

	@property
	def telemetry(self) -> Telemetry:
		return self._telemetry or get_telemetry()

	def load_modes(self) -> list[Mode]:
		with self.telemetry.timer("modes.reload_ms"):
			modes = [m for m in (self.load_mode(name) for name in self.mode_names()) if m is not None]

		self.telemetry.counter("modes.loaded", len(modes))
		log.info("Loaded %d mode(s): %s", len(modes), ", ".join(m.id for m in modes))
		return modes

	def mode_names(self) -> list[str]:
		try:
			names = self.source.mode_names()
		except ModeSourceError as ex:
			log.warning("Failed to fetch mode names, falling back to [main]: %s", ex)
			self.telemetry.event("modes.fetch_failed", {"mode": None})
			return [MAIN_MODE]

		if not names:
			log.warning("No modes reported, falling back to [main]")
			return [MAIN_MODE]
		return names

	def load_mode(self, name: str) -> Optional[Mode]:
		try:
			raw = self.source.bindings(name)
		except ModeSourceError as ex:
			log.warning("Failed to load bindings for mode %r: %s", name, ex)
			self.telemetry.event("modes.fetch_failed", {"mode": name})
			return None

		bindings = collapse_bindings(parse_bindings(name, raw))
		bindings.sort(key=lambda b: b.display_key)

		return Mode(id=name, name=display_name(name), bindings=tuple(bindings))
