# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	Runtime configuration for aerohints.
#
# Notes:
#	- AppConfig is a thin read-only wrapper over a dict; the CLI builds it
#	  from command-line arguments.
#	- Nothing is persisted. Defaults live in DEFAULTS.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


DEFAULT_NOTIFY_HOST = "127.0.0.1"
DEFAULT_NOTIFY_PORT = 47811

DEFAULTS: dict[str, Any] = {
	"show_delay": 0.3,
	"hold_delay": 0.3,
	"notify.host": DEFAULT_NOTIFY_HOST,
	"notify.port": DEFAULT_NOTIFY_PORT,
	"aerospace.binary": None,
	"aerospace.timeout": 5.0,
	"theme": "equilux",
	"telemetry_enabled": False,
	"telemetry_sink": "null",
}


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Read-only config lookup with DEFAULTS as the fallback layer.
	"""
	options: dict[str, Any] = field(default_factory=dict)

	def get(self, key: str, default: Any = None) -> Any:
		if key in self.options and self.options[key] is not None:
			return self.options[key]
		if default is None:
			return DEFAULTS.get(key)
		return default

	def get_float(self, key: str) -> float:
		value = self.get(key)
		try:
			return float(value)
		except (TypeError, ValueError):
			return float(DEFAULTS[key])

	def get_int(self, key: str) -> int:
		value = self.get(key)
		try:
			return int(value)
		except (TypeError, ValueError):
			return int(DEFAULTS[key])

	def merged(self, overrides: dict[str, Any]) -> "AppConfig":
		options = dict(self.options)
		options.update(overrides)
		return AppConfig(options)
