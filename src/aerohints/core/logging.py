# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Logging setup for aerohints (stdlib logging).
#
# Notes:
#	- Safe to call before the overlay exists (no Tk dependencies).
#	- Idempotent: repeated init with the same settings keeps one set of handlers.
#	- The daemon runs in the background, so a log file is the usual sink;
#	  the console handler is mostly for --dump and debugging.
#
#	Supported cfg keys (dotted form wins over the flat alias):
#	- "logging.level"		/ "log_level"		(default: "INFO")
#	- "logging.console"		/ "log_console"		(default: True)
#	- "logging.file"		/ "log_file"		(default: None)
#	- "logging.file_mode"	/ "log_file_mode"	(default: "a")
#	- "logging.reset_root"	/ "log_reset_root"	(default: True)
#	- "logging.format"		/ "log_format"
#	- "logging.datefmt"		/ "log_datefmt"		(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


APP_LOGGER_NAME = "aerohints"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an aerohints logger.

	Examples:
		get_app_logger()			-> aerohints.app
		get_app_logger("loader")	-> aerohints.app.loader
		get_app_logger("notify")	-> aerohints.app.notify
	"""
	base = f"{APP_LOGGER_NAME}.app"
	if component:
		return logging.getLogger(f"{base}.{component}")
	return logging.getLogger(base)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Configure the root logger from cfg.

	Args:
		cfg:
			Anything with cfg.get(key, default) (AppConfig, dict) or None.
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	level = _coerce_level(_cfg_first(cfg, ("logging.level", "log_level"), "INFO"))
	console_enabled = bool(_cfg_first(cfg, ("logging.console", "log_console"), True))
	log_file = _cfg_first(cfg, ("logging.file", "log_file"), None)
	file_mode = _coerce_file_mode(_cfg_first(cfg, ("logging.file_mode", "log_file_mode"), "a"))
	reset_root = bool(_cfg_first(cfg, ("logging.reset_root", "log_reset_root"), True))
	fmt = str(_cfg_first(cfg, ("logging.format", "log_format"), DEFAULT_FORMAT))
	datefmt = str(_cfg_first(cfg, ("logging.datefmt", "log_datefmt"), DEFAULT_DATEFMT))

	log_file = str(log_file) if log_file else None

	signature: tuple[Any, ...] = (
		level,
		console_enabled,
		log_file,
		file_mode,
		reset_root,
		fmt,
		datefmt,
	)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	_configure_root_logger(
		level=level,
		console_enabled=console_enabled,
		log_file=log_file,
		file_mode=file_mode,
		fmt=fmt,
		datefmt=datefmt,
		reset_root=reset_root,
	)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_first(cfg: Any | None, keys: tuple[str, ...], default: Any) -> Any:
	"""
	Return the first non-None value among keys, else default.
	"""
	for key in keys:
		value = _cfg_get(cfg, key, None)
		if value is not None:
			return value
	return default


def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		try:
			return getter(key, default)
		except Exception:
			return default

	try:
		return cfg[key]  # type: ignore[index]
	except Exception:
		return default


def _coerce_level(level: Any) -> int:
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		return getattr(logging, val, logging.INFO)

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	# Only "a" or "w" are accepted for the FileHandler.
	if isinstance(mode, str):
		val = mode.strip().lower()
		if val in ("a", "w"):
			return val
	return "a"


def _configure_root_logger(
	*,
	level: int,
	console_enabled: bool,
	log_file: str | None,
	file_mode: str,
	fmt: str,
	datefmt: str,
	reset_root: bool,
) -> None:
	root = logging.getLogger()
	root.setLevel(level)

	if reset_root:
		for h in list(root.handlers):
			root.removeHandler(h)

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console_enabled:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if log_file:
		_ensure_parent_dir(log_file)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		root.addHandler(fh)


def _ensure_parent_dir(path: str) -> None:
	parent = os.path.dirname(os.path.abspath(path))
	if parent:
		os.makedirs(parent, exist_ok=True)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	global _INITIALIZED, _CONFIG_SIGNATURE
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
