# ---------------------------------------------------------------------------
# File: test_config.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for AppConfig.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial tests
# ---------------------------------------------------------------------------

import dataclasses

import pytest

from aerohints.core.config import DEFAULT_NOTIFY_PORT, DEFAULTS, AppConfig


def test_defaults_fill_missing_keys():
	cfg = AppConfig()

	assert cfg.get("show_delay") == 0.3
	assert cfg.get("notify.port") == DEFAULT_NOTIFY_PORT
	assert cfg.get("theme") == "equilux"
	assert cfg.get("no.such.key") is None


def test_explicit_default_wins_over_defaults_table():
	assert AppConfig().get("theme", "arc") == "arc"


def test_none_values_fall_through():
	cfg = AppConfig({"theme": None, "aerospace.timeout": 2.5})

	assert cfg.get("theme") == DEFAULTS["theme"]
	assert cfg.get("aerospace.timeout") == 2.5


def test_typed_getters_recover_from_bad_values():
	cfg = AppConfig({"show_delay": "0.5", "notify.port": "oops", "hold_delay": "soon"})

	assert cfg.get_float("show_delay") == 0.5
	assert cfg.get_int("notify.port") == DEFAULT_NOTIFY_PORT
	assert cfg.get_float("hold_delay") == DEFAULTS["hold_delay"]


def test_merged_returns_new_config():
	base = AppConfig({"theme": "arc"})
	merged = base.merged({"theme": "breeze", "show_delay": 1.0})

	assert base.get("theme") == "arc"
	assert merged.get("theme") == "breeze"
	assert merged.get_float("show_delay") == 1.0


def test_config_is_frozen():
	with pytest.raises(dataclasses.FrozenInstanceError):
		AppConfig().options = {}  # type: ignore[misc]
