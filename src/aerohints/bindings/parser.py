# ---------------------------------------------------------------------------
# File: parser.py
# ---------------------------------------------------------------------------
# Description:
#	One mode's raw {key: command} mapping -> list[KeyBinding].
#
# Notes:
#	- Only the first meaningful fragment of a command drives the label;
#	  later fragments are side effects.
#	- Noise fragments (sketchybar triggers, our own --notify calls, a bare
#	  "mode main") are dropped before classification.
#	- Entries are visited in sorted key order so output never depends on
#	  the mapping's iteration order.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# 10/19/2026	Dana K. Ortiz				Drop only --notify calls as notify noise
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Mapping, Optional

from aerohints.bindings.classifier import classify
from aerohints.bindings.keyformat import format_key
from aerohints.model.binding import Category, KeyBinding
from aerohints.model.mode import MAIN_MODE


SKETCHYBAR_TRIGGER = "sketchybar --trigger"
NOTIFY_FLAG = "--notify"
NOTIFY_MARKER = "aerohints"
RETURN_TO_MAIN = "mode main"
BACK_TO_MAIN_LABEL = "Back to Main"


def split_fragments(command: str) -> list[str]:
	return [part.strip() for part in command.split(";")]


def is_noise(fragment: str) -> bool:
	if not fragment:
		return True
	if SKETCHYBAR_TRIGGER in fragment:
		return True
	if NOTIFY_FLAG in fragment and NOTIFY_MARKER in fragment.lower():
		return True
	return fragment == RETURN_TO_MAIN


def meaningful_fragments(command: str) -> list[str]:
	return [f for f in split_fragments(command) if not is_noise(f)]


def parse_binding(mode_name: str, key: str, command: str) -> Optional[KeyBinding]:
	"""
	Build one KeyBinding, or None when it has nothing to show.

	A binding whose only effect is returning to main is shown as
	"Back to Main" in sub-modes and dropped in main.
	"""
	fragments = meaningful_fragments(command)

	if not fragments:
		if mode_name == MAIN_MODE:
			return None
		label, category = BACK_TO_MAIN_LABEL, Category.MODES
	else:
		label, category = classify(fragments[0])

	return KeyBinding(
		key=key,
		display_key=format_key(key),
		display_label=label,
		category=category,
	)


def parse_bindings(mode_name: str, raw: Mapping[str, str]) -> list[KeyBinding]:
	result: list[KeyBinding] = []
	for key in sorted(raw):
		binding = parse_binding(mode_name, key, raw[key])
		if binding is not None:
			result.append(binding)
	return result
