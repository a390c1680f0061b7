# ---------------------------------------------------------------------------
# File: collapse.py
# ---------------------------------------------------------------------------
# Description:
#	Collapse numeric (0-9) and directional (h/j/k/l) binding families into
#	one summary row each.
#
# Notes:
#	- Group key: (category, modifier prefix, "num" | "dir").
#	- Only groups with at least COLLAPSE_THRESHOLD members collapse.
#	- Output: ungrouped bindings in input order, then groups in first-seen
#	  order. Sorting for display is the caller's job.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# 10/19/2026	Dana K. Ortiz				Keep first stripped char in numeric label
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Iterable, Literal

from aerohints.bindings.keyformat import format_modifiers, split_modifiers
from aerohints.model.binding import Category, KeyBinding


COLLAPSE_THRESHOLD = 4

DIRECTIONAL_KEYS = frozenset({"h", "j", "k", "l"})
DIRECTION_WORDS = frozenset({"Left", "Right", "Up", "Down"})

NUMERIC_DISPLAY = "0-9"
DIRECTIONAL_DISPLAY = "H/J/K/L"

GroupKind = Literal["num", "dir"]
GroupKey = tuple[Category, str, GroupKind]


def is_numeric_suffix(suffix: str) -> bool:
	return len(suffix) == 1 and suffix.isdigit()


def is_directional_suffix(suffix: str) -> bool:
	return suffix in DIRECTIONAL_KEYS


def group_key(binding: KeyBinding) -> GroupKey | None:
	prefix, suffix = split_modifiers(binding.key)
	if is_numeric_suffix(suffix):
		return (binding.category, prefix, "num")
	if is_directional_suffix(suffix):
		return (binding.category, prefix, "dir")
	return None


def collapse_bindings(bindings: Iterable[KeyBinding]) -> list[KeyBinding]:
	ungrouped: list[KeyBinding] = []
	groups: dict[GroupKey, list[KeyBinding]] = {}

	for binding in bindings:
		gk = group_key(binding)
		if gk is None:
			ungrouped.append(binding)
		else:
			groups.setdefault(gk, []).append(binding)

	result = list(ungrouped)
	for (_, _, kind), members in groups.items():
		if len(members) >= COLLAPSE_THRESHOLD:
			result.append(collapse_group(members, kind))
		else:
			result.extend(members)

	return result


def collapse_group(group: list[KeyBinding], kind: GroupKind) -> KeyBinding:
	first = group[0]
	prefix, _ = split_modifiers(first.key)
	mods = format_modifiers(prefix)

	if kind == "num":
		display_key = f"{mods}{NUMERIC_DISPLAY}"
		label = numeric_label(group)
	else:
		display_key = f"{mods}{DIRECTIONAL_DISPLAY}"
		label = directional_label(group)

	return KeyBinding(
		key=first.key,
		display_key=display_key,
		display_label=label,
		category=first.category,
	)


def numeric_label(group: list[KeyBinding]) -> str:
	"""
	["Workspace 0", "Workspace 1", ...] -> "Workspace 0-9"

	Trailing digits and spaces are stripped from the first label, whatever
	they mean, except the first stripped character: an all-digit "12"
	becomes "1 0-9" rather than " 0-9".
	"""
	first = group[0].display_label
	end = len(first)
	while end > 0 and (first[end - 1].isdigit() or first[end - 1] == " "):
		end -= 1
	kept = first[:end + 1] if end < len(first) else first
	return f"{kept.strip()} {NUMERIC_DISPLAY}"


def directional_label(group: list[KeyBinding]) -> str:
	"""
	["Focus Left", "Focus Down", ...] -> "Focus H/J/K/L"
	"""
	for binding in group:
		words = [w for w in binding.display_label.split(" ") if w and w not in DIRECTION_WORDS]
		if words:
			return f"{' '.join(words)} {DIRECTIONAL_DISPLAY}"
	return group[0].display_label
