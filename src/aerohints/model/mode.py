# ---------------------------------------------------------------------------
# File: mode.py
# ---------------------------------------------------------------------------
# Description:
#	Mode model: a named aerospace mode and its display-ready bindings.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# 10/19/2026	Dana K. Ortiz				Capitalize mode names on spaces only
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field

from aerohints.model.binding import Category, KeyBinding


MAIN_MODE = "main"


@dataclass(frozen=True, slots=True)
class Mode:
	"""
	Mode

	- id:		Raw mode id ("main", "goto", "resize", "service").
	- name:		Display name ("Main", "Resize").
	- bindings:	Collapsed bindings sorted by display_key.
	"""
	id: str
	name: str
	bindings: tuple[KeyBinding, ...] = field(default_factory=tuple)

	@property
	def is_main(self) -> bool:
		return self.id == MAIN_MODE

	def grouped_bindings(self) -> list[tuple[Category, list[KeyBinding]]]:
		"""
		Bindings grouped by category, in Category order, empty groups skipped.
		"""
		groups: dict[Category, list[KeyBinding]] = {}
		for binding in self.bindings:
			groups.setdefault(binding.category, []).append(binding)

		return [(cat, groups[cat]) for cat in Category.ordered() if groups.get(cat)]


def capitalize_words(text: str) -> str:
	"""
	Upper-case the first letter of each space-separated word, lower-case the
	rest. Hyphens and digits do not start a new word ("dfs-next" -> "Dfs-next").
	"""
	return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def display_name(mode_id: str) -> str:
	if mode_id == MAIN_MODE:
		return "Main"
	return capitalize_words(mode_id)
