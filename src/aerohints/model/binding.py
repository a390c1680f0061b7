# ---------------------------------------------------------------------------
# File: binding.py
# ---------------------------------------------------------------------------
# Description:
#	KeyBinding + Category models.
#
# Notes:
#	- Category member order is display order (grouping and columns).
#	- KeyBinding is immutable; equality is structural.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
	APPS = "Apps"
	FOCUS = "Focus"
	MOVE = "Move"
	WORKSPACES = "Workspaces"
	LAYOUT = "Layout"
	MODES = "Modes"
	NAVIGATION = "Navigation"
	OTHER = "Other"

	@classmethod
	def ordered(cls) -> list["Category"]:
		return list(cls)

	def __str__(self) -> str:
		return self.value


@dataclass(frozen=True, slots=True)
class KeyBinding:
	"""
	KeyBinding

	One row in the overlay.

	- key:				Raw key from aerospace (e.g. "alt-h", "esc"); kept for grouping.
	- display_key:		Formatted key (e.g. "⌥ H", "⎋", "⌥ 0-9").
	- display_label:	Human-readable action (e.g. "Focus Left", "Workspace 0-9").
	- category:			Category used for grouping.
	"""
	key: str
	display_key: str
	display_label: str
	category: Category
