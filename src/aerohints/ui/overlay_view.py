# ---------------------------------------------------------------------------
# File: overlay_view.py
# ---------------------------------------------------------------------------
# Description:
#	Overlay content for one mode.
#
# Notes:
#	- Main mode: category sections spread over 1-3 columns.
#	- Sub-modes (goto, resize, service): one plain list.
#	- columns_for() / distribute_into_columns() are pure so they can be
#	  tested without a display.
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
from typing import Any, Optional, Sequence

import tkinter as tk
from tkinter import ttk

from aerohints.model.binding import Category, KeyBinding
from aerohints.model.mode import Mode
from aerohints.ui.component import Component
from aerohints.ui.mode_section import ModeSection
from aerohints.ui.theme import HEADER_STYLE


MAIN_HEADER = "Keyboard Shortcuts"
SECTION_OVERHEAD = 2
COLUMN_MIN_WIDTH = 200
MAIN_MIN_WIDTH = 500
SUB_MIN_WIDTH = 260

Group = tuple[Category, Sequence[KeyBinding]]


def columns_for(total_bindings: int) -> int:
	if total_bindings <= 10:
		return 1
	if total_bindings <= 25:
		return 2
	return 3


def _group_height(group: Group) -> int:
	return len(group[1]) + SECTION_OVERHEAD


def distribute_into_columns(groups: Sequence[Group], column_count: int) -> list[list[Group]]:
	"""
	Greedy split of groups into at most column_count columns of similar height.

	A group never spans columns; a column is closed once adding the next
	group would push it past total_height // column_count.
	"""
	if column_count <= 1:
		return [list(groups)]

	target = sum(_group_height(g) for g in groups) // column_count

	columns: list[list[Group]] = []
	current: list[Group] = []
	height = 0

	for group in groups:
		h = _group_height(group)
		if current and height + h > target and len(columns) < column_count - 1:
			columns.append(current)
			current = []
			height = 0
		current.append(group)
		height += h

	if current:
		columns.append(current)

	return columns


def header_text(mode: Mode, is_main: bool) -> str:
	return MAIN_HEADER if is_main else f"{mode.name} Mode"


@dataclass
class _Column(Component):
	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent, width=COLUMN_MIN_WIDTH)
		return frame

	def pack_options(self) -> dict[str, Any]:
		return {"side": "left", "anchor": "n", "fill": "y", "padx": 12}


@dataclass
class _Body(Component):
	def pack_options(self) -> dict[str, Any]:
		return {"fill": "both", "expand": True, "padx": 20, "pady": (12, 16)}


@dataclass
class OverlayView(Component):
	mode: Optional[Mode] = None
	is_main: bool = False

	def __post_init__(self) -> None:
		super().__post_init__()
		if self.mode is not None and not self.components:
			self.components.append(self._build_body(self.mode))

	@property
	def min_width(self) -> int:
		return MAIN_MIN_WIDTH if self.is_main else SUB_MIN_WIDTH

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent)
		if self.mode is not None:
			ttk.Label(frame, text=header_text(self.mode, self.is_main), style=HEADER_STYLE).pack()
			ttk.Separator(frame, orient="horizontal").pack(fill="x", padx=16)
		return frame

	def _build_body(self, mode: Mode) -> Component:
		body = _Body(name="body")

		if not self.is_main:
			body.components.append(ModeSection.for_bindings("", mode.bindings))
			return body

		groups = mode.grouped_bindings()
		for column_groups in distribute_into_columns(groups, columns_for(len(mode.bindings))):
			column = _Column(name="column")
			for category, bindings in column_groups:
				column.components.append(ModeSection.for_bindings(category.value, bindings))
			body.components.append(column)

		return body
