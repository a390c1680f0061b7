# ---------------------------------------------------------------------------
# File: mode_section.py
# ---------------------------------------------------------------------------
# Description:
#	Category section: upper-cased title followed by its binding rows.
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
from typing import Any, Sequence

import tkinter as tk
from tkinter import ttk

from aerohints.model.binding import KeyBinding
from aerohints.ui.binding_row import BindingRow
from aerohints.ui.component import Component
from aerohints.ui.theme import SECTION_STYLE


@dataclass
class ModeSection(Component):
	title: str = ""

	@classmethod
	def for_bindings(cls, title: str, bindings: Sequence[KeyBinding]) -> "ModeSection":
		section = cls(title=title)
		for binding in bindings:
			section.components.append(BindingRow(binding=binding))
		return section

	def build(self, parent: tk.Misc) -> tk.Widget:
		frame = ttk.Frame(parent)
		if self.title:
			ttk.Label(frame, text=self.title.upper(), style=SECTION_STYLE).pack(anchor="w")
		return frame

	def pack_options(self) -> dict[str, Any]:
		return {"fill": "x", "anchor": "n", "pady": (0, 16)}
