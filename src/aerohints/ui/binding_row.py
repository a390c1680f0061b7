# ---------------------------------------------------------------------------
# File: binding_row.py
# ---------------------------------------------------------------------------
# Description:
#	One overlay row: key badge + action label.
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
from typing import Any, Optional

import tkinter as tk
from tkinter import ttk

from aerohints.model.binding import KeyBinding
from aerohints.ui.component import Component
from aerohints.ui.theme import KEY_STYLE, LABEL_STYLE


KEY_MIN_WIDTH = 6


@dataclass
class BindingRow(Component):
	binding: Optional[KeyBinding] = None

	key_label: Optional[ttk.Label] = field(default=None, init=False, repr=False)
	action_label: Optional[ttk.Label] = field(default=None, init=False, repr=False)

	def build(self, parent: tk.Misc) -> tk.Widget:
		if self.binding is None:
			raise ValueError("BindingRow requires a binding")

		frame = ttk.Frame(parent)

		self.key_label = ttk.Label(
			frame,
			text=self.binding.display_key,
			style=KEY_STYLE,
			width=KEY_MIN_WIDTH,
		)
		self.key_label.pack(side="left", padx=(0, 8))

		self.action_label = ttk.Label(frame, text=self.binding.display_label, style=LABEL_STYLE)
		self.action_label.pack(side="left", fill="x", expand=True)

		return frame

	def pack_options(self) -> dict[str, Any]:
		return {"fill": "x", "pady": 1}
