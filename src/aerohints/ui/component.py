# ---------------------------------------------------------------------------
# File: component.py
# ---------------------------------------------------------------------------
# Description:
#	Base UI Component for the overlay (Tkinter).
#
# Notes:
#	Composite pattern: a component owns child components. The overlay is
#	rebuilt from scratch on each show, so there is no partial update path.
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


@dataclass
class Component:
	"""
	Base UI component.

	- mount() builds self.root, then mounts children into get_child_parent().
	- layout() packs root using pack_options(), then lays out children.
	- destroy() tears down children then root.
	"""
	name: Optional[str] = None

	components: list["Component"] = field(default_factory=list)

	parent: Optional[tk.Misc] = field(default=None, init=False, repr=False)
	root: Optional[tk.Widget] = field(default=None, init=False, repr=False)

	def __post_init__(self) -> None:
		if not self.name:
			self.name = self.__class__.__name__

	@property
	def mounted(self) -> bool:
		return self.root is not None

	def mount(self, parent: tk.Misc) -> None:
		self.parent = parent
		self.root = self.build(parent)

		for child in self.components:
			child.mount(self.get_child_parent())

	def build(self, parent: tk.Misc) -> tk.Widget:
		return ttk.Frame(parent)

	def get_child_parent(self) -> tk.Misc:
		if self.root is None:
			raise RuntimeError(f"Component not mounted: {self.name!r}")
		return self.root

	def add_component(self, child: "Component") -> None:
		self.components.append(child)

		if self.root is not None:
			child.mount(self.get_child_parent())
			child.layout()

	def pack_options(self) -> dict[str, Any]:
		return {"fill": "both", "expand": True}

	def layout(self) -> None:
		if self.root is None:
			return

		self.root.pack(**self.pack_options())

		for child in self.components:
			child.layout()

	def destroy(self) -> None:
		for child in list(self.components):
			child.destroy()
		self.components.clear()

		if self.root is not None:
			self.root.destroy()
			self.root = None
