# ---------------------------------------------------------------------------
# File: window.py
# ---------------------------------------------------------------------------
# Description:
#	OverlayWindow: borderless, top-most Toplevel hosting an OverlayView.
#
# Notes:
#	- Implements the OverlayView protocol used by OverlayController
#	  (show(mode, is_main) / hide()).
#	- The view is rebuilt on every show; the window itself is reused.
#	- Losing focus (click outside) calls on_dismiss.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Callable, Optional

import tkinter as tk

from aerohints.core.logging import get_app_logger
from aerohints.model.mode import Mode
from aerohints.ui.overlay_view import OverlayView


log = get_app_logger("window")

WINDOW_ALPHA = 0.95

KeyHandler = Callable[[str], None]


class OverlayWindow:
	def __init__(
		self,
		master: tk.Misc,
		*,
		on_dismiss: Optional[Callable[[], None]] = None,
		on_key: Optional[KeyHandler] = None,
		keyseqs: tuple[str, ...] = (),
	) -> None:
		self.master = master
		self.on_dismiss = on_dismiss
		self.on_key = on_key
		self.keyseqs = keyseqs

		self._top: Optional[tk.Toplevel] = None
		self._view: Optional[OverlayView] = None

	@property
	def visible(self) -> bool:
		return self._top is not None and self._top.winfo_viewable() == 1

	@property
	def view(self) -> Optional[OverlayView]:
		return self._view

	def show(self, mode: Mode, is_main: bool) -> None:
		top = self._ensure_toplevel()

		if self._view is not None:
			self._view.destroy()

		self._view = OverlayView(mode=mode, is_main=is_main)
		self._view.mount(top)
		self._view.layout()

		self._place(top, self._view.min_width)
		top.deiconify()
		top.lift()
		top.focus_force()
		log.debug("Showing %s (%d bindings)", mode.id, len(mode.bindings))

	def hide(self) -> None:
		if self._top is not None:
			self._top.withdraw()

	def destroy(self) -> None:
		if self._view is not None:
			self._view.destroy()
			self._view = None
		if self._top is not None:
			self._top.destroy()
			self._top = None

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _ensure_toplevel(self) -> tk.Toplevel:
		if self._top is not None:
			return self._top

		top = tk.Toplevel(self.master)
		top.withdraw()
		top.overrideredirect(True)
		top.attributes("-topmost", True)
		try:
			top.attributes("-alpha", WINDOW_ALPHA)
		except tk.TclError:
			pass

		top.bind("<FocusOut>", self._on_focus_out)
		for keyseq in self.keyseqs:
			top.bind(keyseq, lambda _e, k=keyseq: self._on_key(k))

		self._top = top
		return top

	def _place(self, top: tk.Toplevel, min_width: int) -> None:
		top.update_idletasks()
		width = max(min_width, top.winfo_reqwidth())
		height = top.winfo_reqheight()

		screen_w = top.winfo_screenwidth()
		screen_h = top.winfo_screenheight()
		x = max(0, (screen_w - width) // 2)
		y = max(0, (screen_h - height) // 2)

		top.geometry(f"{width}x{height}+{x}+{y}")

	def _on_focus_out(self, event: tk.Event) -> None:
		# FocusOut also fires for child widgets; only react to the window itself.
		if event.widget is not self._top:
			return
		if self.on_dismiss is not None:
			self.on_dismiss()

	def _on_key(self, keyseq: str) -> str:
		if self.on_key is not None:
			self.on_key(keyseq)
		return "break"
