# ---------------------------------------------------------------------------
# File: scheduler.py
# ---------------------------------------------------------------------------
# Description:
#	Delayed-callback abstraction used by the overlay and hold detection.
#
# Notes:
#	- TkScheduler runs callbacks on the Tk thread via widget.after().
#	- Tests use their own fake with the same two methods.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Protocol

import tkinter as tk


class Scheduler(Protocol):
	def call_later(self, delay: float, callback: Callable[[], None]) -> Any: ...
	def cancel(self, handle: Any) -> None: ...


class TkScheduler:
	def __init__(self, widget: tk.Misc) -> None:
		self._widget = widget

	def call_later(self, delay: float, callback: Callable[[], None]) -> str:
		return self._widget.after(max(0, int(delay * 1000)), callback)

	def cancel(self, handle: Any) -> None:
		try:
			self._widget.after_cancel(handle)
		except tk.TclError:
			# Already fired or widget gone.
			pass
