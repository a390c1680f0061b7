# ---------------------------------------------------------------------------
# File: hold.py
# ---------------------------------------------------------------------------
# Description:
#	HoldDetector: a modifier held for hold_delay seconds -> "hold.triggered";
#	releasing it afterwards -> "hold.released".
#
# Notes:
#	- Only the press/release signals are handled here; where they come from
#	  (Tk key events, a global hook) is up to the caller.
#	- The app feeds it from Tk key bindings, and Tk only delivers those while
#	  an aerohints window has keyboard focus. The overlay is normally hidden
#	  and unfocused, so hold-to-show rarely fires until a global key source
#	  (an OS-level event tap) calls press/release instead.
#	- A release before the delay cancels silently.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# 10/19/2026	Dana K. Ortiz				Document Tk focus limitation of key source
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any

from aerohints.app.scheduler import Scheduler
from aerohints.services import events
from aerohints.services.events import EventBus


class HoldDetector:
	def __init__(self, scheduler: Scheduler, bus: EventBus, hold_delay: float = 0.3) -> None:
		self.scheduler = scheduler
		self.bus = bus
		self.hold_delay = hold_delay

		self._pending: Any = None
		self._triggered = False

	@property
	def triggered(self) -> bool:
		return self._triggered

	def press(self) -> None:
		# Key auto-repeat delivers repeated presses; keep the first timer.
		if self._pending is not None or self._triggered:
			return
		self._pending = self.scheduler.call_later(self.hold_delay, self._fire)

	def release(self) -> None:
		self._cancel()
		if self._triggered:
			self._triggered = False
			self.bus.publish(events.HOLD_RELEASED)

	def _fire(self) -> None:
		self._pending = None
		self._triggered = True
		self.bus.publish(events.HOLD_TRIGGERED)

	def _cancel(self) -> None:
		if self._pending is not None:
			self.scheduler.cancel(self._pending)
			self._pending = None
