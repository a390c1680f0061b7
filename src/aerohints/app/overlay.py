# ---------------------------------------------------------------------------
# File: overlay.py
# ---------------------------------------------------------------------------
# Description:
#	OverlayController: which mode to show, when to show it, when to hide it.
#
# Notes:
#	- States: IDLE -> WAITING (show delay running) -> VISIBLE.
#	- A dismiss during WAITING cancels the pending show, so quick mode
#	  switches never flash the overlay.
#	- reload() builds a new {id: Mode} dict and swaps it in with a single
#	  assignment; the view only ever sees complete Mode objects.
#	- Rendering is delegated to an OverlayView (see aerohints.ui.window).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Protocol

from aerohints.app.scheduler import Scheduler
from aerohints.core.logging import get_app_logger
from aerohints.core.telemetry import Telemetry, get_telemetry
from aerohints.model.mode import MAIN_MODE, Mode
from aerohints.services import events
from aerohints.services.events import EventBus
from aerohints.services.loader import ModeLoader


log = get_app_logger("overlay")


class OverlayState(Enum):
	IDLE = "idle"
	WAITING = "waiting"
	VISIBLE = "visible"


class OverlayView(Protocol):
	def show(self, mode: Mode, is_main: bool) -> None: ...
	def hide(self) -> None: ...


class OverlayController:
	def __init__(
		self,
		loader: ModeLoader,
		view: OverlayView,
		scheduler: Scheduler,
		*,
		show_delay: float = 0.3,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self.loader = loader
		self.view = view
		self.scheduler = scheduler
		self.show_delay = show_delay
		self._telemetry = telemetry

		self._modes: dict[str, Mode] = {}
		self._state = OverlayState.IDLE
		self._pending: Any = None

		self.current_mode: Optional[Mode] = None
		self.is_main_mode = False

	@property
	def state(self) -> OverlayState:
		return self._state

	@property
	def modes(self) -> Mapping[str, Mode]:
		return self._modes

	@property
	def telemetry(self) -> Telemetry:
		return self._telemetry or get_telemetry()

	# -----------------------------------------------------------------------
	# Wiring
	# -----------------------------------------------------------------------

	def attach(self, bus: EventBus) -> None:
		bus.subscribe(events.MODE_ENTER, lambda mode: self.request_show_mode(mode or MAIN_MODE))
		bus.subscribe(events.MODE_EXIT, lambda _: self.dismiss())
		bus.subscribe(events.RELOAD, lambda _: self.reload())
		bus.subscribe(events.HOLD_TRIGGERED, lambda _: self.request_show_main())
		bus.subscribe(events.HOLD_RELEASED, lambda _: self.on_hold_released())

	# -----------------------------------------------------------------------
	# Model
	# -----------------------------------------------------------------------

	def reload(self) -> int:
		modes = self.loader.load_modes()
		self._modes = {m.id: m for m in modes}

		# Keep an open overlay pointing at fresh data (or close it if its mode vanished).
		if self.current_mode is not None:
			fresh = self._modes.get(self.current_mode.id)
			if fresh is None:
				self.dismiss()
			else:
				self.current_mode = fresh
				if self._state == OverlayState.VISIBLE:
					self.view.show(fresh, self.is_main_mode)

		self.telemetry.event("overlay.reloaded", {"modes": len(self._modes)})
		return len(self._modes)

	# -----------------------------------------------------------------------
	# Show / hide
	# -----------------------------------------------------------------------

	def request_show_mode(self, name: str) -> bool:
		mode = self._modes.get(name)
		if mode is None:
			log.debug("No bindings loaded for mode %r; ignoring", name)
			return False

		self.current_mode = mode
		self.is_main_mode = name == MAIN_MODE
		self._request_show()
		return True

	def request_show_main(self) -> bool:
		return self.request_show_mode(MAIN_MODE)

	def dismiss(self) -> None:
		self._cancel_pending()
		if self._state == OverlayState.IDLE:
			return

		self._state = OverlayState.IDLE
		self.view.hide()

	def on_hold_released(self) -> None:
		if self.is_main_mode:
			self.dismiss()

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _request_show(self) -> None:
		self._cancel_pending()
		self._state = OverlayState.WAITING
		self._pending = self.scheduler.call_later(self.show_delay, self._show_now)

	def _show_now(self) -> None:
		self._pending = None
		if self._state != OverlayState.WAITING or self.current_mode is None:
			return

		self._state = OverlayState.VISIBLE
		self.view.show(self.current_mode, self.is_main_mode)
		self.telemetry.event("overlay.shown", {"mode": self.current_mode.id})

	def _cancel_pending(self) -> None:
		if self._pending is not None:
			self.scheduler.cancel(self._pending)
			self._pending = None
