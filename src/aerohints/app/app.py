# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#	OverlayApp: the aerohints daemon.
#
# Notes:
#	- The Tk root stays withdrawn; only the overlay Toplevel is ever shown.
#	- Wiring:
#		NotificationListener --(poll on Tk thread)--> EventBus
#		HoldDetector -----------------------------> EventBus
#		EventBus ---------------------------------> OverlayController
#		OverlayController ------------------------> OverlayWindow
#	- Overlay-local keys go KeyMap -> CommandRegistry -> OverlayController.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# 10/19/2026	Dana K. Ortiz				Note hold binding needs window focus
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional

import tkinter as tk

from aerohints.app.commands import CommandContext, CommandRegistry
from aerohints.app.default_commands import DISMISS, register_default_commands
from aerohints.app.default_keys import build_default_keymap
from aerohints.app.hold import HoldDetector
from aerohints.app.keys import KeyMap
from aerohints.app.overlay import OverlayController
from aerohints.app.scheduler import TkScheduler
from aerohints.core.config import AppConfig
from aerohints.core.errors import NotificationError
from aerohints.core.logging import get_app_logger
from aerohints.core.telemetry import get_telemetry
from aerohints.services.events import EventBus
from aerohints.services.loader import ModeLoader
from aerohints.services.notify import NotificationListener
from aerohints.services.source import ModeSource
from aerohints.ui.theme import apply_theme
from aerohints.ui.window import OverlayWindow


log = get_app_logger()

NOTIFY_POLL_MS = 50
HOLD_KEY = "Alt_L"


class OverlayApp(tk.Tk):
	def __init__(
		self,
		source: ModeSource,
		cfg: AppConfig | dict[str, Any] | None = None,
		*,
		listen: bool = True,
	) -> None:
		super().__init__()

		self.cfg = cfg if isinstance(cfg, AppConfig) else AppConfig(dict(cfg or {}))
		self.title("aerohints")
		self.withdraw()

		self.style = apply_theme(self, self.cfg.get("theme"))

		self.bus = EventBus()
		self.scheduler = TkScheduler(self)
		self.loader = ModeLoader(source, telemetry=get_telemetry())

		# -------------------------------------------------------------------
		# Commands + overlay-local keys
		# -------------------------------------------------------------------

		self.commands = CommandRegistry()
		register_default_commands(self.commands)
		self.keymap: KeyMap = build_default_keymap()

		# -------------------------------------------------------------------
		# Overlay
		# -------------------------------------------------------------------

		self.window = OverlayWindow(
			self,
			on_dismiss=lambda: self.execute(DISMISS),
			on_key=self.route_keyseq,
			keyseqs=tuple(k for k, _ in self.keymap.items()),
		)
		self.overlay = OverlayController(
			self.loader,
			self.window,
			self.scheduler,
			show_delay=self.cfg.get_float("show_delay"),
		)
		self.overlay.attach(self.bus)

		self.hold = HoldDetector(self.scheduler, self.bus, hold_delay=self.cfg.get_float("hold_delay"))
		# Only fires while one of our windows has keyboard focus; see hold.py.
		self.bind_all(f"<KeyPress-{HOLD_KEY}>", lambda _e: self.hold.press())
		self.bind_all(f"<KeyRelease-{HOLD_KEY}>", lambda _e: self.hold.release())

		# -------------------------------------------------------------------
		# Notifications
		# -------------------------------------------------------------------

		self.listener: Optional[NotificationListener] = None
		if listen:
			self.listener = NotificationListener(
				host=str(self.cfg.get("notify.host")),
				port=self.cfg.get_int("notify.port"),
			)

		self.protocol("WM_DELETE_WINDOW", self.shutdown)

	# -----------------------------------------------------------------------
	# Command routing
	# -----------------------------------------------------------------------

	def context(self, **extra: Any) -> CommandContext:
		return CommandContext(
			app=self,
			services={"overlay": self.overlay, "bus": self.bus},
			extra=extra,
		)

	def execute(self, command_id: str, **extra: Any) -> Any:
		return self.commands.execute(command_id, self.context(**extra))

	def route_keyseq(self, keyseq: str) -> bool:
		command_id = self.keymap.resolve(keyseq)
		if not command_id:
			return False
		self.execute(command_id, keyseq=keyseq)
		return True

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def start(self) -> None:
		self.overlay.reload()

		if self.listener is not None:
			try:
				self.listener.start()
			except NotificationError as ex:
				log.error("Notifications disabled: %s", ex)
				self.listener = None
			else:
				self.after(NOTIFY_POLL_MS, self._poll_notifications)

		log.info("Daemon started")

	def run(self) -> None:
		self.start()
		self.mainloop()

	def shutdown(self) -> None:
		if self.listener is not None:
			self.listener.stop()
			self.listener = None
		self.window.destroy()
		self.destroy()
		log.info("Daemon stopped")

	def _poll_notifications(self) -> None:
		if self.listener is None:
			return
		self.listener.dispatch(self.bus)
		self.after(NOTIFY_POLL_MS, self._poll_notifications)

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} modes={len(self.overlay.modes)}>"
