# ---------------------------------------------------------------------------
# File: events.py
# ---------------------------------------------------------------------------
# Description:
#	EventBus: explicit callback registration (publish/subscribe).
#
# Notes:
#	- Toolkit-agnostic. Whoever owns the UI thread calls publish(); the bus
#	  never hops threads on its own.
#	- A failing subscriber is logged and does not block the others.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable

from aerohints.core.logging import get_app_logger


log = get_app_logger("events")

MODE_ENTER = "mode.enter"
MODE_EXIT = "mode.exit"
RELOAD = "reload"
HOLD_TRIGGERED = "hold.triggered"
HOLD_RELEASED = "hold.released"

Callback = Callable[[Any], None]
Unsubscribe = Callable[[], None]


class EventBus:
	def __init__(self) -> None:
		self._subscribers: dict[str, list[Callback]] = {}

	def subscribe(self, topic: str, callback: Callback) -> Unsubscribe:
		"""
		Register callback(payload) for topic. Returns an unsubscribe function.
		"""
		self._subscribers.setdefault(topic, []).append(callback)

		def _unsubscribe() -> None:
			callbacks = self._subscribers.get(topic, [])
			if callback in callbacks:
				callbacks.remove(callback)

		return _unsubscribe

	def publish(self, topic: str, payload: Any = None) -> int:
		"""
		Deliver payload to every subscriber of topic. Returns delivery count.
		"""
		delivered = 0
		for callback in list(self._subscribers.get(topic, [])):
			try:
				callback(payload)
				delivered += 1
			except Exception:
				log.exception("Subscriber for %r failed", topic)
		return delivered

	def subscriber_count(self, topic: str) -> int:
		return len(self._subscribers.get(topic, []))

	def clear(self) -> None:
		self._subscribers.clear()
