# ---------------------------------------------------------------------------
# File: notify.py
# ---------------------------------------------------------------------------
# Description:
#	Inter-process notifications between aerospace bindings and the daemon.
#
# Notes:
#	- Transport: one UDP datagram per notification on the loopback interface.
#	- Wire format: a JSON object, e.g.
#		{"name": "mode.enter", "mode": "resize"}
#		{"name": "mode.exit"}
#		{"name": "reload"}
#	- The listener thread only decodes and queues. The UI thread drains the
#	  queue and publishes onto the EventBus.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

import json
import queue
import socket
import threading
from dataclasses import dataclass
from typing import Optional

from aerohints.core.config import DEFAULT_NOTIFY_HOST, DEFAULT_NOTIFY_PORT
from aerohints.core.errors import NotificationError
from aerohints.core.logging import get_app_logger
from aerohints.model.mode import MAIN_MODE
from aerohints.services.events import MODE_ENTER, MODE_EXIT, RELOAD, EventBus


log = get_app_logger("notify")

NOTIFICATION_NAMES = frozenset({MODE_ENTER, MODE_EXIT, RELOAD})
MAX_DATAGRAM = 4096


@dataclass(frozen=True, slots=True)
class Notification:
	name: str
	mode: Optional[str] = None

	def encode(self) -> bytes:
		payload: dict[str, str] = {"name": self.name}
		if self.mode is not None:
			payload["mode"] = self.mode
		return json.dumps(payload).encode("utf-8")

	@classmethod
	def decode(cls, data: bytes) -> "Notification":
		"""
		Parse a datagram. Raises ValueError for anything malformed.
		"""
		obj = json.loads(data.decode("utf-8"))
		if not isinstance(obj, dict):
			raise ValueError("notification must be a JSON object")

		name = obj.get("name")
		if name not in NOTIFICATION_NAMES:
			raise ValueError(f"unknown notification {name!r}")

		mode = obj.get("mode")
		if name == MODE_ENTER:
			mode = mode if isinstance(mode, str) and mode else MAIN_MODE
		else:
			mode = None

		return cls(name=name, mode=mode)


def post_notification(
	name: str,
	mode: Optional[str] = None,
	*,
	host: str = DEFAULT_NOTIFY_HOST,
	port: int = DEFAULT_NOTIFY_PORT,
) -> None:
	if name not in NOTIFICATION_NAMES:
		raise NotificationError(f"Unknown notification {name!r}")

	data = Notification(name=name, mode=mode).encode()
	try:
		with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
			sock.sendto(data, (host, port))
	except OSError as ex:
		raise NotificationError(f"Failed to post {name!r} to {host}:{port}: {ex}") from ex

	log.debug("Posted %s mode=%s to %s:%d", name, mode, host, port)


class NotificationListener:
	"""
	Receives notifications on a daemon thread.

	start() binds immediately so `port` is valid right after it returns
	(port=0 picks a free port, which tests rely on).
	"""

	def __init__(
		self,
		*,
		host: str = DEFAULT_NOTIFY_HOST,
		port: int = DEFAULT_NOTIFY_PORT,
		poll_interval: float = 0.25,
	) -> None:
		self.host = host
		self.port = port
		self.poll_interval = poll_interval

		self._queue: "queue.Queue[Notification]" = queue.Queue()
		self._sock: Optional[socket.socket] = None
		self._thread: Optional[threading.Thread] = None
		self._stop = threading.Event()

	@property
	def running(self) -> bool:
		return self._thread is not None and self._thread.is_alive()

	def start(self) -> None:
		if self.running:
			return

		sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
		try:
			sock.bind((self.host, self.port))
		except OSError as ex:
			sock.close()
			raise NotificationError(f"Cannot listen on {self.host}:{self.port}: {ex}") from ex

		sock.settimeout(self.poll_interval)
		self._sock = sock
		self.port = sock.getsockname()[1]
		self._stop.clear()

		self._thread = threading.Thread(target=self._run, name="aerohints-notify", daemon=True)
		self._thread.start()
		log.info("Listening for notifications on %s:%d", self.host, self.port)

	def stop(self) -> None:
		self._stop.set()
		if self._thread is not None:
			self._thread.join(timeout=self.poll_interval * 4)
			self._thread = None
		if self._sock is not None:
			self._sock.close()
			self._sock = None

	def drain(self) -> list[Notification]:
		items: list[Notification] = []
		while True:
			try:
				items.append(self._queue.get_nowait())
			except queue.Empty:
				return items

	def dispatch(self, bus: EventBus) -> int:
		"""
		Publish every pending notification onto bus. Call from the UI thread.
		"""
		pending = self.drain()
		for note in pending:
			bus.publish(note.name, note.mode)
		return len(pending)

	def _run(self) -> None:
		assert self._sock is not None
		sock = self._sock

		while not self._stop.is_set():
			try:
				data, addr = sock.recvfrom(MAX_DATAGRAM)
			except socket.timeout:
				continue
			except OSError:
				if not self._stop.is_set():
					log.exception("Notification socket failed")
				return

			try:
				note = Notification.decode(data)
			except ValueError as ex:
				log.warning("Dropping notification from %s: %s", addr, ex)
				continue

			log.debug("Received %s mode=%s", note.name, note.mode)
			self._queue.put(note)
