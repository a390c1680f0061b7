# ---------------------------------------------------------------------------
# File: test_notify.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for notification encoding and the UDP listener.
#
# Notes:
#	- Listener tests bind to 127.0.0.1 on a free port (port=0).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial tests
# ---------------------------------------------------------------------------

import socket
import time

import pytest

from aerohints.core.errors import NotificationError
from aerohints.services.events import MODE_ENTER, MODE_EXIT, RELOAD, EventBus
from aerohints.services.notify import Notification, NotificationListener, post_notification


def _drain_until(listener: NotificationListener, count: int, timeout: float = 2.0) -> list[Notification]:
	received: list[Notification] = []
	deadline = time.monotonic() + timeout
	while len(received) < count and time.monotonic() < deadline:
		received.extend(listener.drain())
		time.sleep(0.01)
	return received


@pytest.fixture
def listener():
	lst = NotificationListener(host="127.0.0.1", port=0, poll_interval=0.05)
	lst.start()
	try:
		yield lst
	finally:
		lst.stop()


def test_encode_decode():
	note = Notification(name=MODE_ENTER, mode="resize")

	assert Notification.decode(note.encode()) == note
	assert Notification.decode(Notification(name=RELOAD).encode()) == Notification(name=RELOAD)


def test_mode_enter_without_mode_defaults_to_main():
	assert Notification.decode(b'{"name": "mode.enter"}').mode == "main"
	assert Notification.decode(b'{"name": "mode.enter", "mode": ""}').mode == "main"


def test_mode_is_ignored_for_other_notifications():
	assert Notification.decode(b'{"name": "mode.exit", "mode": "resize"}').mode is None


@pytest.mark.parametrize(
	"data",
	[
		b"not json",
		b"[]",
		b'{"name": "mode.sideways"}',
		b"{}",
		b"\xff\xfe",
	],
)
def test_decode_rejects_malformed(data):
	with pytest.raises(ValueError):
		Notification.decode(data)


def test_post_unknown_name_raises():
	with pytest.raises(NotificationError):
		post_notification("mode.sideways")


def test_listener_picks_a_port(listener):
	assert listener.running is True
	assert listener.port != 0


def test_listener_receives_posted_notifications(listener):
	post_notification(MODE_ENTER, "service", host="127.0.0.1", port=listener.port)
	post_notification(MODE_EXIT, host="127.0.0.1", port=listener.port)

	received = _drain_until(listener, 2)

	assert received == [
		Notification(name=MODE_ENTER, mode="service"),
		Notification(name=MODE_EXIT),
	]


def test_listener_drops_garbage_and_keeps_going(listener):
	with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
		sock.sendto(b"garbage", ("127.0.0.1", listener.port))

	post_notification(RELOAD, host="127.0.0.1", port=listener.port)

	assert _drain_until(listener, 1) == [Notification(name=RELOAD)]


def test_dispatch_publishes_onto_bus(listener):
	bus = EventBus()
	seen: list[tuple[str, object]] = []
	bus.subscribe(MODE_ENTER, lambda mode: seen.append((MODE_ENTER, mode)))

	post_notification(MODE_ENTER, "resize", host="127.0.0.1", port=listener.port)

	deadline = time.monotonic() + 2.0
	while not seen and time.monotonic() < deadline:
		listener.dispatch(bus)
		time.sleep(0.01)

	assert seen == [(MODE_ENTER, "resize")]


def test_second_listener_on_same_port_fails(listener):
	other = NotificationListener(host="127.0.0.1", port=listener.port)

	with pytest.raises(NotificationError):
		other.start()


def test_stop_is_safe_to_call_twice():
	lst = NotificationListener(host="127.0.0.1", port=0, poll_interval=0.05)
	lst.start()

	lst.stop()
	lst.stop()

	assert lst.running is False
