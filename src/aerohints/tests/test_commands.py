# ---------------------------------------------------------------------------
# File: test_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the command registry and the built-in overlay commands.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial tests
# ---------------------------------------------------------------------------

import pytest

from aerohints.app.commands import Command, CommandContext, CommandRegistry
from aerohints.app.default_commands import DISMISS, RELOAD, SHOW_MAIN, register_default_commands
from aerohints.app.overlay import OverlayState


def test_register_and_get_command():
	registry = CommandRegistry()
	cmd = Command(id="x", label="X", handler=lambda ctx: "ok")

	registry.register(cmd)

	assert registry.has("x") is True
	assert registry.get("x") is cmd
	assert registry.ids() == ["x"]


def test_register_rejects_duplicate_and_empty_ids():
	registry = CommandRegistry()
	registry.register(Command(id="x", label="X", handler=lambda ctx: 1))

	with pytest.raises(ValueError):
		registry.register(Command(id="x", label="X again", handler=lambda ctx: 2))

	with pytest.raises(ValueError):
		registry.register(Command(id="", label="Nothing", handler=lambda ctx: 3))


def test_unregister():
	registry = CommandRegistry()
	registry.register(Command(id="x", label="X", handler=lambda ctx: 1))

	registry.unregister("x")
	registry.unregister("x")

	assert registry.has("x") is False
	assert registry.get("x") is None


def test_execute_passes_context():
	registry = CommandRegistry()
	ctx = CommandContext(extra={"keyseq": "<Escape>"})

	registry.register(Command(id="echo", label="Echo", handler=lambda c: c.extra["keyseq"]))

	assert registry.execute("echo", ctx) == "<Escape>"


def test_execute_unknown_raises_key_error():
	with pytest.raises(KeyError):
		CommandRegistry().execute("missing", CommandContext())


def test_execute_disabled_returns_none_without_calling_handler():
	registry = CommandRegistry()
	called = False

	def handler(ctx):
		nonlocal called
		called = True
		return "ran"

	registry.register(Command(id="x", label="X", handler=handler, enabled_fn=lambda ctx: False))

	assert registry.execute("x", CommandContext()) is None
	assert called is False


def test_context_service_lookup():
	ctx = CommandContext(services={"overlay": "ctl"})

	assert ctx.service("overlay") == "ctl"
	with pytest.raises(KeyError):
		ctx.service("bus")


class _FakeOverlay:
	def __init__(self) -> None:
		self.state = OverlayState.IDLE
		self.calls: list[str] = []

	def dismiss(self) -> None:
		self.calls.append("dismiss")
		self.state = OverlayState.IDLE

	def reload(self) -> int:
		self.calls.append("reload")
		return 3

	def request_show_main(self) -> bool:
		self.calls.append("show_main")
		self.state = OverlayState.WAITING
		return True


def test_default_commands():
	registry = CommandRegistry()
	register_default_commands(registry)
	overlay = _FakeOverlay()
	ctx = CommandContext(services={"overlay": overlay})

	assert set(registry.ids()) == {DISMISS, RELOAD, SHOW_MAIN}

	# Dismiss is disabled while nothing is shown.
	assert registry.execute(DISMISS, ctx) is None
	assert overlay.calls == []

	assert registry.execute(SHOW_MAIN, ctx) is True
	registry.execute(DISMISS, ctx)
	assert registry.execute(RELOAD, ctx) == 3

	assert overlay.calls == ["show_main", "dismiss", "reload"]
