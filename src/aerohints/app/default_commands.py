# ---------------------------------------------------------------------------
# File: default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Built-in overlay commands.
#
# Notes:
#	- Handlers look up the "overlay" service (OverlayController) on the context.
#	- Keep handlers thin; behaviour lives in OverlayController.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from aerohints.app.commands import Command, CommandContext, CommandRegistry
from aerohints.app.overlay import OverlayState


DISMISS = "overlay.dismiss"
RELOAD = "overlay.reload"
SHOW_MAIN = "overlay.show_main"


def _dismiss(ctx: CommandContext) -> None:
	ctx.service("overlay").dismiss()


def _reload(ctx: CommandContext) -> int:
	return ctx.service("overlay").reload()


def _show_main(ctx: CommandContext) -> bool:
	return ctx.service("overlay").request_show_main()


def _overlay_open(ctx: CommandContext) -> bool:
	return ctx.service("overlay").state != OverlayState.IDLE


def register_default_commands(registry: CommandRegistry) -> None:
	registry.register(Command(
		id=DISMISS,
		label="Dismiss",
		description="Hide the overlay.",
		handler=_dismiss,
		enabled_fn=_overlay_open,
	))

	registry.register(Command(
		id=RELOAD,
		label="Reload",
		description="Re-read modes and bindings from aerospace.",
		handler=_reload,
	))

	registry.register(Command(
		id=SHOW_MAIN,
		label="Show Main",
		description="Show the main-mode cheat sheet.",
		handler=_show_main,
	))
