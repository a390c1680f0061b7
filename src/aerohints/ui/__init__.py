# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public UI package surface for aerohints.
#
# Notes:
#	- Lazy exports (PEP 562) so importing aerohints.ui doesn't pull in Tk
#	  until a widget is actually needed.
#	- Do NOT import from aerohints.ui inside ui modules; import specific modules.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Component",
	"BindingRow",
	"ModeSection",
	"OverlayView",
	"OverlayWindow",
	"apply_theme",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Component": ("aerohints.ui.component", "Component"),
	"BindingRow": ("aerohints.ui.binding_row", "BindingRow"),
	"ModeSection": ("aerohints.ui.mode_section", "ModeSection"),
	"OverlayView": ("aerohints.ui.overlay_view", "OverlayView"),
	"OverlayWindow": ("aerohints.ui.window", "OverlayWindow"),
	"apply_theme": ("aerohints.ui.theme", "apply_theme"),
}


def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)


def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))


if TYPE_CHECKING:
	from aerohints.ui.binding_row import BindingRow
	from aerohints.ui.component import Component
	from aerohints.ui.mode_section import ModeSection
	from aerohints.ui.overlay_view import OverlayView
	from aerohints.ui.theme import apply_theme
	from aerohints.ui.window import OverlayWindow
