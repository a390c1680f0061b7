# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public app package surface for aerohints.
#
# Notes:
#	- Lazy exports so `import aerohints.app.overlay` (and the tests) don't
#	  need a Tk display.
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
	"OverlayApp",
	"OverlayController",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"OverlayApp": ("aerohints.app.app", "OverlayApp"),
	"OverlayController": ("aerohints.app.overlay", "OverlayController"),
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
	from aerohints.app.app import OverlayApp
	from aerohints.app.overlay import OverlayController
