# ---------------------------------------------------------------------------
# File: default_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Default overlay-local key bindings.
#
# Notes:
#	- Bindings are Tk keyseq strings; only delivered while the overlay has focus.
#	- Platform-aware: Command on macOS, Control elsewhere.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

import sys

from aerohints.app.default_commands import DISMISS, RELOAD
from aerohints.app.keys import KeyMap


def build_default_keymap(platform: str | None = None) -> KeyMap:
	km = KeyMap()
	is_mac = (platform or sys.platform) == "darwin"

	km.bind("<Escape>", DISMISS)
	km.bind("<Return>", DISMISS)

	if is_mac:
		km.bind("<Command-r>", RELOAD)
		# Some Tk builds map Command to Meta.
		km.bind("<Meta-r>", RELOAD)
	else:
		km.bind("<Control-r>", RELOAD)

	return km
