# ---------------------------------------------------------------------------
# File: theme.py
# ---------------------------------------------------------------------------
# Description:
#	ttk theme + named styles for the overlay.
#
# Notes:
#	- Base theme comes from ttkthemes (default "equilux", a dark theme).
#	- Unknown theme names fall back to the toolkit default with a warning.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

import tkinter as tk

import ttkthemes as ttk_themes

from aerohints.core.logging import get_app_logger


log = get_app_logger("theme")

DEFAULT_THEME = "equilux"

HEADER_STYLE = "Header.TLabel"
SECTION_STYLE = "Section.TLabel"
KEY_STYLE = "Key.TLabel"
LABEL_STYLE = "Binding.TLabel"

HEADER_FONT = ("Helvetica", 15, "bold")
SECTION_FONT = ("Helvetica", 10, "bold")
KEY_FONT = ("Helvetica", 11, "bold")
LABEL_FONT = ("Helvetica", 12)


def apply_theme(root: tk.Misc, theme: str | None = None) -> ttk_themes.ThemedStyle:
	style = ttk_themes.ThemedStyle(root)
	name = theme or DEFAULT_THEME

	if name in style.theme_names():
		style.set_theme(name)
	else:
		log.warning("Unknown theme %r; using %r", name, style.theme_use())

	bg = style.lookup("TFrame", "background") or "#2b2b2b"

	style.configure(HEADER_STYLE, font=HEADER_FONT, padding=(0, 12, 0, 8))
	style.configure(SECTION_STYLE, font=SECTION_FONT, padding=(0, 0, 0, 2))
	style.configure(KEY_STYLE, font=KEY_FONT, padding=(6, 2), anchor="center", relief="groove")
	style.configure(LABEL_STYLE, font=LABEL_FONT, background=bg)

	return style
