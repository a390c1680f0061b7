# ---------------------------------------------------------------------------
# File: keyformat.py
# ---------------------------------------------------------------------------
# Description:
#	Raw aerospace key tokens -> display glyphs ("alt-shift-h" -> "⌥⇧ H").
#
# Notes:
#	- Pure functions; no Tk or aerospace dependency.
#	- Modifier glyphs are always emitted alt, shift, ctrl, cmd regardless of
#	  the order they appear in the raw token.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations


MODIFIER_GLYPHS: dict[str, str] = {
	"alt": "⌥",
	"shift": "⇧",
	"ctrl": "⌃",
	"cmd": "⌘",
}

# Dict order is the emit order.
MODIFIER_ORDER: tuple[str, ...] = tuple(MODIFIER_GLYPHS)

KEY_NAMES: dict[str, str] = {
	"enter": "↩",
	"esc": "⎋",
	"tab": "⇥",
	"space": "␣",
	"backspace": "⌫",
	"delete": "⌦",
	"slash": "/",
	"comma": ",",
	"semicolon": ";",
	"period": ".",
	"left": "←",
	"right": "→",
	"up": "↑",
	"down": "↓",
}


def is_modifier(token: str) -> bool:
	return token in MODIFIER_GLYPHS


def split_modifiers(raw_key: str) -> tuple[str, str]:
	"""
	Split "alt-shift-h" into ("alt-shift", "h").

	Modifier tokens keep their input order in the prefix. If several
	non-modifier tokens appear, the last one is the suffix.
	"""
	modifiers: list[str] = []
	suffix = ""

	for part in raw_key.split("-"):
		if is_modifier(part):
			modifiers.append(part)
		else:
			suffix = part

	return "-".join(modifiers), suffix


def format_key_name(name: str) -> str:
	return KEY_NAMES.get(name, name.upper())


def modifier_glyphs(modifiers: list[str] | tuple[str, ...]) -> str:
	present = set(modifiers)
	return "".join(MODIFIER_GLYPHS[m] for m in MODIFIER_ORDER if m in present)


def format_modifiers(prefix: str) -> str:
	"""
	Glyphs for a modifier prefix, followed by the separator space.

	"alt-shift" -> "⌥⇧ ", "" -> ""
	"""
	if not prefix:
		return ""
	glyphs = modifier_glyphs([p for p in prefix.split("-") if is_modifier(p)])
	return f"{glyphs} " if glyphs else ""


def format_key(raw_key: str) -> str:
	"""
	Format a raw key token for display.

	Examples:
		format_key("alt-shift-h")	-> "⌥⇧ H"
		format_key("esc")			-> "⎋"
		format_key("cmd-alt-left")	-> "⌥⌘ ←"
	"""
	prefix, suffix = split_modifiers(raw_key)
	mods = modifier_glyphs(prefix.split("-")) if prefix else ""
	base = format_key_name(suffix)

	if mods and base:
		return f"{mods} {base}"
	return mods or base
