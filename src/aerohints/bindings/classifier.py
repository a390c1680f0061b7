# ---------------------------------------------------------------------------
# File: classifier.py
# ---------------------------------------------------------------------------
# Description:
#	Command fragment -> (label, category).
#
# Notes:
#	- RULES is an ordered table; the first rule whose predicate matches wins.
#	- classify() is total: anything unrecognized falls through to the
#	  verbatim command under Category.OTHER.
#	- Input is one trimmed fragment (the parser already split on ';').
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# 10/19/2026	Dana K. Ortiz				Capitalize labels on spaces only
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, NamedTuple

from aerohints.bindings.paths import friendly_name
from aerohints.model.binding import Category
from aerohints.model.mode import capitalize_words


EXEC = "exec-and-forget"
OPEN_APP = "open -a"
OPEN = "open "
FOCUS_WRAP = "focus --boundaries-action wrap-around-the-workspace "
FOCUS_FOLLOWS = " --focus-follows-window"
MOVE_DIRECTIONS = ("move left", "move right", "move up", "move down")


class Classification(NamedTuple):
	label: str
	category: Category


Predicate = Callable[[str], bool]
Transform = Callable[[str], Classification]


@dataclass(frozen=True, slots=True)
class Rule:
	name: str
	matches: Predicate
	apply: Transform


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------

def _app_launch(command: str) -> Classification:
	app = command.replace(EXEC, "").replace(OPEN_APP, "").strip().strip("'\"")
	return Classification(app, Category.APPS)


def _open_path(command: str) -> Classification:
	path = command.replace(EXEC, "").replace(OPEN, "").strip().replace("\\ ", " ")
	return Classification(friendly_name(path), Category.NAVIGATION)


def _focus(command: str) -> Classification:
	direction = capitalize_words(command.replace(FOCUS_WRAP, "").replace("focus ", ""))
	return Classification(f"Focus {direction}", Category.FOCUS)


def _move(command: str) -> Classification:
	direction = capitalize_words(command.replace("move ", ""))
	return Classification(f"Move {direction}", Category.MOVE)


def _move_to_workspace(command: str) -> Classification:
	ws = command.replace("move-node-to-workspace ", "").replace(FOCUS_FOLLOWS, "")
	return Classification(f"Move to WS {ws}", Category.WORKSPACES)


def _workspace(command: str) -> Classification:
	if command == "workspace-back-and-forth":
		return Classification("Previous Workspace", Category.WORKSPACES)
	ws = command.replace("workspace ", "")
	return Classification(f"Workspace {ws}", Category.WORKSPACES)


def _layout(command: str) -> Classification:
	if "tiles" in command:
		return Classification("Tiling Layout", Category.LAYOUT)
	if "accordion" in command:
		return Classification("Accordion Layout", Category.LAYOUT)
	if "floating" in command:
		return Classification("Toggle Floating", Category.LAYOUT)
	return Classification("Layout", Category.LAYOUT)


SIMPLE_COMMANDS: dict[str, Classification] = {
	"fullscreen": Classification("Fullscreen", Category.LAYOUT),
	"balance-sizes": Classification("Balance Sizes", Category.LAYOUT),
	"flatten-workspace-tree": Classification("Flatten Tree", Category.LAYOUT),
	"close-all-windows-but-current": Classification("Close Other Windows", Category.OTHER),
	"reload-config": Classification("Reload Config", Category.OTHER),
}


def _resize(command: str) -> Classification:
	return Classification(f"Resize {command.replace('resize ', '')}", Category.LAYOUT)


def _sketchybar(command: str) -> Classification:
	if "--reload" in command:
		return Classification("Reload Sketchybar", Category.OTHER)
	return Classification("Sketchybar", Category.OTHER)


def _mode(command: str) -> Classification:
	mode = capitalize_words(command.replace("mode ", ""))
	return Classification(f"{mode} Mode", Category.MODES)


def _join(command: str) -> Classification:
	direction = capitalize_words(command.replace("join-with ", ""))
	return Classification(f"Join {direction}", Category.LAYOUT)


# ---------------------------------------------------------------------------
# Rule table (priority order)
# ---------------------------------------------------------------------------

RULES: tuple[Rule, ...] = (
	Rule("app-launch", lambda c: OPEN_APP in c, _app_launch),
	Rule(
		"open-path",
		lambda c: c.startswith(EXEC) and OPEN in c and OPEN_APP not in c,
		_open_path,
	),
	Rule("focus", lambda c: c.startswith("focus"), _focus),
	Rule("move", lambda c: c.startswith(MOVE_DIRECTIONS), _move),
	Rule("move-to-workspace", lambda c: c.startswith("move-node-to-workspace"), _move_to_workspace),
	Rule(
		"move-workspace-to-monitor",
		lambda c: c.startswith("move-workspace-to-monitor"),
		lambda c: Classification("Move WS to Next Monitor", Category.WORKSPACES),
	),
	Rule("workspace", lambda c: c.startswith("workspace") and "move" not in c, _workspace),
	Rule("layout", lambda c: c.startswith("layout"), _layout),
	Rule("simple", lambda c: c in SIMPLE_COMMANDS, lambda c: SIMPLE_COMMANDS[c]),
	Rule("resize", lambda c: c.startswith("resize"), _resize),
	Rule("sketchybar", lambda c: "sketchybar" in c, _sketchybar),
	Rule("mode", lambda c: c.startswith("mode "), _mode),
	Rule("join", lambda c: c.startswith("join-with"), _join),
)


def match_rule(command: str) -> Rule | None:
	for rule in RULES:
		if rule.matches(command):
			return rule
	return None


def classify(command: str) -> Classification:
	"""
	Classify one command fragment.

	Examples:
		classify("exec-and-forget open -a 'Safari'")	-> ("Safari", APPS)
		classify("workspace-back-and-forth")			-> ("Previous Workspace", WORKSPACES)
		classify("layout tiles")						-> ("Tiling Layout", LAYOUT)
		classify("something-new")						-> ("something-new", OTHER)
	"""
	rule = match_rule(command)
	if rule is None:
		return Classification(command, Category.OTHER)
	return rule.apply(command)
