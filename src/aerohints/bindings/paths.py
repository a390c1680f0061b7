# ---------------------------------------------------------------------------
# File: paths.py
# ---------------------------------------------------------------------------
# Description:
#	Friendly names for folders opened by "exec-and-forget open <path>".
#
# Notes:
#	- Substring tables are checked in order; first match wins.
#	- home is injectable so tests don't depend on the machine.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

import os
from typing import Optional


KNOWN_PATHS: tuple[tuple[str, str], ...] = (
	("~/Desktop", "Desktop"),
	("~/Downloads", "Downloads"),
	("~/Documents", "Documents"),
	("~/Library/Mobile Documents/com~apple~CloudDocs", "iCloud Drive"),
	("~/Library/Mobile\\ Documents/com~apple~CloudDocs", "iCloud Drive"),
)

CLOUD_STORAGE_MARKER = "CloudStorage"

CLOUD_PROVIDERS: tuple[tuple[str, str], ...] = (
	("ProtonDrive", "Proton Drive"),
	("GoogleDrive", "Google Drive"),
	("OneDrive", "OneDrive"),
	("Dropbox", "Dropbox"),
)


def friendly_name(path: str, home: Optional[str] = None) -> str:
	"""
	Map a path to a short name for the overlay.

	Examples:
		friendly_name("~")								-> "Home"
		friendly_name("/")								-> "Computer"
		friendly_name("~/Downloads")					-> "Downloads"
		friendly_name("~/Library/CloudStorage/Dropbox")	-> "Dropbox"
		friendly_name("~/src/aerohints")				-> "aerohints"
	"""
	if home is None:
		home = os.path.expanduser("~")

	if path == "~" or path == home or path == "/" + home:
		return "Home"
	if path == "/":
		return "Computer"

	for known, name in KNOWN_PATHS:
		if known in path:
			return name

	if CLOUD_STORAGE_MARKER in path:
		for marker, name in CLOUD_PROVIDERS:
			if marker in path:
				return name

	last = _last_component(path)
	if last and last != "~":
		return last
	return path


def _last_component(path: str) -> str:
	# Trailing slashes don't count as an empty component ("~/src/" -> "src").
	stripped = path.rstrip("/")
	if not stripped:
		return ""
	return stripped.rsplit("/", 1)[-1]
