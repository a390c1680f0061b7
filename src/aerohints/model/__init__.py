# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Immutable data model consumed by the overlay.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from .binding import Category, KeyBinding
from .mode import MAIN_MODE, Mode, display_name

__all__ = [
	"Category",
	"KeyBinding",
	"MAIN_MODE",
	"Mode",
	"display_name",
]
