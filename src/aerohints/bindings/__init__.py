# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Binding engine: key formatting, command classification, parsing and
#	collapsing. Pure functions only; nothing here touches Tk or aerospace.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from .classifier import Classification, classify
from .collapse import collapse_bindings
from .keyformat import format_key
from .parser import parse_bindings
from .paths import friendly_name

__all__ = [
	"Classification",
	"classify",
	"collapse_bindings",
	"format_key",
	"friendly_name",
	"parse_bindings",
]
