# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	aerohints: on-screen cheat sheet for AeroSpace key bindings.
#
# Notes:
#	The binding engine (aerohints.bindings) and model (aerohints.model) are
#	pure Python; Tk is only imported by aerohints.app.app and aerohints.ui.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
