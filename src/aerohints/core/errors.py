# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Exception types for aerohints.
#
# Notes:
#	- Classification never raises; these cover the outer layers only
#	  (fetching config, posting notifications).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations


class AeroHintsError(Exception):
	"""Base class for aerohints errors."""


class ModeSourceError(AeroHintsError):
	"""Mode names or bindings could not be fetched."""


class NotificationError(AeroHintsError):
	"""A notification could not be posted."""
