# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Public service exports for aerohints.
#
#	Services are UI-agnostic: loading modes from aerospace, the event bus,
#	and the notification transport.
#
# Notes:
#	- Services must not depend on Tk widgets.
#	- OverlayApp constructs and wires the instances.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from .events import EventBus
from .loader import ModeLoader
from .notify import Notification, NotificationListener, post_notification
from .source import AerospaceSource, FileModeSource, ModeSource, StaticModeSource, find_binary

__all__ = [
	"AerospaceSource",
	"EventBus",
	"FileModeSource",
	"ModeLoader",
	"ModeSource",
	"Notification",
	"NotificationListener",
	"StaticModeSource",
	"find_binary",
	"post_notification",
]
