# ---------------------------------------------------------------------------
# File: cli.py
# ---------------------------------------------------------------------------
# Description:
#	Command-line entry point.
#
#	aerohints								run the overlay daemon
#	aerohints --notify mode-enter <mode>	tell the daemon a mode was entered
#	aerohints --notify mode-exit			tell the daemon the mode was left
#	aerohints --notify reload				tell the daemon to reload bindings
#	aerohints --dump						print the parsed modes and exit
#
# Notes:
#	--notify is what aerospace bindings call via exec-and-forget, so it must
#	stay fast and never touch Tk.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Sequence, TextIO

from aerohints.core.config import DEFAULTS, AppConfig
from aerohints.core.errors import AeroHintsError
from aerohints.core.logging import get_app_logger, init_logging
from aerohints.core.telemetry import init_telemetry
from aerohints.model.mode import Mode
from aerohints.services.events import MODE_ENTER, MODE_EXIT, RELOAD
from aerohints.services.loader import ModeLoader
from aerohints.services.notify import post_notification
from aerohints.services.source import AerospaceSource, FileModeSource, ModeSource


NOTIFY_USAGE = "Usage: aerohints --notify <mode-enter MODE|mode-exit|reload>"

NOTIFY_COMMANDS: dict[str, str] = {
	"mode-enter": MODE_ENTER,
	"mode-exit": MODE_EXIT,
	"reload": RELOAD,
}


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="aerohints",
		description="On-screen cheat sheet for AeroSpace key bindings",
	)
	parser.add_argument(
		"--notify",
		nargs="+",
		metavar="ARG",
		help="Post a notification to the running daemon: mode-enter MODE | mode-exit | reload",
	)
	parser.add_argument("--dump", action="store_true", help="Print parsed modes and exit")
	parser.add_argument("--from-file", metavar="PATH", help="Read modes from a JSON file instead of aerospace")
	parser.add_argument("--aerospace", metavar="PATH", help="Path to the aerospace binary")
	parser.add_argument(
		"--timeout",
		type=float,
		default=DEFAULTS["aerospace.timeout"],
		help="Seconds to wait for aerospace (default: %(default)s)",
	)
	parser.add_argument(
		"--port",
		type=int,
		default=DEFAULTS["notify.port"],
		help="UDP port for notifications (default: %(default)s)",
	)
	parser.add_argument(
		"--show-delay",
		type=float,
		default=DEFAULTS["show_delay"],
		help="Seconds before the overlay appears (default: %(default)s)",
	)
	parser.add_argument("--theme", default=DEFAULTS["theme"], help="ttk theme (default: %(default)s)")
	parser.add_argument("--log-level", default="INFO", help="Logging level (default: %(default)s)")
	parser.add_argument("--log-file", metavar="PATH", help="Also write logs to PATH")
	parser.add_argument("--telemetry", action="store_true", help="Log telemetry events at DEBUG level")
	return parser


def config_from_args(args: argparse.Namespace) -> AppConfig:
	return AppConfig({
		"aerospace.binary": args.aerospace,
		"aerospace.timeout": args.timeout,
		"notify.port": args.port,
		"show_delay": args.show_delay,
		"theme": args.theme,
		"logging.level": args.log_level,
		"logging.file": args.log_file,
		"telemetry_enabled": args.telemetry,
		"telemetry_sink": "log" if args.telemetry else "null",
	})


def build_source(args: argparse.Namespace, cfg: AppConfig) -> ModeSource:
	if args.from_file:
		return FileModeSource(args.from_file)
	return AerospaceSource(
		binary=cfg.get("aerospace.binary"),
		timeout=cfg.get_float("aerospace.timeout"),
	)


def parse_notify_args(values: Sequence[str]) -> tuple[str, Optional[str]]:
	"""
	["mode-enter", "resize"] -> ("mode.enter", "resize")

	Raises ValueError with a usage message for anything else.
	"""
	if not values:
		raise ValueError(NOTIFY_USAGE)

	command, rest = values[0], list(values[1:])
	name = NOTIFY_COMMANDS.get(command)
	if name is None:
		raise ValueError(f"Unknown notify command: {command}")

	if name == MODE_ENTER:
		if not rest:
			raise ValueError("Usage: aerohints --notify mode-enter <mode-name>")
		return name, rest[0]

	return name, None


def format_modes(modes: Sequence[Mode]) -> str:
	lines: list[str] = []
	for mode in modes:
		lines.append(f"{mode.name} ({mode.id})")
		for category, bindings in mode.grouped_bindings():
			lines.append(f"  {category.value}")
			width = max(len(b.display_key) for b in bindings)
			for b in bindings:
				lines.append(f"    {b.display_key.ljust(width)}  {b.display_label}")
		lines.append("")
	return "\n".join(lines)


def _notify(args: argparse.Namespace, cfg: AppConfig, err: TextIO) -> int:
	try:
		name, mode = parse_notify_args(args.notify)
	except ValueError as ex:
		print(ex, file=err)
		return 1

	post_notification(name, mode, host=str(cfg.get("notify.host")), port=cfg.get_int("notify.port"))
	return 0


def _dump(source: ModeSource, out: TextIO) -> int:
	modes = ModeLoader(source).load_modes()
	out.write(format_modes(modes))
	return 0


def _daemon(source: ModeSource, cfg: AppConfig) -> int:
	# Imported here so --notify and --dump never need a display.
	from aerohints.app.app import OverlayApp

	app = OverlayApp(source, cfg)
	app.run()
	return 0


def main(argv: Optional[Sequence[str]] = None, *, out: TextIO | None = None, err: TextIO | None = None) -> int:
	out = out or sys.stdout
	err = err or sys.stderr

	args = build_parser().parse_args(argv)
	cfg = config_from_args(args)

	# --notify runs from aerospace on every mode switch; keep it quiet.
	log_cfg: dict[str, Any] = {"logging.level": cfg.get("logging.level"), "logging.file": cfg.get("logging.file")}
	if args.notify:
		log_cfg["logging.console"] = False
	init_logging(log_cfg)
	init_telemetry(cfg, logger=get_app_logger("telemetry"))

	try:
		if args.notify:
			return _notify(args, cfg, err)

		source = build_source(args, cfg)
		if args.dump:
			return _dump(source, out)
		return _daemon(source, cfg)
	except AeroHintsError as ex:
		print(f"aerohints: {ex}", file=err)
		return 1
