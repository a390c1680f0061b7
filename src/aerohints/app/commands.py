# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#	Command definitions + registry for overlay actions.
#
# Notes:
#	Commands give overlay-local keys (Escape, reload) and the CLI a single
#	invocation path into OverlayController.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/12/2026	Dana K. Ortiz				Initial version
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass(slots=True)
class CommandContext:
	"""
	What a command handler gets to work with.

	- app:			The OverlayApp (or None in tests).
	- services:		Named services (e.g. "overlay", "bus").
	- extra:		Per-invocation data (e.g. the triggering keyseq).
	"""
	app: Any = None
	services: dict[str, Any] = field(default_factory=dict)
	extra: dict[str, Any] = field(default_factory=dict)

	def service(self, name: str) -> Any:
		try:
			return self.services[name]
		except KeyError as ex:
			raise KeyError(f"Service not available: {name!r}") from ex


CommandHandler = Callable[[CommandContext], Any]
EnabledCheck = Callable[[CommandContext], bool]


@dataclass(frozen=True, slots=True)
class Command:
	"""
	Command

	- id:			Unique identifier (e.g. "overlay.dismiss").
	- label:		Friendly name.
	- handler:		Callable executed with a CommandContext.
	- description:	Optional help text.
	- enabled_fn:	Optional dynamic enablement check.
	"""
	id: str
	label: str
	handler: CommandHandler

	description: Optional[str] = None
	enabled_fn: Optional[EnabledCheck] = None

	def is_enabled(self, ctx: CommandContext) -> bool:
		if self.enabled_fn is None:
			return True
		return bool(self.enabled_fn(ctx))


class CommandRegistry:
	def __init__(self) -> None:
		self._commands: dict[str, Command] = {}

	def register(self, command: Command) -> None:
		if not command.id:
			raise ValueError("Command id must be a non-empty string")

		if command.id in self._commands:
			raise ValueError(f"Duplicate command id: {command.id!r}")

		self._commands[command.id] = command

	def unregister(self, command_id: str) -> None:
		self._commands.pop(command_id, None)

	def has(self, command_id: str) -> bool:
		return command_id in self._commands

	def get(self, command_id: str) -> Optional[Command]:
		return self._commands.get(command_id)

	def ids(self) -> list[str]:
		return list(self._commands.keys())

	def execute(self, command_id: str, ctx: CommandContext) -> Any:
		"""
		Run a command. Unknown ids raise KeyError; disabled commands return None.
		"""
		command = self._commands.get(command_id)
		if command is None:
			raise KeyError(f"Unknown command id: {command_id!r}")

		if not command.is_enabled(ctx):
			return None

		return command.handler(ctx)
