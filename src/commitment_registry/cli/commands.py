# src/commitment_registry/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..registry.messages import MAX_POINT
from ..registry.models import OpResult
from ..registry.validation import is_valid_address

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

_TRUE_WORDS = ("done", "true", "yes", "1", "on")
_FALSE_WORDS = ("open", "false", "no", "0", "off")


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /initiate, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, emit: CommandEmitter | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_result(result: OpResult) -> str:
    if result.ok:
        return result.message
    kind = result.error.value if result.error else "error"
    return f"[{kind}] {result.message}"


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    db_path = getattr(state.settings, "db_path", "?")
    return (
        "Status:\n"
        f"  Acting address: {state.acting_address}\n"
        f"  Counter: {state.registry.current_point()} ({type(state.counter).__name__})\n"
        f"  Database: {db_path}"
    )


def cmd_as(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Acting as {state.acting_address}. Use /as <address> to switch."
    address = args[0]
    if not is_valid_address(address):
        return "Usage: /as <address>"
    state.acting_address = address
    logger.debug("acting address switched to %s", address)
    return f"Now acting as {address}."


def cmd_inspect(state: AppState, args: list[str]) -> str:
    status = state.registry.inspect(state.acting_address)
    if not status.present:
        return f"No objective for {state.acting_address}."
    flag = "completed" if status.completed else "open"
    return (
        f"Objective for {state.acting_address}: {flag}, "
        f"description length {status.description_length}."
    )


def cmd_initiate(state: AppState, args: list[str]) -> str:
    text = " ".join(args)
    return format_result(state.registry.initiate(state.acting_address, text))


def cmd_modify(state: AppState, args: list[str]) -> str:
    """
    /modify done <text>  -> overwrite description, mark completed
    /modify open <text>  -> overwrite description, mark not completed
    """
    if not args:
        return "Usage: /modify <done|open> <text>"

    flag = args[0].lower()
    if flag in _TRUE_WORDS:
        completed = True
    elif flag in _FALSE_WORDS:
        completed = False
    else:
        return "Usage: /modify <done|open> <text>"

    text = " ".join(args[1:])
    return format_result(state.registry.modify(state.acting_address, text, completed))


def cmd_terminate(state: AppState, args: list[str]) -> str:
    return format_result(state.registry.terminate(state.acting_address))


def cmd_classify(state: AppState, args: list[str]) -> str:
    value = _parse_int(args[0]) if args else None
    if value is None:
        return "Usage: /classify <1-3>"
    return format_result(state.registry.classify(state.acting_address, value))


def cmd_schedule(state: AppState, args: list[str]) -> str:
    offset = _parse_int(args[0]) if args else None
    if offset is None:
        return "Usage: /schedule <offset>"
    return format_result(state.registry.schedule(state.acting_address, offset))


def cmd_delegate(state: AppState, args: list[str]) -> str:
    if len(args) < 1:
        return "Usage: /delegate <address> <text>"
    target, text = args[0], " ".join(args[1:])
    return format_result(state.registry.delegate(state.acting_address, target, text))


def cmd_priority(state: AppState, args: list[str]) -> str:
    record = state.registry.priority_of(state.acting_address)
    if record is None:
        return f"No priority recorded for {state.acting_address}."
    return f"Priority for {state.acting_address}: {record.urgency}"


def cmd_deadline(state: AppState, args: list[str]) -> str:
    record = state.registry.deadline_of(state.acting_address)
    if record is None:
        return f"No deadline recorded for {state.acting_address}."
    now = state.registry.current_point()
    alert = "on" if record.alert_activated else "off"
    return (
        f"Deadline for {state.acting_address}: block {record.target_point} "
        f"(current {now}, alert {alert})"
    )


def cmd_counter(state: AppState, args: list[str]) -> str:
    return f"Current block: {state.registry.current_point()}"


def cmd_advance(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /advance      -> move the counter forward by 1
    /advance <n>  -> move the counter forward by n
    """
    advance = getattr(state.counter, "advance", None)
    if advance is None:
        return f"{type(state.counter).__name__} cannot be advanced manually."

    n = _parse_int(args[0]) if args else 1
    if n is None or n < 0:
        return "Usage: /advance [n>=0]"

    try:
        value = advance(n)
    except ValueError:
        return f"Counter cannot pass {MAX_POINT}; current block: {state.registry.current_point()}"
    if emit:
        emit(f"[COUNTER] advanced by {n}")
    return f"Current block: {value}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show acting address, counter and database.")
registry.register("as", cmd_as, help_text="Switch acting address: /as <address>.")
registry.register("inspect", cmd_inspect, help_text="Show your objective status.")
registry.register("initiate", cmd_initiate, help_text="Record your objective: /initiate <text>.")
registry.register(
    "modify", cmd_modify, help_text="Overwrite your objective: /modify <done|open> <text>."
)
registry.register("terminate", cmd_terminate, help_text="Delete your objective.")
registry.register("classify", cmd_classify, help_text="Set urgency: /classify <1-3>.")
registry.register(
    "schedule", cmd_schedule, help_text="Set a deadline N blocks ahead: /schedule <offset>."
)
registry.register(
    "delegate",
    cmd_delegate,
    help_text="Seed another address's objective: /delegate <address> <text>.",
)
registry.register("priority", cmd_priority, help_text="Show your recorded priority.")
registry.register("deadline", cmd_deadline, help_text="Show your recorded deadline.")
registry.register("counter", cmd_counter, help_text="Show the current block.")
registry.register("advance", cmd_advance, help_text="Advance the block counter: /advance [n].")
