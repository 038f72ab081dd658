# src/doru/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import InvalidInput
from ..tasks.task_models import TaskStatus
from ..tasks.task_store import TaskStore
from .render import render_task, render_tasks

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandResult:
    text: str
    mutated: bool = False


CommandHandler = Callable[[TaskStore, argparse.Namespace], CommandResult]
ParserConfigurator = Callable[[argparse.ArgumentParser], None]


def _task_id(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"task id must be positive: {raw!r}")
    return value


def _status(raw: str) -> TaskStatus:
    try:
        return TaskStatus.parse(raw)
    except InvalidInput as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


class CommandRegistry:
    """Subcommand registry: each entry owns its argparse setup and its handler."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._configure: dict[str, ParserConfigurator] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        configure: ParserConfigurator | None = None,
    ) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        if configure is not None:
            self._configure[key] = configure

    def names(self) -> list[str]:
        return list(self._handlers)

    def add_subparsers(self, parser: argparse.ArgumentParser) -> None:
        sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
        for name, help_text in self._help.items():
            p = sub.add_parser(name, help=help_text, description=help_text)
            configure = self._configure.get(name)
            if configure is not None:
                configure(p)

    def handle(self, store: TaskStore, args: argparse.Namespace) -> CommandResult:
        handler = self._handlers.get(str(args.command).lower())
        if handler is None:
            raise KeyError(f"Unknown command: {args.command}")
        logger.debug("Dispatching command %s", args.command)
        return handler(store, args)


registry = CommandRegistry()


def cmd_add(store: TaskStore, args: argparse.Namespace) -> CommandResult:
    task_id = store.add(args.description)
    return CommandResult(f"Added task {task_id}.", mutated=True)


def cmd_list(store: TaskStore, args: argparse.Namespace) -> CommandResult:
    return CommandResult(render_tasks(store.list(args.status)))


def cmd_edit(store: TaskStore, args: argparse.Namespace) -> CommandResult:
    store.edit(args.id, args.description)
    task = store.get(args.id)
    return CommandResult(render_task(task) if task else "", mutated=True)


def cmd_status(store: TaskStore, args: argparse.Namespace) -> CommandResult:
    store.set_status(args.id, args.status)
    task = store.get(args.id)
    return CommandResult(render_task(task) if task else "", mutated=True)


def cmd_delete(store: TaskStore, args: argparse.Namespace) -> CommandResult:
    store.delete(args.id)
    return CommandResult(f"Deleted task {args.id}.", mutated=True)


def _configure_add(p: argparse.ArgumentParser) -> None:
    p.add_argument("description", help="What needs to be done.")


def _configure_list(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "status",
        nargs="?",
        type=_status,
        default=None,
        help="Only show tasks with this status (open, in-progress, done).",
    )


def _configure_edit(p: argparse.ArgumentParser) -> None:
    p.add_argument("id", type=_task_id)
    p.add_argument("description", help="New description.")


def _configure_status(p: argparse.ArgumentParser) -> None:
    p.add_argument("id", type=_task_id)
    p.add_argument("status", type=_status, help="open, in-progress or done.")


def _configure_delete(p: argparse.ArgumentParser) -> None:
    p.add_argument("id", type=_task_id)


registry.register("add", cmd_add, "Add a new task.", _configure_add)
registry.register("edit", cmd_edit, "Edit the description of an existing task.", _configure_edit)
registry.register("list", cmd_list, "List tasks, optionally filtered by status.", _configure_list)
registry.register("status", cmd_status, "Change the status of an existing task.", _configure_status)
registry.register("delete", cmd_delete, "Delete an existing task.", _configure_delete)
