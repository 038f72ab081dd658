# src/doru/cli/render.py

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task, TaskStatus


def render_task(task: Task) -> str:
    """Example: "[x] Learn Rust             [Done        ] (ID: 42)"."""
    tick = "x" if task.status == TaskStatus.DONE else " "
    return f"[{tick}] {task.description:<20} [{task.status.value:<12}] (ID: {task.id})"


def render_tasks(tasks: Iterable[Task]) -> str:
    return "\n".join(render_task(t) for t in tasks)
