# src/doru/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

from ..errors import InvalidInput


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - values are the exact strings written to the store file
    - any status may move to any other status; there is no forced progression
    """

    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        """Lenient parsing for user input: 'open', 'in-progress', 'InProgress', 'done'..."""
        key = (raw or "").strip().lower().replace("-", "").replace("_", "").replace(" ", "")
        for status in cls:
            if status.value.lower() == key:
                return status
        choices = ", ".join(s.value for s in cls)
        raise InvalidInput(f"Unknown status {raw!r}. Expected one of: {choices}.")

    @classmethod
    def from_store(cls, raw: Any) -> TaskStatus:
        """Strict parsing for file data: only the exact serialized values round-trip."""
        if not isinstance(raw, str):
            raise TypeError(f"status must be a string, got {type(raw).__name__}")
        return cls(raw)


def _clean_description(text: str) -> str:
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput("Description must not be empty.")
    return text


@dataclass(slots=True)
class Task:
    """
    A single to-do item.

    `id` stays None until the store inserts the task; after that it never changes.
    """

    id: int | None
    description: str
    status: TaskStatus = TaskStatus.OPEN

    @classmethod
    def new(cls, description: str) -> Task:
        return cls(id=None, description=_clean_description(description))

    def with_id(self, task_id: int) -> Task:
        if self.id is not None:
            raise ValueError(f"task already has id={self.id}")
        return replace(self, id=int(task_id))

    def set_description(self, text: str) -> None:
        self.description = _clean_description(text)

    def set_status(self, new_status: TaskStatus) -> None:
        self.status = TaskStatus(new_status)

    # ---- serialization ----

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "description": self.description, "status": self.status.value}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from a stored record.

        Accepts the legacy "content" key in place of "description".
        Raises TypeError/ValueError on malformed records.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"task record must be an object, got {type(raw).__name__}")

        tid = raw.get("id")
        # bool is an int subclass; reject it explicitly
        if not isinstance(tid, int) or isinstance(tid, bool) or tid < 1:
            raise ValueError(f"invalid task id {tid!r}")

        description = raw.get("description", raw.get("content"))
        if not isinstance(description, str):
            raise TypeError(f"task {tid}: description must be a string")
        if not description.strip():
            raise ValueError(f"task {tid}: description must not be empty")

        return cls(id=tid, description=description, status=TaskStatus.from_store(raw.get("status")))
