"""doru: a small command-line task list persisted to a JSON file."""

from .errors import CorruptStore, DoruError, InvalidInput, NotFound, StorageUnavailable
from .tasks.task_models import Task, TaskStatus
from .tasks.task_store import TaskStore

__all__ = [
    "CorruptStore",
    "DoruError",
    "InvalidInput",
    "NotFound",
    "StorageUnavailable",
    "Task",
    "TaskStatus",
    "TaskStore",
]

__version__ = "0.1.0"
