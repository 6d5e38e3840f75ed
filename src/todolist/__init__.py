"""todolist: an in-memory todo list with a console front end."""

from .tasks.task_models import Task, TaskFilter
from .tasks.task_store import TaskListStore

__version__ = "0.1.0"
__all__ = ["Task", "TaskFilter", "TaskListStore"]
