"""Sort strategies and partitions for tasks."""

from collections.abc import Iterable
from datetime import datetime
from enum import Enum

from utilsuite.domain.entities import Task


class TaskSortOption(Enum):
    """タスクの並び順"""

    PRIORITY = "Priority"
    DATE_CREATED = "Date Created"
    ALPHABETICAL = "A-Z"


def by_priority(tasks: Iterable[Task]) -> list[Task]:
    """High → Medium → Low, ties broken by oldest first."""
    return sorted(tasks, key=lambda t: (t.priority.rank, t.date_created))


def by_date_created(tasks: Iterable[Task]) -> list[Task]:
    """Newest first."""
    return sorted(tasks, key=lambda t: t.date_created, reverse=True)


def alphabetical(tasks: Iterable[Task]) -> list[Task]:
    """Case-insensitive title order."""
    return sorted(tasks, key=lambda t: t.title.casefold())


_STRATEGIES = {
    TaskSortOption.PRIORITY: by_priority,
    TaskSortOption.DATE_CREATED: by_date_created,
    TaskSortOption.ALPHABETICAL: alphabetical,
}


def sort_tasks(tasks: Iterable[Task], option: TaskSortOption) -> list[Task]:
    return _STRATEGIES[option](tasks)


def by_date_completed(tasks: Iterable[Task], now: datetime) -> list[Task]:
    """Most recently completed first.

    A missing completion date sorts as if completed at ``now``.
    """
    return sorted(
        tasks,
        key=lambda t: t.date_completed if t.date_completed is not None else now,
        reverse=True,
    )
