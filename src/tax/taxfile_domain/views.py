"""Filtered projections of the task list. Every view preserves document order."""

import time

from tax.taxfile_domain.section import Section
from tax.taxfile_domain.task import Task


def open_tasks(tasks: list[Task]) -> list[Task]:
    return [t for t in tasks if not t.is_checked]


def closed_tasks(tasks: list[Task]) -> list[Task]:
    return [t for t in tasks if t.is_checked]


def focused_tasks(tasks: list[Task], desired: bool = True) -> list[Task]:
    return [t for t in tasks if t.is_focused == desired]


def tasks_in_section(tasks: list[Task], section: Section) -> list[Task]:
    return [
        t for t in tasks
        if t.section is not None and t.section.number == section.number
    ]


def visible_tasks(document, show_all: bool = False) -> list[Task]:
    """Open tasks, limited to the focused section unless show_all is set."""
    tasks = open_tasks(document.tasks)
    if document.focused_section is not None and not show_all:
        tasks = tasks_in_section(tasks, document.focused_section)
    return tasks


def current_task(document, cycle: bool = False, minute: int | None = None) -> Task | None:
    """Pick the task to work on now.

    A focused open task wins. Otherwise the first open task, or with
    ``cycle`` a task chosen by the current minute so the displayed task
    rotates without keeping any state.
    """
    candidates = visible_tasks(document)
    focused = focused_tasks(candidates)
    if focused:
        return focused[0]
    if not candidates:
        return None
    if cycle:
        if minute is None:
            minute = int(time.time() // 60)
        return candidates[minute % len(candidates)]
    return candidates[0]
