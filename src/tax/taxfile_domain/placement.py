"""Decide where a new task goes and which number it will get."""

from dataclasses import dataclass
from enum import Enum

from tax.taxfile_domain.document import TaskDocument
from tax.taxfile_domain.section import Section


class Position(Enum):
    PREPEND = "PREPEND"
    APPEND = "APPEND"


@dataclass
class Placement:
    """Insertion point for a new task.

    ``line_num`` is where the inserted text starts. When ``separator`` is set
    a blank line is inserted first, so the task itself lands one line lower.
    """
    line_num: int
    task_number: int
    separator: bool = False

    @property
    def task_line_num(self) -> int:
        return self.line_num + 1 if self.separator else self.line_num

    def text_for(self, task_line: str) -> str:
        return f'\n{task_line}' if self.separator else task_line


def place_task(document: TaskDocument, position: Position, section_name: str | None = None) -> Placement:
    if section_name is not None:
        return _place_in_section(document, document.find_section(section_name), position)
    if document.focused_section is not None:
        return _place_in_section(document, document.focused_section, position)
    return _place_globally(document, position)


def _place_globally(document: TaskDocument, position: Position) -> Placement:
    tasks = document.tasks
    if not tasks:
        return Placement(line_num=1, task_number=1)
    if position is Position.PREPEND:
        return Placement(line_num=tasks[0].line_num, task_number=1)
    return Placement(line_num=tasks[-1].line_num + 1, task_number=tasks[-1].number + 1)


def _place_in_section(document: TaskDocument, section: Section, position: Position) -> Placement:
    # Tasks of a section occupy a contiguous run of lines inside its span.
    section_tasks = document.tasks_of(section)
    if not section_tasks:
        return Placement(
            line_num=section.line_num_end + 1,
            task_number=_number_after_earlier_sections(document, section, position),
            separator=True,
        )
    if position is Position.PREPEND:
        first = section_tasks[0]
        return Placement(line_num=first.line_num, task_number=first.number)
    last = section_tasks[-1]
    return Placement(line_num=last.line_num + 1, task_number=last.number + 1)


def _number_after_earlier_sections(document: TaskDocument, section: Section, position: Position) -> int:
    earlier = [s for s in document.sections if s.number < section.number]
    for candidate in reversed(earlier):
        candidate_tasks = document.tasks_of(candidate)
        if candidate_tasks:
            if position is Position.PREPEND:
                return candidate_tasks[0].number
            return candidate_tasks[-1].number + 1
    return 1
