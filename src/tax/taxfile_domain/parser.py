"""Parse taxfile markdown text into a TaskDocument."""

import re

from tax.taxfile_domain.document import TaskDocument
from tax.taxfile_domain.line_edits import split_lines
from tax.taxfile_domain.patterns import (
    SECTION_LINE_RE,
    TASK_LINE_RE,
    get_comment,
    is_check_symbol,
    plain_name_of,
)
from tax.taxfile_domain.section import Section
from tax.taxfile_domain.task import Task


def parse(text: str) -> TaskDocument:
    document = TaskDocument()
    open_section = None
    line_num = 0

    for line_num, line in enumerate(split_lines(text), 1):
        section_match = SECTION_LINE_RE.match(line)
        if section_match:
            if open_section is not None:
                _close_section(document, open_section, line_num - 1)
            open_section = _parse_section(section_match, len(document.sections) + 1, line_num, line)
            continue

        task_match = TASK_LINE_RE.match(line)
        if task_match:
            document.tasks.append(
                _parse_task(task_match, len(document.tasks) + 1, line_num, open_section)
            )

    if open_section is not None:
        _close_section(document, open_section, line_num)

    return document


def _parse_section(match: re.Match, number: int, line_num: int, line: str) -> Section:
    name = match.group(2)
    plain_name, focused = plain_name_of(name)
    return Section(
        number=number,
        name=name,
        plain_name=plain_name,
        is_focused=focused,
        level=len(match.group(1)),
        line_num=line_num,
        line_num_end=line_num,
        line=line,
    )


def _close_section(document: TaskDocument, section: Section, line_num_end: int) -> None:
    section.line_num_end = line_num_end
    document.sections.append(section)
    if section.is_focused and document.focused_section is None:
        document.focused_section = section


def _parse_task(match: re.Match, number: int, line_num: int, section: Section | None) -> Task:
    name, comment = get_comment(match.group(2).strip())
    plain_name, focused = plain_name_of(name)
    return Task(
        number=number,
        name=name,
        plain_name=plain_name,
        is_checked=is_check_symbol(match.group(1).strip()),
        is_focused=focused,
        line_num=line_num,
        line=match.group(0),
        comment=comment,
        section=section,
    )
