"""Render tasks for terminal output."""

import click

from tax.taxfile_domain.section import Section
from tax.taxfile_domain.task import Task


class TaskFormatter:
    """Formats numbered tasks, emphasising focused ones.

    With color support emphasis is terminal bold; without it the markdown
    ``**...**`` markup is printed instead.
    """

    def __init__(self, supports_colors: bool = False):
        self.supports_colors = supports_colors

    def bold(self, text: str) -> str:
        if self.supports_colors:
            return click.style(text, bold=True)
        return f"**{text}**"

    def task_num(self, task: Task) -> str:
        if task.is_focused and self.supports_colors:
            return f"[{self.bold(str(task.number))}]"
        return f"[{task.number}]"

    def task_name(self, task: Task) -> str:
        if task.is_focused:
            return self.bold(task.plain_name)
        return task.name

    def section_name(self, section: Section) -> str:
        if section.is_focused:
            return self.bold(section.plain_name)
        return section.plain_name

    def numbered_task(self, task: Task, use_sections: bool = False) -> str:
        text = f"{self.task_num(task)} {self.task_name(task)}"
        if use_sections and task.section is not None:
            text += f" ~ {self.section_name(task.section)}"
        return text
