"""Task entity — a single checkbox line of the taxfile."""

from dataclasses import dataclass, field, replace

from tax.taxfile_domain.patterns import add_focus, get_comment, plain_name_of
from tax.taxfile_domain.section import Section


@dataclass
class Task:
    number: int
    name: str
    plain_name: str
    is_checked: bool
    is_focused: bool
    line_num: int
    line: str
    comment: str | None = None
    section: Section | None = field(default=None, compare=False, repr=False)

    def to_markdown(self) -> str:
        check = 'x' if self.is_checked else ' '
        name = add_focus(self.plain_name) if self.is_focused else self.plain_name
        comment = f' // {self.comment}' if self.comment is not None else ''
        return f'- [{check}] {name}{comment}'

    def with_checked(self, checked: bool) -> 'Task':
        return self._rendered(replace(self, is_checked=checked))

    def with_focus(self, focused: bool) -> 'Task':
        return self._rendered(replace(self, is_focused=focused))

    @staticmethod
    def _rendered(task: 'Task') -> 'Task':
        task.name = add_focus(task.plain_name) if task.is_focused else task.plain_name
        task.line = task.to_markdown()
        return task

    @classmethod
    def create(cls, name: str, number: int, line_num: int) -> 'Task':
        """Build an unchecked task from user input, honouring focus markup and comments."""
        name = name.strip()
        if '\n' in name or '\r' in name:
            raise ValueError('Task name cannot span several lines')
        name_without_comment, comment = get_comment(name)
        plain_name, focused = plain_name_of(name_without_comment)
        return cls._rendered(cls(
            number=number,
            name=name_without_comment,
            plain_name=plain_name,
            is_checked=False,
            is_focused=focused,
            line_num=line_num,
            line='',
            comment=comment,
        ))
