"""TaskDocument — the model rebuilt from the taxfile text on every read."""

from dataclasses import dataclass, field

from tax.taxfile_domain.section import Section
from tax.taxfile_domain.task import Task
from tax.taxfile_domain.views import tasks_in_section


@dataclass
class TaskDocument:
    tasks: list[Task] = field(default_factory=list)
    sections: list[Section] = field(default_factory=list)
    focused_section: Section | None = None

    @property
    def use_sections(self) -> bool:
        # A single header reads as a title, not as a grouping.
        return len(self.sections) > 1

    def get_task(self, number: int) -> Task:
        if number < 1 or number > len(self.tasks):
            raise ValueError(f"Non existent task {number}")
        return self.tasks[number - 1]

    def find_section(self, search: str) -> Section:
        """Find a section by case-insensitive name: exact match, else the first substring match."""
        wanted = search.strip().lower()
        partial_match = None
        for section in self.sections:
            name = section.plain_name.lower()
            if name == wanted:
                return section
            if partial_match is None and wanted in name:
                partial_match = section
        if partial_match is None:
            raise ValueError(f"Section not found: {search}")
        return partial_match

    def tasks_of(self, section: Section) -> list[Task]:
        return tasks_in_section(self.tasks, section)
