"""Section entity — one header line and the lines up to the next header."""

from dataclasses import dataclass, replace

from tax.taxfile_domain.patterns import add_focus


@dataclass
class Section:
    number: int
    name: str
    plain_name: str
    is_focused: bool
    level: int
    line_num: int
    line_num_end: int
    line: str

    def to_markdown(self) -> str:
        name = add_focus(self.plain_name) if self.is_focused else self.plain_name
        return f"{'#' * self.level} {name}"

    def with_focus(self, focused: bool) -> 'Section':
        updated = replace(self, is_focused=focused)
        updated.name = add_focus(self.plain_name) if focused else self.plain_name
        updated.line = updated.to_markdown()
        return updated
