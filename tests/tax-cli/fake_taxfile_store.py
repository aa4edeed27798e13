"""FakeTaxfileStore: in-memory test double for TaxfileStore.

Separated into its own module so tests can import it unambiguously
regardless of pytest's conftest resolution order.
"""

from tax.commands.taxfile_io import TaxfileError


class FakeTaxfileStore:
    """Holds the taxfile text in memory and records every write.

    Usage:
        store = FakeTaxfileStore("- [ ] one\\n")
        store.write("- [x] one\\n")
        assert store.writes == ["- [x] one\\n"]

    A store created without content behaves like a missing file.
    """

    def __init__(self, content=None):
        self.content = content
        self.writes = []

    def read(self):
        if self.content is None:
            raise TaxfileError("Could not open file /fake/tasks.md")
        return self.content

    def write(self, content):
        self.writes.append(content)
        self.content = content
