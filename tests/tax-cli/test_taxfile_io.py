"""Tests for TaxfileStore and the taxfile context managers."""

import os

import pytest

from tax.commands.taxfile_io import (
    TaxfileError,
    TaxfileStore,
    with_error_handling,
    with_taxfile_update,
)
from tax.taxfile_domain.line_edits import replace_line


TEXT = "- [ ] one\n- [ ] two\n"


class TestTaxfileStore:

    def test_read(self, tmp_path):
        path = tmp_path / "tasks.md"
        path.write_text(TEXT)
        assert TaxfileStore(str(path)).read() == TEXT

    def test_read_missing_file(self, tmp_path):
        path = tmp_path / "missing.md"
        with pytest.raises(TaxfileError, match=f"Could not open file {path}"):
            TaxfileStore(str(path)).read()

    def test_write_replaces_content(self, tmp_path):
        path = tmp_path / "tasks.md"
        path.write_text("old\n")
        TaxfileStore(str(path)).write(TEXT)
        assert path.read_text() == TEXT
        assert os.listdir(tmp_path) == ["tasks.md"]

    def test_write_into_missing_directory(self, tmp_path):
        path = tmp_path / "nope" / "tasks.md"
        with pytest.raises(TaxfileError, match="Unable to write file"):
            TaxfileStore(str(path)).write(TEXT)


class TestWithTaxfileUpdate:
    """with_taxfile_update only writes the file when content changes."""

    def test_skips_write_when_no_mutation(self, tmp_path):
        path = tmp_path / "tasks.md"
        path.write_text(TEXT)
        os.utime(path, (0, 0))

        with with_taxfile_update(TaxfileStore(str(path))) as _update:
            pass  # no mutation

        assert os.path.getmtime(path) == 0

    def test_writes_when_mutation_occurs(self, tmp_path):
        path = tmp_path / "tasks.md"
        path.write_text(TEXT)

        with with_taxfile_update(TaxfileStore(str(path))) as update:
            task = update.document.get_task(2)
            update.text = replace_line(update.text, task.line_num, task.with_checked(True).line)

        assert path.read_text() == "- [ ] one\n- [x] two\n"

    def test_error_inside_block_does_not_write(self, tmp_path):
        path = tmp_path / "tasks.md"
        path.write_text(TEXT)

        with pytest.raises(ValueError):
            with with_taxfile_update(TaxfileStore(str(path))) as update:
                update.text = "changed\n"
                update.document.get_task(9)

        assert path.read_text() == TEXT


class TestWithErrorHandling:

    def test_value_error_exits_with_status_1(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            with with_error_handling():
                raise ValueError("Non existent task 3")

        assert exc_info.value.code == 1
        assert "Non existent task 3" in capsys.readouterr().err

    def test_taxfile_error_exits_with_status_1(self, capsys):
        with pytest.raises(SystemExit):
            with with_error_handling():
                raise TaxfileError("Could not open file x")

        assert "Could not open file x" in capsys.readouterr().err
