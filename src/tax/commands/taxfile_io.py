"""Taxfile I/O: atomic writes and context managers for reading/updating the task list."""

import os
import sys
import tempfile
from contextlib import contextmanager

import click

from tax.taxfile_domain.parser import parse


class TaxfileError(Exception):
    """The taxfile could not be read or written."""


def atomic_write(file_path: str, content: str) -> None:
    """Write content to file atomically using temp file + rename."""
    dir_name = os.path.dirname(os.path.abspath(file_path))
    fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        os.replace(tmp_path, file_path)
    except Exception:
        os.unlink(tmp_path)
        raise


class TaxfileStore:
    """Reads and writes the whole taxfile at a fixed path."""

    def __init__(self, path: str):
        self.path = path

    def read(self) -> str:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            raise TaxfileError(f"Could not open file {self.path}") from e

    def write(self, content: str) -> None:
        try:
            atomic_write(self.path, content)
        except OSError as e:
            raise TaxfileError(f"Unable to write file {self.path}") from e


@contextmanager
def with_error_handling():
    try:
        yield
    except (ValueError, TaxfileError) as e:
        click.echo(str(e), err=True)
        sys.exit(1)


class TaxfileUpdate:
    """Text being edited during one command; written back only if it changed."""

    def __init__(self, text: str):
        self.original_text = text
        self.text = text
        self.document = parse(text)

    @property
    def changed(self) -> bool:
        return self.text != self.original_text


@contextmanager
def with_taxfile_update(store):
    update = TaxfileUpdate(store.read())
    yield update
    if update.changed:
        store.write(update.text)
