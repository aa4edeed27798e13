"""Shared fixtures for tax CLI tests."""

import os
import sys

import pytest

# Ensure tests/tax-cli/ is on sys.path so test files can import the fakes
# unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_change_hook import FakeChangeHook  # noqa: E402
from fake_taxfile_store import FakeTaxfileStore  # noqa: E402

from tax.commands.config import TaxConfig  # noqa: E402
from tax.commands.formatting import TaskFormatter  # noqa: E402
from tax.commands.services import TaxServices  # noqa: E402


@pytest.fixture
def make_services():
    """Build TaxServices around in-memory fakes."""

    def _make(content=None, editor=None, run_editor=None):
        services = TaxServices(
            config=TaxConfig(taxfile_path="/home/guybrush/tasks.md", editor=editor),
            store=FakeTaxfileStore(content),
            hook=FakeChangeHook(),
            formatter=TaskFormatter(supports_colors=False),
        )
        if run_editor is not None:
            services.run_editor = run_editor
        return services

    return _make


@pytest.fixture
def taxfile(tmp_path):
    """A real taxfile in tmp_path plus the environment pointing tax at it."""
    path = tmp_path / "tasks.md"
    env = {"TAX_FILE": str(path), "TAX_CHANGE_CMD": "", "EDITOR": ""}
    return path, env
