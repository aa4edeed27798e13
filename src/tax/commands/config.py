"""Configuration resolved from the process environment."""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

TAXFILE_NAME = "tasks.md"


@dataclass
class TaxConfig:
    taxfile_path: str
    change_cmd: str | None = None
    editor: str | None = None
    supports_colors: bool = False

    @property
    def taxfile_dir(self) -> str:
        return str(Path(self.taxfile_path).parent)


def _non_blank(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    if value is None or not value.strip():
        return None
    return value


def _home_dir() -> str | None:
    home = os.path.expanduser("~")
    return None if home == "~" else home


def resolve_taxfile_path(environ: Mapping[str, str], home: str | None) -> str:
    """Return $TAX_FILE when set, otherwise tasks.md in the home directory."""
    path = _non_blank(environ, "TAX_FILE")
    if path is not None:
        return path
    if home is None:
        raise ValueError("Could not find home dir")
    return os.path.join(home, TAXFILE_NAME)


def load_config(environ: Mapping[str, str] | None = None, home: str | None = None) -> TaxConfig:
    if environ is None:
        environ = os.environ
    if home is None:
        home = _home_dir()
    return TaxConfig(
        taxfile_path=resolve_taxfile_path(environ, home),
        change_cmd=_non_blank(environ, "TAX_CHANGE_CMD"),
        editor=_non_blank(environ, "EDITOR"),
        supports_colors=sys.stdout.isatty() and "NO_COLOR" not in environ,
    )
