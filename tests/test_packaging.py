"""Checks on the project metadata declared in ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_readme_is_project_readme() -> None:
    """The long description points at the checked-in project README."""
    data = tomllib.loads((REPO_ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    readme = data["project"]["readme"]
    assert readme == "README.md", f"unexpected readme {readme!r}"
    assert (REPO_ROOT / readme).is_file(), "README.md should exist at the repo root"
