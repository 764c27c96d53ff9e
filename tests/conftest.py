"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()


@pytest.fixture
def write_text(tmp_path: Path):
	"""
	Write a file under tmp_path and return its path.
	"""
	def _write(name: str, content: str) -> Path:
		path = tmp_path / name
		path.write_text(content, encoding="utf-8")
		return path
	return _write
