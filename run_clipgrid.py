#!/usr/bin/env python3
"""
Repo-root runner for clipgrid.

Examples:
	python run_clipgrid.py data.csv
	pbpaste | python run_clipgrid.py --format text --output-delimiter comma
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
	"""
	Run the CLI entrypoint with repo-root import behavior.
	"""
	repo_root = Path(__file__).resolve().parent
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	from clipgrid.cli import main as cli_main

	cli_main()


if __name__ == "__main__":
	main()
