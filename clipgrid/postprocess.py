#!/usr/bin/env python3
"""
Turn raw tokenized cells into final rows.

Steps run in a fixed order: trim, empty substitution, empty-cell skipping,
empty-row skipping, then padding. Padding never runs when empty cells are
skipped.
"""

from __future__ import annotations

# local repo modules
from .config import ParseOptions, matches_empty
from .whitespace import trim

#============================================


def finalize_cell(raw: str, options: ParseOptions) -> object:
	"""
	Trim a raw cell and substitute the empty marker.

	Args:
		raw: Raw cell text.
		options: Parse options.

	Returns:
		Cell text, or the empty marker itself.
	"""
	text = trim(raw) if options.trim else raw
	if text == "":
		return options.empty_value
	return text


#============================================


def is_empty_row(cells: list[object], empty_value: object) -> bool:
	"""
	A row is empty with no cells or a single empty-marker cell.
	"""
	if not cells:
		return True
	return len(cells) == 1 and matches_empty(cells[0], empty_value)


#============================================


def pad_rows(rows: list[list[object]], fill: object) -> list[list[object]]:
	"""
	Right-pad rows in place to the widest row.

	Args:
		rows: Finalized rows.
		fill: Value appended to short rows.

	Returns:
		The same rows, now all equally long.
	"""
	if not rows:
		return rows
	width = max(len(row) for row in rows)
	for row in rows:
		missing = width - len(row)
		if missing > 0:
			row.extend([fill] * missing)
	return rows


#============================================


def finalize_rows(raw_rows: list[list[str]], options: ParseOptions) -> list[list[object]]:
	"""
	Apply the post-processing options to tokenized rows.

	Args:
		raw_rows: Raw cells per line.
		options: Parse options.

	Returns:
		Final rows.
	"""
	empty_value = options.empty_value
	rows: list[list[object]] = []
	for raw_cells in raw_rows:
		cells = [finalize_cell(raw, options) for raw in raw_cells]
		if options.skip_empty_cells:
			cells = [cell for cell in cells if not matches_empty(cell, empty_value)]
		if options.skip_empty_rows and is_empty_row(cells, empty_value):
			continue
		rows.append(cells)
	if options.pad_rows and not options.skip_empty_cells:
		pad_rows(rows, empty_value)
	return rows
