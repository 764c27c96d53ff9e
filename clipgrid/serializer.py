#!/usr/bin/env python3
"""
Rows to clipboard text.
"""

from __future__ import annotations

# Standard Library
from typing import Iterable

# local repo modules
from .config import StringifyOptions, build_stringify_options, matches_empty
from .scanner import QUOTE

_LINE_BREAKS = ("\n", "\r")

#============================================


def needs_quoting(text: str, delimiter: str) -> bool:
	"""
	Check whether a cell must be wrapped in quotes.

	Args:
		text: Cell text.
		delimiter: Active delimiter.

	Returns:
		True for text holding the delimiter, a quote or a line break.
	"""
	if delimiter in text or QUOTE in text:
		return True
	return any(mark in text for mark in _LINE_BREAKS)


#============================================


def quote_cell(text: str) -> str:
	return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE


#============================================


def format_cell(value: object, options: StringifyOptions) -> str:
	"""
	Render one cell.

	Args:
		value: Cell value.
		options: Stringify options.

	Returns:
		Cell text, quoted when needed.
	"""
	if matches_empty(value, options.empty_value):
		text = options.empty_output
	else:
		text = str(value)
	if options.always_quote or needs_quoting(text, options.delimiter.value):
		return quote_cell(text)
	return text


#============================================


def stringify(data: Iterable[Iterable[object]], options: StringifyOptions | None = None, **overrides) -> str:
	"""
	Join rows of cells into delimited text.

	Args:
		data: Rows of arbitrary cell values.
		options: Stringify options; defaults when omitted.
		**overrides: Option fields replacing those in options.

	Returns:
		Delimited text, empty for no rows.
	"""
	options = build_stringify_options(options, overrides)
	delimiter = options.delimiter.value
	lines = [
		delimiter.join(format_cell(cell, options) for cell in row)
		for row in data
	]
	return options.line_ending.value.join(lines)
