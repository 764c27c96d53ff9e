#!/usr/bin/env python3
"""
Split text into lines and lines into raw cell strings.
"""

from __future__ import annotations

# Standard Library
import re

# local repo modules
from .delimiters import Delimiter
from .numeric import is_comma_in_number
from .scanner import QuoteScanner

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

#============================================


def split_lines(text: str) -> list[str]:
	"""
	Split on any mix of CRLF, CR and LF.

	A trailing line break leaves a final empty line.

	Args:
		text: Raw input text.

	Returns:
		Logical lines.
	"""
	return _LINE_BREAK_RE.split(text)


#============================================


def tokenize_line(line: str, delimiter: Delimiter) -> list[str]:
	"""
	Split one line into raw cells.

	Tab-delimited lines are split directly, quotes included. Other
	delimiters go through the quote-aware scanner, and commas are checked
	against the thousands-separator rule first.

	Args:
		line: Logical line.
		delimiter: Delimiter chosen for the document.

	Returns:
		Raw cell strings, at least one.
	"""
	if delimiter is Delimiter.TAB:
		return line.split(Delimiter.TAB.value)

	cells: list[str] = []
	check_numbers = delimiter is Delimiter.COMMA

	def _on_delimiter(scanner: QuoteScanner, index: int) -> None:
		if check_numbers and is_comma_in_number(line, index, scanner.content()):
			scanner.append(delimiter.value)
			return
		cells.append(scanner.take())

	scanner = QuoteScanner(line)
	scanner.walk(delimiter.value, _on_delimiter)
	cells.append(scanner.take())
	return cells


#============================================


def tokenize(lines: list[str], delimiter: Delimiter) -> list[list[str]]:
	"""
	Tokenize every line with one delimiter.

	Args:
		lines: Logical lines.
		delimiter: Delimiter chosen for the document.

	Returns:
		One list of raw cells per line.
	"""
	return [tokenize_line(line, delimiter) for line in lines]
