#!/usr/bin/env python3
"""
Quote-aware line scanner.

A double quote toggles the quoted state. Inside quotes a doubled quote is an
escaped literal quote. A quote left open runs to the end of the line and the
rest of the line is plain content.
"""

from __future__ import annotations

# Standard Library
from typing import Callable

QUOTE = '"'

#============================================


class QuoteScanner:
	"""
	Walk one line and report delimiters found outside quotes.

	Attributes:
		line: Line being scanned.
		collect: Accumulate cell content when True.
		inside_quotes: Current quote state.
	"""

	#============================================
	def __init__(self, line: str, collect: bool = True) -> None:
		self.line = line
		self.collect = collect
		self.inside_quotes = False
		self._buffer: list[str] = []

	#============================================
	def walk(self, delimiter: str, on_delimiter: Callable[[QuoteScanner, int], None]) -> None:
		"""
		Scan the whole line once.

		Args:
			delimiter: Character treated as a separator outside quotes.
			on_delimiter: Called with the scanner and the index of every
				unquoted delimiter. Quoted delimiters are kept as content.
		"""
		line = self.line
		length = len(line)
		index = 0
		while index < length:
			char = line[index]
			if char == QUOTE:
				if self.inside_quotes and index + 1 < length and line[index + 1] == QUOTE:
					self.append(QUOTE)
					index += 2
					continue
				self.inside_quotes = not self.inside_quotes
			elif char == delimiter and not self.inside_quotes:
				on_delimiter(self, index)
			else:
				self.append(char)
			index += 1

	#============================================
	def append(self, text: str) -> None:
		if self.collect:
			self._buffer.append(text)

	#============================================
	def content(self) -> str:
		"""
		Content accumulated for the current cell.

		Returns:
			Current cell text.
		"""
		return "".join(self._buffer)

	#============================================
	def take(self) -> str:
		"""
		Close the current cell.

		Returns:
			Cell text; the buffer starts empty afterwards.
		"""
		text = self.content()
		self._buffer = []
		return text


#============================================


def count_outside_quotes(line: str, char: str) -> int:
	"""
	Count occurrences of a character outside quoted sections.

	Args:
		line: Line to inspect.
		char: Single character to count.

	Returns:
		Number of unquoted occurrences.
	"""
	if char not in line:
		return 0
	hits: list[int] = []
	scanner = QuoteScanner(line, collect=False)
	scanner.walk(char, lambda _scanner, index: hits.append(index))
	return len(hits)
