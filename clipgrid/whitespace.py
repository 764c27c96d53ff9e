#!/usr/bin/env python3
"""
Whitespace as clipboard text from browsers and spreadsheets defines it.

Python's own set differs: str.strip() keeps the byte-order mark (U+FEFF) and
removes the information separators U+001C to U+001F, one of which is the
unit separator delimiter. Trimming and blank-line checks use this set
instead.
"""

from __future__ import annotations

# Standard Library
import re

WHITESPACE = (
	" \t\n\v\f\r\u00a0\u1680"
	+ "".join(chr(code) for code in range(0x2000, 0x200B))
	+ "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# body of a regex character class matching one WHITESPACE character
WHITESPACE_CLASS = re.escape(WHITESPACE)

#============================================


def trim(text: str) -> str:
	"""
	Strip leading and trailing WHITESPACE.

	Args:
		text: Cell or line text.

	Returns:
		Trimmed text.
	"""
	return text.strip(WHITESPACE)


#============================================


def is_blank(text: str) -> bool:
	return not trim(text)
