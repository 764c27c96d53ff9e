#!/usr/bin/env python3
"""
Thousands-separator detection for comma-delimited text.

Decides whether a comma met outside quotes belongs to a formatted number
such as 1,234.56, $1,234, -€1,234,567.89 or 1,234% instead of separating
two cells.
"""

from __future__ import annotations

# Standard Library
import re

# local repo modules
from .whitespace import WHITESPACE_CLASS, trim

CURRENCY_SYMBOLS = "$€£¥"

# three digits closing a group: followed by , . % whitespace or end of line
_GROUP_AHEAD_RE = re.compile(r"[0-9]{3}(?=[,.%" + WHITESPACE_CLASS + r"]|$)")
# same group with whitespace in front, as in "1000, 22,000, 3,500"
_SPACED_GROUP_AHEAD_RE = re.compile(
	"[" + WHITESPACE_CLASS + r"]+[0-9]{3}(?=[,.%" + WHITESPACE_CLASS + r"]|$)"
)
_FIRST_GROUP_RE = re.compile(r"-?[" + re.escape(CURRENCY_SYMBOLS) + r"]?[0-9]{1,3}")
_TRAILING_GROUP_RE = re.compile(r"(?<![0-9])[0-9]{3}$")

#============================================


def group_follows(text: str, comma_index: int, lenient: bool = False) -> bool:
	"""
	Check for a completed three digit group right after a comma.

	Args:
		text: Full line.
		comma_index: Index of the comma in the line.
		lenient: Also accept whitespace before the group.

	Returns:
		True when a digit group follows.
	"""
	start = comma_index + 1
	if _GROUP_AHEAD_RE.match(text, start):
		return True
	if lenient:
		return _SPACED_GROUP_AHEAD_RE.match(text, start) is not None
	return False


#============================================


def group_precedes(cell_text: str) -> bool:
	"""
	Check that the cell built so far can continue as a grouped number.

	Args:
		cell_text: Trimmed content of the current cell.

	Returns:
		True when the cell is a valid leading group or ends a valid group.
	"""
	if "," in cell_text:
		return _TRAILING_GROUP_RE.search(cell_text) is not None
	return _FIRST_GROUP_RE.fullmatch(cell_text) is not None


#============================================


def is_comma_in_number(text: str, comma_index: int, current_cell: str) -> bool:
	"""
	Decide whether the comma at comma_index is a thousands separator.

	Args:
		text: Full line being tokenized.
		comma_index: Index of an unquoted comma.
		current_cell: Content accumulated for the cell so far.

	Returns:
		True to keep the comma inside the cell, False to split there.
	"""
	before = trim(current_cell)
	if not group_follows(text, comma_index, lenient="," in before):
		return False
	return group_precedes(before)
