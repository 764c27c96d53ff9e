#!/usr/bin/env python3
"""
Fixed delimiter and line ending alphabets.
"""

from __future__ import annotations

# Standard Library
from enum import Enum

#============================================


class Delimiter(str, Enum):
	"""
	Candidate cell delimiters, in detection order.
	"""

	TAB = "\t"
	COMMA = ","
	SEMICOLON = ";"
	PIPE = "|"
	SPACE = " "
	UNIT_SEPARATOR = "\x1f"
	CARET = "^"
	TILDE = "~"
	COLON = ":"

	#============================================
	@property
	def priority(self) -> int:
		"""
		Tie-break weight added to the detection score.

		Returns:
			Priority weight, higher wins.
		"""
		return DELIMITER_PRIORITY[self]

	#============================================
	@classmethod
	def coerce(cls, value: Delimiter | str) -> Delimiter:
		"""
		Normalize a delimiter character or name.

		Args:
			value: Delimiter member, its character, or its name ("tab", "comma").

		Returns:
			Delimiter member.
		"""
		if isinstance(value, cls):
			return value
		try:
			return cls(value)
		except ValueError:
			pass
		key = str(value).strip().upper().replace("-", "_")
		if key in cls.__members__:
			return cls.__members__[key]
		raise ValueError(f"Unsupported delimiter: {value!r}")


DELIMITER_PRIORITY: dict[Delimiter, int] = {
	Delimiter.TAB: 10,
	Delimiter.COMMA: 8,
	Delimiter.SEMICOLON: 4,
	Delimiter.PIPE: 3,
	Delimiter.SPACE: 1,
	Delimiter.UNIT_SEPARATOR: 0,
	Delimiter.CARET: 0,
	Delimiter.TILDE: 0,
	Delimiter.COLON: 0,
}

#============================================


class LineEnding(str, Enum):
	"""
	Line endings supported when serializing.
	"""

	LF = "\n"
	CR = "\r"
	CRLF = "\r\n"

	#============================================
	@classmethod
	def coerce(cls, value: LineEnding | str) -> LineEnding:
		"""
		Normalize a line ending string or alias ("lf", "cr", "crlf").

		Args:
			value: LineEnding member, literal ending, or alias.

		Returns:
			LineEnding member.
		"""
		if isinstance(value, cls):
			return value
		try:
			return cls(value)
		except ValueError:
			pass
		key = str(value).strip().upper()
		if key in cls.__members__:
			return cls.__members__[key]
		raise ValueError(f"Unsupported line ending: {value!r}")
