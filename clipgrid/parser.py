#!/usr/bin/env python3
"""
Clipboard text to rows.
"""

from __future__ import annotations

# Standard Library
import logging

# local repo modules
from .config import ParseOptions, build_parse_options
from .delimiters import Delimiter
from .detector import detect_delimiter
from .postprocess import finalize_rows
from .tokenizer import split_lines, tokenize

logger = logging.getLogger(__name__)

#============================================


def detect(text: str | None) -> Delimiter:
	"""
	Report the delimiter parse would pick for this text.

	Args:
		text: Raw clipboard or CSV text.

	Returns:
		Detected delimiter (comma for empty input).
	"""
	if not text:
		return Delimiter.COMMA
	return detect_delimiter(split_lines(text))


#============================================


def parse(text: str | None, options: ParseOptions | None = None, **overrides) -> list[list[object]]:
	"""
	Parse spreadsheet or CSV text into rows of cells.

	The delimiter is detected once for the whole text. Empty cells hold the
	configured empty marker itself.

	Args:
		text: Raw text, may be empty or None.
		options: Parse options; defaults when omitted.
		**overrides: Option fields replacing those in options.

	Returns:
		List of rows, each a list of strings or the empty marker.
	"""
	options = build_parse_options(options, overrides)
	if not text:
		return []
	lines = split_lines(text)
	delimiter = detect_delimiter(lines)
	logger.debug("Parsing %d lines with delimiter %r", len(lines), delimiter.value)
	return finalize_rows(tokenize(lines, delimiter), options)
