#!/usr/bin/env python3
"""
Delimiter detection over a sample of lines.

Tab wins outright when any sampled line has an unquoted tab (spreadsheet
clipboard data). Otherwise every candidate is scored on how often and how
consistently it appears, with a bonus for a header row that clearly uses it.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
from itertools import islice
from typing import Iterable
import logging

# local repo modules
from .delimiters import Delimiter
from .scanner import count_outside_quotes
from .whitespace import is_blank

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 20
HEADER_BONUS = 1.5
DEFAULT_DELIMITER = Delimiter.COMMA

#============================================


@dataclass(slots=True)
class DelimiterStats:
	"""
	Occurrence counts for one candidate across the sample.

	Attributes:
		delimiter: Candidate delimiter.
		header_count: Unquoted occurrences in the first sampled line.
		total: Unquoted occurrences across all sampled lines.
		lines_with: Sampled lines containing the delimiter at least once.
	"""
	delimiter: Delimiter
	header_count: int = 0
	total: int = 0
	lines_with: int = 0

	#============================================
	def score(self, line_count: int, header_bonus: bool) -> float:
		"""
		Weighted score for this candidate.

		Args:
			line_count: Number of sampled lines.
			header_bonus: Apply the header multiplier.

		Returns:
			Score including the tie-break priority.
		"""
		avg_count = self.total / line_count
		consistency = self.lines_with / line_count
		score = (
			self.header_count * 3
			+ consistency * 2 * avg_count
			+ avg_count * self.lines_with
		)
		if header_bonus:
			score *= HEADER_BONUS
		return score + self.delimiter.priority


#============================================


def sample_lines(lines: Iterable[str], size: int = SAMPLE_SIZE) -> list[str]:
	"""
	Pick the first non-blank lines.

	Args:
		lines: Logical lines of the document.
		size: Maximum number of lines to keep.

	Returns:
		Sampled lines.
	"""
	return list(islice((line for line in lines if not is_blank(line)), size))


#============================================


def collect_stats(sample: list[str]) -> list[DelimiterStats]:
	stats = [DelimiterStats(delimiter=delimiter) for delimiter in Delimiter]
	for line_number, line in enumerate(sample):
		for entry in stats:
			count = count_outside_quotes(line, entry.delimiter.value)
			if line_number == 0:
				entry.header_count = count
			if count:
				entry.total += count
				entry.lines_with += 1
	return stats


#============================================


def detect_delimiter(lines: Iterable[str]) -> Delimiter:
	"""
	Choose the delimiter for a whole document.

	Args:
		lines: Logical lines of the document.

	Returns:
		Detected delimiter, comma when nothing stands out.
	"""
	sample = sample_lines(lines)
	if not sample:
		return DEFAULT_DELIMITER
	for line in sample:
		if count_outside_quotes(line, Delimiter.TAB.value):
			logger.debug("Unquoted tab found; using tab delimiter")
			return Delimiter.TAB

	stats = collect_stats(sample)
	headed = [entry for entry in stats if entry.header_count > 1]
	bonus_delimiter = headed[0].delimiter if len(headed) == 1 else None
	# space only counts when nothing else shows up at all
	others_present = any(
		entry.total for entry in stats if entry.delimiter is not Delimiter.SPACE
	)

	best = DEFAULT_DELIMITER
	best_score = 0.0
	for entry in stats:
		if not entry.total:
			continue
		if entry.delimiter is Delimiter.SPACE and others_present:
			continue
		score = entry.score(len(sample), entry.delimiter is bonus_delimiter)
		logger.debug("Delimiter %r scored %.3f", entry.delimiter.value, score)
		if score > best_score:
			best = entry.delimiter
			best_score = score
	if best_score <= 0:
		return DEFAULT_DELIMITER
	logger.debug("Detected delimiter %r", best.value)
	return best
