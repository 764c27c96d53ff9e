#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, fields, replace
from pathlib import Path
import json
import logging

# PIP3 modules
import yaml

# local repo modules
from .delimiters import Delimiter, LineEnding

logger = logging.getLogger(__name__)

#============================================


class OptionsError(ValueError):
	"""
	Raised when an option value is outside the supported set.
	"""


#============================================


class _Missing:
	"""
	Opaque marker for cells with no value.
	"""

	__slots__ = ()

	def __repr__(self) -> str:
		return "MISSING"

	def __bool__(self) -> bool:
		return False

	def __reduce__(self) -> str:
		return "MISSING"


MISSING = _Missing()

#============================================


def matches_empty(value: object, empty_value: object) -> bool:
	"""
	Check a cell against the empty marker.

	Identity first, then equality between values of the same type, so 0,
	False and "" never stand in for one another.

	Args:
		value: Cell value.
		empty_value: Configured empty marker.

	Returns:
		True when the cell is the empty marker.
	"""
	if value is empty_value:
		return True
	return type(value) is type(empty_value) and value == empty_value


#============================================


@dataclass(slots=True)
class ParseOptions:
	"""
	Options for turning text into rows.

	Attributes:
		empty_value: Marker returned for empty cells (same object every time).
		trim: Strip surrounding whitespace from each cell.
		skip_empty_rows: Drop rows left with no cells or only the empty marker.
		skip_empty_cells: Drop empty cells, leaving ragged rows.
		pad_rows: Right-pad rows with the empty marker to the widest row.
			Ignored when skip_empty_cells is set.
	"""
	empty_value: object = None
	trim: bool = True
	skip_empty_rows: bool = False
	skip_empty_cells: bool = False
	pad_rows: bool = False


#============================================


@dataclass(slots=True)
class StringifyOptions:
	"""
	Options for turning rows into text.

	Attributes:
		delimiter: Separator written between cells.
		line_ending: Separator written between rows.
		always_quote: Quote every cell.
		empty_value: Cells matching this marker are written as empty_output.
		empty_output: Text written for empty cells.
	"""
	delimiter: Delimiter = Delimiter.TAB
	line_ending: LineEnding = LineEnding.LF
	always_quote: bool = False
	empty_value: object = None
	empty_output: str = ""

	def __post_init__(self) -> None:
		try:
			self.delimiter = Delimiter.coerce(self.delimiter)
			self.line_ending = LineEnding.coerce(self.line_ending)
		except ValueError as exc:
			raise OptionsError(str(exc)) from exc
		if self.empty_output is None:
			self.empty_output = ""
		self.empty_output = str(self.empty_output)


#============================================


def build_parse_options(options: ParseOptions | None, overrides: dict) -> ParseOptions:
	if options is None:
		return ParseOptions(**overrides)
	if overrides:
		return replace(options, **overrides)
	return options


#============================================


def build_stringify_options(options: StringifyOptions | None, overrides: dict) -> StringifyOptions:
	if options is None:
		return StringifyOptions(**overrides)
	if overrides:
		return replace(options, **overrides)
	return options


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Load user configuration from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.
	"""
	if not config_path:
		return {}
	if not config_path.exists():
		return {}
	with config_path.open("r", encoding="utf-8") as handle:
		try:
			if config_path.suffix.lower() in {".yml", ".yaml"}:
				loaded = yaml.safe_load(handle)
			else:
				loaded = json.load(handle)
		except (yaml.YAMLError, json.JSONDecodeError) as exc:
			raise OptionsError(f"Cannot read config file {config_path}: {exc}") from exc
	if loaded is None:
		return {}
	if not isinstance(loaded, dict):
		raise OptionsError(f"Config file {config_path} must hold a mapping")
	return loaded


#============================================


def _known_values(section: object, cls: type, name: str) -> dict:
	if section is None:
		return {}
	if not isinstance(section, dict):
		raise OptionsError(f"Config section '{name}' must be a mapping")
	known = {item.name for item in fields(cls)}
	values: dict = {}
	for key, value in section.items():
		if key not in known:
			logger.warning("Ignoring unknown %s option: %s", name, key)
			continue
		values[key] = value
	return values


#============================================


def _check_flags(values: dict, flags: tuple, name: str) -> None:
	"""
	Reject switches that are not real booleans.

	Quoted strings such as "false" and numbers raise instead of reading
	as truthy.
	"""
	for flag in flags:
		if flag in values and not isinstance(values[flag], bool):
			raise OptionsError(
				f"Config option {name}.{flag} must be true or false, got {values[flag]!r}"
			)


#============================================


def parse_options_from_mapping(config: dict) -> ParseOptions:
	"""
	Build parse options from the 'parse' section of a config mapping.

	Args:
		config: Loaded config dictionary.

	Returns:
		ParseOptions with file values over defaults.
	"""
	values = _known_values(config.get("parse"), ParseOptions, "parse")
	_check_flags(values, ("trim", "skip_empty_rows", "skip_empty_cells", "pad_rows"), "parse")
	return ParseOptions(**values)


#============================================


def stringify_options_from_mapping(config: dict) -> StringifyOptions:
	"""
	Build stringify options from the 'stringify' section of a config mapping.

	Args:
		config: Loaded config dictionary.

	Returns:
		StringifyOptions with file values over defaults.
	"""
	values = _known_values(config.get("stringify"), StringifyOptions, "stringify")
	_check_flags(values, ("always_quote",), "stringify")
	return StringifyOptions(**values)
