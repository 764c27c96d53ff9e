#!/usr/bin/env python3
"""
Command line interface for clipgrid.
"""

# Standard Library
from dataclasses import replace
import argparse
import json
import logging
from pathlib import Path
import sys

# local repo modules
from .config import (
	OptionsError,
	ParseOptions,
	StringifyOptions,
	load_user_config,
	parse_options_from_mapping,
	stringify_options_from_mapping,
)
from .parser import detect, parse
from .serializer import stringify

PARSE_FLAGS = ("empty_value", "trim", "skip_empty_rows", "skip_empty_cells", "pad_rows")
STRINGIFY_FLAGS = ("delimiter", "line_ending", "always_quote", "empty_output")

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Parse clipboard or CSV text into rows, or re-delimit it."
	)
	parser.add_argument(
		"input",
		nargs="?",
		help="Input text file (default: stdin).",
	)
	parser.add_argument(
		"-f",
		"--format",
		dest="output_format",
		choices=["json", "text"],
		default="json",
		help="Output parsed rows as JSON (default) or delimited text.",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help="Optional JSON or YAML config file.",
	)
	parser.add_argument(
		"-e",
		"--empty-value",
		dest="empty_value",
		help="Value used for empty cells (default: null).",
	)
	parser.add_argument(
		"--no-trim",
		dest="trim",
		action="store_false",
		default=None,
		help="Keep whitespace around cells.",
	)
	parser.add_argument(
		"--skip-empty-rows",
		dest="skip_empty_rows",
		action="store_true",
		default=None,
		help="Drop rows that are empty.",
	)
	parser.add_argument(
		"--skip-empty-cells",
		dest="skip_empty_cells",
		action="store_true",
		default=None,
		help="Drop empty cells from each row.",
	)
	parser.add_argument(
		"--pad-rows",
		dest="pad_rows",
		action="store_true",
		default=None,
		help="Pad short rows to the widest row.",
	)
	parser.add_argument(
		"-d",
		"--output-delimiter",
		dest="delimiter",
		help="Delimiter for text output: a character or name such as tab, comma, pipe.",
	)
	parser.add_argument(
		"-l",
		"--line-ending",
		dest="line_ending",
		choices=["lf", "cr", "crlf"],
		help="Line ending for text output.",
	)
	parser.add_argument(
		"-q",
		"--always-quote",
		dest="always_quote",
		action="store_true",
		default=None,
		help="Quote every cell in text output.",
	)
	parser.add_argument(
		"-o",
		"--empty-output",
		dest="empty_output",
		help="Text written for empty cells in text output.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	return parser.parse_args(argv)


#============================================


def _flag_values(args: argparse.Namespace, names: tuple[str, ...]) -> dict:
	return {
		name: getattr(args, name)
		for name in names
		if getattr(args, name, None) is not None
	}


#============================================


def build_options(args: argparse.Namespace) -> tuple[ParseOptions, StringifyOptions]:
	"""
	Build parse and stringify options from the config file and flags.

	Args:
		args: Parsed CLI arguments.

	Returns:
		Tuple of parse options and stringify options.
	"""
	user_cfg: dict = {}
	if args.config_path:
		user_cfg = load_user_config(Path(args.config_path).expanduser())
	parse_options = replace(
		parse_options_from_mapping(user_cfg),
		**_flag_values(args, PARSE_FLAGS),
	)
	# text output must recognize the marker parse put in empty cells
	stringify_options = replace(
		stringify_options_from_mapping(user_cfg),
		empty_value=parse_options.empty_value,
		**_flag_values(args, STRINGIFY_FLAGS),
	)
	return parse_options, stringify_options


#============================================


def read_input(path: str | None) -> str:
	"""
	Read input text from a file or stdin.
	"""
	if path:
		return Path(path).expanduser().read_text(encoding="utf-8")
	return sys.stdin.read()


#============================================


def render(rows: list[list[object]], output_format: str, options: StringifyOptions) -> str:
	"""
	Render parsed rows for output.

	Args:
		rows: Parsed rows.
		output_format: "json" or "text".
		options: Stringify options for text output.

	Returns:
		Output text.
	"""
	if output_format == "text":
		return stringify(rows, options)
	return json.dumps(rows, ensure_ascii=False)


#============================================


def main(argv: list[str] | None = None) -> None:
	"""
	Entry point for the CLI.
	"""
	args = parse_args(argv)
	if args.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	try:
		parse_options, stringify_options = build_options(args)
		text = read_input(args.input)
	except (OptionsError, OSError) as exc:
		logging.error("%s", exc)
		raise SystemExit(2) from exc
	rows = parse(text, parse_options)
	if logging.getLogger().isEnabledFor(logging.INFO):
		logging.info("Detected delimiter %r", detect(text).value)
	logging.info("Parsed %d rows", len(rows))
	print(render(rows, args.output_format, stringify_options))


#============================================


if __name__ == "__main__":
	main()
