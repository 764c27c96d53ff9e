#!/usr/bin/env python3
"""
Tests for parse options: empty markers, trimming, skipping and padding.
"""

import pytest

from clipgrid import MISSING, ParseOptions, parse


#============================================
# empty markers


@pytest.mark.parametrize("marker", ["", "N/A", "-", 0, MISSING])
def test_custom_empty_value(marker):
	assert parse("A,,C\n,B,", empty_value=marker) == [
		["A", marker, "C"],
		[marker, "B", marker],
	]


def test_empty_marker_is_returned_by_identity():
	marker = object()
	rows = parse("A,,C\n\n\tx", empty_value=marker)
	empties = [cell for row in rows for cell in row if not isinstance(cell, str)]
	assert empties
	assert all(cell is marker for cell in empties)


def test_missing_marker_is_falsy_and_named():
	assert not MISSING
	assert repr(MISSING) == "MISSING"


def test_options_object_and_overrides_combine():
	options = ParseOptions(empty_value="-")
	assert parse("A,,C", options) == [["A", "-", "C"]]
	assert parse("A,,C", options, empty_value="?") == [["A", "?", "C"]]
	assert options.empty_value == "-"


def test_unknown_override_is_rejected():
	with pytest.raises(TypeError):
		parse("A,B", unknown_option=True)


#============================================
# trimming


def test_trim_disabled_keeps_whitespace():
	assert parse("A,  ,C\n ,B, ", trim=False) == [["A", "  ", "C"], [" ", "B", " "]]
	assert parse("  A  \t  B  ", trim=False) == [["  A  ", "  B  "]]


def test_whitespace_only_cells_become_empty_when_trimmed():
	assert parse("A,   ,C\n   ,B,   ", empty_value="BLANK") == [
		["A", "BLANK", "C"],
		["BLANK", "B", "BLANK"],
	]


def test_trim_is_idempotent():
	once = parse(" A , B \n C , D ")
	again = parse("\n".join(",".join(row) for row in once))
	assert once == again == [["A", "B"], ["C", "D"]]


#============================================
# empty rows


@pytest.mark.parametrize(
	"text, expected",
	[
		("A,B\n\nC,D", [["A", "B"], ["C", "D"]]),
		("\n\nA,B\nC,D", [["A", "B"], ["C", "D"]]),
		("A,B\nC,D\n\n", [["A", "B"], ["C", "D"]]),
		("A,B\n   \nC,D", [["A", "B"], ["C", "D"]]),
		("A\tB\n\n\nC\tD", [["A", "B"], ["C", "D"]]),
		("\n\n\n", []),
	],
)
def test_skip_empty_rows(text, expected):
	assert parse(text, skip_empty_rows=True) == expected


def test_empty_rows_kept_by_default():
	assert parse("A,B\n\nC,D") == [["A", "B"], [None], ["C", "D"]]
	assert parse("A,B\n\nC,D", empty_value="-") == [["A", "B"], ["-"], ["C", "D"]]


def test_skip_empty_rows_with_custom_marker():
	assert parse("A,,C\n\nD,E,\n\n", empty_value="0", skip_empty_rows=True) == [
		["A", "0", "C"],
		["D", "E", "0"],
	]


def test_row_of_several_empty_cells_is_not_an_empty_row():
	assert parse('A,B\n"",""', skip_empty_rows=True) == [["A", "B"], [None, None]]


#============================================
# empty cells


@pytest.mark.parametrize(
	"text, expected",
	[
		("A,,C\n,B,", [["A", "C"], ["B"]]),
		("A\t\tC\n\tB\t", [["A", "C"], ["B"]]),
		("A;;C\n;B;", [["A", "C"], ["B"]]),
		("A||C\n|B|", [["A", "C"], ["B"]]),
		("A  C\n B ", [["A", "C"], ["B"]]),
		(",,A,,", [["A"]]),
		('"A","","C"', [["A", "C"]]),
		('"A"," ","C"', [["A", "C"]]),
		("", []),
	],
)
def test_skip_empty_cells(text, expected):
	assert parse(text, skip_empty_cells=True) == expected


def test_skip_empty_cells_keeps_emptied_rows_as_empty_lists():
	assert parse("A,B,C\n,,\nD,E,F", skip_empty_cells=True) == [["A", "B", "C"], [], ["D", "E", "F"]]
	assert parse("A,B\n\nC,D", skip_empty_cells=True) == [["A", "B"], [], ["C", "D"]]
	assert parse(",,", skip_empty_cells=True) == [[]]


def test_skip_empty_cells_and_rows_drop_emptied_rows():
	assert parse("A,B\n,\n,,\nC,D", skip_empty_cells=True, skip_empty_rows=True) == [["A", "B"], ["C", "D"]]
	assert parse(",,", skip_empty_cells=True, skip_empty_rows=True) == []


def test_skip_empty_cells_without_trim_keeps_whitespace():
	assert parse("A,  ,C\n ,B, ", skip_empty_cells=True, trim=False) == [
		["A", "  ", "C"],
		[" ", "B", " "],
	]


def test_skip_empty_cells_preserves_numeric_commas():
	text = 'Name,,Amount\nJohn,,"$1,234.56"\n,Jane,$2,345.67'
	assert parse(text, skip_empty_cells=True) == [
		["Name", "Amount"],
		["John", "$1,234.56"],
		["Jane", "$2,345.67"],
	]


def test_messy_export_cleanup():
	text = "Product,,Price,,Stock,,\nWidget,,$1,234.56,,100,,\n,,Gadget,,$2,345.67,,50"
	assert parse(text, skip_empty_cells=True, skip_empty_rows=True) == [
		["Product", "Price", "Stock"],
		["Widget", "$1,234.56", "100"],
		["Gadget", "$2,345.67", "50"],
	]


#============================================
# padding


def test_pad_rows_with_default_marker():
	assert parse("A,B,C\nD,E\nF", pad_rows=True) == [
		["A", "B", "C"],
		["D", "E", None],
		["F", None, None],
	]


def test_pad_rows_longest_row_in_middle():
	assert parse("A,B\nC,D,E,F,G\nH,I", pad_rows=True) == [
		["A", "B", None, None, None],
		["C", "D", "E", "F", "G"],
		["H", "I", None, None, None],
	]


def test_pad_rows_tab_and_csv_agree():
	tab_rows = parse("A\tB\tC\nD\tE\nF", pad_rows=True)
	csv_rows = parse("A,B,C\nD,E\nF", pad_rows=True)
	assert tab_rows == csv_rows


def test_pad_rows_after_skipping_empty_rows():
	text = "  A  ,  B  ,  C  \n\n  D  \n\n  E  ,  F  "
	assert parse(text, empty_value="MISSING", pad_rows=True, skip_empty_rows=True) == [
		["A", "B", "C"],
		["D", "MISSING", "MISSING"],
		["E", "F", "MISSING"],
	]


def test_pad_rows_with_numeric_commas():
	text = "Name,Amount,Status\nJohn,$1,234.56,Active\nJane,$2,345.67"
	assert parse(text, pad_rows=True) == [
		["Name", "Amount", "Status"],
		["John", "$1,234.56", "Active"],
		["Jane", "$2,345.67", None],
	]


def test_padding_uses_the_marker_object():
	marker = object()
	rows = parse("A,B,C\nD", empty_value=marker, pad_rows=True)
	assert rows[1][0] == "D"
	assert rows[1][1] is marker and rows[1][2] is marker


@pytest.mark.parametrize(
	"text",
	["A,B,C\nD,E\nF", "A\nB,C\nD,E,F,G,H", "A;B;C;D\nE;F\nG;H;I", "A B C D\nE F\nG", "x"],
)
def test_padded_rows_are_rectangular(text):
	rows = parse(text, pad_rows=True)
	widths = {len(row) for row in rows}
	assert len(widths) == 1
	assert widths.pop() == max(len(row) for row in parse(text))


def test_pad_rows_with_empty_input():
	assert parse("", pad_rows=True) == []


def test_skip_empty_cells_wins_over_padding():
	assert parse("A,B,C\nD,,E\nF", pad_rows=True, skip_empty_cells=True) == [["A", "B", "C"], ["D", "E"], ["F"]]
	assert parse("A,B,C\n,,\nD,,E\n\nF", pad_rows=True, skip_empty_cells=True, skip_empty_rows=True) == [
		["A", "B", "C"],
		["D", "E"],
		["F"],
	]


def test_all_options_agree_across_tab_and_csv():
	options = ParseOptions(empty_value="N/A", skip_empty_cells=True, skip_empty_rows=True)
	tab_rows = parse("A\t\tC\n\n  D  \t  E  \t", options)
	csv_rows = parse("A,,C\n\n  D  ,  E  ,", options)
	assert tab_rows == csv_rows == [["A", "C"], ["D", "E"]]
