"""
clipgrid
========

Convert clipboard-style tabular text (spreadsheet copies, CSV exports) to
rows of cells and back.
"""

from .config import MISSING, OptionsError, ParseOptions, StringifyOptions
from .delimiters import Delimiter, LineEnding
from .parser import detect, parse
from .serializer import stringify

__version__ = "0.1.0"

__all__ = [
	"Delimiter",
	"LineEnding",
	"MISSING",
	"OptionsError",
	"ParseOptions",
	"StringifyOptions",
	"detect",
	"parse",
	"stringify",
]
