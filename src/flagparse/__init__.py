"""
flagparse - A small command-line option parser.

Declare the accepted flags, parse an argument list against them and read
back the flags, their values and the positional arguments. Generates
column-aligned --help text and suggests the closest flag for misspellings.
"""

import logging

from .flags import Flag
from .formatting import flag_help_line, format_help, word_wrap
from .matches import Diagnostic, ErrorKind, ParseMatch, ParseResult, ParseStatus
from .parser import Parser
from .suggest import edit_distance, suggest_flag

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    "Diagnostic",
    "ErrorKind",
    "Flag",
    "ParseMatch",
    "ParseResult",
    "ParseStatus",
    "Parser",
    "edit_distance",
    "flag_help_line",
    "format_help",
    "suggest_flag",
    "word_wrap",
]
