"""Parser package - Turns configuration text into OptionProperties records.

The line parser is a pure function; the file parser owns all I/O and
tracks 1-based line numbers for the invalid-option records.
"""

from configster.parser.config_file import ConfigFileParser, parse_file
from configster.parser.line import parse_line

__all__ = ["ConfigFileParser", "parse_file", "parse_line"]
