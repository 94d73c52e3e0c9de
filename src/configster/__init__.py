"""configster - Line-oriented configuration file parser.

Reads `option = primary , attr1 , attr2` files into an ordered list of
OptionProperties records.
"""

__version__ = "0.1.0"

from configster.errors import ConfigsterError, FileOpenError, LineReadError, SettingsError
from configster.model import Invalid, LineOutcome, OptionProperties, Record, Skip, Value
from configster.parser import ConfigFileParser, parse_file, parse_line


def get_version() -> str:
    """Return the library version."""
    return __version__


__all__ = [
    "ConfigFileParser",
    "ConfigsterError",
    "FileOpenError",
    "Invalid",
    "LineOutcome",
    "LineReadError",
    "OptionProperties",
    "Record",
    "SettingsError",
    "Skip",
    "Value",
    "__version__",
    "get_version",
    "parse_file",
    "parse_line",
]
