"""Configuration file parser.

Reads a file line by line, hands each line to the line parser and
collects the resulting records in file order.

IMPORTANT DESIGN NOTES:
1. Parsing is all-or-nothing: an unreadable line aborts the whole file
   and no partial list is returned
2. Line numbers count every physical line, blanks and comments included,
   so InvalidOption_on_Line<N> matches what an editor shows
3. The file is read in binary and decoded one line at a time, so a decode
   error is reported against the exact line that caused it
"""

import codecs
import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from configster.errors import FileOpenError, LineReadError
from configster.model.option import OptionProperties
from configster.model.outcome import Invalid, LineOutcome, Skip
from configster.parser.line import check_delimiter, parse_line

logger = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"
ASCII_SAMPLE = b"# option = value, attr\n"


class ConfigFileParser:
    """Parser for `option = value, attr, ...` configuration files.

    Example:
        >>> parser = ConfigFileParser(attr_delimiter=",")
        >>> for props in parser.parse_file("app.conf"):
        ...     print(props.option, props.value.primary, props.value.attributes)
    """

    def __init__(self, attr_delimiter: str = ",", encoding: str = "utf-8") -> None:
        check_delimiter(attr_delimiter)
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {encoding}") from e
        # Lines are split on b"\n" before decoding, which only works when
        # ASCII text encodes to the same bytes.
        try:
            ascii_compatible = ASCII_SAMPLE.decode(encoding) == ASCII_SAMPLE.decode("ascii")
        except (UnicodeDecodeError, LookupError):
            ascii_compatible = False
        if not ascii_compatible:
            raise ValueError(f"Encoding must be ASCII compatible: {encoding}")

        self.attr_delimiter = attr_delimiter
        self.encoding = encoding

    def iter_outcomes(self, lines: Iterable[str]) -> Iterator[tuple[int, LineOutcome]]:
        """Yield (line_number, outcome) for every line, numbered from 1."""
        for line_num, line in enumerate(lines, start=1):
            if line_num == 1:
                line = line.lstrip(UTF8_BOM)
            yield line_num, parse_line(line, self.attr_delimiter, line_num)

    def parse_lines(self, lines: Iterable[str], source: str = "<lines>") -> list[OptionProperties]:
        """Parse already-read lines into records.

        Args:
            lines: Text lines in file order. Trailing newlines are allowed.
            source: Name used in log messages.

        Returns:
            One OptionProperties per non-skipped line, in input order.
        """
        records: list[OptionProperties] = []
        for line_num, outcome in self.iter_outcomes(lines):
            if isinstance(outcome, Skip):
                continue
            if isinstance(outcome, Invalid):
                logger.debug("%s:%d: whitespace in option name, recorded as %s", source, line_num, outcome.option)
            records.append(outcome.to_properties())

        logger.debug("%s: parsed %d option(s)", source, len(records))
        return records

    def parse_file(self, path: str | os.PathLike) -> list[OptionProperties]:
        """Parse a configuration file.

        Args:
            path: File to read.

        Returns:
            The records of the file, in file order.

        Raises:
            FileOpenError: The file does not exist or cannot be opened.
            LineReadError: A line could not be read or decoded.
        """
        name = str(path)
        try:
            handle = open(Path(path), "rb")
        except OSError as e:
            raise FileOpenError(name, e.strerror or str(e)) from e

        with handle:
            return self.parse_lines(self._decoded_lines(handle, name), source=name)

    def _decoded_lines(self, handle, name: str) -> Iterator[str]:
        """Decode the binary file handle one line at a time."""
        line_num = 0
        while True:
            try:
                raw = handle.readline()
            except OSError as e:
                raise LineReadError(name, line_num + 1, e.strerror or str(e)) from e
            if not raw:
                return
            line_num += 1
            try:
                line = raw.decode(self.encoding)
            except UnicodeDecodeError as e:
                raise LineReadError(name, line_num, str(e)) from e
            yield line


def parse_file(path: str | os.PathLike, attr_delimiter: str = ",") -> list[OptionProperties]:
    """Parse a configuration file with the given attribute delimiter.

    Shortcut for ConfigFileParser(attr_delimiter).parse_file(path).
    """
    return ConfigFileParser(attr_delimiter).parse_file(path)
