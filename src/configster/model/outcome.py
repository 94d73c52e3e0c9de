"""Line outcomes - What the line parser decided about one line.

A line is either skipped (blank or comment), parsed into a record, or
rejected because its key contains whitespace. Rejected lines are still
reported to the caller as a record named InvalidOption_on_Line<N>, so a
bad line never aborts the whole file.
"""

from dataclasses import dataclass, field

from configster.model.option import INVALID_OPTION_PREFIX, OptionProperties


@dataclass(frozen=True)
class Skip:
    """Blank line, full-line comment or a line with nothing before the '='.

    Produces no record.
    """

    def as_tuple(self) -> tuple[str, str, list[str]]:
        """Legacy (option, primary, attributes) triple.

        Always ("", "", []). For "= value" lines the older triple form kept
        the value, e.g. ("", "value", []); both were dropped by the file
        parser, so parsed files are unaffected.
        """
        return ("", "", [])


@dataclass(frozen=True)
class Record:
    """A valid `option = primary, attr, ...` line."""

    option: str
    primary: str = ""
    attributes: tuple[str, ...] = field(default_factory=tuple)

    def as_tuple(self) -> tuple[str, str, list[str]]:
        return (self.option, self.primary, list(self.attributes))

    def to_properties(self) -> OptionProperties:
        return OptionProperties.new(self.option, self.primary, self.attributes)


@dataclass(frozen=True)
class Invalid:
    """A line whose key contains whitespace."""

    line_number: int

    @property
    def option(self) -> str:
        return f"{INVALID_OPTION_PREFIX}{self.line_number}"

    def as_tuple(self) -> tuple[str, str, list[str]]:
        return (self.option, "", [])

    def to_properties(self) -> OptionProperties:
        return OptionProperties(option=self.option, invalid_line=self.line_number)


LineOutcome = Skip | Record | Invalid
