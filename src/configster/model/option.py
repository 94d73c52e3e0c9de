"""OptionProperties dataclass - One parsed configuration entry."""

from dataclasses import dataclass, field
from typing import Any

# Option names synthesized for lines whose key contains whitespace
# look like "InvalidOption_on_Line8".
INVALID_OPTION_PREFIX = "InvalidOption_on_Line"


@dataclass(frozen=True)
class Value:
    """The primary value and its attribute list.

    Attributes:
        primary: Text following the option and the '=' sign, up to the
            first attribute delimiter (e.g. "/home/foo" in
            "directory = /home/foo, removable").
        attributes: Delimiter-separated tokens after the primary value,
            in source order. Adjacent delimiters produce empty strings.
    """

    primary: str = ""
    attributes: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class OptionProperties:
    """A single option read from a configuration file.

    Example:
        >>> props = OptionProperties.new("option", "Blue", ["light", "shiny"])
        >>> props.value.primary
        'Blue'
    """

    option: str
    value: Value = field(default_factory=Value)
    # Line number of the rejected line for InvalidOption_on_Line<N> records.
    invalid_line: int | None = field(default=None, compare=False)

    @classmethod
    def new(cls, option: str, primary: str = "", attributes: list[str] | tuple[str, ...] = ()) -> "OptionProperties":
        """Build a record from its three parts."""
        return cls(option=option, value=Value(primary=primary, attributes=tuple(attributes)))

    @property
    def primary(self) -> str:
        return self.value.primary

    @property
    def attributes(self) -> tuple[str, ...]:
        return self.value.attributes

    @property
    def is_invalid(self) -> bool:
        """True for records synthesized from a line with whitespace in its key."""
        return self.invalid_line is not None

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form, used for JSON output."""
        return {
            "option": self.option,
            "value": {
                "primary": self.value.primary,
                "attributes": list(self.value.attributes),
            },
        }

    def __str__(self) -> str:
        if not self.value.attributes:
            return f"{self.option} = {self.value.primary}"
        return f"{self.option} = {self.value.primary} [{', '.join(self.value.attributes)}]"
