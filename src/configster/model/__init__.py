"""Model package - Records produced by the parser."""

from configster.model.option import INVALID_OPTION_PREFIX, OptionProperties, Value
from configster.model.outcome import Invalid, LineOutcome, Record, Skip

__all__ = [
    "INVALID_OPTION_PREFIX",
    "Invalid",
    "LineOutcome",
    "OptionProperties",
    "Record",
    "Skip",
    "Value",
]
