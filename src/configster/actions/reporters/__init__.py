"""Reporters - Render parsed records in rich, plain or JSON form."""

from rich.console import Console

from configster.actions.reporters.base import BaseReporter
from configster.actions.reporters.json_reporter import JsonReporter
from configster.actions.reporters.plain_reporter import PlainReporter
from configster.actions.reporters.rich_reporter import RichReporter

REPORTERS: dict[str, type[BaseReporter]] = {
    "rich": RichReporter,
    "plain": PlainReporter,
    "json": JsonReporter,
}


def get_reporter(format_mode: str, console: Console) -> BaseReporter:
    """Return the reporter for an output format name."""
    try:
        return REPORTERS[format_mode](console)
    except KeyError:
        raise ValueError(f"Unknown output format: {format_mode}") from None


__all__ = ["BaseReporter", "JsonReporter", "PlainReporter", "RichReporter", "get_reporter"]
