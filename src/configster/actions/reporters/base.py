"""Base Reporter Interface."""

from abc import ABC, abstractmethod

from rich.console import Console

from configster.model.option import OptionProperties


class BaseReporter(ABC):
    """Abstract base class for all record reporters."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @abstractmethod
    def report_records(self, source: str, records: list[OptionProperties]) -> None:
        """Print every record parsed from one file."""
        pass

    @abstractmethod
    def report_check(self, results: list[tuple[str, list[OptionProperties]]]) -> int:
        """Print the invalid-option records of every checked file.

        Args:
            results: (source, records) pairs in the order the files were given.

        Returns:
            Number of files with at least one invalid record.
        """
        pass

    @staticmethod
    def invalid_records(records: list[OptionProperties]) -> list[OptionProperties]:
        return [r for r in records if r.is_invalid]
