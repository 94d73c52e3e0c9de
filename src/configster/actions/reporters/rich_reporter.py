"""Rich Reporter Implementation."""

from rich.markup import escape
from rich.table import Table

from configster.actions.reporters.base import BaseReporter
from configster.model.option import OptionProperties


class RichReporter(BaseReporter):
    """Generates high-fidelity terminal output using Rich."""

    def report_records(self, source: str, records: list[OptionProperties]) -> None:
        invalid_count = len(self.invalid_records(records))

        table = Table(title=escape(source), header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Option", style="cyan")
        table.add_column("Value")
        table.add_column("Attributes")

        for index, record in enumerate(records, start=1):
            if record.is_invalid:
                table.add_row(str(index), f"[red]{escape(record.option)}[/]", "", "")
                continue
            table.add_row(
                str(index),
                escape(record.option),
                escape(record.value.primary),
                escape(", ".join(record.value.attributes)),
            )

        self.console.print(table)

        summary = f"   Summary: {len(records)} option(s)"
        if invalid_count:
            summary += f", [red]{invalid_count} invalid[/]"
        self.console.print(summary)

    def report_check(self, results: list[tuple[str, list[OptionProperties]]]) -> int:
        failed = 0
        for source, records in results:
            invalid = self.invalid_records(records)
            if not invalid:
                self.console.print(f"[green][bold]PASS:[/] {escape(source)}[/]")
                continue

            failed += 1
            self.console.print(f"[red][bold]FAIL:[/] {escape(source)}[/] ({len(invalid)} invalid line(s))")
            for record in invalid:
                self.console.print(f"   [red]-[/] {escape(record.option)}")
        return failed
