"""Plain Text Reporter Implementation."""

from configster.actions.reporters.base import BaseReporter
from configster.model.option import OptionProperties


class PlainReporter(BaseReporter):
    """Generates clean, text-only output."""

    def _print(self, text: str = "") -> None:
        # Option values are user text; never interpret them as markup.
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def report_records(self, source: str, records: list[OptionProperties]) -> None:
        self._print(f"FILE: {source}")
        self._print(f"Options: {len(records)}")
        self._print()

        for record in records:
            self._print(f"Option:'{record.option}' | value '{record.value.primary}'")
            for attr in record.value.attributes:
                self._print(f"   attr:'{attr}'")

    def report_check(self, results: list[tuple[str, list[OptionProperties]]]) -> int:
        failed = 0
        for source, records in results:
            invalid = self.invalid_records(records)
            if not invalid:
                self._print(f"OK: {source}")
                continue

            failed += 1
            self._print(f"INVALID: {source} ({len(invalid)} line(s))")
            for record in invalid:
                self._print(f"   - {record.option}")
        return failed
