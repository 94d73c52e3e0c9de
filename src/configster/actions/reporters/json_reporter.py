"""JSON Reporter Implementation."""

import json

from configster.actions.reporters.base import BaseReporter
from configster.model.option import OptionProperties


class JsonReporter(BaseReporter):
    """Generates machine-readable JSON output."""

    def _dump(self, data: object) -> None:
        self.console.out(json.dumps(data, indent=2, ensure_ascii=False), highlight=False)

    def report_records(self, source: str, records: list[OptionProperties]) -> None:
        self._dump({
            "file": source,
            "options": [r.to_dict() for r in records],
        })

    def report_check(self, results: list[tuple[str, list[OptionProperties]]]) -> int:
        # One array for all files so the output stays a single JSON document.
        data = [
            {"file": source, "invalid": [r.option for r in self.invalid_records(records)]}
            for source, records in results
        ]
        self._dump(data)
        return sum(1 for item in data if item["invalid"])
