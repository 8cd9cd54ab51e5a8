"""
Console reporting for a complexity run.
"""

import json
import sys
from typing import Optional, TextIO

from .models import AnalysisSummary


class ConsoleReporter:
    """Writes human-readable progress and results to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream or sys.stdout

    def _print(self, *parts) -> None:
        print(*parts, file=self._stream)

    def loaded(self) -> None:
        self._print("Code loaded successfully.")
        self._print("Complexity rules loaded successfully.")

    def summary(self, summary: AnalysisSummary) -> None:
        """Print the accepted results, the total and the limit verdict."""
        results = [result.model_dump() for result in summary.results]

        self._print("Analysis Summary:")
        self._print(json.dumps(results, indent=2, ensure_ascii=False))
        self._print(
            f"Rules evaluated: {summary.evaluated}, skipped: {len(summary.skipped)}"
        )
        for outcome in summary.skipped:
            self._print(f"  - {outcome.rule} ({outcome.status.value})")
        self._print("Final Complexity Count:", summary.total_count)
        self._print("Is within complexity limit?", summary.within_limit)
