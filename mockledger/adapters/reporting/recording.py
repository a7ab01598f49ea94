"""Recording reporter.

Implements ReportingPort by keeping every result in memory, in the
order the verifications ran.
"""

from mockledger.core.models import VerificationResult
from mockledger.core.ports import ReportingPort


class RecordingReporter(ReportingPort):
    """Collects verification results for later inspection."""

    def __init__(self) -> None:
        self.results: list[VerificationResult] = []

    def report(self, result: VerificationResult) -> None:
        self.results.append(result)

    @property
    def passed(self) -> list[VerificationResult]:
        return [r for r in self.results if r.passed]

    @property
    def failed(self) -> list[VerificationResult]:
        return [r for r in self.results if not r.passed]

    def last(self) -> VerificationResult | None:
        """Get the most recent result, if any."""
        if self.results:
            return self.results[-1]
        return None

    def all_passed(self) -> bool:
        return not self.failed

    def reset(self) -> None:
        """Forget all collected results."""
        self.results.clear()
