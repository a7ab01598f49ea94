"""Reporting adapters for surfacing verification results.

Implementations support multiple channels:
- Recording (keep results in memory for later inspection)
- Logging (one log line per verification)
- Asserting (raise on failure, for pytest and plain assert-style tests)
"""

from .asserting import AssertingReporter
from .log import LoggingReporter
from .recording import RecordingReporter

__all__ = ["AssertingReporter", "LoggingReporter", "RecordingReporter"]
