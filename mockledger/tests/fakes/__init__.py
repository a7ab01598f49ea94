"""Fake implementations of core ports for testing.

- FakeReportingPort: Captured verification results for assertion
"""

from .reporter import FakeReportingPort

__all__ = ["FakeReportingPort"]
