"""Error taxonomy for the mockledger engine.

Two disjoint families:

- UsageError: the API was misused (bad mock argument, bad quantifier
  options). Raised before any ledger or stub table is touched.
- StubbedFailure: a test author configured an operation to fail and
  the configured error value is not itself an exception.
"""

from typing import Any


class MockledgerError(Exception):
    """Base class for all errors raised by mockledger."""


class UsageError(MockledgerError, ValueError):
    """Programmer misuse of the mock/stub/verify API."""


class StubbedFailure(MockledgerError):
    """A stubbed operation raised a configured non-exception value."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(value if isinstance(value, str) else repr(value))


class VerificationFailed(MockledgerError, AssertionError):
    """A verification did not hold.

    Only raised by reporters that turn failed results into assertions.
    The core itself never raises this.
    """

    def __init__(self, description: str, count: int):
        self.description = description
        self.count = count
        super().__init__(description)
