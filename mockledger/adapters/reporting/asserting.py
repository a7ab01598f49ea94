"""Asserting reporter.

Implements ReportingPort by raising VerificationFailed, an
AssertionError, whenever a verification does not hold. Under pytest
this makes verify(...) behave like an assert statement.
"""

import logging

from mockledger.core.errors import VerificationFailed
from mockledger.core.models import VerificationResult
from mockledger.core.ports import ReportingPort

logger = logging.getLogger(__name__)


class AssertingReporter(ReportingPort):
    """Raises on failed verifications, stays silent on passes."""

    def report(self, result: VerificationResult) -> None:
        if result.passed:
            return
        message = result.description
        if message != result.detail:
            message = f"{message}: {result.detail}"
        logger.debug(f"Verification failed: {message}")
        raise VerificationFailed(message, result.count)
