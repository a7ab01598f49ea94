"""Logging reporter.

Implements ReportingPort by writing one log record per verification:
INFO for a pass, WARNING for a failure.
"""

import logging

from mockledger.core.models import VerificationResult
from mockledger.core.ports import ReportingPort

logger = logging.getLogger(__name__)


class LoggingReporter(ReportingPort):
    """Writes verification results to the standard logging system."""

    def __init__(self, logger_name: str | None = None):
        """Initialize logging reporter.

        Args:
            logger_name: Logger to write to. Defaults to this module's logger.
        """
        self.logger = logging.getLogger(logger_name) if logger_name else logger

    def report(self, result: VerificationResult) -> None:
        if result.passed:
            self.logger.info(f"ok - {result.description}")
        elif result.description == result.detail:
            self.logger.warning(f"not ok - {result.description}")
        else:
            self.logger.warning(f"not ok - {result.description} [{result.detail}]")
