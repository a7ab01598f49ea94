"""Port interfaces for the mockledger engine.

The core never decides how a verification outcome is shown to the
test runner. It hands every VerificationResult to a ReportingPort;
implementations live in the adapters/ package.
"""

from abc import ABC, abstractmethod

from .models import VerificationResult


class ReportingPort(ABC):
    """Port for surfacing verification results.

    Implementations might record results for later assertions, write
    them to a log, or turn failures into assertion errors. The core
    calls report() exactly once per verification, after the count has
    been evaluated.
    """

    @abstractmethod
    def report(self, result: VerificationResult) -> None:
        """Handle one verification result.

        Args:
            result: The outcome of a verification, passed or failed.

        Raises:
            Exception: Implementations may raise to abort the calling
                test (for example on a failed result). The core does not
                catch it.
        """
