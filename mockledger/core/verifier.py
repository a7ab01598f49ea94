"""Verification of recorded calls against a quantifier."""

import logging
from collections.abc import Mapping
from typing import Any

from .mock import Mock, ledger_of
from .models import (
    DEFAULT_MAX_ARG_REPR_LENGTH,
    VerificationResult,
    describe_expectation,
    format_call,
)
from .quantifiers import Exactly, Quantifier

logger = logging.getLogger(__name__)


class Verifier:
    """Counts matching calls in a mock's ledger and evaluates a quantifier.

    A quantifier that is not satisfied yields a failed result; it is
    never raised.
    """

    def __init__(self, max_arg_repr_length: int = DEFAULT_MAX_ARG_REPR_LENGTH):
        self.max_arg_repr_length = max_arg_repr_length

    def verify(
        self,
        mock: Mock,
        operation: str,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any] | None = None,
        quantifier: Quantifier | None = None,
        label: str | None = None,
    ) -> VerificationResult:
        """Check how often operation(args) was called on mock.

        Args:
            mock: The mock whose ledger is scanned.
            operation: Operation name to count.
            args: Expected positional arguments (values or matchers).
            kwargs: Expected keyword arguments (values or matchers).
            quantifier: Count policy; defaults to exactly one call.
            label: Replaces the generated description when given.

        Returns:
            VerificationResult with the observed count and a description
            such as "remove('coffee', 50) was called 1 time(s) (observed 1)".
        """
        quantifier = quantifier or Exactly(1)
        count = ledger_of(mock).count(operation, args, kwargs)
        passed = quantifier.accepts(count)
        call = format_call(operation, args, kwargs, self.max_arg_repr_length)

        if label is not None:
            description = label
        else:
            description = describe_expectation(call, quantifier, count)

        logger.debug(
            f"Verification {'passed' if passed else 'failed'} for {mock!r}: {description}"
        )
        return VerificationResult(
            passed=passed,
            description=description,
            count=count,
            call=call,
            quantifier=quantifier,
        )
