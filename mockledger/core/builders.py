"""Builders that capture an operation call and act on it.

stub(mock).fetch(1), verify(mock).fetch(1) and inspect(mock).fetch(1)
all read like a call on the mock itself. The builders below intercept
that call, capture operation name and arguments, and then register a
stub, run a verification, or query the ledger.
"""

from collections.abc import Callable, Mapping
from typing import Any

from .errors import UsageError
from .mock import Mock, ledger_of, stubs_of
from .models import Execute, Invocation, Raise, Return, StubRegistration, VerificationResult
from .ports import ReportingPort
from .quantifiers import Quantifier
from .stubs import StubTable
from .verifier import Verifier


class _OperationCapture:
    """Turns attribute calls into _capture(operation, args, kwargs)."""

    def __getattr__(self, operation: str) -> Callable[..., Any]:
        if operation.startswith("_"):
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {operation!r}"
            )

        def capture(*args: Any, **kwargs: Any) -> Any:
            return self._capture(operation, args, kwargs)

        capture.__name__ = operation
        return capture

    def _capture(
        self, operation: str, args: tuple[Any, ...], kwargs: Mapping[str, Any]
    ) -> Any:
        raise NotImplementedError


class ResponseSetter:
    """Appends canned responses to one stub registration.

    Every method returns the setter itself so responses chain:
        stub(it).next().returns(1).returns(2).raises(StopIteration)
    """

    def __init__(self, table: StubTable, registration: StubRegistration):
        self._table = table
        self._registration = registration

    def returns(self, *values: Any) -> "ResponseSetter":
        """Answer the call with values (none, one, or several)."""
        self._table.push_response(self._registration, Return(values))
        return self

    def raises(self, error: Any) -> "ResponseSetter":
        """Fail the call with error.

        Exception instances and classes are raised as-is; any other value
        is wrapped in StubbedFailure.
        """
        self._table.push_response(self._registration, Raise(error))
        return self

    def executes(self, callback: Callable[..., Any]) -> "ResponseSetter":
        """Answer the call with callback(*args, **kwargs)."""
        if not callable(callback):
            raise UsageError(f"executes() requires a callable, got {callback!r}")
        self._table.push_response(self._registration, Execute(callback))
        return self

    @property
    def registration(self) -> StubRegistration:
        return self._registration

    def __repr__(self) -> str:
        return f"<ResponseSetter {self._registration}>"


class StubBuilder(_OperationCapture):
    """Registers a stub for whichever operation is called on it."""

    def __init__(self, mock: Mock):
        self._mock = mock

    def _capture(
        self, operation: str, args: tuple[Any, ...], kwargs: Mapping[str, Any]
    ) -> ResponseSetter:
        table = stubs_of(self._mock)
        registration = table.register(operation, args, kwargs)
        return ResponseSetter(table, registration)


class VerifyBuilder(_OperationCapture):
    """Verifies whichever operation is called on it, immediately."""

    def __init__(
        self,
        mock: Mock,
        quantifier: Quantifier,
        label: str | None = None,
        reporter: ReportingPort | None = None,
        verifier: Verifier | None = None,
    ):
        self._mock = mock
        self._quantifier = quantifier
        self._label = label
        self._reporter = reporter
        self._verifier = verifier or Verifier()

    def _capture(
        self, operation: str, args: tuple[Any, ...], kwargs: Mapping[str, Any]
    ) -> VerificationResult:
        result = self._verifier.verify(
            self._mock,
            operation,
            args,
            kwargs,
            quantifier=self._quantifier,
            label=self._label,
        )
        if self._reporter is not None:
            self._reporter.report(result)
        return result


class Inspector(_OperationCapture):
    """Returns the recorded invocations matching whichever operation is called."""

    def __init__(self, mock: Mock):
        self._mock = mock

    def _capture(
        self, operation: str, args: tuple[Any, ...], kwargs: Mapping[str, Any]
    ) -> tuple[Invocation, ...]:
        return tuple(ledger_of(self._mock).matching(operation, args, kwargs))
