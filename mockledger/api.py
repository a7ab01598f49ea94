"""Public entry points: mock(), stub(), verify(), inspect().

Each function works purely on the mock it is given. A mock owns its own
call ledger and stub table, so there is no process-wide registry.
Argument validation happens before anything is recorded or registered:
misuse raises UsageError and leaves every mock untouched.
"""

from typing import Any

from mockledger.composition import default_reporter, default_verifier
from mockledger.core.builders import Inspector, StubBuilder, VerifyBuilder
from mockledger.core.errors import UsageError
from mockledger.core.mock import Mock, invoke, invoke_list, is_mock, ledger_of
from mockledger.core.models import Invocation
from mockledger.core.ports import ReportingPort
from mockledger.core.quantifiers import quantifier_from_options


def _require_mock(target: Any, caller: str) -> Mock:
    if target is None or not is_mock(target):
        raise UsageError(f"{caller}() must be given a mock object")
    return target


def mock(class_name: str | None = None) -> Mock:
    """Create a new mock.

    Every operation is accepted. Unstubbed operations return None.

        warehouse = mock("Warehouse")
        assert warehouse.has_inventory("coffee", 50) is None
    """
    if class_name is not None and not isinstance(class_name, str):
        raise UsageError("The argument for mock() must be a string")
    return Mock(class_name)


def stub(target: Mock | None = None) -> StubBuilder:
    """Start a stub: stub(m).op(*args).returns(...) or .raises(...).

    The stub applies to the exact operation and arguments given (matchers
    allowed). A later stub for the same arguments overrides an earlier one.
    Chained responses are consumed in order and the last one repeats:

        stub(iterator).next().returns(1).returns(2).raises(StopIteration)
    """
    return StubBuilder(_require_mock(target, "stub"))


def verify(
    target: Mock | None = None,
    label: str | None = None,
    *,
    reporter: ReportingPort | None = None,
    **options: Any,
) -> VerifyBuilder:
    """Start a verification: verify(m, times=2).op(*args).

    At most one of times, at_least, at_most, between may be given; with
    none the expectation is exactly one call. times may also be a callable
    taking the count. A label replaces the generated description.

    The operation call on the returned builder evaluates immediately,
    hands the result to reporter (default: configured by settings) and
    returns the VerificationResult.

    Raises:
        UsageError: target is not a mock, label is not a string, or the
            options are missing, conflicting or malformed.
    """
    target = _require_mock(target, "verify")
    if label is not None and not isinstance(label, str):
        raise UsageError(f"verify() label must be a string, got {label!r}")
    quantifier = quantifier_from_options(**options)

    return VerifyBuilder(
        target,
        quantifier,
        label=label,
        reporter=reporter if reporter is not None else default_reporter(),
        verifier=default_verifier(),
    )


def inspect(target: Mock | None = None) -> Inspector:
    """Start an inspection: inspect(m).op(*args) -> matching invocations."""
    return Inspector(_require_mock(target, "inspect"))


def calls(target: Mock | None = None) -> tuple[Invocation, ...]:
    """Every invocation recorded on a mock, in call order."""
    return ledger_of(_require_mock(target, "calls")).snapshot()


def _require_operation(operation: Any, caller: str) -> str:
    if not isinstance(operation, str) or not operation:
        raise UsageError(f"{caller}() operation must be a non-empty string, got {operation!r}")
    return operation


def call(target: Mock | None, operation: str, /, *args: Any, **kwargs: Any) -> Any:
    """Invoke an operation by name; single-value convention."""
    target = _require_mock(target, "call")
    return invoke(target, _require_operation(operation, "call"), *args, **kwargs)


def call_list(target: Mock | None, operation: str, /, *args: Any, **kwargs: Any) -> list[Any]:
    """Invoke an operation by name; every produced value as a list."""
    target = _require_mock(target, "call_list")
    return invoke_list(target, _require_operation(operation, "call_list"), *args, **kwargs)
