"""Mock objects and the dispatcher that intercepts their operations.

Every public attribute of a Mock is an operation. Calling it goes
through dispatch(), which records the call in the mock's ledger before
asking the stub table for a response. Names starting with an underscore
are not operations; they raise AttributeError so Python's own protocol
lookups (copy, pickle, pytest introspection) never reach the ledger.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .ledger import CallLedger
from .models import Response, as_list, as_scalar
from .stubs import StubTable

logger = logging.getLogger(__name__)


class Mock:
    """Test double that accepts any operation.

    Unstubbed operations return None and never raise. The optional
    class name only shows up in repr().
    """

    __slots__ = ("_mock_class_name", "_mock_ledger", "_mock_stubs")

    def __init__(self, class_name: str | None = None):
        self._mock_class_name = class_name
        self._mock_ledger = CallLedger()
        self._mock_stubs = StubTable()

    def __getattr__(self, operation: str) -> Callable[..., Any]:
        if operation.startswith("_"):
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {operation!r}"
            )

        def call(*args: Any, **kwargs: Any) -> Any:
            return invoke(self, operation, *args, **kwargs)

        call.__name__ = operation
        return call

    def __repr__(self) -> str:
        if self._mock_class_name:
            return f"<Mock {self._mock_class_name} at {id(self):#x}>"
        return f"<Mock at {id(self):#x}>"


def is_mock(value: Any) -> bool:
    return isinstance(value, Mock)


def ledger_of(mock: Mock) -> CallLedger:
    return mock._mock_ledger


def stubs_of(mock: Mock) -> StubTable:
    return mock._mock_stubs


def class_name_of(mock: Mock) -> str | None:
    return mock._mock_class_name


# ============================================================================
# DISPATCH
# ============================================================================


def dispatch(
    mock: Mock,
    operation: str,
    args: tuple[Any, ...],
    kwargs: Mapping[str, Any] | None = None,
) -> Response:
    """Record an operation call and resolve its response.

    The invocation is appended to the ledger before resolution, so the
    call is visible to verification even if the response raises.
    """
    invocation = ledger_of(mock).record(operation, args, kwargs)
    response = stubs_of(mock).resolve(operation, args, kwargs)
    logger.debug(f"{mock!r}: {invocation} -> {response!r}")
    return response


def invoke(mock: Mock, operation: str, /, *args: Any, **kwargs: Any) -> Any:
    """Call an operation and collapse the result to a single value.

    No values gives None, one value gives that value, several give a tuple.
    A Raise response propagates its error to the caller.
    """
    response = dispatch(mock, operation, args, kwargs)
    return as_scalar(response.produce(args, kwargs))


def invoke_list(mock: Mock, operation: str, /, *args: Any, **kwargs: Any) -> list[Any]:
    """Call an operation and return every produced value as a list."""
    response = dispatch(mock, operation, args, kwargs)
    return as_list(response.produce(args, kwargs))
