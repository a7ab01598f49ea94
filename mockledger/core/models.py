"""Domain models for the mockledger engine.

Invocations, canned responses, stub registrations and verification
results. Everything here is plain Python; no adapter concerns leak in.
"""

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .errors import StubbedFailure

if TYPE_CHECKING:
    from .quantifiers import Quantifier

DEFAULT_MAX_ARG_REPR_LENGTH = 80


def _short_repr(value: Any, max_length: int) -> str:
    text = repr(value)
    if len(text) > max_length:
        return text[: max(max_length - 3, 1)] + "..."
    return text


def format_call(
    operation: str,
    args: tuple[Any, ...],
    kwargs: Mapping[str, Any] | None = None,
    max_arg_repr_length: int = DEFAULT_MAX_ARG_REPR_LENGTH,
) -> str:
    """Render an operation call the way it would be written in source.

    Examples:
        format_call("remove", ("coffee", 50)) -> "remove('coffee', 50)"
        format_call("get", (), {"key": 1}) -> "get(key=1)"
    """
    parts = [_short_repr(arg, max_arg_repr_length) for arg in args]
    for name, value in (kwargs or {}).items():
        parts.append(f"{name}={_short_repr(value, max_arg_repr_length)}")
    return f"{operation}({', '.join(parts)})"


def _read_only(kwargs: Mapping[str, Any] | None) -> MappingProxyType[str, Any]:
    if isinstance(kwargs, MappingProxyType):
        return kwargs
    return MappingProxyType(dict(kwargs or {}))


@dataclass(frozen=True)
class Invocation:
    """A single intercepted operation call on a mock.

    Sequence numbers are assigned by the owning mock's ledger and are
    strictly increasing per mock, starting at 1.
    """

    operation: str
    args: tuple[Any, ...]
    kwargs: Mapping[str, Any]  # converted to proxy in __post_init__
    sequence_number: int

    def __post_init__(self) -> None:
        """Validate invocation invariants and freeze the arguments."""
        if not isinstance(self.operation, str) or not self.operation:
            raise ValueError("operation must be a non-empty string")
        if self.sequence_number < 1:
            raise ValueError(
                f"sequence_number must be >= 1, got {self.sequence_number}"
            )
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "kwargs", _read_only(self.kwargs))

    def __str__(self) -> str:
        return format_call(self.operation, self.args, self.kwargs)


# ============================================================================
# RESPONSES
# ============================================================================


class Response(ABC):
    """A canned outcome for a stubbed operation."""

    @abstractmethod
    def produce(self, args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> tuple[Any, ...]:
        """Produce the values for one call, or raise.

        Args:
            args: Positional arguments of the intercepted call.
            kwargs: Keyword arguments of the intercepted call.

        Returns:
            The ordered values the call yields.
        """


@dataclass(frozen=True)
class Return(Response):
    """Return a fixed sequence of values."""

    values: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    def produce(self, args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> tuple[Any, ...]:
        return self.values


@dataclass(frozen=True)
class Raise(Response):
    """Fail the intercepted call with a configured error.

    Exception instances and exception classes propagate unchanged.
    Any other value is wrapped in StubbedFailure.
    """

    error: Any

    def produce(self, args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> tuple[Any, ...]:
        if isinstance(self.error, BaseException):
            raise self.error
        if isinstance(self.error, type) and issubclass(self.error, BaseException):
            raise self.error()
        raise StubbedFailure(self.error)


@dataclass(frozen=True)
class Execute(Response):
    """Run a callback with the call's arguments and return its result.

    A callback returning None produces no values, the same as an
    unstubbed call.
    """

    callback: Callable[..., Any]

    def produce(self, args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> tuple[Any, ...]:
        result = self.callback(*args, **kwargs)
        if result is None:
            return ()
        return (result,)


EMPTY_RESPONSE = Return(())


def as_scalar(values: tuple[Any, ...]) -> Any:
    """Collapse produced values for a single-value call site.

    No values gives None, one value gives that value, several values
    give a tuple.
    """
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return tuple(values)


def as_list(values: tuple[Any, ...]) -> list[Any]:
    """Expose produced values for a list call site."""
    return list(values)


# ============================================================================
# STUBS
# ============================================================================


@dataclass
class StubRegistration:
    """Canned responses bound to an operation and an argument pattern.

    Mutable: responses are appended as a test chains returns()/raises().
    The response queue is consumed front to back until a single entry
    remains; that entry then answers every later matching call.
    """

    operation: str
    args: tuple[Any, ...]
    kwargs: Mapping[str, Any]
    responses: deque[Response] = field(default_factory=deque)

    def __post_init__(self) -> None:
        self.args = tuple(self.args)
        self.kwargs = _read_only(self.kwargs)

    def push(self, response: Response) -> None:
        """Append a response to the queue."""
        self.responses.append(response)

    def next_response(self) -> Response:
        """Pop the front response, or peek the final one."""
        if not self.responses:
            return EMPTY_RESPONSE
        if len(self.responses) > 1:
            return self.responses.popleft()
        return self.responses[0]

    def __str__(self) -> str:
        return format_call(self.operation, self.args, self.kwargs)


# ============================================================================
# VERIFICATION
# ============================================================================


def describe_expectation(call: str, quantifier: "Quantifier", count: int) -> str:
    """Default verification line, e.g. "k() was called 1 time(s) (observed 2)"."""
    return f"{call} was called {quantifier.describe()} (observed {count})"


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of one verification: pass/fail plus a printable line."""

    passed: bool
    description: str
    count: int
    call: str  # rendered expected call, e.g. "remove('coffee', 50)"
    quantifier: "Quantifier"

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")

    @property
    def detail(self) -> str:
        """The generated description, even when a label replaced it."""
        return describe_expectation(self.call, self.quantifier, self.count)

    def __bool__(self) -> bool:
        return self.passed
