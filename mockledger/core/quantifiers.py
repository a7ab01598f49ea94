"""Call-count policies used by verification.

A quantifier answers one question: is the observed number of matching
calls acceptable? Construction validates its parameters and raises
UsageError for malformed values, so a broken quantifier never reaches a
ledger scan.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .errors import UsageError

QUANTIFIER_OPTIONS = ("times", "at_least", "at_most", "between")


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _require_count(name: str, value: Any) -> None:
    if not _is_count(value):
        raise UsageError(f"'{name}' must be a non-negative integer, got {value!r}")


class Quantifier(ABC):
    """Policy evaluated against an observed call count."""

    @abstractmethod
    def accepts(self, count: int) -> bool:
        """Return True if count satisfies the policy."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable expectation, e.g. "at least 2 time(s)"."""


@dataclass(frozen=True)
class Exactly(Quantifier):
    times: int

    def __post_init__(self) -> None:
        _require_count("times", self.times)

    def accepts(self, count: int) -> bool:
        return count == self.times

    def describe(self) -> str:
        return f"{self.times} time(s)"


@dataclass(frozen=True)
class Predicate(Quantifier):
    """Delegate the decision to a callable taking the count."""

    check: Callable[[int], bool]
    description: str | None = None

    def __post_init__(self) -> None:
        if not callable(self.check):
            raise UsageError(f"Predicate requires a callable, got {self.check!r}")

    def accepts(self, count: int) -> bool:
        return bool(self.check(count))

    def describe(self) -> str:
        label = self.description or getattr(self.check, "__name__", "predicate")
        return f"a number of times satisfying {label}"


@dataclass(frozen=True)
class AtLeast(Quantifier):
    minimum: int

    def __post_init__(self) -> None:
        _require_count("at_least", self.minimum)

    def accepts(self, count: int) -> bool:
        return count >= self.minimum

    def describe(self) -> str:
        return f"at least {self.minimum} time(s)"


@dataclass(frozen=True)
class AtMost(Quantifier):
    maximum: int

    def __post_init__(self) -> None:
        _require_count("at_most", self.maximum)

    def accepts(self, count: int) -> bool:
        return count <= self.maximum

    def describe(self) -> str:
        return f"at most {self.maximum} time(s)"


@dataclass(frozen=True)
class Between(Quantifier):
    """Inclusive range; minimum must be strictly below maximum."""

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if not (_is_count(self.minimum) and _is_count(self.maximum)):
            raise UsageError(
                "'between' must be a pair of non-negative integers, "
                f"got ({self.minimum!r}, {self.maximum!r})"
            )
        if self.minimum >= self.maximum:
            raise UsageError(
                "'between' must be in ascending order, "
                f"got ({self.minimum}, {self.maximum})"
            )

    def accepts(self, count: int) -> bool:
        return self.minimum <= count <= self.maximum

    def describe(self) -> str:
        return f"between {self.minimum} and {self.maximum} time(s)"


def quantifier_from_options(**options: Any) -> Quantifier:
    """Build the quantifier for verify() keyword options.

    With no option the expectation is exactly one call. More than one
    option, an unknown option, or a malformed value is a UsageError.

    Examples:
        quantifier_from_options() -> Exactly(1)
        quantifier_from_options(times=lambda n: n > 2) -> Predicate(...)
        quantifier_from_options(between=(1, 3)) -> Between(1, 3)
    """
    unknown = sorted(set(options) - set(QUANTIFIER_OPTIONS))
    if unknown:
        raise UsageError(
            f"Unknown verify() option(s): {', '.join(repr(o) for o in unknown)}"
        )
    if not options:
        return Exactly(1)
    if len(options) > 1:
        raise UsageError(
            "You can set only one of these options: "
            + ", ".join(repr(name) for name in options)
        )

    ((name, value),) = options.items()
    if name == "times":
        if callable(value):
            return Predicate(value)
        return Exactly(value)
    if name == "at_least":
        return AtLeast(value)
    if name == "at_most":
        return AtMost(value)

    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise UsageError(
            "'between' must be a list or tuple of 2 integers in ascending order, "
            f"got {value!r}"
        )
    return Between(value[0], value[1])
