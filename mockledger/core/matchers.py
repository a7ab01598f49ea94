"""Argument matching for stubs and verifications.

Expected values are compared to actual values by deep structural
equality unless the expected value is a MatcherPredicate, in which case
the predicate decides. Argument lists must agree in length; there is no
trailing wildcard.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import TypeAdapter, ValidationError


class MatcherPredicate(ABC):
    """A value that stands in for "any value satisfying a condition".

    Subclasses are placed positionally in stub or verify arguments.
    Implementations are frozen dataclasses, so two predicates built from
    the same parameters compare equal.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: Any) -> bool:
        """Return True if the candidate argument is acceptable."""

    def __repr__(self) -> str:
        return self.describe()

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable form used in verification descriptions."""


@dataclass(frozen=True, repr=False)
class Anything(MatcherPredicate):
    """Wildcard for exactly one argument position."""

    def is_satisfied_by(self, candidate: Any) -> bool:
        return True

    def describe(self) -> str:
        return "ANY"


ANY = Anything()


@dataclass(frozen=True, repr=False, init=False)
class InstanceOf(MatcherPredicate):
    """Accept any instance of the given type(s)."""

    types: tuple[type, ...]

    def __init__(self, *types: type):
        if not types or not all(isinstance(t, type) for t in types):
            raise TypeError("InstanceOf requires at least one type")
        object.__setattr__(self, "types", tuple(types))

    def is_satisfied_by(self, candidate: Any) -> bool:
        return isinstance(candidate, self.types)

    def describe(self) -> str:
        names = ", ".join(t.__name__ for t in self.types)
        return f"InstanceOf({names})"


@dataclass(frozen=True, repr=False)
class Satisfies(MatcherPredicate):
    """Accept any value for which a callable returns truthy."""

    predicate: Callable[[Any], bool]
    description: str | None = None

    def is_satisfied_by(self, candidate: Any) -> bool:
        return bool(self.predicate(candidate))

    def describe(self) -> str:
        label = self.description or getattr(self.predicate, "__name__", "predicate")
        return f"Satisfies({label})"


@dataclass(frozen=True, repr=False)
class Conforms(MatcherPredicate):
    """Accept any value that validates against a type annotation.

    Validation runs in pydantic strict mode, so no coercion happens:
    Conforms(int) rejects "5" and Conforms(list[str]) rejects [1].
    """

    type_hint: Any
    _adapter: TypeAdapter = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_adapter", TypeAdapter(self.type_hint))

    def is_satisfied_by(self, candidate: Any) -> bool:
        try:
            self._adapter.validate_python(candidate, strict=True)
        except ValidationError:
            return False
        return True

    def describe(self) -> str:
        name = getattr(self.type_hint, "__name__", None) or repr(self.type_hint)
        return f"Conforms({name})"


# ============================================================================
# COMPARISON
# ============================================================================


def values_match(expected: Any, actual: Any) -> bool:
    """Decide whether an actual argument satisfies an expected one."""
    if isinstance(expected, MatcherPredicate):
        return expected.is_satisfied_by(actual)
    if expected is actual:
        return True
    if type(expected) is not type(actual):
        return False
    if isinstance(expected, (list, tuple)):
        return len(expected) == len(actual) and all(
            values_match(e, a) for e, a in zip(expected, actual)
        )
    if isinstance(expected, Mapping):
        return expected.keys() == actual.keys() and all(
            values_match(expected[k], actual[k]) for k in expected
        )
    return bool(expected == actual)


def args_match(
    expected_args: tuple[Any, ...],
    actual_args: tuple[Any, ...],
    expected_kwargs: Mapping[str, Any] | None = None,
    actual_kwargs: Mapping[str, Any] | None = None,
) -> bool:
    """Match a full argument list pairwise, in position order.

    Keyword arguments must name the same keys on both sides.
    """
    expected_kwargs = expected_kwargs or {}
    actual_kwargs = actual_kwargs or {}
    if len(expected_args) != len(actual_args):
        return False
    if expected_kwargs.keys() != actual_kwargs.keys():
        return False
    return all(
        values_match(e, a) for e, a in zip(expected_args, actual_args)
    ) and all(values_match(expected_kwargs[k], actual_kwargs[k]) for k in expected_kwargs)
