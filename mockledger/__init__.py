"""mockledger: a test spy/stub engine.

Create mocks that accept any operation, stub the responses you need,
run the code under test, then verify the interactions you care about.

    warehouse = mock("Warehouse")
    stub(warehouse).has_inventory("coffee", 50).returns(True)

    order = Order("coffee", 50)
    order.fill(warehouse)

    assert order.is_filled
    verify(warehouse, "inventory is removed").remove("coffee", 50)
"""

from .api import call, call_list, calls, inspect, mock, stub, verify
from .core.errors import MockledgerError, StubbedFailure, UsageError, VerificationFailed
from .core.matchers import ANY, Anything, Conforms, InstanceOf, MatcherPredicate, Satisfies
from .core.mock import Mock
from .core.models import Invocation, VerificationResult

__all__ = [
    "ANY",
    "Anything",
    "Conforms",
    "InstanceOf",
    "Invocation",
    "MatcherPredicate",
    "Mock",
    "MockledgerError",
    "Satisfies",
    "StubbedFailure",
    "UsageError",
    "VerificationFailed",
    "VerificationResult",
    "call",
    "call_list",
    "calls",
    "inspect",
    "mock",
    "stub",
    "verify",
]
