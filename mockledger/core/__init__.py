"""Core engine for the mockledger test-double system.

This package holds the interception and matching logic: call ledgers,
stub tables, the dispatcher, quantifiers and the verifier. It depends
on nothing outside the standard library except pydantic, used by the
Conforms matcher. Reporting of verification results is handled by the
adapters package through ReportingPort.
"""

from .errors import MockledgerError, StubbedFailure, UsageError, VerificationFailed
from .models import (
    Execute,
    Invocation,
    Raise,
    Response,
    Return,
    StubRegistration,
    VerificationResult,
)
from .quantifiers import AtLeast, AtMost, Between, Exactly, Predicate, Quantifier

__all__ = [
    "AtLeast",
    "AtMost",
    "Between",
    "Exactly",
    "Execute",
    "Invocation",
    "MockledgerError",
    "Predicate",
    "Quantifier",
    "Raise",
    "Response",
    "Return",
    "StubRegistration",
    "StubbedFailure",
    "UsageError",
    "VerificationFailed",
    "VerificationResult",
]
