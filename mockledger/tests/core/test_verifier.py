"""Unit tests for the verifier and the operation-capturing builders."""

import pytest

from mockledger.core.builders import Inspector, StubBuilder, VerifyBuilder
from mockledger.core.errors import UsageError
from mockledger.core.matchers import ANY, InstanceOf
from mockledger.core.mock import Mock, ledger_of
from mockledger.core.quantifiers import AtLeast, Between, Exactly
from mockledger.core.verifier import Verifier
from mockledger.tests.fakes import FakeReportingPort


@pytest.fixture
def warehouse() -> Mock:
    warehouse = Mock("Warehouse")
    warehouse.remove("coffee", 50)
    warehouse.remove("coffee", 50)
    warehouse.remove("tea", 10)
    return warehouse


# ============================================================================
# Verifier
# ============================================================================


class TestVerifier:
    """Counting and describing."""

    def test_default_quantifier_is_exactly_once(self, warehouse: Mock) -> None:
        result = Verifier().verify(warehouse, "remove", ("tea", 10))
        assert result.passed
        assert result.count == 1
        assert result.quantifier == Exactly(1)

    def test_failed_count_is_a_result_not_an_error(self, warehouse: Mock) -> None:
        result = Verifier().verify(warehouse, "remove", ("coffee", 50), quantifier=Exactly(1))
        assert not result.passed
        assert result.count == 2
        assert result.description == (
            "remove('coffee', 50) was called 1 time(s) (observed 2)"
        )

    def test_matchers_count_all_matching_entries(self, warehouse: Mock) -> None:
        result = Verifier().verify(
            warehouse, "remove", (ANY, InstanceOf(int)), quantifier=Exactly(3)
        )
        assert result.passed
        assert result.call == "remove(ANY, InstanceOf(int))"

    def test_label_replaces_description(self, warehouse: Mock) -> None:
        result = Verifier().verify(
            warehouse, "remove", ("tea", 10), label="inventory removed"
        )
        assert result.description == "inventory removed"
        assert result.detail == "remove('tea', 10) was called 1 time(s) (observed 1)"

    def test_never_called(self, warehouse: Mock) -> None:
        result = Verifier().verify(warehouse, "restock", (), quantifier=Exactly(0))
        assert result.passed
        assert result.count == 0

    def test_truncates_long_arguments(self) -> None:
        target = Mock()
        target.save("x" * 200)
        result = Verifier(max_arg_repr_length=10).verify(target, "save", ("x" * 200,))
        assert result.call == "save('xxxxxx...)"
        assert result.passed

    def test_verification_does_not_touch_ledger(self, warehouse: Mock) -> None:
        Verifier().verify(warehouse, "remove", ("tea", 10))
        assert len(ledger_of(warehouse)) == 3


# ============================================================================
# Builders
# ============================================================================


class TestStubBuilder:
    """stub(m).op(args) -> ResponseSetter."""

    def test_chained_responses(self) -> None:
        target = Mock()
        setter = StubBuilder(target).next()
        assert setter.returns(1).returns(2) is setter

        assert [target.next() for _ in range(3)] == [1, 2, 2]

    def test_executes_requires_callable(self) -> None:
        with pytest.raises(UsageError):
            StubBuilder(Mock()).compute().executes("not callable")

    def test_stubbing_is_not_recorded_as_a_call(self) -> None:
        target = Mock()
        StubBuilder(target).get(1).returns("x")
        assert len(ledger_of(target)) == 0


class TestVerifyBuilder:
    """verify(m).op(args) -> VerificationResult, reported once."""

    def test_reports_and_returns_result(self, warehouse: Mock) -> None:
        reporter = FakeReportingPort()
        builder = VerifyBuilder(warehouse, AtLeast(2), reporter=reporter)

        result = builder.remove("coffee", 50)

        assert result.passed
        assert reporter.reported == [result]

    def test_reporter_errors_propagate(self, warehouse: Mock) -> None:
        reporter = FakeReportingPort()
        reporter.set_should_fail(True, "channel closed")

        with pytest.raises(RuntimeError, match="channel closed"):
            VerifyBuilder(warehouse, Between(1, 2), reporter=reporter).remove("tea", 10)

    def test_without_reporter(self, warehouse: Mock) -> None:
        result = VerifyBuilder(warehouse, Exactly(1)).remove("tea", 10)
        assert result.passed


class TestInspector:
    """inspect(m).op(args) -> matching invocations."""

    def test_returns_matching_invocations(self, warehouse: Mock) -> None:
        found = Inspector(warehouse).remove("coffee", ANY)
        assert [entry.sequence_number for entry in found] == [1, 2]

    def test_no_match(self, warehouse: Mock) -> None:
        assert Inspector(warehouse).restock() == ()
