"""Append-only call history for a single mock."""

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from .matchers import args_match
from .models import Invocation

logger = logging.getLogger(__name__)


class CallLedger:
    """Time-ordered record of every operation invoked on one mock.

    Entries are never removed or mutated. Sequence numbers start at 1
    and increase by one per recorded call.
    """

    def __init__(self) -> None:
        self._entries: list[Invocation] = []
        self._next_sequence = 1

    def record(
        self,
        operation: str,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any] | None = None,
    ) -> Invocation:
        """Append an invocation and return it."""
        invocation = Invocation(
            operation=operation,
            args=args,
            kwargs=kwargs or {},
            sequence_number=self._next_sequence,
        )
        self._entries.append(invocation)
        self._next_sequence += 1
        logger.debug(f"Recorded #{invocation.sequence_number}: {invocation}")
        return invocation

    def matching(
        self,
        operation: str,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any] | None = None,
    ) -> list[Invocation]:
        """Return recorded invocations of operation whose arguments match."""
        return [
            entry
            for entry in self._entries
            if entry.operation == operation
            and args_match(args, entry.args, kwargs, entry.kwargs)
        ]

    def count(
        self,
        operation: str,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any] | None = None,
    ) -> int:
        """Count recorded invocations matching operation and arguments."""
        return len(self.matching(operation, args, kwargs))

    def snapshot(self) -> tuple[Invocation, ...]:
        """Immutable copy of the ledger in call order."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[Invocation]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> Invocation:
        return self._entries[index]
