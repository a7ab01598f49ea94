"""Stub registration and response resolution for a single mock.

Registrations are kept in registration order and are never removed.
Resolution scans them newest first, so a later stub for the same
arguments overrides an earlier one. When two different argument
patterns both match a call (for example through matcher predicates),
the most recently registered pattern wins as well.
"""

import logging
from collections.abc import Mapping
from typing import Any

from .matchers import args_match
from .models import EMPTY_RESPONSE, Response, StubRegistration

logger = logging.getLogger(__name__)


class StubTable:
    """Per-mock collection of stub registrations."""

    def __init__(self) -> None:
        self._registrations: list[StubRegistration] = []

    def register(
        self,
        operation: str,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any] | None = None,
    ) -> StubRegistration:
        """Append a registration for (operation, args) and return its handle.

        Every stub() call gets its own registration, shadowing older ones
        with the same arguments. Chained responses reuse the handle
        returned here rather than looking the key up again.
        """
        registration = StubRegistration(
            operation=operation, args=args, kwargs=kwargs or {}
        )
        self._registrations.append(registration)
        logger.debug(f"Registered stub #{len(self._registrations)} for {registration}")
        return registration

    @staticmethod
    def push_response(registration: StubRegistration, response: Response) -> None:
        """Append a canned response to a registration's queue."""
        registration.push(response)

    def resolve(
        self,
        operation: str,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any] | None = None,
    ) -> Response:
        """Pick the response for a call; EMPTY_RESPONSE if nothing matches."""
        for registration in reversed(self._registrations):
            if registration.operation != operation:
                continue
            if args_match(registration.args, args, registration.kwargs, kwargs):
                return registration.next_response()
        return EMPTY_RESPONSE

    @property
    def registrations(self) -> tuple[StubRegistration, ...]:
        return tuple(self._registrations)

    def __len__(self) -> int:
        return len(self._registrations)
