"""Client domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.  Anything else is an unexpected fault and is
left to the DRF exception handler (generic 500).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from modules.clients.validators import RuleViolation


class ClientValidationError(Exception):
    """The payload breaks one or more rules (malformed or duplicate field)."""

    def __init__(self, violations: Iterable[RuleViolation]) -> None:
        self.violations = list(violations)
        super().__init__("; ".join(v.message for v in self.violations))


class ClientNotFound(Exception):
    """No client exists with the requested id."""


class ClientConcurrencyConflict(Exception):
    """The client was modified by another request between read and write."""
