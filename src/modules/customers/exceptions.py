"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
Both API layers translate them through their ``FaultKind``: the REST
views into HTTP status codes, the GraphQL error normalizer into
``extensions.errorCode``.
"""

from __future__ import annotations

from shared.domain.faults import NotFoundFault, UnprocessableFault


class CustomerAlreadyExists(UnprocessableFault):
    """Another live customer already uses the requested phone number."""


class CustomerNotFound(NotFoundFault):
    """The requested customer does not exist or has been soft-deleted."""

    def __init__(self, message: str = "Customer not found") -> None:
        super().__init__(message)
