"""Domain fault taxonomy shared by every module.

Service-layer code raises these (or module-specific subclasses) when a
request cannot be fulfilled.  Each fault class carries its ``FaultKind``
tag, so the API layers never re-discover *why* something failed through
ad-hoc ``isinstance`` chains:

- ``ValidationFault``: one or more field constraint violations (400).
- ``NotFoundFault``: the referenced resource does not exist (404).
- ``UnprocessableFault``: syntactically valid but semantically invalid (422).

``FaultKind.COERCION`` and ``FaultKind.UNCLASSIFIED`` are never raised by
the service layer; they tag engine-level errors observed by the GraphQL
error normalizer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar, Iterable, Optional

if TYPE_CHECKING:
    from pydantic import BaseModel, ValidationError


class FaultKind(StrEnum):
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    UNPROCESSABLE = "UNPROCESSABLE"
    COERCION = "COERCION"
    UNCLASSIFIED = "UNCLASSIFIED"


STATUS_CODES: dict[FaultKind, int] = {
    FaultKind.VALIDATION: 400,
    FaultKind.NOT_FOUND: 404,
    FaultKind.UNPROCESSABLE: 422,
    FaultKind.COERCION: 400,
}


@dataclass(frozen=True)
class ConstraintViolation:
    """A single failed field constraint.

    ``message`` is the rule's message exactly as declared on the DTO; it is
    surfaced to clients verbatim.
    """

    field: str
    message: str


class DomainFault(Exception):
    """Base class for business-rule failures raised by the service layer."""

    kind: ClassVar[FaultKind]

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


class ValidationFault(DomainFault):
    """The request violated one or more field constraints.

    Violations are de-duplicated while keeping the order in which the
    validator reported them.
    """

    kind = FaultKind.VALIDATION

    def __init__(self, violations: Iterable[ConstraintViolation]) -> None:
        self.violations: tuple[ConstraintViolation, ...] = tuple(
            dict.fromkeys(violations)
        )
        super().__init__("; ".join(v.message for v in self.violations))

    @classmethod
    def from_pydantic(
        cls, exc: ValidationError, model: Optional[type[BaseModel]] = None
    ) -> ValidationFault:
        """Build a fault from a Pydantic ``ValidationError``.

        The field is the dotted error location.  Pydantic reports the Python
        field name there for defaulted or by-name input, so when ``model`` is
        given its first segment is translated to the field's alias.
        Model-level errors have an empty location and map to the empty
        field name.
        """
        aliases = {
            name: info.alias
            for name, info in (model.model_fields.items() if model else ())
            if info.alias
        }
        violations = [
            ConstraintViolation(
                field=".".join(
                    str(aliases.get(part, part)) if i == 0 else str(part)
                    for i, part in enumerate(error["loc"])
                ),
                message=error["msg"],
            )
            for error in exc.errors(include_url=False)
        ]
        return cls(violations)


class NotFoundFault(DomainFault):
    """The referenced resource is absent (or soft-deleted)."""

    kind = FaultKind.NOT_FOUND


class UnprocessableFault(DomainFault):
    """The request is well-formed but breaks a business rule."""

    kind = FaultKind.UNPROCESSABLE
