"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layers (GraphQL resolvers and
DRF views) and the Service layer.  DTOs are immutable (``frozen=True``).

Field names follow the public camelCase contract (``fullName``,
``phoneNumber``) through aliases; snake_case keys are accepted too, which
is what graphene hands to resolvers.

- ``CreateCustomerDTO`` / ``UpdateCustomerDTO``: every field required.
- ``PartiallyUpdateCustomerDTO``: every field optional.

Use ``parse_request`` to build an input DTO: it reports failures as a
``ValidationFault`` instead of a Pydantic ``ValidationError``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from shared.domain.faults import ValidationFault

NOT_NULL_MESSAGE = "Field {field} cannot be null"

_REQUIRED_FIELDS = ("full_name", "phone_number", "address")

DTO = TypeVar("DTO", bound=BaseModel)


class _CustomerInput(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateCustomerDTO(_CustomerInput):
    """Immutable DTO for customer creation requests.

    Missing and ``null`` values are both reported as
    ``Field <name> cannot be null``, one violation per field.
    """

    full_name: Optional[str] = Field(default=None, validate_default=True, max_length=255)
    phone_number: Optional[str] = Field(default=None, validate_default=True, max_length=32)
    address: Optional[str] = Field(default=None, validate_default=True)

    @field_validator(*_REQUIRED_FIELDS, mode="after")
    @classmethod
    def not_null(cls, v: Optional[str], info: ValidationInfo) -> str:
        if v is None:
            alias = cls.model_fields[info.field_name].alias or info.field_name
            raise PydanticCustomError("not_null", NOT_NULL_MESSAGE, {"field": alias})
        return v


class UpdateCustomerDTO(CreateCustomerDTO):
    """Immutable DTO for full (PUT) customer updates."""


class PartiallyUpdateCustomerDTO(_CustomerInput):
    """Immutable DTO for partial (PATCH) customer updates.

    All fields are optional; only supplied fields will be updated.
    """

    full_name: Optional[str] = Field(default=None, max_length=255)
    phone_number: Optional[str] = Field(default=None, max_length=32)
    address: Optional[str] = None


def parse_request(dto_class: Type[DTO], data: Optional[Mapping[str, Any]]) -> DTO:
    """Validate ``data`` into ``dto_class``.

    Raises:
        ValidationFault: with one violation per failed constraint.
    """
    payload = {key: data[key] for key in data} if data else {}
    try:
        return dto_class.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFault.from_pydantic(exc, model=dto_class) from exc

