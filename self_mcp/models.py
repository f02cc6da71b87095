# self_mcp/models.py
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

__all__ = [
    "ParameterKind",
    "StringParameter",
    "NumberParameter",
    "ArrayParameter",
    "AnyParameter",
    "ParameterDefinition",
    "PARAMETER_SET_ADAPTER",
    "PARAMETER_TYPES",
]


class ParameterKind(str, Enum):
    """Value kinds a tool parameter can advertise."""

    STRING = "string"
    NUMBER = "number"
    ARRAY = "array"
    ANY = "any"


class _Parameter(BaseModel):
    """Fields shared by every parameter kind."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    description: str
    required: bool = False

    @field_validator("description")
    @classmethod
    def _description_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("description cannot be empty")
        return value


class StringParameter(_Parameter):
    kind: Literal["string"] = "string"


class NumberParameter(_Parameter):
    kind: Literal["number"] = "number"
    minimum: int | float | None = None
    maximum: int | float | None = None

    @model_validator(mode="after")
    def _bounds_ordered(self) -> NumberParameter:
        if (
            self.minimum is not None
            and self.maximum is not None
            and self.minimum > self.maximum
        ):
            raise ValueError(
                f"minimum {self.minimum} is greater than maximum {self.maximum}"
            )
        return self


class ArrayParameter(_Parameter):
    kind: Literal["array"] = "array"
    items: dict[str, Any] | None = None  # JSON schema for each element


class AnyParameter(_Parameter):
    """Accepts any JSON value; advertised without a type constraint."""

    kind: Literal["any"] = "any"


ParameterDefinition = Annotated[
    StringParameter | NumberParameter | ArrayParameter | AnyParameter,
    Field(discriminator="kind"),
]

# Validates a whole parameter set; accepts model instances or plain dicts
PARAMETER_SET_ADAPTER: TypeAdapter[tuple[ParameterDefinition, ...]] = TypeAdapter(
    tuple[ParameterDefinition, ...]
)


PARAMETER_TYPES: dict[ParameterKind, type[_Parameter]] = {
    ParameterKind.STRING: StringParameter,
    ParameterKind.NUMBER: NumberParameter,
    ParameterKind.ARRAY: ArrayParameter,
    ParameterKind.ANY: AnyParameter,
}
