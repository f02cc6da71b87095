"""Operations on the ordered parameter set built up from command-line directives.

Every function takes the current set as a tuple and returns a new tuple; the
parameter models themselves are frozen, so toggling requiredness produces
copies rather than mutating shared defaults.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeAlias

from loguru import logger
from pydantic import ValidationError

from .errors import ConfigurationError
from .models import (
    PARAMETER_SET_ADAPTER,
    PARAMETER_TYPES,
    ParameterDefinition,
    ParameterKind,
)

__all__ = [
    "Parameters",
    "parameter_names",
    "validate_parameters",
    "set_all_required",
    "set_required",
    "split_names",
    "parse_parameter_spec",
    "add_parameter",
]

Parameters: TypeAlias = tuple[ParameterDefinition, ...]

SPEC_FORMAT = "name:type:description[:required]"
SPEC_EXAMPLE = '--add-param "focus:string:Current focus area:optional"'
REQUIREDNESS_SUFFIXES = {"required": True, "optional": False}
VALID_KINDS = ", ".join(kind.value for kind in ParameterKind)


def parameter_names(parameters: Iterable[ParameterDefinition]) -> list[str]:
    return [parameter.name for parameter in parameters]


def validate_parameters(parameters: Iterable[Any]) -> Parameters:
    """Validate a starting parameter set (models or plain dicts).

    Raises:
        ConfigurationError: if an entry is not a valid parameter definition or
            a name appears more than once.
    """
    try:
        validated = PARAMETER_SET_ADAPTER.validate_python(tuple(parameters))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid parameter definitions: {e}") from e

    names = parameter_names(validated)
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ConfigurationError(
            f"Duplicate parameter names: {', '.join(duplicates)}"
        )
    return validated


def set_all_required(parameters: Sequence[ParameterDefinition], required: bool) -> Parameters:
    """Set requiredness on every parameter, ``prompt`` included."""
    return tuple(
        parameter.model_copy(update={"required": required}) for parameter in parameters
    )


def split_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",")]


def set_required(
    parameters: Sequence[ParameterDefinition],
    names: Sequence[str],
    required: bool,
    option: str,
) -> Parameters:
    """Set requiredness on the named parameters.

    Raises:
        ConfigurationError: if any name is not in the current set. Nothing is
            changed in that case.
    """
    existing = parameter_names(parameters)
    unknown = [name for name in names if name not in existing]
    if unknown:
        raise ConfigurationError(
            f"Unknown parameter names in {option}: {', '.join(unknown)}",
            f"Available parameters: {', '.join(existing)}",
        )

    wanted = set(names)
    return tuple(
        parameter.model_copy(update={"required": required})
        if parameter.name in wanted
        else parameter
        for parameter in parameters
    )


def parse_parameter_spec(
    spec: str, parameters: Sequence[ParameterDefinition] = ()
) -> ParameterDefinition:
    """Parse ``name:type:description[:required|optional]`` into a parameter.

    Colons inside the description are kept: only the first two segments and
    an optional trailing requiredness keyword are structural.
    """
    parts = spec.split(":")
    if len(parts) < 3:
        raise ConfigurationError(
            f"Invalid --add-param format: '{spec}'",
            f"Expected format: {SPEC_FORMAT}",
            f"Example: {SPEC_EXAMPLE}",
        )

    name = parts[0].strip()
    kind_token = parts[1].strip()

    if not name:
        raise ConfigurationError(
            f"Parameter name cannot be empty in --add-param '{spec}'"
        )

    try:
        kind = ParameterKind(kind_token.lower())
    except ValueError:
        raise ConfigurationError(
            f"Invalid type '{kind_token}' in --add-param '{spec}'",
            f"Valid types: {VALID_KINDS}",
        ) from None

    if name in parameter_names(parameters):
        raise ConfigurationError(
            f"Parameter '{name}' already exists",
            "Choose a different name or use --required/--optional to modify it",
        )

    suffix = parts[-1].strip().lower()
    if suffix in REQUIREDNESS_SUFFIXES:
        required = REQUIREDNESS_SUFFIXES[suffix]
        description_parts = parts[2:-1]
    else:
        required = False
        description_parts = parts[2:]

    description = ":".join(description_parts).strip()
    if not description:
        raise ConfigurationError(
            f"Parameter description cannot be empty in --add-param '{spec}'"
        )

    logger.debug(f"Parsed --add-param '{name}' ({kind.value}, required={required})")
    return PARAMETER_TYPES[kind](name=name, description=description, required=required)


def add_parameter(parameters: Sequence[ParameterDefinition], spec: str) -> Parameters:
    return (*parameters, parse_parameter_spec(spec, parameters))
