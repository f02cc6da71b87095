"""Schema generation for advertising the Self tool over MCP.

Turns the frozen parameter set into the JSON Schema object returned in the
``tools/list`` response. Property and required-name ordering follow the
parameter set.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, TypeAlias

from loguru import logger

from .models import ArrayParameter, NumberParameter, ParameterDefinition, ParameterKind

if TYPE_CHECKING:
    from .config import ServerConfig, ToolSchema

JsonSchema: TypeAlias = dict[str, Any]
PropertyDescriptor: TypeAlias = dict[str, Any]

__all__ = [
    "build_property",
    "build_input_schema",
    "build_tool_schema",
    "JsonSchema",
    "PropertyDescriptor",
]

# --- Schema Constants ---
KEY_TYPE = "type"
KEY_DESCRIPTION = "description"
KEY_PROPERTIES = "properties"
KEY_REQUIRED = "required"
KEY_MINIMUM = "minimum"
KEY_MAXIMUM = "maximum"
KEY_ITEMS = "items"
KEY_NAME = "name"
KEY_INPUT_SCHEMA = "inputSchema"
TYPE_OBJECT = "object"


def build_property(parameter: ParameterDefinition) -> PropertyDescriptor:
    """Describe one parameter as a JSON Schema property."""
    descriptor: PropertyDescriptor = {KEY_DESCRIPTION: parameter.description}

    # No type key at all means any JSON value is accepted
    if parameter.kind != ParameterKind.ANY:
        descriptor[KEY_TYPE] = parameter.kind

    if isinstance(parameter, NumberParameter):
        if parameter.minimum is not None:
            descriptor[KEY_MINIMUM] = parameter.minimum
        if parameter.maximum is not None:
            descriptor[KEY_MAXIMUM] = parameter.maximum
    elif isinstance(parameter, ArrayParameter) and parameter.items is not None:
        descriptor[KEY_ITEMS] = copy.deepcopy(parameter.items)

    return descriptor


def build_input_schema(parameters: Iterable[ParameterDefinition]) -> JsonSchema:
    properties: dict[str, PropertyDescriptor] = {}
    required: list[str] = []

    for parameter in parameters:
        properties[parameter.name] = build_property(parameter)
        if parameter.required:
            required.append(parameter.name)

    return {
        KEY_TYPE: TYPE_OBJECT,
        KEY_PROPERTIES: properties,
        KEY_REQUIRED: required,
    }


def build_tool_schema(config: ServerConfig) -> ToolSchema:
    """Create the advertised tool definition from the server configuration."""
    input_schema = build_input_schema(config.parameters)
    logger.debug(
        f"Built schema for '{config.tool_name}' with {len(input_schema[KEY_PROPERTIES])} "
        f"properties, required: {input_schema[KEY_REQUIRED]}"
    )
    return {
        KEY_NAME: config.tool_name,
        KEY_DESCRIPTION: config.tool_description,
        KEY_INPUT_SCHEMA: input_schema,
    }
