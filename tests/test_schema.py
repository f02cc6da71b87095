"""
Tests for JSON Schema generation from parameter definitions.
"""
import fastjsonschema
import pytest

from self_mcp.cli import parse_arguments
from self_mcp.config import ServerConfig
from self_mcp.constants import ATTENTION_HEAD_ITEMS, DEFAULT_PARAMETERS, DEFAULT_TOOL_DESCRIPTION
from self_mcp.models import AnyParameter, ArrayParameter, NumberParameter, StringParameter
from self_mcp.schema import build_input_schema, build_property, build_tool_schema


def test_default_schema_shape():
    schema = build_input_schema(DEFAULT_PARAMETERS)

    assert schema["type"] == "object"
    assert list(schema["properties"]) == [p.name for p in DEFAULT_PARAMETERS]
    assert schema["required"] == ["prompt"]


def test_default_property_descriptors():
    properties = build_input_schema(DEFAULT_PARAMETERS)["properties"]

    assert properties["prompt"] == {
        "description": "The self-prompt or cognitive instruction",
        "type": "string",
    }
    assert properties["temperature"] == {
        "description": "Cognitive temperature",
        "type": "number",
        "minimum": 0,
        "maximum": 2,
    }
    assert properties["attention_heads"]["type"] == "array"
    assert properties["attention_heads"]["items"] == ATTENTION_HEAD_ITEMS


def test_any_parameter_has_no_type():
    descriptor = build_property(AnyParameter(name="payload", description="Anything"))
    assert descriptor == {"description": "Anything"}


def test_number_bounds_only_when_set():
    assert build_property(NumberParameter(name="n", description="N")) == {
        "description": "N",
        "type": "number",
    }
    assert build_property(NumberParameter(name="n", description="N", maximum=5)) == {
        "description": "N",
        "type": "number",
        "maximum": 5,
    }


def test_array_items_only_when_set():
    assert build_property(ArrayParameter(name="a", description="A")) == {
        "description": "A",
        "type": "array",
    }


def test_items_are_copied():
    param = ArrayParameter(name="a", description="A", items={"type": "string"})

    descriptor = build_property(param)
    descriptor["items"]["type"] = "number"

    assert param.items == {"type": "string"}


def test_required_order_follows_parameters():
    params = (
        StringParameter(name="b", description="B", required=True),
        StringParameter(name="a", description="A"),
        AnyParameter(name="c", description="C", required=True),
    )

    schema = build_input_schema(params)

    assert list(schema["properties"]) == ["b", "a", "c"]
    assert schema["required"] == ["b", "c"]


def test_empty_parameter_set():
    assert build_input_schema(()) == {"type": "object", "properties": {}, "required": []}


def test_generated_schema_compiles_and_behaves():
    options = parse_arguments(["--add-param", "payload:any:Free-form value:required"])
    validate = fastjsonschema.compile(build_input_schema(options.parameters))

    # Any JSON value is accepted for an untyped property
    for payload in ({"nested": [1, 2]}, [None, "x"], 3.5, None, "text"):
        validate({"prompt": "go", "payload": payload})

    with pytest.raises(fastjsonschema.JsonSchemaException):
        validate({"prompt": "go"})
    with pytest.raises(fastjsonschema.JsonSchemaException):
        validate({"prompt": "go", "payload": 1, "temperature": 3})
    with pytest.raises(fastjsonschema.JsonSchemaException):
        validate({"prompt": "go", "payload": 1, "attention_heads": [{"name": "x"}]})


def test_build_tool_schema_uses_default_description():
    tool = build_tool_schema(ServerConfig())

    assert tool["name"] == "Self"
    assert tool["description"] == DEFAULT_TOOL_DESCRIPTION
    assert tool["inputSchema"]["required"] == ["prompt"]


def test_build_tool_schema_uses_override():
    options = parse_arguments(["--tool-description", "Custom", "--all-optional"])
    tool = build_tool_schema(ServerConfig.from_options(options, environ={}))

    assert tool["description"] == "Custom"
    assert tool["inputSchema"]["required"] == []
