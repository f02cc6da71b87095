"""
Built-in identity and defaults for the Self tool

1. SERVER_NAME/SERVER_VERSION: identity reported during MCP initialization
2. TOOL_NAME: the single tool this server exposes
3. DEFAULT_TOOL_DESCRIPTION: description used unless overridden on the command line
4. DEFAULT_PARAMETERS: parameter set the command line starts from
"""

from __future__ import annotations

from .models import ArrayParameter, NumberParameter, StringParameter

SERVER_NAME = "self-mcp"
SERVER_VERSION = "2.1.0"

TOOL_NAME = "Self"

DEFAULT_TOOL_DESCRIPTION = (
    "Self-prompt to shift cognitive mode and thinking approach. "
    "Explicit cognitive state changes across interleaved thinking turns. "
    "All parameters are freeform - invent whatever makes sense. "
    "The tool will always return an empty result. "
    "It is up to you Claude to fill this void with inspiration! "
    "For deep exploration: use multiple consecutive Self tool calls interleaved "
    "with thinking for multi-dimensional perspectives."
)

ATTENTION_HEAD_ITEMS = {
    "type": "object",
    "properties": {
        "name": {
            "type": "string",
            "description": "Name of this attention head (e.g., empathy_head, safety_head, truth_head)",
        },
        "query": {
            "type": "string",
            "description": "What this head is attending to",
        },
    },
    "required": ["name", "query"],
}

DEFAULT_PARAMETERS = (
    StringParameter(
        name="prompt",
        description="The self-prompt or cognitive instruction",
        required=True,
    ),
    NumberParameter(
        name="temperature",
        description="Cognitive temperature",
        minimum=0,
        maximum=2,
    ),
    StringParameter(name="thinking_style", description="Thinking approach"),
    StringParameter(name="archetype", description="Cognitive archetype"),
    StringParameter(name="strategy", description="Problem-solving strategy"),
    StringParameter(name="scope", description="Cognitive zoom level"),
    StringParameter(name="depth", description="Thoroughness and time investment"),
    StringParameter(name="extra", description="Additional context or focus"),
    ArrayParameter(
        name="attention_heads",
        description=(
            "Parallel attention streams for simultaneously attending to multiple "
            "aspects. Each head focuses on a specific concern or dimension. "
            "Example: [{ name: 'empathy_head', query: 'signs of frustration or "
            "confusion' }, { name: 'truth_head', query: 'false assumptions "
            "needing correction' }]"
        ),
        items=ATTENTION_HEAD_ITEMS,
    ),
)

# Log levels accepted by loguru
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
