"""Command-line parsing into the final parameter set and tool description.

Directives are recorded by argparse in the order they appear and then applied
one by one, so ``--all-required --optional prompt`` leaves only ``prompt``
optional. ``--help`` is a directive too: anything invalid before it is still
reported, anything after it is never looked at. Invalid input raises
ConfigurationError; nothing in this module exits the process.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, NoReturn

from loguru import logger

from .constants import DEFAULT_PARAMETERS
from .errors import HELP_HINT, ConfigurationError, HelpRequested
from .parameters import (
    Parameters,
    add_parameter,
    set_all_required,
    set_required,
    split_names,
    validate_parameters,
)

__all__ = ["CliOptions", "Directive", "build_parser", "parse_arguments"]


class Directive(str, Enum):
    """Command-line directives, valued by the flag that triggers them."""

    ALL_REQUIRED = "--all-required"
    ALL_OPTIONAL = "--all-optional"
    REQUIRED = "--required"
    OPTIONAL = "--optional"
    ADD_PARAM = "--add-param"
    TOOL_DESCRIPTION = "--tool-description"
    TOOL_DESCRIPTION_FILE = "--tool-description-file"
    HELP = "--help"


# Flags that consume the following token as their value, whatever it looks like
VALUE_FLAGS = frozenset(
    {
        Directive.REQUIRED.value,
        Directive.OPTIONAL.value,
        Directive.ADD_PARAM.value,
        Directive.TOOL_DESCRIPTION.value,
        Directive.TOOL_DESCRIPTION_FILE.value,
    }
)
HELP_FLAGS = frozenset({"-h", Directive.HELP.value})


@dataclass(frozen=True)
class CliOptions:
    """Result of parsing the command line."""

    parameters: Parameters
    tool_description: str | None = None
    tool_description_source: Directive | None = None


EXAMPLES = """\
Examples:
  self-mcp --required prompt,temperature
  self-mcp --all-optional
  self-mcp --add-param "focus:string:Current area of focus"
  self-mcp --add-param "confidence:number:Confidence level:required"
  self-mcp --add-param "url:string:Base URL: https://example.com:required"

Default: prompt is required, all others optional
"""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise ConfigurationError(message, HELP_HINT)


class _RecordDirective(argparse.Action):
    """Append ``(directive, value)`` to the shared ordered directive list."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if namespace.directives is None:
            namespace.directives = []
        namespace.directives.append((self.const, values))


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="self-mcp",
        description="Self-MCP Server - Metacognitive self-prompting for Claude",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.set_defaults(directives=None)

    def add_directive(
        directive: Directive,
        help_text: str,
        metavar: str | None = None,
        *option_strings: str,
    ) -> None:
        parser.add_argument(
            *option_strings,
            directive.value,
            dest="directives",
            action=_RecordDirective,
            const=directive,
            nargs=0 if metavar is None else None,
            metavar=metavar,
            help=help_text,
        )

    add_directive(Directive.ALL_REQUIRED, "Make all parameters required")
    add_directive(Directive.ALL_OPTIONAL, "Make all parameters optional, prompt included")
    add_directive(
        Directive.REQUIRED,
        "Make specific parameters required",
        "<param1,param2>",
    )
    add_directive(
        Directive.OPTIONAL,
        "Make specific parameters optional",
        "<param1,param2>",
    )
    add_directive(
        Directive.ADD_PARAM,
        "Add custom parameter. Format: name:type:description[:required]. "
        "Type: string|number|array|any. "
        "Required: required|optional (default: optional)",
        "<spec>",
    )
    add_directive(
        Directive.TOOL_DESCRIPTION,
        "Custom tool description text",
        "<text>",
    )
    add_directive(
        Directive.TOOL_DESCRIPTION_FILE,
        "Read tool description from file",
        "<path>",
    )
    add_directive(Directive.HELP, "Show this help message", None, "-h")
    return parser


def _normalize_argv(argv: Iterable[str]) -> list[str]:
    """Bind each value flag to its next token and stop after the first help flag.

    ``--tool-description -terse`` becomes ``--tool-description=-terse`` so
    argparse never mistakes a value for an option.
    """
    tokens: list[str] = []
    remaining = iter(argv)
    for token in remaining:
        if token in VALUE_FLAGS:
            value = next(remaining, None)
            if value is not None:
                token = f"{token}={value}"
        tokens.append(token)
        if token in HELP_FLAGS:
            break
    return tokens


def _read_description_file(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Failed to read tool description file '{path}': {e}"
        ) from e


class _OptionsBuilder:
    """Applies directives in order, tracking which one set the description."""

    def __init__(self, parameters: Parameters, usage: str) -> None:
        self.parameters = parameters
        self.usage = usage
        self.tool_description: str | None = None
        self.tool_description_source: Directive | None = None

    def apply(self, directive: Directive, value: str | None) -> None:
        if directive is Directive.ALL_REQUIRED:
            self.parameters = set_all_required(self.parameters, True)
        elif directive is Directive.ALL_OPTIONAL:
            self.parameters = set_all_required(self.parameters, False)
        elif directive is Directive.REQUIRED:
            self.parameters = set_required(
                self.parameters, split_names(value), True, directive.value
            )
        elif directive is Directive.OPTIONAL:
            self.parameters = set_required(
                self.parameters, split_names(value), False, directive.value
            )
        elif directive is Directive.ADD_PARAM:
            self.parameters = add_parameter(self.parameters, value)
        elif directive is Directive.TOOL_DESCRIPTION:
            self._check_description_unset(directive)
            description = value.strip()
            if not description:
                raise ConfigurationError("Tool description cannot be empty")
            self._set_description(description, directive)
        elif directive is Directive.TOOL_DESCRIPTION_FILE:
            self._check_description_unset(directive)
            description = _read_description_file(value)
            if not description:
                raise ConfigurationError(f"Tool description file '{value}' is empty")
            self._set_description(description, directive)
        elif directive is Directive.HELP:
            raise HelpRequested(self.usage)

    def _check_description_unset(self, directive: Directive) -> None:
        if self.tool_description_source is None:
            return
        if self.tool_description_source is directive:
            raise ConfigurationError(f"{directive.value} can only be used once")
        raise ConfigurationError(
            f"Cannot use both {Directive.TOOL_DESCRIPTION.value} "
            f"and {Directive.TOOL_DESCRIPTION_FILE.value}"
        )

    def _set_description(self, description: str, directive: Directive) -> None:
        self.tool_description = description
        self.tool_description_source = directive

    def build(self) -> CliOptions:
        return CliOptions(
            parameters=self.parameters,
            tool_description=self.tool_description,
            tool_description_source=self.tool_description_source,
        )


def parse_arguments(
    argv: Sequence[str] | None = None,
    defaults: Iterable[Any] = DEFAULT_PARAMETERS,
) -> CliOptions:
    """Parse command-line tokens into the final parameter set.

    Args:
        argv: Tokens to parse; ``sys.argv[1:]`` when None.
        defaults: Parameter set the directives start from, as models or dicts.
            Validated once; names must be unique.

    Raises:
        ConfigurationError: on invalid defaults, or any unknown flag, stray
            token, missing value, or invalid directive value appearing before
            a help flag.
        HelpRequested: when ``--help``/``-h`` is reached.
    """
    parser = build_parser()
    tokens = _normalize_argv(sys.argv[1:] if argv is None else argv)
    namespace, extras = parser.parse_known_args(tokens)

    for token in extras:
        if token.startswith("-"):
            raise ConfigurationError(f"Unknown argument: {token}", HELP_HINT)
        raise ConfigurationError(f"Unexpected argument: {token}", HELP_HINT)

    builder = _OptionsBuilder(validate_parameters(defaults), parser.format_help())
    for directive, value in namespace.directives or ():
        builder.apply(directive, value)

    options = builder.build()
    logger.debug(
        f"Parsed {len(namespace.directives or ())} directives into "
        f"{len(options.parameters)} parameters"
    )
    return options
