import sys
from collections.abc import Sequence

import anyio
from loguru import logger

from .cli import parse_arguments
from .config import ServerConfig, log_level_from_env
from .errors import ConfigurationError, HelpRequested
from .server import run_server


def configure_logging(level: str) -> None:
    """Send loguru output to stderr only; stdout carries the MCP stream."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def load_config(argv: Sequence[str] | None = None) -> ServerConfig:
    options = parse_arguments(argv)
    return ServerConfig.from_options(options)


def main(argv: Sequence[str] | None = None) -> int:
    """
    Self-MCP Entry Point - Metacognitive self-prompting

    Parses the command line into the parameter set advertised by the Self
    tool, then serves that tool over stdio. Configuration errors are printed
    to stderr and reported as exit code 1 before the server starts; --help
    prints usage and returns 0.
    """
    try:
        configure_logging(log_level_from_env())
        config = load_config(argv)
    except HelpRequested as help_request:
        print(help_request.usage)
        return 0
    except ConfigurationError as e:
        print(e.render(), file=sys.stderr)
        return 1

    logger.info(
        f"Loaded {len(config.parameters)} parameters for '{config.tool_name}', "
        f"required: {', '.join(config.required_names) or 'none'}"
    )
    if config.tool_description_source is not None:
        logger.info(
            f"Using custom tool description from {config.tool_description_source.value}"
        )

    try:
        anyio.run(run_server, config)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.error(f"Server error: {e}")
        return 1

    return 0
