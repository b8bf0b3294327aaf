"""Entry point — wires Config → ToolDispatcher → MCP stdio server."""
import asyncio
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from glm_image_mcp.config import Config
from glm_image_mcp.constants import MSG_SHUTTING_DOWN, MSG_STARTUP_FAILED
from glm_image_mcp.dispatcher import ToolDispatcher
from glm_image_mcp.server import serve


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    # stdout carries the protocol
    root.addHandler(RichHandler(console=Console(stderr=True), rich_tracebacks=True))


def main() -> None:
    logger = logging.getLogger(__name__)
    try:
        config = Config.from_env()
    except ValueError as exc:
        _setup_logging("INFO")
        logger.error(MSG_STARTUP_FAILED, exc)
        sys.exit(1)

    _setup_logging(config.log_level)
    dispatcher = ToolDispatcher(load_config=Config.from_env)
    try:
        asyncio.run(serve(dispatcher))
    except KeyboardInterrupt:
        logger.info(MSG_SHUTTING_DOWN)


if __name__ == "__main__":
    main()
