"""MCP wiring — tool listing and tool calls over stdio via the mcp low-level Server."""
import logging

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from glm_image_mcp.constants import (
    MSG_AVAILABLE_TOOLS,
    MSG_SERVER_RUNNING,
    MSG_SUPPORTED_PROVIDERS,
    SERVER_NAME,
    SERVER_VERSION,
    TOOL_ANALYZE,
    TOOL_DESCRIBE,
    TOOL_FOCUSED,
    VALID_PROVIDERS,
)
from glm_image_mcp.dispatcher import TOOL_NAMES, ToolDispatcher

logger = logging.getLogger(__name__)

_IMAGE_PATH = {"type": "string", "description": "Path to the image file"}
_PROVIDER = {
    "type": "string",
    "description": (
        "AI provider to use (openrouter or gemini). If not specified, "
        "will auto-detect based on available API keys"
    ),
    "enum": list(VALID_PROVIDERS),
}
_MODEL = {
    "type": "string",
    "description": "Specific model to use (optional - overrides environment default)",
}


def tool_definitions() -> list[types.Tool]:
    return [
        types.Tool(
            name=TOOL_ANALYZE,
            description="Analyze an image using OpenRouter or Google Gemini vision models",
            inputSchema={
                "type": "object",
                "properties": {
                    "image_path": _IMAGE_PATH,
                    "prompt": {"type": "string", "description": "What to analyze about the image"},
                    "provider": _PROVIDER,
                    "model": _MODEL,
                },
                "required": ["image_path", "prompt"],
            },
        ),
        types.Tool(
            name=TOOL_DESCRIBE,
            description="Describe an image in detail (analyze_image with a default prompt)",
            inputSchema={
                "type": "object",
                "properties": {
                    "image_path": _IMAGE_PATH,
                    "prompt": {
                        "type": "string",
                        "description": (
                            "Custom prompt for image description "
                            "(optional - uses default if not provided)"
                        ),
                    },
                    "provider": _PROVIDER,
                    "model": _MODEL,
                },
                "required": ["image_path"],
            },
        ),
        types.Tool(
            name=TOOL_FOCUSED,
            description="Analyze specific aspects of an image with focused prompts",
            inputSchema={
                "type": "object",
                "properties": {
                    "image_path": _IMAGE_PATH,
                    "focus_area": {
                        "type": "string",
                        "description": (
                            'Specific area to focus on (e.g., "text", "faces", '
                            '"objects", "colors", "layout")'
                        ),
                    },
                    "prompt": {
                        "type": "string",
                        "description": (
                            "Custom prompt for focused analysis "
                            "(overrides focus_area if provided)"
                        ),
                    },
                    "provider": _PROVIDER,
                    "model": _MODEL,
                },
                "required": ["image_path"],
            },
        ),
    ]


def create_server(dispatcher: ToolDispatcher) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return tool_definitions()

    # Input is checked by the dispatcher's validators, not the schema.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict) -> types.CallToolResult:
        result = await dispatcher.dispatch(name, arguments)
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=result.text)],
            isError=result.is_error,
        )

    return server


async def serve(dispatcher: ToolDispatcher) -> None:
    server = create_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info(MSG_SERVER_RUNNING)
        logger.info(MSG_SUPPORTED_PROVIDERS)
        logger.info(MSG_AVAILABLE_TOOLS, ", ".join(TOOL_NAMES))
        await server.run(read_stream, write_stream, server.create_initialization_options())
