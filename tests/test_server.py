"""MCP wiring tests — tool schemas, handler registration and the call_tool envelope."""
import mcp.types as types
from unittest.mock import AsyncMock

from glm_image_mcp.config import Config
from glm_image_mcp.dispatcher import ToolDispatcher
from glm_image_mcp.models import Provider
from glm_image_mcp.server import create_server, tool_definitions

JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 16


def make_server(text: str = "a red bicycle"):
    client = AsyncMock()
    client.analyze = AsyncMock(return_value=text)
    config = Config(
        openrouter_api_key="or-key",
        openrouter_model=None,
        gemini_api_key=None,
        gemini_model=None,
    )
    dispatcher = ToolDispatcher(load_config=lambda: config, clients={Provider.OPENROUTER: client})
    return create_server(dispatcher), client


async def call_tool(server, name: str, arguments: dict) -> types.CallToolResult:
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    response = await handler(request)
    return response.root


# ── schemas ───────────────────────────────────────────────────────────────────


def test_tool_definitions_expose_three_tools():
    names = [tool.name for tool in tool_definitions()]

    assert names == ["analyze_image", "describe_image", "focused_analyze_image"]


def test_every_tool_requires_image_path():
    for tool in tool_definitions():
        assert "image_path" in tool.inputSchema["required"]


def test_analyze_image_requires_prompt():
    analyze = tool_definitions()[0]

    assert analyze.inputSchema["required"] == ["image_path", "prompt"]


def test_provider_is_enum_constrained():
    for tool in tool_definitions():
        assert tool.inputSchema["properties"]["provider"]["enum"] == ["openrouter", "gemini"]


def test_focused_tool_has_focus_area():
    focused = tool_definitions()[2]

    assert "focus_area" in focused.inputSchema["properties"]


# ── server ────────────────────────────────────────────────────────────────────


def test_create_server_registers_tool_handlers():
    server, _ = make_server()

    assert server.name == "glm-image-mcp"
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


async def test_call_tool_unknown_tool_returns_error_result():
    server, client = make_server()

    result = await call_tool(server, "resize_image", {"image_path": "/tmp/x.jpg"})

    assert isinstance(result, types.CallToolResult)
    assert result.isError is True
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.content[0].text == "Error: Unknown tool: resize_image"
    client.analyze.assert_not_called()


async def test_call_tool_success_returns_text_content(tmp_path):
    image = tmp_path / "bike.jpg"
    image.write_bytes(JPEG_BYTES)
    server, client = make_server()

    result = await call_tool(server, "describe_image", {"image_path": str(image)})

    assert isinstance(result, types.CallToolResult)
    assert not result.isError
    assert [(block.type, block.text) for block in result.content] == [("text", "a red bicycle")]
    client.analyze.assert_awaited_once()


async def test_call_tool_validation_failure_is_error_result(tmp_path):
    server, _ = make_server()

    result = await call_tool(
        server, "describe_image", {"image_path": str(tmp_path / "bike.jpg"), "provider": "openai"}
    )

    assert result.isError is True
    assert result.content[0].text.startswith("Error: Invalid provider: openai")
