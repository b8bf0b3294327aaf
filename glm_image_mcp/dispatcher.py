"""ToolDispatcher — maps a tool call onto validate → resolve → analyze, transport-agnostic."""
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any, Optional

from glm_image_mcp import constants
from glm_image_mcp.config import Config
from glm_image_mcp.constants import (
    DEFAULT_DESCRIBE_PROMPT,
    ERR_PREFIX,
    ERR_REQUIRED,
    ERR_UNKNOWN_TOOL,
    FOCUSED_PROMPT_TEMPLATE,
    MSG_ROUTING,
    MSG_TOOL_FAILED,
    MSG_TOOL_OK,
    TOOL_ANALYZE,
    TOOL_DESCRIBE,
    TOOL_FOCUSED,
)
from glm_image_mcp.errors import (
    ImageMCPError,
    MissingFieldError,
    NoCredentialsError,
    UnknownToolError,
)
from glm_image_mcp.models import AnalysisRequest, Provider, ToolResult
from glm_image_mcp.resolver import ProviderResolver
from glm_image_mcp.validation import load_image, validate_analysis_params
from glm_image_mcp.vision.client import VisionClient
from glm_image_mcp.vision.gemini import GeminiVisionClient
from glm_image_mcp.vision.openrouter import OpenRouterVisionClient

logger = logging.getLogger(__name__)

TOOL_NAMES = (TOOL_ANALYZE, TOOL_DESCRIBE, TOOL_FOCUSED)


# ── pure helpers (module-level so tests can import them directly) ──────────────


def focused_prompt(focus_area: Optional[str], prompt: Any = None) -> Any:
    """An explicit prompt always wins over the one synthesized from focus_area.

    Non-string prompts are returned unchanged so prompt validation rejects them.
    """
    match prompt:
        case None | "":
            pass
        case _:
            return prompt

    match focus_area:
        case str() as area if area:
            return FOCUSED_PROMPT_TEMPLATE.format(focus_area=area)
        case _:
            raise MissingFieldError(ERR_REQUIRED % "focus_area")


def prompt_for_tool(name: str, arguments: Mapping[str, Any]) -> Any:
    prompt = arguments.get("prompt")
    match name:
        case constants.TOOL_ANALYZE:
            return prompt
        case constants.TOOL_DESCRIBE:
            return prompt or DEFAULT_DESCRIBE_PROMPT
        case constants.TOOL_FOCUSED:
            return focused_prompt(arguments.get("focus_area"), prompt)
        case _:
            raise UnknownToolError(ERR_UNKNOWN_TOOL % name)


def default_clients() -> dict[Provider, VisionClient]:
    return {
        Provider.OPENROUTER: OpenRouterVisionClient(),
        Provider.GEMINI: GeminiVisionClient(),
    }


# ── dispatcher ────────────────────────────────────────────────────────────────


class ToolDispatcher:
    """Runs one tool call to completion and never lets an exception escape."""

    def __init__(
        self,
        load_config: Callable[[], Config] = Config.from_env,
        clients: Optional[Mapping[Provider, VisionClient]] = None,
    ) -> None:
        self._load_config = load_config
        self._clients = dict(clients) if clients is not None else default_clients()

    async def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]]) -> ToolResult:
        start = time.monotonic()
        args = arguments or {}
        try:
            request = validate_analysis_params(
                image_path=args.get("image_path"),
                prompt=prompt_for_tool(name, args),
                provider=args.get("provider"),
                model=args.get("model"),
            )
            text = await self._analyze(name, request)
        except ImageMCPError as exc:
            logger.warning(MSG_TOOL_FAILED, name, exc)
            return ToolResult(ERR_PREFIX % exc, is_error=True)
        except Exception as exc:
            logger.exception(MSG_TOOL_FAILED, name, exc)
            return ToolResult(ERR_PREFIX % exc, is_error=True)

        logger.info(MSG_TOOL_OK, name, time.monotonic() - start)
        return ToolResult(text)

    async def _analyze(self, name: str, request: AnalysisRequest) -> str:
        # Credentials are reloaded per call; nothing is cached between calls.
        try:
            config = self._load_config()
        except ValueError as exc:
            raise NoCredentialsError(str(exc)) from exc

        provider_config = ProviderResolver(config).resolve(request.provider, request.model)
        image = load_image(request.image_path)

        logger.info(MSG_ROUTING, provider_config.provider.value, provider_config.model, name)
        client = self._clients[provider_config.provider]
        return await client.analyze(image.data, image.mime_type, request.prompt, provider_config)
