from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from glm_image_mcp.constants import PROVIDER_GEMINI, PROVIDER_OPENROUTER


class Provider(str, Enum):
    OPENROUTER = PROVIDER_OPENROUTER
    GEMINI = PROVIDER_GEMINI


@dataclass(frozen=True)
class AnalysisRequest:
    image_path: str
    prompt: str
    provider: Optional[Provider] = None
    model: Optional[str] = None


@dataclass(frozen=True)
class ValidatedImage:
    path: str
    size: int
    mime_type: str
    data: bytes = field(repr=False)


@dataclass(frozen=True)
class ProviderConfig:
    provider: Provider
    api_key: str = field(repr=False)
    model: str


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False

    def to_dict(self) -> dict:
        payload: dict = {"content": [{"type": "text", "text": self.text}]}
        if self.is_error:
            payload["isError"] = True
        return payload
