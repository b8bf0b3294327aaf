"""GeminiVisionClient — Google Gemini generateContent vision backend."""
import base64
from typing import Optional

import httpx

from glm_image_mcp.constants import GEMINI_GENERATE_URL, GEMINI_LABEL
from glm_image_mcp.errors import EmptyResponseError, ProviderHTTPError
from glm_image_mcp.models import ProviderConfig
from glm_image_mcp.vision.client import VisionClient


class GeminiVisionClient(VisionClient):

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._transport = transport

    async def analyze(
        self,
        image_bytes: bytes,
        mime_type: str,
        prompt: str,
        config: ProviderConfig,
    ) -> str:
        image_data = base64.standard_b64encode(image_bytes).decode()
        body = {
            "contents": [
                {
                    "parts": [
                        {"text": prompt},
                        {"inline_data": {"mime_type": mime_type, "data": image_data}},
                    ]
                }
            ]
        }
        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            response = await client.post(
                GEMINI_GENERATE_URL.format(model=config.model),
                params={"key": config.api_key},
                json=body,
            )

        if not response.is_success:
            raise ProviderHTTPError(GEMINI_LABEL, response.reason_phrase, response.text)

        candidates = response.json().get("candidates") or []
        match candidates:
            case [{"content": {"parts": [{"text": str() as text}, *_]}}, *_]:
                return text
            # Safety-blocked candidates arrive without content.
            case _:
                raise EmptyResponseError(GEMINI_LABEL)
