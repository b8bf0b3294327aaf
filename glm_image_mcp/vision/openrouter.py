"""OpenRouterVisionClient — OpenRouter chat-completions vision backend."""
import base64

from openai import APIStatusError, AsyncOpenAI

from glm_image_mcp.constants import (
    OPENROUTER_BASE_URL,
    OPENROUTER_LABEL,
    OPENROUTER_REFERER,
    OPENROUTER_TITLE,
)
from glm_image_mcp.errors import EmptyResponseError, ProviderHTTPError
from glm_image_mcp.models import ProviderConfig
from glm_image_mcp.vision.client import VisionClient


class OpenRouterVisionClient(VisionClient):

    async def analyze(
        self,
        image_bytes: bytes,
        mime_type: str,
        prompt: str,
        config: ProviderConfig,
    ) -> str:
        client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=OPENROUTER_BASE_URL,
            default_headers={
                "HTTP-Referer": OPENROUTER_REFERER,
                "X-Title": OPENROUTER_TITLE,
            },
            max_retries=0,
            timeout=None,
        )
        image_data = base64.standard_b64encode(image_bytes).decode()
        try:
            response = await client.chat.completions.create(
                model=config.model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            {
                                "type": "image_url",
                                "image_url": {"url": f"data:{mime_type};base64,{image_data}"},
                            },
                        ],
                    }
                ],
            )
        except APIStatusError as exc:
            raise ProviderHTTPError(
                OPENROUTER_LABEL, exc.response.reason_phrase, exc.response.text
            ) from exc

        if not response.choices:
            raise EmptyResponseError(OPENROUTER_LABEL)
        return response.choices[0].message.content or ""
