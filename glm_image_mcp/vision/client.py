"""VisionClient — abstract base for image analysis providers."""
from abc import ABC, abstractmethod

from glm_image_mcp.models import ProviderConfig


class VisionClient(ABC):
    @abstractmethod
    async def analyze(
        self,
        image_bytes: bytes,
        mime_type: str,
        prompt: str,
        config: ProviderConfig,
    ) -> str:
        """Analyze image bytes and return the provider's text. Raises ProviderError on failure."""
        ...
