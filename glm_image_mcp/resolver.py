"""ProviderResolver — turns an optional provider/model pair into a concrete ProviderConfig."""
import logging
from typing import Optional

from glm_image_mcp.config import Config
from glm_image_mcp.constants import (
    DEFAULT_GEMINI_MODEL,
    DEFAULT_OPENROUTER_MODEL,
    ENV_GEMINI_API_KEY,
    ENV_OPENROUTER_API_KEY,
    ERR_MISSING_API_KEY,
    ERR_NO_CREDENTIALS,
    GEMINI_LABEL,
    MSG_DETECTED_PROVIDER,
    OPENROUTER_LABEL,
)
from glm_image_mcp.errors import MissingAPIKeyError, NoCredentialsError
from glm_image_mcp.models import Provider, ProviderConfig

logger = logging.getLogger(__name__)


class ProviderResolver:
    """Resolves credentials from an injected Config; never reads os.environ."""

    def __init__(self, config: Config) -> None:
        self._config = config

    def detect(self) -> Provider:
        """Gemini wins over OpenRouter when both keys are configured."""
        match (self._config.gemini_api_key, self._config.openrouter_api_key):
            case (str() as key, _) if key:
                logger.info(MSG_DETECTED_PROVIDER, GEMINI_LABEL, GEMINI_LABEL)
                return Provider.GEMINI
            case (_, str() as key) if key:
                logger.info(MSG_DETECTED_PROVIDER, OPENROUTER_LABEL, OPENROUTER_LABEL)
                return Provider.OPENROUTER
            case _:
                raise NoCredentialsError(ERR_NO_CREDENTIALS)

    def resolve(
        self,
        provider: Optional[Provider] = None,
        model: Optional[str] = None,
    ) -> ProviderConfig:
        chosen = Provider(provider) if provider else self.detect()

        match chosen:
            case Provider.GEMINI:
                api_key = self._config.gemini_api_key
                env_model = self._config.gemini_model
                fallback = DEFAULT_GEMINI_MODEL
                key_var, label = ENV_GEMINI_API_KEY, GEMINI_LABEL
            case Provider.OPENROUTER:
                api_key = self._config.openrouter_api_key
                env_model = self._config.openrouter_model
                fallback = DEFAULT_OPENROUTER_MODEL
                key_var, label = ENV_OPENROUTER_API_KEY, OPENROUTER_LABEL

        if not api_key:
            raise MissingAPIKeyError(ERR_MISSING_API_KEY % (key_var, label))

        return ProviderConfig(
            provider=chosen,
            api_key=api_key,
            model=model or env_model or fallback,
        )
