from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from glm_image_mcp.constants import (
    DEFAULT_LOG_LEVEL,
    ENV_GEMINI_API_KEY,
    ENV_GEMINI_MODEL,
    ENV_LOG_LEVEL,
    ENV_OPENROUTER_API_KEY,
    ENV_OPENROUTER_MODEL,
    ERR_NO_CREDENTIALS,
)


@dataclass(frozen=True)
class Config:
    openrouter_api_key: Optional[str]
    openrouter_model: Optional[str]
    gemini_api_key: Optional[str]
    gemini_model: Optional[str]
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        return cls._validate(
            openrouter_api_key=os.getenv(ENV_OPENROUTER_API_KEY) or None,
            openrouter_model=os.getenv(ENV_OPENROUTER_MODEL) or None,
            gemini_api_key=os.getenv(ENV_GEMINI_API_KEY) or None,
            gemini_model=os.getenv(ENV_GEMINI_MODEL) or None,
            log_level=os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
        )

    @staticmethod
    def _validate(
        openrouter_api_key: Optional[str],
        openrouter_model: Optional[str],
        gemini_api_key: Optional[str],
        gemini_model: Optional[str],
        log_level: str,
    ) -> "Config":
        match (gemini_api_key, openrouter_api_key):
            case (None | "", None | ""):
                raise ValueError(ERR_NO_CREDENTIALS)
            case _:
                pass

        return Config(
            openrouter_api_key=openrouter_api_key,
            openrouter_model=openrouter_model,
            gemini_api_key=gemini_api_key,
            gemini_model=gemini_model,
            log_level=log_level,
        )
