"""Input validation — every externally supplied value passes through here
before it touches the filesystem or the network.

Validators raise a ``ValidationError`` subclass on the first failing check;
``validate_image_buffer`` is the exception and only answers yes or no.
"""
import os
import re
from pathlib import Path
from typing import Any, Optional

from glm_image_mcp.constants import (
    ERR_FILE_NOT_FOUND,
    ERR_FILE_TOO_LARGE,
    ERR_INVALID_IMAGE,
    ERR_INVALID_PROVIDER,
    ERR_MODEL_EMPTY,
    ERR_MODEL_FORMAT,
    ERR_MODEL_NOT_STRING,
    ERR_MODEL_TOO_LONG,
    ERR_NOT_A_FILE,
    ERR_PATH_EMPTY,
    ERR_PATH_NOT_STRING,
    ERR_PROMPT_NOT_STRING,
    ERR_PROMPT_TOO_LONG,
    ERR_PROMPT_TOO_SHORT,
    ERR_PROMPT_UNSAFE,
    ERR_REQUIRED,
    ERR_UNSUPPORTED_FORMAT,
    IMAGE_SIGNATURES,
    MAX_FILE_SIZE,
    MAX_MODEL_LENGTH,
    MAX_PROMPT_LENGTH,
    MIME_JPEG,
    MIME_PNG,
    MIN_PROMPT_LENGTH,
    SUPPORTED_IMAGE_FORMATS,
    VALID_PROVIDERS,
)
from glm_image_mcp.errors import (
    FileTooLargeError,
    ImageNotFoundError,
    InvalidImageError,
    InvalidModelFormatError,
    InvalidProviderError,
    MissingFieldError,
    NotAFileError,
    PromptTooLongError,
    PromptTooShortError,
    UnsafePromptError,
    UnsupportedFormatError,
    ValidationError,
)
from glm_image_mcp.models import AnalysisRequest, Provider, ValidatedImage

_MODEL_PATTERNS = (
    re.compile(r"gemini-[\w.-]+", re.ASCII),
    re.compile(r"[\w.-]+/[\w.-]+", re.ASCII),
    re.compile(r"[\w.-]+", re.ASCII),
    re.compile(r"[\w.-]+/[\w.-]+:[\w.-]+", re.ASCII),
)

_UNSAFE_PROMPT_PATTERNS = (
    re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"data:text/html", re.IGNORECASE),
)


def validate_provider(name: Optional[str]) -> Optional[Provider]:
    """None defers the choice to the resolver."""
    if name is None:
        return None
    if name not in VALID_PROVIDERS:
        raise InvalidProviderError(ERR_INVALID_PROVIDER % (name, ", ".join(VALID_PROVIDERS)))
    return Provider(name)


def validate_model(name: Any) -> Optional[str]:
    if name is None:
        return None
    if not isinstance(name, str):
        raise InvalidModelFormatError(ERR_MODEL_NOT_STRING)

    model = name.strip()
    match len(model):
        case 0:
            raise InvalidModelFormatError(ERR_MODEL_EMPTY)
        case n if n > MAX_MODEL_LENGTH:
            raise InvalidModelFormatError(ERR_MODEL_TOO_LONG % MAX_MODEL_LENGTH)
        case _:
            pass

    if not any(pattern.fullmatch(model) for pattern in _MODEL_PATTERNS):
        raise InvalidModelFormatError(ERR_MODEL_FORMAT % model)
    return model


def validate_image_path(image_path: Any) -> str:
    """Return the absolute path of a readable, supported image file."""
    if not isinstance(image_path, str):
        raise ValidationError(ERR_PATH_NOT_STRING)
    if not image_path.strip():
        raise ValidationError(ERR_PATH_EMPTY)

    resolved = os.path.abspath(image_path)
    path = Path(resolved)
    if not path.exists():
        raise ImageNotFoundError(ERR_FILE_NOT_FOUND % resolved)
    if not path.is_file():
        raise NotAFileError(ERR_NOT_A_FILE % resolved)

    size = path.stat().st_size
    if size > MAX_FILE_SIZE:
        raise FileTooLargeError(ERR_FILE_TOO_LARGE % (size, MAX_FILE_SIZE))

    ext = path.suffix.lower()
    if ext not in SUPPORTED_IMAGE_FORMATS:
        raise UnsupportedFormatError(
            ERR_UNSUPPORTED_FORMAT % (ext, ", ".join(SUPPORTED_IMAGE_FORMATS))
        )
    return resolved


def validate_prompt(prompt: Any) -> str:
    if not isinstance(prompt, str):
        raise ValidationError(ERR_PROMPT_NOT_STRING)

    text = prompt.strip()
    if len(text) < MIN_PROMPT_LENGTH:
        raise PromptTooShortError(ERR_PROMPT_TOO_SHORT % MIN_PROMPT_LENGTH)
    if len(text) > MAX_PROMPT_LENGTH:
        raise PromptTooLongError(ERR_PROMPT_TOO_LONG % MAX_PROMPT_LENGTH)
    if any(pattern.search(text) for pattern in _UNSAFE_PROMPT_PATTERNS):
        raise UnsafePromptError(ERR_PROMPT_UNSAFE)
    return text


def validate_image_buffer(data: Any) -> bool:
    """True when ``data`` starts with a known image signature. Never raises."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        return False
    buffer = bytes(data)
    if not buffer or len(buffer) > MAX_FILE_SIZE:
        return False
    return any(buffer.startswith(signature) for _, signature in IMAGE_SIGNATURES)


def mime_type_for(image_path: str) -> str:
    return MIME_PNG if image_path.lower().endswith(".png") else MIME_JPEG


def load_image(image_path: str) -> ValidatedImage:
    """Read an already path-validated file and check its signature."""
    data = Path(image_path).read_bytes()
    if not validate_image_buffer(data):
        raise InvalidImageError(ERR_INVALID_IMAGE)
    return ValidatedImage(
        path=image_path,
        size=len(data),
        mime_type=mime_type_for(image_path),
        data=data,
    )


def validate_analysis_params(
    image_path: Any,
    prompt: Any,
    provider: Optional[str] = None,
    model: Any = None,
) -> AnalysisRequest:
    if not image_path:
        raise MissingFieldError(ERR_REQUIRED % "image_path")
    if not prompt:
        raise MissingFieldError(ERR_REQUIRED % "prompt")

    validated_provider = validate_provider(provider)
    # An empty model is treated as absent.
    validated_model = validate_model(model or None)
    return AnalysisRequest(
        image_path=validate_image_path(image_path),
        prompt=validate_prompt(prompt),
        provider=validated_provider,
        model=validated_model,
    )
