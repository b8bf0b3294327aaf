"""Error taxonomy — every failure the dispatcher reports to the caller."""
from glm_image_mcp.constants import ERR_EMPTY_RESPONSE, ERR_PROVIDER_HTTP


class ImageMCPError(Exception):
    """Base for all expected failures of a tool call."""


# ── validation ────────────────────────────────────────────────────────────────


class ValidationError(ImageMCPError):
    pass


class MissingFieldError(ValidationError):
    pass


class InvalidProviderError(ValidationError):
    pass


class InvalidModelFormatError(ValidationError):
    pass


class ImageNotFoundError(ValidationError):
    pass


class NotAFileError(ValidationError):
    pass


class FileTooLargeError(ValidationError):
    pass


class UnsupportedFormatError(ValidationError):
    pass


class PromptTooShortError(ValidationError):
    pass


class PromptTooLongError(ValidationError):
    pass


class UnsafePromptError(ValidationError):
    pass


class InvalidImageError(ValidationError):
    pass


# ── credentials ───────────────────────────────────────────────────────────────


class CredentialError(ImageMCPError):
    pass


class NoCredentialsError(CredentialError):
    pass


class MissingAPIKeyError(CredentialError):
    pass


# ── providers ─────────────────────────────────────────────────────────────────


class ProviderError(ImageMCPError):
    pass


class ProviderHTTPError(ProviderError):
    """Provider answered with a non-success HTTP status."""

    def __init__(self, provider: str, status_text: str, body: str) -> None:
        self.provider = provider
        self.status_text = status_text
        self.body = body
        super().__init__(ERR_PROVIDER_HTTP % (provider, status_text, body))


class EmptyResponseError(ProviderError):
    """Provider call succeeded but produced no choices / candidates."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(ERR_EMPTY_RESPONSE % provider)


# ── dispatch ──────────────────────────────────────────────────────────────────


class UnknownToolError(ImageMCPError):
    pass
