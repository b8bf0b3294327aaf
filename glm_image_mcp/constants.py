"""All magic values live here — no inline literals anywhere else."""

# Server identity
SERVER_NAME = "glm-image-mcp"
SERVER_VERSION = "2.1.0"

# Providers
PROVIDER_OPENROUTER = "openrouter"
PROVIDER_GEMINI = "gemini"
VALID_PROVIDERS = (PROVIDER_OPENROUTER, PROVIDER_GEMINI)

# Environment variables
ENV_OPENROUTER_API_KEY = "OPENROUTER_API_KEY"
ENV_OPENROUTER_MODEL = "OPENROUTER_MODEL"
ENV_GEMINI_API_KEY = "GEMINI_API_KEY"
ENV_GEMINI_MODEL = "GEMINI_MODEL"
ENV_LOG_LEVEL = "LOG_LEVEL"

# Fallback models when neither the call nor the environment names one
DEFAULT_OPENROUTER_MODEL = "x-ai/grok-4-fast:free"
DEFAULT_GEMINI_MODEL = "gemini-2.5-pro"
DEFAULT_LOG_LEVEL = "INFO"

# OpenRouter
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_REFERER = "https://kilocode.ai"
OPENROUTER_TITLE = "Kilo Code Enhanced MCP Server"
OPENROUTER_LABEL = "OpenRouter"

# Gemini
GEMINI_GENERATE_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
)
GEMINI_LABEL = "Gemini"

# Input limits
MAX_FILE_SIZE = 50 * 1024 * 1024
MIN_PROMPT_LENGTH = 3
MAX_PROMPT_LENGTH = 1000
MAX_MODEL_LENGTH = 100
SUPPORTED_IMAGE_FORMATS = (".jpg", ".jpeg", ".png", ".webp", ".bmp", ".tiff")

# Magic numbers, checked in order at offset 0.
# WEBP only checks the RIFF container, not the "WEBP" fourCC at offset 8.
IMAGE_SIGNATURES: tuple[tuple[str, bytes], ...] = (
    ("jpeg", b"\xff\xd8\xff"),
    ("png", b"\x89PNG"),
    ("webp", b"RIFF"),
    ("bmp", b"BM"),
)

MIME_PNG = "image/png"
MIME_JPEG = "image/jpeg"

# Tools
TOOL_ANALYZE = "analyze_image"
TOOL_DESCRIBE = "describe_image"
TOOL_FOCUSED = "focused_analyze_image"

DEFAULT_DESCRIBE_PROMPT = (
    "Describe this image in detail, including the main subjects, setting, "
    "colors, composition, and any visible text."
)
FOCUSED_PROMPT_TEMPLATE = "Analyze the {focus_area} in this image and provide detailed insights."

# Log / user-facing messages
MSG_SERVER_RUNNING = "GLM Image MCP Server running on stdio"
MSG_SUPPORTED_PROVIDERS = "Supported providers: OpenRouter, Google Gemini"
MSG_AVAILABLE_TOOLS = "Available tools: %s"
MSG_STARTUP_FAILED = "Failed to start GLM Image MCP Server: %s"
MSG_SHUTTING_DOWN = "Shutting down GLM Image MCP Server..."
MSG_DETECTED_PROVIDER = "Detected %s API key, using %s provider"
MSG_ROUTING = "→ %s (%s) for %s"
MSG_TOOL_FAILED = "✗ %s failed: %s"
MSG_TOOL_OK = "✓ %s (%.1fs)"

# Error messages
ERR_PREFIX = "Error: %s"
ERR_REQUIRED = "%s is required"
ERR_INVALID_PROVIDER = "Invalid provider: %s. Valid providers: %s"
ERR_MODEL_NOT_STRING = "model must be a string"
ERR_MODEL_EMPTY = "model cannot be empty"
ERR_MODEL_TOO_LONG = "model name too long (maximum %d characters)"
ERR_MODEL_FORMAT = (
    'Invalid model format: %s. Expected formats like "gemini-1.5-flash", '
    '"openai/gpt-4-vision-preview", or "x-ai/grok-4-fast:free"'
)
ERR_PATH_NOT_STRING = "image_path must be a string"
ERR_PATH_EMPTY = "image_path cannot be empty"
ERR_FILE_NOT_FOUND = "Image file not found: %s"
ERR_NOT_A_FILE = "Path is not a file: %s"
ERR_FILE_TOO_LARGE = "Image file too large: %d bytes (max: %d bytes)"
ERR_UNSUPPORTED_FORMAT = "Unsupported image format: %s. Supported formats: %s"
ERR_PROMPT_NOT_STRING = "prompt must be a string"
ERR_PROMPT_TOO_SHORT = "prompt too short (minimum %d characters)"
ERR_PROMPT_TOO_LONG = "prompt too long (maximum %d characters)"
ERR_PROMPT_UNSAFE = "prompt contains potentially harmful content"
ERR_INVALID_IMAGE = "Invalid or corrupted image file"
ERR_NO_CREDENTIALS = (
    "No API keys found. Please set either GEMINI_API_KEY or "
    "OPENROUTER_API_KEY environment variable"
)
ERR_MISSING_API_KEY = "%s environment variable is required for %s provider"
ERR_PROVIDER_HTTP = "%s API error: %s - %s"
ERR_EMPTY_RESPONSE = "No response generated by %s API"
ERR_UNKNOWN_TOOL = "Unknown tool: %s"
