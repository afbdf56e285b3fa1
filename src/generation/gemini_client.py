import logging
from typing import Optional

from google import genai

from src.config import Settings
from src.errors import (
    GenerationError,
    GenerationFailed,
    MissingCredential,
    SafetyBlocked,
    UnknownError,
    is_safety_block,
)

logger = logging.getLogger(__name__)


def make_client(settings: Settings) -> genai.Client:
    if not settings.api_key:
        raise MissingCredential()
    return genai.Client(api_key=settings.api_key)


def error_message(exc: BaseException) -> Optional[str]:
    """Readable message of *exc*, or None when it carries nothing usable."""
    message = str(exc).strip()
    if not message:
        # google-genai APIError keeps the server text on .message
        fallback = getattr(exc, "message", None)
        message = fallback.strip() if isinstance(fallback, str) else ""
    return message or None


def classify_error(
    exc: BaseException,
    *,
    failed_prefix: str,
    safety_message: str,
    unknown_message: str,
) -> GenerationError:
    """
    Map an error raised around a Gemini call to a user-facing outcome.
    Errors already classified pass through untouched.
    """
    if isinstance(exc, GenerationError):
        return exc
    message = error_message(exc)
    if message is None:
        return UnknownError(unknown_message)
    if is_safety_block(message):
        return SafetyBlocked(safety_message)
    return GenerationFailed(f"{failed_prefix}: {message}")


def preview(text: str, limit: int = 80) -> str:
    flat = text[:limit].replace("\n", " ")
    return flat + ("..." if len(text) > limit else "")
