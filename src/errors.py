"""
Failure outcomes shared by the image and script adapters.

Every adapter failure is a GenerationError carrying a `kind` and a message
that is safe to show to the user as-is.
"""


class GenerationError(Exception):
    kind = "GenerationError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SafetyBlocked(GenerationError):
    kind = "SafetyBlocked"


class NoImageGenerated(GenerationError):
    kind = "NoImageGenerated"

    def __init__(self, message: str = "No image was generated. The response may have been blocked or empty."):
        super().__init__(message)


class EmptyResponse(GenerationError):
    kind = "EmptyResponse"

    def __init__(self, message: str = "The model returned an empty response. Please try again."):
        super().__init__(message)


class MalformedResponse(GenerationError):
    kind = "MalformedResponse"

    def __init__(self, message: str = "The model returned scripts in an unexpected format. Please try again."):
        super().__init__(message)


class GenerationFailed(GenerationError):
    kind = "GenerationFailed"


class UnknownError(GenerationError):
    kind = "UnknownError"


class MissingCredential(GenerationError):
    kind = "MissingCredential"

    def __init__(self, message: str = "GEMINI_API_KEY not set. Put it in your .env file."):
        super().__init__(message)


SAFETY_MARKER = "SAFETY"


def is_safety_block(message: str) -> bool:
    return SAFETY_MARKER in message
