import json
import logging
from typing import Any, List

from google.genai import types
from pydantic import TypeAdapter, ValidationError

from src.config import DEFAULT_SCRIPT_MODEL
from src.errors import EmptyResponse, GenerationError, MalformedResponse, is_safety_block
from src.generation.gemini_client import classify_error, error_message, preview
from src.schemas import NO_OVERLAY, VideoScript

logger = logging.getLogger(__name__)

PLATFORMS = ("TikTok", "Instagram Reels", "YouTube Shorts")

SAFETY_MESSAGE = "The topic was blocked by safety settings. Please try a different topic."
UNKNOWN_MESSAGE = "An unknown error occurred during script generation."

PROMPT_TEMPLATE = """
You are a senior short-form video scriptwriter.
Write {count} short video scripts about the TOPIC below, one for each of these
platforms: {platforms}. Style each script for its platform's audience and pacing.

Each script has:
- "platform": the platform name exactly as listed above
- "title": a catchy title
- "hook": the opening line that stops the scroll (first 3 seconds)
- "scenes": 3-6 scenes in order, each with
    "visual": what the viewer sees,
    "voiceover": what the narrator says,
    "onScreenText": short overlay text, or "{no_overlay}" when there is none

Rules:
- Keep every scene short enough to fit a 30-60 second video.
- No markdown, ONLY valid JSON matching the response schema.

TOPIC:
\"\"\"{topic}\"\"\"
"""

_SCENE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "visual": types.Schema(type=types.Type.STRING, description="What is shown on screen"),
        "voiceover": types.Schema(type=types.Type.STRING, description="Narration for the scene"),
        "onScreenText": types.Schema(
            type=types.Type.STRING,
            description=f'Overlay text, or "{NO_OVERLAY}" for none',
        ),
    },
    required=["visual", "voiceover", "onScreenText"],
)

RESPONSE_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "platform": types.Schema(type=types.Type.STRING),
            "title": types.Schema(type=types.Type.STRING),
            "hook": types.Schema(type=types.Type.STRING),
            "scenes": types.Schema(type=types.Type.ARRAY, items=_SCENE_SCHEMA),
        },
        required=["platform", "title", "hook", "scenes"],
    ),
)

_scripts_adapter = TypeAdapter(List[VideoScript])


def build_prompt(topic: str) -> str:
    return PROMPT_TEMPLATE.format(
        count=len(PLATFORMS),
        platforms=", ".join(PLATFORMS),
        no_overlay=NO_OVERLAY,
        topic=topic,
    )


def strip_code_fences(text: str) -> str:
    # Gemini sometimes wraps JSON in ``` fences even in JSON mode
    txt = text.strip()
    if txt.startswith("```"):
        txt = txt.strip("`").strip()
        if txt.lower().startswith("json"):
            txt = txt[4:]
    return txt.strip()


def decode_scripts(text: str) -> List[VideoScript]:
    """
    Strictly decode the model's text payload into VideoScript values.
    Raises EmptyResponse for a blank payload and MalformedResponse for
    anything that is not a JSON array of well-formed scripts.
    """
    txt = strip_code_fences(text or "")
    if not txt:
        raise EmptyResponse()
    try:
        data = json.loads(txt)
        return _scripts_adapter.validate_python(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.warning("Could not decode scripts payload: %s", exc)
        raise MalformedResponse() from exc


def _is_decode_error(exc: BaseException, message: str) -> bool:
    return isinstance(exc, (json.JSONDecodeError, ValidationError)) or "JSON" in message


class ScriptAdapter:
    """Turns a topic into one structured short-video script per platform."""

    def __init__(self, client: Any, model: str = DEFAULT_SCRIPT_MODEL):
        self.client = client
        self.model = model

    def build_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=RESPONSE_SCHEMA,
        )

    async def generate_video_scripts(self, topic: str) -> List[VideoScript]:
        logger.info("model=%s topic_preview='%s' len=%s", self.model, preview(topic), len(topic))
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=build_prompt(topic),
                config=self.build_config(),
            )
            scripts = decode_scripts(getattr(response, "text", None) or "")
        except GenerationError:
            raise
        except Exception as exc:
            logger.exception("Error generating video scripts: %s", exc)
            message = error_message(exc)
            if message and not is_safety_block(message) and _is_decode_error(exc, message):
                raise MalformedResponse() from exc
            raise classify_error(
                exc,
                failed_prefix="Failed to generate video scripts",
                safety_message=SAFETY_MESSAGE,
                unknown_message=UNKNOWN_MESSAGE,
            ) from exc

        if len(scripts) != len(PLATFORMS):
            logger.warning("Expected %s scripts, got %s", len(PLATFORMS), len(scripts))
        return scripts

    __call__ = generate_video_scripts
