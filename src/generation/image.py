import base64
import logging
from typing import Any

from google.genai import types

from src.config import DEFAULT_IMAGE_MODEL
from src.errors import GenerationError, NoImageGenerated
from src.generation.gemini_client import classify_error, preview

logger = logging.getLogger(__name__)

IMAGE_MIME_TYPE = "image/jpeg"
ASPECT_RATIO = "9:16"  # portrait, sized for short-form feeds

SAFETY_MESSAGE = "The prompt was blocked by safety settings. Please modify your prompt and try again."
UNKNOWN_MESSAGE = "An unknown error occurred during image generation."


def _encode(image_bytes: Any) -> str:
    if isinstance(image_bytes, str):
        # already base64 on the wire
        return image_bytes
    return base64.b64encode(image_bytes).decode("ascii")


class ImageAdapter:
    """
    Turns a prompt into one portrait JPEG via Imagen.

    Awaiting the adapter returns the image as a base64 string, or raises one
    of the GenerationError kinds.
    """

    def __init__(self, client: Any, model: str = DEFAULT_IMAGE_MODEL):
        self.client = client
        self.model = model

    def build_config(self) -> types.GenerateImagesConfig:
        return types.GenerateImagesConfig(
            number_of_images=1,
            output_mime_type=IMAGE_MIME_TYPE,
            aspect_ratio=ASPECT_RATIO,
        )

    async def generate_image(self, prompt: str) -> str:
        logger.info("model=%s prompt_preview='%s' len=%s", self.model, preview(prompt), len(prompt))
        try:
            response = await self.client.aio.models.generate_images(
                model=self.model,
                prompt=prompt,
                config=self.build_config(),
            )
            generated = getattr(response, "generated_images", None) or []
            if not generated:
                logger.warning("Imagen returned no images for prompt_preview='%s'", preview(prompt))
                raise NoImageGenerated()

            first = generated[0]
            image = getattr(first, "image", None)
            image_bytes = getattr(image, "image_bytes", None)
            if not image_bytes:
                logger.warning(
                    "Imagen returned an image without bytes (rai_filtered_reason=%s)",
                    getattr(first, "rai_filtered_reason", None),
                )
                raise NoImageGenerated()
            return _encode(image_bytes)
        except GenerationError:
            raise
        except Exception as exc:
            logger.exception("Error generating image: %s", exc)
            raise classify_error(
                exc,
                failed_prefix="Failed to generate image",
                safety_message=SAFETY_MESSAGE,
                unknown_message=UNKNOWN_MESSAGE,
            ) from exc

    __call__ = generate_image
