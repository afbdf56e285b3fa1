# src/schemas.py
from typing import List
from pydantic import BaseModel, ConfigDict, Field

NO_OVERLAY = "N/A"


class ImageRequest(BaseModel):
    prompt: str = Field(..., description="Description of the image to generate")


class ScriptRequest(BaseModel):
    topic: str = Field(..., description="Topic the short-video scripts should cover")


class ImageResponse(BaseModel):
    image: str = Field(..., description="Base64-encoded JPEG bytes")
    mime_type: str = "image/jpeg"

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.image}"


class Scene(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    visual: str
    voiceover: str
    on_screen_text: str = Field(..., alias="onScreenText")  # "N/A" -> no overlay

    @property
    def has_overlay(self) -> bool:
        return self.on_screen_text.strip() != NO_OVERLAY


class VideoScript(BaseModel):
    platform: str
    title: str
    hook: str
    scenes: List[Scene] = Field(..., min_length=1)


class ScriptsResponse(BaseModel):
    scripts: List[VideoScript]


class ErrorResponse(BaseModel):
    detail: str
    kind: str
