import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_IMAGE_MODEL = "imagen-4.0-generate-001"
DEFAULT_SCRIPT_MODEL = "gemini-2.5-flash"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s"


class Settings(BaseModel):
    api_key: Optional[str] = Field(None, description="Gemini API key")
    image_model: str = Field(DEFAULT_IMAGE_MODEL, description="Imagen model name")
    script_model: str = Field(DEFAULT_SCRIPT_MODEL, description="Gemini model name for scripts")
    log_level: str = Field("INFO", description="Root logging level")
    session_ttl: int = Field(60 * 60, description="Seconds a browser session keeps its views")
    cors_origins: List[str] = Field(default_factory=list, description="Origins allowed to call the JSON API")

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()
        # first non-empty key wins
        api_key = None
        for name in ("GEMINI_API_KEY", "API_KEY", "GOOGLE_API_KEY"):
            value = (os.environ.get(name) or "").strip()
            if value:
                api_key = value
                break
        return cls(
            api_key=api_key,
            image_model=os.environ.get("IMAGE_MODEL") or DEFAULT_IMAGE_MODEL,
            script_model=os.environ.get("SCRIPT_MODEL") or DEFAULT_SCRIPT_MODEL,
            log_level=(os.environ.get("LOG_LEVEL") or "INFO").upper(),
            session_ttl=int(os.environ.get("SESSION_TTL") or 60 * 60),
            cors_origins=[o.strip() for o in (os.environ.get("CORS_ORIGINS") or "").split(",") if o.strip()],
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
