import logging
import uuid
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from src.config import Settings, configure_logging
from src.errors import GenerationError, MissingCredential, NoImageGenerated, SafetyBlocked
from src.generation.gemini_client import make_client
from src.generation.image import ImageAdapter
from src.generation.scripts import ScriptAdapter
from src.pages import (
    DEFAULT_PROMPT,
    IMAGE_PLACEHOLDER,
    SCRIPTS_PLACEHOLDER,
    render_image_page,
    render_scripts_page,
)
from src.schemas import (
    ErrorResponse,
    ImageRequest,
    ImageResponse,
    ScriptRequest,
    ScriptsResponse,
    VideoScript,
)
from src.utils.cache import make_session_cache
from src.view import GenerationView

logger = logging.getLogger(__name__)

SESSION_COOKIE = "session"

ImageGenerator = Callable[[str], Awaitable[str]]
ScriptGenerator = Callable[[str], Awaitable[List[VideoScript]]]


def _status_for(exc: GenerationError) -> int:
    if isinstance(exc, (SafetyBlocked, NoImageGenerated)):
        return 422
    if isinstance(exc, MissingCredential):
        return 500
    return 502


def _client(app: FastAPI):
    # built on first use so a missing key surfaces per submission, not at startup
    if getattr(app.state, "client", None) is None:
        app.state.client = make_client(app.state.settings)
    return app.state.client


# ---------- Dependencies ----------
def get_image_adapter(request: Request) -> ImageGenerator:
    app = request.app

    async def generate_image(prompt: str) -> str:
        adapter = ImageAdapter(_client(app), model=app.state.settings.image_model)
        return await adapter(prompt)

    return generate_image


def get_script_adapter(request: Request) -> ScriptGenerator:
    app = request.app

    async def generate_video_scripts(topic: str) -> List[VideoScript]:
        adapter = ScriptAdapter(_client(app), model=app.state.settings.script_model)
        return await adapter(topic)

    return generate_video_scripts


def _session_views(request: Request) -> Tuple[str, Dict[str, GenerationView]]:
    sessions = request.app.state.sessions
    session_id = request.cookies.get(SESSION_COOKIE)
    views = sessions.get(session_id) if session_id else None
    if views is None:
        session_id = uuid.uuid4().hex
        views = {}
    # re-insert to refresh the TTL
    sessions[session_id] = views
    return session_id, views


def _view_for(
    request: Request, name: str, adapter: Callable, value: str = "", placeholder: str = ""
) -> Tuple[str, GenerationView]:
    session_id, views = _session_views(request)
    view = views.get(name)
    if view is None:
        view = GenerationView(adapter, value=value, placeholder=placeholder)
        views[name] = view
    elif not view.is_loading:
        view.adapter = adapter
    return session_id, view


def _html(session_id: str, body: str) -> HTMLResponse:
    response = HTMLResponse(body)
    response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(title="Shorts Studio")
    app.state.settings = settings
    app.state.client = None
    app.state.sessions = make_session_cache(ttl=settings.session_ttl)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(GenerationError)
    async def generation_error_handler(request: Request, exc: GenerationError):
        body = ErrorResponse(detail=exc.message, kind=exc.kind)
        return JSONResponse(status_code=_status_for(exc), content=body.model_dump())

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # ---------- Pages ----------
    @app.get("/", response_class=HTMLResponse)
    def image_page(request: Request, generate: ImageGenerator = Depends(get_image_adapter)):
        session_id, view = _view_for(request, "image", generate, DEFAULT_PROMPT, IMAGE_PLACEHOLDER)
        return _html(session_id, render_image_page(view))

    @app.post("/", response_class=HTMLResponse)
    async def submit_image(
        request: Request,
        prompt: str = Form(""),
        generate: ImageGenerator = Depends(get_image_adapter),
    ):
        session_id, view = _view_for(request, "image", generate, DEFAULT_PROMPT, IMAGE_PLACEHOLDER)
        await view.submit(prompt)
        return _html(session_id, render_image_page(view))

    @app.get("/scripts", response_class=HTMLResponse)
    def scripts_page(request: Request, generate: ScriptGenerator = Depends(get_script_adapter)):
        session_id, view = _view_for(request, "scripts", generate, placeholder=SCRIPTS_PLACEHOLDER)
        return _html(session_id, render_scripts_page(view))

    @app.post("/scripts", response_class=HTMLResponse)
    async def submit_scripts(
        request: Request,
        topic: str = Form(""),
        generate: ScriptGenerator = Depends(get_script_adapter),
    ):
        session_id, view = _view_for(request, "scripts", generate, placeholder=SCRIPTS_PLACEHOLDER)
        await view.submit(topic)
        return _html(session_id, render_scripts_page(view))

    # ---------- JSON API ----------
    @app.post("/api/image", response_model=ImageResponse)
    async def api_image(payload: ImageRequest, generate: ImageGenerator = Depends(get_image_adapter)):
        if not payload.prompt.strip():
            raise HTTPException(status_code=400, detail="Provide a non-empty 'prompt'.")
        image = await generate(payload.prompt)
        return ImageResponse(image=image)

    @app.post("/api/scripts", response_model=ScriptsResponse)
    async def api_scripts(payload: ScriptRequest, generate: ScriptGenerator = Depends(get_script_adapter)):
        if not payload.topic.strip():
            raise HTTPException(status_code=400, detail="Provide a non-empty 'topic'.")
        scripts = await generate(payload.topic)
        return ScriptsResponse(scripts=scripts)

    return app


app = create_app()

# uvicorn src.main:app --reload
