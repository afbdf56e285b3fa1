"""Server-rendered HTML for the two generation forms."""

from html import escape
from typing import List

from src.schemas import ImageResponse, VideoScript
from src.view import GenerationView, ViewState

IMAGE_PLACEHOLDER = "Your generated image will appear here."
SCRIPTS_PLACEHOLDER = "Your video scripts will appear here."

DEFAULT_PROMPT = (
    "A photorealistic, adorable chubby baby girl with dark curly hair and rosy cheeks, "
    "wearing an elaborate dress made entirely of green cabbage and kale leaves. The dress "
    "has a layered skirt and a fitted bodice. She is standing against a soft, neutral "
    "studio background."
)

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
{refresh}<title>{title}</title>
<style>
  body {{ background:#111827; color:#f9fafb; font-family:sans-serif; margin:0; padding:2rem; }}
  header {{ text-align:center; margin-bottom:1.5rem; }}
  nav a {{ color:#5eead4; margin:0 .5rem; }}
  main {{ display:flex; flex-wrap:wrap; gap:2rem; max-width:64rem; margin:0 auto; }}
  .panel {{ flex:1 1 24rem; background:#1f2937; border:1px solid #374151; border-radius:1rem; padding:1.5rem; }}
  textarea, input[type=text] {{ width:100%; box-sizing:border-box; background:#111827; color:inherit;
    border:1px solid #4b5563; border-radius:.5rem; padding:1rem; }}
  textarea {{ height:12rem; resize:none; }}
  button {{ margin-top:1rem; width:100%; padding:.75rem; font-weight:bold; color:#fff; border:0;
    border-radius:.5rem; background:linear-gradient(90deg,#14b8a6,#059669); cursor:pointer; }}
  button:disabled {{ opacity:.5; cursor:not-allowed; }}
  .muted {{ color:#6b7280; text-align:center; }}
  .error {{ color:#f87171; text-align:center; }}
  .result img {{ width:100%; border-radius:.5rem; }}
  .card {{ border:1px solid #374151; border-radius:.75rem; padding:1rem; margin-bottom:1rem; }}
  .platform {{ color:#5eead4; font-size:.8rem; text-transform:uppercase; }}
  .overlay {{ color:#fcd34d; }}
</style>
</head>
<body>
<header>
  <h1>{title}</h1>
  <p class="muted">{subtitle}</p>
  <nav><a href="/">Image</a><a href="/scripts">Video scripts</a></nav>
</header>
<main>
  <form class="panel" method="post" action="{action}">
    {field}
    <button type="submit"{disabled}>{button}</button>
  </form>
  <section class="panel result">{result}</section>
</main>
</body>
</html>
"""


def _disabled(view: GenerationView) -> str:
    return " disabled" if view.is_loading else ""


def _status_block(view: GenerationView, loading_text: str) -> str:
    if view.state is ViewState.LOADING:
        return f'<p class="muted">{escape(loading_text)}</p>'
    if view.state is ViewState.FAILURE:
        return (
            '<div class="error"><h3>Generation Failed</h3>'
            f"<p>{escape(view.error or '')}</p></div>"
        )
    return f'<p class="muted">{escape(view.placeholder)}</p>'


def render_image_page(view: GenerationView) -> str:
    if view.state is ViewState.SUCCESS and view.result:
        data_url = ImageResponse(image=view.result).data_url
        result = f'<img src="{escape(data_url)}" alt="Generated by AI">'
    else:
        result = _status_block(view, "Creating your vision...")

    field = (
        '<label for="prompt">Image Description</label>'
        '<textarea id="prompt" name="prompt" '
        'placeholder="e.g., A majestic lion wearing a crown in a futuristic city"'
        f'{_disabled(view)}>{escape(view.value)}</textarea>'
    )
    return _page(
        view,
        title="AI Image Recreator",
        subtitle="Describe an image and watch it come to life.",
        action="/",
        field=field,
        button="Generating..." if view.is_loading else "Generate Image",
        result=result,
    )


def _scene_html(index: int, scene) -> str:
    overlay = ""
    if scene.has_overlay:
        overlay = f'<p class="overlay">On screen: {escape(scene.on_screen_text)}</p>'
    return (
        f"<li><strong>Scene {index}</strong>"
        f"<p>Visual: {escape(scene.visual)}</p>"
        f"<p>Voiceover: {escape(scene.voiceover)}</p>{overlay}</li>"
    )


def render_scripts(scripts: List[VideoScript]) -> str:
    cards = []
    for script in scripts:
        scenes = "".join(_scene_html(i, s) for i, s in enumerate(script.scenes, start=1))
        cards.append(
            '<article class="card">'
            f'<p class="platform">{escape(script.platform)}</p>'
            f"<h3>{escape(script.title)}</h3>"
            f"<p><em>Hook:</em> {escape(script.hook)}</p>"
            f"<ol>{scenes}</ol></article>"
        )
    return "".join(cards)


def render_scripts_page(view: GenerationView) -> str:
    if view.state is ViewState.SUCCESS and view.result is not None:
        result = render_scripts(view.result)
    else:
        result = _status_block(view, "Writing your scripts...")

    field = (
        '<label for="topic">Video Topic</label>'
        '<input type="text" id="topic" name="topic" '
        f'placeholder="e.g., Morning routines of successful people" value="{escape(view.value)}"{_disabled(view)}>'
    )
    return _page(
        view,
        title="Short Video Script Generator",
        subtitle="Give a topic and get scripts for TikTok, Reels and Shorts.",
        action="/scripts",
        field=field,
        button="Generating..." if view.is_loading else "Generate Scripts",
        result=result,
    )


def _page(view: GenerationView, **parts) -> str:
    # poll while a submission from another request is still running
    refresh = '<meta http-equiv="refresh" content="2">\n' if view.is_loading else ""
    return PAGE_TEMPLATE.format(
        refresh=refresh,
        disabled=_disabled(view),
        **{k: (v if k in ("field", "result") else escape(v)) for k, v in parts.items()},
    )
