import asyncio

from fakes import fake_image, make_client
from src.errors import SafetyBlocked
from src.generation.image import SAFETY_MESSAGE, ImageAdapter
from src.generation.scripts import ScriptAdapter
from src.view import UNEXPECTED_MESSAGE, GenerationView, ViewState


class RecordingAdapter:
    def __init__(self, result="ok", error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def __call__(self, value):
        self.calls.append(value)
        if self.error is not None:
            raise self.error
        return self.result


def test_starts_idle():
    view = GenerationView(RecordingAdapter())
    assert view.state is ViewState.IDLE
    assert view.result is None and view.error is None


def test_blank_submit_is_a_no_op():
    adapter = RecordingAdapter()
    view = GenerationView(adapter)
    assert asyncio.run(view.submit("")) is False
    assert asyncio.run(view.submit("   ")) is False
    assert view.state is ViewState.IDLE
    assert adapter.calls == []


def test_success_stores_result():
    adapter = RecordingAdapter(result="AAAA")
    view = GenerationView(adapter)
    assert asyncio.run(view.submit("a red bicycle")) is True
    assert view.state is ViewState.SUCCESS
    assert view.result == "AAAA"
    assert view.error is None
    assert adapter.calls == ["a red bicycle"]


def test_generation_error_becomes_failure():
    view = GenerationView(RecordingAdapter(error=SafetyBlocked("blocked")))
    asyncio.run(view.submit("prompt"))
    assert view.state is ViewState.FAILURE
    assert view.error == "blocked"
    assert view.result is None


def test_unexpected_error_becomes_generic_failure():
    view = GenerationView(RecordingAdapter(error=KeyError("x")))
    asyncio.run(view.submit("prompt"))
    assert view.state is ViewState.FAILURE
    assert view.error == UNEXPECTED_MESSAGE


def test_resubmit_clears_previous_outcome():
    seen = []
    adapter = RecordingAdapter(error=SafetyBlocked("blocked"))
    view = GenerationView(adapter)
    asyncio.run(view.submit("prompt"))

    async def spy(value):
        seen.append((view.state, view.result, view.error))
        return "fresh"

    view.adapter = spy
    asyncio.run(view.submit())
    assert seen == [(ViewState.LOADING, None, None)]
    assert view.state is ViewState.SUCCESS
    assert view.result == "fresh"


def test_submit_while_loading_is_a_no_op():
    calls = []

    async def scenario():
        release = asyncio.Event()

        async def slow(value):
            calls.append(value)
            await release.wait()
            return "done"

        view = GenerationView(slow)
        first = asyncio.create_task(view.submit("first"))
        await asyncio.sleep(0)
        assert view.state is ViewState.LOADING

        assert await view.submit("second") is False
        assert view.state is ViewState.LOADING
        assert view.value == "first"

        release.set()
        assert await first is True
        return view

    view = asyncio.run(scenario())
    assert calls == ["first"]
    assert view.state is ViewState.SUCCESS
    assert view.result == "done"


def test_views_are_independent():
    a = GenerationView(RecordingAdapter(result="a"))
    b = GenerationView(RecordingAdapter(result="b"))
    asyncio.run(a.submit("x"))
    assert a.state is ViewState.SUCCESS
    assert b.state is ViewState.IDLE


# ---------- End-to-end through the adapters ----------
def test_image_flow_success():
    view = GenerationView(ImageAdapter(make_client(images=[fake_image(b"\x00\x00\x00")])))
    asyncio.run(view.submit("a red bicycle"))
    assert view.state is ViewState.SUCCESS
    assert view.result == "AAAA"


def test_image_flow_blank_prompt_stays_idle():
    client = make_client(images=[fake_image(b"img")])
    view = GenerationView(ImageAdapter(client))
    asyncio.run(view.submit(""))
    assert view.state is ViewState.IDLE
    assert client.aio.models.calls == []


def test_script_flow_success(scripts_json):
    view = GenerationView(ScriptAdapter(make_client(text=scripts_json)))
    asyncio.run(view.submit("cats"))
    assert view.state is ViewState.SUCCESS
    assert len(view.result) == 3


def test_image_flow_safety_failure():
    client = make_client(error=RuntimeError("request blocked: SAFETY threshold exceeded"))
    view = GenerationView(ImageAdapter(client))
    asyncio.run(view.submit("prompt"))
    assert view.state is ViewState.FAILURE
    assert view.error == SAFETY_MESSAGE


def test_script_flow_malformed_failure():
    view = GenerationView(ScriptAdapter(make_client(text="{not json")))
    asyncio.run(view.submit("cats"))
    assert view.state is ViewState.FAILURE
    assert "unexpected format" in view.error
