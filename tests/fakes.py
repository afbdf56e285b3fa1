from types import SimpleNamespace


class FakeModels:
    """Stands in for `client.aio.models` of google-genai."""

    def __init__(self, images=None, text=None, error=None):
        self.images = images
        self.text = text
        self.error = error
        self.calls = []

    async def generate_images(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(generated_images=self.images)

    async def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def fake_image(image_bytes, rai_filtered_reason=None):
    return SimpleNamespace(
        image=SimpleNamespace(image_bytes=image_bytes, mime_type="image/jpeg"),
        rai_filtered_reason=rai_filtered_reason,
    )


def make_client(**kwargs):
    models = FakeModels(**kwargs)
    return SimpleNamespace(aio=SimpleNamespace(models=models), models=models)


SCRIPTS = [
    {
        "platform": "TikTok",
        "title": "Cats Rule the Internet",
        "hook": "Your cat is judging you right now.",
        "scenes": [
            {"visual": "Cat staring at camera", "voiceover": "Ever feel watched?", "onScreenText": "Judged."},
            {"visual": "Cat knocks cup off table", "voiceover": "This is why.", "onScreenText": "N/A"},
        ],
    },
    {
        "platform": "Instagram Reels",
        "title": "A Day in the Life of a Cat",
        "hook": "Sleep, eat, repeat.",
        "scenes": [
            {"visual": "Cat asleep in sunbeam", "voiceover": "7am. Nap one.", "onScreenText": "Nap #1"},
        ],
    },
    {
        "platform": "YouTube Shorts",
        "title": "3 Cat Facts in 30 Seconds",
        "hook": "Cats can't taste sweetness.",
        "scenes": [
            {"visual": "Cat sniffing cake", "voiceover": "No sweet receptors.", "onScreenText": "Fact 1"},
            {"visual": "Cat purring", "voiceover": "Purring heals bones.", "onScreenText": "Fact 2"},
            {"visual": "Cat jumping", "voiceover": "Six times their height.", "onScreenText": "N/A"},
        ],
    },
]
