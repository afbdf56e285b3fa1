import asyncio

from src.config import Settings, configure_logging
from src.generation.gemini_client import make_client
from src.generation.image import ImageAdapter
from src.generation.scripts import ScriptAdapter

# Live check against the real API; needs GEMINI_API_KEY in .env
settings = Settings.from_env()
configure_logging(settings.log_level)
client = make_client(settings)


async def main():
    # Step 1: Three scripts for a topic
    scripts = await ScriptAdapter(client, settings.script_model)("why cats knock things off tables")
    print("\n--- Generated Video Scripts ---\n")
    for script in scripts:
        print(f"[{script.platform}] {script.title}")
        print(f"  hook: {script.hook}")
        for i, scene in enumerate(script.scenes, start=1):
            print(f"  {i}. {scene.visual} | {scene.voiceover} | {scene.on_screen_text}")

    # Step 2: One portrait image
    image = await ImageAdapter(client, settings.image_model)("a red bicycle leaning on a brick wall at dusk")
    print(f"\n--- Generated Image ---\n{len(image)} base64 chars")


if __name__ == "__main__":
    asyncio.run(main())
