#!/usr/bin/env python
"""
Show how an input would be classified and mined before it is sent to the LLM.

Useful for checking whether a site exposes JSON-LD or whether a YouTube video
description is reachable without calling the generative backend.
"""
import argparse
import asyncio
import logging

from dotenv import load_dotenv

from recipe_importer.app.services.content_parsing import classify_input, mine_content
from recipe_importer.app.services.prompt_builder import build_prompt

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("inspect_content")


async def inspect(raw: str, show_prompt: bool, preview_chars: int) -> None:
    classified = classify_input(raw)
    logger.info("Kind: %s (url=%s, video_id=%s)", classified.kind.value, classified.url, classified.video_id)

    mined = await mine_content(raw)
    logger.info("Source: %s, length: %d", mined.source, len(mined.text))
    print(mined.text[:preview_chars])

    if show_prompt:
        print("\n=== Prompt ===")
        print(build_prompt(mined.text, source_url=classified.url))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", help="URL, YouTube link, or recipe text")
    parser.add_argument("--prompt", action="store_true", help="print the full extraction prompt")
    parser.add_argument("--preview-chars", type=int, default=2000)
    args = parser.parse_args()

    load_dotenv()
    asyncio.run(inspect(args.input, args.prompt, args.preview_chars))


if __name__ == "__main__":
    main()
