"""
Command line entry point for TubeTrans.
"""

import argparse
import asyncio
import json
import sys
from typing import Optional

from dotenv import load_dotenv

from tubetrans.config import config
from tubetrans.core.ai_client import GeminiClient
from tubetrans.core.orchestrator import TranscriptOrchestrator
from tubetrans.core.prompts import TRANSLATION_FAILED_MESSAGE
from tubetrans.models.schemas import TranscriptRecord
from tubetrans.utils.error_handling import InvalidUrlError, ServiceError, user_message
from tubetrans.utils.logger import logging, log_to_stderr


async def transcribe_youtube_video(
    url: str,
    translate: bool = False,
    model: str = config.DEFAULT_MODEL,
    api_key: Optional[str] = None,
) -> TranscriptRecord:
    """
    Fetch the transcript of a YouTube video and optionally translate it.

    Args:
        url: YouTube video URL
        translate: Whether to also request the Bangla translation
        model: Gemini model to use
        api_key: Gemini API key (defaults to the configured key)

    Returns:
        TranscriptRecord
    """
    orchestrator = TranscriptOrchestrator(GeminiClient(api_key=api_key, model=model))

    record = await orchestrator.fetch_transcript(url)
    logging.info(f"Transcript ready for video {record.video_id}")

    if translate:
        try:
            record = await orchestrator.translate(record)
        except ServiceError as e:
            logging.error(f"Translation error: {e}")
            print(TRANSLATION_FAILED_MESSAGE, file=sys.stderr)

    return record


def print_record(record: TranscriptRecord):
    print("\n" + "=" * 80)
    print(f"'{record.title}' by {record.author} ({record.video_id})")
    print("=" * 80)
    print(record.transcript)
    if record.translation:
        print("-" * 80)
        print(record.translation)
    print("=" * 80)


def main(argv=None) -> int:
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="YouTube transcripts translated to Bangla")
    parser.add_argument("url", help="YouTube video URL")
    parser.add_argument("--translate", action="store_true", help="Also translate the transcript to Bangla")
    parser.add_argument("--model", default=config.DEFAULT_MODEL, help="Gemini model to use")
    parser.add_argument("--json", action="store_true", help="Print the record as JSON")

    args = parser.parse_args(argv)

    # stdout carries the record only
    log_to_stderr()

    # Load environment variables
    load_dotenv()

    try:
        record = asyncio.run(transcribe_youtube_video(args.url, args.translate, args.model))
    except (InvalidUrlError, ServiceError) as e:
        print(user_message(e), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(record.model_dump(), ensure_ascii=False, indent=2))
    else:
        print_record(record)
    return 0


if __name__ == "__main__":
    sys.exit(main())
