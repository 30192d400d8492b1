"""
Command-line entry point for the research pipeline.

Usage:
    python -m townhall ingest <url> [<url> ...]
    python -m townhall analyze <video_id>
    python -m townhall report [--category "Real Estate"] [--output report.md]
    python -m townhall serve [--host 0.0.0.0] [--port 8000] [--reload]

Configuration comes from the environment / .env file (see townhall.config):
OPENAI_API_KEY is required for analyze and report; STORAGE_BACKEND and
DATA_DIR / DATABASE_URL select where records are kept.
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

import uvicorn

from townhall.config import get_settings
from townhall.core.analysis import analyze_video
from townhall.core.errors import TownhallError
from townhall.core.ingest import ingest_urls
from townhall.core.report import generate_report
from townhall.logging_setup import configure_logging
from townhall.services.llm import LazyLLMClient
from townhall.services.storage import get_store
from townhall.utils.transcript import YouTubeTranscriptProvider


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def _ingest(urls: List[str]) -> None:
    with YouTubeTranscriptProvider(languages=get_settings().transcript_languages_list) as provider:
        results = await ingest_urls(urls, get_store(), provider)
    _print_json({"results": [r.to_response(include_transcript=False) for r in results]})


async def _analyze(video_id: str) -> None:
    record = await analyze_video(video_id, get_store(), LazyLLMClient())
    _print_json(record.to_document(include_transcript=False))


async def _report(category: Optional[str], output: Optional[str]) -> None:
    text = await generate_report(get_store(), LazyLLMClient(), category=category)
    if output:
        Path(output).write_text(text, encoding="utf-8")
        print(f"✅ Report written to {output}")
    else:
        print(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="townhall", description="Public meeting video research pipeline")
    commands = parser.add_subparsers(dest="command", required=True)

    ingest = commands.add_parser("ingest", help="Fetch and store transcripts for video URLs")
    ingest.add_argument("urls", nargs="+", help="YouTube URLs, processed in order")

    analyze = commands.add_parser("analyze", help="Extract civic issues from an ingested video")
    analyze.add_argument("video_id", help="11-character YouTube video id")

    report = commands.add_parser("report", help="Write the executive dashboard for analyzed videos")
    report.add_argument("--category", help="Only include issues of this category (exact match)")
    report.add_argument("--output", help="Write the Markdown report to this file instead of stdout")

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true", help="Restart on code changes (development)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)

    if args.command == "serve":
        uvicorn.run(
            "townhall.api:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=settings.log_level.lower(),
        )
        return 0

    if args.command == "ingest":
        coro = _ingest(args.urls)
    elif args.command == "analyze":
        coro = _analyze(args.video_id)
    else:
        coro = _report(args.category, args.output)

    try:
        asyncio.run(coro)
    except TownhallError as e:
        print(f"❌ Erreur ({e.status_code}): {e.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
