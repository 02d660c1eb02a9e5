"""Command-line front end for the noise classifier.

``analyze`` drives the upload form for one recording: it classifies the
file, uploads it to the server and prints the resulting history entry.
``serve`` runs the API server. Run ``python -m noise_api --help`` for usage.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import List, Optional

from .core.config import settings, setup_logging
from .core.errors import FileValidationError
from .models import AudioFile, UploadedFileInfo
from .services.inference_service import InferenceService
from .services.upload_form import FileUploadForm
from .services.upload_service import UploadService
from .utils.file_handler import FileHandler
from .utils.formatting import format_file_size, format_label, format_percent, noise_level_color

ANSI_COLORS = {
    "green": "32",
    "yellow": "33",
    "orange": "38;5;208",
    "red": "31",
    "gray": "90",
}


def _colorize(text: str, label: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"\033[{ANSI_COLORS[noise_level_color(label)]}m{text}\033[0m"


def _print_entry(info: UploadedFileInfo, color: bool) -> None:
    top = info.top_prediction
    badge = f"{format_label(top.label)} ({format_percent(top.confidence)})"
    print(f"{info.name}  {_colorize(badge, top.label, color)}")
    print(f"  Uploaded on {info.upload_time}")
    print(f"  Location:  {info.location}")
    print(f"  File Size: {format_file_size(info.size)}")
    if info.classification:
        print("  Noise Analysis:")
        for result in info.classification:
            line = f"    {format_label(result.label).capitalize():<12} {format_percent(result.score):>7}"
            print(_colorize(line, result.label, color))


async def _no_upload(file: AudioFile, location: str) -> None:
    return None


def _parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="noise-classifier",
        description="Noise pollution level classification for audio recordings",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Classify and upload an MP3 recording")
    analyze.add_argument("file", help="Path to the MP3 file")
    analyze.add_argument("--location", "-l", default="", help="Where the recording was made")
    analyze.add_argument(
        "--server-url",
        default=settings.UPLOAD_SERVER_URL,
        help="Base URL of the upload server",
    )
    analyze.add_argument(
        "--no-upload",
        action="store_true",
        help="Classify only, skip the upload step",
    )
    analyze.add_argument("--no-color", action="store_true", help="Disable colored output")

    serve = subparsers.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default=settings.HOST, help="Bind address")
    serve.add_argument("--port", type=int, default=settings.PORT, help="Bind port")
    serve.add_argument("--reload", action="store_true", default=settings.RELOAD, help="Auto-reload on code changes")

    return parser.parse_args(argv)


def _run_analyze(args: argparse.Namespace) -> int:
    try:
        audio_file = FileHandler.load_audio_file(args.file)
    except FileValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2

    form = FileUploadForm(InferenceService())
    if not form.select_file(audio_file):
        print(f"Error: {form.error}", file=sys.stderr)
        return 2
    form.set_location(args.location)

    on_upload = _no_upload if args.no_upload else UploadService(server_url=args.server_url)
    info = asyncio.run(form.submit(on_upload))

    if form.error:
        print(f"Error: {form.error}", file=sys.stderr)
    if info is None:
        return 1

    _print_entry(info, color=not args.no_color and sys.stdout.isatty())
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn # type: ignore

    uvicorn.run(
        "noise_api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info"
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_arguments(argv)
    setup_logging(args.log_level)

    if args.command == "analyze":
        return _run_analyze(args)
    if args.command == "serve":
        return _run_serve(args)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
