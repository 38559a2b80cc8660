"""Command-line reader for remote design files.

    python -m app.cli json <file_key_or_url>   save the file (with geometry) as JSON
    python -m app.cli cli  <file_key_or_url>   print the geometry paths
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from app.config import Settings
from app.figma.client import DocumentClient
from app.figma.errors import DocumentError
from app.figma.report import format_geometry
from app.figma.urls import parse_url


COMMANDS = ("json", "cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapecraft-files",
        description="Read a design file with geometry data",
        epilog="FIGMA_TOKEN must be set in the environment or .env file",
    )
    parser.add_argument("command", choices=COMMANDS, help="json: save to file, cli: print geometry")
    parser.add_argument("file", help="File key or full file URL")
    parser.add_argument("-o", "--output", help="Output path for the json command")
    return parser


async def run(command: str, file_input: str, output: str | None, settings: Settings) -> int:
    file_key = file_input
    parsed = parse_url(file_input)
    if parsed.is_valid:
        file_key = parsed.file_key
        print(f"Extracted file key from URL: {file_key}")
        if parsed.file_name:
            print(f"File name: {parsed.file_name}")

    async with DocumentClient(
        settings.figma_token,
        base_url=settings.figma_api_base,
        timeout=settings.figma_timeout,
        output_dir=settings.output_dir,
    ) as client:
        data = await client.read_file(file_key, geometry="paths")

        if command == "json":
            path = client.save_to_file(data, output)
            print(f"File with geometry data saved to: {path}")
        else:
            print(format_geometry(data))
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(
        level=getattr(logging, settings.shapecraft_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        return asyncio.run(run(args.command, args.file, args.output, settings))
    except DocumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
