"""Generate meta tags from the command line against a running metagen server."""
from __future__ import annotations
import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from metagen.client.composer import Composer
from metagen.exceptions import RequestFailed
from metagen.models.request import DEFAULT_LANGUAGE, TagVariant
from metagen.utils.logging_setup import setup_logging

LOGGER = logging.getLogger("metagen.client.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Stream AI-generated HTML meta tags for a website")
    ap.add_argument("description", help="What the website is about (1-280 characters)")
    ap.add_argument("--language", default=DEFAULT_LANGUAGE, help="Website language")
    ap.add_argument("--index", action="store_true", help="Allow robots to index the website")
    ap.add_argument("--follow", action="store_true", help="Allow robots to follow links")
    ap.add_argument("--self-closing", action="store_true", help="Generate self-closing meta tags")
    ap.add_argument("--url", default=None, help="metagen server base URL")
    ap.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    ap.add_argument("--clean", action="store_true", help="Print only the final code, without fences")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log client activity to stderr")
    return ap


async def run(args: argparse.Namespace) -> int:
    fields = {
        "description": args.description,
        "language": args.language,
        "robotsIndex": args.index,
        "robotsFollow": args.follow,
        "tagVariant": (TagVariant.SELF_CLOSING if args.self_closing else TagVariant.NON_SELF_CLOSING).value,
    }

    def echo(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    async with Composer(base_url=args.url, timeout=args.timeout) as composer:
        try:
            await composer.submit(fields, on_chunk=None if args.clean else echo)
        except ValidationError as e:
            for err in e.errors():
                field = ".".join(str(part) for part in err["loc"])
                print(f"{field}: {err['msg']}", file=sys.stderr)
            return 2
        except RequestFailed as e:
            print(f"Generation failed: {e}", file=sys.stderr)
            return 1

        if args.clean:
            print(composer.buffer.as_code())
        else:
            print()
    return 0


def main() -> None:
    args = build_parser().parse_args()
    if args.verbose:
        # Keep stdout for the generated code.
        setup_logging(logging.INFO, stream=sys.stderr)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
