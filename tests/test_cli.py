from __future__ import annotations

import asyncio
import io
import logging

from metagen.client.cli import build_parser, run
from metagen.utils.logging_setup import setup_logging


def test_parser_maps_flags() -> None:
    args = build_parser().parse_args(["a bakery", "--index", "--self-closing", "--language", "French"])
    assert args.description == "a bakery"
    assert args.index is True
    assert args.follow is False
    assert args.self_closing is True
    assert args.language == "French"


def test_invalid_description_exits_2(capsys) -> None:
    args = build_parser().parse_args(["x" * 281])
    assert asyncio.run(run(args)) == 2
    assert "description" in capsys.readouterr().err


def test_verbose_logging_goes_to_given_stream() -> None:
    buf = io.StringIO()
    try:
        setup_logging(logging.INFO, stream=buf)
        logging.getLogger("metagen.client").info("hello")
    finally:
        setup_logging()
    assert "INFO metagen.client: hello" in buf.getvalue()
