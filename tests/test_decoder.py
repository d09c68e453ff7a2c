from __future__ import annotations

import pytest

from metagen.client.decoder import StreamDecoder
from metagen.client.display import DisplayBuffer, strip_code_fences

TEXT = '<meta name="description" content="Crêperie à Paris, 東京の寿司 🍣 — ok" />\n' * 40


def _split(data: bytes, size: int) -> list[bytes]:
    return [data[i:i + size] for i in range(0, len(data), size)]


@pytest.mark.parametrize("size", [1, 2, 3, 5, 4096])
def test_reassembles_multibyte_characters_across_chunks(size: int) -> None:
    decoder = StreamDecoder()
    out = "".join(decoder.decode(chunk) for chunk in _split(TEXT.encode("utf-8"), size))
    out += decoder.flush()
    assert out == TEXT
    assert decoder.errors == []


def test_split_character_is_held_back() -> None:
    decoder = StreamDecoder()
    euro = "€".encode("utf-8")
    assert decoder.decode(b"price " + euro[:1]) == "price "
    assert decoder.decode(euro[1:]) == "€"


def test_invalid_byte_is_replaced_and_recorded() -> None:
    decoder = StreamDecoder()
    assert decoder.decode(b"ab\xffcd") == "ab\ufffdcd"
    assert len(decoder.errors) == 1
    assert decoder.errors[0].position == 2
    assert decoder.errors[0].invalid == b"\xff"


def test_invalid_sequence_across_boundary() -> None:
    decoder = StreamDecoder()
    assert decoder.decode(b"a\xe4") == "a"
    assert decoder.decode(b"Xb") == "\ufffdXb"
    assert decoder.errors[0].position == 1


def test_truncated_character_at_end_of_stream() -> None:
    decoder = StreamDecoder()
    assert decoder.decode("東".encode("utf-8")[:2]) == ""
    assert decoder.flush() == "\ufffd"
    assert len(decoder.errors) == 1


def test_display_buffer_refuses_stale_generation() -> None:
    buffer = DisplayBuffer()
    buffer.reset(1)
    assert buffer.append(1, "one")
    buffer.reset(2)
    assert not buffer.append(1, " late")
    assert buffer.append(2, "two")
    assert buffer.text == "two"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("```html\n<meta charset=\"utf-8\">\n```", '<meta charset="utf-8">'),
        ("```\n<title>x</title>\n```\n", "<title>x</title>"),
        ("  <meta name=\"robots\" content=\"index\">  ", '<meta name="robots" content="index">'),
    ],
)
def test_strip_code_fences(raw: str, expected: str) -> None:
    assert strip_code_fences(raw) == expected
