"""Incremental UTF-8 decoding for streamed response bodies."""
from __future__ import annotations
import codecs
import logging

from metagen.exceptions import DecodeError

logger = logging.getLogger("metagen.client.decoder")

REPLACEMENT = "\ufffd"


class StreamDecoder:
    """
    Decode a byte stream chunk by chunk.

    A multi-byte character split across two chunks is held back until its
    remaining bytes arrive. Invalid bytes become U+FFFD and are recorded in
    ``errors`` instead of raising.
    """

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
        self._offset = 0
        self.errors: list[DecodeError] = []

    def decode(self, chunk: bytes, final: bool = False) -> str:
        out = []
        data = chunk
        while True:
            try:
                out.append(self._decoder.decode(data, final))
                break
            except UnicodeDecodeError as e:
                # e.object is the held-back bytes plus this input.
                pending = len(e.object) - len(data)
                error = DecodeError(self._offset - pending + e.start, e.object[e.start:e.end])
                self.errors.append(error)
                logger.warning("Replacing malformed bytes: %s", error)

                self._decoder.reset()
                out.append(e.object[:e.start].decode("utf-8"))
                out.append(REPLACEMENT)
                self._offset += len(data) - (len(e.object) - e.end)
                data = e.object[e.end:]
        self._offset += len(data)
        return "".join(out)

    def flush(self) -> str:
        """Decode whatever is held back at end of stream."""
        return self.decode(b"", final=True)
