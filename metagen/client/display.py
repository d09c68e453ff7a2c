"""
Display state for streamed generations.
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import List, Literal

from metagen.exceptions import DecodeError

Status = Literal["idle", "streaming", "complete", "failed"]

_FENCE = re.compile(r"^\s*```[\w-]*[ \t]*\n?|\n?```\s*$")


def strip_code_fences(text: str) -> str:
    """Remove a Markdown code fence wrapped around the generated HTML."""
    return _FENCE.sub("", text).strip()


@dataclass
class DisplayBuffer:
    """The accumulating text shown to the user.

    Owned by one Composer. Every write names the generation that produced it;
    writes from any generation but the current one are refused.
    """
    text: str = ""
    generation: int = 0
    status: Status = "idle"
    decode_errors: List[DecodeError] = field(default_factory=list)

    def reset(self, generation: int) -> None:
        """Empty the buffer and hand it to a new generation."""
        self.text = ""
        self.generation = generation
        self.status = "streaming"
        self.decode_errors = []

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def append(self, generation: int, text: str) -> bool:
        """Append text for a generation. Returns False if the generation is stale."""
        if not self.is_current(generation):
            return False
        self.text += text
        return True

    def finish(self, generation: int, status: Status) -> None:
        if self.is_current(generation):
            self.status = status

    def clear(self, generation: int) -> None:
        """Empty the buffer without starting a stream, retiring any in flight."""
        self.generation = generation
        self.text = ""
        self.status = "idle"
        self.decode_errors = []

    def as_code(self) -> str:
        """Buffer contents ready to paste into an HTML head."""
        return strip_code_fences(self.text)
