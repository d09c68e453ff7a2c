"""
Prompt construction for metagen

Turns a GenerationRequest into the user instruction and the fixed-shape
chat completion payload sent upstream.
"""
from __future__ import annotations
from typing import Any, Dict

from metagen.models.request import GenerationRequest, TagVariant
from metagen.services.system_prompt import SYSTEM_PROMPT

# Sampling parameters are part of the contract, not configuration.
TEMPERATURE = 0.7
TOP_P = 1
FREQUENCY_PENALTY = 0
PRESENCE_PENALTY = 0
MAX_TOKENS = 200
CANDIDATES = 1

TAG_VARIANT_INSTRUCTIONS = {
    TagVariant.SELF_CLOSING: "Write every meta tag as a self-closing tag, for example <meta ... />.",
    TagVariant.NON_SELF_CLOSING: "Write every meta tag without a self-closing slash, for example <meta ...>.",
}


def _flag(value: bool) -> str:
    return "true" if value else "false"


def build_prompt(request: GenerationRequest) -> str:
    """Build the user instruction. Field values are embedded verbatim."""
    parts = [
        f"My company is a {request.description} and I want to rank on Google.",
        "I want to use the following meta tags for my website.",
        f"I want to use the following language: {request.language}.",
        "I want to use the following robots.txt settings: "
        f"index: {_flag(request.robots_index)}, follow: {_flag(request.robots_follow)}.",
        TAG_VARIANT_INSTRUCTIONS[request.tag_variant],
    ]
    return " ".join(parts)


def build_payload(prompt: str, model: str) -> Dict[str, Any]:
    """Build the streaming chat completion payload for a prompt."""
    return {
        "model": model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ],
        "temperature": TEMPERATURE,
        "top_p": TOP_P,
        "frequency_penalty": FREQUENCY_PENALTY,
        "presence_penalty": PRESENCE_PENALTY,
        "max_tokens": MAX_TOKENS,
        "n": CANDIDATES,
        "stream": True,
    }
