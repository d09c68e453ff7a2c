"""
Request models for metagen
"""
from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

DESCRIPTION_MIN_LENGTH = 1
DESCRIPTION_MAX_LENGTH = 280
DEFAULT_LANGUAGE = "English"


class TagVariant(str, Enum):
    """Whether generated meta tags close themselves (``<meta ... />``)."""

    SELF_CLOSING = "selfClosing"
    NON_SELF_CLOSING = "nonSelfClosing"

    @property
    def label(self) -> str:
        return TAG_VARIANT_COPY[self][0]

    @property
    def description(self) -> str:
        return TAG_VARIANT_COPY[self][1]


TAG_VARIANT_COPY = {
    TagVariant.NON_SELF_CLOSING: (
        "Not self-closing",
        "Not self-closing tags are used to wrap content in a document.",
    ),
    TagVariant.SELF_CLOSING: (
        "Self-closing",
        "Self-closing tags are used to embed content in a document.",
    ),
}


class GenerationRequest(BaseModel):
    """Form fields for one meta tag generation. Wire names are camelCase."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    description: str = Field(
        ...,
        min_length=DESCRIPTION_MIN_LENGTH,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="What the website is about",
    )
    language: str = Field(DEFAULT_LANGUAGE, min_length=1, description="Language of the website")
    robots_index: bool = Field(False, alias="robotsIndex", description="Allow robots to index the site")
    robots_follow: bool = Field(False, alias="robotsFollow", description="Allow robots to follow links")
    tag_variant: TagVariant = Field(
        TagVariant.NON_SELF_CLOSING,
        alias="tagVariant",
        description="Self-closing or not self-closing meta tags",
    )

    def to_wire(self) -> dict:
        """JSON body as sent to POST /api/generate."""
        return self.model_dump(by_alias=True, mode="json")
