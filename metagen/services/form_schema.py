"""
Form Schema for metagen

One definition of the generation form: field list, defaults, validation
limits and options. Limits come from the request model so the form and the
server can never disagree.
"""
from pathlib import Path
from typing import Optional
import yaml

from metagen.models.request import (
    DEFAULT_LANGUAGE,
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    TagVariant,
)
from metagen.models.response import FieldOption, FormField, FormSchema

LANGUAGES_PATH = Path(__file__).parent.parent / "data" / "languages.yaml"


def load_languages(path: Path = LANGUAGES_PATH) -> list[str]:
    """Load language names from the YAML data file."""
    if not path.exists():
        return [DEFAULT_LANGUAGE]

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    names = [entry["name"] for entry in data.get("languages", []) if entry.get("name")]
    return names or [DEFAULT_LANGUAGE]


def build_form_schema(languages: list[str]) -> FormSchema:
    """Build the form definition for the given language options."""
    return FormSchema(
        fields=[
            FormField(
                name="description",
                label="Describe your website (include title and description for best results)",
                kind="textarea",
                required=True,
                placeholder=(
                    "e.g. A website for a restaurant named Amore Ristorante in New York City. "
                    "The restaurant serves Italian food from 11am to 10pm every day"
                ),
                min_length=DESCRIPTION_MIN_LENGTH,
                max_length=DESCRIPTION_MAX_LENGTH,
            ),
            FormField(
                name="language",
                label="Select your website's language",
                kind="select",
                default=DEFAULT_LANGUAGE,
                placeholder="Search language...",
                options=[FieldOption(value=name, label=name) for name in languages],
            ),
            FormField(
                name="robotsIndex",
                label="Allow robots to index your website",
                kind="switch",
                default=False,
            ),
            FormField(
                name="robotsFollow",
                label="Allow robots to follow all links on your website",
                kind="switch",
                default=False,
            ),
            FormField(
                name="tagVariant",
                label="Select the type of meta tags you want to generate",
                kind="radio",
                default=TagVariant.NON_SELF_CLOSING.value,
                options=[
                    FieldOption(value=variant.value, label=variant.label, description=variant.description)
                    for variant in (TagVariant.NON_SELF_CLOSING, TagVariant.SELF_CLOSING)
                ],
            ),
        ]
    )


# Global instance
_form_schema: Optional[FormSchema] = None


def get_form_schema() -> FormSchema:
    """Get the form schema, loading languages on first use."""
    global _form_schema
    if _form_schema is None:
        _form_schema = build_form_schema(load_languages())
    return _form_schema
