"""metagen models."""
from metagen.models.request import GenerationRequest, TagVariant
from metagen.models.response import FieldOption, FormField, FormSchema, HealthResponse

__all__ = [
    "GenerationRequest",
    "TagVariant",
    "FieldOption",
    "FormField",
    "FormSchema",
    "HealthResponse",
]
