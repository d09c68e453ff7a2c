"""
Response models for metagen
"""
from __future__ import annotations
from typing import Optional, Any, Literal, List
from pydantic import BaseModel, Field


class FieldOption(BaseModel):
    """One choice of a select or radio field."""

    value: str
    label: str
    description: Optional[str] = None


class FormField(BaseModel):
    """
    Describes one input of the generation form.

    Front ends render the form from a list of these instead of hard-coding it.
    """

    name: str = Field(..., description="Wire name of the field in GenerationRequest")
    label: str = Field(..., description="Human label shown next to the input")
    kind: Literal["textarea", "select", "switch", "radio"] = Field(..., description="Widget to render")
    required: bool = Field(False, description="Whether the field must be filled in")
    default: Optional[Any] = Field(None, description="Initial value")
    placeholder: Optional[str] = Field(None, description="Placeholder text")
    min_length: Optional[int] = Field(None, description="Minimum text length")
    max_length: Optional[int] = Field(None, description="Maximum text length")
    options: List[FieldOption] = Field(default_factory=list, description="Choices for select and radio")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "description",
                "label": "Describe your website",
                "kind": "textarea",
                "required": True,
                "min_length": 1,
                "max_length": 280,
            }
        }


class FormSchema(BaseModel):
    """The whole generation form, in display order."""

    fields: List[FormField]
    endpoint: str = Field("/api/generate", description="Where the form is submitted")


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    model: str
