"""Data models for live form input."""

from pydantic import BaseModel, ConfigDict, Field


class FieldState(BaseModel):
    """Latest reported state of one rendered field."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Field identifier from the component tree")
    value: str = Field(default="", description="Current raw value")
    is_valid: bool = Field(default=True, description="Validity as judged by the field widget")


class FieldChangeEvent(BaseModel):
    """Emitted by the renderer whenever a field's value or validity changes."""

    model_config = ConfigDict(frozen=True)

    id: str
    value: str = ""
    is_valid: bool = True
