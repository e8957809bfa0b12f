"""
Input validation schemas using Pydantic for request bodies.
"""
from pydantic import BaseModel, Field, field_validator


class ClientInfoInput(BaseModel):
    """Client fields as typed into the form. Emptiness is checked at report time."""
    name: str = Field("", max_length=100)
    weight: str = Field("", max_length=20)
    week: str = Field("", max_length=10)

    @field_validator('name', 'weight', 'week', mode='before')
    @classmethod
    def coerce_to_text(cls, v):
        """Accept numbers (weight 80, week 3) and null as text."""
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator('name', 'weight', 'week')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()


class ExtractedTextInput(BaseModel):
    """Plain text already produced by the extraction service."""
    text: str = Field(..., max_length=2_000_000)
