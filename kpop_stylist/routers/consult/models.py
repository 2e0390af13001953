"""Pydantic models used by the consultation router."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ConsultRequest(BaseModel):
    """Consultation form submitted by the front-end."""

    photo: str = Field(..., min_length=1, description="Image data URI")
    height: str = Field(..., min_length=1, description="Height in centimetres")
    weight: str = Field(..., min_length=1, description="Weight in kilograms")


class ConsultResponse(BaseModel):
    """Style report plus whichever outfit images were generated."""

    model_config = ConfigDict(populate_by_name=True)

    report: str
    outfit_images: List[str] = Field(
        default_factory=list,
        alias="outfitImages",
        description="Data URIs or hosted URLs, at most three",
    )


class ErrorResponse(BaseModel):
    """Generic error payload."""

    error: str
    details: Optional[str] = None
