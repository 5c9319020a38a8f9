import base64
import binascii
import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>image/[\w.+-]+);base64,(?P<data>.+)$", re.DOTALL)


def split_image_data_uri(value: str) -> tuple[str, str]:
    """Returns (mime_type, base64_payload) of an image data URI."""
    match = DATA_URI_PATTERN.match(value.strip())
    if not match:
        raise ValueError(
            "Photo must be a data URI in the form 'data:<image mimetype>;base64,<data>'."
        )
    payload = re.sub(r"\s+", "", match.group("data"))
    try:
        base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Photo data is not valid base64.") from exc
    return match.group("mime"), payload


class PlantDiagnosisRequest(BaseModel):
    photo_data_uri: str = Field(
        ...,
        description="Photo of the plant as 'data:<mimetype>;base64,<encoded_data>'.",
    )
    description: Optional[str] = Field(
        default=None,
        description="Farmer's description of the issue, may include field-wide context.",
    )

    @field_validator("photo_data_uri")
    @classmethod
    def _validate_data_uri(cls, value: str) -> str:
        split_image_data_uri(value)
        return value.strip()


class PlantDiagnosis(BaseModel):
    disease: str = Field(description="The most likely disease affecting the plant.")
    confidence: float = Field(
        ge=0, le=100, description="Confidence percentage of the diagnosis."
    )


class PlantRemediesRequest(BaseModel):
    disease: str = Field(..., min_length=1, description="The name of the plant disease.")
    description: Optional[str] = Field(
        default=None,
        description="Farmer's description of the issue, may include field-wide context.",
    )


class PlantRemedies(BaseModel):
    chemical: str = Field(
        description=(
            "Bulleted list of chemical remedies with quantities and climate conditions"
            " for application. Each bullet on a new line starting with a hyphen."
        )
    )
    organic: str = Field(
        description=(
            "Bulleted list of organic remedies with quantities and climate conditions"
            " for application. Each bullet on a new line starting with a hyphen."
        )
    )
