from typing import Optional

from pydantic import BaseModel, Field


class FarmerQuestionRequest(BaseModel):
    question: str = Field(
        ...,
        min_length=1,
        description="The question asked by the farmer, typed or transcribed from voice.",
    )


class FarmerAnswer(BaseModel):
    answer: str = Field(description="The answer to the farmer's question.")


class CropAdvisoryRequest(BaseModel):
    crop_name: str = Field(..., min_length=1, description="The name of the crop.")
    nitrogen: float = Field(..., ge=0, description="Soil nitrogen in kg/ha.")
    phosphorous: float = Field(..., ge=0, description="Soil phosphorous in kg/ha.")
    potassium: float = Field(..., ge=0, description="Soil potassium in kg/ha.")
    ph: float = Field(..., ge=0, le=14, description="Soil pH.")
    rainfall: float = Field(..., ge=0, description="Annual rainfall in mm.")
    description: Optional[str] = Field(
        default=None,
        description="Free-form description of the crop, soil and conditions.",
    )


class CropAdvisorySections(BaseModel):
    """Structured answer the model fills for a crop advisory."""

    fertilizer_recommendations: str = Field(
        description="Specific fertilizer types and quantities."
    )
    soil_amendments: str = Field(
        description="Actions to balance pH or improve soil structure."
    )
    water_management: str = Field(
        description="Irrigation strategy based on the rainfall."
    )
    potential_issues: str = Field(
        description="Possible nutrient deficiencies or toxicities to watch for."
    )


class SoilAdvisoryRequest(BaseModel):
    soil_type: str = Field(
        ..., min_length=1, description="The type of soil (e.g., Alluvial, Black, Red)."
    )
    crop: str = Field(..., min_length=1, description="The primary crop being grown.")
    question: str = Field(
        ...,
        min_length=1,
        description="The farmer's question or observation about the soil.",
    )


class AdvisoryResponse(BaseModel):
    advice: str = Field(description="Advisory text formatted as markdown.")
