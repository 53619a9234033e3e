from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class FormFactor(str, Enum):
    desktop = "desktop"
    laptop = "laptop"
    both = "both"


class RequestFormFactor(str, Enum):
    desktop = "desktop"
    laptop = "laptop"


class Resolution(str, Enum):
    fhd = "1080p"
    qhd = "1440p"
    uhd = "4K"


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GpuOption(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price: float = Field(..., ge=0.0, description="USD")
    perf_score: float = Field(..., gt=0.0, description="Synthetic baseline performance score")
    form_factor: FormFactor
    product_url: str


class RecommendationRequest(CamelModel):
    form_factor: RequestFormFactor
    current_gpu: str = Field(..., min_length=1, description="Free-text name of the installed GPU")
    vram_gb: float | None = Field(default=None, ge=0.0)
    budget: float = Field(..., gt=0.0, description="USD")
    cores: int | None = Field(default=None, ge=1)
    resolution: Resolution
    games: str | None = Field(
        default=None,
        description="Games played, separated by commas, semicolons or newlines",
    )

    @field_validator("vram_gb", "cores", mode="before")
    @classmethod
    def _blank_as_absent(cls, value):
        # The form posts "" for untouched number inputs; 0 cores means unknown.
        if isinstance(value, str):
            value = value.strip()
            try:
                if value == "" or float(value) == 0:
                    return None
            except ValueError:
                return value
        elif value == 0:
            return None
        return value


class AffiliateUrls(CamelModel):
    amazon: str | None = None
    newegg: str | None = None
    ebay: str | None = None
    canonical: str


class Recommendation(CamelModel):
    name: str
    price: float
    est_fps_gain_percent: int
    cost_per_fps_point: float | None
    affiliate_urls: AffiliateUrls


class RecommendationResponse(CamelModel):
    recommendation: Recommendation
