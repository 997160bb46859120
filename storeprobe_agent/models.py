from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Heuristic resemblance bands. "dawn-like" means the markup follows Dawn
# conventions, not that the theme is Dawn (forks and renames are common).
ThemeArchitecture = Literal["dawn-like", "custom", "unknown"]


class ValidateRequest(BaseModel):
    url: str = Field(..., min_length=1)
    # Unset fields fall back to the service settings.
    timeout_ms: int | None = Field(None, ge=1000, le=60000)
    # Header values go out as ASCII.
    user_agent: str | None = Field(None, min_length=1, pattern=r"^[\x20-\x7E]+$")


class DetectedFeatures(BaseModel):
    model_config = ConfigDict(frozen=True)

    section_schemas: bool = False
    json_templates: bool = False
    css_utility_patterns: bool = False
    accessibility_attributes: bool = False


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_shopify: bool
    is_online_store_2: bool = False
    theme_architecture: ThemeArchitecture = "unknown"
    app_heavy: bool = False
    detected_features: DetectedFeatures = Field(default_factory=DetectedFeatures)
    shopify_version: str | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)
