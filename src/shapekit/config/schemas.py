"""
Pydantic schemas for geometry settings.
"""

from pydantic import BaseModel, Field


class GeometrySettings(BaseModel):
    """Numeric tolerances shared by the geometry types."""
    normalized_tolerance: float = Field(
        default=2e-4,
        gt=0,
        description="Allowed |length² - 1| for a vector to count as unit length"
    )
    approx_tolerance: float = Field(
        default=1e-6,
        gt=0,
        description="Per-component tolerance for approximate direction comparison"
    )

    class Config:
        """Pydantic config."""
        extra = "forbid"  # Catch typos in YAML
        frozen = True
