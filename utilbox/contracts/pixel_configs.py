from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat

from .choices import PixelUnit


class PixelConversionParam(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # Width of the design draft the pixel values were measured on
    base_size: PositiveFloat = Field(375, alias="baseSize")
    # Upper bound for the reference width
    max_size: PositiveFloat = Field(750, alias="maxSize")
    unit: PixelUnit = "vmin"

    @property
    def reference_size(self) -> float:
        return min(self.base_size, self.max_size)
