from __future__ import annotations

from typing import Literal

# CSS viewport units accepted by pixel_conversion
PixelUnit = Literal["vw", "vmin"]

__all__ = ["PixelUnit"]
