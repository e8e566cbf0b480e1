"""Pydantic models and Literal choice types used to validate helper configs.

Export policy:
- Keep module imports explicit in most of the codebase:
    from utilbox.contracts.pixel_configs import PixelConversionParam
- The names re-exported here are a convenience namespace.
"""

from .choices import PixelUnit
from .pixel_configs import PixelConversionParam

__all__ = ["PixelUnit", "PixelConversionParam"]
