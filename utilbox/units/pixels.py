"""Pixel to viewport-unit conversion for responsive layouts."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Callable, Optional

from utilbox.contracts.pixel_configs import PixelConversionParam


def format_number(value: float) -> str:
    """Format like JavaScript's ``Number#toString``.

    Uses the shortest round-trip digits. Magnitudes from ``1e-6`` up to, but
    not including, ``1e21`` print in plain notation; others use ``1e+21`` /
    ``1e-7`` style exponents.

    >>> format_number(20.0), format_number(26.666666666666668)
    ('20', '26.666666666666668')
    >>> format_number(1e-7), format_number(1e21), format_number(1e20)
    ('1e-7', '1e+21', '100000000000000000000')
    """

    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr gives the shortest digits that round-trip
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    n = k + exponent  # position of the decimal point relative to the digits

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        body = f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
    return sign + body


def pixel_conversion(param: Optional[PixelConversionParam] = None, **kwargs: Any) -> Callable[[float], str]:
    """Build a converter from design pixels to a viewport unit string.

    The config is taken from ``param`` or from keyword arguments
    (``base_size``/``baseSize``, ``max_size``/``maxSize``, ``unit``).

    >>> to_vmin = pixel_conversion()
    >>> to_vmin(75)
    '20vmin'
    >>> pixel_conversion(baseSize=750, unit="vw")(75)
    '10vw'
    """

    cfg = param if param is not None else PixelConversionParam(**kwargs)
    reference = cfg.reference_size
    unit = cfg.unit

    def convert(pixel: float) -> str:
        return format_number(pixel / reference * 100) + unit

    return convert
