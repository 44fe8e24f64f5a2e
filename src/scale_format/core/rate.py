# src/scale_format/core/rate.py

# --- Built Ins  ---
from typing import Optional

# --- Shared Library Imports  ---
from .arithmetic import int_pow10, scale_divide, scale_multiply, trunc_div
from .constants import MAGNITUDES, UNITS
from .models import QuantizationEntry, RateEntry
from .text import build_text


def rate_format(
    result: int,
    scale: int,
    rate: Optional[RateEntry] = None,
    quantization: Optional[QuantizationEntry] = None,
    strip_trailing_zeros: bool = False,
) -> str:
    """
    Formats a scaled mantissa for display, optionally applying a rate
    conversion and then a K/M/B/T quantization.

    The rate is applied first so that quantization thresholds are checked
    against the converted value. Rate and quantization scales should not
    exceed `scale`, otherwise the extra digits are padded zeros.

    Examples:
        - rate_format(1234, 2)                                        -> '12.34'
        - rate_format(2_000_000, 0, None, QuantizationEntry(scale=2)) -> '2.00M'
    """
    scale_pow = int_pow10(max(scale, 0))
    value_scale = scale
    sign = ""
    unit = ""

    if rate is not None and rate.is_set:
        rate_result = int(rate.rate * scale_pow)
        result = scale_multiply(result, rate_result, scale)
        value_scale = rate.scale
        sign = rate.sign

    if quantization is not None and result > quantization.min_format_num * scale_pow:
        value_scale = quantization.scale
        for magnitude, label in zip(reversed(MAGNITUDES), reversed(UNITS)):
            threshold = magnitude * scale_pow
            if result >= threshold:
                result = scale_divide(result, threshold, scale)
                unit = label
                break

    # Align the mantissa to the display scale
    if scale > value_scale:
        result = trunc_div(result, int_pow10(scale - value_scale))
    elif scale < value_scale:
        result *= int_pow10(value_scale - scale)

    return sign + build_text(result, value_scale, strip_trailing_zeros) + unit
