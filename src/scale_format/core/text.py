# src/scale_format/core/text.py

# --- Shared Library Imports  ---
from .constants import ZEROS


def build_text(result: int, scale: int, strip_trailing_zeros: bool = False) -> str:
    """
    Formats the mantissa `result` with `scale` fractional digits.
    Pure string manipulation, no float formatting involved.

    Examples:
        - build_text(1234, 2)       -> '12.34'
        - build_text(1234, 6)       -> '0.001234'
        - build_text(-1234, 2)      -> '-12.34'
        - build_text(1200, 2, True) -> '12'
    """
    if scale <= 0:
        return str(result)

    sign = "-" if result < 0 else ""
    digits = str(abs(result))
    length = len(digits)

    if scale < length:
        body = f"{digits[: length - scale]}.{digits[length - scale :]}"
    else:
        zero_count = scale - length
        body = ZEROS[min(zero_count, len(ZEROS) - 1)] + digits

    if strip_trailing_zeros:
        body = body.rstrip("0")
        if body.endswith("."):
            body = body[:-1]

    return sign + body
