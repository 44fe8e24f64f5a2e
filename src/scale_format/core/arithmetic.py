# src/scale_format/core/arithmetic.py

# --- Shared Library Imports  ---
from .constants import POW10


def pow10(n: int) -> float:
    """10 raised to `n` as a float. Approximate for large exponents."""
    return 10.0**n


def int_pow10(n: int) -> int:
    """Exact integer power of ten for a non-negative exponent."""
    if n < len(POW10):
        return POW10[n]
    return 10**n


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero. Raises ZeroDivisionError when b == 0."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def scale_multiply(a: int, b: int, scale: int) -> int:
    """
    Multiplies two mantissas that share the same scale.

    Example: scale_multiply(200, 300, 2) -> 600 (2.00 * 3.00 = 6.00)
    """
    if scale > 0:
        return trunc_div(a * b, int_pow10(scale))
    return a * b


def scale_divide(a: int, b: int, scale: int) -> int:
    """
    Divides two mantissas that share the same scale.
    A zero divisor is a caller error and raises ZeroDivisionError.
    """
    if scale > 0:
        return trunc_div(a * int_pow10(scale), b)
    return trunc_div(a, b)


def build_value(result: int, scale: int) -> float:
    """Float approximation of `result / 10**scale`, for layout and plotting only."""
    if scale > 0:
        return result / int_pow10(scale)
    return float(result)


def build_result(value: float, scale: int) -> int:
    """
    Lossy inverse of build_value. May not round-trip for values that have
    no exact binary representation.
    """
    if scale > 0:
        return int(value * pow10(scale))
    return int(value)
