# src/scale_format/core/builder.py

# --- Built Ins  ---
import re
from decimal import MAX_EMAX, MIN_EMIN, ROUND_DOWN, Context, Decimal, InvalidOperation
from typing import Any

# --- Installed  ---
from loguru import logger as log

# --- Shared Library Imports  ---
from .arithmetic import build_value
from .models import ValueEntry
from .text import build_text

DECIMAL_ZERO = Decimal(0)

# Plain or exponent notation only: no whitespace, underscores, NaN or Infinity.
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_decimal(value: Any) -> Decimal:
    """
    Parses `value` as an arbitrary-precision decimal.

    Never raises: None, malformed strings (including padded or underscored
    digits), non-finite values (NaN, Infinity) and unsupported types all
    fall back to Decimal(0).
    """
    if isinstance(value, str) and not DECIMAL_PATTERN.fullmatch(value):
        log.debug(f"Malformed decimal source {value!r}, falling back to zero")
        return DECIMAL_ZERO

    try:
        decimal = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        log.debug(f"Malformed decimal source {value!r}, falling back to zero")
        return DECIMAL_ZERO

    if not decimal.is_finite():
        log.debug(f"Non-finite decimal source {value!r}, falling back to zero")
        return DECIMAL_ZERO
    return decimal


def _truncate_to_scale(decimal: Decimal, scale: int) -> Decimal:
    """`decimal` truncated toward zero to exponent -scale, exact and without a negative zero."""
    _, digits, exponent = decimal.as_tuple()
    context = Context(
        prec=len(digits) + max(exponent + scale, 0) + 1,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
    )
    truncated = decimal.quantize(Decimal((0, (1,), -scale)), rounding=ROUND_DOWN, context=context)
    if truncated.is_zero():
        truncated = truncated.copy_abs()
    return truncated


def build_scale_value_from_source(entry: ValueEntry, scale: int) -> None:
    """
    Normalizes `entry` in place from its decimal `source` string.
    The source is truncated (rounded toward zero) to `scale` digits.
    """
    truncated = _truncate_to_scale(parse_decimal(entry.source), scale)
    entry.scale = scale
    entry.text = format(truncated, "f")
    entry.value = float(truncated)
    entry.result = int(truncated.scaleb(scale, context=Context(prec=len(truncated.as_tuple().digits) + 1)))


def build_scale_value_from_result(entry: ValueEntry, result: int, scale: int) -> None:
    """Normalizes `entry` in place from an already-scaled mantissa. The source becomes the canonical text."""
    entry.scale = scale
    entry.text = build_text(result, scale, False)
    entry.value = build_value(result, scale)
    entry.result = result
    entry.source = entry.text


def new_scale_value(result: int, scale: int) -> ValueEntry:
    entry = ValueEntry()
    build_scale_value_from_result(entry, result, scale)
    return entry


def build_scale_value(*args):
    """
    Dispatches on the positional call shape:

        build_scale_value(entry, scale)          -> None, from entry.source
        build_scale_value(entry, result, scale)  -> None, from a mantissa
        build_scale_value(result, scale)         -> new ValueEntry
    """
    if len(args) == 3:
        return build_scale_value_from_result(*args)
    if len(args) == 2:
        if isinstance(args[0], ValueEntry):
            return build_scale_value_from_source(*args)
        return new_scale_value(*args)
    raise TypeError(f"build_scale_value() takes 2 or 3 positional arguments but {len(args)} were given")
