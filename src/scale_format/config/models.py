# src/scale_format/config/models.py

# --- Built Ins  ---
from typing import Optional

# --- Installed  ---
from pydantic import BaseModel, Field

# --- Shared Library Imports  ---
from ..core.models import QuantizationEntry, RateEntry


class FormatSettings(BaseModel):
    """
    Display settings for a single chart series (axis, tooltip or data-point labels).
    Accepts nested dicts, e.g. a parsed TOML/JSON section.
    """

    strip_trailing_zeros: bool = Field(
        default=False,
        description="Drop insignificant fractional zeros (2.4560 -> 2.456).",
    )
    rate: Optional[RateEntry] = None
    quantization: Optional[QuantizationEntry] = None
