# src/scale_format/core/models.py

# --- Built Ins  ---
from typing import Optional

# --- Installed  ---
from pydantic import BaseModel, ConfigDict


class ValueEntry(BaseModel):
    """
    A normalized scaled value. `text` and `result` always agree with `scale`:
    the decimal value is result / 10**scale. `value` is a lossy float kept for
    layout and plotting.
    """

    source: Optional[str] = None
    scale: int = 0
    text: Optional[str] = None
    value: float = 0.0
    result: int = 0


class RateEntry(BaseModel):
    """
    A rate conversion applied before display (e.g. ratio -> percentage).
    `is_set` toggles the conversion; a rate of 0 is still an active conversion.
    """

    model_config = ConfigDict(frozen=True)

    rate: float = 0.0
    scale: int = 0
    sign: str = ""
    is_set: bool = True

    @classmethod
    def unset(cls) -> "RateEntry":
        return cls(is_set=False)


class QuantizationEntry(BaseModel):
    """Collapses large values into K/M/B/T short forms once they exceed `min_format_num`."""

    model_config = ConfigDict(frozen=True)

    min_format_num: float = 0.0
    scale: int = 0
