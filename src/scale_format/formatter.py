# src/scale_format/formatter.py

# --- Built Ins  ---
from typing import Optional

# --- Shared Library Imports  ---
from .config.models import FormatSettings
from .core.builder import build_scale_value_from_source
from .core.models import ValueEntry
from .core.rate import rate_format


class ValueFormatter:
    """Binds a FormatSettings instance to the label-building functions."""

    def __init__(self, settings: Optional[FormatSettings] = None):
        self.settings = settings or FormatSettings()

    def format(self, result: int, scale: int) -> str:
        return rate_format(
            result,
            scale,
            rate=self.settings.rate,
            quantization=self.settings.quantization,
            strip_trailing_zeros=self.settings.strip_trailing_zeros,
        )

    def format_entry(self, entry: ValueEntry) -> str:
        return self.format(entry.result, entry.scale)

    def build(self, source: str, scale: int) -> ValueEntry:
        entry = ValueEntry(source=source)
        build_scale_value_from_source(entry, scale)
        return entry

    def format_source(self, source: str, scale: int) -> str:
        """Parses a decimal string at `scale` and formats it. Malformed input renders as zero."""
        return self.format_entry(self.build(source, scale))
