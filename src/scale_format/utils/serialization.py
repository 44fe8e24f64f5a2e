# src/scale_format/utils/serialization.py

# --- Built Ins  ---
from typing import Iterable

# --- Installed  ---
import orjson
from loguru import logger as log

# --- Shared Library Imports  ---
from ..core.builder import new_scale_value
from ..core.models import ValueEntry


def dump_entries(entries: Iterable[ValueEntry]) -> bytes:
    """Serializes value records into a JSON array for the rendering layer."""
    return orjson.dumps([entry.model_dump() for entry in entries])


def load_entries(payload: bytes | str) -> list[ValueEntry]:
    """
    Rebuilds value records from a payload produced by dump_entries.
    Only `result` and `scale` are trusted; `text`, `value` and `source`
    are recomputed from the mantissa.
    """
    try:
        raw_entries = orjson.loads(payload)
    except orjson.JSONDecodeError as e:
        log.error(f"Failed to decode value entry payload: {e}")
        raise
    return [new_scale_value(int(item["result"]), int(item["scale"])) for item in raw_entries]
