# tests/scale_format/utils/test_serialization.py
"""
Unit tests for value record serialization.

Tests cover:
- Payload shape
- Rebuilding records from the mantissa
- Error handling for undecodable payloads
"""

from unittest.mock import patch

import orjson
import pytest

from scale_format.core.builder import new_scale_value
from scale_format.utils.serialization import dump_entries, load_entries


class TestDumpEntries:
    """Tests for dump_entries function."""

    def test_payload_shape(self):
        # Act
        payload = dump_entries([new_scale_value(1234, 2)])

        # Assert
        assert isinstance(payload, bytes)
        decoded = orjson.loads(payload)
        assert decoded == [
            {"source": "12.34", "scale": 2, "text": "12.34", "value": 12.34, "result": 1234}
        ]

    def test_empty(self):
        assert dump_entries([]) == b"[]"


class TestLoadEntries:
    """Tests for load_entries function."""

    def test_restores_dumped_entries(self):
        entries = [new_scale_value(1234, 2), new_scale_value(-5, 3), new_scale_value(42, 0)]
        assert load_entries(dump_entries(entries)) == entries

    def test_recomputes_text_from_mantissa(self):
        payload = b'[{"result": 5, "scale": 3, "text": "bogus", "value": 99.0}]'
        entry = load_entries(payload)[0]
        assert entry.text == "0.005"
        assert entry.source == "0.005"
        assert entry.value == pytest.approx(0.005)

    def test_accepts_str_payload(self):
        assert load_entries('[{"result": 10, "scale": 1}]')[0].text == "1.0"

    def test_malformed_payload_logs_and_raises(self):
        with patch("scale_format.utils.serialization.log") as mock_log:
            with pytest.raises(orjson.JSONDecodeError):
                load_entries(b"not json")

            mock_log.error.assert_called_once()
