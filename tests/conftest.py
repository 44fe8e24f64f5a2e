# tests/conftest.py
"""
Pytest configuration and shared fixtures.
"""

import pytest

from scale_format.core.models import QuantizationEntry, RateEntry, ValueEntry


@pytest.fixture
def value_entry():
    """A fresh, unbuilt value record."""
    return ValueEntry()


@pytest.fixture
def percent_rate():
    """Ratio -> percentage with a '+' prefix, shown at two decimals."""
    return RateEntry(rate=100.0, scale=2, sign="+")


@pytest.fixture
def compact_quantization():
    """Quantize anything above zero, shown at two decimals."""
    return QuantizationEntry(min_format_num=0, scale=2)
