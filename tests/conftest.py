"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_raw() -> bytes:
    """Raw BIT value with no padding (24 bits)."""
    return bytes([0, 0b01100101, 0b11100101, 0b00000101])


@pytest.fixture
def sample_bits() -> list[bool]:
    """Caller-owned bit list matching '11001000001110101011'."""
    return [c == "1" for c in "11001000001110101011"]
