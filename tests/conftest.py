"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from crosslink import DecimalValue


@pytest.fixture
def sample_value() -> DecimalValue:
    """1.25 expressed as value=125, decimal=2."""
    return DecimalValue(value=125, decimal=2)


@pytest.fixture
def sample_encoding() -> bytes:
    """Canonical encoding of DecimalValue(value=1, decimal=2)."""
    return b"\x08\x01\x10\x02"
