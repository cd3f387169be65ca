"""Shared pytest fixtures for imei tests."""

from __future__ import annotations

import random

import pytest


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so sweeps are reproducible."""
    return random.Random(20240615)
