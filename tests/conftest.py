"""Shared fixtures for the reference share containers."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def scenario_a() -> dict:
    return json.loads((FIXTURES / "scenario_a.json").read_text())


@pytest.fixture
def scenario_b() -> dict:
    return json.loads((FIXTURES / "scenario_b.json").read_text())
