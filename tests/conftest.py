"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

# Add policy_report/ to Python path so `from policyreport.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "policy_report"))

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def results_fixture_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "results.yaml"
