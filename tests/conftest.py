"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so `app` imports resolve without installing
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from app.models.hydration import HydrationProfile, IntakeReport  # noqa: E402


@pytest.fixture
def client():
    """FastAPI test client for the full application."""
    from fastapi.testclient import TestClient
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_profile():
    """Build a HydrationProfile with the form defaults for anything not given."""

    def _make(weight_kg=70, **kwargs):
        return HydrationProfile(weight_kg=weight_kg, **kwargs)

    return _make


@pytest.fixture
def make_intake():
    def _make(avg_intake_ml=2000):
        return IntakeReport(avg_intake_ml=avg_intake_ml)

    return _make
