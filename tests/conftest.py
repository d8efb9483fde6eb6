"""
Test fixtures for wod-syntax-api.

Provides a FastAPI test client and sample WOD texts shared across the
parser, service and endpoint tests.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import wod_syntax_api...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from wod_syntax_api.main import app


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def api_client() -> TestClient:
    """Shared FastAPI TestClient for wod-syntax-api."""
    return TestClient(app)


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient (for tests needing fresh state)."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample WOD Texts
# ---------------------------------------------------------------------------


@pytest.fixture
def simple_wod_text() -> str:
    """One strength block with a ladder and straight sets."""
    return (
        "# Strength\n"
        "Back Squat: 5-5-5-5-5\n"
        "Bench Press: 3x8\n"
    )


@pytest.fixture
def multi_block_wod_text() -> str:
    """Strength, accessory and conditioning blocks."""
    return (
        "# Block 1: Strength\n"
        "[Back Squat]: 5-5-5-5-5\n"
        "\n"
        "# Block 2: Accessory\n"
        "[Dumbbell Row]: 3x12\n"
        "Face Pulls: 3x15-20\n"
        "\n"
        "# Block 3: Conditioning\n"
        "AMRAP 12min:\n"
        "  10 [Box Jumps]\n"
        "  15 Push-ups\n"
        "  Plank Hold\n"
    )


@pytest.fixture
def for_time_wod_text() -> str:
    """Classic couplet with a rep ladder in the header."""
    return (
        "# WOD\n"
        "21-15-9 For Time:\n"
        "  [Thrusters]\n"
        "  [Pull-ups]\n"
    )
