"""Shared pytest fixtures for pricemap tests."""

from pathlib import Path

import pytest

# ============================================================================
# Diagram Fixtures
# ============================================================================

# Stage bottom edge centered at (50, 20); seats listed far, near, middle.
RANKING_SVG = """<svg width="200" height="200" viewBox="0 0 200 200" xmlns="http://www.w3.org/2000/svg">
<rect x="0" y="0" width="100" height="20" fill="#DCDFE2"/>
<rect x="82" y="92" width="16" height="16" rx="6" fill="#CACED2"/>
<rect x="42" y="32" width="16" height="16" rx="6" fill="#CACED2"/>
<rect x="42" y="62" width="16" height="16" rx="6" fill="#CACED2"/>
</svg>"""

LEGACY_SVG = """<svg width="800" height="600" viewBox="0 0 800 600" xmlns="http://www.w3.org/2000/svg">
<path d="M10 5H700V40H10Z" fill="#DCDFE2"/>
<path d="M300.5 80H500V120H300.5Z" fill="#DCDFE2"/>
<path d="M100 200C101 201 102 202 103 203" fill="#CACED2"/>
<path fill="#CACED2"/>
<path d="M120.5 200H128V208H120.5Z" fill="#CACED2"/>
<path d="M140 240H148V248H140Z" fill="#FFFFFF"/>
</svg>"""

NO_STAGE_SVG = """<svg width="500" height="300" xmlns="http://www.w3.org/2000/svg">
<rect x="10" y="100" width="16" height="16" fill="#CACED2"/>
<rect x="40" y="100" width="16" height="16" fill="#CACED2"/>
</svg>"""


@pytest.fixture
def ranking_svg() -> str:
    """Compact diagram with a stage rect and three seats."""
    return RANKING_SVG


@pytest.fixture
def legacy_svg() -> str:
    """Legacy path diagram with two stage paths."""
    return LEGACY_SVG


@pytest.fixture
def no_stage_svg() -> str:
    """Compact diagram without a stage and without a viewBox."""
    return NO_STAGE_SVG


@pytest.fixture
def hall_file(tmp_path: Path) -> Path:
    """Diagram written to disk, without a viewBox."""
    path = tmp_path / "hall.svg"
    path.write_text(NO_STAGE_SVG, encoding="utf-8")
    return path


# ============================================================================
# Price Fixtures
# ============================================================================


@pytest.fixture
def default_prices() -> list[float]:
    """A typical concert price list."""
    return [300, 500, 800, 1200, 1800, 2500, 3500, 5000, 7000, 10000, 15000, 20000]
