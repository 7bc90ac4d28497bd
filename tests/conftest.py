"""
conftest.py — Shared pytest fixtures for the hivmap test suite

Provides fresh color registries, recording surfaces and sample region
files used across all test modules.
"""

import pytest

from hivmap.colors import ColorRegistry
from hivmap.default import DEFAULT_CONFIG
from hivmap.parser import parse_regions
from hivmap.plot.surface import RecordingSurface


# ---------------------------------------------------------------------------
# Sample input texts
# ---------------------------------------------------------------------------

SIMPLE_TEXT = """>seq1
100 500 B
500 1000 A1
"""

MIXED_TEXT = """# recombinant sample
ignored before header
>CRF_sample
100\t900\tB
# inline comment
2400 1200 C
3000 5000 CRF 01_AE
6000 7000 B
"""


@pytest.fixture
def registry() -> ColorRegistry:
    """Fresh color registry."""
    return ColorRegistry()


@pytest.fixture
def simple_text() -> str:
    return SIMPLE_TEXT


@pytest.fixture
def mixed_text() -> str:
    return MIXED_TEXT


@pytest.fixture
def simple_regions(registry):
    """Two regions: B over 100..500 and A1 over 500..1000."""
    return parse_regions(SIMPLE_TEXT, registry)


@pytest.fixture
def surface() -> RecordingSurface:
    """Recording surface sized to the default canvas."""
    return RecordingSurface(DEFAULT_CONFIG.width, DEFAULT_CONFIG.height)


@pytest.fixture
def write_input(tmp_path):
    """Factory fixture writing text to an input file under tmp_path."""
    def _write(text: str, name: str = "regions.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
