"""
Shared pytest fixtures for LollyPlot tests

Supports both development mode (python -m pytest from the repository root)
and installed mode (pip install -e .)
"""
import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# Repository root: lollyplot/tests/conftest.py -> lollyplot/tests -> lollyplot -> repo
REPO_ROOT = Path(__file__).parent.parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from lollyplot.config import PlotConfig  # noqa: E402
from lollyplot.io import GraphicReader  # noqa: E402
from lollyplot.data import EXAMPLE_TP53_GRAPHIC  # noqa: E402
from lollyplot.layout import LayoutEngine  # noqa: E402
from lollyplot.types import Motif, ProteinGraphic, Region  # noqa: E402

CHAR_WIDTH_RATIO = 0.5
"""Fake font: every character is half the font size wide"""


def fixed_width_measure(text, font_size=12.0):
    """Deterministic text measure independent of installed fonts"""
    return len(text) * font_size * CHAR_WIDTH_RATIO


@pytest.fixture
def measure():
    """Fixed-width text measure (6px per character at 12px)"""
    return fixed_width_measure


@pytest.fixture
def config():
    """Default plot configuration with a fixed 500px width"""
    config = PlotConfig()
    config.layout.graphic_width = 500.0
    return config


@pytest.fixture
def engine(config, measure):
    """Layout engine using the fixed-width measure"""
    return LayoutEngine(config, measure=measure)


@pytest.fixture
def kinase_graphic():
    """100 residue sequence with a single 'Kinase' domain at 10-30"""
    return ProteinGraphic(
        length=100,
        regions=[Region(start=10, end=30, color="#FF0000", text="Kinase")],
        identifier="TEST",
        description="Test protein",
    )


@pytest.fixture
def motif_graphic():
    """Sequence with one domain and one motif of each handled kind"""
    return ProteinGraphic(
        length=200,
        regions=[Region(start=20, end=80, color="#2dcf00", text="Pkinase",
                        description="Protein kinase domain", link="/family/PF00069")],
        motifs=[
            Motif(start=100, end=120, type="transmembrane", color="#ff0000"),
            Motif(start=150, end=190, type="disorder", color="#cccccc"),
            Motif(start=40, end=50, type="pfamb", color="#86bcff"),
        ],
        identifier="MOTIF_TEST",
        description="Motif test protein",
    )


@pytest.fixture(scope="session")
def tp53_graphic():
    """Bundled Pfam graphic for TP53"""
    return GraphicReader.from_json(EXAMPLE_TP53_GRAPHIC)


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual layout components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the full layout and render pipeline"
    )
