from __future__ import annotations

import matplotlib
import pytest

from models import FactSet

# Render off-screen
matplotlib.use("Agg")


@pytest.fixture
def example_facts() -> FactSet:
    return FactSet(
        n=6,
        died_before=[(1, 2), (3, 4), (4, 6)],
        overlapped=[(2, 3), (5, 6)],
    )
