"""
Shared test fixtures and configuration for pytest.
"""
import logging
import sys
from pathlib import Path
from typing import Generator

import numpy as np
import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tinygeo.geometry import Vector3d, Vector3f



@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def axes() -> tuple[Vector3f, Vector3f, Vector3f]:
    """Unit X, Y and Z axes."""
    return Vector3f(1, 0, 0), Vector3f(0, 1, 0), Vector3f(0, 0, 1)


@pytest.fixture
def random_vectors(rng: np.random.Generator) -> list[Vector3d]:
    """A handful of random 3D vectors in [-10, 10)."""
    return [Vector3d.from_iterable(row) for row in rng.uniform(-10.0, 10.0, size=(20, 3))]


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo handlers installed by setup_logging() so tests stay isolated."""
    logger = logging.getLogger("tinygeo")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(level)
