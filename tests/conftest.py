import sys
from pathlib import Path

import numpy as np
import pytest

# Ensure the flat layout is importable without installing
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
