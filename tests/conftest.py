import shutil
from pathlib import Path

import pytest

GAUSSIAN_DATA_DIR = Path(__file__).resolve().parent / "data" / "gaussian"


@pytest.fixture(scope="session")
def gaussian_data_dir() -> Path:
    """Folder with the example Gaussian outputs."""
    return GAUSSIAN_DATA_DIR


@pytest.fixture
def calc_dir(tmp_path: Path) -> Path:
    """A scratch copy of the example outputs, safe to write results into."""
    target = tmp_path / "calcs"
    shutil.copytree(GAUSSIAN_DATA_DIR, target)
    return target
