from pathlib import Path

import pytest

from gaussflow.parsers import gaussian
from gaussflow.parsers.gaussian.typing import _MutableExtractionData

ex_folder = Path(__file__).resolve().parents[2] / "data" / "gaussian"
EXAMPLE_SP_PATH = ex_folder / "h2o_sp.log"
EXAMPLE_OPT_FREQ_PATH = ex_folder / "h2o_opt_freq.log"
EXAMPLE_TS_PATH = ex_folder / "ts_freq.log"
EXAMPLE_TD_UHF_PATH = ex_folder / "ch2_td_uhf.log"
EXAMPLE_CRASHED_PATH = ex_folder / "crashed.out"


@pytest.fixture(scope="module")
def parsed_sp_data() -> gaussian.FileRecord:
    """Restricted single point, no frequencies."""
    return gaussian.parse_gaussian_file(EXAMPLE_SP_PATH)


@pytest.fixture(scope="module")
def parsed_opt_freq_data() -> gaussian.FileRecord:
    """Optimization followed by a frequency job (Link1)."""
    return gaussian.parse_gaussian_file(EXAMPLE_OPT_FREQ_PATH)


@pytest.fixture(scope="module")
def parsed_ts_data() -> gaussian.FileRecord:
    """Frequency job on a transition state, one imaginary mode."""
    return gaussian.parse_gaussian_file(EXAMPLE_TS_PATH)


@pytest.fixture(scope="module")
def parsed_td_uhf_data() -> gaussian.FileRecord:
    """Unrestricted TD-DFT on a triplet."""
    return gaussian.parse_gaussian_file(EXAMPLE_TD_UHF_PATH)


@pytest.fixture
def mutable_data() -> _MutableExtractionData:
    """Provides a fresh scan state for testing."""
    return _MutableExtractionData(file_id="test.log")
