import re
from typing import Final

from gaussflow.parsers.gaussian.typing import FrequencyStatus, LineIterable
from gaussflow.utils import logger

# --- Regex Patterns ---
FREQUENCY_ROW_PAT: Final[re.Pattern[str]] = re.compile(r"\s*Frequencies\s+--")
# Gaussian prints imaginary modes as negative frequencies
NEGATIVE_VALUE_PAT: Final[re.Pattern[str]] = re.compile(r"-\d")


def evaluate_frequency_status(lines: LineIterable) -> FrequencyStatus:
    """Classify the vibrational frequencies found in a file.

    Every ``Frequencies --`` row of the file is inspected, not only the last
    frequency job.

    Args:
        lines: All lines of one output file.

    Returns:
        ``NOT_PRESENT`` if there is no frequency row, ``ERROR`` if any row holds
        a negative (imaginary) frequency, ``OK`` otherwise.
    """
    n_rows = 0
    for line in lines:
        if not FREQUENCY_ROW_PAT.search(line):
            continue
        n_rows += 1
        if NEGATIVE_VALUE_PAT.search(line):
            logger.debug(f"Imaginary frequency found in row: '{line.strip()}'")
            return FrequencyStatus.ERROR

    if n_rows == 0:
        return FrequencyStatus.NOT_PRESENT
    logger.debug(f"Checked {n_rows} frequency rows, no imaginary modes.")
    return FrequencyStatus.OK
