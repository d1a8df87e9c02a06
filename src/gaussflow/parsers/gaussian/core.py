from collections.abc import Sequence
from pathlib import Path

from gaussflow.exceptions import ParsingError
from gaussflow.parsers.gaussian.blocks import OrbitalSectionTracker, ScalarEnergyTracker
from gaussflow.parsers.gaussian.frequencies import evaluate_frequency_status
from gaussflow.parsers.gaussian.patterns import match_marker
from gaussflow.parsers.gaussian.typing import FileRecord, LineIterable, LineTracker, _MutableExtractionData
from gaussflow.utils import logger

# --- Tracker Registry --- #
# Every tracker sees every line, in this order, before the scan moves on.
TRACKER_REGISTRY: Sequence[LineTracker] = [
    ScalarEnergyTracker(),
    OrbitalSectionTracker(),
]


def extract(file_id: str, lines: LineIterable) -> FileRecord:
    """
    Extracts energies, frontier orbitals and the frequency status from one Gaussian output.

    The lines are scanned once from top to bottom; the frequency check re-scans
    the same buffer. Nothing in the content can make this fail: every quantity
    that is not found ends up as ``"N/A"`` in the record.

    Args:
        file_id: Identifier of the file, usually its name.
        lines: The complete, ordered lines of the file.

    Returns:
        A FileRecord with the values exactly as printed in the file.
    """
    buffer = lines if isinstance(lines, list) else list(lines)
    results = _MutableExtractionData(file_id=file_id)

    for line in buffer:
        match = match_marker(line)
        if match is not None:
            logger.debug(f"Matched {match.marker.value}: '{line.strip()}'")
        for tracker in TRACKER_REGISTRY:
            if tracker.matches(match, results):
                tracker.update(line, match, results)

    results.frequency_status = evaluate_frequency_status(buffer)

    record = FileRecord.from_mutable(results)
    logger.info(f"Gaussian extraction finished for '{file_id}'. Frequencies: {record.frequency_status.value}")
    return record


def split_lines(text: str) -> list[str]:
    """Split text on newlines only; form feeds and other Unicode line breaks stay inside the line."""
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def parse_gaussian_output(output: str, file_id: str = "") -> FileRecord:
    """
    Parses the text output of a Gaussian calculation.

    Args:
        output: The string content of the Gaussian output file.
        file_id: Identifier stored in the record.

    Returns:
        A FileRecord containing the parsed results.
    """
    return extract(file_id, split_lines(output))


def parse_gaussian_file(path: str | Path, encoding: str = "utf-8") -> FileRecord:
    """
    Reads a Gaussian output file and extracts its record. The file name is used as identifier.

    Args:
        path: Path of the ``.log``/``.out`` file.
        encoding: Text encoding of the file.

    Returns:
        A FileRecord containing the parsed results.

    Raises:
        ParsingError: If the file cannot be opened or read. Bytes that are not valid in
            `encoding` are replaced and never stop the extraction.
    """
    path = Path(path)
    try:
        with path.open("r", encoding=encoding, errors="replace") as handle:
            lines = split_lines(handle.read())
    except OSError as e:
        raise ParsingError(f"Could not read {path}: {e}") from e
    return extract(path.name, lines)
