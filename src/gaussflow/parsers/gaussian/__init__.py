from gaussflow.parsers.gaussian.core import extract, parse_gaussian_file, parse_gaussian_output
from gaussflow.parsers.gaussian.frequencies import evaluate_frequency_status
from gaussflow.parsers.gaussian.typing import NOT_AVAILABLE, FileRecord, FrequencyStatus, OrbitalSection

__all__ = [
    "extract",
    "parse_gaussian_output",
    "parse_gaussian_file",
    "evaluate_frequency_status",
    "FileRecord",
    "FrequencyStatus",
    "OrbitalSection",
    "NOT_AVAILABLE",
]
