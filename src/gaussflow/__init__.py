from gaussflow.parsers.gaussian import FileRecord, FrequencyStatus, extract, parse_gaussian_file, parse_gaussian_output

__version__ = "0.1.0"

__all__ = [
    "extract",
    "parse_gaussian_output",
    "parse_gaussian_file",
    "FileRecord",
    "FrequencyStatus",
]
