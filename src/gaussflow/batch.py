"""Batch extraction over a directory of Gaussian outputs, results CSV and console report."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from gaussflow.config import ExtractionConfig
from gaussflow.exceptions import ParsingError
from gaussflow.parsers.gaussian import FileRecord, FrequencyStatus, parse_gaussian_file
from gaussflow.utils import logger

HEADER: Final[str] = (
    "File,Frequencies,E (hartree),E TD-HF/TD-DFT (hartree),E+ZPE (hartree),H (hartree),G (Hartree),"
    "HOMO alpha (hartree),LUMO alpha (hartree),HOMO beta (hartree),LUMO beta (hartree)"
)

STATUS_LINES: Final[dict[FrequencyStatus, str]] = {
    FrequencyStatus.OK: "  ✓ Frequencies: OK (all positive)",
    FrequencyStatus.ERROR: "  ✗ Frequencies: ERROR (negative frequencies found)",
    FrequencyStatus.NOT_PRESENT: "  ○ Frequencies: Not present",
}

# Summary sections, in the order they are printed
SUMMARY_SECTIONS: Final[Sequence[tuple[FrequencyStatus, str]]] = (
    (FrequencyStatus.OK, "✓ Files with OK frequencies (all positive):"),
    (FrequencyStatus.NOT_PRESENT, "○ Files without frequency calculation:"),
    (FrequencyStatus.ERROR, "✗ Files with NEGATIVE frequencies (CHECK NEEDED):"),
)


@dataclass(frozen=True)
class SkippedFile:
    """A file that could not be read, with the reason."""

    path: Path
    reason: str


@dataclass
class BatchResult:
    """Outcome of a batch run."""

    output_path: Path
    records: list[FileRecord] = field(default_factory=list)
    skipped: list[SkippedFile] = field(default_factory=list)

    @property
    def n_processed(self) -> int:
        return len(self.records) + len(self.skipped)

    def by_status(self, status: FrequencyStatus) -> list[FileRecord]:
        return [r for r in self.records if r.frequency_status is status]


# --- Discovery --- #


def discover_output_files(directory: Path, extensions: Sequence[str]) -> list[Path]:
    """List the output files of `directory`, grouped by extension in the given order, sorted by name."""
    files: list[Path] = []
    for ext in extensions:
        matches = sorted(p for p in directory.glob(f"*{ext}") if p.is_file())
        logger.debug(f"Found {len(matches)} '*{ext}' files in {directory}")
        files.extend(matches)
    return files


# --- CSV Serialization --- #


def quote_field(value: str) -> str:
    """Wrap `value` in double quotes, doubling any embedded quote."""
    escaped = value.replace('"', '""')
    return f'"{escaped}"'


def format_row(record: FileRecord) -> str:
    """One results line: quoted file identifier followed by the ten verbatim fields."""
    file_id, *rest = record.as_row()
    return ",".join([quote_field(file_id), *rest])


def write_results(records: Iterable[FileRecord], path: Path) -> Path:
    """Write the header and one row per record to `path`, replacing any previous file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(HEADER + "\n")
        for record in records:
            f.write(format_row(record) + "\n")
    logger.info(f"Results written to {path}")
    return path


# --- Console Report --- #


def format_banner(config: ExtractionConfig) -> str:
    return "\n".join(
        [
            f"Processing Gaussian files in: {config.directory.resolve()}",
            f"Output file: {config.output_path}",
            "Note: Thermochemical energies (ZPE, H, G) require frequency calculation",
            "      Other energies and orbitals are extracted regardless",
            "",
        ]
    )


def format_progress(record: FileRecord) -> str:
    return STATUS_LINES[record.frequency_status]


def format_summary(result: BatchResult) -> str:
    """Frequency summary grouped by status, then skipped files and totals."""
    lines = ["=== FREQUENCY CALCULATION SUMMARY ==="]
    for status, title in SUMMARY_SECTIONS:
        records = result.by_status(status)
        if not records:
            continue
        lines.append(title)
        lines.extend(f"   - {r.file_id}" for r in records)
        lines.append("")

    if result.skipped:
        lines.append("! Files that could not be read:")
        lines.extend(f"   - {s.path.name}: {s.reason}" for s in result.skipped)
        lines.append("")

    lines.append(f"Processing completed. Results saved to: {result.output_path}")
    lines.append(f"Total files processed: {result.n_processed}")
    return "\n".join(lines)


# --- Orchestration --- #


def run_extraction(config: ExtractionConfig, echo: Callable[[str], None] | None = None) -> BatchResult:
    """
    Extract one record per output file of the configured directory and write the results file.

    Each file gets a fresh extraction run. Files that cannot be read are logged,
    reported as skipped and do not stop the batch.

    Args:
        config: The run configuration.
        echo: Optional callable receiving console report lines (e.g. `print`).

    Returns:
        A BatchResult with the records in processing order.
    """
    say = echo if echo is not None else (lambda _msg: None)
    result = BatchResult(output_path=config.output_path)

    say(format_banner(config))
    paths = discover_output_files(config.directory, config.extensions)
    if not paths:
        logger.warning(f"No files with extensions {', '.join(config.extensions)} found in {config.directory}")

    for path in paths:
        say(f"Processing {path.name}...")
        logger.info(f"Processing {path}")
        try:
            record = parse_gaussian_file(path, encoding=config.encoding)
        except ParsingError as e:
            logger.error(f"Skipping {path.name}: {e}")
            result.skipped.append(SkippedFile(path=path, reason=str(e.__cause__ or e)))
            say("  ! Skipped: file could not be read")
            say("")
            continue
        result.records.append(record)
        say(format_progress(record))
        say("")

    write_results(result.records, result.output_path)
    say(format_summary(result))
    return result
