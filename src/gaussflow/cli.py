import argparse
import logging
from collections.abc import Sequence
from datetime import date, datetime
from pathlib import Path

from gaussflow.batch import run_extraction
from gaussflow.config import DEFAULT_EXTENSIONS, ExtractionConfig
from gaussflow.exceptions import ConfigurationError, ValidationError
from gaussflow.parsers.gaussian import FileRecord
from gaussflow.utils import logger, set_log_level
from gaussflow.visualize import plot_frontier_orbitals

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y%m%d").date()
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYYMMDD") from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gaussflow",
        description=(
            "Extract SCF, TD-DFT and thermochemical energies, HOMO/LUMO eigenvalues and the "
            "frequency status from all Gaussian output files of a directory into a CSV file."
        ),
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        type=Path,
        help="directory holding the Gaussian output files (default: current directory)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="directory for the results file (default: the scanned directory)",
    )
    parser.add_argument(
        "--date",
        type=_parse_date,
        default=None,
        help="date stamp of the results file name, YYYYMMDD (default: today)",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=None,
        help="file extension to process, repeatable (default: .log and .out)",
    )
    parser.add_argument("--encoding", default="utf-8", help="text encoding of the output files")
    parser.add_argument(
        "--plot-dir",
        type=Path,
        default=None,
        help="write a frontier orbital diagram (HTML) per file into this directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress (INFO)")
    parser.add_argument("--debug", action="store_true", help="log every matched line (DEBUG)")
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print the console report")
    return parser


def _write_plots(records: Sequence[FileRecord], plot_dir: Path) -> None:
    plot_dir.mkdir(parents=True, exist_ok=True)
    for record in records:
        try:
            fig = plot_frontier_orbitals(record)
        except ValidationError as e:
            logger.warning(str(e))
            continue
        target = plot_dir / f"{Path(record.file_id).stem}_orbitals.html"
        fig.write_html(target)
        logger.info(f"Orbital diagram written to {target}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug:
        set_log_level(logging.DEBUG)
    elif args.verbose:
        set_log_level(logging.INFO)

    try:
        config = ExtractionConfig(
            directory=args.directory,
            extensions=tuple(args.ext) if args.ext else DEFAULT_EXTENSIONS,
            output_dir=args.output_dir,
            run_date=args.date,
            encoding=args.encoding,
        )
    except ConfigurationError as e:
        logger.error(str(e))
        return EXIT_CONFIG_ERROR

    result = run_extraction(config, echo=None if args.quiet else print)

    if args.plot_dir is not None:
        _write_plots(result.records, args.plot_dir)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
