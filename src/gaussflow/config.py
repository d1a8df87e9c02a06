import codecs
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path

from gaussflow.exceptions import ConfigurationError
from gaussflow.utils import logger

DEFAULT_EXTENSIONS: tuple[str, ...] = (".log", ".out")
RESULTS_SUFFIX = "_gaussian_results.txt"


def results_filename(stamp: date) -> str:
    """Date-stamped name of the results file, e.g. ``20250131_gaussian_results.txt``."""
    return f"{stamp.strftime('%Y%m%d')}{RESULTS_SUFFIX}"


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Settings of one batch extraction run.

    Attributes:
        directory (Path): Directory scanned for Gaussian output files (not recursive).
        extensions (tuple[str, ...]): File extensions to pick up, in the order they are processed.
            Defaults to (".log", ".out").
        output_dir (Path | None): Where the results file is written. Defaults to `directory`.
        run_date (date | None): Date used in the results file name. Defaults to today.
        encoding (str): Text encoding of the output files. Defaults to "utf-8".
    """

    directory: Path
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    output_dir: Path | None = None
    run_date: date | None = None
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """
        Validates the configuration.

        Raises:
            ConfigurationError: If `directory` does not exist or is not a directory.
            ConfigurationError: If `extensions` is empty or an extension lacks the leading dot.
            ConfigurationError: If `encoding` is not a known codec.

        Warns:
            UserWarning: If `output_dir` does not exist yet (it is created when writing).
        """
        # Normalize paths given as strings
        object.__setattr__(self, "directory", Path(self.directory))
        if self.output_dir is not None:
            object.__setattr__(self, "output_dir", Path(self.output_dir))
        object.__setattr__(self, "extensions", tuple(self.extensions))

        # Hard Errors
        if not self.directory.is_dir():
            raise ConfigurationError(f"Directory '{self.directory}' does not exist or is not a directory.")
        if not self.extensions:
            raise ConfigurationError("At least one file extension is required (e.g. '.log').")
        for ext in self.extensions:
            if not ext.startswith(".") or len(ext) < 2:
                raise ConfigurationError(f"File extension '{ext}' must start with a dot, e.g. '.log'.")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigurationError(f"Unknown encoding '{self.encoding}'.") from e

        # Soft Warnings
        if self.output_dir is not None and not self.output_dir.exists():
            logger.warning(f"Output directory '{self.output_dir}' does not exist, it will be created.")

    @property
    def output_path(self) -> Path:
        """Full path of the date-stamped results file."""
        stamp = self.run_date if self.run_date is not None else date.today()
        target_dir = self.output_dir if self.output_dir is not None else self.directory
        return target_dir / results_filename(stamp)

    # --- Fluent API methods ---

    def set_output_dir(self, output_dir: str | Path) -> "ExtractionConfig":
        """Return a new config writing the results file into `output_dir`."""
        return replace(self, output_dir=Path(output_dir))

    def set_date(self, stamp: date) -> "ExtractionConfig":
        """Return a new config using `stamp` in the results file name."""
        return replace(self, run_date=stamp)

    def set_extensions(self, *extensions: str) -> "ExtractionConfig":
        """Return a new config picking up the given file extensions."""
        logger.debug(f"Setting extensions to: {extensions}")
        return replace(self, extensions=tuple(extensions))

    def set_encoding(self, encoding: str) -> "ExtractionConfig":
        """Return a new config reading files with `encoding`."""
        return replace(self, encoding=encoding)
