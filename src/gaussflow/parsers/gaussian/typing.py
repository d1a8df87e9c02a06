from collections.abc import Iterable
from dataclasses import dataclass, fields
from enum import Enum
from typing import Protocol

# --- Main Data Structures --- #
LineIterable = Iterable[str]  # Type alias for line sequences

NOT_AVAILABLE = "N/A"


class FrequencyStatus(str, Enum):
    """Outcome of the vibrational frequency check for one file."""

    NOT_PRESENT = "not present"
    OK = "OK"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


class OrbitalSection(Enum):
    """Eigenvalue table currently being read. Only one can be active at a time."""

    NONE = "none"
    ALPHA_OCC = "alpha_occ"
    ALPHA_VIRT = "alpha_virt"
    BETA_OCC = "beta_occ"
    BETA_VIRT = "beta_virt"


class Marker(Enum):
    """Textual markers recognized in a Gaussian log line."""

    SCF = "scf"
    TD_ENERGY = "td_energy"
    ZPE_ENERGY = "zpe_energy"
    ENTHALPY = "enthalpy"
    FREE_ENERGY = "free_energy"
    OPT_COMPLETED = "opt_completed"
    ALPHA_OCC = "alpha_occ"
    ALPHA_VIRT = "alpha_virt"
    BETA_OCC = "beta_occ"
    BETA_VIRT = "beta_virt"


@dataclass(frozen=True)
class MarkerMatch:
    """A line matched by one marker.

    ``payload`` is the trailing part of the line starting at the trigger text.
    Field extraction always tokenizes the whole ``line``.
    """

    marker: Marker
    line: str
    payload: str


# --- Mutable Data Structure (used during the scan) --- #
@dataclass
class _MutableExtractionData:
    """Mutable per-file state shared by the trackers while a file is scanned."""

    file_id: str
    # Scalar energies, last occurrence wins
    scf: str | None = None
    td_energy: str | None = None
    zpe_energy: str | None = None
    enthalpy: str | None = None
    free_energy: str | None = None
    # Frontier orbitals
    homo_alpha: str | None = None
    lumo_alpha: str | None = None
    homo_beta: str | None = None
    lumo_beta: str | None = None
    section: OrbitalSection = OrbitalSection.NONE
    frequency_status: FrequencyStatus = FrequencyStatus.NOT_PRESENT


class LineTracker(Protocol):
    """Protocol for trackers fed with every line of a file."""

    def matches(self, match: MarkerMatch | None, data: _MutableExtractionData) -> bool:
        """Return True if this tracker has to act on the current line."""
        ...

    def update(self, line: str, match: MarkerMatch | None, data: _MutableExtractionData) -> None:
        """Update ``data`` from the current line."""
        ...


def _or_sentinel(value: str | None) -> str:
    return value if value else NOT_AVAILABLE


@dataclass(frozen=True)
class FileRecord:
    """Normalized extraction result for one Gaussian output file.

    All numeric fields hold the token exactly as printed in the log (Hartree),
    or ``"N/A"`` when the quantity was never seen.
    """

    file_id: str
    frequency_status: FrequencyStatus
    scf_energy: str = NOT_AVAILABLE
    td_energy: str = NOT_AVAILABLE
    zpe_energy: str = NOT_AVAILABLE
    enthalpy: str = NOT_AVAILABLE
    free_energy: str = NOT_AVAILABLE
    homo_alpha: str = NOT_AVAILABLE
    lumo_alpha: str = NOT_AVAILABLE
    homo_beta: str = NOT_AVAILABLE
    lumo_beta: str = NOT_AVAILABLE

    @classmethod
    def from_mutable(cls, mutable_data: _MutableExtractionData) -> "FileRecord":
        """Creates an immutable FileRecord from the scan state, filling in the sentinel."""
        return cls(
            file_id=mutable_data.file_id,
            frequency_status=mutable_data.frequency_status,
            scf_energy=_or_sentinel(mutable_data.scf),
            td_energy=_or_sentinel(mutable_data.td_energy),
            zpe_energy=_or_sentinel(mutable_data.zpe_energy),
            enthalpy=_or_sentinel(mutable_data.enthalpy),
            free_energy=_or_sentinel(mutable_data.free_energy),
            homo_alpha=_or_sentinel(mutable_data.homo_alpha),
            lumo_alpha=_or_sentinel(mutable_data.lumo_alpha),
            homo_beta=_or_sentinel(mutable_data.homo_beta),
            lumo_beta=_or_sentinel(mutable_data.lumo_beta),
        )

    @property
    def energies(self) -> tuple[str, ...]:
        """The nine numeric fields in output order."""
        return tuple(getattr(self, f.name) for f in fields(self)[2:])

    def as_row(self) -> tuple[str, ...]:
        """The 11 ordered fields of an output row."""
        return (self.file_id, self.frequency_status.value, *self.energies)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(file_id='{self.file_id}', frequencies='{self.frequency_status.value}', "
            f"scf={self.scf_energy}, td={self.td_energy}, zpe={self.zpe_energy}, "
            f"h={self.enthalpy}, g={self.free_energy}, "
            f"homo_alpha={self.homo_alpha}, lumo_alpha={self.lumo_alpha}, "
            f"homo_beta={self.homo_beta}, lumo_beta={self.lumo_beta})"
        )
