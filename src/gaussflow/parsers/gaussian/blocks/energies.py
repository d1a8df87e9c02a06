from typing import Final

from gaussflow.parsers.gaussian.patterns import SCALAR_MARKERS, extract_value
from gaussflow.parsers.gaussian.typing import Marker, MarkerMatch, _MutableExtractionData
from gaussflow.utils import logger

# Marker -> attribute of the scan state it overwrites
SCALAR_FIELDS: Final[dict[Marker, str]] = {
    Marker.SCF: "scf",
    Marker.TD_ENERGY: "td_energy",
    Marker.ZPE_ENERGY: "zpe_energy",
    Marker.ENTHALPY: "enthalpy",
    Marker.FREE_ENERGY: "free_energy",
}


class ScalarEnergyTracker:
    """Keeps the last value seen for each scalar energy (SCF, TD, E+ZPE, H, G)."""

    def matches(self, match: MarkerMatch | None, data: _MutableExtractionData) -> bool:
        return match is not None and match.marker in SCALAR_MARKERS

    def update(self, line: str, match: MarkerMatch | None, data: _MutableExtractionData) -> None:
        if match is None:
            return
        field_name = SCALAR_FIELDS[match.marker]
        value = extract_value(match.line)
        if not value:
            logger.warning(f"No value found on {match.marker.value} line: '{line.strip()}'")
        # Overwrite unconditionally, the last occurrence in the file wins
        setattr(data, field_name, value or None)
        logger.debug(f"Found {field_name}: {value}")
