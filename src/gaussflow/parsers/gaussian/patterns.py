"""Marker table and whitespace-token field extraction for Gaussian log lines."""

from collections.abc import Sequence
from typing import Final

from gaussflow.parsers.gaussian.typing import Marker, MarkerMatch

# --- Marker Table --- #
# Order matters: the first matching marker wins.
# Each entry is (marker, trigger substring, extra substrings that must also be present).
MARKER_TABLE: Final[Sequence[tuple[Marker, str, tuple[str, ...]]]] = (
    (Marker.SCF, "SCF Done:  E(", ("= ",)),
    (Marker.TD_ENERGY, "Total Energy, E(TD-HF/TD-DFT) =", ()),
    (Marker.ZPE_ENERGY, "Sum of electronic and zero-point Energies=", ()),
    (Marker.ENTHALPY, "Sum of electronic and thermal Enthalpies=", ()),
    (Marker.FREE_ENERGY, "Sum of electronic and thermal Free Energies=", ()),
    (Marker.OPT_COMPLETED, "Optimization completed.", ()),
    (Marker.ALPHA_OCC, "Alpha  occ. eigenvalues", ()),
    (Marker.ALPHA_VIRT, "Alpha virt. eigenvalues", ()),
    (Marker.BETA_OCC, "Beta  occ. eigenvalues", ()),
    (Marker.BETA_VIRT, "Beta virt. eigenvalues", ()),
)

SCALAR_MARKERS: Final[frozenset[Marker]] = frozenset(
    {Marker.SCF, Marker.TD_ENERGY, Marker.ZPE_ENERGY, Marker.ENTHALPY, Marker.FREE_ENERGY}
)


def match_marker(line: str) -> MarkerMatch | None:
    """Return the first marker matching ``line``, or None.

    Args:
        line: A single line of a Gaussian output file.

    Returns:
        A MarkerMatch whose payload starts at the trigger text, or None if no
        marker is present on the line.
    """
    for marker, trigger, required in MARKER_TABLE:
        start = line.find(trigger)
        if start == -1:
            continue
        if not all(extra in line for extra in required):
            continue
        return MarkerMatch(marker=marker, line=line, payload=line[start:])
    return None


def extract_value(text: str) -> str:
    """Return the first token after the first ``=`` in ``text``, verbatim.

    ``"SCF Done:  E(RB3LYP) =  -76.4089  A.U. after 9 cycles"`` gives ``"-76.4089"``.
    Only the segment up to a second ``=`` is considered. Returns an empty string
    when there is no ``=`` or nothing follows it.
    """
    segments = text.split("=")
    if len(segments) < 2:
        return ""
    tokens = segments[1].split()
    return tokens[0] if tokens else ""


def last_field(text: str) -> str:
    """Last whitespace-delimited field of ``text`` ("" for a blank line)."""
    tokens = text.split()
    return tokens[-1] if tokens else ""


def nth_field(text: str, n: int) -> str:
    """1-based whitespace-delimited field ``n`` of ``text`` ("" when absent)."""
    tokens = text.split()
    return tokens[n - 1] if 0 < n <= len(tokens) else ""
