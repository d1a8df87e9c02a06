from typing import Final

from gaussflow.parsers.gaussian.patterns import last_field, nth_field
from gaussflow.parsers.gaussian.typing import Marker, MarkerMatch, OrbitalSection, _MutableExtractionData
from gaussflow.utils import logger

# The header "Alpha virt. eigenvalues --" takes up four fields, the first eigenvalue is the fifth.
FIRST_VIRTUAL_FIELD: Final[int] = 5

HEADER_SECTIONS: Final[dict[Marker, OrbitalSection]] = {
    Marker.ALPHA_OCC: OrbitalSection.ALPHA_OCC,
    Marker.ALPHA_VIRT: OrbitalSection.ALPHA_VIRT,
    Marker.BETA_OCC: OrbitalSection.BETA_OCC,
    Marker.BETA_VIRT: OrbitalSection.BETA_VIRT,
}

# Section -> attribute of the scan state it feeds
HOMO_FIELDS: Final[dict[OrbitalSection, str]] = {
    OrbitalSection.ALPHA_OCC: "homo_alpha",
    OrbitalSection.BETA_OCC: "homo_beta",
}
LUMO_FIELDS: Final[dict[OrbitalSection, str]] = {
    OrbitalSection.ALPHA_VIRT: "lumo_alpha",
    OrbitalSection.BETA_VIRT: "lumo_beta",
}


class OrbitalSectionTracker:
    """Follows the occupied/virtual eigenvalue tables and picks the frontier orbitals.

    Gaussian prints eigenvalues in ascending order, five per row:

        Alpha  occ. eigenvalues --  -19.13882  -1.01507  -0.52796  -0.38101  -0.30930
        Alpha virt. eigenvalues --    0.06431   0.15175   0.80167   0.84872   1.16309

    The HOMO is the last field of the last occupied row, so every row seen while
    an occupied table is active overwrites it. The LUMO is the fifth field of
    the first virtual header, and once set it is kept for the whole file, even
    when later optimization steps print new tables. ``Optimization completed.``
    closes the current table without clearing stored values.
    """

    def matches(self, match: MarkerMatch | None, data: _MutableExtractionData) -> bool:
        if match is not None and (match.marker in HEADER_SECTIONS or match.marker is Marker.OPT_COMPLETED):
            return True
        return data.section in HOMO_FIELDS

    def update(self, line: str, match: MarkerMatch | None, data: _MutableExtractionData) -> None:
        if match is not None and match.marker is Marker.OPT_COMPLETED:
            logger.debug("Optimization completed, closing orbital section.")
            data.section = OrbitalSection.NONE
            return

        if match is not None and match.marker in HEADER_SECTIONS:
            self._enter_section(HEADER_SECTIONS[match.marker], match.line, data)
            return

        # Continuation row of an occupied table
        if data.section in HOMO_FIELDS and line.strip():
            value = last_field(line)
            setattr(data, HOMO_FIELDS[data.section], value)

    def _enter_section(self, section: OrbitalSection, header: str, data: _MutableExtractionData) -> None:
        if data.section is not section:
            logger.debug(f"Orbital section: {data.section.value} -> {section.value}")
        data.section = section

        if section in HOMO_FIELDS:
            value = last_field(header)
            setattr(data, HOMO_FIELDS[section], value or None)
            return

        field_name = LUMO_FIELDS[section]
        if getattr(data, field_name) is not None:
            return
        value = nth_field(header, FIRST_VIRTUAL_FIELD)
        if value:
            setattr(data, field_name, value)
            logger.debug(f"Found {field_name}: {value}")
        else:
            logger.warning(f"No eigenvalue on virtual header: '{header.strip()}'")
