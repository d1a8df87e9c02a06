import pytest
from _pytest.logging import LogCaptureFixture

from gaussflow.parsers.gaussian.blocks.orbitals import OrbitalSectionTracker
from gaussflow.parsers.gaussian.patterns import match_marker
from gaussflow.parsers.gaussian.typing import OrbitalSection, _MutableExtractionData


# Helper to feed lines to the tracker the way the core loop does
def _run_orbital_tracker(lines: list[str], data: _MutableExtractionData | None = None) -> _MutableExtractionData:
    results = data if data is not None else _MutableExtractionData(file_id="test.log")
    tracker = OrbitalSectionTracker()
    for line in lines:
        match = match_marker(line)
        if tracker.matches(match, results):
            tracker.update(line, match, results)
    return results


def test_occupied_header_sets_homo_and_section() -> None:
    results = _run_orbital_tracker([" Alpha  occ. eigenvalues --  -19.13882  -1.01507  -0.52796  -0.38101  -0.30930"])
    assert results.section is OrbitalSection.ALPHA_OCC
    assert results.homo_alpha == "-0.30930"
    assert results.lumo_alpha is None


def test_homo_is_last_field_of_last_row() -> None:
    results = _run_orbital_tracker(
        [
            " Alpha  occ. eigenvalues --  -19.0  -1.0  -0.345",
            "    -0.250  -0.210",  # continuation row without header
        ]
    )
    assert results.homo_alpha == "-0.210"


def test_repeated_occupied_headers_keep_overwriting() -> None:
    results = _run_orbital_tracker(
        [
            " Alpha  occ. eigenvalues --  -19.14210  -1.00987  -0.53120  -0.37802  -0.33000",
            " Alpha  occ. eigenvalues --   -0.30600",
        ]
    )
    assert results.homo_alpha == "-0.30600"


def test_blank_lines_do_not_touch_homo() -> None:
    results = _run_orbital_tracker([" Alpha  occ. eigenvalues --  -0.345", "", "   "])
    assert results.homo_alpha == "-0.345"
    assert results.section is OrbitalSection.ALPHA_OCC


def test_unrelated_line_in_occupied_section_overwrites_homo() -> None:
    # Any non-blank line counts as a continuation while an occupied table is open
    results = _run_orbital_tracker([" Alpha  occ. eigenvalues --  -0.345", " Some unrelated text 42"])
    assert results.homo_alpha == "42"


def test_lumo_is_fifth_field_of_first_virtual_header() -> None:
    results = _run_orbital_tracker(
        [
            " Alpha  occ. eigenvalues --  -0.40000  -0.30930",
            " Alpha virt. eigenvalues --    0.050   0.15175   0.80167",
            " Alpha virt. eigenvalues --    1.17843   1.29050",
        ]
    )
    assert results.section is OrbitalSection.ALPHA_VIRT
    assert results.lumo_alpha == "0.050"
    # occupied value is untouched by virtual rows
    assert results.homo_alpha == "-0.30930"


def test_lumo_is_sticky_across_sections_and_optimization_reset() -> None:
    results = _run_orbital_tracker(
        [
            " Alpha  occ. eigenvalues --  -0.345",
            " Alpha virt. eigenvalues --    0.050   0.100",
            " Optimization completed.",
            " Alpha  occ. eigenvalues --  -0.300",
            " Alpha virt. eigenvalues --    0.060   0.110",
        ]
    )
    assert results.lumo_alpha == "0.050"
    # while the HOMO follows the last table
    assert results.homo_alpha == "-0.300"


def test_virtual_continuation_rows_are_ignored() -> None:
    results = _run_orbital_tracker(
        [
            " Alpha virt. eigenvalues --    0.050   0.100",
            "    9.999   8.888",
        ]
    )
    assert results.lumo_alpha == "0.050"
    assert results.homo_alpha is None


def test_virtual_header_without_value_leaves_lumo_unset(caplog: LogCaptureFixture) -> None:
    results = _run_orbital_tracker(
        [
            " Alpha virt. eigenvalues --",
            " Alpha virt. eigenvalues --    0.070",
        ]
    )
    # nothing stored on the empty header, so the next header provides the first value
    assert results.lumo_alpha == "0.070"
    assert "No eigenvalue on virtual header" in caplog.text


def test_optimization_completed_resets_section_only(mutable_data: _MutableExtractionData) -> None:
    results = _run_orbital_tracker(
        [
            " Alpha  occ. eigenvalues --  -0.345",
            " Optimization completed.",
            "    -0.999",  # no longer inside the occupied table
        ],
        data=mutable_data,
    )
    assert results.section is OrbitalSection.NONE
    assert results.homo_alpha == "-0.345"


def test_lines_outside_sections_are_ignored() -> None:
    results = _run_orbital_tracker(["    -0.999   -0.111", " Mulliken charges:"])
    assert results.section is OrbitalSection.NONE
    assert results.homo_alpha is None
    assert results.homo_beta is None


def test_beta_channel() -> None:
    results = _run_orbital_tracker(
        [
            " Alpha  occ. eigenvalues --  -10.16745  -0.64781  -0.24410",
            " Alpha virt. eigenvalues --   -0.02120   0.07320",
            " Beta  occ. eigenvalues --  -10.15001  -0.60113",
            "   -0.36870",
            " Beta virt. eigenvalues --   -0.08765  -0.04321",
        ]
    )
    assert results.homo_alpha == "-0.24410"
    assert results.lumo_alpha == "-0.02120"
    assert results.homo_beta == "-0.36870"
    assert results.lumo_beta == "-0.08765"
    assert results.section is OrbitalSection.BETA_VIRT


@pytest.mark.parametrize(
    "header, section",
    [
        (" Alpha  occ. eigenvalues --  -1.0", OrbitalSection.ALPHA_OCC),
        (" Alpha virt. eigenvalues --   1.0", OrbitalSection.ALPHA_VIRT),
        (" Beta  occ. eigenvalues --  -1.0", OrbitalSection.BETA_OCC),
        (" Beta virt. eigenvalues --   1.0", OrbitalSection.BETA_VIRT),
    ],
)
def test_only_one_section_active(header: str, section: OrbitalSection) -> None:
    results = _run_orbital_tracker([" Beta  occ. eigenvalues --  -2.0", header])
    assert results.section is section


def test_fields_are_counted_on_the_whole_line() -> None:
    # text before the header shifts the field positions
    results = _run_orbital_tracker(
        [
            "#1 Alpha  occ. eigenvalues --  -0.345  -0.300",
            "#1 Alpha virt. eigenvalues --    0.050   0.100",
        ]
    )
    assert results.homo_alpha == "-0.300"
    assert results.lumo_alpha == "--"
