from typing import Final, Literal

import plotly.graph_objects as go

from gaussflow.exceptions import ValidationError
from gaussflow.parsers.gaussian.typing import NOT_AVAILABLE, FileRecord
from gaussflow.utils import logger
from gaussflow.visualize.style import (
    FONT_SIZES,
    SPIN_COLORS,
    apply_development_style,
    apply_publication_style,
    get_font_dict,
)

HARTREE_TO_EV: Final[float] = 27.211386245988
LEVEL_HALF_WIDTH: Final[float] = 0.3


def _to_float(value: str) -> float | None:
    if value == NOT_AVAILABLE:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Orbital energy '{value}' is not a number, leaving it out of the plot.")
        return None


def frontier_levels(record: FileRecord) -> dict[str, tuple[float | None, float | None]]:
    """HOMO/LUMO energies (Hartree) per spin channel, with None for missing values.

    Spin channels without any value are left out.
    """
    levels = {
        "alpha": (_to_float(record.homo_alpha), _to_float(record.lumo_alpha)),
        "beta": (_to_float(record.homo_beta), _to_float(record.lumo_beta)),
    }
    return {spin: pair for spin, pair in levels.items() if pair != (None, None)}


def plot_frontier_orbitals(
    record: FileRecord, style: Literal["publication", "development"] = "publication"
) -> go.Figure:
    """
    Plots an energy-level diagram of the frontier orbitals of one record.

    Each spin channel gets a column with its HOMO and LUMO levels; when both are
    known the HOMO-LUMO gap is annotated in Hartree and eV.

    Args:
        record: The record to plot.
        style: "publication" (light) or "development" (dark theme).

    Returns:
        plotly.graph_objects.Figure: The generated Plotly figure.

    Raises:
        ValidationError: If the record has no HOMO/LUMO value at all.
    """
    levels = frontier_levels(record)
    if not levels:
        raise ValidationError(f"No frontier orbital energies to plot for '{record.file_id}'.")

    fig = go.Figure()
    for x, (spin, (homo, lumo)) in enumerate(levels.items()):
        occ_color, virt_color = SPIN_COLORS[spin]
        for label, energy, color in (("HOMO", homo, occ_color), ("LUMO", lumo, virt_color)):
            if energy is None:
                continue
            fig.add_trace(
                go.Scatter(
                    x=[x - LEVEL_HALF_WIDTH, x + LEVEL_HALF_WIDTH],
                    y=[energy, energy],
                    mode="lines",
                    line=dict(color=color, width=4),
                    name=f"{label} {spin} ({energy:.5f} Eh)",
                )
            )
        if homo is not None and lumo is not None:
            gap = lumo - homo
            fig.add_annotation(
                x=x,
                y=(homo + lumo) / 2,
                text=f"gap {gap:.5f} Eh<br>{gap * HARTREE_TO_EV:.3f} eV",
                showarrow=False,
                font=get_font_dict(FONT_SIZES["annotation"]),
            )

    fig.update_layout(title=f"Frontier orbitals: {record.file_id}", showlegend=True)
    fig.update_xaxes(
        tickmode="array",
        tickvals=list(range(len(levels))),
        ticktext=[spin.capitalize() for spin in levels],
        range=[-0.75, len(levels) - 0.25],
    )
    fig.update_yaxes(title_text="Orbital energy (Eh)")

    if style == "development":
        apply_development_style(fig)
    else:
        apply_publication_style(fig)
    return fig
