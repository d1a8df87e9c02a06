"""
Plotting style definitions for orbital level diagrams.
"""

from typing import Any

import plotly.graph_objects as go

# -----------------------------------------------------------------------------
# Style parameters
# -----------------------------------------------------------------------------

FONT_FAMILY = "Helvetica"
FONT_COLOR = "#333333"

FONT_SIZES: dict[str, int] = {
    "title": 20,
    "axis_title": 16,
    "tick_label": 14,
    "annotation": 12,
    "legend": 12,
}

# Level colors per spin channel: (occupied, virtual)
SPIN_COLORS: dict[str, tuple[str, str]] = {
    "alpha": ("#1f4e9c", "#7fa7e8"),
    "beta": ("#b3261e", "#f08a7e"),
}

AXIS_STYLE: dict[str, Any] = {
    "showgrid": True,
    "gridwidth": 1,
    "gridcolor": "#E7E7E7",
    "zeroline": False,
    "linewidth": 2,
    "linecolor": "#333333",
}

LAYOUT_STYLE: dict[str, Any] = {
    "plot_bgcolor": "#FBFCFF",
    "paper_bgcolor": "#FBFCFF",
    "margin": dict(t=60, b=40, r=40),
}

# Dark theme for quick looks during development
DEVELOPMENT_STYLE: dict[str, Any] = {
    "template": "plotly_dark",
    "plot_bgcolor": "black",
    "paper_bgcolor": "black",
    "font": dict(color="white"),
}


def get_font_dict(size: int, bold: bool = False) -> dict[str, Any]:
    """Font dictionary with the shared family and color."""
    return dict(
        family=FONT_FAMILY,
        size=size,
        color=FONT_COLOR,
        weight="bold" if bold else None,
    )


def apply_publication_style(fig: go.Figure, **kwargs: Any) -> None:
    """Apply publication-quality fonts, axes and background to a figure.

    Args:
        fig: A plotly figure
        **kwargs: Additional layout parameters to override defaults
    """
    fig.update_layout(font=get_font_dict(FONT_SIZES["tick_label"]))
    if fig.layout.title is not None:
        fig.layout.title.update(font=get_font_dict(FONT_SIZES["title"], bold=True))

    fig.update_xaxes(
        AXIS_STYLE,
        title_font=get_font_dict(FONT_SIZES["axis_title"], bold=True),
        tickfont=get_font_dict(FONT_SIZES["tick_label"]),
    )
    fig.update_yaxes(
        AXIS_STYLE,
        title_font=get_font_dict(FONT_SIZES["axis_title"], bold=True),
        tickfont=get_font_dict(FONT_SIZES["tick_label"]),
    )

    layout_style: dict[str, Any] = LAYOUT_STYLE.copy()
    layout_style.update(kwargs)
    fig.update_layout(layout_style, legend=dict(font=get_font_dict(FONT_SIZES["legend"])))


def apply_development_style(fig: go.Figure) -> None:
    """Apply the dark development theme to a figure."""
    fig.update_layout(**DEVELOPMENT_STYLE)
