"""
Plain-data description of the comparison figure.

Panels are built from ComparisonCurves and a PlotStyle without touching
matplotlib, so a host document system can typeset them itself. `figure.py`
renders them with matplotlib.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from sideband_jax.comparison import ComparisonCurves, curve_label
from sideband_jax.constants import PANEL1_YTICKS, PANEL2_XLIM, PANEL2_YLIM, PANEL_ORDERS


@dataclass(frozen=True)
class PlotStyle:
    """
    Immutable styling for the comparison figure.

    Args:
        figsize: Figure size in inches (width, height).
        colors: Line color per sideband order, indexed by order.
        approximation_linestyle: Line style of the closed-form curves.
        reference_linestyle: Line style of the Bessel curves.
        linewidth: Line width shared by every curve.
        grid: Draw a background grid on each panel.
        dpi: Resolution used when saving.
        xlabel: Shared x-axis label.
        ylabel: y-axis label of each panel.
    """
    figsize: Tuple[float, float] = (10.0, 4.0)
    colors: Tuple[str, ...] = ('C0', 'C1', 'C2', 'C3')
    approximation_linestyle: str = '--'
    reference_linestyle: str = '-'
    linewidth: float = 1.5
    grid: bool = True
    dpi: int = 150
    xlabel: str = 'h (rad)'
    ylabel: str = 'Amplitude'

    def __post_init__(self):
        # Keep every field hashable so the style stays immutable
        object.__setattr__(self, 'figsize', tuple(self.figsize))
        object.__setattr__(self, 'colors', tuple(self.colors))

    def color(self, order: int) -> str:
        if 0 <= order < len(self.colors):
            return self.colors[order]
        return 'k'


@dataclass(frozen=True, eq=False)
class Series:
    """One curve: x/y samples plus how to draw it."""
    label: str
    x: np.ndarray
    y: np.ndarray
    color: str
    linestyle: str
    linewidth: float = 1.5

    def points(self) -> List[Tuple[float, float]]:
        return list(zip(self.x.tolist(), self.y.tolist()))


@dataclass(frozen=True)
class PanelSpec:
    """One subplot of the comparison figure."""
    title: str
    xlabel: str
    ylabel: str
    series: Tuple[Series, ...]
    xlim: Optional[Tuple[float, float]] = None
    ylim: Optional[Tuple[float, float]] = None
    yticks: Optional[Tuple[float, ...]] = None
    legend_loc: str = 'best'

    @property
    def labels(self) -> List[str]:
        return [s.label for s in self.series]


# Axis settings per panel, keyed by its orders.
_PANEL_AXES = {
    (0, 1): dict(yticks=PANEL1_YTICKS),
    (2, 3): dict(xlim=PANEL2_XLIM, ylim=PANEL2_YLIM),
}


def _panel_title(orders):
    return "Orders " + ", ".join(str(o) for o in orders)


def build_panels(curves: ComparisonCurves, style: Optional[PlotStyle] = None) -> List[PanelSpec]:
    """
    Groups the curves into the two comparison panels.

    Panel 1 holds {J0, b0, J1, b1/2} with y-ticks at -0.5, 0, 0.5, 1.
    Panel 2 holds {J2, b2/2, J3, b3/2} with x in [0, 4.4] and y in
    [-0.04, 0.55]. Orders that were not evaluated are left out and a panel
    with no curves is dropped.

    Args:
        curves: Output of compute_curves.
        style: Plot styling; defaults to PlotStyle().

    Returns:
        List of PanelSpec, at most two.
    """
    if style is None:
        style = PlotStyle()

    h = np.asarray(curves.h)
    panels = []
    for panel_orders in PANEL_ORDERS:
        series = []
        for order in panel_orders:
            if order not in curves.orders:
                continue
            color = style.color(order)
            series.append(Series(
                label=curve_label(order, reference=True),
                x=h,
                y=np.asarray(curves.reference(order)),
                color=color,
                linestyle=style.reference_linestyle,
                linewidth=style.linewidth,
            ))
            series.append(Series(
                label=curve_label(order),
                x=h,
                y=np.asarray(curves.approximation(order)),
                color=color,
                linestyle=style.approximation_linestyle,
                linewidth=style.linewidth,
            ))
        if not series:
            continue

        panels.append(PanelSpec(
            title=_panel_title(panel_orders),
            xlabel=style.xlabel,
            ylabel=style.ylabel,
            series=tuple(series),
            **_PANEL_AXES[panel_orders],
        ))
    return panels
