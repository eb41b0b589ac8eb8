import logging
from pathlib import Path
from typing import Optional, Sequence

import matplotlib
import matplotlib.pyplot as plt

from sideband_jax.viz.panels import PanelSpec, PlotStyle

logger = logging.getLogger(__name__)


def render_figure(panels: Sequence[PanelSpec], style: Optional[PlotStyle] = None):
    """
    Draws the panels side by side.

    Args:
        panels: Output of build_panels.
        style: Figure-level styling (size, grid).

    Returns:
        matplotlib.figure.Figure with one axis per panel.
    """
    if style is None:
        style = PlotStyle()
    if not panels:
        raise ValueError("Nothing to render: no panels were given.")

    fig, axes = plt.subplots(1, len(panels), figsize=style.figsize, squeeze=False)

    for ax, panel in zip(axes[0], panels):
        for s in panel.series:
            ax.plot(s.x, s.y, color=s.color, linestyle=s.linestyle, linewidth=s.linewidth, label=s.label)

        ax.set_title(panel.title)
        ax.set_xlabel(panel.xlabel)
        ax.set_ylabel(panel.ylabel)
        if panel.xlim is not None:
            ax.set_xlim(*panel.xlim)
        if panel.ylim is not None:
            ax.set_ylim(*panel.ylim)
        if panel.yticks is not None:
            ax.set_yticks(panel.yticks)
        if style.grid:
            ax.grid(True, alpha=0.3)
        ax.legend(loc=panel.legend_loc)

    fig.tight_layout()
    return fig


def save_figure(fig, path, dpi: Optional[int] = None) -> Path:
    """Writes the figure to disk, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi)
    logger.info(f"Figure saved to {path} (backend: {matplotlib.get_backend()})")
    return path
