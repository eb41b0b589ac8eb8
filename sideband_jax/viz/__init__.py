from .panels import PlotStyle, Series, PanelSpec, build_panels
from .figure import render_figure, save_figure

__all__ = ["PlotStyle", "Series", "PanelSpec", "build_panels", "render_figure", "save_figure"]
