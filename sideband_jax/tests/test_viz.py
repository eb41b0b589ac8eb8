import matplotlib.pyplot as plt
import numpy as np
import pytest
from sideband_jax.comparison import ComparisonConfig, compute_curves
from sideband_jax.viz import PlotStyle, build_panels, render_figure, save_figure


@pytest.fixture
def curves():
    return compute_curves(ComparisonConfig(samples=201))


def test_two_panels_with_expected_curves(curves):
    panels = build_panels(curves)
    assert len(panels) == 2
    assert panels[0].labels == ["J0", "b0", "J1", "b1/2"]
    assert panels[1].labels == ["J2", "b2/2", "J3", "b3/2"]


def test_panel_axes(curves):
    first, second = build_panels(curves)
    assert first.yticks == (-0.5, 0.0, 0.5, 1.0)
    assert first.xlim is None
    assert second.xlim == (0.0, 4.4)
    assert second.ylim == (-0.04, 0.55)


def test_series_share_x_domain(curves):
    panels = build_panels(curves)
    h = np.asarray(curves.h)
    for panel in panels:
        for s in panel.series:
            np.testing.assert_array_equal(s.x, h)
            assert s.y.shape == h.shape


def test_series_values_follow_normalization(curves):
    second = build_panels(curves)[1]
    b2_half = second.series[1]
    np.testing.assert_allclose(b2_half.y, np.asarray(curves.coefficients[2]) / 2)
    assert b2_half.points()[0] == (0.0, 0.0)


def test_style_is_applied(curves):
    style = PlotStyle(colors=("k", "r", "g", "b"), approximation_linestyle=":")
    first = build_panels(curves, style)[0]
    j1, b1_half = first.series[2], first.series[3]
    assert j1.color == b1_half.color == "r"
    assert j1.linestyle == "-"
    assert b1_half.linestyle == ":"


def test_style_is_immutable():
    style = PlotStyle()
    with pytest.raises(AttributeError):
        style.dpi = 300
    with pytest.raises(TypeError):
        style.colors[0] = "m"
    assert hash(style) == hash(PlotStyle())


def test_style_accepts_lists():
    style = PlotStyle(figsize=[6.0, 2.0], colors=["r", "g"])
    assert style.figsize == (6.0, 2.0)
    assert style.color(1) == "g"
    # Orders without a color fall back to black
    assert style.color(3) == "k"


def test_empty_panel_is_dropped():
    curves = compute_curves(ComparisonConfig(samples=11, orders=(2, 3)))
    panels = build_panels(curves)
    assert len(panels) == 1
    assert panels[0].xlim == (0.0, 4.4)


def test_render_and_save(curves, tmp_path):
    panels = build_panels(curves)
    fig = render_figure(panels)
    axes = fig.get_axes()
    assert len(axes) == 2
    assert len(axes[0].get_lines()) == 4
    assert list(axes[0].get_yticks()) == [-0.5, 0.0, 0.5, 1.0]
    assert axes[1].get_xlim() == pytest.approx((0.0, 4.4))
    assert axes[1].get_ylim() == pytest.approx((-0.04, 0.55))

    path = save_figure(fig, tmp_path / "figures" / "sidebands.png", dpi=50)
    assert path.exists()
    plt.close(fig)


def test_render_requires_panels():
    with pytest.raises(ValueError):
        render_figure([])
