import jax
import jax.numpy as jnp
import numpy as np
import pytest
from sideband_jax import coefficients
from sideband_jax.coefficients import b0, b1, b2, b3, sideband_coefficients, SidebandApproximation

TOL = 1e-12


def test_carrier_and_second_sideband_sum_to_one(h_grid):
    assert jnp.allclose(b0(h_grid) + b2(h_grid), 1.0, atol=TOL, rtol=0)


def test_odd_sideband_difference_and_sum(h_grid):
    # b1 - b3 == sin(h), b1 + b3 == sqrt(2) sin(h / sqrt(2))
    diff = b1(h_grid) - b3(h_grid)
    total = b1(h_grid) + b3(h_grid)
    assert jnp.allclose(diff, jnp.sin(h_grid), atol=TOL, rtol=0)
    assert jnp.allclose(total, jnp.sqrt(2.0) * jnp.sin(h_grid / jnp.sqrt(2.0)), atol=TOL, rtol=0)


def test_values_at_zero_modulation():
    assert b0(0.0) == 1.0
    assert b1(0.0) == 0.0
    assert b2(0.0) == 0.0
    assert b3(0.0) == 0.0


def test_parity(h_grid):
    # b0, b2 even; b1, b3 odd
    assert jnp.allclose(b0(-h_grid), b0(h_grid), atol=TOL)
    assert jnp.allclose(b2(-h_grid), b2(h_grid), atol=TOL)
    assert jnp.allclose(b1(-h_grid), -b1(h_grid), atol=TOL)
    assert jnp.allclose(b3(-h_grid), -b3(h_grid), atol=TOL)


def test_narrowband_limit_of_first_sideband():
    h = 0.05
    # b1(h) = h - h^3 / 8 + O(h^5)
    assert abs(float(b1(h)) - h) <= h**3
    assert abs(float(b1(h)) - (h - h**3 / 8)) < 1e-8


def test_closed_forms_match_formulas():
    h = np.linspace(0.0, 4.4, 23)
    s2 = np.sqrt(2.0)
    np.testing.assert_allclose(b0(h), (1 + np.cos(h)) / 2, atol=TOL)
    np.testing.assert_allclose(b1(h), (s2 * np.sin(h / s2) + np.sin(h)) / 2, atol=TOL)
    np.testing.assert_allclose(b2(h), (1 - np.cos(h)) / 2, atol=TOL)
    np.testing.assert_allclose(b3(h), (s2 * np.sin(h / s2) - np.sin(h)) / 2, atol=TOL)


def test_sideband_coefficients_stacking(h_grid):
    stacked = sideband_coefficients(h_grid)
    assert stacked.shape == (4, h_grid.shape[0])
    assert jnp.allclose(stacked[3], b3(h_grid))

    scalar = sideband_coefficients(1.0)
    assert scalar.shape == (4,)


def test_coefficient_dispatch():
    assert jnp.allclose(coefficients.coefficient(2, 1.3), b2(1.3))
    with pytest.raises(ValueError):
        coefficients.coefficient(4, 1.0)


def test_normalize():
    values = jnp.array([0.2, 0.4])
    assert jnp.allclose(coefficients.normalize(0, values), values)
    assert jnp.allclose(coefficients.normalize(3, values), values / 2)


def test_sideband_approximation_model(h_grid):
    model = SidebandApproximation(orders=(1, 3))
    out = jax.jit(model)(h_grid)
    assert out.shape == (2, h_grid.shape[0])
    assert jnp.allclose(out[0], b1(h_grid))

    normalized = model(h_grid, normalized=True)
    assert jnp.allclose(normalized[1], b3(h_grid) / 2)

    # Scalar input keeps a leading order axis only
    assert model(0.7).shape == (2,)


def test_sideband_approximation_rejects_unknown_order():
    with pytest.raises(ValueError):
        SidebandApproximation(orders=(0, 5))


def test_model_normalization_follows_normalize(h_grid):
    model = SidebandApproximation()
    raw = model(h_grid)
    normalized = model(h_grid, normalized=True)
    for row, order in enumerate(model.orders):
        assert jnp.allclose(normalized[row], coefficients.normalize(order, raw[row]))
