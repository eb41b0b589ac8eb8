import pytest
import jax
import jax.numpy as jnp
import matplotlib

jax.config.update("jax_enable_x64", True)
matplotlib.use("Agg")


@pytest.fixture
def h_grid():
    """Modulation indices spanning both signs and the reference range."""
    return jnp.linspace(-1.4 * jnp.pi, 1.4 * jnp.pi, 257)
