import jax.numpy as jnp

# sqrt(2) shows up in the b1/b3 closed forms through sin(h / sqrt(2)).
SQRT2 = 1.4142135623730951

# Reference comparison grid: h in [0, 1.4*pi] with 1001 points.
DEFAULT_H_RANGE = (0.0, 1.4 * jnp.pi)
DEFAULT_SAMPLES = 1001

# Sideband orders covered by the closed-form coefficients b0..b3.
SUPPORTED_ORDERS = (0, 1, 2, 3)

# Panel layout: orders 0-1 on the left, 2-3 on the right.
PANEL_ORDERS = ((0, 1), (2, 3))
PANEL1_YTICKS = (-0.5, 0.0, 0.5, 1.0)
PANEL2_XLIM = (0.0, 4.4)
PANEL2_YLIM = (-0.04, 0.55)
