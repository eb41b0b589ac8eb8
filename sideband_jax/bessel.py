"""
Reference Bessel evaluators.

The comparison driver only needs J_n(x) for small integer orders. Any object
implementing the `BesselEvaluator` protocol can be passed in; two backends are
provided:

- `ScipyBessel`: `scipy.special.jv`, accurate over the whole real line.
- `JaxBessel`: `jax.scipy.special.bessel_jn`, which runs a backward recurrence
  and only accepts positive arguments, so reflection and the x = 0 limit are
  handled here.
"""
import logging
from typing import Protocol, runtime_checkable

import jax.numpy as jnp
import numpy as np
import scipy.special as ssp
from jax.scipy import special as jsp
from jaxtyping import Array, Float

from sideband_jax.errors import ConfigurationError

logger = logging.getLogger(__name__)


@runtime_checkable
class BesselEvaluator(Protocol):
    """Evaluates the Bessel function of the first kind J_order(x)."""

    name: str

    def __call__(self, order: int, x) -> Array: ...


def _check_order(order):
    if int(order) != order or order < 0:
        raise ValueError(f"Bessel order must be a non-negative integer, got {order}.")


class ScipyBessel:
    """J_n(x) via scipy.special.jv, returned as a JAX array."""

    name = 'scipy'

    def __call__(self, order: int, x) -> Float[Array, "..."]:
        _check_order(order)
        x_np = np.asarray(x, dtype=np.float64)
        return jnp.asarray(ssp.jv(int(order), x_np))


class JaxBessel:
    """
    J_n(x) via jax.scipy.special.bessel_jn.

    bessel_jn returns all orders 0..v stacked along the first axis and is
    undefined at z <= 0. Negative arguments use J_n(-x) = (-1)^n J_n(x);
    x = 0 is replaced by its exact value (1 for n = 0, else 0).

    Args:
        n_iter: Number of backward-recurrence steps passed to bessel_jn.
        zero_tol: |x| below this is treated as x = 0.
    """

    name = 'jax'

    def __init__(self, n_iter: int = 50, zero_tol: float = 1e-12):
        self.n_iter = n_iter
        self.zero_tol = zero_tol

    def __call__(self, order: int, x) -> Float[Array, "..."]:
        _check_order(order)
        order = int(order)
        x = jnp.asarray(x)
        if not jnp.issubdtype(x.dtype, jnp.floating):
            x = x.astype(jnp.result_type(float))
        return self._evaluate(order, x)

    def _evaluate(self, order, x):
        abs_x = jnp.abs(x)
        is_zero = abs_x < self.zero_tol
        # Keep the recurrence away from z = 0
        safe_z = jnp.where(is_zero, 1.0, abs_x)

        values = jsp.bessel_jn(safe_z, v=order, n_iter=self.n_iter)[order]

        sign = jnp.where((x < 0) & (order % 2 == 1), -1.0, 1.0)
        at_zero = 1.0 if order == 0 else 0.0
        return jnp.where(is_zero, at_zero, sign * values)


_EVALUATORS = {
    'scipy': ScipyBessel,
    'jax': JaxBessel,
}


def get_evaluator(name: str) -> BesselEvaluator:
    """Builds a registered Bessel backend by name ('scipy' or 'jax')."""
    try:
        evaluator = _EVALUATORS[name]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown Bessel evaluator '{name}'. Available: {sorted(_EVALUATORS)}"
        ) from None
    logger.debug(f"Using Bessel evaluator '{name}'")
    return evaluator


def reference_curves(evaluator: BesselEvaluator, orders, h) -> Float[Array, "n_orders ..."]:
    """Stacks J_n(h) for every order along a new leading axis."""
    return jnp.stack([jnp.asarray(evaluator(order, h)) for order in orders])
