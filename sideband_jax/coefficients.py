import jax
import jax.numpy as jnp
from jax import jit
from jaxtyping import Array, Float
from typing import Sequence, Union

from sideband_jax.constants import SQRT2, SUPPORTED_ORDERS


@jit
def b0(h):
    """
    Carrier coefficient of the sampled PM phasor.

    b0(h) = (1 + cos(h)) / 2

    Args:
        h: Modulation index (scalar or array, radians).

    Returns:
        Array with the same shape as h. Equals J0(h) in the comparison.
    """
    return (1.0 + jnp.cos(h)) / 2.0


@jit
def b1(h):
    """
    First sideband coefficient.

    b1(h) = (sqrt(2) * sin(h / sqrt(2)) + sin(h)) / 2

    Compared against 2 * J1(h). For small h, b1(h) ~ h.
    """
    return (SQRT2 * jnp.sin(h / SQRT2) + jnp.sin(h)) / 2.0


@jit
def b2(h):
    """
    Second sideband coefficient.

    b2(h) = (1 - cos(h)) / 2

    Compared against 2 * J2(h). b0(h) + b2(h) == 1 for every h.
    """
    return (1.0 - jnp.cos(h)) / 2.0


@jit
def b3(h):
    """
    Third sideband coefficient.

    b3(h) = (sqrt(2) * sin(h / sqrt(2)) - sin(h)) / 2

    Compared against 2 * J3(h).
    """
    return (SQRT2 * jnp.sin(h / SQRT2) - jnp.sin(h)) / 2.0


_KERNELS = {0: b0, 1: b1, 2: b2, 3: b3}


def _check_order(order):
    if order not in _KERNELS:
        raise ValueError(f"Unsupported sideband order {order}; expected one of {SUPPORTED_ORDERS}.")


def coefficient(order: int, h) -> Array:
    """Evaluates b_order(h) for order in 0..3."""
    _check_order(order)
    return _KERNELS[order](jnp.asarray(h))


@jit
def sideband_coefficients(h) -> Float[Array, "4 ..."]:
    """
    Stacks b0..b3 along a new leading axis.

    Args:
        h: Modulation index, scalar or (N,) array.

    Returns:
        (4,) for scalar h, (4, N) for an (N,) grid.
    """
    return jnp.stack([b0(h), b1(h), b2(h), b3(h)])


def normalize(order: int, values):
    """
    Maps b_order onto the Bessel scale.

    J0(h) is compared with b0(h) directly, J_m(h) with b_m(h) / 2 for m >= 1:
    b_m collects both the upper and the lower sideband of order m.
    """
    _check_order(order)
    if order == 0:
        return values
    return values / 2.0


class SidebandApproximation:
    r"""
    Closed-form PM sideband approximation for orders 0..3.

    Model object wrapping the b0..b3 kernels so the comparison driver can
    treat the approximation and the Bessel reference uniformly.

    Parameters
    ----------
    orders : sequence of int
        Sideband orders to evaluate, subset of (0, 1, 2, 3).
    """

    parameter_names = ['h']
    parameter_cardinality = {'h': 1}

    def __init__(self, orders: Sequence[int] = SUPPORTED_ORDERS):
        for order in orders:
            _check_order(order)
        self.orders = tuple(orders)

    def __call__(self, h: Union[float, Array], normalized: bool = False) -> Array:
        h = jnp.asarray(h)

        # Per-sample evaluation, vectorized over the grid
        def single(h_val):
            values = sideband_coefficients(h_val)
            return jnp.stack([values[order] for order in self.orders])

        if h.ndim == 0:
            out = single(h)
        else:
            # vmap gives (N, n_orders); transpose to (n_orders, N)
            out = jax.vmap(single)(h.reshape(-1)).T.reshape((len(self.orders),) + h.shape)

        if normalized:
            scale = jnp.array([normalize(order, 1.0) for order in self.orders], dtype=out.dtype)
            out = out * scale.reshape((-1,) + (1,) * h.ndim)
        return out
