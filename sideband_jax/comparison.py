"""
Comparison of the closed-form sideband coefficients with Bessel functions.

Evaluates b0..b3 and J0..J3 over a grid of modulation indices, puts the
coefficients on the Bessel scale (J0 <-> b0, J_m <-> b_m / 2) and hands the
curves to the panel builder in `sideband_jax.viz`.
"""
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

import equinox as eqx
import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float

from sideband_jax.bessel import BesselEvaluator, ScipyBessel, reference_curves
from sideband_jax.coefficients import SidebandApproximation
from sideband_jax.constants import DEFAULT_H_RANGE, DEFAULT_SAMPLES, SUPPORTED_ORDERS
from sideband_jax.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonConfig:
    """
    Sampling configuration for the coefficient/Bessel comparison.

    Args:
        h_range: Closed interval (h_min, h_max) of modulation indices.
        samples: Number of evenly spaced grid points, both endpoints included.
        orders: Sideband orders to compare, subset of (0, 1, 2, 3).

    Raises:
        ConfigurationError: on a non-positive sample count, an empty or
            non-finite range, or unsupported orders.
    """
    h_range: Tuple[float, float] = DEFAULT_H_RANGE
    samples: int = DEFAULT_SAMPLES
    orders: Tuple[int, ...] = SUPPORTED_ORDERS

    def __post_init__(self):
        try:
            h_min, h_max = self.h_range
            h_min, h_max = float(h_min), float(h_max)
        except (TypeError, ValueError):
            raise ConfigurationError(f"h_range must be a pair (h_min, h_max), got {self.h_range!r}.") from None
        if not (math.isfinite(h_min) and math.isfinite(h_max)):
            raise ConfigurationError(f"h_range bounds must be finite, got ({h_min}, {h_max}).")
        if h_min >= h_max:
            raise ConfigurationError(f"h_range must satisfy h_min < h_max, got ({h_min}, {h_max}).")

        if isinstance(self.samples, bool) or not isinstance(self.samples, numbers.Integral):
            raise ConfigurationError(f"samples must be an integer, got {self.samples!r}.")
        if self.samples <= 0:
            raise ConfigurationError(f"samples must be positive, got {self.samples}.")

        try:
            orders = tuple(self.orders)
        except TypeError:
            raise ConfigurationError(f"orders must be a sequence of integers, got {self.orders!r}.") from None
        if not orders:
            raise ConfigurationError("At least one sideband order is required.")
        non_integer = [o for o in orders if isinstance(o, bool) or not isinstance(o, numbers.Integral)]
        if non_integer:
            raise ConfigurationError(f"Sideband orders must be integers, got {non_integer}.")
        orders = tuple(int(o) for o in orders)
        unsupported = [o for o in orders if o not in SUPPORTED_ORDERS]
        if unsupported:
            raise ConfigurationError(f"Unsupported orders {unsupported}; expected a subset of {SUPPORTED_ORDERS}.")
        if len(set(orders)) != len(orders):
            raise ConfigurationError(f"Duplicate orders in {orders}.")

        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, 'h_range', (h_min, h_max))
        object.__setattr__(self, 'samples', int(self.samples))
        object.__setattr__(self, 'orders', orders)

    @property
    def h_min(self) -> float:
        return self.h_range[0]

    @property
    def h_max(self) -> float:
        return self.h_range[1]

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> 'ComparisonConfig':
        """
        Builds a config from the host's option mapping.

        Recognised keys are 'range', 'samples' and 'orders'; missing keys take
        the defaults, unknown keys raise ConfigurationError.
        """
        known = {'range': 'h_range', 'samples': 'samples', 'orders': 'orders'}
        unknown = sorted(set(options) - set(known))
        if unknown:
            raise ConfigurationError(f"Unknown comparison options {unknown}; recognised: {sorted(known)}.")

        kwargs = {known[key]: value for key, value in options.items()}
        return cls(**kwargs)


def sample_grid(config: ComparisonConfig) -> Float[Array, "samples"]:
    """Evenly spaced h values over [h_min, h_max], endpoints included."""
    return jnp.linspace(config.h_min, config.h_max, config.samples)


def curve_label(order: int, reference: bool = False) -> str:
    """Legend label of a curve: 'J1' for the reference, 'b1/2' for the approximation."""
    if reference:
        return f"J{order}"
    return f"b{order}" if order == 0 else f"b{order}/2"


class ComparisonCurves(eqx.Module):
    """
    Result of one comparison run.

    Attributes:
        h: (N,) sample grid.
        coefficients: (n_orders, N) raw b_n(h).
        normalized: (n_orders, N) coefficients on the Bessel scale.
        references: (n_orders, N) J_n(h).
        orders: Sideband orders, one per row.
    """
    h: Float[Array, "N"]
    coefficients: Float[Array, "n_orders N"]
    normalized: Float[Array, "n_orders N"]
    references: Float[Array, "n_orders N"]
    orders: Tuple[int, ...] = eqx.field(static=True)

    def row(self, order: int) -> int:
        try:
            return self.orders.index(order)
        except ValueError:
            raise KeyError(f"Order {order} was not evaluated; available: {self.orders}") from None

    def approximation(self, order: int) -> Float[Array, "N"]:
        """Normalized approximation for one order (b0 or b_m / 2)."""
        return self.normalized[self.row(order)]

    def reference(self, order: int) -> Float[Array, "N"]:
        return self.references[self.row(order)]

    def deviation(self) -> Dict[int, float]:
        """Max |normalized b_n - J_n| over the grid, per order."""
        diff = jnp.max(jnp.abs(self.normalized - self.references), axis=-1)
        return {order: float(d) for order, d in zip(self.orders, diff)}

    def as_dict(self) -> Dict[str, List[Tuple[float, float]]]:
        """
        Plain (h, value) pairs keyed by curve label, for consumers that do not
        speak JAX arrays.
        """
        h = np.asarray(self.h).tolist()
        out = {}
        for i, order in enumerate(self.orders):
            out[curve_label(order, reference=True)] = list(zip(h, np.asarray(self.references[i]).tolist()))
            out[curve_label(order)] = list(zip(h, np.asarray(self.normalized[i]).tolist()))
        return out


def compute_curves(
    config: Optional[ComparisonConfig] = None,
    evaluator: Optional[BesselEvaluator] = None,
) -> ComparisonCurves:
    """
    Evaluates the closed-form coefficients and the Bessel reference on the
    configured grid.

    Args:
        config: Sampling configuration; defaults to ComparisonConfig().
        evaluator: Bessel backend; defaults to ScipyBessel().

    Returns:
        ComparisonCurves with every curve of length config.samples.
    """
    if config is None:
        config = ComparisonConfig()
    if evaluator is None:
        evaluator = ScipyBessel()

    h = sample_grid(config)
    logger.debug(f"Sampling h over [{config.h_min:.4f}, {config.h_max:.4f}] with {config.samples} points")

    model = SidebandApproximation(config.orders)
    coefficients = model(h)
    normalized = model(h, normalized=True)
    references = reference_curves(evaluator, config.orders, h).astype(coefficients.dtype)

    curves = ComparisonCurves(
        h=h,
        coefficients=coefficients,
        normalized=normalized,
        references=references,
        orders=config.orders,
    )
    logger.info(
        f"Compared orders {list(config.orders)} on {config.samples} points "
        f"using the '{getattr(evaluator, 'name', type(evaluator).__name__)}' Bessel evaluator"
    )
    return curves


def run_comparison(config=None, evaluator=None, style=None):
    """
    Full pipeline: curves plus the two panel descriptions.

    Returns:
        (ComparisonCurves, list of PanelSpec)
    """
    from sideband_jax.viz.panels import build_panels

    curves = compute_curves(config, evaluator)
    panels = build_panels(curves, style)
    return curves, panels
