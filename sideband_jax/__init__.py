"""
sideband-jax: closed-form PM/AM sideband amplitudes and their comparison with
Bessel functions of the first kind.

A pure-tone phase-modulated carrier exp(j h sin(theta)) has sideband
amplitudes J_n(h). Sampling the phasor at a handful of phases gives the
closed forms b0..b3, which this package evaluates with JAX and compares
against a reference Bessel evaluator.

Submodules
----------
- `coefficients`: the b0..b3 kernels and `SidebandApproximation`.
- `bessel`: pluggable `BesselEvaluator` backends (SciPy, JAX).
- `sampled`: N-point phasor sampling, narrow-band PM and AM sidebands.
- `comparison`: `ComparisonConfig`, grid sampling and `ComparisonCurves`.
- `viz`: panel descriptions and matplotlib rendering.
"""

from sideband_jax import coefficients
from sideband_jax import bessel
from sideband_jax import sampled
from sideband_jax import comparison
from sideband_jax.errors import ConfigurationError

__all__ = [
    'coefficients',
    'bessel',
    'sampled',
    'comparison',
    'ConfigurationError',
]
