"""
Phasor-sampling view of the sideband coefficients.

A pure-tone PM signal has phasor exp(j h sin(theta)). Sampling it at N equally
spaced phases and taking the finite Fourier coefficients gives approximate
sideband amplitudes; the closed forms b0..b3 are the N = 4 and N = 8 cases.
The amplitudes converge to J_n(h) as N grows, the error being the aliased
orders J_{N-n}(h), J_{N+n}(h), ...

AM is included for contrast: its phasor 1 + m cos(theta) only varies in
magnitude and has exactly one sideband pair.
"""
import jax.numpy as jnp
from jax import jit
from jaxtyping import Array, Float, Complex


def _check_points(n_points):
    if int(n_points) != n_points or n_points < 2 or n_points % 2:
        raise ValueError(f"n_points must be an even integer >= 2, got {n_points}.")
    return int(n_points)


def phasor_samples(h, n_points: int) -> Complex[Array, "... n_points"]:
    """
    Samples exp(j h sin(theta_k)) at theta_k = 2 pi k / N.

    Args:
        h: Modulation index, scalar or array.
        n_points: Number of phase samples N (even).

    Returns:
        Complex array of shape h.shape + (N,).
    """
    n_points = _check_points(n_points)
    h = jnp.asarray(h)
    theta = 2 * jnp.pi * jnp.arange(n_points) / n_points
    return jnp.exp(1j * h[..., None] * jnp.sin(theta))


def sampled_sideband_amplitudes(h, n_points: int) -> Float[Array, "n_orders ..."]:
    """
    Finite Fourier coefficients of the sampled PM phasor.

    Order m is Re(DFT[m]) / N for m = 0..N/2, stacked on a leading axis.
    Order N/2 is the Nyquist bin, where the upper and lower sidebands fold
    onto each other; for N = 4 it equals b2(h) rather than b2(h) / 2.

    Args:
        h: Modulation index, scalar or array.
        n_points: Number of phase samples N (even, >= 2).

    Returns:
        (N/2 + 1,) + h.shape array.
    """
    samples = phasor_samples(h, n_points)
    spectrum = jnp.fft.fft(samples, axis=-1) / samples.shape[-1]
    half = spectrum[..., : samples.shape[-1] // 2 + 1]
    return jnp.moveaxis(jnp.real(half), -1, 0)


@jit
def narrowband_coefficients(h) -> Float[Array, "2 ..."]:
    """
    Narrow-band PM approximation exp(j h sin(theta)) ~ 1 + j h sin(theta).

    Returns (b0, b1) = (1, h) on the same scale as the closed forms, i.e.
    J0 ~ 1 and J1 ~ h / 2. Valid for h << 1.
    """
    h = jnp.asarray(h)
    return jnp.stack([jnp.ones_like(h, dtype=jnp.result_type(h, float)), h])


@jit
def am_sideband_amplitudes(m) -> Float[Array, "2 ..."]:
    """
    Carrier and per-sideband amplitudes of 1 + m cos(theta).

    Args:
        m: Modulation depth.

    Returns:
        (carrier, sideband) = (1, m / 2). Upper and lower sidebands are equal.
    """
    m = jnp.asarray(m)
    return jnp.stack([jnp.ones_like(m, dtype=jnp.result_type(m, float)), m / 2.0])
