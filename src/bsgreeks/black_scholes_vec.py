# black_scholes_vec.py
# Vectorised Black-Scholes price and Greeks for batches of contracts.
# All public functions accept scalars *or* NumPy arrays and broadcast.
# Formulas, rounding and sign bounds match black_scholes.py.

from __future__ import annotations
import numpy as np

from .core import ValidationError, OptionType, MAX_EXP
from .normal import pdf_vec as _n, cdf_vec as _N
from .black_scholes import DAYS_PER_YEAR, PERCENT, PRICE_DECIMALS

__all__ = ["price_vec", "greeks_vec"]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _as_inputs(spot, strike, rate, volatility, term):
    """Convert to float arrays and validate them."""
    arrays = {
        name: np.asarray(x, dtype=float)
        for name, x in (("spot", spot), ("strike", strike), ("rate", rate),
                        ("volatility", volatility), ("term", term))
    }
    for name in ("spot", "strike", "volatility", "term"):
        a = arrays[name]
        bad = ~(np.isfinite(a) & (a > 0))
        if np.any(bad):
            raise ValidationError(name, float(a[bad].flat[0]))
    r, T = np.broadcast_arrays(arrays["rate"], arrays["term"])
    bad = ~(np.isfinite(r) & (-r * T < MAX_EXP))
    if np.any(bad):
        rate = float(r[bad].flat[0])
        raise ValidationError(
            "rate", rate,
            f"rate must be finite with exp(-rate * term) representable, got {rate}",
        )
    return (arrays["spot"], arrays["strike"], arrays["rate"],
            arrays["volatility"], arrays["term"])


def _d1_d2(S, K, r, sigma, T):
    """Compute d1, d2 arrays.  All inputs broadcast."""
    sig_sqrt_T = sigma * np.sqrt(T)
    d1 = (np.log(S) - np.log(K) + (r + 0.5 * sigma * sigma) * T) / sig_sqrt_T
    d2 = d1 - sig_sqrt_T
    return d1, d2


def _is_call(kind) -> np.ndarray:
    """Return boolean mask: True where kind is a call."""
    kind = np.asarray(kind, dtype=object)
    if kind.ndim == 0:
        return np.bool_(OptionType.parse(kind.item()) is OptionType.CALL)
    return np.array(
        [OptionType.parse(k) is OptionType.CALL for k in kind.flat], dtype=bool
    ).reshape(kind.shape)


# ---------------------------------------------------------------------------
# Vectorised price
# ---------------------------------------------------------------------------
def price_vec(spot, strike, rate, volatility, term, kind,
              *, decimals: int | None = PRICE_DECIMALS) -> np.ndarray:
    """Vectorised Black-Scholes price.

    Parameters accept scalars or arrays; NumPy broadcasting rules apply.

    Returns
    -------
    np.ndarray
        Option prices (same shape as broadcasted inputs), rounded to
        ``decimals`` places unless ``decimals`` is ``None``.
    """
    S, K, r, sigma, T = _as_inputs(spot, strike, rate, volatility, term)
    is_call = _is_call(kind)
    d1, d2 = _d1_d2(S, K, r, sigma, T)
    disc = np.exp(-r * T)

    call_px = S * _N(d1) - K * disc * _N(d2)
    put_px  = K * disc * _N(-d2) - S * _N(-d1)

    px = np.where(is_call, call_px, put_px)
    return px if decimals is None else np.round(px, decimals)


# ---------------------------------------------------------------------------
# Vectorised Greeks
# ---------------------------------------------------------------------------
def greeks_vec(spot, strike, rate, volatility, term, kind) -> dict[str, np.ndarray]:
    """Vectorised Black-Scholes price and Greeks.

    Returns dict with keys: price, delta, gamma, vega, theta, rho.
    Vega and rho are per 1 point, theta per calendar day.
    """
    S, K, r, sigma, T = _as_inputs(spot, strike, rate, volatility, term)
    is_call = _is_call(kind)
    d1, d2 = _d1_d2(S, K, r, sigma, T)
    disc = np.exp(-r * T)
    sqrt_T = np.sqrt(T)
    n_d1 = _n(d1)
    shape = np.broadcast(d1, is_call).shape

    # Common
    gamma = np.broadcast_to(np.maximum(n_d1 / (S * sigma * sqrt_T), 0.0), shape).copy()
    vega  = np.broadcast_to(np.maximum(S * n_d1 * sqrt_T / PERCENT, 0.0), shape).copy()
    s = -(S * n_d1 * sigma) / (2 * sqrt_T)

    # Call-specific
    price_c = S * _N(d1) - K * disc * _N(d2)
    delta_c = np.maximum(_N(d1), 0.0)
    theta_c = np.minimum((s - r * K * disc * _N(d2)) / DAYS_PER_YEAR, 0.0)
    rho_c   = np.maximum(T * K * disc * _N(d2) / PERCENT, 0.0)

    # Put-specific
    price_p = K * disc * _N(-d2) - S * _N(-d1)
    delta_p = np.minimum(_N(d1) - 1, 0.0)
    theta_p = np.minimum((s + r * K * disc * _N(-d2)) / DAYS_PER_YEAR, 0.0)
    rho_p   = np.minimum(-T * K * disc * _N(-d2) / PERCENT, 0.0)

    return {
        "price": np.round(np.where(is_call, price_c, price_p), PRICE_DECIMALS),
        "delta": np.where(is_call, delta_c, delta_p),
        "gamma": gamma,
        "vega": vega,
        "theta": np.where(is_call, theta_c, theta_p),
        "rho": np.where(is_call, rho_c, rho_p),
    }
