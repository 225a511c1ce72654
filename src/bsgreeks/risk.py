"""Bump-and-reprice checks for the analytic engine.

Central finite differences on the unrounded price give an independent
estimate of each Greek, expressed in the engine's units so the two can be
compared directly. A spot × vol scenario grid covers one contract across
shocked markets.
"""

from __future__ import annotations

import numpy as np

from .core import OptionContract, OptionType
from .black_scholes import price, DAYS_PER_YEAR, PERCENT
from .black_scholes_vec import price_vec

__all__ = ["numerical_greeks", "scenario_grid"]


# ---------------------------------------------------------------------------
# Numerical Greeks
# ---------------------------------------------------------------------------

def numerical_greeks(
    contract: OptionContract,
    kind=OptionType.CALL,
    *,
    bump_pct: float = 0.01,
) -> dict[str, float]:
    """Compute Greeks via central finite differences on the analytic price.

    Parameters
    ----------
    contract : OptionContract
    kind : OptionType or str
    bump_pct : float
        Relative bump size for spot and vol; absolute for rate (default 0.01).

    Returns
    -------
    dict[str, float]
        Keys: ``delta``, ``gamma``, ``vega``, ``theta``, ``rho``. Vega and
        rho per 1 point, theta per calendar day (0.0 inside the last day).
    """
    kind = OptionType.parse(kind)

    def px(**changes) -> float:
        return price(contract.replace(**changes), kind, decimals=None)

    S, sigma, T, r = contract.spot, contract.volatility, contract.term, contract.rate
    P0 = px()

    # --- Delta & Gamma (spot bump) ---
    eps_S = bump_pct * S
    P_up = px(spot=S + eps_S)
    P_dn = px(spot=S - eps_S)
    delta = (P_up - P_dn) / (2.0 * eps_S)
    gamma = (P_up - 2.0 * P0 + P_dn) / (eps_S ** 2)

    # --- Vega (vol bump) ---
    eps_v = min(max(bump_pct * sigma, 1e-4), sigma / 2)
    vega = (px(volatility=sigma + eps_v) - px(volatility=sigma - eps_v)) / (2.0 * eps_v)

    # --- Theta (time decay, 1-day bump) ---
    dt = 1.0 / DAYS_PER_YEAR
    theta_val = px(term=T - dt) - P0 if T > dt else 0.0

    # --- Rho (rate bump) ---
    eps_r = bump_pct
    rho = (px(rate=r + eps_r) - px(rate=r - eps_r)) / (2.0 * eps_r)

    return {
        "delta": float(delta),
        "gamma": float(gamma),
        "vega": float(vega / PERCENT),
        "theta": float(theta_val),
        "rho": float(rho / PERCENT),
    }


# ---------------------------------------------------------------------------
# Scenario grid
# ---------------------------------------------------------------------------

def scenario_grid(
    contract: OptionContract,
    kind,
    spot_range: np.ndarray,
    vol_range: np.ndarray,
) -> dict:
    """Price one contract across a 2-D (spot × vol) scenario grid.

    Parameters
    ----------
    spot_range : array, shape (n_spot,)
        Spot values to evaluate.
    vol_range : array, shape (n_vol,)
        Volatility values to evaluate.

    Returns
    -------
    dict
        ``"spot_values"``, ``"vol_values"``, ``"prices"`` (shape n_spot×n_vol).
    """
    spot_range = np.asarray(spot_range, dtype=float)
    vol_range = np.asarray(vol_range, dtype=float)
    prices = price_vec(
        spot_range[:, None], contract.strike, contract.rate,
        vol_range[None, :], contract.term, kind,
    )
    return {
        "spot_values": spot_range.copy(),
        "vol_values": vol_range.copy(),
        "prices": prices,
    }
