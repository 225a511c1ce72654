"""Closed-form Black-Scholes price and Greeks for a single contract.

Every Greek goes through one post-processing step that bounds it to its
analytic sign (``_floor`` for quantities that are never negative, ``_cap``
for those never positive). The rational CDF can land a hair outside those
bounds for extreme inputs; legitimate values are never altered.

Units: vega and rho per 1 percentage point, theta per calendar day, price
rounded to the cent.
"""

from __future__ import annotations
import math
from typing import NamedTuple

from .core import (
    OptionContract, OptionType, GreekSet, OptionMetrics, CALL, PUT,
)
from .normal import pdf, cdf

__all__ = [
    "d1_d2", "price", "delta", "gamma", "vega", "theta", "rho",
    "greeks", "evaluate",
]

DAYS_PER_YEAR = 365
PERCENT = 100
PRICE_DECIMALS = 2


class _Terms(NamedTuple):
    """Quantities shared by every output of one contract."""
    d1: float
    d2: float
    sqrt_T: float
    disc: float       # e^(-rT)
    n_d1: float       # pdf(d1)


def _terms(c: OptionContract) -> _Terms:
    if not isinstance(c, OptionContract):
        raise TypeError(f"expected OptionContract, got {type(c).__name__}")
    sqrt_T = math.sqrt(c.term)
    sig_sqrt_T = c.volatility * sqrt_T
    d1 = (math.log(c.spot) - math.log(c.strike)
          + (c.rate + 0.5 * c.volatility ** 2) * c.term) / sig_sqrt_T
    d2 = d1 - sig_sqrt_T
    return _Terms(d1, d2, sqrt_T, math.exp(-c.rate * c.term), pdf(d1))


def _floor(x: float) -> float:
    return max(x, 0.0)


def _cap(x: float) -> float:
    return min(x, 0.0)


# ---------------------------------------------------------------------------
# Formulas on precomputed terms
# ---------------------------------------------------------------------------
def _price(c, t, kind, decimals):
    if kind is CALL:
        px = c.spot * cdf(t.d1) - c.strike * t.disc * cdf(t.d2)
    else:
        px = c.strike * t.disc * cdf(-t.d2) - c.spot * cdf(-t.d1)
    return px if decimals is None else round(px, decimals)


def _delta(t, kind):
    if kind is CALL:
        return _floor(cdf(t.d1))
    return _cap(cdf(t.d1) - 1)


def _gamma(c, t):
    return _floor(t.n_d1 / (c.spot * c.volatility * t.sqrt_T))


def _vega(c, t):
    return _floor(c.spot * t.n_d1 * t.sqrt_T / PERCENT)


def _theta(c, t, kind):
    s = -(c.spot * t.n_d1 * c.volatility) / (2 * t.sqrt_T)
    if kind is CALL:
        k = c.rate * c.strike * t.disc * cdf(t.d2)
        return _cap((s - k) / DAYS_PER_YEAR)
    k = c.rate * c.strike * t.disc * cdf(-t.d2)
    return _cap((s + k) / DAYS_PER_YEAR)


def _rho(c, t, kind):
    # put rho is capped at 0, not floored, so its negative value survives
    if kind is CALL:
        return _floor(c.term * c.strike * t.disc * cdf(t.d2) / PERCENT)
    return _cap(-c.term * c.strike * t.disc * cdf(-t.d2) / PERCENT)


def _greek_set(c, t, kind):
    return GreekSet(
        price=_price(c, t, kind, PRICE_DECIMALS),
        delta=_delta(t, kind),
        gamma=_gamma(c, t),
        vega=_vega(c, t),
        theta=_theta(c, t, kind),
        rho=_rho(c, t, kind),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def d1_d2(c: OptionContract) -> tuple[float, float]:
    t = _terms(c)
    return t.d1, t.d2


def price(c: OptionContract, kind=CALL, *,
          decimals: int | None = PRICE_DECIMALS) -> float:
    """Option premium, rounded to ``decimals`` places (``None`` = unrounded)."""
    return _price(c, _terms(c), OptionType.parse(kind), decimals)


def delta(c: OptionContract, kind=CALL) -> float:
    return _delta(_terms(c), OptionType.parse(kind))


def gamma(c: OptionContract) -> float:
    return _gamma(c, _terms(c))


def vega(c: OptionContract) -> float:
    """Price change for a 1-point (0.01) move in volatility."""
    return _vega(c, _terms(c))


def theta(c: OptionContract, kind=CALL) -> float:
    """Price change over one calendar day; never positive."""
    return _theta(c, _terms(c), OptionType.parse(kind))


def rho(c: OptionContract, kind=CALL) -> float:
    """Price change for a 1-point (0.01) move in the rate."""
    return _rho(c, _terms(c), OptionType.parse(kind))


def greeks(c: OptionContract, kind=CALL) -> GreekSet:
    return _greek_set(c, _terms(c), OptionType.parse(kind))


def evaluate(c: OptionContract) -> OptionMetrics:
    """Price and Greeks of both the call and the put, sharing d1/d2."""
    t = _terms(c)
    return OptionMetrics(call=_greek_set(c, t, CALL), put=_greek_set(c, t, PUT))
