"""Standard normal density and the Zelen & Severo CDF approximation.

The CDF is the rational polynomial of Zelen & Severo (Abramowitz & Stegun
26.2.17) with five-digit coefficients, absolute error about 1e-7. Results
previously produced by this engine depend on these exact coefficients, so
they must not be replaced by ``math.erf`` or a longer expansion.

Non-finite input is not special-cased: ``cdf(inf) == 1``, ``cdf(-inf) == 0``,
``pdf(+-inf) == 0`` and NaN propagates.
"""

from __future__ import annotations
import math
import numpy as np

__all__ = ["pdf", "cdf", "pdf_vec", "cdf_vec"]

P = 0.2316419
INV_SQRT_2PI = 0.3989423          # truncated 1/sqrt(2*pi), part of the fit
A1, A2, A3, A4, A5 = 0.3193815, -0.3565638, 1.781478, -1.821256, 1.330274

_SQRT_2PI = math.sqrt(2 * math.pi)


def pdf(x: float) -> float:
    return math.exp(-x * x / 2) / _SQRT_2PI


def cdf(x: float) -> float:
    k = 1 / (1 + P * abs(x))
    d = INV_SQRT_2PI * math.exp(-x * x / 2)
    prob = d * k * (A1 + k * (A2 + k * (A3 + k * (A4 + k * A5))))
    if x > 0:
        return 1 - prob
    return prob


# ---------------------------------------------------------------------------
# Vectorised variants (same arithmetic, NumPy broadcasting)
# ---------------------------------------------------------------------------
def pdf_vec(x) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    return np.exp(-x * x / 2) / _SQRT_2PI


def cdf_vec(x) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    k = 1 / (1 + P * np.abs(x))
    d = INV_SQRT_2PI * np.exp(-x * x / 2)
    prob = d * k * (A1 + k * (A2 + k * (A3 + k * (A4 + k * A5))))
    return np.where(x > 0, 1 - prob, prob)
