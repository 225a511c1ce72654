# bsgreeks — Black-Scholes price and Greeks
# Public API

# Data model
from .core import (
    OptionContract, OptionType, CALL, PUT,
    GreekSet, OptionMetrics, ValidationError,
)

# Standard normal
from .normal import pdf, cdf

# Scalar engine
from .black_scholes import (
    d1_d2, price, delta, gamma, vega, theta, rho, greeks, evaluate,
)

# Vectorised engine
from .black_scholes_vec import price_vec, greeks_vec

# Finite-difference checks
from .risk import numerical_greeks, scenario_grid

__all__ = [
    # Data model
    "OptionContract", "OptionType", "CALL", "PUT",
    "GreekSet", "OptionMetrics", "ValidationError",
    # Normal
    "pdf", "cdf",
    # Scalar
    "d1_d2", "price", "delta", "gamma", "vega", "theta", "rho",
    "greeks", "evaluate",
    # Vectorised
    "price_vec", "greeks_vec",
    # Risk
    "numerical_greeks", "scenario_grid",
]

__version__ = "0.1.0"
