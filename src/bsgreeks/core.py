from __future__ import annotations
import math
import sys
from dataclasses import dataclass, replace
from enum import Enum

MAX_EXP = math.log(sys.float_info.max)


class ValidationError(ValueError):
    """An option parameter lies outside the domain of the model."""

    def __init__(self, field: str, value, message: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message or f"{field} must be positive, got {value}")


class OptionType(str, Enum):
    CALL = "call"
    PUT = "put"

    @classmethod
    def parse(cls, kind) -> OptionType:
        """Accept a member or its string value (``"call"`` / ``"put"``)."""
        if isinstance(kind, cls):
            return kind
        try:
            return cls(str(kind).lower())
        except ValueError:
            raise ValidationError(
                "kind", kind, f"kind must be 'call' or 'put', got {kind!r}"
            ) from None


CALL = OptionType.CALL
PUT  = OptionType.PUT


# ---------------------------------------------------------------------------
# Contract
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionContract:
    """A single European option on a non-dividend-paying underlying.

    Parameters
    ----------
    spot : float
        Current underlying price.
    strike : float
        Strike price.
    rate : float
        Continuously-compounded risk-free rate (any sign as long as
        the discount factor ``exp(-rate * term)`` stays finite).
    volatility : float
        Annualised volatility.
    term : float
        Time to expiry in years.
    """
    spot: float
    strike: float
    rate: float
    volatility: float
    term: float

    def __post_init__(self):
        for name in ("spot", "strike", "volatility", "term"):
            check_positive(name, getattr(self, name))
        check_rate(self.rate, self.term)

    def replace(self, **changes) -> OptionContract:
        """Copy with some fields changed; the copy is validated again."""
        return replace(self, **changes)


def check_positive(name: str, value) -> None:
    # NaN fails the comparison
    try:
        ok = value > 0 and not math.isinf(value)
    except TypeError:
        ok = False
    if not ok:
        raise ValidationError(name, value)


def check_rate(rate, term) -> None:
    """Reject rates whose discount factor over ``term`` overflows a float."""
    try:
        ok = math.isfinite(rate) and -rate * term < MAX_EXP
    except TypeError:
        ok = False
    if not ok:
        raise ValidationError(
            "rate", rate,
            f"rate must be finite with exp(-rate * term) representable, got {rate}",
        )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GreekSet:
    """Price and sensitivities of one option type.

    ``vega`` and ``rho`` are per 1 percentage point, ``theta`` per calendar day.
    """
    price: float
    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float

    def as_dict(self) -> dict[str, float]:
        return {
            "price": self.price,
            "delta": self.delta,
            "gamma": self.gamma,
            "vega": self.vega,
            "theta": self.theta,
            "rho": self.rho,
        }


@dataclass(frozen=True)
class OptionMetrics:
    """Call and put evaluations of the same contract."""
    call: GreekSet
    put: GreekSet

    def __getitem__(self, kind) -> GreekSet:
        return self.call if OptionType.parse(kind) is CALL else self.put
