"""Tests for vectorised Black-Scholes pricing."""

import numpy as np
import pytest
from bsgreeks import OptionContract, CALL, PUT, ValidationError
from bsgreeks.black_scholes import price as bs_scalar, greeks as greeks_scalar
from bsgreeks.black_scholes_vec import price_vec, greeks_vec


# ---------------------------------------------------------------------------
# price_vec matches scalar price
# ---------------------------------------------------------------------------
class TestPriceVec:
    def test_single_call_matches_scalar(self):
        opt = OptionContract(spot=100, strike=100, rate=0.05, volatility=0.2, term=1.0)
        got = price_vec(100, 100, 0.05, 0.2, 1.0, "call")
        assert float(got) == bs_scalar(opt, CALL)

    def test_single_put_matches_scalar(self):
        opt = OptionContract(spot=100, strike=100, rate=0.05, volatility=0.2, term=1.0)
        got = price_vec(100, 100, 0.05, 0.2, 1.0, PUT)
        assert float(got) == bs_scalar(opt, PUT)

    def test_array_of_spots(self):
        spots = np.array([90.0, 100.0, 110.0])
        prices = price_vec(spots, 100, 0.05, 0.2, 1.0, "call", decimals=None)
        assert prices.shape == (3,)
        for i, S in enumerate(spots):
            opt = OptionContract(spot=S, strike=100, rate=0.05, volatility=0.2, term=1.0)
            assert abs(prices[i] - bs_scalar(opt, CALL, decimals=None)) < 1e-10

    def test_array_of_strikes(self):
        strikes = np.linspace(80, 120, 50)
        prices = price_vec(100, strikes, 0.05, 0.2, 1.0, "call", decimals=None)
        assert prices.shape == (50,)
        # Prices should be monotonically decreasing for calls
        assert np.all(np.diff(prices) < 0)

    def test_mixed_kinds(self):
        prices = price_vec(22400, 23000, 0.1, 0.16, 0.01, ["call", "put"])
        np.testing.assert_allclose(prices, [8.65, 585.66], atol=1e-9)


# ---------------------------------------------------------------------------
# greeks_vec matches scalar greeks
# ---------------------------------------------------------------------------
class TestGreeksVec:
    @pytest.mark.parametrize("kind", [CALL, PUT])
    def test_scalar_greeks_match(self, kind):
        opt = OptionContract(spot=22400, strike=23000, rate=0.1,
                             volatility=0.16, term=0.01)
        expected = greeks_scalar(opt, kind).as_dict()
        got = greeks_vec(22400, 23000, 0.1, 0.16, 0.01, kind)
        for key in ("price", "delta", "gamma", "vega", "theta", "rho"):
            assert abs(float(got[key]) - expected[key]) < 1e-9, f"{key} mismatch"

    def test_vectorized_greeks(self):
        spots = np.array([90.0, 100.0, 110.0])
        got = greeks_vec(spots, 100, 0.05, 0.2, 1.0, "call")
        assert got["delta"].shape == (3,)
        # Call delta should increase with spot
        assert np.all(np.diff(got["delta"]) > 0)

    def test_common_greeks_broadcast_to_kind(self):
        got = greeks_vec(100, 100, 0.05, 0.2, 1.0, ["call", "put"])
        assert got["gamma"].shape == (2,)
        assert got["gamma"][0] == got["gamma"][1]
        assert got["delta"][0] > 0 > got["delta"][1]

    def test_sign_bounds(self):
        spots = np.linspace(10, 300, 30)
        for kind in ("call", "put"):
            g = greeks_vec(spots, 100, 0.1, 0.3, 2.0, kind)
            assert np.all(g["gamma"] >= 0)
            assert np.all(g["vega"] >= 0)
            assert np.all(g["theta"] <= 0)
        assert np.all(greeks_vec(spots, 100, 0.1, 0.3, 2.0, "put")["rho"] <= 0)


class TestValidationVec:
    @pytest.mark.parametrize("field, args", [
        ("spot", ([100, 0], 100, 0.05, 0.2, 1.0)),
        ("strike", (100, -1, 0.05, 0.2, 1.0)),
        ("volatility", (100, 100, 0.05, [0.2, np.nan], 1.0)),
        ("term", (100, 100, 0.05, 0.2, 0.0)),
    ])
    def test_rejects_non_positive(self, field, args):
        with pytest.raises(ValidationError) as exc:
            price_vec(*args, "call")
        assert exc.value.field == field

    def test_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            greeks_vec(100, 100, 0.05, 0.2, 1.0, ["call", "digital"])


class TestEdgesVec:
    def test_extreme_moneyness_matches_scalar(self):
        c = OptionContract(spot=1e-300, strike=1e300, rate=0.05,
                           volatility=0.2, term=1.0)
        got = greeks_vec(1e-300, 1e300, 0.05, 0.2, 1.0, "put")
        assert float(got["delta"]) == greeks_scalar(c, PUT).delta == -1.0

    def test_returned_arrays_writeable(self):
        got = greeks_vec(100, 100, 0.05, 0.2, 1.0, ["call", "put"])
        for key, arr in got.items():
            assert arr.flags.writeable, key

    def test_rejects_overflowing_rate(self):
        with pytest.raises(ValidationError) as exc:
            price_vec(100, 100, [0.05, -1000.0], 0.2, 1.0, "call")
        assert exc.value.field == "rate"
