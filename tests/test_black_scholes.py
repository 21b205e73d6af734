import math

import pytest

from optionpricer.black_scholes import BlackScholesPricer
from optionpricer.options import (
    AmericanPutOption,
    AsianCallOption,
    CallOption,
    DigitalCallOption,
    DigitalPutOption,
    PutOption,
)

S, K, T, R, SIGMA = 100.0, 100.0, 1.0, 0.05, 0.2


def price(option):
    return BlackScholesPricer(option, S, R, SIGMA)


def test_reference_call_price():
    assert price(CallOption(T, K))() == pytest.approx(10.4506, abs=1e-3)


@pytest.mark.parametrize("strike", [80.0, 100.0, 120.0])
def test_put_call_parity(strike):
    call = price(CallOption(T, strike))()
    put = price(PutOption(T, strike))()
    assert call - put == pytest.approx(S - strike * math.exp(-R * T))


@pytest.mark.parametrize("strike", [80.0, 100.0, 120.0])
def test_digitals_sum_to_discount(strike):
    call = price(DigitalCallOption(T, strike))()
    put = price(DigitalPutOption(T, strike))()
    assert call + put == pytest.approx(math.exp(-R * T))


def test_call_delta_in_unit_interval_and_put_mirrors():
    call_delta = price(CallOption(T, K)).delta()
    put_delta = price(PutOption(T, K)).delta()
    assert 0.0 < call_delta < 1.0
    assert put_delta == pytest.approx(-call_delta)


def test_call_price_increases_with_spot():
    low = BlackScholesPricer(CallOption(T, K), 90.0, R, SIGMA)()
    high = BlackScholesPricer(CallOption(T, K), 110.0, R, SIGMA)()
    assert high > low


def test_other_natures_price_zero():
    assert price(AsianCallOption([0.5, 1.0], K))() == 0.0
    assert price(AmericanPutOption(T, K)).delta() == 0.0


def test_missing_option_rejected():
    with pytest.raises(ValueError):
        BlackScholesPricer(None, S, R, SIGMA)