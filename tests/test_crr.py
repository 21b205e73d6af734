import pytest

from optionpricer.black_scholes import BlackScholesPricer
from optionpricer.crr import CRRPricer
from optionpricer.options import (
    AmericanCallOption,
    AmericanPutOption,
    AsianCallOption,
    CallOption,
    DigitalCallOption,
    PutOption,
)

S0, U, D, R, N = 100.0, 0.05, -0.045, 0.01, 5


@pytest.mark.parametrize(
    "option", [CallOption(5.0, 100.0), PutOption(5.0, 100.0), DigitalCallOption(5.0, 100.0)]
)
def test_closed_form_matches_tree(option):
    pricer = CRRPricer(option, N, S0, U, D, R)
    assert pricer(True) == pytest.approx(pricer())


def test_terminal_nodes_hold_payoff():
    option = CallOption(1.0, 100.0)
    pricer = CRRPricer(option, 1, S0, 0.1, -0.1, 0.0)
    assert pricer.get(1, 1) == pytest.approx(option.payoff(S0 * 1.1))
    assert pricer.get(1, 0) == 0.0


def test_converges_to_black_scholes():
    option = CallOption(1.0, 100.0)
    crr = CRRPricer.from_black_scholes(option, 400, 100.0, 0.05, 0.2)()
    bs = BlackScholesPricer(option, 100.0, 0.05, 0.2)()
    assert crr == pytest.approx(bs, abs=0.05)


def test_american_put_worth_at_least_european():
    american = CRRPricer(AmericanPutOption(5.0, 100.0), N, S0, U, D, R)()
    european = CRRPricer(PutOption(5.0, 100.0), N, S0, U, D, R)()
    assert american >= european


def test_american_call_equals_european_without_dividends():
    american = CRRPricer(AmericanCallOption(5.0, 100.0), N, S0, U, D, R)()
    european = CRRPricer(CallOption(5.0, 100.0), N, S0, U, D, R)()
    assert american == pytest.approx(european)


def test_exercise_policy():
    pricer = CRRPricer(AmericanPutOption(5.0, 100.0), N, S0, U, D, R)
    assert pricer.get_exercise(N - 1, 0) is True
    assert pricer.get_exercise(0, 0) is False
    assert pricer.get_exercise(N, 0) is False


def test_american_nodes_dominate_intrinsic():
    option = AmericanPutOption(5.0, 100.0)
    pricer = CRRPricer(option, N, S0, U, D, R)
    for n in range(N + 1):
        for i in range(n + 1):
            stock = S0 * (1 + U) ** i * (1 + D) ** (n - i)
            assert pricer.get(n, i) >= option.payoff(stock) - 1e-12


def test_exercise_requires_american():
    pricer = CRRPricer(CallOption(5.0, 100.0), N, S0, U, D, R)
    with pytest.raises(ValueError):
        pricer.get_exercise(0, 0)


@pytest.mark.parametrize(
    "up,down,rate",
    [(0.05, 0.1, 0.01), (0.05, -1.5, 0.01), (0.05, -0.045, 0.06), (0.05, -0.045, -1.0)],
)
def test_arbitrage_rejected(up, down, rate):
    with pytest.raises(ValueError, match="Arbitrage"):
        CRRPricer(CallOption(1.0, 100.0), N, S0, up, down, rate)


def test_non_positive_price_rejected():
    with pytest.raises(ValueError, match="Invalid parameters"):
        CRRPricer(CallOption(1.0, 100.0), N, 0.0, U, D, R)


def test_asian_rejected():
    with pytest.raises(ValueError, match="Asian"):
        CRRPricer(AsianCallOption([0.5, 1.0], 100.0), N, S0, U, D, R)


def test_zero_depth_black_scholes_rejected():
    with pytest.raises(ValueError):
        CRRPricer.from_black_scholes(CallOption(1.0, 100.0), 0, S0, 0.05, 0.2)