"""Monte Carlo pricer under Black-Scholes dynamics."""

from __future__ import annotations

import math

from . import random_source
from .options import Option, OptionNature


class BlackScholesMCPricer:
    """Accumulates simulated payoffs and keeps a running discounted estimate."""

    def __init__(
        self,
        option: Option,
        initial_price: float,
        interest_rate: float,
        volatility: float,
    ) -> None:
        self.option = option
        self.initial_price = float(initial_price)
        self.interest_rate = float(interest_rate)
        self.volatility = float(volatility)
        self._nb_paths = 1
        self._estimate = 0.0
        self._sum_payoff = 0.0
        self._squared_payoff = 0.0

    @property
    def nb_paths(self) -> int:
        return self._nb_paths

    def _step(self, price: float, dt: float) -> float:
        r, sigma = self.interest_rate, self.volatility
        z = random_source.rand_norm()
        return price * math.exp((r - 0.5 * sigma**2) * dt + sigma * math.sqrt(dt) * z)

    def _simulate_path(self, times: tuple[float, ...]) -> list[float]:
        prices = [self._step(self.initial_price, times[0])]
        for previous, current in zip(times, times[1:]):
            prices.append(self._step(prices[-1], current - previous))
        return prices

    def generate(self, nb_paths: int = 1) -> None:
        """Simulate ``nb_paths`` more paths and update the estimate."""
        if nb_paths < 0:
            raise ValueError("Number of paths must be non negative")
        option = self.option
        nature = option.nature
        self._nb_paths += nb_paths

        if nature in (OptionNature.VANILLA, OptionNature.DIGITAL):
            expiry = option.expiry
            payoffs = [
                option.payoff(self._step(self.initial_price, expiry))
                for _ in range(nb_paths)
            ]
            horizon = expiry
        else:
            times = option.time_steps
            if not times:
                raise ValueError("Option has no time steps to simulate")
            paths = [self._simulate_path(times) for _ in range(nb_paths)]
            if nature is OptionNature.ASIAN:
                payoffs = [option.payoff_path(path) for path in paths]
                horizon = times[-1]
            else:
                payoffs = [option.payoff(path[0]) for path in paths]
                horizon = option.expiry

        self._sum_payoff += sum(payoffs)
        self._squared_payoff += sum(p * p for p in payoffs)
        self._estimate = (
            math.exp(-self.interest_rate * horizon) * self._sum_payoff / self._nb_paths
        )

    def __call__(self) -> float:
        return self._estimate

    def confidence_interval(self) -> tuple[float, float]:
        """95% confidence bounds around the current estimate."""
        n = self._nb_paths
        if n == 0:
            raise ValueError("Paths must be different to 0")
        variance = self._squared_payoff / n - (self._sum_payoff / n) ** 2
        half_width = 1.96 * math.sqrt(max(variance, 0.0) / n)
        return self._estimate - half_width, self._estimate + half_width