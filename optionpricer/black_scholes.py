"""Closed-form Black-Scholes prices and deltas for European options."""

from __future__ import annotations

import math

from .options import Option, OptionNature, OptionType

_SQRT2 = math.sqrt(2.0)


class BlackScholesPricer:
    """Prices vanilla and digital options; other natures price at zero."""

    def __init__(
        self,
        option: Option,
        asset_price: float,
        interest_rate: float,
        volatility: float,
    ) -> None:
        if option is None:
            raise ValueError("Option must be given")
        self.option = option
        self.asset_price = float(asset_price)
        self.interest_rate = float(interest_rate)
        self.volatility = float(volatility)

    def _d1_d2(self) -> tuple[float, float]:
        s, k = self.asset_price, self.option.strike
        t, r, sigma = self.option.expiry, self.interest_rate, self.volatility
        d1 = (math.log(s / k) + (r + 0.5 * sigma * sigma) * t) / (sigma * math.sqrt(t))
        return d1, d1 - sigma * math.sqrt(t)

    def _priced(self) -> bool:
        return self.option.nature in (OptionNature.VANILLA, OptionNature.DIGITAL)

    def __call__(self) -> float:
        if not self._priced():
            return 0.0
        d1, d2 = self._d1_d2()
        s, k = self.asset_price, self.option.strike
        discount = math.exp(-self.interest_rate * self.option.expiry)
        is_call = self.option.option_type is OptionType.CALL
        if self.option.nature is OptionNature.VANILLA:
            if is_call:
                return 0.5 * (
                    s * math.erfc(-d1 / _SQRT2) - k * discount * math.erfc(-d2 / _SQRT2)
                )
            return 0.5 * (
                k * discount * math.erfc(d2 / _SQRT2) - s * math.erfc(d1 / _SQRT2)
            )
        if is_call:
            return 0.5 * discount * math.erfc(-d2 / _SQRT2)
        return 0.5 * discount * math.erfc(d2 / _SQRT2)

    def delta(self) -> float:
        if not self._priced():
            return 0.0
        d1, d2 = self._d1_d2()
        discount = math.exp(-self.interest_rate * self.option.expiry)
        is_call = self.option.option_type is OptionType.CALL
        if self.option.nature is OptionNature.VANILLA:
            if is_call:
                return 0.5 * math.erfc(-d1 / _SQRT2)
            return -0.5 * math.erfc(-d1 / _SQRT2)
        if is_call:
            return 0.5 * discount * math.erfc(-d1 / _SQRT2)
        return 0.5 * discount * math.erfc(d2 / _SQRT2)