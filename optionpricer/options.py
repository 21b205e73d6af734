"""Option contracts: vanilla, digital, American and Asian calls and puts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from enum import Enum
from numbers import Real


class OptionNature(Enum):
    """Exercise style or family of an option."""

    AMERICAN = "american"
    ASIAN = "asian"
    DIGITAL = "digital"
    VANILLA = "vanilla"


class OptionType(Enum):
    """Direction of an option."""

    CALL = "call"
    PUT = "put"


def _check_strike(strike: float) -> float:
    if strike < 0.0:
        raise ValueError("Strike must be non negative")
    return float(strike)


def _average(prices: Iterable[float]) -> float:
    values = list(prices)
    if not values:
        raise ValueError("At least one price is needed to average a path")
    return sum(values) / len(values)


class Option(ABC):
    """Base class for every option contract."""

    _nature: OptionNature

    def __init__(self, expiry: float = 0.0, strike: float = 0.0) -> None:
        self._expiry = float(expiry)
        self._strike = _check_strike(strike)

    @abstractmethod
    def payoff(self, price: float) -> float:
        """Payoff of the option for a terminal underlying price."""

    def payoff_path(self, prices: Iterable[float]) -> float:
        """Payoff computed from the average of a price path (call style)."""
        average = _average(prices)
        if average >= self.strike:
            return average - self.strike
        return 0.0

    @property
    def strike(self) -> float:
        return self._strike

    @property
    def expiry(self) -> float:
        return self._expiry

    @property
    def nature(self) -> OptionNature:
        return self._nature

    @property
    @abstractmethod
    def option_type(self) -> OptionType:
        """Whether the option is a call or a put."""

    @property
    def time_steps(self) -> tuple[float, ...]:
        return (0.0,)

    def is_american(self) -> bool:
        return self.nature is OptionNature.AMERICAN

    def is_asian(self) -> bool:
        return self.nature is OptionNature.ASIAN

    def __repr__(self) -> str:
        return f"{type(self).__name__}(expiry={self.expiry!r}, strike={self.strike!r})"


class VanillaOption(Option):
    """European option paying a linear amount at expiry."""

    _nature = OptionNature.VANILLA

    def __init__(self, expiry: float, strike: float) -> None:
        super().__init__(expiry, strike)


class CallOption(VanillaOption):
    """European call."""

    @property
    def option_type(self) -> OptionType:
        return OptionType.CALL

    def payoff(self, price: float) -> float:
        if price >= self.strike:
            return price - self.strike
        return 0.0


class PutOption(VanillaOption):
    """European put."""

    @property
    def option_type(self) -> OptionType:
        return OptionType.PUT

    def payoff(self, price: float) -> float:
        if price <= self.strike:
            return self.strike - price
        return 0.0


class DigitalOption(Option):
    """European option paying one unit when it finishes in the money."""

    _nature = OptionNature.DIGITAL

    def __init__(self, expiry: float, strike: float) -> None:
        super().__init__(expiry, strike)


class DigitalCallOption(DigitalOption):
    """Digital call."""

    @property
    def option_type(self) -> OptionType:
        return OptionType.CALL

    def payoff(self, price: float) -> float:
        in_the_money = price >= self.strike
        if in_the_money:
            return 1.0
        return 0.0


class DigitalPutOption(DigitalOption):
    """Digital put."""

    @property
    def option_type(self) -> OptionType:
        return OptionType.PUT

    def payoff(self, price: float) -> float:
        in_the_money = price <= self.strike
        if in_the_money:
            return 1.0
        return 0.0


class AmericanOption(Option):
    """Option that may be exercised at any time up to expiry."""

    _nature = OptionNature.AMERICAN

    def __init__(self, expiry: float, strike: float) -> None:
        super().__init__(expiry, strike)


class AmericanCallOption(AmericanOption):
    """American call."""

    @property
    def option_type(self) -> OptionType:
        return OptionType.CALL

    def payoff(self, price: float) -> float:
        if price >= self.strike:
            return price - self.strike
        return 0.0


class AmericanPutOption(AmericanOption):
    """American put."""

    @property
    def option_type(self) -> OptionType:
        return OptionType.PUT

    def payoff(self, price: float) -> float:
        if price <= self.strike:
            return self.strike - price
        return 0.0


class AsianOption(Option):
    """Option whose payoff depends on the average price over fixed dates."""

    _nature = OptionNature.ASIAN

    def __init__(self, time_steps: Sequence[float], strike: float) -> None:
        super().__init__(0.0, strike)
        self._time_steps = tuple(float(t) for t in time_steps)

    @property
    def time_steps(self) -> tuple[float, ...]:
        return self._time_steps

    def payoff(self, price: float) -> float:
        """A single terminal price carries no value for an Asian option.

        The price must still be a real number; the value comes from
        :meth:`payoff_path`.
        """
        if not isinstance(price, Real):
            raise TypeError(f"price must be a real number, not {type(price).__name__}")
        return 0.0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(time_steps={list(self.time_steps)!r}, "
            f"strike={self.strike!r})"
        )


class AsianCallOption(AsianOption):
    """Arithmetic-average Asian call."""

    @property
    def option_type(self) -> OptionType:
        return OptionType.CALL

    def payoff_path(self, prices: Iterable[float]) -> float:
        average = _average(prices)
        if average >= self.strike:
            return average - self.strike
        return 0.0


class AsianPutOption(AsianOption):
    """Arithmetic-average Asian put."""

    @property
    def option_type(self) -> OptionType:
        return OptionType.PUT

    def payoff_path(self, prices: Iterable[float]) -> float:
        average = _average(prices)
        if average <= self.strike:
            return self.strike - average
        return 0.0