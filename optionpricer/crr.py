"""Cox-Ross-Rubinstein binomial pricer for European and American options."""

from __future__ import annotations

import math

from .binary_tree import BinaryTree
from .options import Option


class CRRPricer:
    """Binomial tree pricer with up, down and risk-free returns per step."""

    def __init__(
        self,
        option: Option,
        depth: int,
        asset_price: float,
        up: float,
        down: float,
        interest_rate: float,
    ) -> None:
        if down < -1 or down > up or interest_rate <= -1 or interest_rate > up:
            raise ValueError("Arbitrage opportunity detected.")
        if asset_price <= 0:
            raise ValueError("Invalid parameters.")
        if option.is_asian():
            raise ValueError("Asian Option")
        if depth < 0:
            raise ValueError("Depth must be non negative")
        self.option = option
        self.depth = int(depth)
        self.asset_price = float(asset_price)
        self.up = float(up)
        self.down = float(down)
        self.interest_rate = float(interest_rate)
        self._tree = BinaryTree(self.depth)
        self._exercise = BinaryTree(self.depth) if option.is_american() else None
        self._computed = False

    @classmethod
    def from_black_scholes(
        cls,
        option: Option,
        depth: int,
        asset_price: float,
        rate: float,
        volatility: float,
    ) -> "CRRPricer":
        """Build a tree whose steps approximate Black-Scholes dynamics."""
        if depth < 1:
            raise ValueError("Depth must be positive")
        h = option.expiry / depth
        drift = (rate + volatility**2 / 2) * h
        spread = volatility * math.sqrt(h)
        up = math.exp(drift + spread) - 1
        down = math.exp(drift - spread) - 1
        interest_rate = math.exp(rate * h) - 1
        return cls(option, depth, asset_price, up, down, interest_rate)

    def _stock_price(self, n: int, i: int) -> float:
        return self.asset_price * (1 + self.up) ** i * (1 + self.down) ** (n - i)

    @property
    def _q(self) -> float:
        return (self.interest_rate - self.down) / (self.up - self.down)

    def compute(self) -> None:
        """Fill the price tree (and exercise tree for American options)."""
        n_steps, q, growth = self.depth, self._q, 1 + self.interest_rate
        tree = self._tree
        tree.set_depth(n_steps)
        for i in range(n_steps + 1):
            tree.set_node(n_steps, i, self.option.payoff(self._stock_price(n_steps, i)))

        exercise = self._exercise
        if exercise is not None:
            for i in range(n_steps + 1):
                exercise.set_node(n_steps, i, False)

        for n in range(n_steps - 1, -1, -1):
            for i in range(n + 1):
                value = (
                    q * tree.get_node(n + 1, i + 1) + (1 - q) * tree.get_node(n + 1, i)
                ) / growth
                if exercise is None:
                    tree.set_node(n, i, value)
                else:
                    intrinsic = self.option.payoff(self._stock_price(n, i))
                    tree.set_node(n, i, max(value, intrinsic))
                    exercise.set_node(n, i, value <= intrinsic)
        self._computed = True

    def get(self, n: int, i: int) -> float:
        if not self._computed:
            self.compute()
        return self._tree.get_node(n, i)

    def get_exercise(self, n: int, i: int) -> bool:
        """Whether early exercise is optimal at node (n, i) of an American option."""
        if self._exercise is None:
            raise ValueError("Exercise policy exists only for American options")
        if not self._computed:
            self.compute()
        return bool(self._exercise.get_node(n, i))

    def __call__(self, closed_form: bool = False) -> float:
        if not closed_form:
            return self.get(0, 0)
        n_steps, q = self.depth, self._q
        total = sum(
            math.comb(n_steps, i)
            * q**i
            * (1 - q) ** (n_steps - i)
            * self.option.payoff(self._stock_price(n_steps, i))
            for i in range(n_steps + 1)
        )
        return total / (1 + self.interest_rate) ** n_steps