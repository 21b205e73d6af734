"""Option contracts priced with Black-Scholes formulas, binomial trees and Monte Carlo simulation."""

__version__ = "0.1.0"
__all__ = [
    "binary_tree",
    "black_scholes",
    "crr",
    "monte_carlo",
    "options",
    "random_source",
]