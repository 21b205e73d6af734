"""Shared pseudo-random source backed by a Mersenne Twister generator."""

from __future__ import annotations

import random

_generator = random.Random()


def seed(value: int | None = None) -> None:
    """Reseed the shared generator; None draws a seed from system entropy."""
    _generator.seed(value)


def rand_unif() -> float:
    """Draw from the uniform distribution on [0, 1)."""
    return _generator.random()


def rand_norm() -> float:
    """Draw from the standard normal distribution."""
    return _generator.normalvariate(0.0, 1.0)