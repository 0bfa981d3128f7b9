"""Vector helpers, the quadratic cost and the sigmoid activation."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

__all__ = [
    "dot",
    "vector_sub",
    "vector_add",
    "magnitude",
    "cost",
    "cost_prime",
    "sigmoid",
    "sigmoid_prime",
    "random_uniform",
]


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product of two vectors."""
    return sum(x * y for x, y in zip(a, b))


def vector_sub(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the element-wise difference ``a - b``."""
    return [x - y for x, y in zip(a, b)]


def vector_add(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the element-wise sum ``a + b``."""
    return [x + y for x, y in zip(a, b)]


def magnitude(a: Sequence[float]) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(sum(x * x for x in a))


def cost(y: Sequence[float], a: Sequence[float]) -> float:
    """Return the mean quadratic cost between expected ``y`` and actual ``a``."""
    if not y:
        raise ValueError("cost of an empty vector is undefined")
    return 0.5 * (1 / len(y)) * magnitude(vector_sub(y, a)) ** 2


def cost_prime(y: float, a: float) -> float:
    """Return the derivative of the quadratic cost with respect to ``a``."""
    return a - y


def sigmoid(z: float) -> float:
    """Return the logistic function of ``z``."""
    if z >= 0:
        return 1 / (1 + math.exp(-z))
    e = math.exp(z)
    return e / (1 + e)


def sigmoid_prime(z: float) -> float:
    """Return the derivative of the logistic function at ``z``."""
    s = sigmoid(z)
    return s * (1 - s)


def random_uniform(
    low: float, high: float, rng: random.Random | None = None
) -> float:
    """Return a random number between ``low`` and ``high``."""
    generator = rng if rng is not None else random
    return generator.random() * (high - low) + low