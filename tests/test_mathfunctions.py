import math
import random

import pytest

from minineural.mathfunctions import (
    cost,
    cost_prime,
    dot,
    magnitude,
    random_uniform,
    sigmoid,
    sigmoid_prime,
    vector_add,
    vector_sub,
)


def test_dot_is_symmetric():
    a = [0.3, -1.2, 4.0]
    b = [2.5, 0.7, -0.1]
    assert dot(a, b) == pytest.approx(dot(b, a))


def test_dot_with_itself_is_squared_magnitude():
    a = [1.5, -2.0, 0.25, 3.0]
    assert dot(a, a) == pytest.approx(magnitude(a) ** 2)


def test_dot_of_empty_vectors_is_zero():
    assert dot([], []) == 0


def test_sub_then_add_round_trip():
    a = [1.0, 2.5, -3.0]
    b = [0.5, -1.0, 2.0]
    assert vector_add(vector_sub(a, b), b) == pytest.approx(a)


def test_sub_of_self_is_zero_vector():
    a = [4.0, -2.0, 7.5]
    assert magnitude(vector_sub(a, a)) == 0


def test_magnitude_scales_linearly():
    a = [1.0, -2.0, 2.0]
    scaled = [3 * x for x in a]
    assert magnitude(scaled) == pytest.approx(3 * magnitude(a))


def test_cost_of_identical_vectors_is_zero():
    y = [0.0, 1.0, 0.0]
    assert cost(y, list(y)) == 0


def test_cost_is_symmetric_and_positive():
    y = [0.0, 1.0, 0.0]
    a = [0.2, 0.7, 0.1]
    assert cost(y, a) > 0
    assert cost(y, a) == pytest.approx(cost(a, y))


def test_cost_of_empty_vector_raises():
    with pytest.raises(ValueError):
        cost([], [])


def test_cost_prime_is_antisymmetric():
    assert cost_prime(0.3, 0.9) == pytest.approx(-cost_prime(0.9, 0.3))
    assert cost_prime(0.4, 0.4) == 0


def test_sigmoid_at_zero_is_half():
    assert sigmoid(0) == 0.5


@pytest.mark.parametrize("z", [-5.0, -0.5, 0.1, 2.0, 30.0])
def test_sigmoid_symmetry(z):
    assert sigmoid(z) + sigmoid(-z) == pytest.approx(1.0)


def test_sigmoid_extremes_do_not_overflow():
    assert sigmoid(-1000) == pytest.approx(0.0)
    assert sigmoid(1000) == pytest.approx(1.0)


@pytest.mark.parametrize("z", [-3.0, -0.2, 0.7, 4.0])
def test_sigmoid_prime_matches_numeric_derivative(z):
    h = 1e-6
    numeric = (sigmoid(z + h) - sigmoid(z - h)) / (2 * h)
    assert sigmoid_prime(z) == pytest.approx(numeric, rel=1e-5)


def test_sigmoid_prime_peaks_at_zero():
    assert sigmoid_prime(0) > sigmoid_prime(1)
    assert sigmoid_prime(0) > sigmoid_prime(-1)
    assert math.isclose(sigmoid_prime(2), sigmoid_prime(-2))


def test_random_uniform_within_bounds():
    rng = random.Random(7)
    values = [random_uniform(-1, 1, rng) for _ in range(500)]
    assert all(-1 <= v <= 1 for v in values)
    assert min(values) < 0 < max(values)


def test_random_uniform_reproducible_with_seed():
    first = [random_uniform(2, 5, random.Random(42)) for _ in range(3)]
    second = [random_uniform(2, 5, random.Random(42)) for _ in range(3)]
    assert first == second