"""A single sigmoid neuron with gradient accumulation for batch training."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .mathfunctions import (
    cost_prime,
    dot,
    random_uniform,
    sigmoid,
    sigmoid_prime,
)

if TYPE_CHECKING:
    from .layer import Layer

__all__ = ["Node"]


class Node:
    """A neuron holding its weights, bias, activation and batch gradients."""

    def __init__(self, input_count: int, rng: random.Random | None = None) -> None:
        self.weights: list[float] = [
            random_uniform(-1, 1, rng) for _ in range(input_count)
        ]
        self.tot_weight_gradient: list[float] = [0.0] * input_count
        self.bias: float = random_uniform(-1, 1, rng)
        self.value: float = 0.0
        self.z: float = 0.0
        self.error: float = 0.0
        self.tot_bias_gradient: float = 0.0
        self.examples_in_batch: int = 0

    def feedforward(self, inputs: Sequence[float]) -> float:
        """Compute the activation from the previous layer's values."""
        self.z = dot(inputs, self.weights) + self.bias
        self.value = sigmoid(self.z)
        return self.value

    def init_batch(self) -> None:
        """Reset the accumulated gradients before a new batch."""
        self.tot_weight_gradient = [0.0] * len(self.weights)
        self.tot_bias_gradient = 0.0
        self.examples_in_batch = 0

    def _accumulate(self, prev_layer: Layer) -> None:
        self.tot_weight_gradient = [
            total + self.error * prev.value
            for total, prev in zip(self.tot_weight_gradient, prev_layer.nodes)
        ]
        self.tot_bias_gradient += self.error
        self.examples_in_batch += 1

    def backward_hidden(self, next_layer: Layer, prev_layer: Layer, index: int) -> None:
        """Backpropagate the error of a hidden node at position ``index``."""
        weighted_sum = sum(
            node.weights[index] * node.error for node in next_layer.nodes
        )
        self.error = weighted_sum * sigmoid_prime(self.z)
        self._accumulate(prev_layer)

    def backward_output(self, prev_layer: Layer, target: float) -> None:
        """Backpropagate the error of an output node towards ``target``."""
        self.error = cost_prime(target, self.value) * sigmoid_prime(self.z)
        self._accumulate(prev_layer)

    def update_params(self, rate: float) -> None:
        """Take one gradient-descent step using the batch's averaged gradients."""
        if self.examples_in_batch == 0:
            raise ValueError("no examples accumulated in this batch")
        count = self.examples_in_batch
        self.weights = [
            w - rate * (g / count)
            for w, g in zip(self.weights, self.tot_weight_gradient)
        ]
        self.bias -= rate * (self.tot_bias_gradient / count)

    def describe(self) -> str:
        """Return a readable description of the node's state."""
        lines = [
            "Node: ",
            f"   Val: {self.value:g}",
            f"   Bias: {self.bias:g}",
            "   Weights: ",
        ]
        lines.extend(f"       {w:g}" for w in self.weights)
        return "\n".join(lines) + "\n\n"