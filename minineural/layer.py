"""A layer of nodes that feeds forward and backpropagates together."""

from __future__ import annotations

import random
from collections.abc import Sequence

from .node import Node

__all__ = ["Layer"]


class Layer:
    """An ordered collection of nodes fed by a previous layer of given size."""

    def __init__(
        self, size: int, input_count: int, rng: random.Random | None = None
    ) -> None:
        self.nodes: list[Node] = [Node(input_count, rng) for _ in range(size)]

    def set_values(self, values: Sequence[float]) -> None:
        """Load raw input values into the nodes of an input layer."""
        if len(values) > len(self.nodes):
            raise ValueError(
                f"{len(values)} values given for a layer of {len(self.nodes)} nodes"
            )
        for node, value in zip(self.nodes, values):
            node.value = value

    def feedforward(self, prev: Layer) -> None:
        """Compute every node's activation from the previous layer."""
        inputs = prev.values()
        for node in self.nodes:
            node.feedforward(inputs)

    def backward_hidden(self, next_layer: Layer, prev_layer: Layer) -> None:
        """Backpropagate errors through a hidden layer."""
        for index, node in enumerate(self.nodes):
            node.backward_hidden(next_layer, prev_layer, index)

    def backward_output(self, prev_layer: Layer, targets: Sequence[float]) -> None:
        """Backpropagate errors of the output layer towards ``targets``."""
        if len(targets) < len(self.nodes):
            raise ValueError(
                f"{len(targets)} targets given for a layer of {len(self.nodes)} nodes"
            )
        for node, target in zip(self.nodes, targets):
            node.backward_output(prev_layer, target)

    def values(self) -> list[float]:
        """Return the current activation of every node."""
        return [node.value for node in self.nodes]

    def describe(self) -> str:
        """Return a readable description of all nodes."""
        return "".join(node.describe() for node in self.nodes)