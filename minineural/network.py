"""A fully connected feed-forward network trained with mini-batch backpropagation."""

from __future__ import annotations

import itertools
import os
import random
from collections.abc import Sequence

from .layer import Layer

__all__ = ["ShapeMismatchError", "NeuralNet"]


class ShapeMismatchError(ValueError):
    """Raised when a saved network does not match the shape of the target network."""


class NeuralNet:
    """A network of sigmoid layers whose sizes are given by ``shape``."""

    def __init__(self, shape: Sequence[int], rng: random.Random | None = None) -> None:
        if not shape:
            raise ValueError("a network needs at least one layer")
        if any(size <= 0 for size in shape):
            raise ValueError(f"layer sizes must be positive, got {list(shape)}")
        self.shape: list[int] = list(shape)
        self._rng = rng if rng is not None else random.Random()
        self.layers: list[Layer] = [
            Layer(size, prev_size, self._rng)
            for size, prev_size in zip(self.shape, [0, *self.shape[:-1]])
        ]

    @property
    def _output_layer(self) -> Layer:
        return self.layers[-1]

    def feedforward(self, inputs: Sequence[float]) -> list[float]:
        """Run ``inputs`` through the network and return the output activations."""
        first, *rest = self.layers
        first.set_values(inputs)
        for prev, layer in zip(self.layers, rest):
            layer.feedforward(prev)
        return self.output()

    def output(self) -> list[float]:
        """Return the output activations of the last feedforward pass."""
        return self._output_layer.values()

    def train(
        self,
        inputs: Sequence[Sequence[float]],
        expected: Sequence[Sequence[float]],
        learning_rate: float,
        batch_size: int,
        epochs: int,
        test_data: Sequence[Sequence[float]] | None = None,
        test_output: Sequence[Sequence[float]] | None = None,
        signal_interval: int | None = None,
    ) -> None:
        """Train with shuffled mini-batches, reporting progress on test data if given."""
        if batch_size <= 0:
            raise ValueError("batch size must be positive")
        if len(inputs) != len(expected):
            raise ValueError("inputs and expected outputs differ in length")
        reporting = test_data is not None
        if reporting:
            if test_output is None:
                raise ValueError("test data given without test outputs")
            if signal_interval is None or signal_interval <= 0:
                raise ValueError("signal interval must be a positive integer")

        total_batches = len(inputs) // batch_size
        for epoch in range(epochs):
            if reporting and epoch % signal_interval == 0:
                self.signal(test_data, test_output, epoch)

            indices = list(range(len(inputs)))
            self._rng.shuffle(indices)

            for k in range(total_batches):
                chosen = indices[k * batch_size:(k + 1) * batch_size]
                self.batch([inputs[i] for i in chosen], [expected[i] for i in chosen])
                for layer in self.layers[1:]:
                    for node in layer.nodes:
                        node.update_params(learning_rate)

    def evaluate(
        self,
        test_data: Sequence[Sequence[float]],
        test_output: Sequence[Sequence[float]],
    ) -> tuple[int, int]:
        """Return how many examples have their strongest output on the expected class."""
        correct = 0
        for example, target in zip(test_data, test_output):
            values = self.feedforward(example)
            best = max(range(len(values)), key=values.__getitem__)
            if target[best] == 1:
                correct += 1
        return correct, len(test_data)

    def signal(
        self,
        test_data: Sequence[Sequence[float]],
        test_output: Sequence[Sequence[float]],
        epoch: int,
    ) -> str:
        """Print and return an accuracy report for ``epoch``."""
        correct, total = self.evaluate(test_data, test_output)
        fraction = correct / total if total else float("nan")
        report = (
            f"Epoch {epoch}:\n"
            f"Total Correct: {correct}/{total}\n"
            f"Percentage: {fraction:g}\n"
        )
        print(report)
        return report

    def batch(
        self,
        examples: Sequence[Sequence[float]],
        expected: Sequence[Sequence[float]],
    ) -> None:
        """Accumulate gradients over one batch of examples."""
        for layer in self.layers:
            for node in layer.nodes:
                node.init_batch()

        last = len(self.layers) - 1
        for example, target in zip(examples, expected):
            self.feedforward(example)
            for j in range(last, 0, -1):
                if j == last:
                    self.layers[j].backward_output(self.layers[j - 1], target)
                else:
                    self.layers[j].backward_hidden(self.layers[j + 1], self.layers[j - 1])

    def analyze(self) -> list[str]:
        """Return a report of nodes with a zero value and weights that are zero."""
        problems: list[str] = []
        for i, layer in enumerate(self.layers):
            for j, node in enumerate(layer.nodes):
                if not node.value:
                    problems.append(f"NODE BAD: {i}, {j}")
                    problems.append(f"Val: {node.value:g}")
                    problems.append(f"z: {node.z:g}")
                problems.extend(
                    f"WEIGHT BAD: {i}, {j}, {k}"
                    for k, weight in enumerate(node.weights)
                    if not weight
                )
        return problems

    def describe(self) -> str:
        """Return a readable description of every node in the network."""
        return "".join(layer.describe() for layer in self.layers)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the shape and all biases and weights to a comma-separated file."""
        values = itertools.chain.from_iterable(
            [node.bias, *node.weights] for layer in self.layers for node in layer.nodes
        )
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("".join(f"{size}," for size in self.shape))
            handle.write("\n")
            handle.write("".join(f"{value!r}," for value in values))

    def load(self, path: str | os.PathLike[str]) -> None:
        """Read biases and weights saved by :meth:`save` into this network."""
        with open(path, encoding="utf-8") as handle:
            lines = [line.rstrip("\r\n") for line in itertools.islice(handle, 2)]
        shape_values = _parse_line(lines[0]) if lines else []
        net_values = _parse_line(lines[1]) if len(lines) > 1 else []

        if len(shape_values) != len(self.shape) or any(
            size != saved for size, saved in zip(self.shape, shape_values)
        ):
            raise ShapeMismatchError(
                f"saved shape {shape_values} does not match {self.shape}"
            )

        needed = sum(
            1 + len(node.weights) for layer in self.layers for node in layer.nodes
        )
        if len(net_values) < needed:
            raise ValueError(
                f"file holds {len(net_values)} parameters, {needed} are needed"
            )

        stream = iter(net_values)
        for layer in self.layers:
            for node in layer.nodes:
                node.bias = next(stream)
                node.weights = [next(stream) for _ in node.weights]


def _parse_line(line: str) -> list[float]:
    tokens = line.split(",")
    if tokens and tokens[-1] == "":
        tokens.pop()
    try:
        return [float(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"malformed network file line: {line!r}") from exc