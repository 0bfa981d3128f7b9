"""Command line entry point: classify which of three numbers is the largest."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

from .mathfunctions import random_uniform
from .network import NeuralNet, ShapeMismatchError

__all__ = ["generate_argmax_data", "main"]

SHAPE = (3, 3, 2, 8, 3)
EXAMPLE_COUNT = 1100
TRAINING_COUNT = 1000


def generate_argmax_data(
    count: int, rng: random.Random | None = None
) -> tuple[list[list[float]], list[list[float]]]:
    """Return ``count`` random triples and one-hot vectors marking their largest entry."""
    inputs: list[list[float]] = []
    outputs: list[list[float]] = []
    for _ in range(count):
        values = [random_uniform(0, 1, rng) for _ in range(3)]
        best = max(range(len(values)), key=values.__getitem__)
        inputs.append(values)
        outputs.append([1.0 if j == best else 0.0 for j in range(len(values))])
    return inputs, outputs


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minineural",
        description="Train or load a network that picks the largest of three numbers.",
    )
    parser.add_argument("--model", default="bestnet.csv", help="network file")
    parser.add_argument(
        "--train", action="store_true", help="train a new network and save it"
    )
    parser.add_argument("--epochs", type=int, default=3000)
    parser.add_argument("--learning-rate", type=float, default=0.1)
    parser.add_argument("--batch-size", type=int, default=30)
    parser.add_argument("--signal-interval", type=int, default=20)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--input",
        type=float,
        nargs=3,
        default=[0.95, 0.817, 0.90],
        metavar="X",
        help="three numbers to classify",
    )
    return parser


def _join(values: Sequence[float]) -> str:
    return " ".join(f"{v:g}" for v in values)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = _build_parser().parse_args(argv)
    rng = random.Random(args.seed)

    inputs, outputs = generate_argmax_data(EXAMPLE_COUNT, rng)
    training_data, testing_data = inputs[:TRAINING_COUNT], inputs[TRAINING_COUNT:]
    training_output, testing_output = outputs[:TRAINING_COUNT], outputs[TRAINING_COUNT:]

    print(f"output50: {_join(training_data[5])}")
    print(f"response50: {_join(training_output[5])}")

    net = NeuralNet(SHAPE, rng)
    if args.train:
        try:
            net.train(
                training_data,
                training_output,
                args.learning_rate,
                args.batch_size,
                args.epochs,
                testing_data,
                testing_output,
                args.signal_interval,
            )
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        net.save(args.model)
    else:
        try:
            net.load(args.model)
        except ShapeMismatchError:
            print("Invalid Shape!", file=sys.stderr)
            return 1
        except (OSError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    for value in net.feedforward(args.input):
        print(f"{value:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())