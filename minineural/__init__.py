"""A small fully connected sigmoid neural network with mini-batch training and a demo command."""

__version__ = "0.1.0"

__all__ = ["cli", "layer", "mathfunctions", "network", "node"]