import random

import pytest

from minineural.layer import Layer
from minineural.mathfunctions import cost


def _forward(layers, inputs):
    layers[0].set_values(inputs)
    for prev, layer in zip(layers, layers[1:]):
        layer.feedforward(prev)
    return layers[-1].values()


def test_layer_has_requested_size_and_fan_in():
    layer = Layer(4, 3, random.Random(1))
    assert len(layer.nodes) == 4
    assert all(len(node.weights) == 3 for node in layer.nodes)


def test_set_values_round_trip():
    layer = Layer(3, 0, random.Random(2))
    layer.set_values([0.1, 0.5, 0.9])
    assert layer.values() == [0.1, 0.5, 0.9]


def test_set_values_partial_keeps_rest():
    layer = Layer(3, 0, random.Random(3))
    layer.set_values([0.25])
    assert layer.values()[0] == 0.25
    assert len(layer.values()) == 3


def test_set_values_too_many_raises():
    layer = Layer(2, 0, random.Random(4))
    with pytest.raises(ValueError):
        layer.set_values([0.1, 0.2, 0.3])


def test_feedforward_outputs_are_probabilities():
    rng = random.Random(5)
    inputs = Layer(3, 0, rng)
    hidden = Layer(4, 3, rng)
    inputs.set_values([0.2, 0.7, 0.4])
    hidden.feedforward(inputs)
    out = hidden.values()
    assert len(out) == 4
    assert all(0 < v < 1 for v in out)


def test_feedforward_is_deterministic():
    rng = random.Random(6)
    inputs = Layer(2, 0, rng)
    out = Layer(2, 2, rng)
    inputs.set_values([0.3, 0.6])
    out.feedforward(inputs)
    first = out.values()
    out.feedforward(inputs)
    assert out.values() == first


def test_backward_output_counts_examples():
    rng = random.Random(7)
    layers = [Layer(2, 0, rng), Layer(3, 2, rng)]
    for node in layers[1].nodes:
        node.init_batch()
    _forward(layers, [0.4, 0.1])
    layers[1].backward_output(layers[0], [1.0, 0.0, 0.0])
    assert [n.examples_in_batch for n in layers[1].nodes] == [1, 1, 1]


def test_backward_output_too_few_targets_raises():
    rng = random.Random(8)
    layers = [Layer(2, 0, rng), Layer(3, 2, rng)]
    _forward(layers, [0.4, 0.1])
    with pytest.raises(ValueError):
        layers[1].backward_output(layers[0], [1.0])


def test_output_layer_step_reduces_cost():
    rng = random.Random(9)
    layers = [Layer(2, 0, rng), Layer(2, 2, rng)]
    inputs = [0.8, 0.3]
    targets = [1.0, 0.0]
    before = cost(targets, _forward(layers, inputs))
    for node in layers[1].nodes:
        node.init_batch()
    layers[1].backward_output(layers[0], targets)
    for node in layers[1].nodes:
        node.update_params(0.5)
    after = cost(targets, _forward(layers, inputs))
    assert after < before


def test_hidden_backprop_step_reduces_cost():
    rng = random.Random(10)
    layers = [Layer(3, 0, rng), Layer(4, 3, rng), Layer(2, 4, rng)]
    inputs = [0.9, 0.1, 0.5]
    targets = [0.0, 1.0]
    before = cost(targets, _forward(layers, inputs))
    for layer in layers[1:]:
        for node in layer.nodes:
            node.init_batch()
    layers[2].backward_output(layers[1], targets)
    layers[1].backward_hidden(layers[2], layers[0])
    assert all(n.examples_in_batch == 1 for n in layers[1].nodes)
    for layer in layers[1:]:
        for node in layer.nodes:
            node.update_params(0.1)
    after = cost(targets, _forward(layers, inputs))
    assert after < before


def test_describe_contains_every_node():
    layer = Layer(3, 2, random.Random(11))
    text = layer.describe()
    assert text.count("Node:") == 3
    assert text.count("Bias:") == 3