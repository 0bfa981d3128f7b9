# minineural

A small neural network library with no dependencies. Networks are
fully connected and use sigmoid activations throughout. They learn by
backpropagation with mini-batch gradient descent on a quadratic cost.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `minineural.mathfunctions` provides vector helpers (`dot`, `vector_sub`,
  `vector_add`, `magnitude`), the quadratic `cost` and its derivative
  `cost_prime`, `sigmoid`, `sigmoid_prime` and `random_uniform`.
- `minineural.node` provides `Node`, a single neuron. It holds its weights,
  its bias, its last activation and the gradients gathered over a batch.
- `minineural.layer` provides `Layer`, an ordered list of nodes.
- `minineural.network` provides `NeuralNet` and `ShapeMismatchError`.
- `minineural.cli` provides `generate_argmax_data` and the `minineural`
  command.

## Building and using a network

A network is described by its shape: the number of nodes in each layer,
from the input layer to the output layer. Every size must be positive.
Weights and biases start out as uniform random values in `[-1, 1]`. They
are drawn from the `random.Random` you pass in, or from a fresh one if
you pass none.

```python
import random

from minineural.network import NeuralNet

net = NeuralNet([3, 3, 2, 8, 3], random.Random(0))
outputs = net.feedforward([0.95, 0.817, 0.90])
print(outputs)          # activations of the output layer
print(net.output())     # the same values, from the last feedforward
```

## Training

`NeuralNet.train` works in epochs. In each epoch it shuffles the training
examples and splits them into batches of `batch_size`. Examples left over
after the last full batch are not used in that epoch. For each batch it
averages the gradient and takes a step scaled by `learning_rate`.

If `test_data` is given, `test_output` and a positive `signal_interval`
must be given as well. Every `signal_interval` epochs, starting with
epoch 0, `NeuralNet.signal` then prints an accuracy report and returns it.

`NeuralNet.evaluate` returns `(correct, total)`. An example counts as
correct when the expected output holds `1` at the position of the
network's largest output.

```python
import random

from minineural.cli import generate_argmax_data
from minineural.network import NeuralNet

rng = random.Random(1)
train_x, train_y = generate_argmax_data(1000, rng)
test_x, test_y = generate_argmax_data(100, rng)

net = NeuralNet([3, 3, 2, 8, 3], rng)
net.train(
    train_x,
    train_y,
    learning_rate=0.1,
    batch_size=30,
    epochs=100,
    test_data=test_x,
    test_output=test_y,
    signal_interval=20,
)
print(net.evaluate(test_x, test_y))
```

`generate_argmax_data(count, rng)` returns a pair of lists:

- the inputs, which are triples of random values in `[0, 1]`;
- the expected outputs, which are one-hot vectors marking the largest
  value of each triple.

## Saving and loading

`NeuralNet.save` writes the network to a comma-separated text file. The
first line holds the shape. The second line holds every node's bias
followed by its weights, layer by layer.

`NeuralNet.load` reads such a file into a network of the same shape. It
raises:

- `ShapeMismatchError`, a subclass of `ValueError`, when the saved shape
  differs;
- `ValueError` when the file is malformed or holds too few parameters.

```python
net.save("bestnet.csv")

other = NeuralNet([3, 3, 2, 8, 3], random.Random())
other.load("bestnet.csv")
```

## Inspecting a network

- `NeuralNet.describe()` returns a text listing every node's value, bias
  and weights.
- `NeuralNet.analyze()` returns a list of report lines. It reports nodes
  whose value is zero, together with their `z`, and weights that are
  exactly zero.

## Command line

```
minineural
```

The command runs a toy problem: picking the largest of three numbers.
Each run goes through these steps:

1. It generates 1100 random examples. The first 1000 are for training
   and the last 100 for testing.
2. It prints training example 5 and its expected output.
3. It builds a `3-3-2-8-3` network.
4. It gets the network's parameters:
   - By default it loads them from the file given by `--model`
     (`bestnet.csv` by default). If the shape in the file differs, it
     prints `Invalid Shape!` and exits with status 1. Other read errors
     also exit with status 1.
   - With `--train` it trains a new network instead, reporting accuracy
     on the test examples as it goes, and saves the result to `--model`.
5. It prints the network's outputs for `--input`, one per line.

Options:

- `--model PATH`: network file to load, or to save after training.
- `--train`: train and save instead of loading.
- `--epochs N` (default 3000), `--learning-rate R` (default 0.1),
  `--batch-size N` (default 30), `--signal-interval N` (default 20):
  training settings.
- `--seed N`: seed for the random generator, for repeatable runs.
- `--input X X X`: the three numbers to classify (default
  `0.95 0.817 0.90`).

No network file comes with the package. Run `minineural --train` once to
create one before running the command without `--train`.