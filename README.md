# neurovis

neurovis is a small, fully connected neural network with sigmoid activations. It is trained
by per-sample gradient descent. The package also has a pygame window that shows the
network learning. The window shades a square canvas by the network's prediction at each
point of the unit square and draws the training points on top. Above the canvas it reports
the epoch count, the mean squared error, and how much the error changed since the previous
frame.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The visualizer

```
neurovis
```

This opens a window for the spiral classification problem. To choose another problem, use
`--problem`:

```
neurovis --problem xor
neurovis --problem circle
neurovis --problem spiral
```

Controls:

- **Space** starts or pauses training. While training is on, each frame trains the network
  for the problem's number of epochs and then redraws the decision boundary.
- **Esc**, or closing the window, quits.

If the window cannot be opened, the command prints the error to standard error and exits
with status 1.

## Using the library

```python
from neurovis.network import NeuralNetwork

net = NeuralNetwork([2, 8, 8, 1], learning_rate=0.7)
inputs = [[0, 0], [0, 1], [1, 0], [1, 1]]
targets = [[0], [1], [1], [0]]
average_error = net.train(inputs, targets, epochs=1000)
print(net.predict([1, 0]))
print(net.summary())   # "Architecture: 2 -> 8 -> 8 -> 1. Learning Rate: 0.70"
```

### Constructing and training

- **Construction.** `NeuralNetwork(layers, learning_rate=0.5, rng=None)` needs at least two
  layer sizes. Weights are drawn uniformly from [-2, 2] and biases from [-1, 1]. The draws
  use `rng`, which is a `random.Random`; pass a seeded one for reproducible runs.
- **Training.** `train(inputs, targets, epochs=1000, shuffle=True)` runs the given number of
  epochs. By default it shuffles the order of the samples in each epoch. It returns the
  average squared error over the training set. It also logs that error at `INFO` level
  through the `neurovis.network` logger.
- **Single steps.** `train_single(inputs, target)` performs one backpropagation step.

### Reading the network's state

- `NeuralNetwork.error` returns the latest and the previous `ErrorRecord`. Each record holds
  `epoch` and `average_error`.
- `total_epochs` counts every epoch trained so far.
- `architecture` is a tuple of the layer sizes.
- `str(net)` lists the weight matrices layer by layer.

### Errors

Mismatched sizes raise `ValueError`. This covers inputs or targets of the wrong length,
different numbers of inputs and targets, and empty training data.

### Matrix

The `Matrix` class in `neurovis.matrix` is the dense matrix type that the network is built
on.

- **Building a matrix.** `Matrix(rows_of_values)`, `Matrix.zeros(rows, cols)` or
  `Matrix.column(values)`.
- **Operators.** `+`, `-`, scalar `*` (on either side) and matrix product with `@`.
- **Methods.** `transpose()`, `hadamard()`, `apply(func)`, `randomize(low, high, rng)`,
  `to_vector()` and `to_lists()`.
- **Element access.** Elements are read and written as `m[row, col]`. An out-of-range index
  raises `IndexError`.
- **Errors.** Mismatched shapes raise `ValueError`.

### Problems

`neurovis.problems` defines the training tasks:

| Class           | Architecture       | Learning rate | Epochs per frame |
|-----------------|--------------------|---------------|------------------|
| `XORProblem`    | 2 → 8 → 8 → 1      | 0.7           | 10               |
| `CircleProblem` | 2 → 8 → 16 → 8 → 1 | 0.15          | 10               |
| `SpiralProblem` | 2 → 8 → 8 → 1      | 0.35          | 20               |

`CircleProblem` draws a new set of 100 random points each time `inputs()` is called. It
labels each point 1 if it lies within radius 0.3 of (0.5, 0.5). It accepts an optional
`random.Random`.

`SpiralProblem` builds two interleaved spirals of 200 points each on first use and then
reuses them.

To show any of these problems, pass it to the visualizer:

```python
from neurovis.problems import CircleProblem
from neurovis.visualizer import NeuralVisualizer

with NeuralVisualizer(CircleProblem()) as vis:
    vis.run()
```

`neurovis.visualizer` also provides two helpers:

- `decision_grid(network, cols, rows)` returns the network's predictions over a grid of the
  unit square.
- `status_lines(network)` returns the three lines of status text.

Both work without opening a window.

## Limitations

Trained networks cannot be saved or loaded. Training state lasts only as long as the
process.