"""A fully connected feed-forward network with sigmoid activations."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Sequence

from neurovis.matrix import Matrix

logger = logging.getLogger(__name__)


def sigmoid(x: float) -> float:
    """Logistic function, safe against overflow for large |x|."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def dsigmoid(x: float) -> float:
    """Derivative of the logistic function at x."""
    s = sigmoid(x)
    return s * (1.0 - s)


@dataclass(frozen=True)
class ErrorRecord:
    """Average squared error measured after a given total epoch count."""

    epoch: int = 0
    average_error: float = 0.0


class NeuralNetwork:
    """Multi-layer perceptron trained by per-sample gradient descent."""

    def __init__(
        self,
        layers: Sequence[int],
        learning_rate: float = 0.5,
        rng: random.Random | None = None,
    ) -> None:
        if len(layers) < 2:
            raise ValueError(
                "Neural network must have at least input and output layers"
            )
        self._architecture = tuple(layers)
        self.learning_rate = learning_rate
        self._rng = rng if rng is not None else random.Random()
        self._total_epochs = 0
        self._current_error = ErrorRecord()
        self._previous_error = ErrorRecord()
        self._weights: list[Matrix] = []
        self._biases: list[Matrix] = []
        for previous, current in zip(self._architecture, self._architecture[1:]):
            weight = Matrix.zeros(current, previous)
            weight.randomize(-2.0, 2.0, self._rng)
            self._weights.append(weight)
            bias = Matrix.zeros(current, 1)
            bias.randomize(-1.0, 1.0, self._rng)
            self._biases.append(bias)

    @property
    def architecture(self) -> tuple[int, ...]:
        return self._architecture

    @property
    def total_epochs(self) -> int:
        return self._total_epochs

    @property
    def error(self) -> tuple[ErrorRecord, ErrorRecord]:
        """The latest error record and the one before it."""
        return self._current_error, self._previous_error

    def _forward(self, x: Matrix) -> tuple[list[Matrix], list[Matrix]]:
        activations = [x]
        z_values = []
        current = x
        for weight, bias in zip(self._weights, self._biases):
            z = weight @ current + bias
            z_values.append(z)
            current = z.apply(sigmoid)
            activations.append(current)
        return activations, z_values

    def predict(self, inputs: Sequence[float]) -> list[float]:
        if len(inputs) != self._architecture[0]:
            raise ValueError("Input size must match network input layer")
        activations, _ = self._forward(Matrix.column(inputs))
        return activations[-1].to_vector()

    def train_single(self, inputs: Sequence[float], target: Sequence[float]) -> None:
        """Run one step of backpropagation on a single example."""
        if len(inputs) != self._architecture[0]:
            raise ValueError("Input size must match network input layer")
        if len(target) != self._architecture[-1]:
            raise ValueError("Target size must match network output layer")

        activations, z_values = self._forward(Matrix.column(inputs))
        expected = Matrix.column(target)

        delta = (activations[-1] - expected).hadamard(z_values[-1].apply(dsigmoid))
        deltas = [delta]
        for weight, z in zip(reversed(self._weights[1:]), reversed(z_values[:-1])):
            delta = (weight.transpose() @ delta).hadamard(z.apply(dsigmoid))
            deltas.append(delta)
        deltas.reverse()

        rate = self.learning_rate
        for i, (delta, activation) in enumerate(zip(deltas, activations)):
            self._weights[i] = self._weights[i] - (delta @ activation.transpose()) * rate
            self._biases[i] = self._biases[i] - delta * rate

    def train(
        self,
        inputs: Sequence[Sequence[float]],
        targets: Sequence[Sequence[float]],
        epochs: int = 1000,
        shuffle: bool = True,
    ) -> float:
        """Train for a number of epochs and return the resulting average error."""
        if len(inputs) != len(targets):
            raise ValueError("Number of inputs must match number of targets")
        if not inputs:
            raise ValueError("Training data must not be empty")

        order = list(range(len(inputs)))
        for _ in range(epochs):
            if shuffle:
                self._rng.shuffle(order)
            for idx in order:
                self.train_single(inputs[idx], targets[idx])
            self._total_epochs += 1

        total = sum(
            (p - t) ** 2
            for sample, target in zip(inputs, targets)
            for p, t in zip(self.predict(sample), target)
        )
        average = total / len(inputs)
        self._previous_error = self._current_error
        self._current_error = ErrorRecord(self._total_epochs, average)
        logger.info("Epoch %d, Average Error: %g", self._total_epochs, average)
        return average

    def _architecture_text(self) -> str:
        return " -> ".join(str(size) for size in self._architecture)

    def summary(self) -> str:
        """One-line description of the architecture and learning rate."""
        return (
            f"Architecture: {self._architecture_text()}. "
            f"Learning Rate: {self.learning_rate:.2f}"
        )

    def __str__(self) -> str:
        parts = [
            "Neural Network:\n",
            f"  Architecture: {self._architecture_text()}\n",
            "  Weights:\n",
        ]
        for i, weight in enumerate(self._weights):
            parts.append(f"    Layer {i} to Layer {i + 1}:\n")
            parts.append(f"{weight}\n")
        return "".join(parts)