import random

import pytest

from neurovis.network import ErrorRecord, NeuralNetwork, dsigmoid, sigmoid


def _squared_error(net, inputs, target):
    return sum((p - t) ** 2 for p, t in zip(net.predict(inputs), target))


def test_sigmoid_midpoint_and_symmetry():
    assert sigmoid(0) == 0.5
    for x in (0.3, 1.0, 5.0):
        assert sigmoid(x) + sigmoid(-x) == pytest.approx(1.0)


def test_sigmoid_extremes_do_not_overflow():
    assert sigmoid(-1000) == 1 - sigmoid(1000)
    assert sigmoid(1000) > sigmoid(10)


def test_dsigmoid_peak_and_symmetry():
    assert dsigmoid(0) == 0.25
    assert dsigmoid(2) == pytest.approx(dsigmoid(-2))
    assert dsigmoid(0) > dsigmoid(1) > dsigmoid(3)


def test_too_few_layers_rejected():
    with pytest.raises(ValueError):
        NeuralNetwork([3])


def test_architecture_and_initial_state():
    net = NeuralNetwork([2, 3, 1], rng=random.Random(1))
    assert net.architecture == (2, 3, 1)
    assert net.total_epochs == 0
    assert net.error == (ErrorRecord(0, 0.0), ErrorRecord(0, 0.0))


def test_predict_output_size_and_range():
    net = NeuralNetwork([2, 4, 3], rng=random.Random(2))
    out = net.predict([0.2, 0.8])
    assert len(out) == 3
    assert all(0.0 < v < 1.0 for v in out)


def test_predict_wrong_input_size():
    net = NeuralNetwork([2, 1], rng=random.Random(2))
    with pytest.raises(ValueError):
        net.predict([1.0])


def test_train_single_wrong_sizes():
    net = NeuralNetwork([2, 1], rng=random.Random(2))
    with pytest.raises(ValueError):
        net.train_single([1.0], [0.0])
    with pytest.raises(ValueError):
        net.train_single([1.0, 0.0], [0.0, 1.0])


def test_train_mismatched_lengths():
    net = NeuralNetwork([2, 1], rng=random.Random(2))
    with pytest.raises(ValueError):
        net.train([[0, 0], [1, 1]], [[0]], epochs=1)


def test_same_seed_same_network():
    a = NeuralNetwork([2, 5, 1], rng=random.Random(7))
    b = NeuralNetwork([2, 5, 1], rng=random.Random(7))
    assert a.predict([0.1, 0.9]) == b.predict([0.1, 0.9])
    assert str(a) == str(b)


def test_train_single_reduces_error():
    net = NeuralNetwork([2, 3, 1], learning_rate=0.1, rng=random.Random(5))
    sample, target = [0.4, 0.6], [1.0]
    before = _squared_error(net, sample, target)
    net.train_single(sample, target)
    assert _squared_error(net, sample, target) < before


def test_zero_learning_rate_leaves_network_unchanged():
    net = NeuralNetwork([2, 3, 1], learning_rate=0.0, rng=random.Random(5))
    before = net.predict([0.3, 0.7])
    net.train([[0, 0], [1, 1]], [[0], [1]], epochs=5)
    assert net.predict([0.3, 0.7]) == before


def test_error_records_progress():
    inputs = [[0, 0], [0, 1], [1, 0], [1, 1]]
    targets = [[0], [1], [1], [0]]
    net = NeuralNetwork([2, 4, 1], learning_rate=0.7, rng=random.Random(11))
    first = net.train(inputs, targets, epochs=10)
    current, previous = net.error
    assert current == ErrorRecord(10, first)
    assert previous == ErrorRecord(0, 0.0)
    assert first >= 0.0

    second = net.train(inputs, targets, epochs=5, shuffle=False)
    current2, previous2 = net.error
    assert net.total_epochs == 15
    assert current2 == ErrorRecord(15, second)
    assert previous2 == current


def test_training_is_reproducible_with_seed():
    inputs = [[0, 0], [0, 1], [1, 0], [1, 1]]
    targets = [[0], [1], [1], [0]]
    a = NeuralNetwork([2, 3, 1], rng=random.Random(4))
    b = NeuralNetwork([2, 3, 1], rng=random.Random(4))
    assert a.train(inputs, targets, epochs=20) == b.train(inputs, targets, epochs=20)
    assert a.predict([1, 0]) == b.predict([1, 0])


def test_summary_text():
    net = NeuralNetwork([2, 3, 1], rng=random.Random(1))
    assert net.summary() == "Architecture: 2 -> 3 -> 1. Learning Rate: 0.50"
    net.learning_rate = 0.25
    assert net.summary().startswith("Architecture: 2 -> 3 -> 1. Learning Rate:")
    assert net.summary().endswith("0.25")


def test_str_lists_every_weight_layer():
    net = NeuralNetwork([2, 3, 4, 1], rng=random.Random(1))
    text = str(net)
    assert text.startswith("Neural Network:\n  Architecture: 2 -> 3 -> 4 -> 1\n")
    assert "  Weights:\n" in text
    assert text.count(" to Layer ") == len(net.architecture) - 1
    assert "    Layer 2 to Layer 3:\n" in text