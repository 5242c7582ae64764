"""A small feed-forward neural network, training problems and a pygame decision-boundary visualizer."""

__version__ = "0.1.0"
__all__ = ["matrix", "network", "problems", "visualizer"]