"""Interactive window that trains a network and draws its decision boundary."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

import pygame

from neurovis.network import NeuralNetwork
from neurovis.problems import CircleProblem, Problem, SpiralProblem, XORProblem

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 800
RESOLUTION = 10
LINES_OF_TEXT = 3
OFFSET = 50
X_OFF = OFFSET
Y_OFF_TOP = OFFSET * LINES_OF_TEXT
Y_OFF_BOTTOM = OFFSET

WINDOW_SIZE = (CANVAS_WIDTH + 2 * X_OFF, CANVAS_HEIGHT + Y_OFF_TOP + Y_OFF_BOTTOM)
BACKGROUND = (17, 17, 17)
CANVAS_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
FONT_SIZE = 24

PROBLEMS = {
    "xor": XORProblem,
    "circle": CircleProblem,
    "spiral": SpiralProblem,
}


def decision_grid(
    network: NeuralNetwork, cols: int, rows: int
) -> list[list[float]]:
    """Network output over a cols x rows grid of the unit square, by column."""
    return [
        [network.predict([i / cols, j / rows])[0] for j in range(rows)]
        for i in range(cols)
    ]


def status_lines(network: NeuralNetwork) -> list[str]:
    """The three lines of status text shown above the canvas."""
    current, previous = network.error
    improvement = previous.average_error - current.average_error
    return [
        f"Epoch: {current.epoch:4}",
        f"Network Error: {current.average_error * 100:.2f}%. "
        f"Training Improvement: {improvement * 100:.4f}",
        network.summary(),
    ]


class NeuralVisualizer:
    """Owns a problem, a network built for it and the window that shows both."""

    def __init__(self, problem: Problem) -> None:
        self.problem = problem
        self.network = NeuralNetwork(problem.architecture, problem.learning_rate)
        self._screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None

    def open(self) -> None:
        """Create the window and load the font."""
        pygame.init()
        try:
            pygame.display.set_caption(
                f"Neural Network Visualizer - {self.problem.name}"
            )
            self._screen = pygame.display.set_mode(WINDOW_SIZE)
            self._font = pygame.font.SysFont("monospace", FONT_SIZE)
        except pygame.error:
            self.close()
            raise

    def close(self) -> None:
        """Release the window and shut pygame down."""
        self._font = None
        self._screen = None
        pygame.quit()

    def __enter__(self) -> "NeuralVisualizer":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _render_text(self, surface: pygame.Surface, text: str, x: int, y: int) -> None:
        if self._font is None:
            return
        surface.blit(self._font.render(text, False, TEXT_COLOR), (x, y))

    def render_frame(self, surface: pygame.Surface) -> list[str]:
        """Train for one round, draw the frame and return its status lines.

        Status text is drawn only once the visualizer has been opened.
        """
        surface.fill(BACKGROUND)
        surface.fill(CANVAS_COLOR, pygame.Rect(X_OFF, Y_OFF_TOP, CANVAS_WIDTH, CANVAS_HEIGHT))

        inputs = self.problem.inputs()
        outputs = self.problem.outputs()
        self.network.train(inputs, outputs, self.problem.epochs, True)

        cols = CANVAS_WIDTH // RESOLUTION
        rows = CANVAS_HEIGHT // RESOLUTION
        for i, column in enumerate(decision_grid(self.network, cols, rows)):
            for j, prediction in enumerate(column):
                # White blended over the black canvas at alpha = prediction.
                level = max(0, min(255, int(prediction * 255)))
                rect = pygame.Rect(
                    i * RESOLUTION + X_OFF,
                    j * RESOLUTION + Y_OFF_TOP,
                    RESOLUTION,
                    RESOLUTION,
                )
                surface.fill((level, level, level), rect)

        lines = status_lines(self.network)
        for n, line in enumerate(lines):
            self._render_text(surface, line, X_OFF, n * OFFSET)

        self.problem.render_points(
            surface, X_OFF, Y_OFF_TOP, CANVAS_WIDTH, CANVAS_HEIGHT
        )
        return lines

    def run(self) -> None:
        """Event loop: SPACE toggles training, ESC or closing the window quits."""
        if self._screen is None:
            raise RuntimeError("Visualizer must be opened before running")
        print(f"Starting visualization for: {self.problem.name}")
        print("Press ESC or close window to quit")

        clock = pygame.time.Clock()
        training = False
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        training = not training
            if running and training:
                self.render_frame(self._screen)
                pygame.display.flip()
            clock.tick(60)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="neurovis",
        description="Train a small network and watch its decision boundary.",
    )
    parser.add_argument(
        "--problem",
        choices=sorted(PROBLEMS),
        default="spiral",
        help="classification problem to train on (default: spiral)",
    )
    args = parser.parse_args(argv)

    visualizer = NeuralVisualizer(PROBLEMS[args.problem]())
    try:
        visualizer.open()
    except pygame.error as exc:
        print(f"Failed to start visualizer: {exc}", file=sys.stderr)
        return 1
    try:
        visualizer.run()
    finally:
        visualizer.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())