"""Classification problems the visualizer can train a network on."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod

import pygame

GREEN = (0, 255, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)

Span = tuple[int, int, int]


def circle_spans(cx: int, cy: int, radius: int) -> list[Span]:
    """Horizontal spans (x1, x2, y) that fill a disc, by the midpoint algorithm.

    A non-positive radius yields the single point at the centre.
    """
    if radius <= 0:
        return [(cx, cx, cy)]
    spans: list[Span] = []
    dx, dy = radius, 0
    decision = 1 - dx
    while dx >= dy:
        spans.append((cx - dx, cx + dx, cy + dy))
        spans.append((cx - dx, cx + dx, cy - dy))
        spans.append((cx - dy, cx + dy, cy + dx))
        spans.append((cx - dy, cx + dy, cy - dx))
        dy += 1
        if decision < 0:
            decision += 2 * dy + 1
        else:
            dx -= 1
            decision += 2 * (dy - dx) + 1
    return spans


def draw_circle(
    surface: pygame.Surface,
    color: tuple[int, int, int],
    cx: int,
    cy: int,
    radius: int,
) -> None:
    """Draw a filled disc onto the surface."""
    if radius <= 0:
        surface.set_at((cx, cy), color)
        return
    for x1, x2, y in circle_spans(cx, cy, radius):
        pygame.draw.line(surface, color, (x1, y), (x2, y))


def _label_color(label: float) -> tuple[int, int, int]:
    return GREEN if label > 0.5 else RED


def _to_canvas(point, x_off: int, y_off: int, w: int, h: int) -> tuple[int, int]:
    return int(point[0] * w) + x_off, int(point[1] * h) + y_off


class Problem(ABC):
    """A set of labelled 2-D points plus the training settings that suit it."""

    _ARCHITECTURE: tuple[int, ...] = ()
    _LEARNING_RATE: float = 0.5
    _EPOCHS: int = 1
    _NAME: str = ""

    @abstractmethod
    def inputs(self) -> list[list[float]]:
        """Training inputs; may regenerate the data set."""

    @abstractmethod
    def outputs(self) -> list[list[float]]:
        """Training targets matching the latest inputs."""

    @property
    def architecture(self) -> tuple[int, ...]:
        return self._ARCHITECTURE

    @property
    def learning_rate(self) -> float:
        return self._LEARNING_RATE

    @property
    def epochs(self) -> int:
        """Number of epochs to train between two drawn frames."""
        return self._EPOCHS

    @property
    def name(self) -> str:
        return self._NAME

    def render_points(
        self,
        surface: pygame.Surface,
        x_off: int,
        y_off: int,
        canvas_w: int,
        canvas_h: int,
    ) -> None:
        """Draw problem-specific markers; nothing by default."""


class XORProblem(Problem):
    """The four corners of the unit square labelled by exclusive or."""

    _ARCHITECTURE = (2, 8, 8, 1)
    _LEARNING_RATE = 0.7
    _EPOCHS = 10
    _NAME = "XOR Problem"

    _INPUTS = ((0.0, 0.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0))
    _OUTPUTS = ((0.0,), (1.0,), (1.0,), (0.0,))

    def inputs(self) -> list[list[float]]:
        return [list(p) for p in self._INPUTS]

    def outputs(self) -> list[list[float]]:
        return [list(t) for t in self._OUTPUTS]

    def render_points(self, surface, x_off, y_off, canvas_w, canvas_h) -> None:
        for point, target in zip(self._INPUTS, self._OUTPUTS):
            x, y = _to_canvas(point, x_off, y_off, canvas_w, canvas_h)
            draw_circle(surface, _label_color(target[0]), x, y, 3)


class CircleProblem(Problem):
    """Random points labelled by whether they fall inside a fixed circle."""

    _ARCHITECTURE = (2, 8, 16, 8, 1)
    _LEARNING_RATE = 0.15
    _EPOCHS = 10
    _NAME = "Circle Classification"

    CENTER_X = 0.5
    CENTER_Y = 0.5
    RADIUS = 0.3
    NUM_POINTS = 100
    DRAWN_POINTS = 50

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._inputs: list[list[float]] = []
        self._outputs: list[list[float]] = []

    def _generate(self) -> None:
        self._inputs = []
        self._outputs = []
        for _ in range(self.NUM_POINTS):
            x = self._rng.random()
            y = self._rng.random()
            self._inputs.append([x, y])
            dist = math.hypot(x - self.CENTER_X, y - self.CENTER_Y)
            self._outputs.append([1.0 if dist <= self.RADIUS else 0.0])

    def inputs(self) -> list[list[float]]:
        """Draw a fresh random sample and return it."""
        self._generate()
        return [list(p) for p in self._inputs]

    def outputs(self) -> list[list[float]]:
        return [list(t) for t in self._outputs]

    def render_points(self, surface, x_off, y_off, canvas_w, canvas_h) -> None:
        cx = int(self.CENTER_X * canvas_w) + x_off
        cy = int(self.CENTER_Y * canvas_h) + y_off
        r = int(self.RADIUS * canvas_w)
        for angle in range(0, 360, 2):
            rad = math.radians(angle)
            x = cx + int(r * math.cos(rad))
            y = cy + int(r * math.sin(rad))
            draw_circle(surface, BLUE, x, y, 1)

        drawn = zip(self._inputs[: self.DRAWN_POINTS], self._outputs)
        for point, target in drawn:
            x, y = _to_canvas(point, x_off, y_off, canvas_w, canvas_h)
            draw_circle(surface, _label_color(target[0]), x, y, 3)


class SpiralProblem(Problem):
    """Two interleaved spirals, one labelled 1 and the other 0."""

    _ARCHITECTURE = (2, 8, 8, 1)
    _LEARNING_RATE = 0.35
    _EPOCHS = 20
    _NAME = "Spiral Classification"

    NUM_POINTS = 200

    def __init__(self) -> None:
        self._inputs: list[list[float]] = []
        self._outputs: list[list[float]] = []

    def _generate(self) -> None:
        if self._inputs:
            return
        for i in range(self.NUM_POINTS):
            t = i / self.NUM_POINTS * 4 * math.pi
            r = t / (4 * math.pi)
            self._inputs.append(
                [0.5 + r * math.cos(t) * 0.5, 0.5 + r * math.sin(t) * 0.5]
            )
            self._outputs.append([1.0])
            self._inputs.append(
                [
                    0.5 + r * math.cos(t + math.pi) * 0.5,
                    0.5 + r * math.sin(t + math.pi) * 0.5,
                ]
            )
            self._outputs.append([0.0])

    def inputs(self) -> list[list[float]]:
        """Generate the spirals on first use and return them."""
        self._generate()
        return [list(p) for p in self._inputs]

    def outputs(self) -> list[list[float]]:
        return [list(t) for t in self._outputs]

    def render_points(self, surface, x_off, y_off, canvas_w, canvas_h) -> None:
        offsets = [
            (dx, dy)
            for dx in range(-3, 4)
            for dy in range(-3, 4)
            if dx * dx + dy * dy <= 9
        ]
        for point, target in zip(self._inputs, self._outputs):
            x, y = _to_canvas(point, x_off, y_off, canvas_w, canvas_h)
            color = _label_color(target[0])
            for dx, dy in offsets:
                surface.set_at((x + dx, y + dy), color)