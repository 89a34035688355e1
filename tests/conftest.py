"""
Shared fixtures for the letter grader tests.

Coordinates assume the default 400x400 canvas, where the guide lines sit
at L1=74, L2=158, L3=242 and L4=326 pixels.
"""

import numpy as np
import pytest

from fourline_grading import GradingConfig, LetterGrader, StrokeSet
from fourline_grading.logging import create_logger

CANVAS = 400


def grid_strokes(x0, x1, y0, y1, rows=8, cols=5) -> StrokeSet:
    """Horizontal strokes evenly covering the box [x0, x1] x [y0, y1]."""
    xs = np.linspace(x0, x1, cols)
    return StrokeSet(strokes=tuple(
        tuple((float(x), float(y)) for x in xs)
        for y in np.linspace(y0, y1, rows)
    ))


def line_strokes(start, end, count=30) -> StrokeSet:
    """A single straight stroke of ``count`` points."""
    xs = np.linspace(start[0], end[0], count)
    ys = np.linspace(start[1], end[1], count)
    return StrokeSet(strokes=(tuple(zip(xs.tolist(), ys.tolist())),))


@pytest.fixture
def config():
    return GradingConfig()


@pytest.fixture
def grader(config):
    return LetterGrader(config, logger=create_logger("test"))


@pytest.fixture
def make_grid():
    return grid_strokes


@pytest.fixture
def make_line():
    return line_strokes


def path_strokes(*paths, samples=10) -> StrokeSet:
    """One stroke per vertex path, each segment sampled at ``samples`` points."""
    strokes = []
    for path in paths:
        points = [tuple(map(float, path[0]))]
        for start, end in zip(path[:-1], path[1:]):
            for t in np.linspace(0.0, 1.0, samples + 1)[1:]:
                points.append((
                    float(start[0] + (end[0] - start[0]) * t),
                    float(start[1] + (end[1] - start[1]) * t),
                ))
        strokes.append(tuple(points))
    return StrokeSet(strokes=tuple(strokes))


def circle_strokes(center, radius, count=40) -> StrokeSet:
    """A single closed stroke tracing a circle."""
    angles = np.linspace(0.0, 2 * np.pi, count + 1)
    return StrokeSet(strokes=(tuple(
        (float(center[0] + radius * np.cos(a)), float(center[1] + radius * np.sin(a)))
        for a in angles
    ),))


@pytest.fixture
def make_path():
    return path_strokes


@pytest.fixture
def make_circle():
    return circle_strokes
