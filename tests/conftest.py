"""Shared graph fixtures.

Each fixture returns a dict of vertices keyed by id, built fresh per test.
"""

from __future__ import annotations

import pytest

from dagpath.config import EngineConfig, TraversalMode
from dagpath.engine import PathEngine
from dagpath.graph import build_vertices


@pytest.fixture(params=[TraversalMode.RECURSIVE, TraversalMode.ITERATIVE])
def engine(request) -> PathEngine:
    """Fresh engine, once per traversal mode."""
    return PathEngine(EngineConfig(mode=request.param))


@pytest.fixture
def disconnected():
    #  1──►2     3──►4
    return build_vertices([(1, 2), (3, 4)])


@pytest.fixture
def diamond():
    #        ┌──►2──►5──►6──┐
    #        │              ▼
    #   1 ───┼──►3─────────►7
    #        │   ▲          ▲
    #        └──►4──────────┘
    #            (4──►3 twice)
    return build_vertices(
        [
            (1, 2),
            (1, 3),
            (1, 4),
            (2, 5),
            (3, 7),
            (4, 3),
            (4, 7),
            (4, 3),
            (5, 6),
            (6, 7),
        ],
        nodes=range(1, 8),
    )


@pytest.fixture
def two_cycle():
    #  1◄──►2
    return build_vertices([(1, 2), (2, 1)])
