"""Tests for the shared edge builder and proximity graphs."""

import numpy as np

from sigil.engine.edges import EdgeBuilder, add_nearest_neighbors, add_proximity_chords, neighbor_order
from sigil.engine.seed import SeededRandom


class TestEdgeBuilder:
    def test_dedups_unordered_pairs(self):
        b = EdgeBuilder(3)
        assert b.add(0, 1)
        assert not b.add(1, 0)
        assert not b.add(0, 1)
        assert b.edges == [(0, 1)]

    def test_drops_self_loops_and_out_of_range(self):
        b = EdgeBuilder(3)
        assert not b.add(1, 1)
        assert not b.add(0, 3)
        assert not b.add(-1, 2)
        assert len(b) == 0

    def test_chain_and_ring(self):
        b = EdgeBuilder(4)
        b.ring([0, 1, 2, 3])
        assert b.edges == [(0, 1), (1, 2), (2, 3), (3, 0)]

    def test_ring_of_two_is_single_edge(self):
        b = EdgeBuilder(2)
        b.ring([0, 1])
        assert b.edges == [(0, 1)]

    def test_skip_wrapping(self):
        b = EdgeBuilder(5)
        b.skip(2)
        assert b.edges == [(0, 2), (1, 3), (2, 4), (3, 0), (4, 1)]

    def test_skip_without_wrap(self):
        b = EdgeBuilder(5)
        b.skip(3, wrap=False)
        assert b.edges == [(0, 3), (1, 4)]


def test_neighbor_order_breaks_ties_by_index():
    # Point 0 at the middle, 1 and 2 equidistant on either side
    coords = np.array([[0.0, 0.0], [1.0, 0.0], [-1.0, 0.0], [5.0, 0.0]])
    order = neighbor_order(coords)
    assert order[0] == [1, 2, 3]
    assert order[3] == [1, 0, 2]


def test_neighbor_order_small_inputs():
    assert neighbor_order(np.empty((0, 2))) == []
    assert neighbor_order(np.array([[1.0, 1.0]])) == [[]]


def test_nearest_neighbors_connects_every_point():
    rng = SeededRandom(3)
    coords = np.array([[0.0, 0.0], [10.0, 0.0], [0.0, 10.0], [50.0, 50.0]])
    b = EdgeBuilder(4)
    add_nearest_neighbors(b, coords, rng)
    touched = {i for e in b.edges for i in e}
    assert touched == {0, 1, 2, 3}


def test_proximity_chords_respect_distance():
    coords = np.array([[0.0, 0.0], [1.0, 0.0], [100.0, 0.0]])
    b = EdgeBuilder(3)
    add_proximity_chords(b, coords, SeededRandom(1), max_distance=5.0, probability=1.0)
    assert b.edges == [(0, 1)]

    b = EdgeBuilder(3)
    add_proximity_chords(b, coords, SeededRandom(1), max_distance=5.0, probability=0.0)
    assert b.edges == []
