"""Tests for the disjoint-set union-find."""

import pytest

from mststep.graphs import DisjointSet


class TestDisjointSet:
    """Tests for DisjointSet."""

    def test_initial_singletons(self):
        """Test that every element starts as its own root."""
        ds = DisjointSet(4)
        assert len(ds) == 4
        assert ds.parents() == (0, 1, 2, 3)
        assert [ds.find(i) for i in range(4)] == [0, 1, 2, 3]
        assert ds.roots() == [0, 1, 2, 3]

    def test_union_attaches_second_root_under_first(self):
        """Test the unbalanced union: root of x wins."""
        ds = DisjointSet(3)
        assert ds.union(2, 0) is True
        assert ds.parents() == (2, 1, 2)
        assert ds.find(0) == 2

    def test_union_same_set_returns_false(self):
        """Test that a cycle-closing union is refused and changes nothing."""
        ds = DisjointSet(3)
        ds.union(0, 1)
        ds.union(1, 2)
        before = ds.parents()
        assert ds.union(2, 0) is False
        assert ds.union(2, 0) is False
        assert ds.parents() == before

    def test_path_compression(self):
        """Test that find repoints every node on the path to the root."""
        ds = DisjointSet(4)
        # Chain 3 -> 2 -> 1 -> 0
        ds._parent[:] = [0, 0, 1, 2]

        assert ds.find(3) == 0
        assert ds.parents() == (0, 0, 0, 0)

    def test_connected(self):
        """Test connectivity queries."""
        ds = DisjointSet(5)
        ds.union(0, 1)
        ds.union(3, 4)
        assert ds.connected(0, 1)
        assert ds.connected(4, 3)
        assert not ds.connected(1, 3)
        assert ds.roots() == [0, 2, 3]

    def test_find_terminates_after_random_unions(self, rng):
        """Test acyclicity: finds terminate and unioned elements share a root."""
        n = 30
        ds = DisjointSet(n)
        pairs = []
        for _ in range(60):
            x, y = (int(v) for v in rng.integers(0, n, size=2))
            ds.union(x, y)
            pairs.append((x, y))

        roots = [ds.find(i) for i in range(n)]
        for root in roots:
            assert ds.parents()[root] == root
        for x, y in pairs:
            assert ds.find(x) == ds.find(y)
            assert ds.union(x, y) is False

    def test_parents_is_a_snapshot(self):
        """Test that the returned parents cannot alter the structure."""
        ds = DisjointSet(2)
        parents = ds.parents()
        assert isinstance(parents, tuple)
        ds.union(0, 1)
        assert parents == (0, 1)

    def test_out_of_range(self):
        """Test that unknown elements raise IndexError."""
        ds = DisjointSet(2)
        with pytest.raises(IndexError):
            ds.find(2)
        with pytest.raises(IndexError):
            ds.union(-1, 0)

    def test_negative_size(self):
        """Test size validation."""
        with pytest.raises(ValueError):
            DisjointSet(-1)

    def test_empty(self):
        """Test an empty structure."""
        ds = DisjointSet(0)
        assert len(ds) == 0
        assert ds.roots() == []
