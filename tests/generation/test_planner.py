"""Tests for unique slot planning."""

import pytest

from layersmith.core.errors import PlannerError
from layersmith.core.models import UniqueArtwork
from layersmith.generation import DeterministicSequencer, plan_unique_slots


def _artworks(count):
    return [UniqueArtwork(name=f"art{i}") for i in range(count)]


class TestPlanner:
    """Tests for plan_unique_slots."""

    def test_reserves_distinct_slots(self):
        slots = plan_unique_slots(_artworks(5), 10, DeterministicSequencer(3))
        assert len(slots) == 5
        assert all(0 <= index < 10 for index in slots)

    def test_artworks_reserved_in_supplied_order(self):
        artworks = _artworks(4)
        slots = plan_unique_slots(artworks, 50, DeterministicSequencer(9))
        assert [a.name for a in slots.values()] == [a.name for a in artworks]

    def test_deterministic(self):
        a = plan_unique_slots(_artworks(3), 100, DeterministicSequencer("s"))
        b = plan_unique_slots(_artworks(3), 100, DeterministicSequencer("s"))
        assert list(a.keys()) == list(b.keys())

    def test_dense_packing_terminates(self):
        seq = DeterministicSequencer(11)
        slots = plan_unique_slots(_artworks(19), 20, seq)
        assert len(set(slots)) == 19
        assert seq.draws >= 19

    def test_no_artworks_consumes_nothing(self):
        seq = DeterministicSequencer(1)
        assert plan_unique_slots([], 10, seq) == {}
        assert seq.draws == 0

    @pytest.mark.parametrize("count,total", [(3, 3), (5, 2)])
    def test_too_many_artworks(self, count, total):
        with pytest.raises(PlannerError):
            plan_unique_slots(_artworks(count), total, DeterministicSequencer(1))
