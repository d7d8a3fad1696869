"""
Unit tests for AxisSelector

Ticks must stay min_spacing apart, higher priorities win contested slots,
and the sequence end is always labelled.
"""
import itertools
import random

import pytest

from lollyplot.layout import (
    AxisSelector,
    Marker,
    PRIORITY_DOMAIN,
    PRIORITY_END,
    PRIORITY_LOLLIPOP,
    PRIORITY_MOTIF,
    PRIORITY_START,
)

PRIORITIES = [PRIORITY_END, PRIORITY_LOLLIPOP, PRIORITY_DOMAIN, PRIORITY_MOTIF, PRIORITY_START]


def positions(ticks):
    return [t.position for t in ticks]


class TestSpacingForScale:
    """Tests for AxisSelector.spacing_for_scale"""

    def test_default_pixels(self):
        """20px at 4.7px per residue is 4 residues"""
        assert AxisSelector.spacing_for_scale(4.7) == 4

    def test_never_below_one(self):
        """Very wide scales still keep a spacing of 1"""
        assert AxisSelector.spacing_for_scale(100.0) == 1

    def test_custom_pixels(self):
        assert AxisSelector.spacing_for_scale(0.5, tick_spacing_px=30) == 60


class TestSelect:
    """Tests for AxisSelector.select"""

    def test_basic(self):
        candidates = [
            Marker(position=0, priority=PRIORITY_START),
            Marker(position=100, priority=PRIORITY_END),
            Marker(position=50, priority=PRIORITY_LOLLIPOP),
        ]
        ticks = AxisSelector(10).select(candidates)
        assert positions(ticks) == [0, 50, 100]
        assert [t.text for t in ticks] == ["0", "50", "100"]

    def test_empty(self):
        assert AxisSelector(10).select([]) == []

    @pytest.mark.parametrize("high,low", list(itertools.combinations(PRIORITIES, 2)))
    @pytest.mark.parametrize("high_first", [True, False])
    def test_higher_priority_wins(self, high, low, high_first):
        """Of two candidates closer than min_spacing only the higher priority is drawn"""
        high_pos, low_pos = (40, 45) if high_first else (45, 40)
        candidates = [
            Marker(position=low_pos, priority=low),
            Marker(position=high_pos, priority=high),
        ]
        ticks = AxisSelector(10).select(candidates)
        assert positions(ticks) == [high_pos]

    def test_equal_priority_earliest_wins(self):
        candidates = [
            Marker(position=45, priority=PRIORITY_DOMAIN),
            Marker(position=40, priority=PRIORITY_DOMAIN),
        ]
        assert positions(AxisSelector(10).select(candidates)) == [40]

    def test_duplicate_positions_drawn_once(self):
        """Several candidates at one position give one tick"""
        candidates = [
            Marker(position=30, priority=PRIORITY_DOMAIN),
            Marker(position=30, priority=PRIORITY_LOLLIPOP),
            Marker(position=30, priority=PRIORITY_DOMAIN),
        ]
        ticks = AxisSelector(5).select(candidates)
        assert positions(ticks) == [30]
        assert ticks[0].priority == PRIORITY_LOLLIPOP

    def test_start_yields_to_close_feature(self):
        """The start tick gives way to a nearby domain boundary"""
        candidates = [
            Marker(position=0, priority=PRIORITY_START),
            Marker(position=5, priority=PRIORITY_DOMAIN),
            Marker(position=100, priority=PRIORITY_END),
        ]
        assert positions(AxisSelector(10).select(candidates)) == [5, 100]

    def test_end_always_drawn(self):
        """Dense candidates near the end never suppress the end tick"""
        candidates = [Marker(position=0, priority=PRIORITY_START),
                      Marker(position=100, priority=PRIORITY_END)]
        candidates += [Marker(position=p, priority=PRIORITY_LOLLIPOP) for p in range(85, 100)]
        ticks = AxisSelector(10).select(candidates)
        assert ticks[-1].position == 100
        assert ticks[-1].priority == PRIORITY_END

    def test_tick_near_end_gives_way(self):
        """A candidate whose window reaches the end is dropped for the end tick"""
        candidates = [
            Marker(position=0, priority=PRIORITY_START),
            Marker(position=95, priority=PRIORITY_LOLLIPOP),
            Marker(position=100, priority=PRIORITY_END),
        ]
        ticks = AxisSelector(10).select(candidates)
        assert positions(ticks) == [0, 100]

    @pytest.mark.parametrize("seed", range(10))
    def test_spacing_respected(self, seed):
        """Drawn ticks are increasing and at least min_spacing apart"""
        rng = random.Random(seed)
        length = 500
        spacing = rng.randint(3, 40)
        candidates = [Marker(position=0, priority=PRIORITY_START),
                      Marker(position=length, priority=PRIORITY_END)]
        for _ in range(60):
            candidates.append(Marker(position=rng.randint(1, length - 1),
                                     priority=rng.choice(PRIORITIES[1:])))
        ticks = AxisSelector(spacing).select(candidates)

        assert ticks[-1].position == length
        for a, b in zip(ticks, ticks[1:]):
            assert b.position > a.position
            assert b.position - a.position >= spacing

    def test_input_order_irrelevant(self):
        candidates = [
            Marker(position=0, priority=PRIORITY_START),
            Marker(position=33, priority=PRIORITY_MOTIF),
            Marker(position=60, priority=PRIORITY_LOLLIPOP),
            Marker(position=64, priority=PRIORITY_DOMAIN),
            Marker(position=120, priority=PRIORITY_END),
        ]
        forward = positions(AxisSelector(10).select(candidates))
        backward = positions(AxisSelector(10).select(list(reversed(candidates))))
        assert forward == backward == [0, 33, 60, 120]
