"""
Unit tests for SliceLayoutEngine

Covers the slice partition, event bucketing, dot cap and radial clipping,
out-of-range policies and configuration validation.
"""
import logging
import math

import pytest

from radialcal.config import DotPlacementConfig, LayoutConfig
from radialcal.errors import InvalidConfiguration, OutOfRangeEvent
from radialcal.layout import SliceLayoutEngine, compute_slices


def _angle_of(point, center=(100.0, 100.0)):
    """Screen angle of a point in degrees, in [-180, 180)"""
    return math.degrees(math.atan2(point[1] - center[1], point[0] - center[0]))


class TestPartition:
    """Slices cover the circle exactly, starting at the top, clockwise"""

    @pytest.mark.parametrize("n", [1, 2, 4, 7, 12, 24])
    def test_count_and_order(self, engine, n):
        slices = engine.compute([], n)
        assert len(slices) == n
        assert [s.index for s in slices] == list(range(n))
        assert [s.id for s in slices] == [f"slice-{i}" for i in range(n)]

    @pytest.mark.parametrize("n", [3, 4, 7, 12])
    def test_spans_sum_to_full_circle(self, engine, n):
        slices = engine.compute([], n)
        for s in slices:
            assert s.angle_span == pytest.approx(360 / n)
        assert sum(s.angle_span for s in slices) == pytest.approx(360.0)

    def test_slices_are_contiguous(self, engine):
        slices = engine.compute([], 7)
        for current, following in zip(slices, slices[1:]):
            assert current.end_angle == following.start_angle
        assert slices[0].start_angle == -90
        assert slices[-1].end_angle == pytest.approx(270.0)

    def test_slice_zero_starts_at_top(self, engine):
        first = engine.compute([], 12)[0]
        x, y = first.path.start
        assert x == pytest.approx(100.0)
        assert y == pytest.approx(5.0)

    def test_indices_increase_clockwise(self, engine):
        # On screen (y down) clockwise means the angle grows
        slices = engine.compute([], 12)
        angles = [_angle_of(s.path.start) % 360 for s in slices]
        unwrapped = [(a - angles[0]) % 360 for a in angles]
        assert unwrapped == sorted(unwrapped)
        # Slice 3 of 12 starts at the right edge (3 o'clock)
        x, y = slices[3].path.start
        assert x == pytest.approx(195.0)
        assert y == pytest.approx(100.0)

    def test_path_points_on_circle(self, engine):
        for s in engine.compute([], 7):
            for point in (s.path.start, s.path.end):
                assert math.dist(point, (100.0, 100.0)) == pytest.approx(95.0)


class TestWedgePath:
    """Wedge path description"""

    def test_svg_structure(self, engine):
        d = engine.compute([], 4)[0].d
        assert d.startswith("M 100 100 L 100 5 A 95 95 0 0 1 ")
        assert d.endswith(" Z")

    def test_large_arc_flag(self, engine):
        assert engine.compute([], 2)[0].path.large_arc == 0
        assert engine.compute([], 1)[0].path.large_arc == 1
        assert all(s.path.sweep == 1 for s in engine.compute([], 3))

    def test_view_box_scales_geometry(self, engine):
        s = engine.compute([], 4, view_box_size=100)[0]
        assert s.path.center == (50.0, 50.0)
        assert s.path.radius == pytest.approx(47.5)


class TestBucketing:
    """Events land in exactly the slice named by their index"""

    def test_each_event_in_its_slice_only(self, engine, make_event):
        events = [make_event("a", 0), make_event("b", 5), make_event("c", 11), make_event("d", 5)]
        slices = engine.compute(events, 12)
        for event in events:
            owners = [s.index for s in slices if event in s.original_events]
            assert owners == [event.slice_index]

    def test_input_order_preserved(self, engine, make_event):
        events = [make_event(str(k), 2) for k in (3, 1, 2, 0)]
        slices = engine.compute(events, 4)
        assert [e.id for e in slices[2].original_events] == ["3", "1", "2", "0"]
        assert [d.id for d in slices[2].event_dots] == ["3", "1", "2"]

    def test_original_events_uncapped(self, engine, four_at_nine):
        nine = engine.compute(four_at_nine, 12)[9]
        assert nine.original_events == tuple(four_at_nine)
        assert nine.n_hidden == 1

    def test_events_are_not_mutated(self, engine, four_at_nine):
        before = list(four_at_nine)
        engine.compute(four_at_nine, 12)
        assert four_at_nine == before

    def test_accepts_generator(self, engine, make_event):
        slices = engine.compute((make_event(str(i), i) for i in range(3)), 3)
        assert [s.n_events for s in slices] == [1, 1, 1]


class TestDotPlacement:
    """Cap, radial clipping and dot coordinates"""

    def test_cap(self, engine, make_event):
        events = [make_event(str(k), 0) for k in range(10)]
        slices = engine.compute(events, 4)
        assert len(slices[0].event_dots) == 3
        assert slices[0].n_events == 10

    def test_never_padded(self, engine, make_event):
        slices = engine.compute([make_event("only", 1)], 4)
        assert len(slices[1].event_dots) == 1
        assert all(len(s.event_dots) == 0 for s in slices if s.index != 1)

    def test_zero_cap(self, engine, four_at_nine):
        placement = DotPlacementConfig(max_dots_per_slice=0)
        nine = engine.compute(four_at_nine, 12, dot_placement=placement)[9]
        assert nine.event_dots == ()
        assert nine.n_events == 4

    def test_distance_strictly_increasing(self, engine, make_event):
        placement = DotPlacementConfig(0.1, 0.1, 10)
        events = [make_event(str(k), 0) for k in range(10)]
        dots = engine.compute(events, 4, dot_placement=placement)[0].event_dots
        distances = [d.distance for d in dots]
        assert len(distances) > 1
        assert all(a < b for a, b in zip(distances, distances[1:]))

    def test_all_dots_inside_clip_radius(self, engine, make_event):
        placement = DotPlacementConfig(0.2, 0.1, 20)
        events = [make_event(str(k), 3) for k in range(20)]
        dots = engine.compute(events, 12, dot_placement=placement)[3].event_dots
        assert dots
        assert all(d.distance < 0.88 * 95 for d in dots)
        # 0.2, 0.3, ... 0.8 fit; 0.9 onwards is clipped
        assert len(dots) == 7

    def test_every_candidate_beyond_clip_dropped(self, engine, four_at_nine):
        placement = DotPlacementConfig(0.9, 0.0, 3)
        nine = engine.compute(four_at_nine, 12, dot_placement=placement)[9]
        assert nine.event_dots == ()
        assert nine.n_events == 4

    def test_zero_increment_stacks_dots(self, engine, four_at_nine):
        placement = DotPlacementConfig(0.5, 0.0, 3)
        dots = engine.compute(four_at_nine, 12, dot_placement=placement)[9].event_dots
        assert len(dots) == 3
        assert len({(d.cx, d.cy) for d in dots}) == 1

    def test_dot_style(self, engine, four_at_nine):
        dots = engine.compute(four_at_nine, 12)[9].event_dots
        assert [d.fill for d in dots] == ['#ff0000', '#00ff00', '#0000ff']
        assert all(d.radius == pytest.approx(3.6) for d in dots)

    def test_dots_on_mid_angle(self, engine, make_event):
        slices = engine.compute([make_event(str(i), i) for i in range(7)], 7)
        for s in slices:
            dot = s.event_dots[0]
            assert _angle_of((dot.cx, dot.cy)) % 360 == pytest.approx(s.mid_angle % 360)


class TestIdempotence:
    def test_same_inputs_same_output(self, engine, four_at_nine):
        assert engine.compute(four_at_nine, 12) == engine.compute(four_at_nine, 12)

    def test_convenience_matches_engine(self, engine, four_at_nine):
        assert compute_slices(four_at_nine, 12) == engine.compute(four_at_nine, 12)

    def test_results_are_independent(self, engine, make_event):
        first = engine.compute([make_event("a", 0)], 4)
        engine.compute([make_event("b", 0), make_event("c", 0)], 4)
        assert [e.id for e in first[0].original_events] == ["a"]


class TestOutOfRange:
    """Events whose slice index is outside [0, N)"""

    def test_drop_is_default(self, engine, make_event):
        events = [make_event("low", -1), make_event("high", 12), make_event("ok", 4)]
        slices = engine.compute(events, 12)
        bucketed = [e.id for s in slices for e in s.original_events]
        assert bucketed == ["ok"]

    def test_drop_logs_warning(self, engine, make_event, caplog):
        with caplog.at_level(logging.WARNING, logger="radialcal.layout.engine"):
            engine.compute([make_event("x", 99)], 12)
        assert "Dropped 1 event(s)" in caplog.text

    def test_no_warning_when_all_in_range(self, engine, make_event, caplog):
        with caplog.at_level(logging.WARNING, logger="radialcal.layout.engine"):
            engine.compute([make_event("x", 3)], 12)
        assert caplog.text == ""

    def test_clamp(self, engine, make_event):
        low, high = make_event("low", -3), make_event("high", 40)
        slices = engine.compute([low, high], 12, out_of_range='clamp')
        assert slices[0].original_events == (low,)
        assert slices[11].original_events == (high,)
        # The events themselves keep their index
        assert slices[11].original_events[0].slice_index == 40

    def test_reject(self, engine, make_event):
        events = [make_event("a", 1), make_event("bad1", 4), make_event("bad2", -1)]
        with pytest.raises(OutOfRangeEvent) as excinfo:
            engine.compute(events, 4, out_of_range='reject')
        assert excinfo.value.event_ids == ["bad1", "bad2"]
        assert excinfo.value.number_of_slices == 4
        assert isinstance(excinfo.value, ValueError)

    @pytest.mark.parametrize("bad_index", [2.5, None, "3", True])
    def test_non_integer_index_left_out(self, engine, make_event, bad_index, caplog):
        events = [make_event("ok", 1), make_event("bad", bad_index), make_event("ok2", 3)]
        with caplog.at_level(logging.WARNING, logger="radialcal.layout.engine"):
            slices = engine.compute(events, 4)
        assert [e.id for s in slices for e in s.original_events] == ["ok", "ok2"]
        assert "1 with a non-integer index" in caplog.text

    @pytest.mark.parametrize("bad_index", [2.5, None])
    def test_non_integer_index_not_clamped(self, engine, make_event, bad_index):
        events = [make_event("bad", bad_index), make_event("high", 9)]
        slices = engine.compute(events, 4, out_of_range='clamp')
        assert [e.id for s in slices for e in s.original_events] == ["high"]
        assert slices[3].n_events == 1

    def test_non_integer_index_rejected(self, engine, make_event):
        events = [make_event("frac", 2.5), make_event("ok", 0), make_event("none", None)]
        with pytest.raises(OutOfRangeEvent) as excinfo:
            engine.compute(events, 4, out_of_range='reject')
        assert excinfo.value.event_ids == ["frac", "none"]

    def test_policy_from_config(self, make_event):
        engine = SliceLayoutEngine(LayoutConfig(out_of_range='clamp'))
        slices = engine.compute([make_event("high", 5)], 4)
        assert slices[3].n_events == 1


class TestValidation:
    """Invalid configuration is rejected before any layout happens"""

    @pytest.mark.parametrize("n", [0, -1, 2.5, True, "12"])
    def test_bad_slice_count(self, engine, n):
        with pytest.raises(InvalidConfiguration):
            engine.compute([], n)

    @pytest.mark.parametrize("size", [0, -200, float("nan"), float("inf")])
    def test_bad_view_box(self, engine, size):
        with pytest.raises(InvalidConfiguration):
            engine.compute([], 4, view_box_size=size)

    @pytest.mark.parametrize("placement", [
        DotPlacementConfig(start_radius_factor=-0.1),
        DotPlacementConfig(start_radius_factor=float("nan")),
        DotPlacementConfig(radius_increment_factor=float("inf")),
        DotPlacementConfig(radius_increment_factor=-0.15),
        DotPlacementConfig(max_dots_per_slice=-1),
        DotPlacementConfig(max_dots_per_slice=2.5),
    ])
    def test_bad_placement(self, engine, placement):
        with pytest.raises(InvalidConfiguration):
            engine.compute([], 4, dot_placement=placement)

    def test_non_numeric_view_box(self, engine):
        with pytest.raises(InvalidConfiguration, match="view_box_size"):
            engine.compute([], 4, view_box_size="200")

    @pytest.mark.parametrize("placement", [
        DotPlacementConfig(start_radius_factor="0.45"),
        DotPlacementConfig(radius_increment_factor=None),
    ])
    def test_non_numeric_factor(self, engine, placement):
        with pytest.raises(InvalidConfiguration, match="factor"):
            engine.compute([], 4, dot_placement=placement)

    def test_bad_policy(self, engine):
        with pytest.raises(InvalidConfiguration, match="out_of_range"):
            engine.compute([], 4, out_of_range='ignore')

    def test_is_value_error(self, engine):
        with pytest.raises(ValueError):
            engine.compute([], 0)
