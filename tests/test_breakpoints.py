"""
test_breakpoints.py — Tests for breakpoint derivation

Only the first start and the last end of the region set are annotated.
"""

from hivmap.breakpoints import Breakpoint, calculate_breakpoints
from hivmap.parser import SubtypeRegion


def _regions(*spans):
    return [SubtypeRegion(s, e, "B", "#3F98F2") for s, e in spans]


class TestBreakpointCount:

    def test_empty(self):
        assert calculate_breakpoints([]) == []

    def test_single_region_gives_start_only(self):
        points = calculate_breakpoints(_regions((300, 900)))
        assert points == [Breakpoint(300, 300, is_first=True, is_last=False)]

    def test_two_regions(self):
        points = calculate_breakpoints(_regions((100, 500), (500, 1000)))
        assert [(p.position, p.is_first, p.is_last) for p in points] == [
            (100, True, False),
            (1000, False, True),
        ]

    def test_five_regions_gives_two(self):
        regions = _regions((100, 500), (500, 1000), (1000, 2000), (2000, 4000), (4000, 9000))
        points = calculate_breakpoints(regions)
        assert len(points) == 2
        assert points[0].position == 100
        assert points[1].position == 9000


class TestBreakpointOrdering:

    def test_unsorted_input(self):
        regions = _regions((4000, 5000), (100, 300), (2000, 2500))
        points = calculate_breakpoints(regions)
        assert [p.position for p in points] == [100, 5000]

    def test_input_not_modified(self):
        regions = _regions((4000, 5000), (100, 300))
        before = list(regions)
        calculate_breakpoints(regions)
        assert regions == before

    def test_last_end_taken_from_last_started_region(self):
        """The end comes from the region with the largest start, not the largest end."""
        regions = _regions((100, 9000), (200, 300))
        points = calculate_breakpoints(regions)
        assert [p.position for p in points] == [100, 300]

    def test_stable_on_tied_starts(self):
        regions = [
            SubtypeRegion(100, 400, "B", "#3F98F2"),
            SubtypeRegion(100, 200, "C", "#9D6039"),
        ]
        points = calculate_breakpoints(regions)
        assert points[-1].position == 200

    def test_display_value_matches_position(self):
        for p in calculate_breakpoints(_regions((10, 20), (30, 40))):
            assert p.display_value == p.position
