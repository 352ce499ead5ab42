"""Test module for wheelpath.legacy

The tests are run using pytest.
"""

import logging
import math

import pytest

from wheelpath.common import DegenerateLineError, InvalidParameterError
from wheelpath.legacy import (
    _sector_angles_to_rad,
    deg_to_rad,
    get_left_parallel_line,
    get_point_on_circle,
    get_right_parallel_line,
    get_wheel_segment_arc_text_path,
    get_wheel_segment_arc_text_paths,
    get_wheel_segment_line_text_path,
    get_wheel_segment_line_text_paths,
    get_wheel_segment_path,
    get_wheel_segment_paths,
)
from wheelpath.sector import (
    annulus_sector_arc_text_path,
    annulus_sector_line_text_path,
    annulus_sector_path,
)
from wheelpath.svgpath import SvgPath


class TestDegToRad:
    """Test class for the degree conversion."""

    @pytest.mark.parametrize(
        "deg, expected",
        [
            (0, -math.pi / 2),
            (90, 0.0),
            (180, math.pi / 2),
            (360, -math.pi / 2),
            (450, 0.0),
            (-30, -2 * math.pi / 3),
        ],
    )
    def test_deg_to_rad(self, deg, expected):
        """0 degrees is the top of the circle and the remainder keeps the sign."""
        assert deg_to_rad(deg) == pytest.approx(expected)

    def test_point_on_circle_from_top(self):
        """0 degrees is at the top, 90 degrees at the right."""
        assert get_point_on_circle(0, 100) == pytest.approx((0.0, -100.0))
        assert get_point_on_circle(90, 100, (10, 10)) == pytest.approx((110.0, 10.0))

    def test_parallel_lines(self):
        """The parallel line functions are the same as in wheelpath.geom."""
        assert get_left_parallel_line((0, 0), (10, 0), 5).start == pytest.approx((0.0, -5.0))
        assert get_right_parallel_line((0, 0), (10, 0), 5).start == pytest.approx((0.0, 5.0))
        with pytest.raises(DegenerateLineError):
            get_right_parallel_line((0, 0), (0, 0), 5)


class TestWheelSegments:
    """Test class for the degree based wheel segment functions."""

    def test_segment_equals_annulus_sector(self):
        """The degree based function converts the angles and delegates."""
        result = get_wheel_segment_path(0, 90, 150, 50, 20, (0, 0))
        assert result == annulus_sector_path(deg_to_rad(0), deg_to_rad(90), 150, 50, 20, (0, 0))
        assert result == "M 10 -149.67 A 150 150 0 0 1 149.67 -10 L 48.99 -10 A 50 50 0 0 0 10 -48.99 Z"

    def test_text_paths_equal_annulus_sector(self):
        """The text guides delegate as well."""
        assert get_wheel_segment_arc_text_path(90, 180, 150, 50, 20) == annulus_sector_arc_text_path(
            deg_to_rad(90), deg_to_rad(180), 150, 50, 20
        )
        assert get_wheel_segment_line_text_path(90, 180, 150, 50, 20) == annulus_sector_line_text_path(
            deg_to_rad(90), deg_to_rad(180), 150, 50, 20
        )

    def test_line_text_path_of_last_segment_stays_in_segment(self):
        """A segment ending at 360 degrees keeps its middle angle at 315 degrees."""
        path = get_wheel_segment_line_text_path(270, 360, 150, 50)
        first, last = [args for _, args in SvgPath.split_commands(path)]
        for x, y in (first, last):
            assert x < 0
            assert y < 0
            assert x == pytest.approx(y)

    def test_segment_paths(self):
        """Segments are counted clockwise from the top plus the offset."""
        paths = get_wheel_segment_paths(4, 150, 50, 20)
        assert len(paths) == 4
        assert paths[0] == get_wheel_segment_path(0, 90, 150, 50, 20)
        assert paths[2] == get_wheel_segment_path(180, 270, 150, 50, 20)

        shifted = get_wheel_segment_paths(4, 150, 50, 20, 90)
        assert shifted[0] == paths[1]

    def test_text_segment_paths(self):
        """One guide per segment."""
        assert len(get_wheel_segment_arc_text_paths(6, 150, 50, 20)) == 6
        line_paths = get_wheel_segment_line_text_paths(6, 150, 50, 20)
        assert len(line_paths) == 6
        assert line_paths[0] == get_wheel_segment_line_text_path(0, 60, 150, 50, 20)

    def test_invalid_segment_count(self):
        """segment_count 0 is rejected."""
        with pytest.raises(InvalidParameterError):
            get_wheel_segment_paths(0, 150)


class TestSegmentAngleConversion:
    """Test class for the conversion of a segment's start and end angle."""

    def test_both_angles_converted_with_deg_to_rad(self):
        """Without wrap both angles are exactly deg_to_rad of the given angles."""
        assert _sector_angles_to_rad(0, 90) == (deg_to_rad(0), deg_to_rad(90))
        assert _sector_angles_to_rad(30, 60) == (deg_to_rad(30), deg_to_rad(60))

    def test_end_at_full_turn_moved_by_one_turn(self):
        """360 folds to 0, so one turn is added to the converted end angle."""
        start_rad, end_rad = _sector_angles_to_rad(270, 360)
        assert start_rad == deg_to_rad(270)
        assert end_rad == deg_to_rad(360) + 2 * math.pi
        assert end_rad - start_rad == pytest.approx(math.pi / 2)

    def test_reversed_segment_is_not_moved(self):
        """An end angle before the start angle keeps its negative span."""
        assert _sector_angles_to_rad(90, 0) == (deg_to_rad(90), deg_to_rad(0))

    def test_conversion_is_logged(self, caplog):
        """Each conversion writes a debug record."""
        with caplog.at_level(logging.DEBUG, logger="wheelpath.legacy"):
            _sector_angles_to_rad(270, 360)
        assert any(
            record.levelno == logging.DEBUG and "1 turns added" in record.getMessage() for record in caplog.records
        )
