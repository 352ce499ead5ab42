"""Test module for wheelpath.wheel

The tests are run using pytest.
"""

import math

import pytest

from wheelpath.common import InvalidParameterError, NoIntersectionError
from wheelpath.sector import (
    annulus_sector_arc_text_path,
    annulus_sector_line_text_path,
    annulus_sector_path,
)
from wheelpath.svgpath import SvgPath
from wheelpath.wheel import (
    WheelParams,
    annulus_sector_arc_text_paths,
    annulus_sector_arc_text_paths_from_params,
    annulus_sector_line_text_paths,
    annulus_sector_line_text_paths_from_params,
    annulus_sector_paths,
    annulus_sector_paths_from_params,
    sector_angles,
)

###############################################################################
# Sector angles
###############################################################################


class TestSectorAngles:
    """Test class for the partition of the full turn."""

    @pytest.mark.parametrize("sector_count", [1, 2, 3, 7, 12, 36])
    def test_spans_sum_to_full_turn(self, sector_count):
        """Equal spans that add up to 2 pi."""
        angles = sector_angles(sector_count)
        spans = [end - start for start, end in angles]
        assert len(angles) == sector_count
        assert sum(spans) == pytest.approx(2 * math.pi)
        assert spans == pytest.approx([2 * math.pi / sector_count] * sector_count)

    def test_sectors_are_contiguous(self):
        """Each sector starts where the previous one ends."""
        angles = sector_angles(5, 0.3)
        assert angles[0][0] == 0.3
        for (_, previous_end), (start, _) in zip(angles, angles[1:]):
            assert start == pytest.approx(previous_end)
        assert angles[-1][1] == pytest.approx(0.3 + 2 * math.pi)

    @pytest.mark.parametrize("sector_count", [0, -1, 2.5, "3", True, None])
    def test_invalid_sector_count(self, sector_count):
        """Only integers >= 1 are accepted."""
        with pytest.raises(InvalidParameterError):
            sector_angles(sector_count)


###############################################################################
# Batch builders
###############################################################################


class TestAnnulusSectorPaths:
    """Test class for the batch builders."""

    def test_eight_sectors(self):
        """Every sector is a closed path."""
        paths = annulus_sector_paths(8, 150, 50, 20)
        assert len(paths) == 8
        for path in paths:
            assert path.startswith("M ")
            assert path.endswith("Z")
            assert SvgPath.command_letters(path) == "MALAZ"

    @pytest.mark.parametrize("sector_count", range(1, 13))
    def test_returns_one_path_per_sector(self, sector_count):
        """n sectors give n paths."""
        assert len(annulus_sector_paths(sector_count, 150, 50, 20)) == sector_count
        assert len(annulus_sector_arc_text_paths(sector_count, 150, 50, 20)) == sector_count
        assert len(annulus_sector_line_text_paths(sector_count, 150, 50, 20)) == sector_count

    def test_order_matches_index(self):
        """Path i is the i-th sector counted from the angle offset."""
        span = 2 * math.pi / 4
        paths = annulus_sector_paths(4, 150, 50, 20)
        for index, path in enumerate(paths):
            start_angle = 0 + index * span
            assert path == annulus_sector_path(start_angle, start_angle + span, 150, 50, 20)

    def test_angle_offset_and_center(self):
        """The offset rotates the first sector, the center moves all of them."""
        span = 2 * math.pi / 6
        paths = annulus_sector_paths(6, 100, 30, 8, 0.25, (50, 60))
        assert paths[0] == annulus_sector_path(0.25, 0.25 + span, 100, 30, 8, (50, 60))

    def test_text_paths_delegate(self):
        """Text guide batches use the single-sector builders."""
        span = 2 * math.pi / 3
        assert annulus_sector_arc_text_paths(3, 150, 50, 20)[1] == annulus_sector_arc_text_path(
            span, span + span, 150, 50, 20
        )
        assert annulus_sector_line_text_paths(3, 150, 50, 20)[2] == annulus_sector_line_text_path(
            2 * span, 2 * span + span, 150, 50, 20
        )

    def test_defaults_give_pie_slices(self):
        """Without inner radius and spoke all sectors meet in the center."""
        for path in annulus_sector_paths(4, 150):
            assert path.endswith("L 0 0 Z")

    def test_invalid_sector_count(self):
        """sector_count 0 is rejected before any geometry is computed."""
        with pytest.raises(InvalidParameterError):
            annulus_sector_paths(0, 150, 50, 20)

    def test_single_sector_with_spoke_and_no_ring(self):
        """A single sector whose edges never meet cannot be closed."""
        with pytest.raises(NoIntersectionError):
            annulus_sector_paths(1, 150, 10, 20)


###############################################################################
# WheelParams
###############################################################################


class TestWheelParams:
    """Test class for WheelParams."""

    def test_defaults(self):
        """Only the outer radius is required."""
        params = WheelParams(150)
        assert params.inner_radius == 0
        assert params.spoke_width == 0
        assert params.angle_offset == 0
        assert params.center == (0, 0)

    def test_paths_match_functions(self):
        """The methods call the batch builders with the stored dimensions."""
        params = WheelParams(150, 50, 20, 0.5, (10, 10))
        assert params.sector_paths(5) == annulus_sector_paths(5, 150, 50, 20, 0.5, (10, 10))
        assert params.arc_text_paths(5) == annulus_sector_arc_text_paths(5, 150, 50, 20, 0.5, (10, 10))
        assert params.line_text_paths(5) == annulus_sector_line_text_paths(5, 150, 50, 20, 0.5, (10, 10))
        assert params.sector_angles(5) == sector_angles(5, 0.5)

    def test_dict_round_trip(self):
        """to_dict and from_dict are inverse."""
        params = WheelParams(150, 50, 20, 0.5, (10, 20))
        data = params.to_dict()
        assert data["center"] == {"x": 10, "y": 20}
        assert WheelParams.from_dict(data) == params

    def test_from_dict_defaults(self):
        """Missing keys get their default values."""
        params = WheelParams.from_dict({"outer_radius": 80, "center": (1, 2)})
        assert params == WheelParams(80, 0.0, 0.0, 0.0, (1.0, 2.0))

    def test_from_dict_requires_outer_radius(self):
        """The outer radius has no default."""
        with pytest.raises(InvalidParameterError):
            WheelParams.from_dict({"inner_radius": 10})


class TestFromParams:
    """Test class for the batch builders taking WheelParams."""

    def test_from_params_match_functions(self):
        """The stored dimensions are passed on unchanged."""
        params = WheelParams(120, 40, 6, 0.75, (30, 40))
        assert annulus_sector_paths_from_params(params, 7) == annulus_sector_paths(7, 120, 40, 6, 0.75, (30, 40))
        assert annulus_sector_arc_text_paths_from_params(params, 7) == annulus_sector_arc_text_paths(
            7, 120, 40, 6, 0.75, (30, 40)
        )
        assert annulus_sector_line_text_paths_from_params(params, 7) == annulus_sector_line_text_paths(
            7, 120, 40, 6, 0.75, (30, 40)
        )

    def test_from_params_defaults(self):
        """A WheelParams with only an outer radius gives pie slices."""
        paths = annulus_sector_paths_from_params(WheelParams(150), 4)
        assert paths == annulus_sector_paths(4, 150)
        assert all(path.endswith("L 0 0 Z") for path in paths)

    def test_from_params_invalid_sector_count(self):
        """The sector count is validated as for the other batch builders."""
        with pytest.raises(InvalidParameterError):
            annulus_sector_paths_from_params(WheelParams(150, 50, 20), 0)
