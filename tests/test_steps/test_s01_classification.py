"""Tests for S01: Surface classification."""

import pytest

from roomscan.core.contracts import Alignment, PlaneLabel
from roomscan.steps.s01_classification.config import ClassificationConfig
from roomscan.steps.s01_classification.contracts import ClassificationInput
from roomscan.steps.s01_classification.step import ClassificationStep, classify_plane


class TestHorizontalPlanes:
    def test_floor(self, make_plane):
        result = classify_plane(make_plane("horizontal", (0, 0.1, 0), width=2, height=3))
        assert result.label is PlaneLabel.FLOOR
        assert result.area == pytest.approx(6.0)
        assert result.height == pytest.approx(0.1)

    def test_ceiling(self, make_plane):
        assert classify_plane(make_plane("horizontal", (0, 2.6, 0))).label is PlaneLabel.CEILING

    def test_tabletop(self, make_plane):
        assert classify_plane(make_plane("horizontal", (0, 0.75, 0))).label is PlaneLabel.HORIZONTAL_OTHER

    def test_floor_boundary_is_strict(self, make_plane):
        assert classify_plane(make_plane("horizontal", (0, 0.5, 0))).label is PlaneLabel.HORIZONTAL_OTHER
        assert classify_plane(make_plane("horizontal", (0, 0.4999, 0))).label is PlaneLabel.FLOOR

    def test_ceiling_boundary_is_strict(self, make_plane):
        assert classify_plane(make_plane("horizontal", (0, 2.0, 0))).label is PlaneLabel.HORIZONTAL_OTHER
        assert classify_plane(make_plane("horizontal", (0, 2.0001, 0))).label is PlaneLabel.CEILING

    def test_below_origin_is_floor(self, make_plane):
        assert classify_plane(make_plane("horizontal", (0, -1.4, 0))).label is PlaneLabel.FLOOR


class TestVerticalPlanes:
    def test_wall(self, make_plane):
        result = classify_plane(make_plane("vertical", (1, 1.2, 0), width=1.0, height=2.5))
        assert result.is_wall
        assert result.height == pytest.approx(1.2)

    def test_wall_threshold_inclusive(self, make_plane):
        assert classify_plane(make_plane("vertical", width=1.0, height=2.0)).label is PlaneLabel.WALL
        assert classify_plane(make_plane("vertical", width=1.0, height=1.99)).label is PlaneLabel.VERTICAL_OTHER

    def test_custom_wall_threshold(self, make_plane):
        cfg = ClassificationConfig(min_wall_height=2.4, wall_area_factor=1.5)
        assert cfg.wall_area_threshold == pytest.approx(3.6)
        assert classify_plane(make_plane("vertical", width=1.0, height=3.0), cfg).label is PlaneLabel.VERTICAL_OTHER


class TestUnknownAlignment:
    def test_unknown(self, make_plane):
        result = classify_plane(make_plane("diagonal", (0, 1.0, 0), width=2.0, height=2.0))
        assert result.label is PlaneLabel.UNKNOWN
        assert result.area == pytest.approx(4.0)

    def test_zero_area(self, make_plane):
        result = classify_plane(make_plane(Alignment.VERTICAL, width=0.0, height=0.0))
        assert result.label is PlaneLabel.VERTICAL_OTHER
        assert result.area == 0.0


class TestClassificationStep:
    def test_counts(self, valid_room_planes, make_plane):
        planes = valid_room_planes + [
            make_plane("horizontal", (0, 2.5, 0)),
            make_plane("horizontal", (0, 1.0, 0)),
        ]
        output = ClassificationStep().execute(ClassificationInput(planes=planes))

        assert len(output.classified) == 5
        assert (output.num_floors, output.num_walls, output.num_ceilings, output.num_other) == (1, 2, 1, 1)
        # Planes are referenced, not copied
        assert output.classified[0].plane is planes[0]

    def test_empty(self):
        output = ClassificationStep().execute(ClassificationInput())
        assert output.classified == []

    def test_schema_introspection(self):
        schema = ClassificationStep.get_input_schema()
        assert "planes" in schema["properties"]
        assert "floor_max_height" in ClassificationStep.get_config_schema()["properties"]
