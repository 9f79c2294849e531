"""Tests for the end-to-end house generator."""

import logging

import pytest

from services.house_engine import HouseGenerationError, HouseSpecification, generate_house
from services.house_engine import generator


class TestGenerateHouse:
    def test_reference_scenario(self, city_spec):
        result = generate_house(city_spec)
        layout = result.layout
        assert layout.style == 'modern'
        assert layout.floors == 1
        assert (layout.width, layout.length, layout.height) == pytest.approx((16, 24, 3))
        categories = sorted(r.category for r in layout.rooms)
        assert categories == ['bathroom', 'bedroom', 'bedroom', 'hallway', 'kitchen', 'living']

    def test_village_double_story(self):
        spec = HouseSpecification(plot_size="30", house_type="double", location_type="village")
        layout = generate_house(spec).layout
        assert layout.style == 'traditional'
        assert layout.floors == 2
        assert layout.height == 6

    def test_rooms_are_furnished(self, city_spec):
        rooms = {r.id: r for r in generate_house(city_spec).layout.rooms}
        assert len(rooms['living-1'].furniture) == 5
        assert rooms['hallway-1'].furniture == ()

    def test_waypoints_cover_non_hallway_rooms(self, city_spec):
        result = generate_house(city_spec)
        assert len(result.tour_waypoints) == 2 + len(result.layout.rooms) - 1

    def test_idempotent(self, city_spec):
        assert generate_house(city_spec) == generate_house(city_spec)
        assert generate_house(city_spec).to_dict() == generate_house(city_spec).to_dict()

    def test_notes_do_not_change_output(self, city_spec):
        noted = HouseSpecification(**{**city_spec.__dict__, 'extra_notes': 'big windows please'})
        assert generate_house(noted) == generate_house(city_spec)

    def test_zero_bedrooms(self):
        result = generate_house(HouseSpecification(bedrooms=0))
        assert not any(r.category == 'bedroom' for r in result.layout.rooms)
        assert result.tour_waypoints[0].room_name == 'Exterior View'

    def test_unparseable_plot_uses_default(self):
        layout = generate_house(HouseSpecification(plot_size="big")).layout
        assert (layout.width, layout.length) == pytest.approx((16, 24))

    def test_failure_is_wrapped(self, monkeypatch, city_spec):
        def boom(*args, **kwargs):
            raise ValueError("packing exploded")

        monkeypatch.setattr(generator, "generate_rooms", boom)
        with pytest.raises(HouseGenerationError) as excinfo:
            generate_house(city_spec)
        assert str(excinfo.value) == "Failed to generate house layout"
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_negative_count_fails_as_generic_error(self):
        # sqrt of a negative room count
        with pytest.raises(HouseGenerationError):
            generate_house(HouseSpecification(bedrooms=-5))

    def test_extreme_counts_log_one_issue_summary(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="services.house_engine.generator"):
            generate_house(HouseSpecification(bedrooms=40, bathrooms=10))
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "layout issue(s):" in warnings[0].getMessage()
        assert "Layout issue: out_of_bounds" in caplog.text

    def test_large_count_completes_with_single_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="services.house_engine.generator"):
            result = generate_house(HouseSpecification(bedrooms=1500, bathrooms=5))
        categories = [r.category for r in result.layout.rooms]
        assert categories.count('bedroom') == 1500
        assert categories.count('bathroom') == 5
        assert categories[-1] == 'hallway'
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "more)" in warnings[0].getMessage()

    def test_inspection_failure_is_wrapped(self, monkeypatch, city_spec):
        def boom(layout):
            raise ValueError("invalid geometry")

        monkeypatch.setattr(generator, "inspect_layout", boom)
        with pytest.raises(HouseGenerationError) as excinfo:
            generate_house(city_spec)
        assert str(excinfo.value) == "Failed to generate house layout"
        assert isinstance(excinfo.value.__cause__, ValueError)


class TestWireFormat:
    def test_layout_keys(self, city_spec):
        data = generate_house(city_spec).to_dict()
        assert set(data) == {'layout', 'tourWaypoints'}
        assert set(data['layout']) == {'width', 'length', 'height', 'floors', 'rooms', 'style'}

    def test_room_and_furniture_keys(self, city_spec):
        room = generate_house(city_spec).to_dict()['layout']['rooms'][0]
        assert room['type'] == 'living'
        assert room['position'] == {'x': 0.0, 'y': 0.0, 'z': 0.0}
        assert set(room['furniture'][0]) == {'id', 'name', 'type', 'position', 'rotation', 'dimensions', 'material'}
