"""Shared fixtures for the house engine tests."""

import os
import pytest

from services.house_engine import (
    HouseSpecification,
    compute_house_dimensions,
    generate_rooms,
    parse_plot_size,
)


def pytest_configure(config):
    """Keep test runs independent of a developer's .env."""
    os.environ.setdefault("LOG_LEVEL", "DEBUG")


@pytest.fixture
def city_spec():
    """The reference form: 20x30 plot, single story, 2 bed / 1 bath / 1 kitchen, city."""
    return HouseSpecification(
        plot_size="20x30",
        house_type="single",
        bedrooms=2,
        bathrooms=1,
        kitchens=1,
        location_type="city",
    )


@pytest.fixture
def city_dimensions(city_spec):
    return compute_house_dimensions(parse_plot_size(city_spec.plot_size), city_spec.house_type)


@pytest.fixture
def city_rooms(city_spec, city_dimensions):
    return generate_rooms(city_spec, city_dimensions)
