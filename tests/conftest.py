from pathlib import Path

import pytest

from microsims.core.models import BoundingBox, GeoPoint

TRIPS_DIR = Path(__file__).resolve().parents[1] / "trips"

# Box the tour map's background image was drawn for
SCOTLAND_BOX = BoundingBox(min_lat=54.5, max_lat=59.0, min_lon=-8.0, max_lon=-1.5)


@pytest.fixture
def scotland_box():
    return SCOTLAND_BOX


@pytest.fixture
def tour_csv():
    return TRIPS_DIR / "scotland_tour.csv"


@pytest.fixture
def edinburgh():
    return GeoPoint(name="Edinburgh", lat=55.9533, lon=-3.1883)


@pytest.fixture
def glasgow():
    return GeoPoint(name="Glasgow", lat=55.8642, lon=-4.2518)


@pytest.fixture
def hotels():
    return [
        GeoPoint(name="Ibis", lat=55.948399, lon=-3.186841),
        GeoPoint(name="Creggans Inn", lat=56.175403, lon=-5.083672),
        GeoPoint(name="Eilean Iarmain Hotel", lat=57.145349, lon=-5.799012),
        GeoPoint(name="Eilean Iarmain Hotel", lat=57.145349, lon=-5.799012),
        GeoPoint(name="Coul House Hotel", lat=57.571843, lon=-4.572125),
        GeoPoint(name="Ibis", lat=55.948399, lon=-3.186841),
    ]
