import math

import pytest
from pydantic import ValidationError

from microsims.core.models import BoundingBox, GeoPoint, ProjectionConfig, Rect


def test_geopoint_is_immutable():
    p = GeoPoint(name="Ibis", lat=55.9, lon=-3.2)
    with pytest.raises(ValidationError):
        p.lat = 56.0


@pytest.mark.parametrize("lat,lon", [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.1), (0.0, -200.0)])
def test_geopoint_rejects_out_of_range(lat, lon):
    with pytest.raises(ValidationError):
        GeoPoint(lat=lat, lon=lon)


def test_geopoint_accepts_nan():
    p = GeoPoint(lat=float("nan"), lon=1.0)
    assert math.isnan(p.lat)


def test_geopoint_name_optional_and_repeatable():
    a = GeoPoint(lat=1.0, lon=2.0)
    b = GeoPoint(lat=1.0, lon=2.0)
    assert a.name == ""
    assert a == b


def test_bounding_box_rejects_inverted_axes():
    with pytest.raises(ValidationError):
        BoundingBox(min_lat=10, max_lat=0, min_lon=0, max_lon=1)
    with pytest.raises(ValidationError):
        BoundingBox(min_lat=0, max_lat=1, min_lon=5, max_lon=4)


def test_bounding_box_derived_values(scotland_box):
    assert scotland_box.center_lat == pytest.approx(56.75)
    assert scotland_box.center_lon == pytest.approx(-4.75)
    assert scotland_box.lat_span == pytest.approx(4.5)
    assert scotland_box.lon_span == pytest.approx(6.5)
    assert scotland_box.contains(GeoPoint(lat=55.95, lon=-3.19))
    assert not scotland_box.contains(GeoPoint(lat=51.5, lon=-0.12))


def test_projection_config_defaults_to_identity():
    cfg = ProjectionConfig()
    assert cfg == ProjectionConfig.identity()
    assert cfg.is_identity
    assert not ProjectionConfig(lat_scale=1.85).is_identity


def test_rect_edges():
    r = Rect(left=20, top=60, width=560, height=620)
    assert r.right == 580
    assert r.bottom == 680
    assert r.center == (300, 370)
    with pytest.raises(ValidationError):
        Rect(width=-1)
