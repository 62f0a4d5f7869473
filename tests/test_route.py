import pytest

from microsims.core.errors import EmptyInputError
from microsims.core.models import GeoPoint
from microsims.core.route import (
    cumulative_distances_km,
    initial_bearing_deg,
    route_centroid,
    route_distance_km,
    segment_distance_km,
    summarize_route,
)


def test_edinburgh_to_glasgow(edinburgh, glasgow):
    d = segment_distance_km(edinburgh, glasgow)
    assert 66.0 <= d <= 68.0


def test_distance_is_symmetric(edinburgh, glasgow):
    assert segment_distance_km(edinburgh, glasgow) == pytest.approx(segment_distance_km(glasgow, edinburgh))


def test_identical_points_are_zero_apart():
    p = GeoPoint(lat=55.948399, lon=-3.186841)
    assert segment_distance_km(p, p) == 0.0


def test_one_degree_of_latitude():
    d = segment_distance_km(GeoPoint(lat=0.0, lon=0.0), GeoPoint(lat=1.0, lon=0.0))
    assert d == pytest.approx(6371.0 * 3.141592653589793 / 180, rel=1e-9)


@pytest.mark.parametrize("n", [0, 1])
def test_short_routes_have_no_length(n, edinburgh):
    assert route_distance_km([edinburgh] * n) == 0.0


def test_repeated_stop_adds_nothing(edinburgh, glasgow):
    assert route_distance_km([edinburgh, edinburgh, glasgow, glasgow]) == segment_distance_km(edinburgh, glasgow)


def test_route_is_sum_of_legs(hotels):
    expected = sum(segment_distance_km(a, b) for a, b in zip(hotels, hotels[1:]))
    assert route_distance_km(hotels) == pytest.approx(expected)


def test_route_reversal_keeps_length(hotels):
    assert route_distance_km(hotels) == pytest.approx(route_distance_km(list(reversed(hotels))))


def test_cumulative_distances(hotels):
    cum = cumulative_distances_km(hotels)
    assert len(cum) == len(hotels)
    assert cum[0] == 0.0
    assert cum[3] == cum[2]  # two nights at Eilean Iarmain
    assert cum[-1] == pytest.approx(route_distance_km(hotels))
    assert cumulative_distances_km([]) == []


@pytest.mark.parametrize(
    "dest,expected",
    [((1.0, 0.0), 0.0), ((0.0, 1.0), 90.0), ((-1.0, 0.0), 180.0), ((0.0, -1.0), 270.0)],
)
def test_bearing_cardinal_directions(dest, expected):
    origin = GeoPoint(lat=0.0, lon=0.0)
    assert initial_bearing_deg(origin, GeoPoint(lat=dest[0], lon=dest[1])) == pytest.approx(expected)


def test_centroid():
    pts = [GeoPoint(lat=0.0, lon=0.0), GeoPoint(lat=10.0, lon=-20.0)]
    assert route_centroid(pts) == (5.0, -10.0)
    with pytest.raises(EmptyInputError):
        route_centroid([])


def test_summary(hotels):
    s = summarize_route(hotels)
    assert s.point_count == 6
    assert s.segment_count == 5
    assert len(s.legs) == 5
    assert s.legs[0].i == 1
    assert s.legs[0].from_name == "Ibis"
    assert s.legs[0].to_name == "Creggans Inn"
    assert s.legs[2].distance_km == 0.0
    assert s.legs[-1].cum_dist_km == pytest.approx(s.total_distance_km)
    assert s.total_distance_km == pytest.approx(route_distance_km(hotels))
    assert s.center_lat == pytest.approx(sum(p.lat for p in hotels) / 6)


def test_summary_of_empty_route():
    s = summarize_route([])
    assert s.point_count == 0
    assert s.segment_count == 0
    assert s.total_distance_km == 0.0
    assert s.legs == []
    assert s.center_lat is None
