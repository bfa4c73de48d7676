"""Tests for geospatial/aggregation.py (centroid, geometric median, ECEF centroid)."""

import logging

import pytest

from common.errors import InvalidArgumentError
from common.types import GeoPoint, WeiszfeldConfig
from geospatial.aggregation import centroid, ecef_centroid, geometric_median
from geospatial.distance_calculations import (
    haversine_distance,
    haversine_distance_batch,
    total_distance,
)


# =========================================================================
# centroid
# =========================================================================

def test_centroid_single_point(tokyo):
    assert centroid([tokyo]) == tokyo


def test_centroid_identical_points(tokyo):
    assert centroid([tokyo, tokyo, tokyo]) == tokyo


def test_centroid_two_points(tokyo, osaka):
    result = centroid([tokyo, osaka])
    assert result.lat == pytest.approx((tokyo.lat + osaka.lat) / 2)
    assert result.lng == pytest.approx((tokyo.lng + osaka.lng) / 2)


def test_centroid_ten_points(ten_cities):
    result = centroid(ten_cities)
    assert result.lat == pytest.approx(sum(p.lat for p in ten_cities) / 10)
    assert result.lng == pytest.approx(sum(p.lng for p in ten_cities) / 10)

    assert min(p.lat for p in ten_cities) <= result.lat <= max(p.lat for p in ten_cities)
    assert min(p.lng for p in ten_cities) <= result.lng <= max(p.lng for p in ten_cities)


def test_centroid_averages_in_degree_space():
    # Antimeridian pair: plain mean lands on the prime meridian
    result = centroid([GeoPoint(0, 179), GeoPoint(0, -179)])
    assert result.lng == pytest.approx(0)


def test_centroid_empty():
    with pytest.raises(InvalidArgumentError):
        centroid([])


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        centroid([])


# =========================================================================
# geometric_median
# =========================================================================

def test_median_single_point(tokyo):
    result = geometric_median([tokyo])
    assert result.lat == pytest.approx(tokyo.lat, abs=1e-3)
    assert result.lng == pytest.approx(tokyo.lng, abs=1e-3)


def test_median_two_points_is_midpoint(tokyo, osaka):
    assert geometric_median([tokyo, osaka]) == centroid([tokyo, osaka])


def test_median_identical_points(cities):
    nagoya = cities["nagoya"]
    result = geometric_median([nagoya, nagoya, nagoya])
    assert result.lat == pytest.approx(nagoya.lat, abs=1e-3)
    assert result.lng == pytest.approx(nagoya.lng, abs=1e-3)


def test_median_empty():
    with pytest.raises(InvalidArgumentError):
        geometric_median([])


def test_median_zero_iterations_returns_centroid(cities):
    points = [cities["tokyo"], cities["osaka"], cities["nagoya"]]
    result = geometric_median(points, WeiszfeldConfig(max_iterations=0))
    assert result == centroid(points)


def test_median_short_circuits_on_coincident_point():
    # The centroid of these lands exactly on the middle point
    points = [GeoPoint(0, -1), GeoPoint(0, 0), GeoPoint(0, 1)]
    result = geometric_median(points)
    assert result is points[1]


def test_median_short_circuits_after_weighted_update(caplog):
    # Seed sits ~22 km from the duplicated point; one update lands ~7 km away
    a = GeoPoint(0, 0)
    points = [a] * 5 + [GeoPoint(0, 1), GeoPoint(1, 0)]
    config = WeiszfeldConfig(epsilon=10.0)

    assert haversine_distance_batch(centroid(points), points).min() > config.epsilon

    with caplog.at_level(logging.DEBUG, logger="geospatial.aggregation"):
        result = geometric_median(points, config)

    assert result is a
    assert "after 1 iterations" in caplog.text


def test_median_less_pulled_by_outlier(cities):
    points = [cities["tokyo"], cities["osaka"], cities["nagoya"], cities["sapporo"]]
    c = centroid(points)
    gm = geometric_median(points)

    # Sapporo lies north of the other three
    assert gm.lat < c.lat


def test_median_converges_for_cluster():
    cluster = [
        GeoPoint(35.68, 139.65),
        GeoPoint(35.67, 139.66),
        GeoPoint(35.69, 139.64),
    ]
    result = geometric_median(cluster)
    assert 35.66 < result.lat < 35.7
    assert 139.63 < result.lng < 139.67


def test_median_ten_points(ten_cities):
    gm = geometric_median(ten_cities)
    c = centroid(ten_cities)

    assert 30 < gm.lat < 46
    assert 128 < gm.lng < 146
    assert total_distance(gm, ten_cities) <= total_distance(c, ten_cities) + 1
    assert gm.lat < c.lat


def test_median_collinear_favors_middle(cities):
    names = ["tokyo", "yokohama", "nagoya", "kyoto", "osaka"]
    points = [cities[name] for name in names]
    result = geometric_median(points)

    assert min(p.lat for p in points) - 0.1 <= result.lat <= max(p.lat for p in points) + 0.1
    assert min(p.lng for p in points) - 0.1 <= result.lng <= max(p.lng for p in points) + 0.1

    to_nagoya = haversine_distance(result, cities["nagoya"])
    assert to_nagoya < haversine_distance(result, cities["tokyo"])
    assert to_nagoya < haversine_distance(result, cities["osaka"])


def test_median_stays_near_dense_cluster(cities, tokyo_cluster):
    outliers = [cities["sapporo"], cities["fukuoka"], cities["hiroshima"]]
    all_points = tokyo_cluster + outliers

    cluster_center = centroid(tokyo_cluster)
    c = centroid(all_points)
    gm = geometric_median(all_points)

    # Outliers drag the centroid well away from the cluster
    assert haversine_distance(cluster_center, c) > 50
    assert haversine_distance(gm, cluster_center) < 100
    assert haversine_distance(gm, cluster_center) < haversine_distance(c, cluster_center)


def test_median_single_outlier(cities, tokyo_cluster):
    sapporo = cities["sapporo"]
    all_points = tokyo_cluster + [sapporo]

    cluster_center = centroid(tokyo_cluster)
    c = centroid(all_points)
    gm = geometric_median(all_points)

    # Sapporo is north of Tokyo, so the median sits south of the centroid
    assert gm.lat < c.lat
    assert haversine_distance(gm, cluster_center) < haversine_distance(c, cluster_center)


def test_median_weights_toward_duplicated_point(cities):
    osaka = cities["osaka"]
    points = [osaka] * 8 + [cities["tokyo"], cities["sapporo"]]
    gm = geometric_median(points)

    assert haversine_distance(gm, osaka) < 50
    assert haversine_distance(gm, osaka) < haversine_distance(gm, cities["tokyo"])


def test_median_is_deterministic(ten_cities):
    assert geometric_median(ten_cities) == geometric_median(ten_cities)


def test_median_budget_exhaustion_is_not_an_error(cities, caplog):
    points = [cities["tokyo"], cities["osaka"], cities["nagoya"], cities["sapporo"]]

    with caplog.at_level(logging.WARNING, logger="geospatial.aggregation"):
        result = geometric_median(points, WeiszfeldConfig(max_iterations=1))

    assert result != centroid(points)
    assert "did not converge" in caplog.text


def test_config_defaults():
    config = WeiszfeldConfig()
    assert config.max_iterations == 1000
    assert config.epsilon == 1e-7


@pytest.mark.parametrize(
    "kwargs",
    [{"max_iterations": -1}, {"epsilon": 0.0}, {"epsilon": -1e-3}],
)
def test_config_rejects_bad_values(kwargs):
    with pytest.raises(InvalidArgumentError):
        WeiszfeldConfig(**kwargs)


# =========================================================================
# ecef_centroid
# =========================================================================

def test_ecef_centroid_single_point(tokyo):
    result = ecef_centroid([tokyo])
    assert result.lat == pytest.approx(tokyo.lat, abs=1e-9)
    assert result.lng == pytest.approx(tokyo.lng, abs=1e-9)


def test_ecef_centroid_across_antimeridian():
    result = ecef_centroid([GeoPoint(0, 179), GeoPoint(0, -179)])
    assert result.lat == pytest.approx(0, abs=1e-9)
    assert abs(result.lng) == pytest.approx(180)


def test_ecef_centroid_antipodal_falls_back():
    points = [GeoPoint(0, 0), GeoPoint(0, 180)]
    assert ecef_centroid(points) == centroid(points)


def test_ecef_centroid_close_to_centroid_for_small_sets(tokyo_cluster):
    assert haversine_distance(ecef_centroid(tokyo_cluster), centroid(tokyo_cluster)) < 1


def test_ecef_centroid_empty():
    with pytest.raises(InvalidArgumentError):
        ecef_centroid([])
