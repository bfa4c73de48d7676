"""Shared reference points for the engine tests."""

import numpy as np
import pytest

from common.types import GeoPoint


# Well-known reference points (degrees)
REFERENCE_POINTS = {
    "tokyo": GeoPoint(lat=35.6762, lng=139.6503),
    "osaka": GeoPoint(lat=34.6937, lng=135.5023),
    "nagoya": GeoPoint(lat=35.1815, lng=136.9066),
    "sapporo": GeoPoint(lat=43.0618, lng=141.3545),
    "fukuoka": GeoPoint(lat=33.5904, lng=130.4017),
    "sendai": GeoPoint(lat=38.2682, lng=140.8694),
    "hiroshima": GeoPoint(lat=34.3853, lng=132.4553),
    "yokohama": GeoPoint(lat=35.4437, lng=139.638),
    "kobe": GeoPoint(lat=34.6901, lng=135.1956),
    "kyoto": GeoPoint(lat=35.0116, lng=135.7681),
    "new_york": GeoPoint(lat=40.7128, lng=-74.006),
    "london": GeoPoint(lat=51.5074, lng=-0.1278),
    "sydney": GeoPoint(lat=-33.8688, lng=151.2093),
}


@pytest.fixture
def cities():
    """Reference points keyed by name."""
    return dict(REFERENCE_POINTS)


@pytest.fixture
def tokyo():
    return REFERENCE_POINTS["tokyo"]


@pytest.fixture
def osaka():
    return REFERENCE_POINTS["osaka"]


@pytest.fixture
def ten_cities():
    """Ten Japanese cities; Sapporo is the northern outlier."""
    names = [
        "tokyo", "osaka", "nagoya", "sapporo", "fukuoka",
        "sendai", "hiroshima", "yokohama", "kobe", "kyoto",
    ]
    return [REFERENCE_POINTS[name] for name in names]


@pytest.fixture
def tokyo_cluster():
    """Seven points in central Tokyo."""
    return [
        GeoPoint(35.681, 139.767),  # Tokyo Station
        GeoPoint(35.69, 139.7),  # Shinjuku
        GeoPoint(35.659, 139.7),  # Shibuya
        GeoPoint(35.729, 139.711),  # Ikebukuro
        GeoPoint(35.671, 139.764),  # Ginza
        GeoPoint(35.714, 139.777),  # Ueno
        GeoPoint(35.689, 139.691),  # Yoyogi
    ]


@pytest.fixture
def random_points():
    """Factory for uniformly drawn valid coordinates from a seeded generator."""
    rng = np.random.default_rng(20240601)

    def _draw(count):
        lats = rng.uniform(-90.0, 90.0, size=count)
        lngs = rng.uniform(-180.0, 180.0, size=count)
        return [GeoPoint(float(lat), float(lng)) for lat, lng in zip(lats, lngs)]

    return _draw
