import os

import django
import pytest
import requests

# API tests run against the real settings module, without the refresh thread.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "campus_backend.settings")
os.environ["OCCUPANCY_AUTOREFRESH"] = "false"
django.setup()


class FakeResponse:
    """
    Stand-in for requests.Response: only what OSRMClient touches.
    """
    def __init__(self, payload=None, status_code=200, body_is_json=True):
        self.payload = payload
        self.status_code = status_code
        self.body_is_json = body_is_json

    def json(self):
        if not self.body_is_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def campus_start():
    return (39.9062, 116.4084)


@pytest.fixture
def campus_end():
    return (39.9072, 116.4094)


@pytest.fixture
def osrm_ok_payload():
    # OSRM geojson coordinates are [lon, lat]
    return {
        "code": "Ok",
        "routes": [
            {
                "distance": 151.2,
                "duration": 108.9,
                "geometry": {
                    "type": "LineString",
                    "coordinates": [
                        [116.40841, 39.90621],
                        [116.40880, 39.90650],
                        [116.40939, 39.90719],
                    ],
                },
            }
        ],
        "waypoints": [],
    }
