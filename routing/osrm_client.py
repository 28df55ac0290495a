#Purpose: The OSRM "adapter/client".
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat)
#URL construction (/route/v1/foot/...)
#timeouts and response shape checks
#parsing response JSON into our internal (lat, lon) shape
#It should not contain fallback rules or ETA math.


from dotenv import load_dotenv
import logging
import os
from typing import Any, List, Optional, Tuple
import requests

from .policy import RoutingPolicy, default_routing_policy

# Read OSRM base URL from environment
# Example in .env:
# OSRM_BASE_URL=https://router.project-osrm.org
load_dotenv()
DEFAULT_BASE_URL = "https://router.project-osrm.org"

logger = logging.getLogger(__name__)

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]


class OSRMError(Exception):
    """Raised when OSRM answers with something we cannot use as a route."""
    pass


def _is_number(value: Any) -> bool:
    # bool is an int subclass, never a coordinate
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_route_geometry(data: Any) -> List[LatLon]:
    """
    Check an OSRM /route response against the shape we expect and pull out
    the first route's geometry as (lat, lon) points.

    Expected:
        {
            "code": "Ok",
            "routes": [{"geometry": {"coordinates": [[lon, lat], ...]}}, ...]
        }

    Raises OSRMError naming the first mismatch.
    """
    if not isinstance(data, dict):
        raise OSRMError("response is not a JSON object")

    if data.get("code") != "Ok":
        raise OSRMError(f"OSRM error: {data.get('code')} {data.get('message', 'Unknown error')}")

    routes = data.get("routes")
    if not isinstance(routes, list) or not routes:
        raise OSRMError("no route found")

    geometry = routes[0].get("geometry") if isinstance(routes[0], dict) else None
    if not isinstance(geometry, dict):
        raise OSRMError("route has no geojson geometry")

    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, list) or not coordinates:
        raise OSRMError("route geometry has no coordinates")

    points: List[LatLon] = []
    for pair in coordinates:
        if not isinstance(pair, (list, tuple)) or len(pair) < 2:
            raise OSRMError(f"malformed coordinate: {pair!r}")
        lon, lat = pair[0], pair[1]
        if not (_is_number(lon) and _is_number(lat)):
            raise OSRMError(f"non-numeric coordinate: {pair!r}")
        #OSRM speaks (lon, lat), we keep (lat, lon)
        points.append((float(lat), float(lon)))

    return points


class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Convert internal (lat, lon) → OSRM (lon,lat)
    - Return normalized outputs

    """
    def __init__(self, base_url: Optional[str] = None, policy: Optional[RoutingPolicy] = None):
        self.policy = policy or default_routing_policy()
        self.base_url = base_url if base_url is not None else os.getenv("OSRM_BASE_URL", DEFAULT_BASE_URL)
        self.timeout = self.policy.timeout_seconds #the time to wait for a response from OSRM before giving up
        self.profile = self.policy.profile #the mode of transportation (foot, driving, cycling)

        if not self.base_url:
            raise ValueError("OSRM base URL is empty. Set OSRM_BASE_URL in the .env file or unset it.")
        self.base_url = self.base_url.rstrip("/")

        #----------------
        # Internal helper methods for coordinate formatting and URL construction
        #----------------
    def format_coordinates(self, coords: List[LatLon]) -> str:

        """Convert list of (lat, lon) to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join([f"{lon},{lat}" for lat, lon in coords])

    def route_url(self, start: LatLon, end: LatLon) -> str:
        coordinates = self.format_coordinates([start, end])
        return f"{self.base_url}/route/v1/{self.profile}/{coordinates}"

        #----------------
        # Public methods
        #----------------
    def route_geometry(self, start: LatLon, end: LatLon) -> List[LatLon]:

        """
            calls the OSRM /route endpoint for start -> end and returns the
            full geometry of the first route as (lat, lon) points.

            Raises:
                requests.RequestException on network failure / non-2xx status
                OSRMError when the body is not a usable route
        """
        url = self.route_url(start, end)
        logger.debug("OSRM route request %s", url)

        response = requests.get(
            url,
            params = {
                "overview": "full", # full geometry, not simplified
                "geometries": "geojson",
                  },
                timeout= self.timeout
        )
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as exc:
            raise OSRMError("response body is not JSON") from exc

        return parse_route_geometry(data)
