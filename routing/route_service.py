#Purpose: Route computation for downstream use.
#Returns the walking route the map draws between two clicked points.
#Uses OSRM /route (foot profile) first; if that fails for any reason
#(network, bad status, bad body, no route) it draws the fallback curve instead.
#Never raises: a plausible path is always better than an error banner here.

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

import requests

from .fallback_curve import fallback_curve
from .models import RouteError, RoutePath, RouteSource
from .osrm_client import OSRMClient, OSRMError
from .policy import (
    DEFAULT_FALLBACK_BOW,
    DEFAULT_FALLBACK_RESOLUTION,
    RoutingPolicy,
    default_routing_policy,
)

logger = logging.getLogger(__name__)

LatLon = Tuple[float, float]


def query_service_route(
        start: LatLon,
        end: LatLon,
        client: Optional[OSRMClient] = None,
        policy: Optional[RoutingPolicy] = None,
) -> Union[RoutePath, RouteError]:
    """
    One OSRM attempt. Returns the service path, or a RouteError describing
    why there is none. Exceptions from the client stop here.
    """
    try:
        client = client or OSRMClient(policy=policy)
        points = client.route_geometry(start, end)
    except requests.RequestException as exc:
        return RouteError(f"OSRM request failed: {exc}", exc)
    except OSRMError as exc:
        return RouteError(str(exc), exc)
    except ValueError as exc:
        # bad configuration (e.g. empty base url)
        return RouteError(f"OSRM client unavailable: {exc}", exc)
    except Exception as exc:
        logger.exception("Unexpected error while querying OSRM")
        return RouteError(f"unexpected error: {exc}", exc)

    return RoutePath.of(points, RouteSource.SERVICE)


def fallback_route(start: LatLon, end: LatLon, policy: Optional[RoutingPolicy] = None) -> RoutePath:
    # the curve never needs the OSRM settings, so no policy means plain defaults
    if policy is None:
        bow, resolution = DEFAULT_FALLBACK_BOW, DEFAULT_FALLBACK_RESOLUTION
    else:
        bow, resolution = policy.fallback_bow, policy.fallback_resolution

    points = fallback_curve(start, end, bow=bow, resolution=resolution)
    return RoutePath.of(points, RouteSource.FALLBACK)


def resolve_route(
        start: LatLon,
        end: LatLon,
        client: Optional[OSRMClient] = None,
        policy: Optional[RoutingPolicy] = None,
) -> RoutePath:
    """
    Walking route from start to end, both (lat, lon).

    Args:
        start: (lat, lon) of the first click
        end: (lat, lon) of the second click
        client: OSRM client to use (a default one is built from the env otherwise)
        policy: fallback curve parameters

    Returns:
        RoutePath with source SERVICE, or FALLBACK when OSRM let us down.
    """
    if policy is None:
        try:
            policy = default_routing_policy()
        except ValueError as exc:
            # bad OSRM_TIMEOUT etc.: no service query, curve with plain defaults
            logger.warning("Routing policy unavailable (%s); using fallback curve", exc)
            return fallback_route(start, end)

    outcome = query_service_route(start, end, client, policy)
    if isinstance(outcome, RoutePath):
        return outcome

    logger.warning(
        "Route %s -> %s unavailable from OSRM (%s); using fallback curve",
        start, end, outcome.reason,
    )
    return fallback_route(start, end, policy)
