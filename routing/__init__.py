#Marks routing as a package.
#Re-exports the public APIs (resolve_route, compute_metrics, RoutePlanner, OSRMClient)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .models import LatLon, PathMetrics, PlannedRoute, RouteError, RoutePath, RouteSource
from .osrm_client import OSRMClient, OSRMError
from .route_service import resolve_route
from .eta_service import compute_metrics, haversine_m, WALKING_SPEED_MPS
from .planner import RoutePlanner, RouteInFlightError
from .policy import RoutingPolicy, default_routing_policy

__all__ = [
           "LatLon",
           "PathMetrics",
           "PlannedRoute",
           "RouteError",
           "RoutePath",
           "RouteSource",
           "OSRMClient",
           "OSRMError",
           "resolve_route",
           "compute_metrics",
           "haversine_m",
           "WALKING_SPEED_MPS",
           "RoutePlanner",
           "RouteInFlightError",
           "RoutingPolicy",
           "default_routing_policy",
             ]
