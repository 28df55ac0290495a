"""
Purpose: Central configuration for route resolution.
What it does:

Stores the tunable parameters for talking to OSRM and drawing the fallback curve:

PROFILE = "foot"
TIMEOUT_SECONDS = 5
FALLBACK_BOW = 0.2
FALLBACK_RESOLUTION = 50

Rule: No logic here, just parameters so you can tune without rewriting code.
Walking speed is NOT here: ETA uses a fixed 1.2 m/s (see eta_service).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


# fallback curve defaults, usable without reading the environment
DEFAULT_FALLBACK_BOW = 0.2
DEFAULT_FALLBACK_RESOLUTION = 50


def _env_timeout() -> float:
    return float(os.getenv("OSRM_TIMEOUT", "5"))


@dataclass(frozen=True)
class RoutingPolicy:
    """
    Central configuration for the route resolver.
    """

    # --- OSRM query ---
    # OSRM profile segment of the URL (/route/v1/{profile}/...)
    profile: str = "foot"

    # Seconds to wait for OSRM before giving up and drawing the fallback curve.
    timeout_seconds: float = field(default_factory=_env_timeout)

    # --- Fallback curve ---
    # Sideways push of the Bezier control points, as a fraction of the chord length.
    # 0.0 would give a straight line.
    fallback_bow: float = DEFAULT_FALLBACK_BOW

    # Number of equal steps the curve is sampled at (points = resolution + 1).
    fallback_resolution: int = DEFAULT_FALLBACK_RESOLUTION

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if not self.profile:
            raise ValueError("profile must not be empty")

        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")

        if self.fallback_bow < 0:
            raise ValueError("fallback_bow must be >= 0")

        if self.fallback_resolution < 1:
            raise ValueError("fallback_resolution must be >= 1")


def default_routing_policy() -> RoutingPolicy:
    """
    Convenience factory for the default policy.
    """
    p = RoutingPolicy()
    p.validate()
    return p
