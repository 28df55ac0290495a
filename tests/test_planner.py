import pytest

from routing import RouteInFlightError, RoutePlanner, compute_metrics
from routing.route_service import fallback_route


def straight_resolver(start, end):
    return fallback_route(start, end)


def test_plan_publishes_route_with_metrics(campus_start, campus_end):
    planner = RoutePlanner(resolver=straight_resolver)

    planned = planner.plan(campus_start, campus_end)

    assert planned is not None
    assert planner.latest is planned
    assert planned.request_id == 1
    assert planned.metrics == compute_metrics(planned.path)


def test_request_ids_are_monotonic(campus_start, campus_end):
    planner = RoutePlanner(resolver=straight_resolver)

    first = planner.plan(campus_start, campus_end)
    second = planner.plan(campus_end, campus_start)

    assert second.request_id > first.request_id
    assert planner.latest is second


def test_same_endpoints_cannot_be_requested_while_in_flight(campus_start, campus_end):
    planner = RoutePlanner()
    seen = []

    def resolver(start, end):
        # second click on the same pair while the first is still resolving
        assert planner.is_in_flight(start, end)
        with pytest.raises(RouteInFlightError):
            planner.plan(start, end)
        seen.append((start, end))
        return fallback_route(start, end)

    planner.resolver = resolver
    planned = planner.plan(campus_start, campus_end)

    assert planned is not None
    assert seen == [(campus_start, campus_end)]
    assert not planner.is_in_flight(campus_start, campus_end)


def test_superseded_response_is_discarded(campus_start, campus_end):
    """
    Request #1 is slow; request #2 starts and finishes first.
    When #1 finally returns it must not overwrite #2.
    """
    planner = RoutePlanner()
    newer_start = (39.9080, 116.4100)
    results = {}

    def resolver(start, end):
        if start == campus_start:
            results["newer"] = planner.plan(newer_start, end)
        return fallback_route(start, end)

    planner.resolver = resolver
    late = planner.plan(campus_start, campus_end)

    # 1. the slow request is dropped
    assert late is None

    # 2. the newer one is what the map shows
    assert results["newer"] is not None
    assert results["newer"].request_id == 2
    assert planner.latest is results["newer"]
    assert planner.latest.path.start == newer_start


def test_failed_newer_request_does_not_block_older_route(campus_start, campus_end):
    """
    Request #2 starts while #1 is resolving and then fails.
    #1 is still the newest route anyone has, so it gets published.
    """
    planner = RoutePlanner()
    newer_start = (39.9080, 116.4100)

    def resolver(start, end):
        if start == newer_start:
            raise RuntimeError("resolver crashed")
        with pytest.raises(RuntimeError):
            planner.plan(newer_start, end)
        return fallback_route(start, end)

    planner.resolver = resolver
    planned = planner.plan(campus_start, campus_end)

    # 1. the older route survives the failed newer one
    assert planned is not None
    assert planned.request_id == 1
    assert planner.latest is planned

    # 2. ids keep counting past the failed request
    planner.resolver = straight_resolver
    assert planner.plan(campus_end, campus_start).request_id == 3


def test_in_flight_slot_released_when_resolver_fails(campus_start, campus_end):
    def broken(start, end):
        raise RuntimeError("boom")

    planner = RoutePlanner(resolver=broken)

    with pytest.raises(RuntimeError):
        planner.plan(campus_start, campus_end)

    assert not planner.is_in_flight(campus_start, campus_end)
    assert planner.latest is None


def test_clear_forgets_latest(campus_start, campus_end):
    planner = RoutePlanner(resolver=straight_resolver)
    planner.plan(campus_start, campus_end)

    planner.clear()

    assert planner.latest is None
