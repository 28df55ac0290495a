from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from routing import RoutePlanner, resolve_route
from .serializers import BoardEntrySerializer, PlannedRouteSerializer, RoutePlanRequestSerializer
from .services import get_board


class RoutePlanView(APIView):
    """
    Walking route between two map points.
    Always answers 200 for valid input: when OSRM is down the path is the
    fallback curve and `source` says so.
    """

    def post(self, request):
        serializer = RoutePlanRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        start, end = serializer.endpoints()

        # one planner per request, API clients don't share in-flight state
        planned = RoutePlanner(resolver=resolve_route).plan(start, end)
        return Response(PlannedRouteSerializer(planned).data)


class OccupancyListView(APIView):

    def get(self, request):
        entries = get_board().entries
        return Response(BoardEntrySerializer(entries, many=True).data)


class OccupancyDetailView(APIView):

    def get(self, request, facility_id=None):
        entry = get_board().get(facility_id)
        if entry is None:
            return Response({"error": "Facility not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(BoardEntrySerializer(entry).data)
