import math

from rest_framework import serializers


class GeoPointSerializer(serializers.Serializer):
    lat = serializers.FloatField(min_value=-90, max_value=90)
    lng = serializers.FloatField(min_value=-180, max_value=180)

    # NaN slips past min/max comparisons
    def validate_lat(self, value):
        if not math.isfinite(value):
            raise serializers.ValidationError("Latitude must be a finite number.")
        return value

    def validate_lng(self, value):
        if not math.isfinite(value):
            raise serializers.ValidationError("Longitude must be a finite number.")
        return value

    def to_latlon(self):
        return (self.validated_data["lat"], self.validated_data["lng"])


class RoutePlanRequestSerializer(serializers.Serializer):
    start = GeoPointSerializer()
    end = GeoPointSerializer()

    def endpoints(self):
        data = self.validated_data
        return (
            (data["start"]["lat"], data["start"]["lng"]),
            (data["end"]["lat"], data["end"]["lng"]),
        )


class PlannedRouteSerializer(serializers.Serializer):
    """
    Read-only view of a resolved path + metrics. Numbers are not rounded,
    the client formats them.
    """
    points = serializers.SerializerMethodField()
    source = serializers.SerializerMethodField()
    distance_m = serializers.FloatField(source="metrics.distance_m")
    eta_minutes = serializers.FloatField(source="metrics.eta_minutes")

    def get_points(self, obj):
        return [[lat, lng] for lat, lng in obj.path.points]

    def get_source(self, obj):
        return obj.path.source.value


class BoardEntrySerializer(serializers.Serializer):
    id = serializers.CharField(source="facility.id")
    code = serializers.CharField(source="facility.code")
    name = serializers.CharField(source="facility.name")
    type = serializers.CharField(source="facility.type.value")
    current_count = serializers.IntegerField(source="reading.current_count")
    max_count = serializers.IntegerField(source="reading.max_count")
    status = serializers.CharField(source="status.value")
    label = serializers.CharField(source="status.label")
