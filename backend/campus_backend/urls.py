from django.urls import path
from campus.views import RoutePlanView, OccupancyListView, OccupancyDetailView

urlpatterns = [
    path('api/v1/routes/plan/', RoutePlanView.as_view(), name='route-plan'),
    path('api/v1/occupancy/', OccupancyListView.as_view(), name='occupancy-list'),
    path('api/v1/occupancy/<str:facility_id>/', OccupancyDetailView.as_view(), name='occupancy-detail'),
]
