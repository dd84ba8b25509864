"""
URL Configuration for Location History Application
"""
from django.urls import path
from .views.web import (
    map_view,
    export_index,
    export_create,
    export_delete,
    export_download,
    notification_list,
    notification_read,
)
from .views.api import points_collection, point_detail, fog

app_name = 'locations'

urlpatterns = [
    # Map visualization (main page)
    # Usage: GET /?start_at=2024-01-01T00:00&end_at=2024-01-01T23:59
    path('', map_view, name='map'),

    # Export history and creation
    # Usage: GET /export/, POST /exports/ with start_at, end_at
    path('export/', export_index, name='export_index'),
    path('exports/', export_create, name='export_create'),
    path('exports/<int:export_id>/delete/', export_delete, name='export_delete'),

    # Finished export files, matches Export.url
    path('exports/<str:name>.json', export_download, name='export_download'),

    # Notifications (JSON)
    path('notifications/', notification_list, name='notification_list'),
    path('notifications/<int:notification_id>/read/', notification_read, name='notification_read'),

    # Points API
    # Usage: GET/POST /api/v1/points/, GET/DELETE /api/v1/points/<id>/
    path('api/v1/points/', points_collection, name='api_points'),
    path('api/v1/points/<int:point_id>/', point_detail, name='api_point_detail'),

    # Fog of war circles for the current viewport
    path('api/v1/fog/', fog, name='api_fog'),
]
