"""
Location History Views Package
Provides web and API views for the location history application
"""
# Import API views
from .api import points_collection, point_detail, fog

# Import web views
from .web import (
    map_view,
    export_index,
    export_create,
    export_delete,
    export_download,
    notification_list,
    notification_read,
)

__all__ = [
    # API endpoints
    'points_collection',
    'point_detail',
    'fog',

    # Web views
    'map_view',
    'export_index',
    'export_create',
    'export_delete',
    'export_download',
    'notification_list',
    'notification_read',
]
