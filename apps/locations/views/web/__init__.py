"""
Location History Web Views Package
"""
from .map import map_view
from .exports import export_index, export_create, export_delete, export_download
from .notifications import notification_list, notification_read

__all__ = [
    'map_view',
    'export_index',
    'export_create',
    'export_delete',
    'export_download',
    'notification_list',
    'notification_read',
]
