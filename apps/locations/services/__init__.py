"""
Services: export generation and user notifications
"""
from .exports import create_export, delete_export, export_name
from .notifications import create_notification, mark_as_read

__all__ = ['create_export', 'delete_export', 'export_name', 'create_notification', 'mark_as_read']
