"""
Location History API Views Package
"""
from .points import points_collection, point_detail
from .fog import fog

__all__ = ['points_collection', 'point_detail', 'fog']
