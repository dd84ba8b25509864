"""
Database Router for Location History Application
Sends map, API and export queries to an optional read-only connection
"""
from django.conf import settings


class LocationsRouter:
    """
    Points, exports and notifications are written through 'default'.
    When an 'analytics' connection is configured (LOCATIONS_ANALYTICS_DB_USER),
    SELECTs go there instead; without it every query stays on 'default'.
    """

    def db_for_read(self, model, **hints):
        if model._meta.app_label == 'locations' and 'analytics' in settings.DATABASES:
            return 'analytics'
        return None

    def db_for_write(self, model, **hints):
        """
        Export status updates and notifications need the read-write user
        """
        if model._meta.app_label == 'locations':
            return 'default'
        return None

    def allow_relation(self, obj1, obj2, **hints):
        """
        Locations rows reference auth users, which live on the same server
        """
        if obj1._meta.app_label == 'locations' or obj2._meta.app_label == 'locations':
            return True
        return None

    def allow_migrate(self, db, app_label, model_name=None, **hints):
        """
        The analytics user is read-only, so schema changes only run on 'default'
        """
        if app_label == 'locations':
            return db == 'default'
        return None
