"""
Location History Data Models
Points, exports and notifications owned by a user
"""
from django.conf import settings
from django.db import models


class Point(models.Model):
    """
    Single GPS sample recorded for a user.
    Timestamp is stored as unix seconds, the same value the map and exports use.
    """
    id = models.BigAutoField(primary_key=True)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='points')

    # GPS coordinates
    latitude = models.FloatField()
    longitude = models.FloatField()
    altitude = models.FloatField(default=0.0, help_text="Altitude in meters")

    # Device state
    battery = models.FloatField(default=0.0, help_text="Battery level in percent")
    velocity = models.FloatField(default=0.0, help_text="Velocity in km/h")

    timestamp = models.BigIntegerField(db_index=True, help_text="Unix timestamp in seconds")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'points'
        indexes = [
            models.Index(fields=['user', 'timestamp'], name='points_user_id_ts_idx'),
        ]
        ordering = ['timestamp']

    def __str__(self):
        return f"Point {self.id} @ {self.timestamp} ({self.latitude}, {self.longitude})"

    def to_marker(self):
        """
        Marker row consumed by the map script:
        [lat, lon, battery, altitude, timestamp, velocity, id]
        """
        return [
            self.latitude,
            self.longitude,
            self.battery,
            self.altitude,
            self.timestamp,
            self.velocity,
            self.id,
        ]


class Export(models.Model):
    """
    One user-requested bulk extraction of points to a JSON file
    """

    class Status(models.TextChoices):
        CREATED = 'created', 'Created'
        COMPLETED = 'completed', 'Completed'
        FAILED = 'failed', 'Failed'

    id = models.BigAutoField(primary_key=True)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='exports')
    name = models.CharField(max_length=255)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.CREATED, db_index=True)
    url = models.CharField(max_length=512, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'exports'
        ordering = ['-created_at']

    def __str__(self):
        return f"Export {self.name} ({self.status})"

    @property
    def completed(self):
        return self.status == self.Status.COMPLETED

    @property
    def failed(self):
        return self.status == self.Status.FAILED


class Notification(models.Model):
    """
    Append-only message shown to a user, e.g. after an export finished
    """

    class Kind(models.TextChoices):
        SUCCESS = 'success', 'Success'
        FAILURE = 'failure', 'Failure'

    id = models.BigAutoField(primary_key=True)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='notifications')
    kind = models.CharField(max_length=20, choices=Kind.choices)
    title = models.CharField(max_length=255)
    content = models.TextField()
    read_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notifications'
        ordering = ['-created_at']

    def __str__(self):
        return f"[{self.kind}] {self.title}"

    def to_dict(self):
        return {
            'id': self.id,
            'kind': self.kind,
            'title': self.title,
            'content': self.content,
            'read_at': self.read_at.isoformat() if self.read_at else None,
            'created_at': self.created_at.isoformat(),
        }
