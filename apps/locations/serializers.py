"""
JSON serialization of points for exports and the API
"""
import json
import math

from django.core.serializers.json import DjangoJSONEncoder

from .functions import to_unix_timestamp

# 9999-12-31T23:59:59Z
MAX_TIMESTAMP = 253402300799


def serialize_point(point):
    return {
        'lat': point.latitude,
        'lon': point.longitude,
        'battery': point.battery,
        'altitude': point.altitude,
        'velocity': point.velocity,
        'timestamp': point.timestamp,
        'id': point.id,
    }


class ExportSerializer:
    """
    Export document: the owner's email and the list of points

        {"email": "...", "points": [{"lat": ..., "lon": ..., ...}, ...]}
    """

    def __init__(self, points, email):
        self.points = points
        self.email = email

    def call(self):
        document = {
            'email': self.email,
            'points': [serialize_point(point) for point in self.points],
        }
        return json.dumps(document, cls=DjangoJSONEncoder)


def _number(data, *keys, default=None):
    for key in keys:
        value = data.get(key)
        if value is not None and value != '':
            try:
                number = float(value)
            except (TypeError, ValueError):
                raise ValueError(f'Invalid {key}: {value!r}')
            if not math.isfinite(number):
                raise ValueError(f'Invalid {key}: {value!r}')
            return number
    if default is None:
        raise ValueError(f'Missing {keys[0]}')
    return default


def point_fields(data):
    """
    Model fields for a point described by an API payload or an export entry.
    Accepts both 'latitude'/'longitude' and the export's 'lat'/'lon' keys.

    Raises:
        ValueError: on missing or out of range values
    """
    latitude = _number(data, 'latitude', 'lat')
    longitude = _number(data, 'longitude', 'lon')

    if not -90 <= latitude <= 90:
        raise ValueError(f'Latitude out of range: {latitude}')
    if not -180 <= longitude <= 180:
        raise ValueError(f'Longitude out of range: {longitude}')

    if data.get('timestamp') in (None, ''):
        raise ValueError('Missing timestamp')

    timestamp = to_unix_timestamp(data['timestamp'])
    if not 0 <= timestamp <= MAX_TIMESTAMP:
        raise ValueError(f'Timestamp out of range: {timestamp}')

    return {
        'latitude': latitude,
        'longitude': longitude,
        'altitude': _number(data, 'altitude', default=0.0),
        'battery': _number(data, 'battery', default=0.0),
        'velocity': _number(data, 'velocity', default=0.0),
        'timestamp': timestamp,
    }
