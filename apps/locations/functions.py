"""
Helper functions shared by the map, exports and management commands
"""
import math
from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

EARTH_RADIUS_METERS = 6371000


def haversine_distance(lat1, lon1, lat2, lon2):
    """
    Calculate distance between two points on Earth in meters using Haversine formula.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    a = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_METERS * c


def minutes_to_days_hours_minutes(minutes):
    """
    Format a number of minutes as '1d 2h 5min'.
    None is rendered as 'N/A'.
    """
    if minutes is None:
        return 'N/A'

    minutes = int(minutes)
    days, minutes = divmod(minutes, 24 * 60)
    hours, minutes = divmod(minutes, 60)

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0 or not parts:
        parts.append(f"{minutes}min")
    return ' '.join(parts)


def format_distance(meters):
    """
    Human readable distance: meters below 1 km, kilometers above
    """
    if meters is None:
        return 'N/A'
    if meters < 1000:
        return f"{meters:.2f} meters"
    return f"{meters / 1000:.2f} km"


def format_timestamp(timestamp, tz_name=None):
    """
    Render a unix timestamp as 'DD/MM/YYYY, HH:MM:SS' in the given time zone
    """
    tz = timezone.get_current_timezone() if tz_name is None else ZoneInfo(tz_name)
    moment = datetime.fromtimestamp(int(timestamp), tz=tz)
    return moment.strftime('%d/%m/%Y, %H:%M:%S')


def to_unix_timestamp(value):
    """
    Convert a datetime, date, ISO string or number to unix seconds.
    Naive values are interpreted in the current time zone; dates mean midnight.

    Raises:
        ValueError: if the value cannot be interpreted
    """
    if value is None or value == '':
        raise ValueError('Empty timestamp')

    if isinstance(value, bool):
        raise ValueError(f'Invalid timestamp: {value!r}')

    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise ValueError(f'Invalid timestamp: {value!r}')
        return int(value)

    if isinstance(value, str):
        value = value.strip()
        if value.lstrip('-').isdigit():
            return int(value)
        parsed = parse_datetime(value)
        if parsed is None:
            parsed = parse_date(value)
        if parsed is None:
            raise ValueError(f'Invalid timestamp: {value!r}')
        value = parsed

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time.min)
    else:
        raise ValueError(f'Invalid timestamp: {value!r}')

    if timezone.is_naive(moment):
        moment = timezone.make_aware(moment)

    return int(moment.timestamp())


def format_input_datetime(timestamp):
    """
    Local time as accepted by <input type="datetime-local">
    """
    moment = datetime.fromtimestamp(int(timestamp), tz=timezone.get_current_timezone())
    return moment.strftime('%Y-%m-%dT%H:%M:%S')
