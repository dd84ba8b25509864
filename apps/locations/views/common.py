"""
Request helpers shared by web and API views
"""
from datetime import datetime, time, timedelta

from django.utils import timezone

from ..functions import to_unix_timestamp


def today_range():
    """
    Unix seconds of the first and last second of the current local day
    """
    today = timezone.localdate()
    start = timezone.make_aware(datetime.combine(today, time.min))
    end = start + timedelta(days=1) - timedelta(seconds=1)
    return int(start.timestamp()), int(end.timestamp())


def time_range(request, default_today=True):
    """
    Read start_at / end_at query parameters as unix seconds.

    Missing values default to today's bounds (or None when default_today is off).

    Raises:
        ValueError: if a parameter is present but cannot be parsed
    """
    start_param = request.GET.get('start_at')
    end_param = request.GET.get('end_at')

    if default_today:
        start, end = today_range()
    else:
        start, end = None, None

    if start_param:
        start = to_unix_timestamp(start_param)
    if end_param:
        end = to_unix_timestamp(end_param)

    return start, end
