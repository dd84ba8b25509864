"""
Map Web View
Renders the user's points as markers, heatmap and route polylines
"""
from django.contrib.auth.decorators import login_required
from django.shortcuts import render
from django.views.decorators.http import require_GET

from ...functions import format_input_datetime
from ...maps import MapConfig, build_map_context
from ...models import Point
from ..common import time_range, today_range


@login_required
@require_GET
def map_view(request):
    """
    Render the map for points between start_at and end_at (default: today)
    """
    try:
        start, end = time_range(request)
    except ValueError:
        start, end = today_range()

    points = Point.objects.filter(
        user=request.user,
        timestamp__range=(start, end),
    ).order_by('timestamp')

    config = MapConfig.from_request(request)

    return render(request, 'locations/map.html', {
        'map_data': build_map_context(points, config),
        'points_count': len(points),
        'start_at': format_input_datetime(start),
        'end_at': format_input_datetime(end),
    })
