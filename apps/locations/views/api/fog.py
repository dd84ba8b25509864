"""
Fog of War API
Recomputes the cleared circles of the fog overlay for the client's viewport.
"""
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from ...maps import (
    FOG_LAYER_NAME, FogState, MapConfig, Viewport,
    overlay_add, overlay_remove, viewport_changed,
)
from ...models import Point
from ..common import time_range
from .base import api_login_required, json_error

EVENTS = ('overlayadd', 'overlayremove', 'viewport')


@api_login_required
@require_GET
def fog(request):
    """
    Apply one overlay event to the client's fog state.

    Query parameters:
        event: overlayadd, overlayremove or viewport
        name: Layer name for overlay events (default: 'Fog of War')
        visible: Current state on the client, 'true' or 'false'
        lat, lon, zoom, width, height: Viewport
        start_at, end_at: Range of points that clear the fog (default: today)
        fog_of_war_meters: Cleared radius around each point

    Returns:
        {"visible": bool, "circles": [{"left", "top", "size"}, ...]}
    """
    event = request.GET.get('event', 'viewport')
    if event not in EVENTS:
        return json_error(f'Unknown event: {event}', 400)

    name = request.GET.get('name', FOG_LAYER_NAME)
    state = FogState(visible=request.GET.get('visible') == 'true')

    if event == 'overlayremove':
        state = overlay_remove(state, name)
        return JsonResponse({'visible': state.visible, 'circles': state.circles})

    try:
        viewport = Viewport(
            latitude=float(request.GET['lat']),
            longitude=float(request.GET['lon']),
            zoom=int(request.GET['zoom']),
            width=int(request.GET['width']),
            height=int(request.GET['height']),
        )
        start, end = time_range(request)
    except KeyError as e:
        return json_error(f'Missing parameter: {e.args[0]}', 400)
    except ValueError as e:
        return json_error(str(e), 400)

    config = MapConfig.from_request(request)
    points = Point.objects.filter(
        user=request.user,
        timestamp__range=(start, end),
    ).only('latitude', 'longitude')

    if event == 'overlayadd':
        state = overlay_add(state, name, points, config.fog_of_war_meters, viewport)
    else:
        state = viewport_changed(state, points, config.fog_of_war_meters, viewport)

    return JsonResponse({'visible': state.visible, 'circles': state.circles})
