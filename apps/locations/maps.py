"""
Map rendering support
Builds the payload the map page draws (markers, heatmap, route polylines)
and computes the fog-of-war overlay in screen space.
"""
import math
from dataclasses import dataclass, field

from django.conf import settings
from django.utils.html import format_html

from .functions import format_distance, format_timestamp, minutes_to_days_hours_minutes
from .segmentation import segment, segment_stats

EARTH_CIRCUMFERENCE_METERS = 40075016.686
TILE_SIZE = 256
MAX_LATITUDE = 85.0511287798
HEATMAP_INTENSITY = 0.3
FOG_LAYER_NAME = 'Fog of War'


@dataclass
class MapConfig:
    meters_between_routes: int
    minutes_between_routes: int
    fog_of_war_meters: int
    timezone: str
    debug: bool = False

    @classmethod
    def from_request(cls, request):
        """
        Defaults from settings.LOCATIONS_MAP, overridden by query parameters.
        Invalid numbers fall back to the defaults.
        """
        defaults = settings.LOCATIONS_MAP
        params = request.GET
        return cls(
            meters_between_routes=_positive_int(
                params.get('meters_between_routes'), defaults['METERS_BETWEEN_ROUTES']),
            minutes_between_routes=_positive_int(
                params.get('minutes_between_routes'), defaults['MINUTES_BETWEEN_ROUTES']),
            fog_of_war_meters=_positive_int(
                params.get('fog_of_war_meters'), defaults['FOG_OF_WAR_METERS']),
            timezone=settings.TIME_ZONE,
            debug=params.get('debug') == 'true',
        )


def _positive_int(value, default):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def route_popup(stats, timezone, debug=False):
    """
    HTML shown when hovering a route polyline
    """
    content = format_html(
        '<b>Start:</b> {}<br><b>End:</b> {}<br><b>Duration:</b> {}<br><b>Distance:</b> {}<br>',
        format_timestamp(stats.start.timestamp, timezone),
        format_timestamp(stats.end.timestamp, timezone),
        minutes_to_days_hours_minutes(stats.duration_minutes),
        format_distance(stats.distance_m),
    )

    if debug:
        content += format_html(
            '<b>Prev Route:</b> {} and {} away<br><b>Next Route:</b> {} and {} away<br>',
            _meters(stats.distance_to_prev_m),
            minutes_to_days_hours_minutes(stats.minutes_to_prev),
            _meters(stats.distance_to_next_m),
            minutes_to_days_hours_minutes(stats.minutes_to_next),
        )

    return content


def _meters(value):
    return 'N/A' if value is None else f"{round(value)}m"


def build_polylines(points, config):
    """
    Segment points into routes and attach hover popups
    """
    segments = segment(points, config.meters_between_routes, config.minutes_between_routes)
    polylines = []

    for points_in_route, stats in zip(segments, segment_stats(segments)):
        polylines.append({
            'latlngs': [[p.latitude, p.longitude] for p in points_in_route],
            'start': [stats.start.latitude, stats.start.longitude],
            'end': [stats.end.latitude, stats.end.longitude],
            'start_popup': f"Start: {format_timestamp(stats.start.timestamp, config.timezone)}",
            'popup': str(route_popup(stats, config.timezone, config.debug)),
        })

    return polylines


def build_map_context(points, config):
    """
    Everything the map script needs, ready to be serialized with json_script
    """
    points = list(points)
    markers = [point.to_marker() for point in points]

    if markers:
        center = markers[-1][:2]
    else:
        center = list(settings.LOCATIONS_MAP['DEFAULT_CENTER'])

    return {
        'markers': markers,
        'heatmap': [[m[0], m[1], HEATMAP_INTENSITY] for m in markers],
        'polylines': build_polylines(points, config),
        'center': center,
        'zoom': settings.LOCATIONS_MAP['DEFAULT_ZOOM'],
        'timezone': config.timezone,
        'fog_of_war_meters': config.fog_of_war_meters,
        'debug': config.debug,
    }


# Fog of war

def meters_per_pixel(latitude, zoom):
    """
    Ground resolution of a Web-Mercator map at the given latitude and zoom
    """
    return EARTH_CIRCUMFERENCE_METERS * math.cos(math.radians(latitude)) / 2 ** (zoom + 8)


def meters_to_pixels(meters, latitude, zoom):
    return meters / meters_per_pixel(latitude, zoom)


def project(latitude, longitude, zoom):
    """
    Spherical Mercator projection to global pixel coordinates (256px tiles)
    """
    scale = TILE_SIZE * 2 ** zoom
    latitude = max(min(latitude, MAX_LATITUDE), -MAX_LATITUDE)
    sin_lat = math.sin(math.radians(latitude))
    x = scale * (longitude + 180) / 360
    y = scale * (0.5 - math.log((1 + sin_lat) / (1 - sin_lat)) / (4 * math.pi))
    return x, y


@dataclass
class Viewport:
    """
    Visible map area: center, zoom and container size in pixels
    """
    latitude: float
    longitude: float
    zoom: int
    width: int
    height: int

    def to_container_point(self, latitude, longitude):
        center_x, center_y = project(self.latitude, self.longitude, self.zoom)
        x, y = project(latitude, longitude, self.zoom)
        return x - center_x + self.width / 2, y - center_y + self.height / 2


def fog_circles(points, radius_m, viewport):
    """
    Cleared circles, one per point, positioned in container pixels.
    The radius is converted at the viewport's center latitude.
    """
    radius = meters_to_pixels(radius_m, viewport.latitude, viewport.zoom)
    circles = []

    for point in points:
        x, y = viewport.to_container_point(point.latitude, point.longitude)
        circles.append({
            'left': x - radius,
            'top': y - radius,
            'size': radius * 2,
        })

    return circles


@dataclass
class FogState:
    """
    Fog overlay toggle, hidden until the layer is enabled in the layer control
    """
    visible: bool = False
    circles: list = field(default_factory=list)


def overlay_add(state, name, points, radius_m, viewport):
    if name == FOG_LAYER_NAME:
        state.visible = True
        state.circles = fog_circles(points, radius_m, viewport)
    return state


def overlay_remove(state, name):
    if name == FOG_LAYER_NAME:
        state.visible = False
        state.circles = []
    return state


def viewport_changed(state, points, radius_m, viewport):
    """
    Zoom or pan: recompute circles while the overlay is visible
    """
    if state.visible:
        state.circles = fog_circles(points, radius_m, viewport)
    return state
