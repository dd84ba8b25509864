"""
Route Segmentation
Splits an ordered point sequence into polylines wherever two consecutive
points are too far apart in space or in time.

Points can be Point model instances or any object exposing
latitude, longitude and timestamp (unix seconds).
"""
from dataclasses import dataclass
from typing import Optional

from .functions import haversine_distance

DEFAULT_DISTANCE_THRESHOLD_METERS = 500
DEFAULT_TIME_THRESHOLD_MINUTES = 60


def segment(points, distance_threshold_m=DEFAULT_DISTANCE_THRESHOLD_METERS,
            time_threshold_min=DEFAULT_TIME_THRESHOLD_MINUTES):
    """
    Split points into contiguous segments.

    A new segment starts when the distance from the last point of the current
    segment is greater than distance_threshold_m, or the elapsed time is greater
    than time_threshold_min. Values equal to a threshold stay in the segment.

    Args:
        points: Points ordered by timestamp
        distance_threshold_m: Maximum gap in meters
        time_threshold_min: Maximum gap in minutes

    Returns:
        List of segments, each a non-empty list of points. Concatenating them
        gives back the input sequence.
    """
    segments = []
    current = []

    for point in points:
        if not current:
            current.append(point)
            continue

        last = current[-1]
        distance = haversine_distance(last.latitude, last.longitude, point.latitude, point.longitude)
        minutes = (point.timestamp - last.timestamp) / 60

        if distance > distance_threshold_m or minutes > time_threshold_min:
            segments.append(current)
            current = [point]
        else:
            current.append(point)

    if current:
        segments.append(current)

    return segments


@dataclass
class SegmentStats:
    """
    Summary of one segment and its gaps to the neighbouring segments.
    Gap fields are None for the first / last segment.
    """
    start: object
    end: object
    duration_minutes: int
    distance_m: float
    distance_to_prev_m: Optional[float] = None
    distance_to_next_m: Optional[float] = None
    minutes_to_prev: Optional[int] = None
    minutes_to_next: Optional[int] = None


def segment_stats(segments):
    """
    Compute SegmentStats for every segment.

    Distance is measured between the first and the last point of a segment,
    not accumulated along it. Neighbour gaps are measured from the previous
    segment's last point and to the next segment's first point.
    """
    stats = []

    for index, points in enumerate(segments):
        start = points[0]
        end = points[-1]
        prev_point = segments[index - 1][-1] if index > 0 else None
        next_point = segments[index + 1][0] if index < len(segments) - 1 else None

        item = SegmentStats(
            start=start,
            end=end,
            duration_minutes=round((end.timestamp - start.timestamp) / 60),
            distance_m=haversine_distance(start.latitude, start.longitude, end.latitude, end.longitude),
        )

        if prev_point is not None:
            item.distance_to_prev_m = haversine_distance(
                prev_point.latitude, prev_point.longitude, start.latitude, start.longitude
            )
            item.minutes_to_prev = round((start.timestamp - prev_point.timestamp) / 60)

        if next_point is not None:
            item.distance_to_next_m = haversine_distance(
                end.latitude, end.longitude, next_point.latitude, next_point.longitude
            )
            item.minutes_to_next = round((next_point.timestamp - end.timestamp) / 60)

        stats.append(item)

    return stats
