import random
from collections import namedtuple

import pytest

from apps.locations.functions import haversine_distance
from apps.locations.segmentation import segment, segment_stats

P = namedtuple('P', ['latitude', 'longitude', 'timestamp'])


def random_track(seed, size=200):
    rng = random.Random(seed)
    lat, lon, ts = 52.5, 13.4, 1609459200
    points = []
    for _ in range(size):
        # mostly small steps, sometimes a jump in space or time
        lat += rng.choice([0.0005, -0.0005, 0.001, 0.02])
        lon += rng.choice([0.0005, -0.0005, 0.001, -0.02])
        ts += rng.choice([30, 60, 120, 5000])
        points.append(P(lat, lon, ts))
    return points


def test_empty_input():
    assert segment([]) == []


def test_single_point():
    point = P(0, 0, 0)
    assert segment([point]) == [[point]]


def test_distance_gap_splits_even_when_time_is_close():
    a = P(0, 0, 0)
    b = P(0, 0.01, 30)
    assert segment([a, b], 500, 60) == [[a], [b]]


def test_time_gap_splits_same_place():
    a = P(52.5, 13.4, 0)
    b = P(52.5, 13.4, 3601)
    assert segment([a, b], 500, 60) == [[a], [b]]


def test_gap_equal_to_thresholds_stays_in_segment():
    a = P(0, 0, 0)
    b = P(0, 0.001, 3600)
    distance = haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)
    assert segment([a, b], distance, 60) == [[a, b]]


def test_gap_is_measured_from_last_point_of_current_segment():
    # each step is 0.001 deg (~111 m), total drift is far beyond the threshold
    points = [P(0, i * 0.001, i * 60) for i in range(20)]
    assert segment(points, 500, 60) == [points]


@pytest.mark.parametrize('seed', [1, 2, 3, 42])
def test_segments_partition_the_input(seed):
    points = random_track(seed)
    segments = segment(points, 500, 60)

    assert all(segments)
    assert [p for s in segments for p in s] == points


@pytest.mark.parametrize('seed', [1, 2, 3, 42])
def test_boundaries_only_where_a_threshold_is_exceeded(seed):
    points = random_track(seed)
    segments = segment(points, 500, 60)

    for s in segments:
        for prev, cur in zip(s, s[1:]):
            distance = haversine_distance(prev.latitude, prev.longitude, cur.latitude, cur.longitude)
            assert distance <= 500
            assert (cur.timestamp - prev.timestamp) / 60 <= 60

    for left, right in zip(segments, segments[1:]):
        last, first = left[-1], right[0]
        distance = haversine_distance(last.latitude, last.longitude, first.latitude, first.longitude)
        assert distance > 500 or (first.timestamp - last.timestamp) / 60 > 60


def test_stats_for_segments_and_neighbour_gaps():
    first = [P(0, 0, 0), P(0, 0.001, 600), P(0, 0.002, 1200)]
    second = [P(0, 0.1, 9000), P(0, 0.1005, 9300)]
    segments = segment(first + second, 500, 60)
    assert segments == [first, second]

    stats = segment_stats(segments)

    assert stats[0].start == first[0]
    assert stats[0].end == first[-1]
    assert stats[0].duration_minutes == 20
    assert stats[0].distance_m == pytest.approx(haversine_distance(0, 0, 0, 0.002))
    assert stats[0].distance_to_prev_m is None
    assert stats[0].minutes_to_prev is None
    assert stats[0].distance_to_next_m == pytest.approx(haversine_distance(0, 0.002, 0, 0.1))
    assert stats[0].minutes_to_next == 130

    assert stats[1].minutes_to_prev == 130
    assert stats[1].distance_to_prev_m == pytest.approx(stats[0].distance_to_next_m)
    assert stats[1].distance_to_next_m is None
    assert stats[1].minutes_to_next is None
    assert stats[1].duration_minutes == 5


def test_stats_distance_is_between_endpoints_only():
    out_and_back = [P(0, 0, 0), P(0, 0.003, 60), P(0, 0, 120)]
    [stats] = segment_stats(segment(out_and_back, 500, 60))
    assert stats.distance_m == 0


def test_stats_of_no_segments():
    assert segment_stats([]) == []
