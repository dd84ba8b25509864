"""
Management command to list a user's routes
Splits points into routes the same way the map does and prints per-route stats
"""
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.conf import settings

from apps.locations.functions import (
    format_distance, format_timestamp, minutes_to_days_hours_minutes, to_unix_timestamp,
)
from apps.locations.models import Point
from apps.locations.segmentation import segment, segment_stats


class Command(BaseCommand):
    help = 'Print the routes recorded for a user'

    def add_arguments(self, parser):
        parser.add_argument('--user', type=str, required=True, help='Username')
        parser.add_argument('--start', type=str, help='Range start (ISO date/datetime or unix seconds)')
        parser.add_argument('--end', type=str, help='Range end (ISO date/datetime or unix seconds)')
        parser.add_argument(
            '--meters',
            type=int,
            default=settings.LOCATIONS_MAP['METERS_BETWEEN_ROUTES'],
            help='Distance that splits routes',
        )
        parser.add_argument(
            '--minutes',
            type=int,
            default=settings.LOCATIONS_MAP['MINUTES_BETWEEN_ROUTES'],
            help='Time gap that splits routes',
        )

    def handle(self, *args, **options):
        User = get_user_model()
        try:
            user = User.objects.get(username=options['user'])
        except User.DoesNotExist:
            raise CommandError(f"User not found: {options['user']}")

        points = Point.objects.filter(user=user)

        try:
            if options['start']:
                points = points.filter(timestamp__gte=to_unix_timestamp(options['start']))
            if options['end']:
                points = points.filter(timestamp__lte=to_unix_timestamp(options['end']))
        except ValueError as e:
            raise CommandError(str(e))

        segments = segment(points.order_by('timestamp'), options['meters'], options['minutes'])

        if not segments:
            self.stdout.write(self.style.WARNING('No points found'))
            return

        self.stdout.write(self.style.SUCCESS(f'\n=== Routes for {user.get_username()} ===\n'))

        for i, (route, stats) in enumerate(zip(segments, segment_stats(segments)), 1):
            self.stdout.write(f"{i}. {format_timestamp(stats.start.timestamp)} -> "
                              f"{format_timestamp(stats.end.timestamp)}")
            self.stdout.write(f"   Points: {len(route)}")
            self.stdout.write(f"   Duration: {minutes_to_days_hours_minutes(stats.duration_minutes)}")
            self.stdout.write(f"   Distance: {format_distance(stats.distance_m)}")
            self.stdout.write(f"   Gap to previous: {format_distance(stats.distance_to_prev_m)}, "
                              f"{minutes_to_days_hours_minutes(stats.minutes_to_prev)}")
            self.stdout.write("")

        self.stdout.write(self.style.SUCCESS(f'Total: {len(segments)} routes, {sum(map(len, segments))} points\n'))
