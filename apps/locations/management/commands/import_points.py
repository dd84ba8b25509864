"""
Management command to import points from an export file.
Reads the JSON document written by the export pipeline:
{"email": "...", "points": [{"lat": .., "lon": .., "timestamp": .., ...}, ...]}
"""
import json

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.locations.models import Point
from apps.locations.serializers import point_fields


class Command(BaseCommand):
    help = 'Import points from an export JSON file'

    def add_arguments(self, parser):
        parser.add_argument('file', type=str, help='Path to the export file')
        parser.add_argument(
            '--user',
            type=str,
            help='Username that receives the points. If not provided, the export email is used.'
        )

    def handle(self, *args, **options):
        path = options['file']

        try:
            with open(path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except FileNotFoundError:
            raise CommandError(f'Export file not found: {path}')
        except json.JSONDecodeError as e:
            raise CommandError(f'Invalid JSON in {path}: {e}')

        if not isinstance(document, dict) or not isinstance(document.get('points'), list):
            raise CommandError('Export file must contain a "points" list')

        user = self.resolve_user(options.get('user'), document.get('email'))
        imported, skipped, errors = self.import_points(user, document['points'])

        self.stdout.write(
            self.style.SUCCESS(
                f'Import complete: {imported} imported, {skipped} skipped, '
                f'{errors} errors'
            )
        )

    def resolve_user(self, username, email):
        """Find the owner by --user, falling back to the export's email"""
        User = get_user_model()

        try:
            if username:
                return User.objects.get(username=username)
            if email:
                return User.objects.get(email=email)
        except User.DoesNotExist:
            raise CommandError(f'User not found: {username or email}')
        except User.MultipleObjectsReturned:
            raise CommandError(f'More than one user with email {email}, use --user')

        raise CommandError('No --user given and the export has no email')

    @transaction.atomic
    def import_points(self, user, entries):
        """Create points that are not stored yet for this user"""
        imported = 0
        skipped = 0
        errors = 0

        for index, entry in enumerate(entries, 1):
            if not isinstance(entry, dict):
                self.stdout.write(self.style.WARNING(f'Entry {index}: not an object'))
                errors += 1
                continue

            try:
                fields = point_fields(entry)
            except ValueError as e:
                self.stdout.write(self.style.WARNING(f'Entry {index}: {e}'))
                errors += 1
                continue

            existing = Point.objects.filter(
                user=user,
                timestamp=fields['timestamp'],
                latitude=fields['latitude'],
                longitude=fields['longitude'],
            ).exists()

            if existing:
                skipped += 1
                continue

            Point.objects.create(user=user, **fields)
            imported += 1

        return imported, skipped, errors
