import json
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.locations.models import Point

from .conftest import BASE_TIMESTAMP


@pytest.fixture
def export_file(tmp_path):
    path = tmp_path / 'export.json'
    path.write_text(json.dumps({
        'email': 'alice@example.com',
        'points': [
            {'lat': 52.52, 'lon': 13.405, 'battery': 80, 'altitude': 30, 'velocity': 0,
             'timestamp': BASE_TIMESTAMP, 'id': 1},
            {'lat': 52.53, 'lon': 13.41, 'battery': 79, 'altitude': 31, 'velocity': 5,
             'timestamp': BASE_TIMESTAMP + 60, 'id': 2},
            {'lat': 100, 'lon': 13.41, 'timestamp': BASE_TIMESTAMP + 120, 'id': 3},
        ],
    }), encoding='utf-8')
    return path


class TestImportPoints:

    def test_imports_points_for_user(self, user, export_file):
        out = StringIO()
        call_command('import_points', str(export_file), '--user', 'alice', stdout=out)

        assert Point.objects.filter(user=user).count() == 2
        assert 'Import complete: 2 imported, 0 skipped, 1 errors' in out.getvalue()

    def test_second_import_skips_existing_points(self, user, export_file):
        call_command('import_points', str(export_file), '--user', 'alice', stdout=StringIO())
        out = StringIO()
        call_command('import_points', str(export_file), '--user', 'alice', stdout=out)

        assert Point.objects.count() == 2
        assert '0 imported, 2 skipped' in out.getvalue()

    def test_falls_back_to_export_email(self, user, export_file):
        call_command('import_points', str(export_file), stdout=StringIO())

        assert Point.objects.filter(user=user).count() == 2

    def test_unknown_user(self, user, export_file):
        with pytest.raises(CommandError):
            call_command('import_points', str(export_file), '--user', 'nobody', stdout=StringIO())

    def test_missing_file(self, db, tmp_path):
        with pytest.raises(CommandError):
            call_command('import_points', str(tmp_path / 'missing.json'), stdout=StringIO())

    def test_invalid_document(self, user, tmp_path):
        path = tmp_path / 'export.json'
        path.write_text('[1, 2, 3]', encoding='utf-8')

        with pytest.raises(CommandError):
            call_command('import_points', str(path), '--user', 'alice', stdout=StringIO())


class TestRouteSummary:

    def test_prints_routes(self, user, make_point):
        make_point(user, timestamp=BASE_TIMESTAMP)
        make_point(user, latitude=52.521, timestamp=BASE_TIMESTAMP + 60)
        make_point(user, latitude=48.85, longitude=2.35, timestamp=BASE_TIMESTAMP + 120)

        out = StringIO()
        call_command('route_summary', '--user', 'alice', stdout=out)

        output = out.getvalue()
        assert 'Total: 2 routes, 3 points' in output
        assert 'Points: 2' in output

    def test_respects_range_and_thresholds(self, user, make_point):
        make_point(user, timestamp=BASE_TIMESTAMP)
        make_point(user, latitude=52.521, timestamp=BASE_TIMESTAMP + 60)
        make_point(user, timestamp=BASE_TIMESTAMP + 86400)

        out = StringIO()
        call_command('route_summary', '--user', 'alice', '--end', str(BASE_TIMESTAMP + 60),
                     '--meters', '50', stdout=out)

        assert 'Total: 2 routes, 2 points' in out.getvalue()

    def test_no_points(self, user):
        out = StringIO()
        call_command('route_summary', '--user', 'alice', stdout=out)

        assert 'No points found' in out.getvalue()

    def test_unknown_user(self, db):
        with pytest.raises(CommandError):
            call_command('route_summary', '--user', 'nobody', stdout=StringIO())
