"""
Export Generation
Writes a user's points for a time range to a JSON file and records the outcome.
"""
import logging
from datetime import datetime
from pathlib import Path

from django.conf import settings
from django.utils import timezone

from ..functions import to_unix_timestamp
from ..models import Export, Notification, Point
from ..serializers import ExportSerializer
from .notifications import create_notification

logger = logging.getLogger(__name__)


def export_name(start_at, end_at):
    """
    Default export name: '<start date>_<end date>' in the current time zone
    """
    start_date = timezone.localtime(_aware(start_at)).date()
    end_date = timezone.localtime(_aware(end_at)).date()
    return f"{start_date.isoformat()}_{end_date.isoformat()}"


def _aware(value):
    return datetime.fromtimestamp(to_unix_timestamp(value), tz=timezone.get_current_timezone())


def export_path(user, name):
    """
    Files are kept per owner: EXPORTS_ROOT/<user pk>/<name>.json
    """
    return Path(settings.EXPORTS_ROOT) / str(user.pk) / f"{name}.json"


def export_url(name):
    return f"{settings.EXPORTS_URL}{name}.json"


def create_export(export, start_at, end_at):
    """
    Export the owner's points with start_at <= timestamp <= end_at.

    On success the file is written to EXPORTS_ROOT/<user pk>/<name>.json, the export is
    marked completed with url 'exports/<name>.json' and a success notification
    is created. Any error marks the export failed and creates a failure
    notification instead; the error is logged, not raised.
    """
    user = export.user

    try:
        start = to_unix_timestamp(start_at)
        end = to_unix_timestamp(end_at)

        points = Point.objects.filter(
            user=user,
            timestamp__range=(start, end),
        ).order_by('timestamp', 'id')

        content = ExportSerializer(points, user.email).call()

        file_path = export_path(user, export.name)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(content)

        export.url = export_url(export.name)
        export.status = Export.Status.COMPLETED
        export.save(update_fields=['url', 'status'])

        logger.info(f"[EXPORT] {export.name}: wrote {file_path} for user {user.pk}")

        create_notification(
            user=user,
            kind=Notification.Kind.SUCCESS,
            title='Export finished',
            content=f"Export \"{export.name}\" was created successfully.",
        )
    except Exception as e:
        logger.error(f"[ERROR] Export failed to create: {e}")

        export.status = Export.Status.FAILED
        export.url = None
        export.save(update_fields=['status', 'url'])

        create_notification(
            user=user,
            kind=Notification.Kind.FAILURE,
            title='Export failed',
            content=f"Export \"{export.name}\" failed: {e}",
        )


def delete_export(export):
    """
    Remove the export record and its file, unless another export of the same owner shares the name
    """
    file_path = export_path(export.user, export.name)
    shared = Export.objects.filter(user=export.user, name=export.name).exclude(pk=export.pk).exists()
    if file_path.exists() and not shared:
        file_path.unlink()
        logger.info(f"[EXPORT] Removed {file_path}")
    export.delete()
