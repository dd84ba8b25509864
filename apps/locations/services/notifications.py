"""
User notifications
"""
import logging
from django.utils import timezone
from ..models import Notification

logger = logging.getLogger(__name__)


def create_notification(user, kind, title, content):
    """
    Append a notification for the user
    """
    notification = Notification.objects.create(user=user, kind=kind, title=title, content=content)
    logger.info(f"[NOTIFY] User {user.pk}: {kind} - {title}")
    return notification


def mark_as_read(notification):
    if notification.read_at is None:
        notification.read_at = timezone.now()
        notification.save(update_fields=['read_at'])
    return notification
