"""
Notification Views
"""
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET, require_POST

from ...models import Notification
from ...services import mark_as_read


@login_required
@require_GET
def notification_list(request):
    """
    The user's notifications, newest first. ?unread=true limits to unread ones.
    """
    notifications = Notification.objects.filter(user=request.user)
    if request.GET.get('unread') == 'true':
        notifications = notifications.filter(read_at__isnull=True)

    return JsonResponse({
        'count': notifications.count(),
        'notifications': [n.to_dict() for n in notifications.order_by('-created_at')],
    })


@login_required
@require_POST
def notification_read(request, notification_id):
    notification = get_object_or_404(Notification, pk=notification_id, user=request.user)
    mark_as_read(notification)
    return JsonResponse(notification.to_dict())
