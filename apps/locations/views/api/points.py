"""
Points API
GET/POST /api/v1/points/ and GET/DELETE /api/v1/points/<id>/
"""
import logging

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from ...models import Point
from ...serializers import point_fields, serialize_point
from ..common import time_range
from .base import api_login_required, json_error, parse_json_body

logger = logging.getLogger(__name__)


@api_login_required
@require_http_methods(['GET', 'POST'])
def points_collection(request):
    """
    GET: list the user's points ordered by timestamp

    Query parameters:
        start_at: Lower bound, unix seconds or ISO datetime (optional)
        end_at: Upper bound, unix seconds or ISO datetime (optional)

    POST: create a point from a JSON body
        {"latitude": .., "longitude": .., "timestamp": .., "altitude": .., "battery": .., "velocity": ..}
    """
    if request.method == 'POST':
        return create_point(request)

    try:
        start, end = time_range(request, default_today=False)
    except ValueError as e:
        return json_error(str(e), 400)

    points = Point.objects.filter(user=request.user)
    if start is not None:
        points = points.filter(timestamp__gte=start)
    if end is not None:
        points = points.filter(timestamp__lte=end)

    return JsonResponse([serialize_point(p) for p in points.order_by('timestamp')], safe=False)


def create_point(request):
    try:
        fields = point_fields(parse_json_body(request))
    except ValueError as e:
        logger.warning(f"[SKIP] User {request.user.pk}: invalid point payload: {e}")
        return json_error(str(e), 400)

    point = Point.objects.create(user=request.user, **fields)
    logger.info(f"[INSERT] User {request.user.pk}: point {point.id} @ {point.timestamp}")

    return JsonResponse(serialize_point(point), status=201)


@api_login_required
@require_http_methods(['GET', 'DELETE'])
def point_detail(request, point_id):
    """
    GET: one point as JSON
    DELETE: remove the point, answers {"status": "success", "id": <id>}
    """
    try:
        point = Point.objects.get(pk=point_id, user=request.user)
    except Point.DoesNotExist:
        return json_error('Point not found', 404)

    if request.method == 'DELETE':
        point.delete()
        logger.info(f"[DELETE] User {request.user.pk}: point {point_id}")
        return JsonResponse({'status': 'success', 'id': point_id})

    return JsonResponse(serialize_point(point))
