"""
API helpers: authentication, JSON bodies and error responses
"""
import json
from functools import wraps

from django.http import JsonResponse


def json_error(message, status):
    return JsonResponse({'status': 'error', 'message': message}, status=status)


def api_login_required(view):
    """
    Like login_required, but answers 401 JSON instead of redirecting
    """
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return json_error('Authentication required', 401)
        return view(request, *args, **kwargs)
    return wrapper


def parse_json_body(request):
    """
    Decode the request body as a JSON object

    Raises:
        ValueError: if the body is not a JSON object
    """
    try:
        data = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f'Invalid JSON: {e}')

    if not isinstance(data, dict):
        raise ValueError('JSON body must be an object')
    return data
