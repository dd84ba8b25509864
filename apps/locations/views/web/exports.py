"""
Export Web Views
Export history, export creation and download of finished files
"""
import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import FileResponse, Http404
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_POST

from ...functions import to_unix_timestamp
from ...models import Export
from ...services import create_export, delete_export, export_name
from ...services.exports import export_path

logger = logging.getLogger(__name__)


@login_required
@require_GET
def export_index(request):
    """
    List the user's exports, newest first
    """
    exports = Export.objects.filter(user=request.user).order_by('-created_at')
    return render(request, 'locations/exports.html', {'exports': exports})


@login_required
@require_POST
def export_create(request):
    """
    Create an export for the posted start_at / end_at and generate its file

    POST parameters:
        start_at: Range start, ISO datetime or unix seconds (required)
        end_at: Range end, ISO datetime or unix seconds (required)
    """
    start_at = request.POST.get('start_at', '')
    end_at = request.POST.get('end_at', '')

    try:
        to_unix_timestamp(start_at)
        to_unix_timestamp(end_at)
    except ValueError as e:
        messages.error(request, f'Invalid export range: {e}')
        return redirect('locations:export_index')

    export = Export.objects.create(
        user=request.user,
        name=export_name(start_at, end_at),
        status=Export.Status.CREATED,
    )
    logger.info(f"[EXPORT] User {request.user.pk}: created export {export.name}")

    create_export(export, start_at, end_at)

    if export.completed:
        messages.success(request, f'Export {export.name} is ready.')
    else:
        messages.error(request, f'Export {export.name} failed.')
    return redirect('locations:export_index')


@login_required
@require_POST
def export_delete(request, export_id):
    export = get_object_or_404(Export, pk=export_id, user=request.user)
    delete_export(export)
    messages.success(request, 'Export was deleted.')
    return redirect('locations:export_index')


@login_required
@require_GET
def export_download(request, name):
    """
    Serve exports/<name>.json to the user who owns a completed export of that name
    """
    owned = Export.objects.filter(
        user=request.user,
        name=name,
        status=Export.Status.COMPLETED,
    ).exists()
    file_path = export_path(request.user, name)

    if not owned or not file_path.exists():
        raise Http404('Export not found')

    return FileResponse(open(file_path, 'rb'), content_type='application/json',
                        as_attachment=True, filename=f'{name}.json')
