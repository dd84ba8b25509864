"""
Main URL Configuration
Routes to location history application, auth views and Django admin
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # Django admin panel
    path('admin/', admin.site.urls),

    # Login / logout / password views
    path('accounts/', include('django.contrib.auth.urls')),

    # Location history routes: map, exports, notifications, /api/v1/
    path('', include('apps.locations.urls')),
]
