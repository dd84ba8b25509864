"""
Django Admin Configuration for Location History Application
"""
from django.contrib import admin
from .models import Point, Export, Notification


@admin.register(Point)
class PointAdmin(admin.ModelAdmin):
    """
    Admin interface for recorded points
    """
    list_display = ['id', 'timestamp', 'user', 'latitude', 'longitude',
                    'altitude', 'velocity', 'battery']
    list_filter = ['user']
    search_fields = ['user__username', 'user__email']
    readonly_fields = ['created_at']

    fieldsets = (
        ('Basic Info', {
            'fields': ('user', 'timestamp', 'created_at')
        }),
        ('Location', {
            'fields': ('latitude', 'longitude', 'altitude')
        }),
        ('Device', {
            'fields': ('battery', 'velocity')
        }),
    )


@admin.register(Export)
class ExportAdmin(admin.ModelAdmin):
    list_display = ['name', 'user', 'status', 'url', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['name', 'user__username']
    readonly_fields = ['created_at']


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ['title', 'user', 'kind', 'read_at', 'created_at']
    list_filter = ['kind', 'created_at']
    search_fields = ['title', 'content', 'user__username']
    readonly_fields = ['created_at']
