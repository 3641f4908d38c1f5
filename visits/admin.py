from django.contrib import admin
from .models import Visit


@admin.register(Visit)
class VisitAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient', 'doctor', 'visit_date', 'is_critical')
    list_filter = ('is_critical', 'visit_date')
    search_fields = ('patient__permanent_id', 'doctor__username', 'chief_complaint', 'diagnosis')
    readonly_fields = ('visit_date', 'created_at')

    # visits are append-only
    def has_change_permission(self, request, obj=None):
        return obj is None
