from django.contrib import admin
from .models import Patient, TemporaryToken


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'permanent_id', 'user', 'sex', 'created_at')
    search_fields = ('permanent_id', 'user__full_name', 'user__username')
    list_filter = ('sex', 'created_at')
    readonly_fields = ('permanent_id', 'reference', 'created_at', 'updated_at')


@admin.register(TemporaryToken)
class TemporaryTokenAdmin(admin.ModelAdmin):
    list_display = ('id', 'token', 'patient', 'is_active', 'expires_at', 'created_at')
    search_fields = ('token', 'patient__permanent_id')
    list_filter = ('is_active', 'expires_at', 'created_at')
    readonly_fields = ('token', 'created_at')
