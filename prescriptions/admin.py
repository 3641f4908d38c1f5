from django.contrib import admin
from .models import Prescription


@admin.register(Prescription)
class PrescriptionAdmin(admin.ModelAdmin):
    list_display = ('id', 'visit', 'patient', 'doctor', 'is_verified', 'verified_by', 'verified_at', 'created_at')
    list_filter = ('is_verified', 'created_at')
    search_fields = ('patient__permanent_id', 'doctor__username')
    readonly_fields = ('is_verified', 'verified_by', 'verified_at', 'created_at')
