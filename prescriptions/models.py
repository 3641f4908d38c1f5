from django.conf import settings
from django.db import models
from django.utils import timezone


class Prescription(models.Model):
    """
    Medication order written during a visit.
    Starts unverified; a pharmacist verifies it exactly once and
    there is no way back to unverified.
    """
    visit = models.ForeignKey('visits.Visit', on_delete=models.PROTECT, related_name='prescriptions')
    patient = models.ForeignKey('patients.Patient', on_delete=models.PROTECT, related_name='prescriptions')
    doctor = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='written_prescriptions')
    medications = models.JSONField(
        default=list,
        help_text="""
        ordered medication entries:
        [{"name": "", "dosage": "", "frequency": "", "duration": ""}]
        """
    )
    instructions = models.TextField(blank=True)
    is_verified = models.BooleanField(default=False)
    verified_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.PROTECT, null=True, blank=True, related_name='verified_prescriptions'
    )
    verified_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'prescriptions'

    def __str__(self):
        state = 'verified' if self.is_verified else 'pending'
        return f"Prescription {self.id} ({state})"

    @property
    def status(self):
        return 'verified' if self.is_verified else 'pending'
