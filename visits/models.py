from django.conf import settings
from django.db import models
from django.utils import timezone


class Visit(models.Model):
    """
    One clinical encounter of a patient, written by a doctor.
    Visits are append-only: once saved they are never changed.
    """
    patient = models.ForeignKey('patients.Patient', on_delete=models.PROTECT, related_name='visits')
    doctor = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='authored_visits')
    visit_date = models.DateTimeField(default=timezone.now)
    chief_complaint = models.TextField(blank=True)
    diagnosis = models.TextField(blank=True)
    notes = models.TextField(blank=True)
    audio_url = models.URLField(blank=True)
    transcription = models.TextField(blank=True)
    is_critical = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'visits'
        indexes = [
            models.Index(fields=['patient', '-visit_date'], name='visit_patient_date_idx'),
        ]

    def __str__(self):
        return f"Visit {self.id} - patient {self.patient_id}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("visits are append-only and cannot be modified")
        super().save(*args, **kwargs)
