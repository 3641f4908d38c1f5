from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone
import uuid


class Patient(models.Model):
    """
    Stores patient demographic and emergency contact information.
    Each patient belongs to exactly one patient user and carries a
    permanent id that never changes once assigned.
    """
    SEX_CHOICES = (
        ('male', 'Male'),
        ('female', 'Female'),
        ('other', 'Other'),
    )
    # opaque handle given to doctors and pharmacists instead of the permanent id
    reference = models.UUIDField(default=uuid.uuid4, editable=False, unique=True)
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name='patient_profile')
    permanent_id = models.CharField(max_length=12, unique=True, editable=False)
    date_of_birth = models.DateField()
    sex = models.CharField(max_length=10, choices=SEX_CHOICES)
    blood_group = models.CharField(max_length=5, blank=True)
    emergency_contact = models.CharField(max_length=250)
    address = models.TextField()
    nearest_police_station = models.CharField(max_length=250, blank=True)
    last_online_sync = models.DateTimeField(default=timezone.now)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'patients'

    def __str__(self):
        return self.permanent_id


class TemporaryToken(models.Model):
    """
    Short-lived capability a patient shares with a doctor or pharmacist.
    It resolves to the patient only while it is active and not expired;
    expiry is evaluated at read time, nothing sweeps old rows.
    """
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name='temporary_tokens')
    token = models.CharField(max_length=8)
    expires_at = models.DateTimeField()
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'temporary_tokens'
        constraints = [
            models.UniqueConstraint(
                fields=['token'],
                condition=Q(is_active=True),
                name='uq_active_token_value',
            ),
        ]
        indexes = [
            models.Index(fields=['token', 'expires_at'], name='temporary_token_lookup_idx'),
        ]

    def __str__(self):
        return f"token {self.id} - patient {self.patient_id}"

    def is_expired(self, now=None):
        return (now or timezone.now()) >= self.expires_at

    def is_usable(self, now=None):
        # an active flag alone is not enough
        return self.is_active and not self.is_expired(now)
