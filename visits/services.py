import logging

from django.conf import settings
from django.utils import timezone

from accounts.actors import ClinicianActor, PatientActor, require_actor
from patients.services import get_own_patient
from .models import Visit

logger = logging.getLogger(__name__)

VISIT_FIELDS = ('chief_complaint', 'diagnosis', 'notes', 'audio_url', 'transcription', 'is_critical')


def record_visit(actor, patient, now=None, **fields):
    """
    Appends a visit for an already resolved patient.
    The patient is trusted as given; resolving it is the caller's job.
    """
    require_actor(actor, ClinicianActor)
    unknown = set(fields) - set(VISIT_FIELDS)
    if unknown:
        raise TypeError(f"unknown visit fields: {', '.join(sorted(unknown))}")

    visit = Visit.objects.create(
        patient=patient,
        doctor_id=actor.user_id,
        visit_date=now or timezone.now(),
        **fields
    )
    logger.info(f"visit {visit.id} recorded for patient {patient.id} by doctor {actor.user_id}")
    return visit


def _list_visits(patient, limit=None):
    """Visits of a patient, newest first, optionally capped."""
    queryset = Visit.objects.filter(patient=patient).select_related('doctor').order_by('-visit_date', '-id')
    if limit is not None:
        queryset = queryset[:limit]
    return queryset


def list_visits_for_clinician(actor, patient):
    require_actor(actor, ClinicianActor)
    return _list_visits(patient, limit=settings.SEVAKEY_CLINICIAN_VISIT_LIMIT)


def list_own_visits(actor):
    require_actor(actor, PatientActor)
    return _list_visits(get_own_patient(actor), limit=settings.SEVAKEY_PATIENT_VISIT_LIMIT)
