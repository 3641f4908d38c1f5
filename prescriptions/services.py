"""
Prescription creation and the pending -> verified transition.
"""
import logging

from django.utils import timezone

from accounts.actors import ClinicianActor, PatientActor, PharmacistActor, require_actor
from patients.services import get_own_patient
from visits.models import Visit
from .exceptions import PrescriptionNotFound, VisitNotFound
from .models import Prescription

logger = logging.getLogger(__name__)


def prescribe(actor, visit_id, medications, instructions='', now=None):
    """
    Attaches a prescription to a visit written by the same doctor.
    """
    require_actor(actor, ClinicianActor)
    try:
        visit = Visit.objects.get(pk=visit_id, doctor_id=actor.user_id)
    except Visit.DoesNotExist:
        raise VisitNotFound()

    prescription = Prescription.objects.create(
        visit=visit,
        patient_id=visit.patient_id,
        doctor_id=actor.user_id,
        medications=list(medications),
        instructions=instructions,
        created_at=now or timezone.now(),
    )
    logger.info(f"prescription {prescription.id} written for visit {visit.id} by doctor {actor.user_id}")
    return prescription


def _list_prescriptions(patient, is_verified=None):
    queryset = Prescription.objects.filter(patient=patient).select_related('patient', 'verified_by')
    if is_verified is not None:
        queryset = queryset.filter(is_verified=is_verified)
    return queryset.order_by('-created_at', '-id')


def list_prescriptions_for_pharmacist(actor, patient, is_verified=None):
    require_actor(actor, PharmacistActor)
    return _list_prescriptions(patient, is_verified=is_verified)


def list_own_prescriptions(actor):
    require_actor(actor, PatientActor)
    return _list_prescriptions(get_own_patient(actor))


def verify(actor, patient, prescription_id, now=None):
    """
    Moves a prescription of an already resolved patient from pending
    to verified.

    The write is conditional on ``is_verified = False`` so that of two
    racing pharmacists only the first one is recorded. Verifying an
    already verified prescription is a no-op and keeps the original
    verifier and timestamp.

    Returns ``(prescription, changed)``.
    """
    require_actor(actor, PharmacistActor)
    scoped = Prescription.objects.filter(pk=prescription_id, patient=patient)
    if not scoped.exists():
        raise PrescriptionNotFound()

    changed = scoped.filter(is_verified=False).update(
        is_verified=True,
        verified_by_id=actor.user_id,
        verified_at=now or timezone.now(),
    )
    prescription = scoped.select_related('verified_by').get()

    if changed:
        logger.info(f"prescription {prescription.id} verified by pharmacist {actor.user_id}")
    else:
        logger.info(
            f"prescription {prescription.id} already verified by user {prescription.verified_by_id}, "
            f"ignoring verification by {actor.user_id}"
        )
    return prescription, bool(changed)
