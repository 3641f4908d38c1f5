"""
Patient registration, temporary token store and patient resolution.

Every function takes the calling actor explicitly and checks its
capability before touching the database.
"""
import logging
from dataclasses import dataclass
from datetime import timedelta

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from accounts.actors import PatientActor, ClinicianActor, PharmacistActor, require_actor
from .exceptions import (
    IdentifierConflict,
    PatientAlreadyRegistered,
    PatientNotFound,
    PatientProfileMissing,
    TokenNotFound,
)
from .identifiers import generate_permanent_id, generate_token_value
from .models import Patient, TemporaryToken

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    patient: Patient
    # True when the query matched a temporary token rather than the permanent id
    via_token: bool


def create_with_unique_value(generate, create, is_taken, label):
    """
    Calls ``create(generate())`` until it stops hitting a uniqueness
    constraint, up to SEVAKEY_MAX_GENERATION_ATTEMPTS times.

    Only a collision on the generated value is retried: when
    ``is_taken(value)`` is false the IntegrityError came from another
    constraint and is re-raised.
    """
    attempts = settings.SEVAKEY_MAX_GENERATION_ATTEMPTS
    for attempt in range(1, attempts + 1):
        value = generate()
        try:
            # savepoint so a collision does not break an outer transaction
            with transaction.atomic():
                return create(value)
        except IntegrityError:
            if not is_taken(value):
                raise
            logger.warning(f"{label} collision on attempt {attempt}/{attempts}, regenerating")
    logger.error(f"giving up on {label} after {attempts} collisions")
    raise IdentifierConflict()


def get_own_patient(actor):
    require_actor(actor, PatientActor)
    try:
        return Patient.objects.select_related('user').get(user_id=actor.user_id)
    except Patient.DoesNotExist:
        raise PatientProfileMissing()


def register_patient(actor, **profile):
    """
    Creates the patient profile of a patient user and assigns its
    permanent id. A patient user can register only once.
    """
    require_actor(actor, PatientActor)
    if Patient.objects.filter(user_id=actor.user_id).exists():
        raise PatientAlreadyRegistered()

    try:
        patient = create_with_unique_value(
            generate_permanent_id,
            lambda value: Patient.objects.create(user_id=actor.user_id, permanent_id=value, **profile),
            lambda value: Patient.objects.filter(permanent_id=value).exists(),
            'permanent id',
        )
    except IntegrityError:
        # a concurrent registration of the same user won the one-to-one race
        if Patient.objects.filter(user_id=actor.user_id).first() is not None:
            raise PatientAlreadyRegistered()
        raise
    logger.info(f"patient {patient.id} registered by user {actor.user_id}")
    return patient


def issue_token(actor, ttl=None, now=None):
    """
    Mints a new temporary token for the calling patient.
    Earlier tokens of the same patient stay valid.
    """
    patient = get_own_patient(actor)
    now = now or timezone.now()
    if ttl is None:
        ttl = timedelta(hours=settings.SEVAKEY_TOKEN_TTL_HOURS)

    token = create_with_unique_value(
        generate_token_value,
        lambda value: TemporaryToken.objects.create(
            patient=patient,
            token=value,
            created_at=now,
            expires_at=now + ttl,
            is_active=True,
        ),
        lambda value: TemporaryToken.objects.filter(token=value, is_active=True).exists(),
        'token value',
    )
    logger.info(f"temporary token {token.id} issued for patient {patient.id}, expires at {token.expires_at.isoformat()}")
    return token


def list_active_tokens(actor):
    """
    Active tokens of the calling patient, newest first.
    Expired rows are included; callers check ``is_expired`` themselves.
    """
    patient = get_own_patient(actor)
    return TemporaryToken.objects.filter(patient=patient, is_active=True).order_by('-created_at', '-id')


def deactivate_token(actor, token_id):
    patient = get_own_patient(actor)
    try:
        token = TemporaryToken.objects.get(pk=token_id, patient=patient)
    except TemporaryToken.DoesNotExist:
        raise TokenNotFound()

    if token.is_active:
        TemporaryToken.objects.filter(pk=token.pk).update(is_active=False)
        token.is_active = False
        logger.info(f"temporary token {token.id} deactivated by patient {patient.id}")
    return token


def resolve(actor, query, now=None):
    """
    Maps a search string typed by a doctor or pharmacist to a patient.

    1. exact permanent id match, regardless of any token state
    2. active token whose expiry lies in the future
    3. otherwise PatientNotFound, with no hint which step failed
    """
    require_actor(actor, ClinicianActor, PharmacistActor)
    query = (query or '').strip()
    if not query:
        raise PatientNotFound()

    patient = Patient.objects.select_related('user').filter(permanent_id=query).first()
    if patient is not None:
        return Resolution(patient=patient, via_token=False)

    now = now or timezone.now()
    token = (
        TemporaryToken.objects.select_related('patient__user')
        .filter(token=query, is_active=True, expires_at__gt=now)
        .first()
    )
    if token is not None:
        return Resolution(patient=token.patient, via_token=True)

    logger.info(f"resolution by {actor.role} {actor.user_id} failed")
    raise PatientNotFound()


def resolve_patient(actor, query, now=None):
    return resolve(actor, query, now=now).patient
