"""
Tests for looking a patient up by permanent id or temporary token.
"""
from datetime import timedelta

import pytest
from django.utils import timezone

from accounts.exceptions import RoleNotPermitted
from patients import services
from patients.exceptions import PatientNotFound
from patients.models import TemporaryToken


@pytest.mark.django_db
def test_resolve_by_permanent_id(patient, doctor_actor):
    resolution = services.resolve(doctor_actor, patient.permanent_id)
    assert resolution.patient == patient
    assert resolution.via_token is False


@pytest.mark.django_db
def test_permanent_id_ignores_token_state(patient, patient_actor, pharmacist_actor):
    token = services.issue_token(patient_actor)
    services.deactivate_token(patient_actor, token.id)
    assert services.resolve_patient(pharmacist_actor, patient.permanent_id) == patient


@pytest.mark.django_db
def test_resolve_trims_whitespace(patient, doctor_actor):
    assert services.resolve_patient(doctor_actor, f"  {patient.permanent_id}\n") == patient


@pytest.mark.django_db
def test_scenario_known_permanent_id_and_unused_token(patient, doctor_actor):
    assert services.resolve_patient(doctor_actor, "123456780001") == patient
    with pytest.raises(PatientNotFound):
        services.resolve_patient(doctor_actor, "ABCDEF12")


@pytest.mark.django_db
def test_token_valid_until_expiry(patient, patient_actor, doctor_actor):
    t0 = timezone.now()
    token = services.issue_token(patient_actor, ttl=timedelta(hours=2), now=t0)

    resolution = services.resolve(doctor_actor, token.token, now=t0 + timedelta(hours=1))
    assert resolution.patient == patient
    assert resolution.via_token is True

    with pytest.raises(PatientNotFound):
        services.resolve(doctor_actor, token.token, now=t0 + timedelta(hours=3))


@pytest.mark.django_db
def test_token_not_usable_at_exact_expiry(patient, patient_actor, doctor_actor):
    t0 = timezone.now()
    token = services.issue_token(patient_actor, ttl=timedelta(hours=2), now=t0)
    with pytest.raises(PatientNotFound):
        services.resolve(doctor_actor, token.token, now=t0 + timedelta(hours=2))


@pytest.mark.django_db
def test_deactivated_token_does_not_resolve(patient, patient_actor, pharmacist_actor):
    token = services.issue_token(patient_actor)
    services.deactivate_token(patient_actor, token.id)
    with pytest.raises(PatientNotFound):
        services.resolve(pharmacist_actor, token.token)


@pytest.mark.django_db
def test_every_failure_has_the_same_message(patient, patient_actor, doctor_actor):
    t0 = timezone.now()
    expired = services.issue_token(patient_actor, ttl=timedelta(hours=1), now=t0 - timedelta(hours=2))
    revoked = services.issue_token(patient_actor)
    services.deactivate_token(patient_actor, revoked.id)

    messages = set()
    for query in [expired.token, revoked.token, "ZZZZZZZZ", "000000000000", ""]:
        with pytest.raises(PatientNotFound) as exc_info:
            services.resolve(doctor_actor, query, now=t0)
        messages.add(str(exc_info.value.detail))
    assert messages == {"patient not found or ID expired"}


@pytest.mark.django_db
def test_resolve_is_role_gated_before_lookup(patient, patient_actor, django_assert_num_queries):
    with django_assert_num_queries(0):
        with pytest.raises(RoleNotPermitted):
            services.resolve(patient_actor, patient.permanent_id)


@pytest.mark.django_db
def test_any_of_several_active_tokens_resolves(patient, patient_actor, doctor_actor):
    first = services.issue_token(patient_actor)
    second = services.issue_token(patient_actor)
    assert services.resolve_patient(doctor_actor, first.token) == patient
    assert services.resolve_patient(doctor_actor, second.token) == patient
    assert TemporaryToken.objects.filter(patient=patient, is_active=True).count() == 2
