"""
Tests for the visit ledger.
"""
from datetime import timedelta

import pytest
from django.utils import timezone

from accounts.exceptions import RoleNotPermitted
from patients.services import issue_token, resolve_patient
from visits import services
from visits.models import Visit


@pytest.mark.django_db
def test_record_visit_after_token_resolution(patient, patient_actor, doctor_actor):
    token = issue_token(patient_actor)
    resolved = resolve_patient(doctor_actor, token.token)

    visit = services.record_visit(doctor_actor, resolved, chief_complaint="fever")

    visits = list(services.list_visits_for_clinician(doctor_actor, patient))
    assert len(visits) == 1
    assert visits[0] == visit
    assert visits[0].chief_complaint == "fever"
    assert visits[0].doctor_id == doctor_actor.user_id


@pytest.mark.django_db
def test_visits_are_newest_first(patient, doctor_actor):
    now = timezone.now()
    old = services.record_visit(doctor_actor, patient, now=now - timedelta(days=2), chief_complaint="cough")
    new = services.record_visit(doctor_actor, patient, now=now, chief_complaint="fever")
    assert list(services.list_visits_for_clinician(doctor_actor, patient)) == [new, old]


@pytest.mark.django_db
def test_visit_count_only_grows(patient, doctor_actor):
    counts = []
    for complaint in ["fever", "cough", "rash"]:
        services.record_visit(doctor_actor, patient, chief_complaint=complaint)
        counts.append(Visit.objects.filter(patient=patient).count())
    assert counts == [1, 2, 3]


@pytest.mark.django_db
def test_existing_visit_cannot_be_changed(patient, doctor_actor):
    visit = services.record_visit(doctor_actor, patient, diagnosis="viral fever")
    visit.diagnosis = "something else"
    with pytest.raises(ValueError):
        visit.save()
    visit.refresh_from_db()
    assert visit.diagnosis == "viral fever"


@pytest.mark.django_db
def test_clinician_and_patient_views_are_capped(patient, patient_actor, doctor_actor):
    now = timezone.now()
    for i in range(12):
        services.record_visit(doctor_actor, patient, now=now - timedelta(hours=i), notes=f"visit {i}")

    clinician_view = list(services.list_visits_for_clinician(doctor_actor, patient))
    patient_view = list(services.list_own_visits(patient_actor))
    assert len(clinician_view) == 10
    assert len(patient_view) == 5
    assert patient_view[0].notes == "visit 0"


@pytest.mark.django_db
def test_only_doctors_record_visits(patient, pharmacist_actor, patient_actor):
    for actor in (pharmacist_actor, patient_actor):
        with pytest.raises(RoleNotPermitted):
            services.record_visit(actor, patient, chief_complaint="fever")
    assert Visit.objects.count() == 0


@pytest.mark.django_db
def test_unknown_visit_fields_are_rejected(patient, doctor_actor):
    with pytest.raises(TypeError):
        services.record_visit(doctor_actor, patient, doctor_id=1)


@pytest.mark.django_db
def test_visit_history_needs_the_matching_role(patient, pharmacist_actor, doctor_actor):
    services.record_visit(doctor_actor, patient, chief_complaint="fever")
    with pytest.raises(RoleNotPermitted):
        services.list_visits_for_clinician(pharmacist_actor, patient)
    with pytest.raises(RoleNotPermitted):
        services.list_own_visits(doctor_actor)
