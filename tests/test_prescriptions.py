"""
Tests for prescription creation and the pending -> verified transition.
"""
from datetime import date, timedelta

import pytest
from django.utils import timezone

from accounts.actors import actor_for_user
from accounts.exceptions import RoleNotPermitted
from patients.models import Patient
from prescriptions import services
from prescriptions.exceptions import PrescriptionNotFound, VisitNotFound
from visits.services import record_visit

MEDICATIONS = [
    {"name": "Paracetamol", "dosage": "500mg", "frequency": "twice daily", "duration": "5 days"},
    {"name": "ORS", "dosage": "1 sachet", "frequency": "after each loose stool", "duration": "3 days"},
]


@pytest.fixture
def visit(patient, doctor_actor):
    return record_visit(doctor_actor, patient, chief_complaint="fever")


@pytest.fixture
def prescription(visit, doctor_actor):
    return services.prescribe(doctor_actor, visit.id, MEDICATIONS, instructions="after meals")


@pytest.mark.django_db
def test_prescribe_starts_pending(prescription, visit, patient):
    assert prescription.status == "pending"
    assert prescription.is_verified is False
    assert prescription.verified_by is None
    assert prescription.patient == patient
    assert prescription.visit == visit
    assert [m["name"] for m in prescription.medications] == ["Paracetamol", "ORS"]


@pytest.mark.django_db
def test_prescribe_only_on_own_visit(visit, make_user):
    other_doctor = actor_for_user(make_user("dr_other", "doctor"))
    with pytest.raises(VisitNotFound):
        services.prescribe(other_doctor, visit.id, MEDICATIONS)


@pytest.mark.django_db
def test_verify_records_verifier_and_time(prescription, patient, pharmacist_actor):
    now = timezone.now()
    verified, changed = services.verify(pharmacist_actor, patient, prescription.id, now=now)
    assert changed is True
    assert verified.status == "verified"
    assert verified.verified_by_id == pharmacist_actor.user_id
    assert verified.verified_at == now


@pytest.mark.django_db
def test_second_verification_keeps_the_first(prescription, patient, pharmacist_actor, other_pharmacist_user):
    t1 = timezone.now()
    services.verify(pharmacist_actor, patient, prescription.id, now=t1)

    again, changed = services.verify(
        actor_for_user(other_pharmacist_user), patient, prescription.id, now=t1 + timedelta(minutes=5)
    )
    assert changed is False
    assert again.is_verified
    assert again.verified_by_id == pharmacist_actor.user_id
    assert again.verified_at == t1


@pytest.mark.django_db
def test_verify_unknown_prescription(patient, pharmacist_actor):
    with pytest.raises(PrescriptionNotFound):
        services.verify(pharmacist_actor, patient, 9999)


@pytest.mark.django_db
def test_verify_is_scoped_to_the_resolved_patient(prescription, pharmacist_actor, make_user):
    stranger = Patient.objects.create(
        user=make_user("ravi", "patient"),
        permanent_id="987654320002",
        date_of_birth=date(1985, 1, 9),
        sex="male",
        emergency_contact="+91 91234 56789",
        address="4 Station Road, Nashik",
    )
    with pytest.raises(PrescriptionNotFound):
        services.verify(pharmacist_actor, stranger, prescription.id)
    prescription.refresh_from_db()
    assert prescription.is_verified is False


@pytest.mark.django_db
def test_only_pharmacists_verify(prescription, patient, doctor_actor):
    with pytest.raises(RoleNotPermitted):
        services.verify(doctor_actor, patient, prescription.id)
    prescription.refresh_from_db()
    assert prescription.is_verified is False


@pytest.mark.django_db
def test_list_prescriptions_newest_first_with_filter(patient, visit, doctor_actor, pharmacist_actor):
    now = timezone.now()
    older = services.prescribe(doctor_actor, visit.id, MEDICATIONS[:1], now=now - timedelta(days=1))
    newer = services.prescribe(doctor_actor, visit.id, MEDICATIONS[1:], now=now)
    services.verify(pharmacist_actor, patient, older.id)

    assert list(services.list_prescriptions_for_pharmacist(pharmacist_actor, patient)) == [newer, older]
    assert list(services.list_prescriptions_for_pharmacist(pharmacist_actor, patient, is_verified=False)) == [newer]


@pytest.mark.django_db
def test_prescription_listing_needs_the_matching_role(prescription, patient, doctor_actor, pharmacist_actor):
    with pytest.raises(RoleNotPermitted):
        services.list_prescriptions_for_pharmacist(doctor_actor, patient)
    with pytest.raises(RoleNotPermitted):
        services.list_own_prescriptions(pharmacist_actor)
