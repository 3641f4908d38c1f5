"""
Shared fixtures: one user per role, a registered patient with a known
permanent id, and API clients authenticated as each role.
"""
from datetime import date

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from accounts.actors import actor_for_user
from patients.models import Patient

User = get_user_model()

KNOWN_PERMANENT_ID = "123456780001"


@pytest.fixture
def make_user(db):
    def _make(username, role, full_name=''):
        return User.objects.create_user(
            username=username,
            password="password123",
            role=role,
            full_name=full_name or username.title(),
        )
    return _make


@pytest.fixture
def patient_user(make_user):
    return make_user("asha", "patient", "Asha Verma")


@pytest.fixture
def doctor_user(make_user):
    return make_user("dr_rao", "doctor", "Dr. Rao")


@pytest.fixture
def pharmacist_user(make_user):
    return make_user("pharm_kim", "pharmacist", "Kim")


@pytest.fixture
def other_pharmacist_user(make_user):
    return make_user("pharm_lee", "pharmacist", "Lee")


@pytest.fixture
def insurer_user(make_user):
    return make_user("insure_co", "insurer")


@pytest.fixture
def patient(patient_user):
    return Patient.objects.create(
        user=patient_user,
        permanent_id=KNOWN_PERMANENT_ID,
        date_of_birth=date(1990, 5, 17),
        sex="female",
        blood_group="O+",
        emergency_contact="+91 98765 43210",
        address="12 MG Road, Pune",
    )


@pytest.fixture
def patient_actor(patient_user):
    return actor_for_user(patient_user)


@pytest.fixture
def doctor_actor(doctor_user):
    return actor_for_user(doctor_user)


@pytest.fixture
def pharmacist_actor(pharmacist_user):
    return actor_for_user(pharmacist_user)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for(api_client):
    def _client(user):
        api_client.force_authenticate(user=user)
        return api_client
    return _client
