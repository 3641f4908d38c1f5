import pytest
from django.contrib.auth.models import AnonymousUser

from accounts.actors import (
    ClinicianActor,
    PatientActor,
    PharmacistActor,
    actor_for_user,
    require_actor,
)
from accounts.exceptions import RoleNotPermitted


@pytest.mark.django_db
@pytest.mark.parametrize("role, expected", [
    ("patient", PatientActor),
    ("doctor", ClinicianActor),
    ("pharmacist", PharmacistActor),
])
def test_roles_map_to_actor_types(make_user, role, expected):
    user = make_user(f"user_{role}", role)
    actor = actor_for_user(user)
    assert isinstance(actor, expected)
    assert actor.user_id == user.id
    assert actor.role == role


@pytest.mark.django_db
def test_insurer_has_no_actor(insurer_user):
    with pytest.raises(RoleNotPermitted):
        actor_for_user(insurer_user)


def test_anonymous_user_is_rejected():
    with pytest.raises(RoleNotPermitted):
        actor_for_user(AnonymousUser())


def test_require_actor_accepts_any_listed_type():
    actor = PharmacistActor(user_id=7)
    assert require_actor(actor, ClinicianActor, PharmacistActor) is actor
    with pytest.raises(RoleNotPermitted):
        require_actor(actor, PatientActor)
