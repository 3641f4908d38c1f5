"""
Actor context passed explicitly into every patient, visit and
prescription operation.

The role string of the authenticated user is turned into one of a closed
set of actor types exactly once, at the request boundary. Service
functions then check the actor type against the capability they need.
"""
from dataclasses import dataclass

from .exceptions import RoleNotPermitted


@dataclass(frozen=True)
class PatientActor:
    user_id: int
    role = 'patient'


@dataclass(frozen=True)
class ClinicianActor:
    user_id: int
    role = 'doctor'


@dataclass(frozen=True)
class PharmacistActor:
    user_id: int
    role = 'pharmacist'


ACTOR_TYPES = {
    'patient': PatientActor,
    'doctor': ClinicianActor,
    'pharmacist': PharmacistActor,
}


def actor_for_user(user):
    """
    Builds the actor for an authenticated user.
    Roles without a capability set here (e.g. insurer) are rejected.
    """
    if user is None or not user.is_authenticated:
        raise RoleNotPermitted()
    actor_cls = ACTOR_TYPES.get(getattr(user, 'role', None))
    if actor_cls is None:
        raise RoleNotPermitted()
    return actor_cls(user_id=user.pk)


def current_actor(request):
    return actor_for_user(request.user)


def require_actor(actor, *allowed_types):
    # capability check, done before any lookup so a failure leaks nothing
    if not isinstance(actor, allowed_types):
        raise RoleNotPermitted()
    return actor
