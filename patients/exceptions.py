from rest_framework import status
from rest_framework.exceptions import APIException, NotFound


class PatientNotFound(NotFound):
    """
    Resolution failure. Unknown ids, expired tokens and deactivated
    tokens all produce this same message.
    """
    default_detail = 'patient not found or ID expired'
    default_code = 'patient_not_found'


class PatientProfileMissing(NotFound):
    default_detail = 'patient profile is not registered yet'
    default_code = 'patient_profile_missing'


class TokenNotFound(NotFound):
    default_detail = 'token not found'
    default_code = 'token_not_found'


class PatientAlreadyRegistered(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'patient profile already exists'
    default_code = 'patient_already_registered'


class IdentifierConflict(APIException):
    """
    Raised when a freshly generated permanent id or token value kept
    colliding with existing rows after the bounded number of attempts.
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'could not allocate a unique identifier, please retry'
    default_code = 'identifier_conflict'
