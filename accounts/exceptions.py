from rest_framework import status
from rest_framework.exceptions import APIException


class RoleNotPermitted(APIException):
    """
    Raised when the calling actor's role does not carry the capability
    for an operation. Always raised before any lookup is attempted.
    """
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'you do not have permission to perform this action'
    default_code = 'role_not_permitted'
