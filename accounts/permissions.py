from rest_framework import permissions


class IsPatient(permissions.BasePermission):
    """
    Allows access only to patient users.
    """
    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.role == 'patient'


class IsDoctor(permissions.BasePermission):
    """
    Allows access only to doctor users.
    """
    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.role == 'doctor'


class IsPharmacist(permissions.BasePermission):
    """
    Allows access only to pharmacist users.
    """
    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.role == 'pharmacist'


class IsDoctorOrPharmacist(permissions.BasePermission):
    # Both roles may look a patient up by permanent id or temporary token
    def has_permission(self, request, view):
        return request.user.is_authenticated and request.user.role in ['doctor', 'pharmacist']

