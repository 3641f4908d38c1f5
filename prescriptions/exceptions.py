from rest_framework.exceptions import NotFound


class PrescriptionNotFound(NotFound):
    default_detail = 'prescription not found'
    default_code = 'prescription_not_found'


class VisitNotFound(NotFound):
    default_detail = 'visit not found'
    default_code = 'visit_not_found'
