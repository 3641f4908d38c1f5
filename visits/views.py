from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import views, status
from rest_framework.response import Response

from accounts.actors import current_actor
from accounts.permissions import IsDoctor, IsPatient
from patients.services import resolve_patient
from . import services
from .serializers import VisitSerializer, VisitCreateSerializer, VisitLookupSerializer


class VisitListCreateView(views.APIView):
    """
    Doctor endpoint.
    GET  ?identifier=...  recent visits of the patient (newest first)
    POST {identifier, ...} records a new visit for the patient
    The identifier is resolved on every request.
    """
    permission_classes = [IsDoctor]

    @extend_schema(
        parameters=[OpenApiParameter('identifier', str, required=True, description="Permanent id or temporary token")],
        responses={200: VisitSerializer(many=True)},
    )
    def get(self, request):
        lookup = VisitLookupSerializer(data=request.query_params)
        if not lookup.is_valid():
            return Response(lookup.errors, status=status.HTTP_400_BAD_REQUEST)

        actor = current_actor(request)
        patient = resolve_patient(actor, lookup.validated_data['identifier'])
        visits = services.list_visits_for_clinician(actor, patient)
        return Response(VisitSerializer(visits, many=True).data)

    @extend_schema(request=VisitCreateSerializer, responses={201: VisitSerializer})
    def post(self, request):
        serializer = VisitCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = dict(serializer.validated_data)
        actor = current_actor(request)
        patient = resolve_patient(actor, data.pop('identifier'))
        visit = services.record_visit(actor, patient, **data)
        return Response(VisitSerializer(visit).data, status=status.HTTP_201_CREATED)


class OwnVisitListView(views.APIView):
    """
    Patient endpoint: the patient's own most recent visits.
    """
    permission_classes = [IsPatient]

    @extend_schema(responses={200: VisitSerializer(many=True)})
    def get(self, request):
        visits = services.list_own_visits(current_actor(request))
        return Response(VisitSerializer(visits, many=True).data)
