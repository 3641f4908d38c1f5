from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiTypes
from rest_framework import generics, views, status
from rest_framework.response import Response

from accounts.actors import current_actor
from accounts.permissions import IsDoctor, IsPharmacist, IsPatient
from patients.services import resolve_patient
from . import services
from .models import Prescription
from .serializers import PrescriptionSerializer, PrescriptionCreateSerializer, PrescriptionVerifySerializer


class PrescriptionListCreateView(generics.ListCreateAPIView):
    """
    GET  (pharmacist) ?identifier=...&is_verified=... prescriptions of the
         resolved patient, newest first
    POST (doctor) attaches a prescription to one of the doctor's visits
    """
    serializer_class = PrescriptionSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ['is_verified']

    def get_permissions(self):
        if self.request.method == 'POST':
            permission_classes = [IsDoctor]
        else:
            permission_classes = [IsPharmacist]
        return [permission() for permission in permission_classes]

    def get_queryset(self):
        # prevents swagger error
        if getattr(self, 'swagger_fake_view', False):
            return Prescription.objects.none()

        # a missing identifier resolves to nobody, same as an unknown one
        actor = current_actor(self.request)
        patient = resolve_patient(actor, self.request.query_params.get('identifier', ''))
        return services.list_prescriptions_for_pharmacist(actor, patient)

    @extend_schema(
        parameters=[OpenApiParameter('identifier', OpenApiTypes.STR, required=True,
                                     description="Permanent id or temporary token")],
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)

    @extend_schema(request=PrescriptionCreateSerializer, responses={201: PrescriptionSerializer})
    def post(self, request, *args, **kwargs):
        serializer = PrescriptionCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        prescription = services.prescribe(
            current_actor(request),
            data['visit_id'],
            data['medications'],
            instructions=data.get('instructions', ''),
        )
        return Response(PrescriptionSerializer(prescription).data, status=status.HTTP_201_CREATED)


class PrescriptionVerifyView(views.APIView):
    """
    Pharmacist verifies a pending prescription of the patient behind
    ``identifier``. Once the identifier stops resolving, e.g. the shared
    token expired, the prescription can no longer be reached.
    Verifying twice is accepted and leaves the first verification untouched.
    """
    permission_classes = [IsPharmacist]

    @extend_schema(request=PrescriptionVerifySerializer, responses={200: PrescriptionSerializer})
    def post(self, request, pk):
        serializer = PrescriptionVerifySerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        actor = current_actor(request)
        patient = resolve_patient(actor, serializer.validated_data['identifier'])
        prescription, changed = services.verify(actor, patient, pk)
        data = PrescriptionSerializer(prescription).data
        data['changed'] = changed
        return Response(data, status=status.HTTP_200_OK)


class OwnPrescriptionListView(generics.ListAPIView):
    """
    Patient endpoint: the patient's own prescriptions, newest first.
    """
    serializer_class = PrescriptionSerializer
    permission_classes = [IsPatient]

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return Prescription.objects.none()
        return services.list_own_prescriptions(current_actor(self.request))
