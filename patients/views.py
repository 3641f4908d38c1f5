import base64
import json
from datetime import timedelta
from io import BytesIO

import qrcode
from drf_spectacular.utils import extend_schema, OpenApiTypes
from rest_framework import generics, views, status
from rest_framework.response import Response

from accounts.actors import current_actor
from accounts.permissions import IsPatient, IsDoctorOrPharmacist
from . import services
from .serializers import (
    PatientSerializer,
    ResolvedPatientSerializer,
    ResolveSerializer,
    TemporaryTokenSerializer,
    TokenIssueSerializer,
)


def qr_code_data_uri(payload):
    # convert QR Code to a base64 PNG the frontend can show directly
    img = qrcode.make(json.dumps(payload))
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return f"data:image/png;base64,{base64.b64encode(buffer.getvalue()).decode()}"


class PatientRegisterView(generics.CreateAPIView):
    """
    A patient user creates their patient profile once.
    The permanent id is generated by the server.
    """
    serializer_class = PatientSerializer
    permission_classes = [IsPatient]

    def perform_create(self, serializer):
        patient = services.register_patient(current_actor(self.request), **serializer.validated_data)
        serializer.instance = patient


class PatientProfileView(generics.RetrieveUpdateAPIView):
    """
    Retrieve or amend the calling patient's own profile.
    """
    serializer_class = PatientSerializer
    permission_classes = [IsPatient]

    def get_object(self):
        return services.get_own_patient(current_actor(self.request))


class TemporaryTokenListCreateView(views.APIView):
    """
    GET lists the patient's active tokens (newest first, with a derived expiry flag).
    POST mints a new token and returns it together with a QR code.
    """
    permission_classes = [IsPatient]

    @extend_schema(responses={200: TemporaryTokenSerializer(many=True)})
    def get(self, request):
        tokens = services.list_active_tokens(current_actor(request))
        return Response(TemporaryTokenSerializer(tokens, many=True).data)

    @extend_schema(
        request=TokenIssueSerializer,
        responses={201: OpenApiTypes.OBJECT},
        description="Generates a temporary token and QR code the patient can share"
    )
    def post(self, request):
        serializer = TokenIssueSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        expires_in = serializer.validated_data.get('expires_in')
        ttl = timedelta(hours=expires_in) if expires_in else None
        token = services.issue_token(current_actor(request), ttl=ttl)

        # the QR code carries the token only, never the permanent id
        qr_data = {
            'token': token.token,
            'expires_at': token.expires_at.isoformat(),
        }
        response_data = TemporaryTokenSerializer(token).data
        response_data['qr_code'] = qr_code_data_uri(qr_data)
        return Response(response_data, status=status.HTTP_201_CREATED)


class TemporaryTokenDeactivateView(views.APIView):
    """
    Revokes one of the patient's tokens. Calling it again is harmless.
    """
    permission_classes = [IsPatient]

    @extend_schema(request=None, responses={200: TemporaryTokenSerializer})
    def post(self, request, pk):
        token = services.deactivate_token(current_actor(request), pk)
        return Response(TemporaryTokenSerializer(token).data)


class PatientResolveView(views.APIView):
    """
    Doctors and pharmacists look a patient up by permanent id or temporary token.
    """
    permission_classes = [IsDoctorOrPharmacist]

    @extend_schema(request=ResolveSerializer, responses={200: ResolvedPatientSerializer})
    def post(self, request):
        serializer = ResolveSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        resolution = services.resolve(current_actor(request), serializer.validated_data['identifier'])
        data = ResolvedPatientSerializer(resolution.patient, context={'via_token': resolution.via_token}).data
        return Response(data)
