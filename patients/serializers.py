from django.conf import settings
from rest_framework import serializers
from .models import Patient, TemporaryToken


class PatientSerializer(serializers.ModelSerializer):
    """
    Serializer for a patient's own profile.
    The permanent id is assigned at registration and never editable.
    """
    full_name = serializers.CharField(source='user.full_name', read_only=True)

    class Meta:
        model = Patient
        fields = [
            'reference', 'permanent_id', 'full_name', 'date_of_birth', 'sex', 'blood_group',
            'emergency_contact', 'address', 'nearest_police_station',
            'last_online_sync', 'created_at', 'updated_at',
        ]
        read_only_fields = ['reference', 'permanent_id', 'last_online_sync', 'created_at', 'updated_at']

    def validate_blood_group(self, value):
        value = value.strip().upper()
        if value and value not in ('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-'):
            raise serializers.ValidationError('unknown blood group')
        return value


class ResolvedPatientSerializer(serializers.ModelSerializer):
    """
    What a doctor or pharmacist sees after a successful lookup.
    The permanent id is only echoed back when the caller searched by it;
    a token lookup never discloses it.
    """
    full_name = serializers.CharField(source='user.full_name', read_only=True)
    permanent_id = serializers.SerializerMethodField()

    class Meta:
        model = Patient
        fields = [
            'reference', 'permanent_id', 'full_name', 'date_of_birth', 'sex', 'blood_group',
            'emergency_contact', 'address', 'nearest_police_station',
        ]

    def get_permanent_id(self, obj):
        if self.context.get('via_token', True):
            return None
        return obj.permanent_id


class TemporaryTokenSerializer(serializers.ModelSerializer):
    is_expired = serializers.SerializerMethodField()

    class Meta:
        model = TemporaryToken
        fields = ['id', 'token', 'created_at', 'expires_at', 'is_active', 'is_expired']
        read_only_fields = fields

    def get_is_expired(self, obj):
        return obj.is_expired(self.context.get('now'))


class TokenIssueSerializer(serializers.Serializer):
    """
    Optional lifetime, in hours, of a token the patient is about to share.
    """
    expires_in = serializers.IntegerField(required=False, min_value=1)

    def validate_expires_in(self, value):
        max_hours = settings.SEVAKEY_TOKEN_MAX_TTL_HOURS
        if value > max_hours:
            raise serializers.ValidationError(f'tokens can live at most {max_hours} hours')
        return value


class ResolveSerializer(serializers.Serializer):
    identifier = serializers.CharField(max_length=64, allow_blank=True, help_text="Permanent id or temporary token")
