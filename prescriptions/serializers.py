from rest_framework import serializers
from .models import Prescription


class MedicationEntryValidator(serializers.Serializer):
    name = serializers.CharField(required=True)
    dosage = serializers.CharField(required=True)
    frequency = serializers.CharField(required=True)
    duration = serializers.CharField(required=True)


class PrescriptionSerializer(serializers.ModelSerializer):
    """
    Read-only projection of a prescription, including its verification state.
    The patient is referenced by its opaque reference, never by permanent id.
    """
    patient_reference = serializers.UUIDField(source='patient.reference', read_only=True)
    status = serializers.ReadOnlyField()
    verified_by_name = serializers.SerializerMethodField()

    class Meta:
        model = Prescription
        fields = [
            'id',
            'visit',
            'patient_reference',
            'doctor',
            'medications',
            'instructions',
            'status',
            'is_verified',
            'verified_by',
            'verified_by_name',
            'verified_at',
            'created_at',
        ]
        read_only_fields = fields

    def get_verified_by_name(self, obj):
        if obj.verified_by:
            return obj.verified_by.full_name or obj.verified_by.username
        return None


class PrescriptionCreateSerializer(serializers.Serializer):
    """
    Doctor attaches a prescription to one of their visits.
    """
    visit_id = serializers.IntegerField()
    medications = serializers.ListField(child=serializers.DictField(), min_length=1)
    instructions = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_medications(self, value):
        # validating required fields in every medication entry, order is kept
        entries = []
        for entry in value:
            validator = MedicationEntryValidator(data=entry)
            if not validator.is_valid():
                raise serializers.ValidationError(validator.errors)
            entries.append(dict(validator.validated_data))
        return entries


class PrescriptionVerifySerializer(serializers.Serializer):
    """
    The pharmacist re-sends the identifier the patient was found by;
    verification only goes through while it still resolves.
    """
    identifier = serializers.CharField(max_length=64, allow_blank=True, help_text="Permanent id or temporary token")
