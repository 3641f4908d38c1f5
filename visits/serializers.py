from rest_framework import serializers
from .models import Visit


class VisitSerializer(serializers.ModelSerializer):
    """
    Read-only projection of a visit.
    """
    doctor_name = serializers.CharField(source='doctor.full_name', read_only=True)
    formatted_date = serializers.SerializerMethodField()

    class Meta:
        model = Visit
        fields = [
            'id',
            'visit_date',
            'formatted_date',
            'doctor',
            'doctor_name',
            'chief_complaint',
            'diagnosis',
            'notes',
            'audio_url',
            'transcription',
            'is_critical',
            'created_at',
        ]
        read_only_fields = fields

    def get_formatted_date(self, obj):
        """
        Example: 2025-12-27 14:30
        """
        return obj.visit_date.strftime('%Y-%m-%d %H:%M')


class VisitCreateSerializer(serializers.Serializer):
    """
    A doctor records a visit for the patient behind ``identifier``.
    The transcription comes from an external speech-to-text service
    and is stored as plain text.
    """
    identifier = serializers.CharField(max_length=64, allow_blank=True, help_text="Permanent id or temporary token")
    chief_complaint = serializers.CharField(required=False, allow_blank=True, default='')
    diagnosis = serializers.CharField(required=False, allow_blank=True, default='')
    notes = serializers.CharField(required=False, allow_blank=True, default='')
    audio_url = serializers.URLField(required=False, allow_blank=True, default='')
    transcription = serializers.CharField(required=False, allow_blank=True, default='')
    is_critical = serializers.BooleanField(required=False, default=False)

    def validate(self, data):
        if not any(data.get(field) for field in ('chief_complaint', 'diagnosis', 'notes', 'transcription')):
            raise serializers.ValidationError('a visit needs a complaint, diagnosis, notes or transcription')
        return data


class VisitLookupSerializer(serializers.Serializer):
    identifier = serializers.CharField(max_length=64, allow_blank=True)
