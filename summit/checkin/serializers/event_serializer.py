from rest_framework import serializers
from checkin.models import Event


class EventSerializer(serializers.ModelSerializer):
    class Meta:
        model = Event
        fields = ["id", "name", "venue", "description", "start_date", "end_date", "is_active", "created_at"]
        read_only_fields = ["is_active", "created_at"]

    def validate(self, attrs):
        start = attrs.get("start_date", getattr(self.instance, "start_date", None))
        end = attrs.get("end_date", getattr(self.instance, "end_date", None))
        if start and end and end < start:
            raise serializers.ValidationError({"end_date": "end_date must be after start_date."})
        return attrs


class EventActivateSerializer(serializers.Serializer):
    exclusive = serializers.BooleanField(required=False, default=True)
