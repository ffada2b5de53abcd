"""Client DRF serializers for API output.

Input is parsed by ``ClientPayloadDTO``; this serializer only renders a
``Client`` in the camelCase shape the web form consumes.  The password
fields are always rendered empty and the hash is never exposed.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.clients.models import Client


class ClientSerializer(serializers.ModelSerializer):
    """Read serializer for the Client resource."""

    taxDocument = serializers.CharField(source="tax_document", read_only=True)
    personType = serializers.CharField(source="person_type", read_only=True)
    stateRegistration = serializers.CharField(
        source="state_registration", read_only=True, allow_null=True
    )
    stateRegistrationExempt = serializers.BooleanField(
        source="state_registration_exempt", read_only=True
    )
    birthDate = serializers.DateField(source="birth_date", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    password = serializers.SerializerMethodField()
    passwordConfirmation = serializers.SerializerMethodField()

    class Meta:
        model = Client
        fields = [
            "id",
            "name",
            "taxDocument",
            "email",
            "personType",
            "phone",
            "stateRegistration",
            "stateRegistrationExempt",
            "gender",
            "birthDate",
            "createdAt",
            "status",
            "password",
            "passwordConfirmation",
        ]
        read_only_fields = fields

    def get_password(self, obj: Client) -> str:
        return ""

    def get_passwordConfirmation(self, obj: Client) -> str:
        return ""
