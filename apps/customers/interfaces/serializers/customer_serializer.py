"""
Customer serializers.
"""
from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    """Serializer for login request."""
    username = serializers.CharField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class CustomerSerializer(serializers.Serializer):
    """Serializer for customer output."""
    id = serializers.CharField(read_only=True)
    username = serializers.CharField(read_only=True)
    email = serializers.CharField(read_only=True)
