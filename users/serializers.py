import secrets

from rest_framework import serializers
from .models import User
from django.contrib.auth import authenticate
from django.db import IntegrityError

import logging

logger = logging.getLogger("rest_framework")


class RegisterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150)
    surname = serializers.CharField(max_length=150, required=False, allow_blank=True, default='')
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        required=True,
        error_messages={
            "min_length": "Password must be at least 8 characters long.",
        }
    )

    def validate_email(self, value):
        value = value.lower()
        if User.objects.filter(email=value).exists():
            raise serializers.ValidationError("You are already registered.")
        return value

    def create(self, validated_data):
        try:
            user = User.objects.create_user(
                email=validated_data['email'],
                password=validated_data['password'],
                first_name=validated_data['name'],
                last_name=validated_data.get('surname', ''),
                email_verify_token=secrets.token_urlsafe(32),
            )
            logger.info(f"User {user.email} created successfully.")
            return user
        except IntegrityError as ie:
            logger.error(f"Integrity error for {validated_data.get('email')}: {str(ie)}")
            raise serializers.ValidationError({"detail": "This email already exists."})


class LoginUserSerializer(serializers.Serializer):
    email = serializers.EmailField(required=True)
    password = serializers.CharField(write_only=True, required=True)

    def validate(self, attrs):
        email = attrs.get('email').lower()
        password = attrs.get('password')

        user = authenticate(self.context.get('request'), email=email, password=password)
        if not user:
            raise serializers.ValidationError(
                {"detail": "Invalid email or password."}
            )
        attrs['user'] = user
        return attrs


class UserSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='first_name', read_only=True)
    surname = serializers.CharField(source='last_name', read_only=True)
    isVerified = serializers.BooleanField(source='is_verified', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = User
        fields = ('id', 'name', 'surname', 'email', 'role', 'isVerified', 'createdAt')
        read_only_fields = fields
