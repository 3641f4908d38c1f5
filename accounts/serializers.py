from rest_framework import serializers
from .models import User
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer


class UserSerializer(serializers.ModelSerializer):
    """
    Public projection of an authenticated user.
    The role is fixed at sign-up and cannot be changed through the API.
    """
    class Meta:
        model = User
        fields = ['id', 'username', 'email', 'full_name', 'phone', 'role', 'is_active', 'date_joined', 'updated_at']
        read_only_fields = ['id', 'username', 'role', 'is_active', 'date_joined', 'updated_at']


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Custom JWT serializer that includes user data in the token response.
    """
    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        # role claim lets clients pick the right dashboard without another request
        token['role'] = user.role
        return token

    def validate(self, attrs):
        # 1.validates username and password, creates the token pair
        data = super().validate(attrs)

        # 2.adds user info
        data['user'] = UserSerializer(self.user).data
        return data


class LogoutSerializer(serializers.Serializer):
    refresh_token = serializers.CharField()
