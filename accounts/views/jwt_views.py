from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from django.conf import settings
from django.contrib.auth import get_user_model
import logging

from api.exceptions import Conflict
from authflow.services import issue_jwt_for_user, set_access_cookie, clear_access_cookie
from ..serializers import RegisterUserSerializer, LoginSerializer, UserSerializer

User = get_user_model()
logger = logging.getLogger(__name__)


class RegisterView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterUserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if User.objects.filter(email__iexact=serializer.validated_data["email"]).exists():
            raise Conflict("User already exists")

        user = serializer.save()
        logger.info(f"User {user.pk} registered")
        return Response({"message": "User registered successfully"}, status=status.HTTP_201_CREATED)


class LogInView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = User.objects.filter(email__iexact=serializer.validated_data["email"]).first()
        if not user or not user.check_password(serializer.validated_data["password"]):
            raise AuthenticationFailed("Invalid credentials")
        if not user.is_active:
            raise AuthenticationFailed("User is inactive")

        token = issue_jwt_for_user(user)
        response = Response({"message": "User logged in successfully"}, status=status.HTTP_201_CREATED)
        return set_access_cookie(response, settings.USER_ACCESS_COOKIE, token["access"])


class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        response = Response({"message": "User logged out successfully"})
        return clear_access_cookie(response, settings.USER_ACCESS_COOKIE)


class StatusView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)
