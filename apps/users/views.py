import logging

from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from apps.cores.authentication import OptionalJWTAuthentication
from apps.cores.captcha import verify_captcha
from .serializers import (
    SignupSerializer,
    LoginSerializer,
    ForgotPasswordSerializer,
    VerifyOTPSerializer,
    ProfileSerializer,
    PublicProfileSerializer,
)
from .services import (
    authenticate_account,
    request_password_reset,
    confirm_password_reset,
    delete_account,
)
from .tokens import issue_tokens

logger = logging.getLogger(__name__)
User = get_user_model()


def _client_ip(request):
    forwarded = request.META.get("HTTP_X_FORWARDED_FOR")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR")


def _require_captcha(request):
    if not verify_captcha(request.data.get("captchaToken"), _client_ip(request)):
        raise ValidationError("reCAPTCHA verification failed")


# -------- Signup --------
class SignupView(generics.GenericAPIView):
    """
    Create a Freelancer or Client account. The role is fixed from here on.
    """
    serializer_class = SignupSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        _require_captcha(request)

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()

        return Response(
            {"message": "Signup successful. Please log in."},
            status=status.HTTP_201_CREATED,
        )


# -------- Login --------
class LoginView(generics.GenericAPIView):
    """
    Login using email and password.
    Returns a bearer access token (plus a refresh token).
    """
    serializer_class = LoginSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def get_authenticate_header(self, request):
        # keeps bad credentials a 401 rather than a 403
        return 'Bearer realm="api"'

    def post(self, request, *args, **kwargs):
        _require_captcha(request)

        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate_account(
            serializer.validated_data["email"],
            serializer.validated_data["password"],
        )

        return Response(
            {
                "message": "Login successful",
                **issue_tokens(user),
                "user": {
                    "id": user.id,
                    "email": user.email,
                    "name": user.name,
                    "role": user.role,
                },
            },
            status=status.HTTP_200_OK,
        )


# -------- Password reset --------
class ForgotPasswordView(generics.GenericAPIView):
    serializer_class = ForgotPasswordSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        request_password_reset(serializer.validated_data["email"])

        return Response(
            {"message": "If a user with that email exists, an OTP has been sent."},
            status=status.HTTP_200_OK,
        )


class VerifyOTPView(generics.GenericAPIView):
    serializer_class = VerifyOTPSerializer
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        confirm_password_reset(data["email"], data["otp"], data["newPassword"])

        return Response(
            {"message": "Password has been reset successfully."},
            status=status.HTTP_200_OK,
        )


# -------- Profile --------
class ProfileView(generics.RetrieveUpdateDestroyAPIView):
    serializer_class = ProfileSerializer
    permission_classes = [IsAuthenticated]
    http_method_names = ["get", "put", "patch", "delete"]

    def get_object(self):
        return self.request.user

    def update(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        # identity fields may have changed, hand back a fresh token
        return Response({
            "message": "Profile updated successfully",
            "user": serializer.data,
            "token": issue_tokens(user)["token"],
        })

    def destroy(self, request, *args, **kwargs):
        delete_account(self.get_object())
        return Response({"message": "Account deleted successfully"}, status=status.HTTP_200_OK)


class PublicProfileView(generics.RetrieveAPIView):
    serializer_class = PublicProfileSerializer
    permission_classes = [AllowAny]
    authentication_classes = [OptionalJWTAuthentication]

    def get_object(self):
        return get_object_or_404(
            User.objects.select_related("freelancer_profile"),
            pk=self.kwargs["user_id"],
        )
