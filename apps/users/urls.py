from django.urls import path
from .views import (
    SignupView,
    LoginView,
    ForgotPasswordView,
    VerifyOTPView,
    ProfileView,
    PublicProfileView,
)


urlpatterns = [
    # Authentication & registration
    path('signup', SignupView.as_view(), name='signup'),
    path('login', LoginView.as_view(), name='login'),

    # Password reset
    path('forgot-password', ForgotPasswordView.as_view(), name='forgot-password'),
    path('verify-otp', VerifyOTPView.as_view(), name='verify-otp'),

    # Profile
    path('profile', ProfileView.as_view(), name='profile'),
    path('public-profile/<int:user_id>', PublicProfileView.as_view(), name='public-profile'),
]
