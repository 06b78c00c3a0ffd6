"""Authentication URL configuration."""

from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from watchlist_api.views.auth import (
    SignUpView,
    SignInView,
    SignOutView,
    CurrentUserView,
)

urlpatterns = [
    # Registration and login
    path('sign-up', SignUpView.as_view(), name='auth-sign-up'),
    path('sign-in', SignInView.as_view(), name='auth-sign-in'),
    path('sign-out', SignOutView.as_view(), name='auth-sign-out'),

    # Current user
    path('me', CurrentUserView.as_view(), name='auth-me'),

    # JWT token refresh
    path('token/refresh', TokenRefreshView.as_view(), name='token-refresh'),
]
