"""Authentication views.

Email/password sign-up and sign-in issuing JWT access/refresh tokens.
"""

import logging
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAuthenticated

from watchlist_api.services.auth import (
    serialize_user,
    sign_in_with_email,
    sign_out,
    sign_up_with_email,
)

logger = logging.getLogger(__name__)


class SignUpView(APIView):
    """Register a new user with email, password and investor profile."""

    permission_classes = [AllowAny]

    def post(self, request):
        data = request.data
        result = sign_up_with_email(
            email=data.get('email', ''),
            password=data.get('password', ''),
            full_name=data.get('full_name', ''),
            country=data.get('country', ''),
            investment_goals=data.get('investment_goals', ''),
            risk_tolerance=data.get('risk_tolerance', ''),
            preferred_industry=data.get('preferred_industry', ''),
        )

        if not result['success']:
            return Response(result, status=status.HTTP_400_BAD_REQUEST)
        return Response(result, status=status.HTTP_201_CREATED)


class SignInView(APIView):
    """Login with email and password."""

    permission_classes = [AllowAny]

    def post(self, request):
        result = sign_in_with_email(
            email=request.data.get('email', ''),
            password=request.data.get('password', ''),
        )

        if not result['success']:
            return Response(result, status=status.HTTP_401_UNAUTHORIZED)
        return Response(result)


class SignOutView(APIView):
    """Logout the current user by blacklisting the refresh token."""

    permission_classes = [IsAuthenticated]

    def post(self, request):
        result = sign_out(request.data.get('refresh'))
        if not result['success']:
            return Response(result, status=status.HTTP_400_BAD_REQUEST)
        return Response({'success': True, 'message': 'Logged out successfully'})


class CurrentUserView(APIView):
    """Get current authenticated user info."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({
            'authenticated': True,
            'user': serialize_user(request.user),
        })
