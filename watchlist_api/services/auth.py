"""Email/password account operations.

Each operation returns ``{'success': True, 'data': ...}`` or
``{'success': False, 'error': <user-facing message>}``. Raw errors from
validation or the database are normalized into friendly messages.
"""

import logging
import re

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from rest_framework_simplejwt.tokens import RefreshToken

from watchlist_api.events import USER_CREATED, send_event

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8

SIGN_UP_FALLBACK = 'Failed to create an account. Please try again.'
SIGN_IN_FALLBACK = 'Failed to sign in. Please try again.'


class AuthError(Exception):
    """Raised for rejected sign-up or sign-in attempts."""


def validate_email(email: str) -> bool:
    """Validate email format."""
    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
    return re.match(pattern, email) is not None


def validate_password(password: str) -> tuple:
    """Validate password length."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return False, f"Password is too short (minimum {MIN_PASSWORD_LENGTH} characters)"
    return True, ""


def normalize_sign_up_error(message) -> str:
    """Map raw sign-up errors onto the messages shown to users."""
    message = str(message or '').strip()
    if not message:
        return SIGN_UP_FALLBACK

    lower = message.lower()
    if 'email' in lower and any(word in lower for word in ('already', 'exists', 'duplicate')):
        return 'This email address is already registered. Please use a different email or sign in.'
    if 'password' in lower and any(word in lower for word in ('short', 'minimum', 'length')):
        return 'Password must be at least 8 characters long.'
    return message


def normalize_sign_in_error(message) -> str:
    """Map raw sign-in errors onto the messages shown to users."""
    message = str(message or '').strip()
    if not message:
        return SIGN_IN_FALLBACK

    lower = message.lower()
    if 'invalid' in lower and any(word in lower for word in ('credentials', 'password', 'email')):
        return 'Invalid email or password. Please check your credentials and try again.'
    if 'email' in lower and any(word in lower for word in ('not found', 'does not exist', 'not registered')):
        return 'No account found with this email address. Please sign up first.'
    if 'password' in lower and any(word in lower for word in ('incorrect', 'wrong')):
        return 'Incorrect password. Please try again.'
    return message


def get_tokens_for_user(user):
    """Generate JWT tokens for a user."""
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


def serialize_user(user):
    return {
        'id': str(user.id),
        'email': user.email,
        'name': user.name,
        'country': user.country,
        'investment_goals': user.investment_goals,
        'risk_tolerance': user.risk_tolerance,
        'preferred_industry': user.preferred_industry,
    }


def sign_up_with_email(
    email,
    password,
    full_name='',
    country='',
    investment_goals='',
    risk_tolerance='',
    preferred_industry='',
):
    """Create an account and queue the personalized welcome email."""
    User = get_user_model()

    try:
        email = (email or '').strip().lower()
        full_name = (full_name or '').strip()

        if not email or not validate_email(email):
            raise AuthError('Invalid email address')

        valid, message = validate_password(password or '')
        if not valid:
            raise AuthError(message)

        if User.objects.filter(email=email).exists():
            raise AuthError('Email already registered')

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    email=email,
                    password=password,
                    name=full_name or email.split('@')[0],
                    country=country or '',
                    investment_goals=investment_goals or '',
                    risk_tolerance=risk_tolerance or '',
                    preferred_industry=preferred_industry or '',
                    is_active=True,
                )
        except IntegrityError:
            raise AuthError('Email already exists')

        logger.info(f"New user registered: {email}")

        try:
            send_event(USER_CREATED, {
                'email': email,
                'name': user.name,
                'country': user.country,
                'investment_goals': user.investment_goals,
                'risk_tolerance': user.risk_tolerance,
                'preferred_industry': user.preferred_industry,
            })
        except Exception as e:
            logger.error(f"Failed to queue welcome email for {email}: {e}")

        return {
            'success': True,
            'data': {'user': serialize_user(user), 'tokens': get_tokens_for_user(user)},
        }

    except AuthError as e:
        return {'success': False, 'error': normalize_sign_up_error(e)}
    except Exception as e:
        logger.error(f"Sign up failed: {e}")
        return {'success': False, 'error': SIGN_UP_FALLBACK}


def sign_in_with_email(email, password):
    """Authenticate with email and password."""
    User = get_user_model()

    try:
        email = (email or '').strip().lower()

        if not email or not password:
            raise AuthError('Email and password are required')

        try:
            user = User.objects.get(email=email)
        except User.DoesNotExist:
            raise AuthError('Invalid email or password')

        if not user.has_usable_password() or not user.check_password(password):
            raise AuthError('Invalid email or password')

        if not user.is_active:
            raise AuthError('Account is disabled')

        user.update_last_login()
        logger.info(f"User logged in: {email}")

        return {
            'success': True,
            'data': {'user': serialize_user(user), 'tokens': get_tokens_for_user(user)},
        }

    except AuthError as e:
        return {'success': False, 'error': normalize_sign_in_error(e)}
    except Exception as e:
        logger.error(f"Sign in failed: {e}")
        return {'success': False, 'error': SIGN_IN_FALLBACK}


def sign_out(refresh_token=None):
    """Invalidate the session by blacklisting the refresh token."""
    try:
        if refresh_token:
            RefreshToken(refresh_token).blacklist()
        return {'success': True}
    except Exception as e:
        logger.error(f"Sign out failed: {e}")
        return {'success': False, 'error': 'Sign out failed'}
