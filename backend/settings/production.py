"""
Production settings for the Signalist project.
"""

import os
from .base import *

DEBUG = False

# Secret key - required at runtime, but allow build-time with dummy value
SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'build-time-dummy-key-replace-at-runtime')

if SECRET_KEY == 'build-time-dummy-key-replace-at-runtime':
    import warnings
    warnings.warn("DJANGO_SECRET_KEY not set - using dummy key (not safe for production)")

# Allowed hosts from environment
ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', '').split(',')
ALLOWED_HOSTS = [host.strip() for host in ALLOWED_HOSTS if host.strip()]

# Allow all hosts if none configured (fallback)
if not ALLOWED_HOSTS:
    ALLOWED_HOSTS = ['*']


# Database - PostgreSQL
DB_HOST = os.environ.get('DB_HOST', '')

if DB_HOST:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('DB_NAME', 'signalist'),
            'USER': os.environ.get('DB_USER', 'signalist'),
            'PASSWORD': os.environ.get('DB_PASSWORD', ''),
            'HOST': DB_HOST,
            'PORT': os.environ.get('DB_PORT', '5432'),
        }
    }
else:
    # Build-time fallback - use SQLite (for collectstatic during Docker build)
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': ':memory:',
        }
    }


# CORS - Production origins
CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.environ.get('CORS_ALLOWED_ORIGINS', '').split(',')
    if origin.strip()
]
CORS_ALLOW_ALL_ORIGINS = False


# Security settings for production
SECURE_SSL_REDIRECT = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

CSRF_TRUSTED_ORIGINS = CORS_ALLOWED_ORIGINS


# Logging for production
LOGGING['root']['level'] = 'INFO'
LOGGING['loggers']['django']['level'] = 'WARNING'

print("🚀 Running with PRODUCTION settings")
