#!/usr/bin/env python
"""
Database connectivity check.

Prints DB_CONNECTION_TEST: SUCCESS or DB_CONNECTION_TEST: FAILED and exits
non-zero on failure, so it can gate deploys.

Usage:
    python scripts/check_db_connection.py

    # Against PostgreSQL:
    export DJANGO_SETTINGS_MODULE=backend.settings.production
    export DB_HOST=127.0.0.1
    python scripts/check_db_connection.py
"""

import os
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Set up Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'backend.settings.development')

import django
django.setup()

from django.db import connection


def check_connection():
    """Open a connection to the default database."""
    try:
        connection.ensure_connection()
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
            cursor.fetchone()
    except Exception as e:
        print(f"❌ Could not connect to {connection.vendor} database: {e}")
        print("DB_CONNECTION_TEST: FAILED")
        return False

    print(f"✅ Connected to {connection.vendor} database")
    print("DB_CONNECTION_TEST: SUCCESS")
    return True


if __name__ == '__main__':
    sys.exit(0 if check_connection() else 1)
