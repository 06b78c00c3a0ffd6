"""Watchlist persistence operations.

Every write returns a result dict ``{'success': bool, 'message': str}`` so views
can relay the outcome directly to the client.
"""

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from watchlist_api.models import WatchlistItem

logger = logging.getLogger(__name__)


SYMBOL_REQUIRED = 'Symbol is required'
INVALID_SYMBOL = 'Invalid symbol'
SYMBOL_MAX_LENGTH = WatchlistItem._meta.get_field('symbol').max_length
COMPANY_MAX_LENGTH = WatchlistItem._meta.get_field('company').max_length


def _result(success, message):
    return {'success': success, 'message': message}


def normalize_symbol(symbol):
    """Return ``(symbol, error)``; ``error`` is None for a usable symbol."""
    if symbol is None:
        symbol = ''
    if not isinstance(symbol, str):
        return '', INVALID_SYMBOL

    symbol = symbol.strip().upper()
    if not symbol:
        return symbol, SYMBOL_REQUIRED
    if len(symbol) > SYMBOL_MAX_LENGTH:
        return symbol, INVALID_SYMBOL
    return symbol, None


def add_to_watchlist(user_id, symbol, company):
    """Add a symbol to a user's watchlist.

    At most one item may exist per (user, symbol); a second add is reported
    as a failure result.
    """
    symbol, error = normalize_symbol(symbol)
    if error:
        return _result(False, error)

    company = (company.strip() if isinstance(company, str) else '') or symbol
    company = company[:COMPANY_MAX_LENGTH]

    try:
        if WatchlistItem.objects.filter(user_id=user_id, symbol=symbol).exists():
            return _result(False, 'Stock already in watchlist')

        with transaction.atomic():
            WatchlistItem.objects.create(user_id=user_id, symbol=symbol, company=company)
        logger.info(f"Added {symbol} to watchlist of user {user_id}")
        return _result(True, 'Added to watchlist')

    except IntegrityError:
        # Lost a race with a concurrent add of the same symbol
        return _result(False, 'Stock already in watchlist')
    except Exception as e:
        logger.error(f"Error adding {symbol} to watchlist of user {user_id}: {e}")
        return _result(False, 'Failed to add to watchlist')


def remove_from_watchlist(user_id, symbol):
    """Remove a symbol from a user's watchlist."""
    symbol = (symbol or '').strip().upper()

    try:
        deleted, _ = WatchlistItem.objects.filter(user_id=user_id, symbol=symbol).delete()
        if deleted == 0:
            return _result(False, 'Stock not found in watchlist')

        logger.info(f"Removed {symbol} from watchlist of user {user_id}")
        return _result(True, 'Removed from watchlist')

    except Exception as e:
        logger.error(f"Error removing {symbol} from watchlist of user {user_id}: {e}")
        return _result(False, 'Failed to remove from watchlist')


def get_user_watchlist(user_id):
    """Return the user's watchlist items, newest first."""
    try:
        items = WatchlistItem.objects.filter(user_id=user_id).order_by('-added_at', '-id')
        return [item.to_dict() for item in items]
    except Exception as e:
        logger.error(f"Error fetching watchlist for user {user_id}: {e}")
        return []


def check_watchlist_status(user_id, symbol):
    """Whether the symbol is already in the user's watchlist."""
    try:
        return WatchlistItem.objects.filter(
            user_id=user_id,
            symbol=(symbol or '').strip().upper(),
        ).exists()
    except Exception as e:
        logger.error(f"Error checking watchlist status for {symbol}: {e}")
        return False


def get_watchlist_symbols_by_email(email):
    """Return the watchlist symbols of the user owning ``email``."""
    if not email:
        return []

    try:
        User = get_user_model()
        user = User.objects.filter(email=email.strip().lower()).only('id').first()
        if user is None:
            return []

        return list(
            WatchlistItem.objects.filter(user_id=user.id)
            .order_by('-added_at', '-id')
            .values_list('symbol', flat=True)
        )
    except Exception as e:
        logger.error(f"Error fetching watchlist symbols by email: {e}")
        return []


def get_all_users_for_news_email():
    """Users that should receive the daily news digest."""
    User = get_user_model()
    users = (
        User.objects.filter(is_active=True)
        .exclude(email='')
        .order_by('id')
        .values('id', 'email', 'name')
    )
    return [
        {
            'id': str(user['id']),
            'email': user['email'],
            'name': user['name'] or user['email'].split('@')[0],
        }
        for user in users
    ]
