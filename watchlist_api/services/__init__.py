"""Watchlist API services.

Account and watchlist operations used by the views and the background
workflows.
"""

from .auth import sign_in_with_email, sign_out, sign_up_with_email
from .watchlist import (
    add_to_watchlist,
    check_watchlist_status,
    get_all_users_for_news_email,
    get_user_watchlist,
    get_watchlist_symbols_by_email,
    remove_from_watchlist,
)

__all__ = [
    'sign_up_with_email',
    'sign_in_with_email',
    'sign_out',
    'add_to_watchlist',
    'remove_from_watchlist',
    'get_user_watchlist',
    'check_watchlist_status',
    'get_watchlist_symbols_by_email',
    'get_all_users_for_news_email',
]
