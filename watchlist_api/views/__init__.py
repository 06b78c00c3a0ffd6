"""Watchlist API views package."""

from .auth import (
    SignUpView,
    SignInView,
    SignOutView,
    CurrentUserView,
)

from .api import (
    SearchView,
    WatchlistView,
    WatchlistItemView,
    StockDetailView,
    NewsView,
    SendDailyNewsView,
)

__all__ = [
    # Auth views
    'SignUpView',
    'SignInView',
    'SignOutView',
    'CurrentUserView',
    # API views
    'SearchView',
    'WatchlistView',
    'WatchlistItemView',
    'StockDetailView',
    'NewsView',
    'SendDailyNewsView',
]
