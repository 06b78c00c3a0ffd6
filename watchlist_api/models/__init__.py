"""Watchlist API models."""

from .user import User
from .watchlist import WatchlistItem

__all__ = [
    'User',
    'WatchlistItem',
]
