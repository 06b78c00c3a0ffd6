"""Shared fixtures for the Signalist test suite."""

import pytest
from rest_framework.test import APIClient

from watchlist_api.models import User, WatchlistItem


@pytest.fixture
def user(db):
    return User.objects.create_user(
        email='trader@example.com',
        password='s3cret-pass',
        name='Trader Joe',
        country='US',
        investment_goals='Growth',
        risk_tolerance='Medium',
        preferred_industry='Technology',
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(email='other@example.com', password='s3cret-pass')


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def watchlist(user):
    """Two watchlist items for ``user``: AAPL then MSFT."""
    return [
        WatchlistItem.objects.create(user=user, symbol='AAPL', company='Apple Inc'),
        WatchlistItem.objects.create(user=user, symbol='MSFT', company='Microsoft Corp'),
    ]


def make_article(n, **overrides):
    """Raw Finnhub-style article."""
    article = {
        'id': n,
        'headline': f'Headline {n}',
        'summary': f'Summary {n}',
        'url': f'https://news.example.com/{n}',
        'datetime': 1_700_000_000 + n,
        'source': 'Reuters',
        'image': '',
        'category': 'top news',
        'related': '',
    }
    article.update(overrides)
    return article
