"""API URL configuration for watchlist endpoints."""

from django.urls import path
from watchlist_api.views import api

urlpatterns = [
    # Stock search (popular stocks when no query)
    path('search', api.SearchView.as_view(), name='api-search'),

    # Watchlist
    path('watchlist', api.WatchlistView.as_view(), name='api-watchlist'),
    path('watchlist/<str:symbol>', api.WatchlistItemView.as_view(), name='api-watchlist-item'),

    # Stock detail page data
    path('stocks/<str:symbol>', api.StockDetailView.as_view(), name='api-stock-detail'),

    # Market news
    path('news', api.NewsView.as_view(), name='api-news'),

    # Daily news digest (for an external scheduler; celery beat also runs it)
    path('send-daily-news', api.SendDailyNewsView.as_view(), name='api-send-daily-news'),
]
