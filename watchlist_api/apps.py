"""Watchlist API app configuration."""

from django.apps import AppConfig


class WatchlistApiConfig(AppConfig):
    """Watchlist API application configuration."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'watchlist_api'
    verbose_name = 'Signalist Watchlist API'

    def ready(self):
        """Initialize the service-layer logger when Django starts."""
        from src.utils.logger import setup_logger
        setup_logger()
