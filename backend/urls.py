"""
URL configuration for the Signalist project.
"""

from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse


def health_check(request):
    """Health check endpoint for load balancers."""
    return JsonResponse({'status': 'healthy', 'service': 'signalist-api'})


urlpatterns = [
    # Health check (no auth required)
    path('health', health_check, name='health'),

    # Admin
    path('admin/', admin.site.urls),

    # Authentication
    path('auth/', include('watchlist_api.urls.auth')),

    # API endpoints
    path('api/', include('watchlist_api.urls.api')),
]
