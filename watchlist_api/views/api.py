"""Watchlist API views.

Stock search, watchlist management, stock detail and news endpoints, plus the
scheduler hook that triggers the daily news digest.
"""

import logging
import time
from django.conf import settings
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAuthenticated

from src.data.market_data import MarketDataError, get_company_name, get_news, search_stocks
from watchlist_api.events import SEND_DAILY_NEWS, send_event
from watchlist_api.services.watchlist import (
    INVALID_SYMBOL,
    SYMBOL_REQUIRED,
    add_to_watchlist,
    check_watchlist_status,
    get_user_watchlist,
    normalize_symbol,
    remove_from_watchlist,
)
from watchlist_api.widgets import stock_detail_widgets

logger = logging.getLogger(__name__)

POPULAR_STOCKS_LIMIT = 10

# Failure messages from the watchlist service mapped to HTTP statuses
WATCHLIST_ERROR_STATUS = {
    SYMBOL_REQUIRED: status.HTTP_400_BAD_REQUEST,
    INVALID_SYMBOL: status.HTTP_400_BAD_REQUEST,
    'Stock already in watchlist': status.HTTP_409_CONFLICT,
    'Stock not found in watchlist': status.HTTP_404_NOT_FOUND,
}


def _watchlist_symbols(user):
    return {item['symbol'].upper() for item in get_user_watchlist(user.id)}


def _result_response(result, success_status=status.HTTP_200_OK):
    if result['success']:
        return Response(result, status=success_status)
    return Response(
        result,
        status=WATCHLIST_ERROR_STATUS.get(result['message'], status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


class SearchView(APIView):
    """Search stocks, or list popular stocks when no query is given."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        start_time = time.time()
        query = request.query_params.get('q', '').strip()
        logger.info(f"SearchView.get called: q={query!r}")

        stocks = search_stocks(query or None)
        if not query:
            stocks = stocks[:POPULAR_STOCKS_LIMIT]

        in_watchlist = _watchlist_symbols(request.user)
        enriched = [
            {**stock, 'is_in_watchlist': stock['symbol'].upper() in in_watchlist}
            for stock in stocks
        ]

        elapsed = time.time() - start_time
        logger.info(f"SearchView.get completed in {elapsed:.2f}s: {len(enriched)} stocks")
        return Response({
            'mode': 'search' if query else 'popular',
            'stocks': enriched,
        })


class WatchlistView(APIView):
    """List or add to the current user's watchlist."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({'watchlist': get_user_watchlist(request.user.id)})

    def post(self, request):
        symbol, error = normalize_symbol(request.data.get('symbol'))
        if error:
            return _result_response({'success': False, 'message': error})

        company = request.data.get('company')
        company = company.strip() if isinstance(company, str) else ''
        if not company:
            company = get_company_name(symbol)

        result = add_to_watchlist(request.user.id, symbol, company)
        return _result_response(result, success_status=status.HTTP_201_CREATED)


class WatchlistItemView(APIView):
    """Remove a symbol from the current user's watchlist."""

    permission_classes = [IsAuthenticated]

    def delete(self, request, symbol):
        result = remove_from_watchlist(request.user.id, symbol)
        return _result_response(result)


class StockDetailView(APIView):
    """Company name, watchlist status and chart widgets for one symbol."""

    permission_classes = [IsAuthenticated]

    def get(self, request, symbol):
        symbol = symbol.strip().upper()
        return Response({
            'symbol': symbol,
            'company': get_company_name(symbol),
            'is_in_watchlist': check_watchlist_status(request.user.id, symbol),
            'widgets': stock_detail_widgets(symbol),
        })


class NewsView(APIView):
    """News for the given symbols, defaulting to the user's watchlist."""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        start_time = time.time()
        raw_symbols = request.query_params.get('symbols', '')
        if raw_symbols:
            symbols = [s.strip() for s in raw_symbols.split(',') if s.strip()]
        else:
            symbols = [item['symbol'] for item in get_user_watchlist(request.user.id)]

        try:
            articles = get_news(symbols or None)
        except MarketDataError as e:
            elapsed = time.time() - start_time
            logger.error(f"NewsView.get failed in {elapsed:.2f}s: {e}")
            return Response({'error': str(e), 'articles': []}, status=status.HTTP_502_BAD_GATEWAY)

        elapsed = time.time() - start_time
        logger.info(f"NewsView.get completed in {elapsed:.2f}s: {len(articles)} articles")
        return Response({'articles': articles})


class SendDailyNewsView(APIView):
    """Queue the daily news digest - triggered by an external scheduler."""

    permission_classes = [AllowAny]  # Guarded by SCHEDULER_TOKEN when configured
    authentication_classes = []

    def post(self, request):
        token = getattr(settings, 'SCHEDULER_TOKEN', '')
        if token and request.headers.get('X-Scheduler-Token') != token:
            return Response({'error': 'Invalid scheduler token'}, status=status.HTTP_403_FORBIDDEN)

        try:
            task_id = send_event(SEND_DAILY_NEWS)
        except Exception as e:
            logger.error(f"SendDailyNewsView.post failed: {e}", exc_info=True)
            return Response({'status': 'error', 'message': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({'status': 'queued', 'task_id': task_id}, status=status.HTTP_202_ACCEPTED)
