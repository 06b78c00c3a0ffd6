"""Market data client for stock search, company profiles and news from Finnhub."""

import concurrent.futures
import threading
import time
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests
from loguru import logger

from src.config import config
from src.data.news import (
    dedupe_general_news,
    get_date_range,
    interleave_company_news,
    normalize_symbols,
    validate_article,
)


class MarketDataError(Exception):
    """Raised when market data cannot be fetched."""


class MarketDataClient:
    """Client for fetching market data from the Finnhub REST API."""

    def __init__(self, api_key: Optional[str] = None, session: Optional[requests.Session] = None):
        """Initialize the Finnhub client.

        Args:
            api_key: Finnhub token; defaults to FINNHUB_API_KEY
            session: Optional requests session (shared connection pool)
        """
        self.api_key = config.finnhub.api_key if api_key is None else api_key
        self.base_url = config.finnhub.base_url
        self.timeout = config.finnhub.timeout_seconds
        self.session = session or requests.Session()

        self.cache_max_entries = config.finnhub.cache_max_entries
        self._cache: Dict[str, tuple] = {}
        self._cache_lock = threading.Lock()

    def _url(self, path: str, **params) -> str:
        params['token'] = self.api_key
        return f"{self.base_url}{path}?{urlencode(params)}"

    def clear_cache(self):
        """Drop every cached response."""
        with self._cache_lock:
            self._cache.clear()

    def _store(self, url: str, data: Any, revalidate_seconds: int):
        """Cache a response, dropping expired entries and the oldest past the size cap."""
        now = time.monotonic()
        with self._cache_lock:
            expired = [key for key, (expires, _) in self._cache.items() if expires <= now]
            for key in expired:
                del self._cache[key]

            self._cache.pop(url, None)
            while self._cache and len(self._cache) >= self.cache_max_entries:
                del self._cache[next(iter(self._cache))]

            self._cache[url] = (now + revalidate_seconds, data)

    def fetch_json(self, url: str, revalidate_seconds: Optional[int] = None) -> Any:
        """GET a URL and decode its JSON body.

        Args:
            url: Fully qualified request URL
            revalidate_seconds: Cache lifetime; when omitted the response is never cached

        Returns:
            Decoded JSON payload

        Raises:
            MarketDataError: On a non-2xx response
        """
        if revalidate_seconds:
            with self._cache_lock:
                cached = self._cache.get(url)
            if cached and cached[0] > time.monotonic():
                return cached[1]

        response = self.session.get(url, timeout=self.timeout)
        if not response.ok:
            raise MarketDataError(
                f"Failed to fetch {url}: {response.status_code} {response.reason}"
            )

        data = response.json()

        if revalidate_seconds:
            self._store(url, data, revalidate_seconds)

        return data

    # ------------------------------------------------------------------
    # Company profiles
    # ------------------------------------------------------------------

    def get_company_profile(self, symbol: str) -> Dict[str, Any]:
        """Get the Finnhub profile for a symbol (empty dict when unknown)."""
        url = self._url('/stock/profile2', symbol=symbol.strip().upper())
        profile = self.fetch_json(url, config.finnhub.profile_ttl)
        return profile or {}

    def get_company_name(self, symbol: str) -> str:
        """Resolve the company name for a symbol, falling back to the symbol."""
        try:
            profile = self.get_company_profile(symbol)
            return profile.get('name') or symbol
        except Exception as e:
            logger.error(f"Error fetching company profile for {symbol}: {e}")
            return symbol

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _popular_stocks(self) -> List[Dict[str, str]]:
        top = config.popular_symbols[:config.finnhub.popular_limit]

        def fetch_profile(symbol):
            try:
                return symbol, self.get_company_profile(symbol)
            except Exception as e:
                logger.error(f"Error fetching profile2 for {symbol}: {e}")
                return symbol, None

        with concurrent.futures.ThreadPoolExecutor(max_workers=5) as executor:
            profiles = list(executor.map(fetch_profile, top))

        stocks = []
        for symbol, profile in profiles:
            if not profile:
                continue
            name = profile.get('name') or profile.get('ticker')
            if not name:
                continue
            stocks.append({
                'symbol': symbol.upper(),
                'name': name,
                'exchange': symbol.upper() or profile.get('exchange') or 'US',
                'type': 'Common Stock',
            })
        return stocks

    def search_stocks(self, query: Optional[str] = None) -> List[Dict[str, str]]:
        """Search stocks by symbol or company name.

        An empty query returns the popular stocks list instead.

        Returns:
            List of {symbol, name, exchange, type}; empty on any failure
        """
        try:
            if not self.api_key:
                logger.error("FINNHUB_API_KEY is not configured")
                return []

            trimmed = (query or '').strip()
            if not trimmed:
                return self._popular_stocks()[:config.finnhub.search_limit]

            url = self._url('/search', q=trimmed)
            data = self.fetch_json(url, config.finnhub.search_ttl)
            results = data.get('result') if isinstance(data, dict) else None

            stocks = []
            for result in results or []:
                symbol = (result.get('symbol') or '').upper()
                stocks.append({
                    'symbol': symbol,
                    'name': result.get('description') or symbol,
                    'exchange': result.get('displaySymbol') or 'US',
                    'type': result.get('type') or 'Stock',
                })
            return stocks[:config.finnhub.search_limit]

        except Exception as e:
            logger.error(f"Error in stock search: {e}")
            return []

    # ------------------------------------------------------------------
    # News
    # ------------------------------------------------------------------

    def _company_news(self, symbols: List[str], date_from: str, date_to: str) -> List[Dict[str, Any]]:
        if not symbols:
            return []

        def fetch_for_symbol(symbol):
            try:
                url = self._url('/company-news', symbol=symbol, **{'from': date_from, 'to': date_to})
                articles = self.fetch_json(url, config.finnhub.news_ttl) or []
                return symbol, [a for a in articles if validate_article(a)]
            except Exception as e:
                logger.error(f"Error fetching company news for {symbol}: {e}")
                return symbol, []

        with concurrent.futures.ThreadPoolExecutor(max_workers=5) as executor:
            symbol_news = dict(executor.map(fetch_for_symbol, symbols))

        return interleave_company_news(symbol_news, symbols, config.finnhub.max_articles)

    def _general_news(self) -> List[Dict[str, Any]]:
        url = self._url('/news', category='general')
        articles = self.fetch_json(url, config.finnhub.news_ttl) or []
        return dedupe_general_news(articles, config.finnhub.max_articles)

    def get_news(self, symbols: Optional[List[str]] = None) -> List[Dict[str, Any]]:
        """Get up to six news articles for the given symbols.

        Falls back to general market news when the symbols yield nothing.

        Raises:
            MarketDataError: When the API key is missing or news cannot be fetched
        """
        try:
            if not self.api_key:
                logger.error("Finnhub API key is not configured")
                raise MarketDataError("Finnhub API key is not configured")

            date_from, date_to = get_date_range(config.finnhub.news_lookback_days)
            unique_symbols = normalize_symbols(symbols)

            company_news = self._company_news(unique_symbols, date_from, date_to)
            if company_news:
                return company_news

            return self._general_news()

        except Exception as e:
            logger.error(f"Error in get_news: {e}")
            raise MarketDataError("Failed to fetch news") from e


# Shared client instance
market_client = MarketDataClient()


def search_stocks(query: Optional[str] = None) -> List[Dict[str, str]]:
    """Convenience wrapper around the shared client."""
    return market_client.search_stocks(query)


def get_news(symbols: Optional[List[str]] = None) -> List[Dict[str, Any]]:
    """Convenience wrapper around the shared client."""
    return market_client.get_news(symbols)


def get_company_name(symbol: str) -> str:
    """Convenience wrapper around the shared client."""
    return market_client.get_company_name(symbol)
