# =============================================================================
# Unit Tests - Finnhub market data client
# =============================================================================
#
# The requests session is replaced with a MagicMock, so no network calls are
# made. Responses are routed on the request path.
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from src.data.market_data import MarketDataClient, MarketDataError
from tests.conftest import make_article


def _response(payload, ok=True, status_code=200, reason='OK'):
    response = MagicMock()
    response.ok = ok
    response.status_code = status_code
    response.reason = reason
    response.json.return_value = payload
    return response


def _client(routes):
    """Client whose session answers from ``routes`` ({path fragment: response})."""
    session = MagicMock()

    def get(url, timeout=None):
        for fragment, response in routes.items():
            if fragment in url:
                if isinstance(response, Exception):
                    raise response
                return response
        return _response({}, ok=False, status_code=404, reason='Not Found')

    session.get.side_effect = get
    return MarketDataClient(api_key='test-key', session=session), session


class TestFetchJson:

    def test_returns_decoded_body(self):
        client, _ = _client({'/quote': _response({'c': 1.0})})
        assert client.fetch_json('https://finnhub.io/api/v1/quote') == {'c': 1.0}

    def test_non_ok_raises(self):
        client, _ = _client({'/quote': _response({}, ok=False, status_code=500, reason='Server Error')})
        with pytest.raises(MarketDataError, match='500 Server Error'):
            client.fetch_json('https://finnhub.io/api/v1/quote')

    def test_cached_when_revalidate_given(self):
        client, session = _client({'/quote': _response({'c': 1.0})})
        client.fetch_json('https://finnhub.io/api/v1/quote', revalidate_seconds=60)
        client.fetch_json('https://finnhub.io/api/v1/quote', revalidate_seconds=60)
        assert session.get.call_count == 1

    def test_not_cached_without_revalidate(self):
        client, session = _client({'/quote': _response({'c': 1.0})})
        client.fetch_json('https://finnhub.io/api/v1/quote')
        client.fetch_json('https://finnhub.io/api/v1/quote')
        assert session.get.call_count == 2

    def test_clear_cache(self):
        client, session = _client({'/quote': _response({'c': 1.0})})
        client.fetch_json('https://finnhub.io/api/v1/quote', revalidate_seconds=60)
        client.clear_cache()
        client.fetch_json('https://finnhub.io/api/v1/quote', revalidate_seconds=60)
        assert session.get.call_count == 2

    @patch('src.data.market_data.time.monotonic')
    def test_expired_entries_evicted_on_write(self, mock_clock):
        client, _ = _client({'/search': _response({'result': []})})

        mock_clock.return_value = 100.0
        for i in range(50):
            client.fetch_json(f'https://finnhub.io/api/v1/search?q=q{i}', revalidate_seconds=1)
        assert len(client._cache) == 50

        mock_clock.return_value = 200.0
        client.fetch_json('https://finnhub.io/api/v1/search?q=fresh', revalidate_seconds=1)

        assert list(client._cache) == ['https://finnhub.io/api/v1/search?q=fresh']

    def test_cache_size_is_capped(self):
        client, _ = _client({'/search': _response({'result': []})})
        client.cache_max_entries = 3

        for i in range(5):
            client.fetch_json(f'https://finnhub.io/api/v1/search?q=q{i}', revalidate_seconds=600)

        # Oldest entries go first
        assert [url[-2:] for url in client._cache] == ['q2', 'q3', 'q4']

    def test_token_sent_as_query_param(self):
        client, session = _client({'/stock/profile2': _response({'name': 'Apple Inc'})})
        client.get_company_profile('aapl')
        url = session.get.call_args[0][0]
        assert 'token=test-key' in url
        assert 'symbol=AAPL' in url


class TestSearchStocks:

    def test_query_maps_results(self):
        payload = {'result': [
            {'symbol': 'aapl', 'description': 'Apple Inc', 'displaySymbol': 'AAPL', 'type': 'Common Stock'},
            {'symbol': 'APLE', 'description': '', 'displaySymbol': '', 'type': ''},
        ]}
        client, _ = _client({'/search': _response(payload)})

        stocks = client.search_stocks('apple')

        assert stocks[0] == {'symbol': 'AAPL', 'name': 'Apple Inc', 'exchange': 'AAPL', 'type': 'Common Stock'}
        assert stocks[1] == {'symbol': 'APLE', 'name': 'APLE', 'exchange': 'US', 'type': 'Stock'}

    def test_caps_at_fifteen(self):
        payload = {'result': [{'symbol': f'S{i}', 'description': f'Stock {i}'} for i in range(30)]}
        client, _ = _client({'/search': _response(payload)})
        assert len(client.search_stocks('s')) == 15

    def test_blank_query_returns_popular(self):
        client, session = _client({'/stock/profile2': _response({'name': 'Some Co', 'exchange': 'NASDAQ'})})

        stocks = client.search_stocks('   ')

        assert len(stocks) == 10
        assert stocks[0]['symbol'] == 'AAPL'
        assert stocks[0]['exchange'] == 'AAPL'
        assert stocks[0]['type'] == 'Common Stock'
        assert session.get.call_count == 10

    def test_popular_skips_failed_and_nameless_profiles(self):
        session = MagicMock()

        def get(url, timeout=None):
            if 'symbol=AAPL' in url:
                raise ConnectionError('boom')
            if 'symbol=MSFT' in url:
                return _response({})
            return _response({'ticker': 'X'})

        session.get.side_effect = get
        client = MarketDataClient(api_key='test-key', session=session)

        symbols = [s['symbol'] for s in client.search_stocks()]

        assert 'AAPL' not in symbols
        assert 'MSFT' not in symbols
        assert len(symbols) == 8

    def test_missing_api_key_returns_empty(self):
        client = MarketDataClient(api_key='', session=MagicMock())
        assert client.search_stocks('apple') == []
        client.session.get.assert_not_called()

    def test_failure_returns_empty(self):
        client, _ = _client({'/search': _response({}, ok=False, status_code=429, reason='Too Many Requests')})
        assert client.search_stocks('apple') == []


class TestCompanyName:

    def test_profile_name(self):
        client, _ = _client({'/stock/profile2': _response({'name': 'Apple Inc'})})
        assert client.get_company_name('AAPL') == 'Apple Inc'

    def test_falls_back_to_symbol_on_empty_profile(self):
        client, _ = _client({'/stock/profile2': _response({})})
        assert client.get_company_name('ZZZZ') == 'ZZZZ'

    def test_falls_back_to_symbol_on_error(self):
        client, _ = _client({'/stock/profile2': ConnectionError('down')})
        assert client.get_company_name('AAPL') == 'AAPL'


class TestGetNews:

    def test_company_news_for_symbols(self):
        client, _ = _client({
            'symbol=AAPL': _response([make_article(1), make_article(2)]),
            'symbol=MSFT': _response([make_article(3)]),
        })

        articles = client.get_news(['aapl', 'MSFT', 'AAPL'])

        assert len(articles) == 3
        assert {a['related'] for a in articles} == {'AAPL', 'MSFT'}
        assert all(a['category'] == 'company' for a in articles)

    def test_invalid_company_articles_dropped(self):
        client, _ = _client({'/company-news': _response([make_article(1, url=''), make_article(2)])})
        articles = client.get_news(['AAPL'])
        assert [a['headline'] for a in articles] == ['Headline 2']

    def test_falls_back_to_general_news(self):
        client, _ = _client({
            '/company-news': _response([]),
            '/news?category=general': _response([make_article(1), make_article(1)]),
        })

        articles = client.get_news(['AAPL'])

        assert len(articles) == 1
        assert articles[0]['category'] == 'top news'

    def test_no_symbols_uses_general_news(self):
        client, session = _client({'/news?category=general': _response([make_article(7)])})
        articles = client.get_news()
        assert [a['headline'] for a in articles] == ['Headline 7']
        assert session.get.call_count == 1

    def test_symbol_failure_is_isolated(self):
        client, _ = _client({
            'symbol=AAPL': _response({}, ok=False, status_code=500, reason='Server Error'),
            'symbol=MSFT': _response([make_article(3)]),
        })
        articles = client.get_news(['AAPL', 'MSFT'])
        assert [a['related'] for a in articles] == ['MSFT']

    def test_missing_api_key_raises(self):
        client = MarketDataClient(api_key='', session=MagicMock())
        with pytest.raises(MarketDataError, match='Failed to fetch news'):
            client.get_news(['AAPL'])

    def test_general_news_failure_raises(self):
        client, _ = _client({'/news?category=general': _response({}, ok=False, status_code=503, reason='Unavailable')})
        with pytest.raises(MarketDataError, match='Failed to fetch news'):
            client.get_news()
