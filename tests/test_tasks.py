# =============================================================================
# Unit Tests - Background email workflows
# =============================================================================
#
# Tasks run in-process (celery eager mode in the test settings). The LLM
# client and email sending are mocked; news is patched at the task module.
# =============================================================================

import json
from unittest.mock import MagicMock, patch

import pytest

from watchlist_api import tasks
from watchlist_api.tasks import (
    DEFAULT_WELCOME_INTRO,
    build_user_profile,
    collect_news_for_users,
    send_daily_news_summary,
    send_sign_up_email,
    summarize_news,
)


def _llm(text=None, last_error=None, side_effect=None):
    client = MagicMock()
    client.last_error = last_error
    if side_effect is not None:
        client.generate_text.side_effect = side_effect
    else:
        client.generate_text.return_value = text
    return client


class TestWelcomeEmail:

    def test_profile_block(self):
        profile = build_user_profile('US', 'Growth', 'High', 'Technology')
        assert '- Country: US' in profile
        assert '- Investment goals: Growth' in profile
        assert '- Risk tolerance: High' in profile
        assert '- Preferred industry: Technology' in profile

    @patch('watchlist_api.tasks.send_welcome_email', return_value=True)
    @patch('watchlist_api.tasks.get_llm_client')
    def test_personalized_intro(self, mock_get_llm, mock_send):
        mock_get_llm.return_value = _llm('<p>Hi investor</p>')

        result = send_sign_up_email('new@example.com', 'New User', country='US', risk_tolerance='High')

        assert result == {'success': True, 'message': 'Welcome email sent successfully'}
        mock_send.assert_called_once_with(email='new@example.com', name='New User', intro='<p>Hi investor</p>')
        prompt = mock_get_llm.return_value.generate_text.call_args[0][0]
        assert '- Country: US' in prompt
        assert '{{userProfile}}' not in prompt

    @patch('watchlist_api.tasks.send_welcome_email', return_value=True)
    @patch('watchlist_api.tasks.get_llm_client')
    def test_default_intro_when_llm_returns_nothing(self, mock_get_llm, mock_send):
        mock_get_llm.return_value = _llm(None, last_error='503 UNAVAILABLE')

        send_sign_up_email('new@example.com', 'New User')

        assert mock_send.call_args.kwargs['intro'] == DEFAULT_WELCOME_INTRO

    @patch('watchlist_api.tasks.send_welcome_email', return_value=False)
    @patch('watchlist_api.tasks.get_llm_client')
    def test_default_intro_when_llm_raises(self, mock_get_llm, mock_send):
        mock_get_llm.return_value = _llm(side_effect=RuntimeError('no key'))

        result = send_sign_up_email('new@example.com', 'New User')

        assert result['success'] is True
        assert mock_send.call_args.kwargs['intro'] == DEFAULT_WELCOME_INTRO

    @patch('watchlist_api.tasks.send_welcome_email', return_value=True)
    @patch('watchlist_api.tasks.get_llm_client')
    def test_runs_through_celery(self, mock_get_llm, mock_send):
        mock_get_llm.return_value = _llm('<p>Hello</p>')

        result = send_sign_up_email.delay(email='new@example.com', name='New User')

        assert result.get() == {'success': True, 'message': 'Welcome email sent successfully'}


class TestSummarizeNews:

    @patch('watchlist_api.tasks.get_llm_client')
    def test_articles_substituted_into_prompt(self, mock_get_llm):
        mock_get_llm.return_value = _llm('<h3>Summary</h3>')
        articles = [{'headline': 'Big news'}]

        assert summarize_news(articles) == '<h3>Summary</h3>'
        prompt = mock_get_llm.return_value.generate_text.call_args[0][0]
        assert json.dumps(articles, indent=2) in prompt

    @patch('watchlist_api.tasks.get_llm_client')
    def test_empty_text(self, mock_get_llm):
        mock_get_llm.return_value = _llm(None, last_error=None)
        assert summarize_news([]) == 'No market news.'

    @patch('watchlist_api.tasks.get_llm_client')
    def test_llm_error_raises(self, mock_get_llm):
        mock_get_llm.return_value = _llm(None, last_error='400 INVALID_ARGUMENT')
        with pytest.raises(RuntimeError):
            summarize_news([{'headline': 'x'}])


USERS = [
    {'id': '1', 'email': 'a@example.com', 'name': 'A'},
    {'id': '2', 'email': 'b@example.com', 'name': 'B'},
    {'id': '3', 'email': 'c@example.com', 'name': 'C'},
]


class TestCollectNews:

    @patch('watchlist_api.tasks.get_news')
    @patch('watchlist_api.tasks.get_watchlist_symbols_by_email')
    def test_per_user_news(self, mock_symbols, mock_news):
        mock_symbols.side_effect = lambda email: {'a@example.com': ['AAPL'], 'b@example.com': []}.get(email, [])

        def news(symbols):
            if symbols == ['AAPL']:
                return [{'headline': str(i)} for i in range(10)]
            return []

        mock_news.side_effect = news

        results = collect_news_for_users(USERS[:2])

        assert len(results) == 1
        assert results[0]['user']['email'] == 'a@example.com'
        assert len(results[0]['articles']) == 6
        mock_news.assert_any_call(None)

    @patch('watchlist_api.tasks.get_news')
    @patch('watchlist_api.tasks.get_watchlist_symbols_by_email', return_value=[])
    def test_user_error_is_skipped(self, mock_symbols, mock_news):
        mock_news.side_effect = [RuntimeError('finnhub down'), [{'headline': 'ok'}]]

        results = collect_news_for_users(USERS[:2])

        assert [r['user']['email'] for r in results] == ['b@example.com']


class TestDailyNewsSummary:

    @patch('watchlist_api.tasks.get_all_users_for_news_email', return_value=[])
    def test_no_users(self, mock_users):
        assert send_daily_news_summary() == {'success': True, 'message': 'No users found for news email'}

    @patch('watchlist_api.tasks.get_news', return_value=[])
    @patch('watchlist_api.tasks.get_watchlist_symbols_by_email', return_value=[])
    @patch('watchlist_api.tasks.get_all_users_for_news_email', return_value=USERS)
    def test_no_news(self, mock_users, mock_symbols, mock_news):
        assert send_daily_news_summary() == {'success': True, 'message': 'No news available for any user'}

    @patch('watchlist_api.tasks.format_date_today', return_value='Monday, October 19, 2026')
    @patch('watchlist_api.tasks.send_news_summary_email', return_value=True)
    @patch('watchlist_api.tasks.get_llm_client')
    @patch('watchlist_api.tasks.get_news')
    @patch('watchlist_api.tasks.get_watchlist_symbols_by_email', return_value=['AAPL'])
    @patch('watchlist_api.tasks.get_all_users_for_news_email', return_value=USERS)
    def test_skips_users_without_news_or_summary(
        self, mock_users, mock_symbols, mock_news, mock_get_llm, mock_send, mock_date,
    ):
        # a: news + summary, b: no news, c: news but the LLM fails
        mock_news.side_effect = [[{'headline': 'a'}], [], [{'headline': 'c'}]]
        client = MagicMock()
        client.last_error = None

        def generate(prompt):
            if '"c"' in prompt:
                client.last_error = '500 INTERNAL'
                return None
            client.last_error = None
            return '<p>Summary</p>'

        client.generate_text.side_effect = generate
        mock_get_llm.return_value = client

        result = send_daily_news_summary()

        assert result == {
            'success': True,
            'message': 'Daily news summary emails sent successfully',
            'sent': 1,
        }
        mock_send.assert_called_once_with(
            email='a@example.com',
            date='Monday, October 19, 2026',
            news_content='<p>Summary</p>',
        )

    @patch('watchlist_api.tasks.send_news_summary_email', return_value=False)
    @patch('watchlist_api.tasks.get_llm_client')
    @patch('watchlist_api.tasks.get_news', return_value=[{'headline': 'x'}])
    @patch('watchlist_api.tasks.get_watchlist_symbols_by_email', return_value=[])
    @patch('watchlist_api.tasks.get_all_users_for_news_email', return_value=USERS[:1])
    def test_failed_send_not_counted(self, mock_users, mock_symbols, mock_news, mock_get_llm, mock_send):
        mock_get_llm.return_value = _llm('<p>Summary</p>')
        assert send_daily_news_summary()['sent'] == 0
        mock_send.assert_called_once()


class TestLLMClientFactory:

    def test_client_is_cached(self):
        with patch('src.llm.llm_client.LLMClient') as mock_cls, patch.object(tasks, '_llm_client', None):
            first = tasks.get_llm_client()
            second = tasks.get_llm_client()
        assert first is second
        mock_cls.assert_called_once_with()
