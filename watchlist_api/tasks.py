"""Background email workflows.

send_sign_up_email
    Triggered by the ``app/user.created`` event. Asks the LLM for a
    personalized intro based on the investor profile and sends the welcome
    email, falling back to a stock intro if the LLM is unavailable.

send_daily_news_summary
    Triggered by the ``app/send.daily.news`` event and by celery beat every
    day at 12:00 UTC. Collects up to six articles per user (watchlist news,
    or general market news), has the LLM summarize them and emails the
    digest.
"""

import json
import logging

from backend.celery import celery_app
from src.data.market_data import get_news
from src.llm.prompts import NEWS_SUMMARY_EMAIL_PROMPT, PERSONALIZED_WELCOME_EMAIL_PROMPT
from src.utils.email_notifier import format_date_today, send_news_summary_email, send_welcome_email
from watchlist_api.services.watchlist import (
    get_all_users_for_news_email,
    get_watchlist_symbols_by_email,
)

logger = logging.getLogger(__name__)

DEFAULT_WELCOME_INTRO = (
    'Thanks for joining Signalist. You now have the tools to track markets '
    'and make smarter moves.'
)
NO_NEWS_SUMMARY = 'No market news.'
MAX_ARTICLES_PER_USER = 6

_llm_client = None


def get_llm_client():
    """Get the shared Gemini client, creating it on first use."""
    global _llm_client
    if _llm_client is None:
        from src.llm.llm_client import LLMClient
        _llm_client = LLMClient()
    return _llm_client


def build_user_profile(country='', investment_goals='', risk_tolerance='', preferred_industry=''):
    """Profile block substituted into the welcome prompt."""
    return (
        f"\n   - Country: {country}"
        f"\n   - Investment goals: {investment_goals}"
        f"\n   - Risk tolerance: {risk_tolerance}"
        f"\n   - Preferred industry: {preferred_industry}\n"
    )


def generate_welcome_intro(profile):
    """Personalized intro for the welcome email, or the default intro."""
    prompt = PERSONALIZED_WELCOME_EMAIL_PROMPT.replace('{{userProfile}}', profile)
    try:
        intro = get_llm_client().generate_text(prompt)
    except Exception as e:
        logger.error(f"Welcome intro generation failed: {e}")
        intro = None
    return intro or DEFAULT_WELCOME_INTRO


@celery_app.task(name='send_sign_up_email')
def send_sign_up_email(
    email,
    name,
    country='',
    investment_goals='',
    risk_tolerance='',
    preferred_industry='',
):
    """Send the personalized welcome email for a new account."""
    profile = build_user_profile(country, investment_goals, risk_tolerance, preferred_industry)
    intro = generate_welcome_intro(profile)

    sent = send_welcome_email(email=email, name=name, intro=intro)
    logger.info(f"Welcome email for {email}: sent={sent}")

    return {
        'success': True,
        'message': 'Welcome email sent successfully',
    }


def collect_news_for_users(users):
    """Fetch up to six articles per user; users without news are dropped."""
    results = []
    for user in users:
        try:
            symbols = get_watchlist_symbols_by_email(user['email'])
            news = get_news(symbols if symbols else None)
            articles = (news or [])[:MAX_ARTICLES_PER_USER]

            if not articles:
                continue

            results.append({'user': user, 'articles': articles})
        except Exception as e:
            logger.error(f"Error fetching news for user {user['email']}: {e}")
    return results


def summarize_news(articles):
    """LLM summary of the articles as an HTML fragment.

    Returns ``None`` when the LLM call fails; that user is skipped.
    """
    prompt = NEWS_SUMMARY_EMAIL_PROMPT.replace('{{newsData}}', json.dumps(articles, indent=2))

    client = get_llm_client()
    text = client.generate_text(prompt)
    if text is None and client.last_error:
        raise RuntimeError(client.last_error)
    return text or NO_NEWS_SUMMARY


@celery_app.task(name='send_daily_news_summary')
def send_daily_news_summary():
    """Email every eligible user a summary of the news for their watchlist."""
    users = get_all_users_for_news_email()
    if not users:
        return {'success': True, 'message': 'No users found for news email'}

    results = collect_news_for_users(users)
    if not results:
        return {'success': True, 'message': 'No news available for any user'}

    summaries = []
    for entry in results:
        user = entry['user']
        try:
            news_content = summarize_news(entry['articles'])
        except Exception as e:
            logger.error(f"Failed to summarize news for {user['email']}: {e}")
            news_content = None
        summaries.append((user, news_content))

    date = format_date_today()
    sent = 0
    for user, news_content in summaries:
        if not news_content:
            continue
        if send_news_summary_email(email=user['email'], date=date, news_content=news_content):
            sent += 1

    logger.info(f"Daily news summary: {sent}/{len(users)} emails sent")

    return {
        'success': True,
        'message': 'Daily news summary emails sent successfully',
        'sent': sent,
    }
