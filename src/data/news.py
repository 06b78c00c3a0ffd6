"""News normalization and aggregation for the market news feed.

Company news is interleaved round-robin across the requested symbols so a
single noisy ticker cannot crowd out the others. General market news is
de-duplicated by id, URL and headline before being capped.
"""

import time
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

DEFAULT_MAX_ARTICLES = 6

COMPANY_SUMMARY_LENGTH = 200
GENERAL_SUMMARY_LENGTH = 150


def get_date_range(days: int, now: Optional[datetime] = None) -> Tuple[str, str]:
    """Return (from, to) ISO dates covering the last ``days`` days (UTC)."""
    today = (now or datetime.now(timezone.utc)).date()
    start = today - timedelta(days=days)
    return start.isoformat(), today.isoformat()


def validate_article(article: Dict[str, Any]) -> bool:
    """An article is usable only if it has a headline, summary, url and datetime."""
    if not isinstance(article, dict):
        return False
    return all(article.get(key) for key in ('headline', 'summary', 'url', 'datetime'))


def format_article(
    article: Dict[str, Any],
    is_company_news: bool,
    symbol: Optional[str] = None,
    index: int = 0,
) -> Dict[str, Any]:
    """Normalize a raw Finnhub article into the shape served to clients."""
    limit = COMPANY_SUMMARY_LENGTH if is_company_news else GENERAL_SUMMARY_LENGTH
    summary = article['summary'].strip()[:limit] + '...'

    if is_company_news:
        article_id = time.time_ns() // 1000 + index
        source = article.get('source') or 'Company News'
        category = 'company'
        related = symbol or ''
    else:
        article_id = (article.get('id') or 0) + index
        source = article.get('source') or 'Market News'
        category = article.get('category') or 'general'
        related = article.get('related') or ''

    return {
        'id': article_id,
        'headline': article['headline'].strip(),
        'summary': summary,
        'source': source,
        'url': article['url'],
        'datetime': article['datetime'],
        'image': article.get('image') or '',
        'category': category,
        'related': related,
    }


def normalize_symbols(symbols: Optional[Iterable[str]]) -> List[str]:
    """Trim, upper-case and de-duplicate symbols, keeping first-seen order."""
    seen = []
    for symbol in symbols or []:
        cleaned = (symbol or '').strip().upper()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


def _newest_first(articles: List[Dict[str, Any]], max_articles: int) -> List[Dict[str, Any]]:
    articles.sort(key=lambda a: a['datetime'], reverse=True)
    return articles[:max_articles]


def interleave_company_news(
    symbol_news: Dict[str, List[Dict[str, Any]]],
    symbols: List[str],
    max_articles: int = DEFAULT_MAX_ARTICLES,
) -> List[Dict[str, Any]]:
    """Pick company articles round-robin across symbols.

    Runs at most ``max_articles`` rounds. A round that lands on a symbol with
    no remaining articles is spent without producing one. The queues in
    ``symbol_news`` are consumed.
    """
    if not symbols:
        return []

    collected: List[Dict[str, Any]] = []
    round_number = 0

    while round_number < max_articles and len(collected) < max_articles:
        symbol = symbols[round_number % len(symbols)]
        queue = symbol_news.get(symbol)

        if queue:
            article = queue.pop(0)
            collected.append(format_article(article, True, symbol, len(collected)))

        round_number += 1

    return _newest_first(collected, max_articles)


def dedupe_general_news(
    articles: List[Dict[str, Any]],
    max_articles: int = DEFAULT_MAX_ARTICLES,
) -> List[Dict[str, Any]]:
    """Drop invalid and repeated general-news articles, newest first."""
    seen_ids = set()
    seen_urls = set()
    seen_headlines = set()

    deduped: List[Dict[str, Any]] = []

    for article in articles:
        if len(deduped) >= max_articles:
            break
        if not validate_article(article):
            continue

        article_id = article.get('id')
        url = article.get('url') or ''
        headline = article.get('headline') or ''

        if (
            (article_id and article_id in seen_ids)
            or (url and url in seen_urls)
            or (headline and headline in seen_headlines)
        ):
            continue

        if article_id:
            seen_ids.add(article_id)
        if url:
            seen_urls.add(url)
        if headline:
            seen_headlines.add(headline)

        deduped.append(format_article(article, False, None, len(deduped)))

    return _newest_first(deduped, max_articles)
