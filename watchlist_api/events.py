"""Named application events and their background handlers.

Producers call ``send_event`` with an event name and a JSON-serializable
payload; the matching Celery task is queued with the payload as keyword
arguments.
"""

import logging

logger = logging.getLogger(__name__)

USER_CREATED = 'app/user.created'
SEND_DAILY_NEWS = 'app/send.daily.news'


def get_event_handlers():
    """Map event names to Celery tasks (imported lazily to avoid import cycles)."""
    from watchlist_api import tasks
    return {
        USER_CREATED: tasks.send_sign_up_email,
        SEND_DAILY_NEWS: tasks.send_daily_news_summary,
    }


def send_event(name, data=None):
    """Queue the handler registered for ``name``.

    Returns:
        The Celery task id

    Raises:
        ValueError: If no handler is registered for the event
    """
    handlers = get_event_handlers()
    if name not in handlers:
        raise ValueError(f"Unknown event: {name}")

    result = handlers[name].delay(**(data or {}))
    logger.info(f"Event {name} queued as task {result.id}")
    return result.id
