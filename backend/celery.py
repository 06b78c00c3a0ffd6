"""
Celery application for background email workflows.

Workers consume the welcome-email and daily-news tasks from the Redis broker;
`celery beat` triggers the daily digest on the schedule in
``CELERY_BEAT_SCHEDULE``.

    celery -A backend worker -l info
    celery -A backend beat -l info
"""

import os

from celery import Celery

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'backend.settings.development')

celery_app = Celery('signalist')

# All CELERY_* Django settings configure the app
celery_app.config_from_object('django.conf:settings', namespace='CELERY')

celery_app.conf.update(
    # JSON only; pickle can execute arbitrary code during deserialization
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',

    # Re-queue a task if the worker dies before finishing it
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    worker_prefetch_multiplier=1,

    # The digest makes one LLM call per user, so allow it a while
    task_soft_time_limit=900,
    task_time_limit=1200,

    result_expires=3600,
)

celery_app.autodiscover_tasks()
