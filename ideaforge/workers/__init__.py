"""
Celery workers module.

Scheduled reconciliation of in-flight idea-generation jobs.

Dependencies: celery, ideaforge.configs
System role: Background job polling
"""

from celery import Celery

from ideaforge.configs import get_settings

settings = get_settings()
celery_config = settings.celery

celery_app = Celery(
    "ideaforge",
    broker=celery_config.broker_url,
    backend=celery_config.result_backend_url,
    include=["ideaforge.workers.tasks.reconcile"],
)

celery_app.conf.update(
    task_serializer=celery_config.task_serializer,
    result_serializer=celery_config.result_serializer,
    accept_content=celery_config.accept_content,
    timezone=celery_config.timezone,
    task_track_started=True,
    result_expires=3600,  # 1 hour
)

# Celery Beat Schedule (Periodic Tasks)
celery_app.conf.beat_schedule = {
    "reconcile-pending-idea-jobs": {
        "task": "ideas.reconcile_all_pending",
        "schedule": float(settings.ideas.reconcile_interval_seconds),
    },
}
