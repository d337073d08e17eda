"""
Celery workers module.

Background processing of uploaded documents, fed by the
`document.processing` RabbitMQ queue.

Dependencies: celery, recall.configs
System role: Background task processing

Usage:
    celery -A recall.workers worker --loglevel=INFO
"""

from celery import Celery
from celery.signals import setup_logging

from recall.configs import get_settings
from recall.observability import configure_logging

settings = get_settings()
celery_config = settings.celery

celery_app = Celery(
    "recall",
    broker=celery_config.broker_url,
    include=["recall.workers.tasks.document_processing"],
)

celery_app.conf.update(
    task_serializer=celery_config.task_serializer,
    accept_content=celery_config.accept_content,
    timezone=celery_config.timezone,
    task_default_queue=celery_config.queue_name,
    task_routes={"recall.process_document": {"queue": celery_config.queue_name}},
    # at-least-once delivery
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    task_ignore_result=True,
    worker_prefetch_multiplier=celery_config.worker_prefetch_multiplier,
)


@setup_logging.connect
def _configure_worker_logging(**kwargs) -> None:
    configure_logging(settings.log_level)
