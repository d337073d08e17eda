"""
Celery configuration settings.

Manages the RabbitMQ broker used to hand document ids from the upload
endpoint to the processing worker.

Dependencies: pydantic, pydantic_settings
System role: Async task queue configuration for document processing
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CelerySettings(BaseSettings):
    """Celery and RabbitMQ configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CELERY_",
        case_sensitive=False,
        extra="ignore",
    )

    broker_host: str = Field(default="localhost", description="RabbitMQ host")
    broker_port: int = Field(default=5672, description="RabbitMQ port")
    broker_user: str = Field(default="guest", description="RabbitMQ user")
    broker_password: str = Field(default="guest", description="RabbitMQ password")
    broker_vhost: str = Field(default="/", description="RabbitMQ virtual host")

    queue_name: str = Field(
        default="document.processing",
        description="Durable queue carrying document ids to process",
    )
    task_serializer: str = Field(default="json", description="Task serialization format")
    accept_content: list[str] = Field(
        default=["json"],
        description="Accepted content types",
    )
    timezone: str = Field(default="UTC", description="Celery timezone")
    worker_prefetch_multiplier: int = Field(
        default=1,
        description="Messages reserved per worker process",
    )

    @property
    def broker_url(self) -> str:
        """
        Construct RabbitMQ broker URL.

        Returns:
            str: Celery-compatible broker URL
        """
        vhost = self.broker_vhost.lstrip("/")
        return (
            f"amqp://{self.broker_user}:{self.broker_password}"
            f"@{self.broker_host}:{self.broker_port}/{vhost}"
        )
