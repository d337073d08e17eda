from recall.api.deps.dependencies import (
    get_chat_service,
    get_document_service,
    get_service_cache,
)

__all__ = ["get_service_cache", "get_document_service", "get_chat_service"]
